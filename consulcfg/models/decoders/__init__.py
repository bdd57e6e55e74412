"""Format decoders, one module per supported --type value."""
