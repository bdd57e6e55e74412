import importlib
from types import ModuleType


def load_class_from_package_module(module_name: str, package_module: ModuleType) -> None:
    full_module_path = f"{package_module.__name__}.{module_name}"
    try:
        # This executes the code in the file, triggering __init_subclass__
        importlib.import_module(full_module_path)
    except ImportError as e:
        raise ImportError(f"Could not import module '{full_module_path}'. Reason: {e}") from e
