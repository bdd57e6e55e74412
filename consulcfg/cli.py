"""
consul-cfg

Command line utility to convert config formats like TOML, JSON, YAML etc to KV pairs
which can be imported via the consul cli. Output is the same JSON representation
generated by the `consul kv export` command.

    # Read config from multiple files
    consul-cfg kv --type toml config1.toml config2.toml

    # Pipe stdin from other commands
    cat config.toml | consul-cfg kv --type toml

    # Specify prefix for all keys
    cat config.toml | consul-cfg kv --type toml --prefix myconfig/app
"""
import argparse
import sys
from typing import List, Optional

from loguru import logger
from pydantic import ValidationError

from consulcfg import __version__
from consulcfg.business_logic.kv_engine import calculate_kv_records
from consulcfg.pipeline.sinks.json_sink import JsonSink
from consulcfg.pipeline.sources.stream_source import StreamSource
from consulcfg.pipeline.transforms.flattener import Flattenizer
from consulcfg.pipeline.transforms.parser import ContentParser
from consulcfg.settings import KVSettings, load_config
from consulcfg.utils.enums.input_format import InputFormat
from consulcfg.utils.errors import ConsulCfgError
from consulcfg.utils.logger import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="consul-cfg",
        description="consul-cfg is a set of utilities for managing app configurations with Consul, "
                    "like exporting app config as consul KV JSON pairs which can be used to bulk "
                    "import key pairs to Consul.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command")

    formats = ", ".join(f"`{f}`" for f in InputFormat.values())
    kv = subparsers.add_parser(
        "kv",
        help="Convert any config format to consul KV pairs format.",
        description="Convert config formats like toml to JSON which can be imported to consul.",
    )
    kv.add_argument("files", nargs="*", metavar="file", help="Input files. Reads stdin when omitted.")
    kv.add_argument("-t", "--type", dest="input_type", default=None,
                    help=f"Input config format type. Available options are {formats} (JAVA properties)")
    kv.add_argument("-p", "--prefix", default=None, help="Prefix for all keys")
    kv.add_argument("-o", "--output", default=None, help="Write the JSON to this file instead of stdout")
    kv.add_argument("--sort-keys", dest="sort_keys", action="store_true", default=None,
                    help="Sort keys at every level instead of keeping document order")
    kv.add_argument("--config", default=None, help="JSON file with default settings")
    kv.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging on stderr")
    kv.set_defaults(func=run_kv_cmd)

    return parser


def build_settings(args: argparse.Namespace) -> KVSettings:
    values = load_config(args.config)

    for field in ("input_type", "prefix", "output", "sort_keys"):
        arg_value = getattr(args, field)
        if arg_value is not None:
            values[field] = arg_value
    if args.files:
        values["files"] = args.files

    return KVSettings(**values)


def run_kv_cmd(args: argparse.Namespace) -> int:
    try:
        # Format is validated here, before any input is touched
        settings = build_settings(args)
        parser = ContentParser(settings.input_type)
        flattener = Flattenizer(prefix=settings.prefix, sort_keys=settings.sort_keys)

        inputs = StreamSource(settings.files).read()
        records = calculate_kv_records(inputs, parser, flattener)
    except (ConsulCfgError, ValidationError, OSError) as e:
        logger.error("Error: {}", e)
        return 1

    try:
        if settings.output:
            with open(settings.output, "w", encoding="utf-8") as f:
                _write_records(records, JsonSink(f))
        else:
            _write_records(records, JsonSink())
    except OSError as e:
        logger.error("Error: error writing output - {}", e)
        return 1

    return 0


def _write_records(records, sink: JsonSink) -> None:
    for record in records:
        sink.write(record)
    sink.flush()


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    setup_logging(verbose=args.verbose)
    return args.func(args)


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
