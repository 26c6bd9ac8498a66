"""
Generate Elasticsearch mappings from python record types
"""

import argparse
import importlib
import json
import logging
import sys
from typing import Any

from esmapping.config import ENV_PREFIX, get_settings
from esmapping.errors import MappingError
from esmapping.index import index_settings
from esmapping.mapping import generate_mapping


def load_record(spec: str) -> Any:
    """Import a record type given as module:name, e.g. myapp.models:Article"""
    module_name, sep, name = spec.partition(":")
    if not sep or not module_name or not name:
        raise ValueError(f"Record should be given as module:name, not {spec}")
    record: Any = importlib.import_module(module_name)
    for attr in name.split("."):
        record = getattr(record, attr)
    return record


def print_json(body: dict[str, Any], indent: int | None = None) -> None:
    if indent is None:
        indent = get_settings().json_indent
    print(json.dumps(body, indent=indent or None))


def mapping(args):
    print_json(generate_mapping(load_record(args.record)).to_dict(), args.indent)


def create_index_body(args):
    aliases = {name: None for name in args.alias} if args.alias else None
    body = index_settings(load_record(args.record), shards=args.shards, replicas=args.replicas, aliases=aliases)
    print_json(body.to_dict(), args.indent)


def config(_args):
    for k, v in get_settings().model_dump().items():
        if v is None:
            print(f"#{ENV_PREFIX.upper()}{k.upper()}=")
        else:
            print(f"{ENV_PREFIX.upper()}{k.upper()}={v}")


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__, prog="python -m esmapping")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every generated field")

    subparsers = parser.add_subparsers(dest="action", title="action", help="Action to perform:", required=True)
    p = subparsers.add_parser("mapping", help="Print the mapping for a record type")
    p.add_argument("record", help="The record type, as module:name (e.g. myapp.models:Article)")
    p.add_argument("-i", "--indent", type=int, help="JSON indentation (default: from settings)")
    p.set_defaults(func=mapping)

    p = subparsers.add_parser("index-settings", help="Print the body of a create index request for a record type")
    p.add_argument("record", help="The record type, as module:name (e.g. myapp.models:Article)")
    p.add_argument("-s", "--shards", type=int, help="Number of shards (default: from settings)")
    p.add_argument("-r", "--replicas", type=int, help="Number of replicas (default: from settings)")
    p.add_argument("-a", "--alias", action="append", help="Alias for the index (can be given multiple times)")
    p.add_argument("-i", "--indent", type=int, help="JSON indentation (default: from settings)")
    p.set_defaults(func=create_index_body)

    p = subparsers.add_parser("config", help="Print the current settings")
    p.set_defaults(func=config)

    args = parser.parse_args(argv)

    logging.basicConfig(
        format="[%(levelname)-7s:%(name)-15s] %(message)s", level=logging.DEBUG if args.verbose else logging.INFO
    )

    try:
        args.func(args)
    except MappingError as e:
        logging.error(f"Cannot generate mapping: {e}")
        sys.exit(1)
    except (ValueError, ImportError, AttributeError) as e:
        logging.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
