#!/usr/bin/env python3
"""
Fieldgraph CLI - Main entry point.

Usage:
    fieldgraph init                                  # Write a starter fieldgraph.yaml
    fieldgraph server-config --schema schema.graphql # Print the projected server config
    fieldgraph serve                                 # Run the settings API
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from .. import __version__
from ..config import get_config_path, load_config
from ..core.errors import ConfigError, SchemaError
from ..core.schema import load_live_schema
from ..runtime.aggregator import SettingsAggregator


DEFAULT_CONFIG = '''# Fieldgraph Configuration
version: 1
default_language_code: en

custom_fields: {}
#  Product:
#    - name: weight
#      type: int
#    - name: supplier
#      type: relation
#      entity: Supplier

assets:
  permitted_file_types: ["image/*", "video/*", "audio/*", ".pdf"]

entity:
  money_strategy:
    precision: 2

schema:
  paths: []
  urls: []
'''


def cmd_init(args: argparse.Namespace) -> int:
    """Write a starter config file."""
    config_path = get_config_path(args.config)

    if config_path.exists() and not args.force:
        print(f"Error: {config_path} already exists. Use --force to overwrite.")
        return 1

    config_path.write_text(DEFAULT_CONFIG)
    print(f"Created {config_path}")
    return 0


def cmd_server_config(args: argparse.Namespace) -> int:
    """Print the server config that the settings API would expose."""
    try:
        config = load_config(args.config)
    except ConfigError as e:
        print("Error: invalid configuration:")
        for error in e.errors:
            print(f"  - {error}")
        return 1
    if not config:
        print(f"Error: {get_config_path(args.config)} not found. Run 'fieldgraph init' first.")
        return 1

    paths = args.schema or config.schema.paths
    urls = [] if args.schema else config.schema.urls
    try:
        schema = asyncio.run(load_live_schema(paths, urls))
    except (SchemaError, OSError) as e:
        print(f"Error: {e}")
        return 1

    server_config = SettingsAggregator.from_config(config).build_server_config(schema)
    data = server_config.to_wire()

    if args.format == "yaml":
        print(yaml.dump(data, default_flow_style=False, sort_keys=False), end="")
    else:
        print(json.dumps(data, indent=2))
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Run the settings API with uvicorn."""
    import uvicorn

    from ..api.app import create_app

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"Error: {e}")
        return 1

    uvicorn.run(create_app(config), host=args.host, port=args.port)
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="fieldgraph",
        description="Fieldgraph - custom field config projection for GraphQL schemas"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", "-c", help="Config file (default: fieldgraph.yaml or $FIELDGRAPH_CONFIG)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # init
    init_parser = subparsers.add_parser("init", help="Write a starter config file")
    init_parser.add_argument("--force", "-f", action="store_true", help="Overwrite existing config")

    # server-config
    sc_parser = subparsers.add_parser("server-config", help="Print the projected server config")
    sc_parser.add_argument(
        "--schema", "-s", action="append", type=Path,
        help="SDL file (repeatable; default: schema sources from config)",
    )
    sc_parser.add_argument("--format", choices=["json", "yaml"], default="json", help="Output format")

    # serve
    serve_parser = subparsers.add_parser("serve", help="Run the settings API")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Bind host")
    serve_parser.add_argument("--port", "-p", type=int, default=8000, help="Bind port")

    return parser


def app(args: Optional[List[str]] = None) -> int:
    """Main CLI application."""
    parser = create_parser()
    parsed = parser.parse_args(args)

    if not parsed.command:
        parser.print_help()
        return 0

    logging.basicConfig(
        level=logging.DEBUG if parsed.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    commands = {
        "init": cmd_init,
        "server-config": cmd_server_config,
        "serve": cmd_serve,
    }

    handler = commands.get(parsed.command)
    if handler:
        return handler(parsed)

    parser.print_help()
    return 1


def main() -> None:
    """Entry point for CLI."""
    sys.exit(app())


if __name__ == "__main__":
    main()
