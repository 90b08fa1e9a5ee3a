#!/usr/bin/env python3
"""
amplience-schema CLI - Main entry point.

Usage:
    amplience-schema init                         # Create amplience.yaml
    amplience-schema generate schema.graphql      # Write Amplience documents
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ..core.config import DEFAULT_CONFIG_PATH, GeneratorConfig, load_config
from ..core.errors import AmplienceSchemaError
from ..generator import generate, load_schema
from .writer import SchemaWriter


def cmd_init(args: argparse.Namespace) -> int:
    """Create a default generator config."""
    config_path = Path(args.config)

    if config_path.exists() and not args.force:
        print(f"Error: {config_path} already exists. Use --force to overwrite.")
        return 1

    GeneratorConfig(schema_host=args.schema_host).save(config_path)
    print(f"Created {config_path}")
    print("Next steps:")
    print("  amplience-schema generate <schema.graphql>  # Write content types")

    return 0


def cmd_generate(args: argparse.Namespace) -> int:
    """Generate Amplience documents from a GraphQL schema."""
    schema_path = Path(args.schema)
    if not schema_path.exists():
        print(f"Error: {schema_path} not found.")
        return 1

    try:
        config = load_config(args.config)
        if not config:
            print(f"Error: {args.config} not found. Run 'amplience-schema init' first.")
            return 1

        schema = load_schema(schema_path.read_text())
        files = generate(schema, config)
    except AmplienceSchemaError as e:
        print(f"Error: {e}")
        return 1

    writer = SchemaWriter(args.output, dry_run=args.dry_run)
    paths = writer.write_all(files)
    print(f"Generated {len(paths)} files in {writer.output}")
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="amplience-schema",
        description="Generate Amplience content types from an annotated GraphQL schema"
    )
    parser.add_argument("--version", action="version", version="%(prog)s 0.1.0")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log generation details")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # init
    init_parser = subparsers.add_parser("init", help="Create a generator config")
    init_parser.add_argument("--config", "-c", default=DEFAULT_CONFIG_PATH, help="Config file path")
    init_parser.add_argument("--schema-host", default="https://schema.example.com", help="Host of the schema URIs")
    init_parser.add_argument("--force", "-f", action="store_true", help="Overwrite existing config")

    # generate
    generate_parser = subparsers.add_parser("generate", help="Write Amplience documents")
    generate_parser.add_argument("schema", help="GraphQL SDL file")
    generate_parser.add_argument("--config", "-c", default=DEFAULT_CONFIG_PATH, help="Config file path")
    generate_parser.add_argument("--output", "-o", default="amplience", help="Output directory")
    generate_parser.add_argument("--dry-run", action="store_true", help="Show files without writing them")

    return parser


def app(args: Optional[List[str]] = None) -> int:
    """Main CLI application."""
    parser = create_parser()
    parsed = parser.parse_args(args)

    if parsed.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if not parsed.command:
        parser.print_help()
        return 0

    commands = {
        "init": cmd_init,
        "generate": cmd_generate,
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
