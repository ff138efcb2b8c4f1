"""Command line interface for the model code generator.

Usage:
    python main.py list [--database-url URL | --schema-file FILE]
    python main.py models TABLES [OUTPUT_DIR] [--flavor current|legacy]

TABLES is a table name, '*' for all tables, or a list delimited by ',', ';'
or '|'. When OUTPUT_DIR is given the models are written there as well as
printed.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from model_codegen.cli.generator import ModelsGenerator
from model_codegen.core.config import config
from model_codegen.core.exceptions import CodeGenerationError
from model_codegen.logger import logger, setup_logger
from model_codegen.sources.interfaces import ColumnMetadataSource
from model_codegen.sources.json_source import JSONSchemaColumnSource
from model_codegen.sources.sqlalchemy_source import SQLAlchemyColumnSource


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="model-codegen",
        description="Generates data model classes from database tables.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--database-url", help="SQLAlchemy URL of the database (default: DATABASE_URL)"
    )
    source.add_argument(
        "--schema-file", type=Path, help="JSON table-definition file to read instead"
    )
    parser.add_argument(
        "--flavor",
        choices=["current", "legacy"],
        default=config.flavor,
        help="emission flavour of the generated classes",
    )

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("list", help="list the tables of the source")
    models = commands.add_parser("models", help="generate model classes")
    models.add_argument("tables", help="table name, '*', or a ',;|' delimited list")
    models.add_argument(
        "output", nargs="?", type=Path, help="directory to write the model files to"
    )
    return parser


def create_source(args: argparse.Namespace) -> ColumnMetadataSource:
    """Create the column metadata source selected on the command line.

    Raises:
        ConfigurationError: If no schema file is given and no database URL is configured
    """
    if args.schema_file is not None:
        return JSONSchemaColumnSource.from_file(args.schema_file)
    return SQLAlchemyColumnSource(args.database_url or config.require_database_url())


def run(args: argparse.Namespace) -> None:
    generator = ModelsGenerator(create_source(args), flavor=args.flavor)

    if args.command == "list":
        for table in generator.get_table_list():
            print(table)
        return

    for contents in generator.generate_models(args.tables, args.output):
        print(contents)
    if args.output is not None:
        logger.info("Generation completed successfully! Output in %s", args.output)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the command line.

    Returns:
        Process exit code taken from the configured exit codes
    """
    try:
        args = build_parser().parse_args(argv)
    except SystemExit as e:
        # argparse exits with 0 after --help and 2 on bad arguments
        if e.code == 0:
            return config.exit_codes.success
        return config.exit_codes.error_usage
    setup_logger()
    try:
        run(args)
    except CodeGenerationError as e:
        logger.error("Model generation error: %s", e, exc_info=True)
        return config.exit_codes.error_generation
    except FileNotFoundError as e:
        logger.error("Missing required input file: %s", e, exc_info=True)
        return config.exit_codes.error_file_not_found
    except OSError as e:
        logger.error("File system error: %s", e, exc_info=True)
        return config.exit_codes.error_file_system
    except Exception:
        logger.exception("Unexpected error occurred")
        return config.exit_codes.error_file_system
    return config.exit_codes.success


if __name__ == "__main__":
    sys.exit(main())
