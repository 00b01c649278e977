import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

from appwrite_typegen import __version__, generate_types
from appwrite_typegen.colored_logging import (
    log_progress,
    log_section,
    log_success,
    setup_colored_logging,
)
from appwrite_typegen.config import load_config
from appwrite_typegen.exceptions import TypeGeneratorError


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="appwrite-typegen",
        description="Generate TypeScript types from an Appwrite project configuration (appwrite.json).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-c",
        "--config",
        help="Path to a JSON or YAML configuration file. Defaults to the first "
        "appwrite-types.config.* file found in the working directory.",
    )
    parser.add_argument(
        "-i",
        "--input",
        help="Path to appwrite.json. Overrides the config file setting.",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="Where to write the generated types. Overrides the config file setting.",
    )
    parser.add_argument(
        "--no-enums",
        action="store_true",
        help="Disable enum and union type generation.",
    )
    parser.add_argument(
        "--no-interfaces",
        action="store_true",
        help="Disable interface generation.",
    )
    parser.add_argument(
        "--no-database",
        action="store_true",
        help="Disable DATABASE_IDS constant generation.",
    )
    parser.add_argument(
        "--no-collections",
        action="store_true",
        help="Disable COLLECTION_IDS constant generation.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose DEBUG logging.",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output (useful for CI/CD environments).",
    )
    return parser


def overrides_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    """Options given on the command line; flags left at their default are omitted."""
    overrides: Dict[str, Any] = {
        "input_path": args.input,
        "output_path": args.output,
    }
    if args.no_enums:
        overrides["generate_enums"] = False
    if args.no_interfaces:
        overrides["generate_interfaces"] = False
    if args.no_database:
        overrides["generate_database_constants"] = False
    if args.no_collections:
        overrides["generate_collection_constants"] = False
    return {key: value for key, value in overrides.items() if value is not None}


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_colored_logging(
        level=logging.DEBUG if args.verbose else logging.INFO,
        use_colors=not args.no_color,
    )
    if args.verbose:
        logger.debug("Verbose mode enabled. DEBUG level logging activated.")

    try:
        log_section(logger, "Appwrite Type Generation")
        log_progress(logger, "Loading configuration...")
        config = load_config(args.config, overrides=overrides_from_args(args))
        logger.debug(f"Effective configuration: {config}")

        log_progress(logger, f"Generating types from {config.input_path}...")
        generate_types(config, write=True)
        log_success(logger, f"Types generated successfully at {config.output_path}")
    except TypeGeneratorError as e:
        logger.error(f"Generation Error: {e}", exc_info=args.verbose)
        return 1
    except Exception as e:
        logger.error(f"Unexpected Error: {e}", exc_info=True)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
