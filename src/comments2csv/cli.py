"""CLI Interface Logic (argparse etc)"""

import argparse
import logging
import sys
from dataclasses import fields
from pathlib import Path

from comments2csv import __version__
from comments2csv.errors import (
    DestinationInUseError,
    InvalidBatchError,
    MalformedPartError,
    PackageReadError,
)
from comments2csv.internals.config.define_config import UserConfig
from comments2csv.orchestrator import run_extraction

log = logging.getLogger("comments2csv")


def run(argv: list[str] | None = None) -> int:
    """Run CLI interface and return a process exit code. Assumes startup.initialize_application() was already called."""

    args = parse_args(argv)

    try:
        # Build config from args (CLI args > config file > defaults)
        cfg = build_config_from_args(args)
        output_path = run_extraction(cfg)
    except DestinationInUseError as e:
        log.error(f"File in use: {e}")
        print(f"File in use: {e}", file=sys.stderr)
        return 1
    except InvalidBatchError as e:
        log.error(f"Invalid selection: {e}")
        print(f"Invalid selection: {e}", file=sys.stderr)
        return 1
    except (PackageReadError, MalformedPartError, OSError, ValueError) as e:
        log.error(f"Extraction failed: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(f"Saved File: {output_path}")
    return 0


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Returns argparse.Namespace with all the UserConfig fields as attributes.
    Validates that all config fields have corresponding CLI arguments.
    """
    parser = argparse.ArgumentParser(
        prog="comments2csv",
        description="Extract reviewer comments from Word (.docx) or PowerPoint (.pptx) files into a CSV table",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # One or more Word documents, merged into one table
  comments2csv chapter1.docx chapter2.docx -o comments.csv

  # A single presentation; rows are sorted by slide
  comments2csv deck.pptx -o deck_comments.csv

  # Use config file
  comments2csv --config path/to/my_settings.toml

  # Override config file settings
  comments2csv --config settings.toml --no-normalize-dates
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    # Config file (special - loads other values)
    parser.add_argument(
        "--config",
        type=str,
        metavar="PATH",
        help="Path to TOML configuration file. See ~/Documents/comments2csv/configs/sample_config.toml after at least 1 run",
    )

    # Input/Output files
    parser.add_argument(
        "input_files",
        nargs="*",
        metavar="FILE",
        default=None,
        help="Input files: one or more .docx files, or a single .pptx file",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        dest="output_csv",
        metavar="PATH",
        help="Destination CSV file (overwritten if it exists)",
    )
    parser.add_argument(
        "--output-folder",
        type=str,
        dest="output_folder",
        metavar="PATH",
        help="Folder for a timestamped CSV when --output is not given",
    )

    # Processing options
    dates_group = parser.add_mutually_exclusive_group()
    dates_group.add_argument(
        "--normalize-dates",
        action="store_true",
        dest="normalize_dates",
        default=None,
        help="Reformat comment timestamps using --date-format (default: enabled)",
    )
    dates_group.add_argument(
        "--no-normalize-dates",
        action="store_false",
        dest="normalize_dates",
        default=None,
        help="Keep comment timestamps exactly as stored in the file",
    )
    parser.add_argument(
        "--date-format",
        type=str,
        dest="date_format",
        metavar="FMT",
        help="strftime format for normalized dates (default: %%m/%%d/%%Y)",
    )

    _validate_args_match_config(parser)

    return parser.parse_args(argv)


def build_config_from_args(args: argparse.Namespace) -> UserConfig:
    """
    Build UserConfig from parsed arguments with proper priority.

    Priority order (highest to lowest):
    1. CLI arguments (if explicitly provided)
    2. Config file values (if --config provided)
    3. UserConfig defaults
    """
    if args.config:
        config_path = Path(args.config)
        log.info(f"Loading config from {config_path}")
        cfg = UserConfig.from_toml(config_path)
    else:
        cfg = UserConfig()

    # Only override what was explicitly provided
    if args.input_files:
        cfg.input_files = [Path(p) for p in args.input_files]
    if args.output_csv is not None:
        cfg.output_csv = Path(args.output_csv)
    if args.output_folder is not None:
        cfg.output_folder = Path(args.output_folder)
    if args.normalize_dates is not None:
        cfg.normalize_dates = args.normalize_dates
    if args.date_format is not None:
        cfg.date_format = args.date_format

    cfg.validate()

    return cfg


def _validate_args_match_config(parser: argparse.ArgumentParser) -> None:
    """
    Ensure all UserConfig fields have corresponding CLI arguments.

    Catches a field added to UserConfig without a matching CLI argument (or vice versa).

    Raises:
        RuntimeError: If there's a mismatch between config fields and CLI args
    """
    config_fields = {f.name for f in fields(UserConfig)}

    excluded_args = ["help", "version", "config"]
    arg_names = {
        action.dest for action in parser._actions if action.dest not in excluded_args
    }

    missing_in_args = config_fields - arg_names
    extra_in_args = arg_names - config_fields

    if missing_in_args:
        log.error(
            "UserConfig fields must have corresponding arg added to cli.parse_args()."
        )
        raise RuntimeError(
            f"CLI arguments missing for UserConfig fields: {missing_in_args}\n"
            "These config fields need corresponding arguments added to parse_args()"
        )

    if extra_in_args:
        log.error(
            "Unexpected CLI args that do not match UserConfig fields. Either add a UserConfig field, "
            "or add the arg to excluded_args in _validate_args_match_config() if it is CLI-only."
        )
        raise RuntimeError(
            f"CLI arguments don't match UserConfig fields: {extra_in_args}\n"
            "Either remove these CLI args or add corresponding fields to UserConfig"
        )


def main() -> None:
    """Development entry point - run CLI directly with `python -m comments2csv.cli`"""
    from comments2csv import startup

    log = startup.initialize_application()
    try:
        sys.exit(run())
    except Exception:
        log.exception("Fatal error in CLI")
        raise


if __name__ == "__main__":
    main()
