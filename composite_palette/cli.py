#!/usr/bin/env python3
"""
Composite palette generator

Usage:
    composite-palette [options]

Options:
    -s, --source <name>     Palette source (default: approx_nes)
    -o, --output-dir <dir>  Directory for the .gpl and .tga files (default: .)
    --legacy                Use the legacy eleven-source set and GPL header
    --columns <n>           Columns: value written to the GPL header
    --list-sources          List the available sources and exit
    --log-level <level>     DEBUG, INFO, WARNING, ERROR or CRITICAL
    --log-file <file>       Also write log messages to a file
    --settings <file>       Settings file to read defaults from
"""

import argparse
import sys

from .constants import GPL_DEFAULT_COLUMNS
from .exceptions import ConfigurationError
from .logging_config import setup_logging
from .pipeline import run_pipeline
from .settings_manager import SettingsManager, get_settings
from .sources import FormatRevision, get_source_table

EXIT_OK = 0
EXIT_WRITE_FAILED = 1
EXIT_CONFIG_ERROR = 2

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="composite-palette",
        description="Generate NES / composite video palettes as GPL and TGA files",
    )
    parser.add_argument("-s", "--source", help="Palette source name")
    parser.add_argument("-o", "--output-dir", help="Output directory")
    parser.add_argument("--legacy", action="store_true",
                        help="Use the legacy source set and GPL header")
    parser.add_argument("--columns", type=int, help="GPL Columns: header value")
    parser.add_argument("--list-sources", action="store_true",
                        help="List available sources and exit")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS,
                        help="Logging level")
    parser.add_argument("--log-file", help="Optional log file")
    parser.add_argument("--settings", help="Settings file")
    return parser


def _list_sources(revision: FormatRevision):
    print(f"Sources ({revision.value}):")
    for name, config in get_source_table(revision).items():
        print(f"  {name:<22} {config.display_name} "
              f"({config.expected_color_count} colors)")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    settings = SettingsManager(settings_file=args.settings) if args.settings else get_settings()

    setup_logging(args.log_level or settings.get("log_level", "INFO"), args.log_file)

    try:
        if args.legacy:
            revision = FormatRevision.LEGACY
        else:
            revision = FormatRevision.from_name(settings.get("format_revision", "consolidated"))
    except ConfigurationError as e:
        print(f"Error: {e}. Exiting...")
        return EXIT_CONFIG_ERROR

    if args.list_sources:
        _list_sources(revision)
        return EXIT_OK

    source = args.source or settings.get("default_source")
    output_dir = args.output_dir or settings.get("output_dir") or "."
    columns = args.columns if args.columns is not None else settings.get("gpl_columns")
    if columns is None:
        columns = GPL_DEFAULT_COLUMNS

    try:
        result = run_pipeline(source, output_dir, revision, columns)
    except ConfigurationError as e:
        print(f"Error: {e}. Exiting...")
        return EXIT_CONFIG_ERROR

    print(f"Palette generated. Number of Colors: {len(result.colors)}")

    for writer, message in result.errors.items():
        print(f"Warning: {writer.upper()} output not written: {message}")

    return EXIT_OK if result.succeeded else EXIT_WRITE_FAILED


if __name__ == "__main__":
    sys.exit(main())
