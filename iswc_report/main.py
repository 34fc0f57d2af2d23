#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Command-line entry point for the ISWC track report.

Usage:
    iswc-report
    iswc-report data/ttl --output PublicacionesISWC2019.html
    iswc-report data/ttl --workers 4 --json-output out/grouping.json --verbose
    python -m iswc_report.main data/ttl --log-file logs/report.log

Exit status: 0 on success (even with skipped files or chain diagnostics),
2 when the input directory is missing or not a directory.
"""
# Standard library
import argparse
import logging
import sys
from typing import List, Optional

# Local
from iswc_report.report.report_processor import ReportProcessor
from iswc_report.utils.config import (
    DEBUG_MODE,
    LOAD_WORKERS,
    LOG_FILE,
    REPORT_OUTPUT,
    TURTLE_DIR,
)
from iswc_report.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


# ============================================================================
# ARGUMENT PARSING
# ============================================================================

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Build the ISWC 2019 publications report from Turtle files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  iswc-report data/ttl
  iswc-report data/ttl --output report.html --workers 4
  iswc-report data/ttl --json-output grouping.json --no-progress
        """
    )

    parser.add_argument(
        'input_dir',
        nargs='?',
        default=str(TURTLE_DIR),
        help=f'Directory of .ttl files (default: {TURTLE_DIR})'
    )

    parser.add_argument(
        '--output',
        type=str,
        default=str(REPORT_OUTPUT),
        help=f'HTML report path (default: {REPORT_OUTPUT})'
    )

    parser.add_argument(
        '--json-output',
        type=str,
        help='Also save the country -> entries map as JSON'
    )

    parser.add_argument(
        '--workers',
        type=int,
        default=LOAD_WORKERS,
        help=f'Parser threads for loading files (default: {LOAD_WORKERS})'
    )

    parser.add_argument(
        '--log-file',
        type=str,
        default=LOG_FILE,
        help='Append log output to this file'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Debug-level logging'
    )

    parser.add_argument(
        '--no-progress',
        action='store_true',
        help='Hide the loading progress bar'
    )

    return parser.parse_args(argv)


# ============================================================================
# MAIN
# ============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    level = logging.DEBUG if (args.verbose or DEBUG_MODE) else logging.INFO
    setup_logging(level=level, log_file=args.log_file)

    processor = ReportProcessor(
        input_dir=args.input_dir,
        output_path=args.output,
        json_output_path=args.json_output,
        max_workers=max(1, args.workers),
        show_progress=not args.no_progress,
    )

    try:
        result = processor.run()
    except NotADirectoryError as e:
        logger.error(f"Configuration error: {e}")
        return 2

    for path, reason in result.load_report.failed.items():
        logger.warning(f"Not loaded: {path} ({reason})")
    for diagnostic in result.diagnostics:
        logger.warning(f"Omitted article {diagnostic.article}: {diagnostic.message}")

    print(f"HTML generado en: {result.output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
