"""Command-line front end for zone score reports.

Reads a directory of JSONL records and prints a report as JSON.

Usage:
    zonescore student --data DIR --snapshot 1
    zonescore principal --data DIR [--snapshots 1 2 3] [--weighted]

Exit codes:
    0  report printed
    1  no usable data (message on stderr)
    2  invalid input or unreadable data
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from zonescore_toolkit import __version__
from zonescore_toolkit.core.utils.serialization import dumps_report, write_report
from zonescore_toolkit.reporting import (
    CombineMode,
    InvalidInputError,
    LoaderError,
    NoData,
    ReportConfig,
    generate_principal_report,
    generate_student_report,
    load_record_source,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NO_DATA = 1
EXIT_INVALID = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="zonescore",
        description="Generate zone score reports from snapshot records",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--verbose", "-v", action="count", default=0,
                        help="Increase log output (-v info, -vv debug)")

    sub = parser.add_subparsers(dest="command", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--data", "-d", type=Path, required=True,
                        help="Directory with questions.jsonl, zones.jsonl, zone_memberships.jsonl")
    common.add_argument("--strict", action="store_true",
                        help="Validate every row against the JSON Schemas")
    common.add_argument("--output", "-o", type=Path,
                        help="Write the report to this file instead of stdout")

    student = sub.add_parser("student", parents=[common],
                             help="Top, bottom and low-scoring zones of one snapshot")
    student.add_argument("--snapshot", "-s", type=int, required=True)
    student.add_argument("--threshold", type=float, default=60.0,
                         help="Low-score threshold (default: 60)")

    principal = sub.add_parser("principal", parents=[common],
                               help="Lowest average zone across snapshots")
    principal.add_argument("--snapshots", "-s", type=int, nargs="+",
                           help="Snapshots to analyze (default: every snapshot in the data)")
    principal.add_argument("--weighted", action="store_true",
                           help="Weight snapshots by answered question count")
    principal.add_argument("--workers", type=int, default=4,
                           help="Parallel snapshot fetches (default: 4)")
    return parser


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _config_from_args(args: argparse.Namespace) -> ReportConfig:
    if args.command == "student":
        return ReportConfig(low_score_threshold=args.threshold)
    return ReportConfig(
        combine_mode=CombineMode.WEIGHTED if args.weighted else CombineMode.UNWEIGHTED,
        max_workers=args.workers,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        config = _config_from_args(args)
        source = load_record_source(args.data, strict=args.strict)
        if args.command == "student":
            result = generate_student_report(source, args.snapshot, config)
        else:
            snapshot_ids = args.snapshots or source.snapshot_ids
            result = generate_principal_report(source, snapshot_ids, config)
    except (InvalidInputError, LoaderError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INVALID

    if isinstance(result, NoData):
        print(json.dumps(result.to_dict()), file=sys.stderr)
        return EXIT_NO_DATA

    if args.output:
        try:
            write_report(result, args.output)
        except OSError as e:
            print(f"error: cannot write {args.output}: {e}", file=sys.stderr)
            return EXIT_INVALID
        logger.info(f"Wrote report to {args.output}")
    else:
        print(dumps_report(result))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
