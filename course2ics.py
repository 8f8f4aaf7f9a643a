#!/usr/bin/env python3
"""Course schedule CSV to iCalendar converter.

Batch pipeline that reads one course section per CSV row and writes an
iCalendar (.ics) file per weekly meeting pattern, plus an index.json
listing every file written.
"""

import argparse
import logging
import sys
from datetime import date, datetime
from typing import Optional

from pipeline import BatchOrchestrator, build_config
from reader.errors import Course2IcsError

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

CSV_FORMAT = """
CSV format (first row is a header and is skipped):
  TITLE, SUBJ, CRSE, INSTR1, INSTR2, INSTR1_EMAIL, INSTR2_EMAIL, DAYS1, DAYS2, TIME1, TIME2, SECTION

  INSTR1/INSTR2   Instructor name as "Last, First" (INSTR2 may be blank)
  DAYS1/DAYS2     Comma delimited days: U/Su, M, T, W, R/Th, F, S/Sa  (e.g. M,W,F)
  TIME1/TIME2     24 hour time range HH:MM - HH:MM  (DAYS2/TIME2 are optional)

Examples:
  python3 course2ics.py --input courses.csv --from 2020-01-01 --to 2020-03-01
  python3 course2ics.py --input courses.csv --output out --from 2020-01-01 --to 2020-03-01 -v
"""


def parse_date(date_str: str) -> date:
    """Parse date string in YYYY-MM-DD format."""
    try:
        return datetime.strptime(date_str, "%Y-%m-%d").date()
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Invalid date format: '{date_str}'. Expected YYYY-MM-DD."
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate iCalendar (.ics) files from a course schedule CSV.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=CSV_FORMAT,
    )

    parser.add_argument(
        "-i", "--input",
        required=True,
        help="Path to the input CSV"
    )

    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Existing directory to write .ics files and index.json to "
             "(default: $COURSE2ICS_OUTPUT_DIR or ./output)"
    )

    parser.add_argument(
        "--from",
        dest="from_date",
        type=parse_date,
        required=True,
        help="First day of the term (format: YYYY-MM-DD)"
    )

    parser.add_argument(
        "--to",
        dest="to_date",
        type=parse_date,
        required=True,
        help="Last day of the term, inclusive (format: YYYY-MM-DD)"
    )

    parser.add_argument(
        "--timezone",
        default=None,
        help="IANA timezone of the class times (default: $COURSE2ICS_TIMEZONE or UTC)"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every row and file as it is processed"
    )

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the conversion pipeline."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
    )

    try:
        config = build_config(
            input_path=args.input,
            start=args.from_date,
            end=args.to_date,
            output_dir=args.output,
            tz_name=args.timezone,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        summary = BatchOrchestrator(config).run()
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        return 130
    except Course2IcsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error: An unexpected error occurred: {e}", file=sys.stderr)
        return 1

    print(f"Wrote {summary.files_written} calendar files to: {config.output_dir}")
    if summary.rows_rejected or summary.rows_failed:
        print(f"Skipped rows: {summary.rows_rejected} rejected, {summary.rows_failed} failed")
    print(f"Index saved to: {summary.index_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
