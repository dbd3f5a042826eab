"""Command line entry point.

Usage:
    trip-extract "I'm going to Tokyo from July 10th to July 18th with 2 people"
    echo "party of 4, prefer a hotel" | trip-extract --verbose
    python -m trip_extractor --start-date 2026-07-10 "going to Rome for 7 days"
"""

from __future__ import annotations

import argparse
import json
import sys
from datetime import date
from typing import Optional, Sequence

from .adapters.diagnostics import RecordingDiagnosticsSink
from .config import get_config
from .container import get_container
from .domain.models import ParseContext
from .io.input_text import get_input_text
from .monitoring import configure_logging
from .ports.diagnostics import DiagnosticsSinkPort
from .services import TripRequestService


def _iso_date(text: str) -> date:
    try:
        return date.fromisoformat(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {text!r}")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trip-extract",
        description="Extract structured trip fields from a free-text request",
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="Transcript to parse (read from stdin when omitted)",
    )
    parser.add_argument(
        "--start-date",
        type=_iso_date,
        default=None,
        help="Start date already known by the caller (YYYY-MM-DD)",
    )
    parser.add_argument(
        "--today",
        type=_iso_date,
        default=None,
        help="Reference date for relative phrases (YYYY-MM-DD)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=False,
        help="Also print accepted tokens, diagnostics and unparsed words",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse one transcript and print the fields as JSON."""
    args = build_arg_parser().parse_args(argv)
    config = get_config()
    configure_logging(config.observability, level="DEBUG" if args.verbose else None)

    today = args.today or date.today()
    context = ParseContext(
        today=today,
        start_date=args.start_date,
        roll_past_dates=config.parser.roll_past_dates,
    )

    container = get_container()
    sink = RecordingDiagnosticsSink()
    if args.verbose:
        container.register(DiagnosticsSinkPort, lambda: sink)

    service: TripRequestService = container.resolve(TripRequestService)
    report = service.analyze_text(get_input_text(args.text), context=context)

    output = report.fields.to_dict()
    if args.verbose:
        output = {
            "fields": output,
            "tokens": [
                {
                    "field": t.field.value,
                    "text": t.matched_text,
                    "confidence": t.confidence,
                    "pattern": t.description,
                }
                for t in report.tokens
            ],
            "diagnostics": sink.stats(),
            "unparsedWords": list(report.unparsed_words),
        }

    print(json.dumps(output, indent=2, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
