"""CLI entrypoint for replaying transcripts through the reading parser."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from reading_parser.io.transcript_io import read_transcript_events, write_result_tsv
from reading_parser.lexicon.aliases import describe_missing
from reading_parser.models import CATEGORY_ORDER, Alternative, Partial, Success, TranscriptEvent
from reading_parser.pipeline import run_transcript
from reading_parser.reporting.report_md import build_reading_md
from reading_parser.validation import alias_counts, validate_lexicon, validate_zodiac_tables


def _format_table(headers: Sequence[str], data_rows: Sequence[Sequence[str]]) -> str:
    """Format rows as an ASCII table for terminal output.

    Args:
        headers: Table headers.
        data_rows: Row values.

    Returns:
        Monospace table string.
    """

    widths = [len(header) for header in headers]
    for row in data_rows:
        for idx, value in enumerate(row):
            widths[idx] = max(widths[idx], len(value))

    header_line = " | ".join(header.ljust(widths[idx]) for idx, header in enumerate(headers))
    separator_line = "-+-".join("-" * width for width in widths)
    body_lines = [
        " | ".join(value.ljust(widths[idx]) for idx, value in enumerate(row)) for row in data_rows
    ]
    return "\n".join([header_line, separator_line, *body_lines])


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct CLI argument parser.

    Returns:
        Configured parser for the replay command.
    """

    parser = argparse.ArgumentParser(
        description="Replay recognized speech through the slot-locking reading parser."
    )
    parser.add_argument(
        "--transcript",
        type=Path,
        default=None,
        help="TSV recording with event_id, text and optional confidence columns.",
    )
    parser.add_argument(
        "--text",
        action="append",
        default=[],
        help="Utterance to feed after the transcript file; repeatable.",
    )
    parser.add_argument("--output", type=Path, default=None, help="Result TSV output path.")
    parser.add_argument("--report", type=Path, default=None, help="Markdown report output path.")
    parser.add_argument(
        "--check-tables",
        action="store_true",
        help="Validate alias and zodiac tables and exit.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log slot locks to stderr.")
    return parser


def _check_tables() -> int:
    validate_lexicon()
    validate_zodiac_tables()
    rows = [[category.label, str(count)] for category, count in alias_counts().items()]
    print("Tables OK.")
    print(_format_table(["category", "aliases"], rows))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run CLI workflow from arguments through artifact generation.

    Returns:
        Zero when a complete reading was produced, one otherwise.
    """

    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="[%(levelname)s] %(message)s")

    if args.check_tables:
        return _check_tables()

    events: list[TranscriptEvent] = []
    if args.transcript is not None:
        if not args.transcript.exists():
            raise SystemExit(f"Transcript not found: {args.transcript}")
        events.extend(read_transcript_events(args.transcript))
    for idx, text in enumerate(args.text, start=1):
        events.append(TranscriptEvent(event_id=f"text-{idx}", alternatives=(Alternative(text),)))
    if not events:
        parser.error("provide --transcript and/or --text")

    replay = run_transcript(events)
    final = replay.final

    if args.report is not None:
        args.report.write_text(build_reading_md(replay), encoding="utf-8")
        print(f"Wrote report to {args.report}")

    if isinstance(final, Success):
        rows = [
            [line.label, line.date, line.zodiac, line.vedic, line.keywords]
            for line in (final.result_a, final.result_b)
        ]
        print(_format_table(["label", "date", "zodiac", "vedic", "keywords"], rows))
        print(f"\nCompleted at event {replay.steps[replay.completed_at].event.event_id}.")
        if args.output is not None:
            write_result_tsv(final, output_path=args.output)
            print(f"Wrote results to {args.output}")
        return 0

    if isinstance(final, Partial):
        heard = ", ".join(
            f"{category.label}={final.heard.get(category)}"
            for category in CATEGORY_ORDER
            if final.heard.get(category)
        )
        print(f"Heard so far: {heard}")
        print(describe_missing(final.missing_categories))
        return 1

    print("No category words recognized.")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
