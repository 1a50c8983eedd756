"""TSV read/write helpers for recorded transcripts and reading results."""

from __future__ import annotations

from pathlib import Path

from reading_parser.models import Alternative, ResultLine, Success, TranscriptEvent

TRANSCRIPT_HEADER = ["event_id", "text", "confidence"]

RESULT_HEADER = [
    "label",
    "date",
    "month",
    "day",
    "zodiac",
    "vedic",
    "keywords",
    "per",
    "pst",
    "pre",
    "ftr",
]


def _parse_confidence(raw: str, line_no: int) -> float | None:
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"Line {line_no}: invalid confidence '{raw}'") from None


def read_transcript_events(path: Path) -> list[TranscriptEvent]:
    """Load recognition events from a TSV recording.

    Rows are ``event_id``, ``text`` and an optional ``confidence``. A header row
    naming those columns is optional; blank lines and ``#`` comments are
    skipped. Consecutive rows sharing an ``event_id`` form one event whose
    alternatives keep file order.

    Args:
        path: TSV file path.

    Returns:
        Events in file order.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If a row has too few columns or a non-numeric confidence.
    """

    if not path.exists():
        raise FileNotFoundError(f"Transcript file not found: {path}")

    with path.open("r", encoding="utf-8") as handle:
        raw_lines = [line.rstrip("\n") for line in handle]

    rows: list[tuple[int, list[str]]] = [
        (line_no, [cell.strip() for cell in line.split("\t")])
        for line_no, line in enumerate(raw_lines, start=1)
        if line.strip() and not line.lstrip().startswith("#")
    ]
    if rows and rows[0][1][: len(TRANSCRIPT_HEADER)] == TRANSCRIPT_HEADER:
        rows = rows[1:]

    events: list[TranscriptEvent] = []
    current_id: str | None = None
    current: list[Alternative] = []

    for line_no, cells in rows:
        if len(cells) < 2:
            raise ValueError(f"Line {line_no}: expected event_id and text columns")
        event_id, text = cells[0], cells[1]
        confidence = _parse_confidence(cells[2] if len(cells) > 2 else "", line_no)
        if event_id != current_id and current:
            events.append(TranscriptEvent(event_id=current_id or "", alternatives=tuple(current)))
            current = []
        current_id = event_id
        current.append(Alternative(text=text, confidence=confidence))

    if current:
        events.append(TranscriptEvent(event_id=current_id or "", alternatives=tuple(current)))
    return events


def _result_cells(line: ResultLine) -> list[str]:
    return [
        line.label,
        line.date,
        str(line.month),
        str(line.day),
        line.zodiac,
        line.vedic,
        line.keywords,
        line.reading.per,
        line.reading.pst,
        line.reading.pre,
        line.reading.ftr,
    ]


def write_result_tsv(result: Success, output_path: Path, include_header: bool = True) -> None:
    """Write the R and L result lines to a TSV file.

    Args:
        result: Completed reading.
        output_path: Destination TSV file path.
        include_header: Whether to include a header row.
    """

    with output_path.open("w", encoding="utf-8") as handle:
        if include_header:
            handle.write("\t".join(RESULT_HEADER))
            handle.write("\n")
        for line in (result.result_a, result.result_b):
            handle.write("\t".join(_result_cells(line)))
            handle.write("\n")
