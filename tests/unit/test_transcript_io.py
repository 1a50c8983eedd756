"""Unit tests for transcript TSV reading and result TSV writing."""

from __future__ import annotations

from pathlib import Path

import pytest

from reading_parser.io.transcript_io import (
    RESULT_HEADER,
    read_transcript_events,
    write_result_tsv,
)
from reading_parser.models import Alternative, Success
from reading_parser.scanner import StreamingKeywordParser


def _write(path: Path, text: str) -> Path:
    """Write helper for fixture files in tmp directories."""

    path.write_text(text, encoding="utf-8")
    return path


def test_read_transcript_groups_alternatives_by_event(tmp_path: Path) -> None:
    source = _write(
        tmp_path / "events.tsv",
        "event_id\ttext\tconfidence\n"
        "# comment\n"
        "\n"
        "a\tmy helth\t\n"
        "b\tand my luv\t0.8\n"
        "b\tand my lab\t0.3\n"
        "c\tcareer\n",
    )

    events = read_transcript_events(source)

    assert [event.event_id for event in events] == ["a", "b", "c"]
    assert events[0].is_utterance
    assert events[0].text == "my helth"
    assert not events[1].is_utterance
    assert events[1].alternatives == (
        Alternative("and my luv", 0.8),
        Alternative("and my lab", 0.3),
    )
    assert events[2].alternatives == (Alternative("career", None),)


def test_read_transcript_without_header(tmp_path: Path) -> None:
    source = _write(tmp_path / "events.tsv", "1\thealth love career\n")

    events = read_transcript_events(source)

    assert len(events) == 1
    assert events[0].text == "health love career"


def test_read_transcript_rejects_bad_confidence(tmp_path: Path) -> None:
    source = _write(tmp_path / "events.tsv", "1\thealth\thigh\n")

    with pytest.raises(ValueError, match="Line 1: invalid confidence 'high'"):
        read_transcript_events(source)


def test_read_transcript_rejects_missing_text_column(tmp_path: Path) -> None:
    source = _write(tmp_path / "events.tsv", "1\thealth\n2\n")

    with pytest.raises(ValueError, match="Line 2: expected event_id and text"):
        read_transcript_events(source)


def test_read_transcript_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        read_transcript_events(tmp_path / "absent.tsv")


def test_write_result_tsv_writes_both_lines(tmp_path: Path) -> None:
    result = StreamingKeywordParser().ingest_utterance("health love career")
    assert isinstance(result, Success)
    output = tmp_path / "result.tsv"

    write_result_tsv(result, output_path=output)
    lines = output.read_text(encoding="utf-8").splitlines()

    assert lines[0].split("\t") == RESULT_HEADER
    assert lines[1].split("\t")[:6] == ["R", "JAN 16", "1", "16", "CAPRICORN", "MAKARA"]
    assert lines[2].split("\t")[:6] == ["L", "JAN 15", "1", "15", "CAPRICORN", "MAKARA"]
    assert len(lines) == 3
