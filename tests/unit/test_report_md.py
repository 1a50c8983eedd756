"""Unit tests for markdown report generation."""

from __future__ import annotations

from reading_parser.models import Alternative, TranscriptEvent
from reading_parser.pipeline import run_transcript
from reading_parser.reporting.report_md import build_reading_md


def _utterance(event_id: str, text: str) -> TranscriptEvent:
    return TranscriptEvent(event_id=event_id, alternatives=(Alternative(text),))


def test_build_reading_md_contains_required_sections() -> None:
    """Complete sessions should render slots, result lines and readings."""

    replay = run_transcript(
        [
            _utterance("1", "my health"),
            TranscriptEvent("2", (Alternative("luv | lav", 0.7), Alternative("love", 0.6))),
            _utterance("3", "for this career"),
        ]
    )

    markdown = build_reading_md(replay)

    assert "Status: complete" in markdown
    assert "## Locked slots" in markdown
    assert "| Red | love | 1 |" in markdown
    assert "| R | JAN 16 | CAPRICORN | MAKARA |" in markdown
    assert "## L: JAN 15 - CAPRICORN (MAKARA)" in markdown
    assert "- FTR: " in markdown
    assert "| 3 | for this career | economic=career | complete |" in markdown
    assert "luv \\| lav / love" in markdown


def test_build_reading_md_lists_missing_categories() -> None:
    markdown = build_reading_md(run_transcript([_utterance("1", "love money")]))

    assert "Status: partial" in markdown
    assert "Missing: Trimester (Health/Character/Personality)" in markdown
    assert "| Trimester | health, character, personality |" in markdown
    assert "| Trimester | - | - |" in markdown


def test_build_reading_md_for_empty_session() -> None:
    markdown = build_reading_md(run_transcript([_utterance("1", "hello")]))

    assert "Status: nothing recognized" in markdown
    assert "| 1 | hello | - |  |" in markdown
