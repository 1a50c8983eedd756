"""Markdown report generation for a replayed listening session."""

from __future__ import annotations

from typing import Iterable, Sequence

from reading_parser.lexicon.aliases import category_examples, describe_missing, weight_of
from reading_parser.models import CATEGORY_ORDER, Empty, Partial, SlotState, Success
from reading_parser.pipeline import ReplayResult, ReplayStep


def _markdown_table(headers: Sequence[str], rows: Iterable[Sequence[str]]) -> str:
    """Render a deterministic GitHub-flavored markdown table.

    Args:
        headers: Table header labels.
        rows: Table body rows as string sequences.

    Returns:
        Markdown table text.
    """

    line_header = "| " + " | ".join(headers) + " |"
    line_sep = "| " + " | ".join("---" for _ in headers) + " |"
    body = ["| " + " | ".join(row) + " |" for row in rows]
    return "\n".join([line_header, line_sep, *body])


def _slot_rows(slots: SlotState) -> list[tuple[str, str, str]]:
    rows = []
    for category in CATEGORY_ORDER:
        word = slots.get(category)
        if word:
            rows.append((category.label, word, str(weight_of(category, word))))
        else:
            rows.append((category.label, "-", "-"))
    return rows


def _event_text(step: ReplayStep) -> str:
    texts = [alternative.text for alternative in step.event.alternatives]
    return " / ".join(text.replace("|", "\\|") for text in texts)


def _event_rows(replay: ReplayResult) -> list[tuple[str, str, str, str]]:
    rows = []
    for index, step in enumerate(replay.steps):
        locked = ", ".join(f"{event.category.value}={event.canonical_word}" for event in step.locked)
        note = "complete" if index == replay.completed_at else ""
        rows.append((step.event.event_id, _event_text(step), locked or "-", note))
    return rows


def build_reading_md(replay: ReplayResult) -> str:
    """Build the markdown report for one replayed session.

    Args:
        replay: Result of :func:`reading_parser.pipeline.run_transcript`.

    Returns:
        Full markdown content: status, locked slots, result lines with
        readings or the missing categories, and the event log.
    """

    final = replay.final
    sections = ["# Reading Report", ""]

    if isinstance(final, Success):
        sections += [
            "Status: complete",
            "",
            "## Locked slots",
            _markdown_table(["category", "word", "weight"], _slot_rows(final.slots)),
            "",
            "## Result lines",
            _markdown_table(
                ["label", "date", "zodiac", "vedic", "keywords"],
                [
                    (line.label, line.date, line.zodiac, line.vedic, line.keywords)
                    for line in (final.result_a, final.result_b)
                ],
            ),
        ]
        for line in (final.result_a, final.result_b):
            sections += [
                "",
                f"## {line.label}: {line.date} - {line.zodiac} ({line.vedic})",
                f"- PER: {line.reading.per}",
                f"- PST: {line.reading.pst}",
                f"- PRE: {line.reading.pre}",
                f"- FTR: {line.reading.ftr}",
            ]
    elif isinstance(final, Partial):
        sections += [
            "Status: partial",
            "",
            "## Locked slots",
            _markdown_table(["category", "word", "weight"], _slot_rows(final.heard)),
            "",
            "## Missing categories",
            describe_missing(final.missing_categories),
            "",
            _markdown_table(
                ["category", "examples"],
                [
                    (category.label, ", ".join(category_examples(category)))
                    for category in CATEGORY_ORDER
                    if category in final.missing_categories
                ],
            ),
        ]
    elif isinstance(final, Empty):
        sections += ["Status: nothing recognized"]

    sections += [
        "",
        "## Event log",
        _markdown_table(["event_id", "text", "locked", "note"], _event_rows(replay)),
    ]

    return "\n".join(sections) + "\n"
