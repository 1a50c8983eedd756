"""Replay recorded recognition events through a streaming parser."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from reading_parser.models import (
    Empty,
    MatchEvent,
    ParseResult,
    Partial,
    SlotState,
    TranscriptEvent,
)
from reading_parser.scanner import StreamingKeywordParser


@dataclass(frozen=True)
class ReplayStep:
    """Outcome of feeding one event.

    Attributes:
        event: The event that was fed.
        locked: Events that locked a slot while this event was scanned.
        slots: Slot snapshot after the event.
    """

    event: TranscriptEvent
    locked: tuple[MatchEvent, ...]
    slots: SlotState


@dataclass(frozen=True)
class ReplayResult:
    """Result bundle returned by :func:`run_transcript`.

    Attributes:
        final: Session result after the last event.
        steps: Per-event outcomes, in feed order.
        completed_at: Index into ``steps`` of the completing event, if any.
    """

    final: ParseResult
    steps: tuple[ReplayStep, ...]
    completed_at: int | None


def run_transcript(
    events: Sequence[TranscriptEvent],
    parser: StreamingKeywordParser | None = None,
) -> ReplayResult:
    """Feed events in order, each in the scanning mode its shape calls for.

    Utterance events use whole-text scanning; events carrying alternatives use
    alternatives scanning. Events after completion are still recorded but lock
    nothing.

    Args:
        events: Recorded recognition events.
        parser: Parser to feed; a fresh one when omitted.

    Returns:
        ``ReplayResult`` with the final result and a per-event log.
    """

    parser = parser if parser is not None else StreamingKeywordParser()
    steps: list[ReplayStep] = []
    completed_at: int | None = None

    for index, event in enumerate(events):
        was_completed = parser.completed
        if event.is_utterance:
            parser.ingest_utterance(event.text)
        else:
            parser.ingest_alternatives(event.alternatives)

        if not was_completed and parser.completed:
            completed_at = index
        steps.append(ReplayStep(event=event, locked=parser.last_locked, slots=parser.snapshot_slots()))

    return ReplayResult(final=_final_result(parser), steps=tuple(steps), completed_at=completed_at)


def _final_result(parser: StreamingKeywordParser) -> ParseResult:
    if parser.result is not None:
        return parser.result
    slots = parser.snapshot_slots()
    if slots.is_empty:
        return Empty()
    return Partial(missing_categories=slots.missing(), heard=slots)

