"""Streaming slot-locking scanner over incremental speech transcripts.

Recognition engines re-deliver growing and overlapping hypotheses for the same
speech. The scanner walks each delivery token by token, locks the first word it
hears for every category, and latches completion at the exact token that fills
the third slot. Once latched, further input is ignored until ``reset``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Sequence

from reading_parser.calculator import IncompleteSlotsError, compute_reading
from reading_parser.lexicon.aliases import category_examples
from reading_parser.lexicon.matcher import match_word, tokenize
from reading_parser.models import (
    CATEGORY_ORDER,
    Alternative,
    Category,
    Empty,
    MatchEvent,
    ParseResult,
    Partial,
    SlotState,
    Success,
)

logger = logging.getLogger(__name__)

LockCallback = Callable[[MatchEvent, SlotState], None]
CompleteCallback = Callable[[Success], None]


@dataclass(frozen=True)
class ScanOutcome:
    """Result of one scanning pass.

    Attributes:
        slots: Slot state after the pass.
        locked: Events that locked a slot during the pass, in scan order.
        completed: Whether this pass filled the last open slot.
    """

    slots: SlotState
    locked: tuple[MatchEvent, ...]
    completed: bool


def _lock_stream(
    texts: Iterable[str], slots: SlotState
) -> Iterator[tuple[MatchEvent, SlotState, bool]]:
    """Yield ``(event, slots_after, just_completed)`` for every new lock.

    Stops right after the completing lock. Nothing is yielded when ``slots`` is
    already complete.
    """

    if slots.is_complete:
        return
    for text in texts:
        for token in tokenize(text):
            event = match_word(token.text)
            if event is None:
                continue
            event = event.at(token.position)
            updated, just_completed = slots.lock_if_empty(event)
            if updated is slots:
                continue
            slots = updated
            yield event, slots, just_completed
            if just_completed:
                return


def _collect(texts: Iterable[str], slots: SlotState) -> ScanOutcome:
    locked: list[MatchEvent] = []
    completed = False
    for event, slots, just_completed in _lock_stream(texts, slots):
        locked.append(event)
        completed = just_completed
    return ScanOutcome(slots=slots, locked=tuple(locked), completed=completed)


def scan_text(text: str | None, slots: SlotState | None = None) -> ScanOutcome:
    """Scan one whole transcript against ``slots``.

    Args:
        text: Transcript text.
        slots: Starting state; a fresh empty state when omitted.

    Returns:
        Outcome of the pass; ``slots`` itself is never mutated.
    """

    return _collect([text or ""], slots if slots is not None else SlotState())


def scan_alternatives(
    alternatives: Sequence[Alternative], slots: SlotState | None = None
) -> ScanOutcome:
    """Scan every hypothesis of one recognition result in the given order.

    Confidence values are ignored: the first structurally found word per
    category wins, whichever hypothesis it came from.
    """

    return _collect(
        [alternative.text for alternative in alternatives],
        slots if slots is not None else SlotState(),
    )


def _evaluate(outcome_slots: SlotState, locked: Sequence[MatchEvent]) -> ParseResult:
    if outcome_slots.is_complete:
        return compute_reading({event.category: event for event in locked})
    if outcome_slots.is_empty:
        return Empty()
    return Partial(missing_categories=outcome_slots.missing(), heard=outcome_slots)


def parse_keywords(text: str | None) -> ParseResult:
    """Parse one standalone transcript using the true spoken word order.

    Args:
        text: Complete transcript.

    Returns:
        ``Success`` when all three categories occur, ``Partial`` when some do,
        ``Empty`` when none do.
    """

    outcome = scan_text(text)
    return _evaluate(outcome.slots, outcome.locked)


def canonical_transcript(slots: SlotState) -> str:
    """Rebuild a fixed-order transcript from locked canonical words.

    The RED word is placed last, so recomputation from locked slots always
    applies the RED-last day bonus regardless of the order it was heard in.

    Raises:
        IncompleteSlotsError: If any slot is still open.
    """

    if not slots.is_complete:
        missing = ", ".join(
            category.label for category in CATEGORY_ORDER if not slots.get(category)
        )
        raise IncompleteSlotsError(f"Cannot rebuild transcript; missing {missing}.")
    return f"{slots.trimester} {slots.economic} {slots.red}"


def reading_from_slots(slots: SlotState) -> Success:
    """Recompute the reading for a complete slot state.

    Raises:
        IncompleteSlotsError: If any slot is still open.
    """

    result = parse_keywords(canonical_transcript(slots))
    if not isinstance(result, Success):
        raise IncompleteSlotsError(f"Locked slots did not rebuild into a reading: {slots}.")
    return result


class StreamingKeywordParser:
    """Slot-locking parser for one listening session.

    Callers must deliver recognition events one at a time from a single thread
    of control; the parser holds no locks. ``reset`` may be called between any
    two events.

    Args:
        on_lock: Called synchronously with ``(event, slots)`` each time a slot
            locks.
        on_complete: Called synchronously with the reading at the token that
            fills the last slot. Fires at most once per session.
    """

    def __init__(
        self,
        on_lock: LockCallback | None = None,
        on_complete: CompleteCallback | None = None,
    ) -> None:
        self.on_lock = on_lock
        self.on_complete = on_complete
        self._slots = SlotState()
        self._result: Success | None = None
        self._last_locked: tuple[MatchEvent, ...] = ()

    @property
    def completed(self) -> bool:
        return self._result is not None

    @property
    def result(self) -> Success | None:
        return self._result

    @property
    def last_locked(self) -> tuple[MatchEvent, ...]:
        """Events locked by the most recent ingest call."""

        return self._last_locked

    def reset(self) -> None:
        """Clear locked slots and the completion latch."""

        if not self._slots.is_empty:
            logger.debug("Resetting slots %s", self._slots)
        self._slots = SlotState()
        self._result = None
        self._last_locked = ()

    def snapshot_slots(self) -> SlotState:
        return self._slots

    def missing_categories(self) -> dict[Category, tuple[str, ...]]:
        """Return unlocked categories, in priority order, with example words."""

        return {
            category: category_examples(category)
            for category in CATEGORY_ORDER
            if not self._slots.get(category)
        }

    def ingest_utterance(self, text: str | None) -> ParseResult:
        """Scan a whole transcript and report the session state.

        After completion this returns the stored reading without scanning.
        """

        if self._result is not None:
            self._last_locked = ()
            return self._result
        self._consume([text or ""])
        if self._result is not None:
            return self._result
        if self._slots.is_empty:
            return Empty()
        return Partial(missing_categories=self._slots.missing(), heard=self._slots)

    def ingest_alternatives(self, alternatives: Sequence[Alternative]) -> MatchEvent | None:
        """Scan every hypothesis of one recognition result.

        Returns:
            The first event this call locked. ``None`` means no slot changed:
            the hypotheses held no category word, every word they held belongs
            to a category that is already locked, or the session is already
            complete. It does not mean that no alias was heard.
        """

        if self._result is not None:
            self._last_locked = ()
            return None
        locked = self._consume([alternative.text for alternative in alternatives])
        return locked[0] if locked else None

    def _consume(self, texts: Iterable[str]) -> list[MatchEvent]:
        locked: list[MatchEvent] = []
        for event, slots, just_completed in _lock_stream(texts, self._slots):
            self._slots = slots
            locked.append(event)
            logger.debug(
                "Locked %s=%s (heard %r at %d)",
                event.category.value,
                event.canonical_word,
                event.word,
                event.position,
            )
            if self.on_lock is not None:
                self.on_lock(event, slots)
            if just_completed:
                self._result = reading_from_slots(slots)
                logger.debug(
                    "Slots complete: R %s %s, L %s %s",
                    self._result.result_a.date,
                    self._result.result_a.zodiac,
                    self._result.result_b.date,
                    self._result.result_b.zodiac,
                )
                if self.on_complete is not None:
                    self.on_complete(self._result)
        self._last_locked = tuple(locked)
        return locked
