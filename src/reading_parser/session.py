"""Listening session that wraps the parser with caller-side policy.

The session forwards recognition events to a :class:`StreamingKeywordParser`,
reports partial and completed readings through callbacks, drops stale partial
slots after a period of silence, and lets the caller consume a finished reading
to start over.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Sequence

from reading_parser.config import PARTIAL_TIMEOUT_SECONDS
from reading_parser.models import Alternative, MatchEvent, ParseResult, SlotState, Success
from reading_parser.scanner import StreamingKeywordParser

logger = logging.getLogger(__name__)


class ListeningSession:
    """One activation of the listener, from start to hard reset.

    Args:
        on_match: Called once with the reading when all slots lock.
        on_partial: Called with a slot snapshot whenever a slot locks without
            completing the reading.
        partial_timeout: Seconds without a new lock after which partial slots
            are cleared by :meth:`tick`.
        clock: Monotonic time source, injectable for tests.
    """

    def __init__(
        self,
        on_match: Callable[[Success], None] | None = None,
        on_partial: Callable[[SlotState], None] | None = None,
        partial_timeout: float = PARTIAL_TIMEOUT_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.on_match = on_match
        self.on_partial = on_partial
        self.partial_timeout = partial_timeout
        self._clock = clock
        self._partial_deadline: float | None = None
        self.active = False
        self.parser = StreamingKeywordParser(
            on_lock=self._handle_lock,
            on_complete=self._handle_complete,
        )

    def start(self) -> None:
        self.active = True

    def stop(self) -> None:
        """Stop listening and drop any slots heard in this session."""

        self.active = False
        self.parser.reset()
        self._partial_deadline = None

    @property
    def result(self) -> Success | None:
        return self.parser.result

    @property
    def partial_slots(self) -> SlotState | None:
        """Slots heard so far, or ``None`` when nothing is pending display."""

        slots = self.parser.snapshot_slots()
        if self.parser.completed or slots.is_empty:
            return None
        return slots

    def handle_transcript(self, text: str) -> ParseResult | None:
        """Feed one final transcript; ignored while the session is inactive."""

        if not self.active:
            return None
        self.tick()
        return self.parser.ingest_utterance(text)

    def handle_alternatives(self, alternatives: Sequence[Alternative]) -> MatchEvent | None:
        """Feed every hypothesis of one recognition result."""

        if not self.active:
            return None
        self.tick()
        return self.parser.ingest_alternatives(alternatives)

    def tick(self) -> bool:
        """Clear partial slots whose silence window has elapsed.

        Returns:
            True when partial slots were cleared.
        """

        if self._partial_deadline is None or self._clock() < self._partial_deadline:
            return False
        self._partial_deadline = None
        if self.parser.completed:
            return False
        logger.info(
            "No new slot for %.1fs; clearing %s",
            self.partial_timeout,
            self.parser.snapshot_slots(),
        )
        self.parser.reset()
        return True

    def consume_result(self) -> Success | None:
        """Return the finished reading and start a fresh scan.

        Partial slots are left alone when no reading has completed yet.
        """

        result = self.parser.result
        if result is None:
            return None
        self.parser.reset()
        self._partial_deadline = None
        return result

    def hard_reset(self) -> None:
        """Stop listening and drop all state."""

        self.stop()

    def _handle_lock(self, event: MatchEvent, slots: SlotState) -> None:
        if slots.is_complete:
            return
        self._partial_deadline = self._clock() + self.partial_timeout
        if self.on_partial is not None:
            self.on_partial(slots)

    def _handle_complete(self, result: Success) -> None:
        self._partial_deadline = None
        if self.on_match is not None:
            self.on_match(result)
