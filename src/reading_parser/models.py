"""Data models shared by the matcher, scanner and calculator.

Every value exchanged between components is an immutable dataclass so a slot
snapshot handed to a caller can never alias the parser's live state.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Union

MONTH_NAMES = ("JAN", "FEB", "MAR", "APR", "MAY", "JUN", "JUL", "AUG", "SEP", "OCT", "NOV", "DEC")


class Category(Enum):
    """The three slots a reading needs, in matcher priority order."""

    TRIMESTER = "trimester"
    RED = "red"
    ECONOMIC = "economic"

    @property
    def label(self) -> str:
        """Return the display label, e.g. ``Trimester``."""

        return self.value.capitalize()


CATEGORY_ORDER: tuple[Category, ...] = (Category.TRIMESTER, Category.RED, Category.ECONOMIC)


@dataclass(frozen=True)
class MatchEvent:
    """One token classified into a category.

    ``position`` is the character offset of the matched token in the lower-cased
    text it was scanned from; the matcher leaves it ``None`` and the scanner
    attaches it.
    """

    canonical_word: str
    category: Category
    weight: int
    position: int | None = None
    word: str = ""

    def at(self, position: int) -> MatchEvent:
        """Return a copy of this event anchored at ``position``."""

        return replace(self, position=position)


@dataclass(frozen=True)
class SlotState:
    """Locked canonical word per category; ``None`` means not heard yet."""

    trimester: str | None = None
    red: str | None = None
    economic: str | None = None

    def get(self, category: Category) -> str | None:
        return getattr(self, category.value)

    @property
    def is_complete(self) -> bool:
        return all(self.get(category) for category in CATEGORY_ORDER)

    @property
    def is_empty(self) -> bool:
        return not any(self.get(category) for category in CATEGORY_ORDER)

    def missing(self) -> frozenset[Category]:
        """Return categories that are still unlocked."""

        return frozenset(category for category in CATEGORY_ORDER if not self.get(category))

    def lock_if_empty(self, event: MatchEvent) -> tuple[SlotState, bool]:
        """Lock ``event`` into its slot unless that slot is already taken.

        Args:
            event: Match to merge.

        Returns:
            ``(state, just_completed)`` where ``state`` is ``self`` when the slot
            was already locked, and ``just_completed`` is true only when this
            call filled the last open slot.
        """

        if self.get(event.category):
            return self, False
        updated = replace(self, **{event.category.value: event.canonical_word})
        return updated, (not self.is_complete) and updated.is_complete


@dataclass(frozen=True)
class Alternative:
    """One recognition hypothesis; ``confidence`` is informational only."""

    text: str
    confidence: float | None = None


@dataclass(frozen=True)
class TranscriptEvent:
    """One recognition event, either a final utterance or ranked alternatives."""

    event_id: str
    alternatives: tuple[Alternative, ...]

    @property
    def is_utterance(self) -> bool:
        """True for a single hypothesis delivered without a confidence."""

        return len(self.alternatives) == 1 and self.alternatives[0].confidence is None

    @property
    def text(self) -> str:
        """Return the top-ranked hypothesis text."""

        return self.alternatives[0].text if self.alternatives else ""


@dataclass(frozen=True)
class SignReading:
    """Four-part narrative attached to a zodiac sign."""

    per: str
    pst: str
    pre: str
    ftr: str


@dataclass(frozen=True)
class ResultLine:
    """One rendered result line (``R`` or ``L``).

    ``month``/``day`` are calendar-normalized; ``source_day`` keeps the day value
    before overflow handling so the A/B pair relation stays observable.
    """

    label: str
    month: int
    day: int
    source_day: int
    zodiac: str
    vedic: str
    keywords: str
    reading: SignReading

    @property
    def date(self) -> str:
        """Return the display date, e.g. ``JAN 16``."""

        return f"{MONTH_NAMES[self.month - 1]} {self.day}"


@dataclass(frozen=True)
class Success:
    """All three slots locked; both result lines computed."""

    result_a: ResultLine
    result_b: ResultLine
    slots: SlotState


@dataclass(frozen=True)
class Partial:
    """Some, but not all, slots locked."""

    missing_categories: frozenset[Category]
    heard: SlotState


@dataclass(frozen=True)
class Empty:
    """Nothing recognized yet."""


ParseResult = Union[Success, Partial, Empty]
