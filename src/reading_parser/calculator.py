"""Turn three locked matches into the R/L result line pair."""

from __future__ import annotations

from typing import Mapping

from reading_parser.config import RED_LAST_DAY_BONUS, RESULT_A_LABEL, RESULT_B_LABEL
from reading_parser.models import CATEGORY_ORDER, Category, MatchEvent, ResultLine, SlotState, Success
from reading_parser.zodiac.dates import normalize_date
from reading_parser.zodiac.signs import SIGN_KEYWORDS, SIGN_READINGS, vedic_sign, zodiac_sign


class IncompleteSlotsError(ValueError):
    """Raised when a reading is requested before every slot is locked."""


def build_result_line(label: str, month: int, day: int) -> ResultLine:
    """Normalize one (month, day) pair and attach its sign data.

    Args:
        label: Line label, ``R`` or ``L``.
        month: Month before normalization, ``1..12``.
        day: Day before normalization; may overflow or underflow the month.

    Returns:
        Fully resolved result line.
    """

    norm_month, norm_day = normalize_date(month, day)
    sign = zodiac_sign(norm_month, norm_day)
    return ResultLine(
        label=label,
        month=norm_month,
        day=norm_day,
        source_day=day,
        zodiac=sign,
        vedic=vedic_sign(norm_month, norm_day),
        keywords=SIGN_KEYWORDS[sign],
        reading=SIGN_READINGS[sign],
    )


def compute_reading(matches: Mapping[Category, MatchEvent]) -> Success:
    """Compute both result lines from one positioned match per category.

    Month is the TRIMESTER weight plus the RED weight. The day is the ECONOMIC
    weight, raised by ``RED_LAST_DAY_BONUS`` when the RED word sits after the
    other two. Line ``L`` uses the day before line ``R``.

    Args:
        matches: Match per category, each with a position.

    Returns:
        ``Success`` holding both lines and the slot state they came from.

    Raises:
        IncompleteSlotsError: If a category or a position is missing.
    """

    missing = [category.label for category in CATEGORY_ORDER if category not in matches]
    if missing:
        raise IncompleteSlotsError(f"Cannot compute a reading; missing {', '.join(missing)}.")
    unpositioned = [
        category.label for category in CATEGORY_ORDER if matches[category].position is None
    ]
    if unpositioned:
        raise IncompleteSlotsError(
            f"Cannot compute a reading; no position for {', '.join(unpositioned)}."
        )

    trimester = matches[Category.TRIMESTER]
    red = matches[Category.RED]
    economic = matches[Category.ECONOMIC]

    month = trimester.weight + red.weight
    base_day = economic.weight

    spoken_order = sorted((trimester, red, economic), key=lambda event: event.position)
    if spoken_order[-1].category is Category.RED:
        base_day += RED_LAST_DAY_BONUS

    return Success(
        result_a=build_result_line(RESULT_A_LABEL, month, base_day),
        result_b=build_result_line(RESULT_B_LABEL, month, base_day - 1),
        slots=SlotState(
            trimester=trimester.canonical_word,
            red=red.canonical_word,
            economic=economic.canonical_word,
        ),
    )
