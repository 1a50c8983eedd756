"""Month/day normalization on a fixed non-leap calendar."""

from __future__ import annotations

DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def _next_month(month: int) -> int:
    return 1 if month == 12 else month + 1


def _previous_month(month: int) -> int:
    return 12 if month == 1 else month - 1


def normalize_date(month: int, day: int) -> tuple[int, int]:
    """Carry an out-of-range day into neighbouring months.

    Days past the end of ``month`` roll into the following months and days
    below 1 borrow from the preceding months' tails; December and January wrap
    into each other. February always has 28 days.

    Args:
        month: Month number in ``1..12``.
        day: Any integer day value.

    Returns:
        ``(month, day)`` with ``1 <= day <= DAYS_IN_MONTH[month - 1]``.

    Raises:
        ValueError: If ``month`` is outside ``1..12``.
    """

    if not 1 <= month <= 12:
        raise ValueError(f"Month must be within 1..12, got {month}.")

    while day > DAYS_IN_MONTH[month - 1]:
        day -= DAYS_IN_MONTH[month - 1]
        month = _next_month(month)

    while day < 1:
        month = _previous_month(month)
        day += DAYS_IN_MONTH[month - 1]

    return month, day
