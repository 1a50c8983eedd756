"""Unit tests for calendar normalization and sign lookup."""

from __future__ import annotations

import pytest

from reading_parser.zodiac.dates import normalize_date
from reading_parser.zodiac.signs import vedic_sign, zodiac_sign


@pytest.mark.parametrize(
    ("month", "day", "expected"),
    [
        (6, 15, (6, 15)),
        (1, 31, (1, 31)),
        (2, 29, (3, 1)),
        (2, 60, (4, 1)),
        (12, 32, (1, 1)),
        (3, 0, (2, 28)),
        (1, 0, (12, 31)),
        (1, -31, (11, 30)),
    ],
)
def test_normalize_date_carries_overflow_and_underflow(
    month: int, day: int, expected: tuple[int, int]
) -> None:
    assert normalize_date(month, day) == expected


@pytest.mark.parametrize("month", [0, 13])
def test_normalize_date_rejects_invalid_month(month: int) -> None:
    with pytest.raises(ValueError, match="Month must be within 1..12"):
        normalize_date(month, 1)


@pytest.mark.parametrize(
    ("month", "day", "sign"),
    [
        (1, 1, "CAPRICORN"),
        (1, 19, "CAPRICORN"),
        (1, 20, "AQUARIUS"),
        (2, 17, "AQUARIUS"),
        (2, 18, "PISCES"),
        (3, 20, "ARIES"),
        (5, 10, "TAURUS"),
        (7, 21, "CANCER"),
        (7, 22, "LEO"),
        (12, 19, "SAGITTARIUS"),
        (12, 20, "CAPRICORN"),
        (12, 31, "CAPRICORN"),
    ],
)
def test_zodiac_sign_transitions(month: int, day: int, sign: str) -> None:
    assert zodiac_sign(month, day) == sign


def test_zodiac_sign_normalizes_overflowing_day() -> None:
    assert zodiac_sign(12, 32) == "CAPRICORN"
    assert zodiac_sign(2, 32) == "PISCES"


@pytest.mark.parametrize(
    ("month", "day", "sign"),
    [
        (1, 13, "DHANU"),
        (1, 14, "MAKARA"),
        (4, 13, "MEENA"),
        (4, 14, "MESHA"),
        (12, 31, "DHANU"),
    ],
)
def test_vedic_sign_transitions(month: int, day: int, sign: str) -> None:
    assert vedic_sign(month, day) == sign
