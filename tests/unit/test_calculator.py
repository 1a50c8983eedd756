"""Unit tests for result line computation."""

from __future__ import annotations

import pytest

from reading_parser.calculator import IncompleteSlotsError, build_result_line, compute_reading
from reading_parser.models import Category, MatchEvent, SlotState


def _matches(
    trimester: tuple[str, int, int | None],
    red: tuple[str, int, int | None],
    economic: tuple[str, int, int | None],
) -> dict[Category, MatchEvent]:
    return {
        category: MatchEvent(canonical_word=word, category=category, weight=weight, position=pos)
        for category, (word, weight, pos) in zip(
            (Category.TRIMESTER, Category.RED, Category.ECONOMIC), (trimester, red, economic)
        )
    }


def test_red_spoken_last_adds_two_days() -> None:
    result = compute_reading(_matches(("health", 0, 0), ("love", 1, 20), ("career", 14, 7)))

    assert (result.result_a.month, result.result_a.day) == (1, 16)
    assert (result.result_b.month, result.result_b.day) == (1, 15)
    assert result.result_a.label == "R"
    assert result.result_b.label == "L"
    assert result.slots == SlotState(trimester="health", red="love", economic="career")


@pytest.mark.parametrize(
    ("trimester_pos", "red_pos", "economic_pos"),
    [(0, 7, 12), (7, 0, 12), (12, 7, 0)],
)
def test_red_not_last_keeps_base_day(trimester_pos: int, red_pos: int, economic_pos: int) -> None:
    result = compute_reading(
        _matches(("health", 0, trimester_pos), ("love", 1, red_pos), ("career", 14, economic_pos))
    )

    assert result.result_a.date == "JAN 14"
    assert result.result_b.date == "JAN 13"


def test_day_overflow_rolls_into_next_month() -> None:
    result = compute_reading(_matches(("health", 0, 0), ("romance", 2, 30), ("occupation", 30, 10)))

    assert result.result_a.source_day == 32
    assert (result.result_a.month, result.result_a.day) == (3, 4)
    assert (result.result_b.month, result.result_b.day) == (3, 3)
    assert result.result_a.zodiac == "PISCES"
    assert result.result_a.vedic == "KUMBHA"


def test_december_overflow_wraps_to_january() -> None:
    result = compute_reading(
        _matches(("personality", 8, 0), ("relationships", 4, 30), ("occupation", 30, 12))
    )

    assert result.result_a.date == "JAN 1"
    assert result.result_b.date == "DEC 31"
    assert result.result_a.zodiac == result.result_b.zodiac == "CAPRICORN"


def test_result_b_is_one_day_before_result_a() -> None:
    result = compute_reading(_matches(("character", 4, 0), ("love", 1, 5), ("money", 10, 9)))

    assert result.result_b.source_day == result.result_a.source_day - 1
    assert result.result_a.keywords
    assert result.result_a.reading.per


def test_build_result_line_borrows_from_previous_month() -> None:
    line = build_result_line("L", 3, 0)

    assert (line.month, line.day, line.source_day) == (2, 28, 0)
    assert line.zodiac == "PISCES"


def test_missing_category_is_rejected() -> None:
    matches = _matches(("health", 0, 0), ("love", 1, 5), ("career", 14, 9))
    del matches[Category.ECONOMIC]

    with pytest.raises(IncompleteSlotsError, match="missing Economic"):
        compute_reading(matches)


def test_unpositioned_match_is_rejected() -> None:
    with pytest.raises(ValueError, match="no position for Red"):
        compute_reading(_matches(("health", 0, 0), ("love", 1, None), ("career", 14, 9)))
