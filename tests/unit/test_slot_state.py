"""Unit tests for slot locking semantics."""

from __future__ import annotations

import dataclasses

import pytest

from reading_parser.models import Category, MatchEvent, SlotState


def _event(word: str, category: Category, weight: int = 0) -> MatchEvent:
    return MatchEvent(canonical_word=word, category=category, weight=weight, position=0, word=word)


def test_lock_if_empty_reports_completion_only_on_last_slot() -> None:
    slots = SlotState()

    slots, first = slots.lock_if_empty(_event("health", Category.TRIMESTER))
    slots, second = slots.lock_if_empty(_event("love", Category.RED, 1))
    slots, third = slots.lock_if_empty(_event("career", Category.ECONOMIC, 14))

    assert (first, second, third) == (False, False, True)
    assert slots == SlotState(trimester="health", red="love", economic="career")
    assert slots.is_complete


def test_lock_if_empty_keeps_first_lock() -> None:
    slots, _ = SlotState().lock_if_empty(_event("health", Category.TRIMESTER))

    updated, completed = slots.lock_if_empty(_event("character", Category.TRIMESTER, 4))

    assert updated is slots
    assert updated.trimester == "health"
    assert completed is False


def test_lock_on_complete_state_never_reports_completion_again() -> None:
    slots = SlotState(trimester="health", red="love", economic="career")

    updated, completed = slots.lock_if_empty(_event("money", Category.ECONOMIC, 10))

    assert updated is slots
    assert completed is False


def test_missing_and_empty_predicates() -> None:
    slots = SlotState(red="love")

    assert not slots.is_empty
    assert not slots.is_complete
    assert slots.missing() == frozenset({Category.TRIMESTER, Category.ECONOMIC})
    assert SlotState().is_empty
    assert SlotState().missing() == frozenset(Category)


def test_slot_state_is_immutable() -> None:
    slots = SlotState(trimester="health")

    with pytest.raises(dataclasses.FrozenInstanceError):
        slots.trimester = "character"  # type: ignore[misc]
