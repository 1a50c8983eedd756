"""Integrity checks for the constant alias, weight and sign tables.

These run in the test suite and from the CLI's ``--check-tables`` flag. A
failure here is an authoring defect in the tables, never a runtime condition.
"""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from reading_parser.lexicon.aliases import ALIAS_TABLES, STOP_WORDS, WEIGHT_TABLES
from reading_parser.models import CATEGORY_ORDER, Category
from reading_parser.zodiac.dates import DAYS_IN_MONTH
from reading_parser.zodiac.signs import (
    SIGN_KEYWORDS,
    SIGN_READINGS,
    VEDIC_TRANSITIONS,
    ZODIAC_TRANSITIONS,
    SignTransition,
)


def _raise_if_errors(label: str, errors: Sequence[str]) -> None:
    if errors:
        preview = "\n".join(f"- {item}" for item in errors[:25])
        rest = len(errors) - min(25, len(errors))
        more = f"\n- ... and {rest} more" if rest > 0 else ""
        raise ValueError(f"{label} validation failed with {len(errors)} errors:\n{preview}{more}")


def validate_lexicon() -> None:
    """Validate alias and weight tables.

    Checks that no alias appears in two categories, every alias targets a
    weighted canonical word, every canonical word is its own alias, weights are
    distinct within a category, stop words never shadow an alias, and every
    TRIMESTER + RED weight sum is a month number.

    Raises:
        ValueError: If any check fails.
    """

    errors: list[str] = []

    owners: dict[str, list[Category]] = {}
    for category in CATEGORY_ORDER:
        for alias in ALIAS_TABLES[category]:
            owners.setdefault(alias, []).append(category)
    for alias, categories in sorted(owners.items()):
        if len(categories) > 1:
            names = ", ".join(category.value for category in categories)
            errors.append(f"alias '{alias}' appears in several categories: {names}")

    for category in CATEGORY_ORDER:
        aliases = ALIAS_TABLES[category]
        weights = WEIGHT_TABLES[category]
        for alias, canonical in aliases.items():
            if canonical not in weights:
                errors.append(f"{category.value}: alias '{alias}' targets unweighted '{canonical}'")
        for canonical in weights:
            if aliases.get(canonical) != canonical:
                errors.append(f"{category.value}: canonical '{canonical}' is not its own alias")
        duplicated = [value for value, count in Counter(weights.values()).items() if count > 1]
        for value in sorted(duplicated):
            errors.append(f"{category.value}: weight {value} is shared by several words")

    for word in sorted(STOP_WORDS):
        if word in owners:
            errors.append(f"stop word '{word}' shadows an alias")

    for trimester, t_weight in WEIGHT_TABLES[Category.TRIMESTER].items():
        for red, r_weight in WEIGHT_TABLES[Category.RED].items():
            if not 1 <= t_weight + r_weight <= 12:
                errors.append(f"'{trimester}' + '{red}' gives month {t_weight + r_weight}")

    _raise_if_errors("Lexicon", errors)


def _check_transitions(name: str, transitions: Sequence[SignTransition]) -> list[str]:
    errors: list[str] = []
    if [transition.month for transition in transitions] != list(range(1, 13)):
        errors.append(f"{name}: expected one transition per month in calendar order")
    for transition in transitions:
        if not 1 <= transition.month <= 12:
            continue
        if not 1 <= transition.day <= DAYS_IN_MONTH[transition.month - 1]:
            errors.append(
                f"{name}: {transition.sign} starts on invalid day {transition.month}/{transition.day}"
            )
    duplicated = [sign for sign, count in Counter(t.sign for t in transitions).items() if count > 1]
    for sign in sorted(duplicated):
        errors.append(f"{name}: sign {sign} listed more than once")
    return errors


def validate_zodiac_tables() -> None:
    """Validate sign transition calendars and per-sign text.

    Raises:
        ValueError: If a calendar is out of order, a start day does not exist,
            or a tropical sign lacks keywords or a reading.
    """

    errors = _check_transitions("tropical", ZODIAC_TRANSITIONS)
    errors.extend(_check_transitions("vedic", VEDIC_TRANSITIONS))

    for transition in ZODIAC_TRANSITIONS:
        if not SIGN_KEYWORDS.get(transition.sign):
            errors.append(f"tropical: {transition.sign} has no keywords")
        reading = SIGN_READINGS.get(transition.sign)
        if reading is None or not all((reading.per, reading.pst, reading.pre, reading.ftr)):
            errors.append(f"tropical: {transition.sign} has an incomplete reading")

    _raise_if_errors("Zodiac table", errors)


def alias_counts() -> dict[Category, int]:
    """Count alias surface forms per category."""

    return {category: len(ALIAS_TABLES[category]) for category in CATEGORY_ORDER}
