"""Alias, weight and stop-word tables for the three reading categories.

Aliases include common speech-recognition mishearings of each canonical word.
Weights are designer-assigned constants; they are not derived from anything.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from reading_parser.models import CATEGORY_ORDER, Category

TRIMESTER_WEIGHTS: Mapping[str, int] = MappingProxyType(
    {
        "health": 0,
        "character": 4,
        "personality": 8,
    }
)

RED_WEIGHTS: Mapping[str, int] = MappingProxyType(
    {
        "love": 1,
        "romance": 2,
        "partnership": 3,
        "relationships": 4,
    }
)

ECONOMIC_WEIGHTS: Mapping[str, int] = MappingProxyType(
    {
        "job": 2,
        "work": 6,
        "money": 10,
        "career": 14,
        "finance": 18,
        "success": 22,
        "profession": 26,
        "occupation": 30,
    }
)

TRIMESTER_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "health": "health",
        "helth": "health",
        "helt": "health",
        "held": "health",
        "heald": "health",
        "halth": "health",
        "character": "character",
        "karakter": "character",
        "charactor": "character",
        "charakter": "character",
        "carector": "character",
        "carekter": "character",
        "personality": "personality",
        "personelity": "personality",
        "persanality": "personality",
        "persnality": "personality",
        "personaliti": "personality",
    }
)

RED_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "love": "love",
        "luv": "love",
        "lav": "love",
        "loove": "love",
        "lobe": "love",
        "romance": "romance",
        "romans": "romance",
        "romanss": "romance",
        "romanse": "romance",
        "partnership": "partnership",
        "partnarship": "partnership",
        "relationship": "relationships",
        "relationships": "relationships",
        "relashanship": "relationships",
        "relashanships": "relationships",
    }
)

ECONOMIC_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "job": "job",
        "jaab": "job",
        "jobe": "job",
        "jab": "job",
        "work": "work",
        "vork": "work",
        "werk": "work",
        "wok": "work",
        "money": "money",
        "mony": "money",
        "mani": "money",
        "munny": "money",
        "career": "career",
        "carrier": "career",
        "karrier": "career",
        "carrer": "career",
        "carear": "career",
        "karir": "career",
        "kareer": "career",
        "karyar": "career",
        "careyer": "career",
        "finance": "finance",
        "finans": "finance",
        "finence": "finance",
        "finanss": "finance",
        "success": "success",
        "sakses": "success",
        "sucses": "success",
        "suksess": "success",
        "succees": "success",
        "profession": "profession",
        "proffession": "profession",
        "profesion": "profession",
        "prosession": "profession",
        "profeshion": "profession",
        "occupation": "occupation",
        "ocupation": "occupation",
        "okupation": "occupation",
        "occupashion": "occupation",
    }
)

# Matcher priority follows CATEGORY_ORDER.
ALIAS_TABLES: Mapping[Category, Mapping[str, str]] = MappingProxyType(
    {
        Category.TRIMESTER: TRIMESTER_ALIASES,
        Category.RED: RED_ALIASES,
        Category.ECONOMIC: ECONOMIC_ALIASES,
    }
)

WEIGHT_TABLES: Mapping[Category, Mapping[str, int]] = MappingProxyType(
    {
        Category.TRIMESTER: TRIMESTER_WEIGHTS,
        Category.RED: RED_WEIGHTS,
        Category.ECONOMIC: ECONOMIC_WEIGHTS,
    }
)

STOP_WORDS: frozenset[str] = frozenset(
    {
        "a",
        "about",
        "am",
        "an",
        "and",
        "are",
        "at",
        "be",
        "but",
        "er",
        "for",
        "hmm",
        "i",
        "i'm",
        "in",
        "is",
        "it",
        "like",
        "me",
        "my",
        "of",
        "oh",
        "ok",
        "okay",
        "on",
        "or",
        "so",
        "that",
        "the",
        "this",
        "to",
        "uh",
        "um",
        "well",
        "what",
        "with",
        "you",
        "your",
    }
)


def weight_of(category: Category, canonical_word: str) -> int:
    """Return the weight of a canonical word.

    Raises:
        KeyError: If ``canonical_word`` is not canonical for ``category``.
    """

    return WEIGHT_TABLES[category][canonical_word]


def category_examples(category: Category) -> tuple[str, ...]:
    """Return canonical words of ``category`` in weight order."""

    weights = WEIGHT_TABLES[category]
    return tuple(sorted(weights, key=weights.__getitem__))


def describe_missing(categories: Iterable[Category]) -> str:
    """Render missing categories with their example words.

    Args:
        categories: Categories still unlocked, in any order.

    Returns:
        Text such as ``Missing: Trimester (Health/Character/Personality)``;
        empty string when nothing is missing.
    """

    wanted = set(categories)
    parts = [
        f"{category.label} ({'/'.join(word.capitalize() for word in category_examples(category))})"
        for category in CATEGORY_ORDER
        if category in wanted
    ]
    if not parts:
        return ""
    return "Missing: " + ", ".join(parts)
