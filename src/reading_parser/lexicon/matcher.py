"""Token normalization and per-word category matching."""

from __future__ import annotations

import re
import string
from dataclasses import dataclass

from reading_parser.lexicon.aliases import ALIAS_TABLES, STOP_WORDS, weight_of
from reading_parser.models import MatchEvent

TOKEN_RE = re.compile(r"\S+")
EDGE_PUNCTUATION = string.punctuation + "“”‘’…¿¡"


@dataclass(frozen=True)
class Token:
    """Normalized word and its character offset in the lower-cased source."""

    text: str
    position: int


def tokenize(text: str | None) -> list[Token]:
    """Split text into lower-cased, punctuation-trimmed, non-filler tokens.

    Args:
        text: Raw transcript fragment; ``None`` is treated as empty.

    Returns:
        Tokens in source order. Offsets point at the start of the whitespace
        delimited chunk the token came from.
    """

    if not text:
        return []

    tokens: list[Token] = []
    for chunk in TOKEN_RE.finditer(text.lower()):
        word = chunk.group(0).strip(EDGE_PUNCTUATION)
        if not word or word in STOP_WORDS:
            continue
        tokens.append(Token(text=word, position=chunk.start()))
    return tokens


def normalize(text: str | None) -> list[str]:
    """Return only the token texts produced by :func:`tokenize`."""

    return [token.text for token in tokenize(text)]


def match_word(word: str) -> MatchEvent | None:
    """Classify one normalized token.

    Tables are consulted in category priority order and the first hit wins.

    Args:
        word: Lower-cased token.

    Returns:
        Unpositioned match, or ``None`` when the token is in no alias table.
    """

    for category, aliases in ALIAS_TABLES.items():
        canonical = aliases.get(word)
        if canonical is not None:
            return MatchEvent(
                canonical_word=canonical,
                category=category,
                weight=weight_of(category, canonical),
                word=word,
            )
    return None
