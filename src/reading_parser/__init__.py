"""Streaming slot-locking keyword parser for spoken readings."""

from .models import Category, Empty, MatchEvent, Partial, ResultLine, SlotState, Success
from .scanner import StreamingKeywordParser, parse_keywords

__all__ = [
    "Category",
    "Empty",
    "MatchEvent",
    "Partial",
    "ResultLine",
    "SlotState",
    "Success",
    "StreamingKeywordParser",
    "parse_keywords",
]
