"""Models for the emoji keyword converter."""

from .models import ConversionSummary, EmojiRecord, KeywordEntry, RecordList

__all__ = [
    "ConversionSummary",
    "EmojiRecord",
    "KeywordEntry",
    "RecordList",
]
