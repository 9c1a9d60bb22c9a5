"""Emoji keyword converter.

Merges keyword annotations into emoji metadata, joining both datasets by
Unicode code-point signature, and writes a sorted, enriched JSON file.
"""

__version__ = "1.0.0"
__author__ = "Anton"
__email__ = ""

from .config import Config
from .core import to_capital_case, to_unified
from .models import ConversionSummary, KeywordEntry
from .services import ConversionService, EmojiDataError, EmojiDataService

__all__ = [
    "Config",
    "ConversionService",
    "ConversionSummary",
    "EmojiDataError",
    "EmojiDataService",
    "KeywordEntry",
    "to_capital_case",
    "to_unified",
]
