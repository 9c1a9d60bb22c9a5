"""Services for the emoji keyword converter."""

from .conversion_service import ConversionService
from .emoji_data_service import EmojiDataError, EmojiDataService

__all__ = [
    "ConversionService",
    "EmojiDataError",
    "EmojiDataService",
]
