"""Data models for the emoji keyword converter."""

from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, TypeAdapter

# Primary emoji records stay plain dicts so unknown fields and their key
# order are written back untouched.
EmojiRecord = Dict[str, Any]

RecordList = TypeAdapter(List[Dict[str, Any]])


class KeywordEntry(BaseModel):
    """One entry of the keyword source document.

    ``e`` holds the character either as literal text or as ``\\uXXXX``
    escape tokens, ``k`` the space separated keywords. Both accept any JSON
    value; non-text values are skipped by the joiner.
    """

    e: Any = None
    k: Any = None

    model_config = ConfigDict(extra="ignore")

    @property
    def keyword_text(self) -> str:
        """Get the keyword string stripped of surrounding whitespace."""
        if not isinstance(self.k, str):
            return ""
        return self.k.strip()


class ConversionSummary(BaseModel):
    """Statistics reported after a conversion run."""

    total_entries: int
    entries_with_keywords: int
    keyword_entries: int = 0
    table_size: int = 0
    output_path: Optional[Path] = None

    @property
    def entries_without_keywords(self) -> int:
        """Get number of primary records that got no keywords."""
        return self.total_entries - self.entries_with_keywords

    @property
    def coverage(self) -> float:
        """Get share of primary records that received keywords (0-100)."""
        if not self.total_entries:
            return 0.0
        return self.entries_with_keywords / self.total_entries * 100
