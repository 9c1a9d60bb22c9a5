"""Emoji keyword conversion pipeline."""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from ..config import Config, get_config
from ..core import (
    KeywordTable,
    annotate_emojis,
    build_keyword_table,
    match_keywords,
    sort_by_sort_order,
)
from ..models import ConversionSummary, EmojiRecord, KeywordEntry
from .emoji_data_service import EmojiDataService

logger = logging.getLogger(__name__)


class ConversionService:
    """Merge keyword annotations into emoji metadata and write the result."""

    def __init__(
        self,
        config: Optional[Config] = None,
        data_service: Optional[EmojiDataService] = None,
    ) -> None:
        """Initialize conversion service.

        Args:
            config: Application configuration, read from the environment if
                not given
            data_service: Service used for file I/O
        """
        self.config = config or get_config()
        self.data_service = data_service or EmojiDataService(
            encoding=self.config.encoding, indent=self.config.indent
        )

    def build_table(self, words: Sequence[Dict[str, Any]]) -> KeywordTable:
        """Parse keyword source records and build the keyword table."""
        entries = [KeywordEntry.model_validate(word) for word in words]
        return build_keyword_table(entries)

    def convert_records(
        self, emojis: Sequence[Dict[str, Any]], table: KeywordTable
    ) -> List[EmojiRecord]:
        """Join keywords onto emoji records and sort the result.

        Args:
            emojis: Primary emoji records
            table: Keyword table from :meth:`build_table`

        Returns:
            Annotated records sorted by ``sort_order``
        """
        return sort_by_sort_order(annotate_emojis(emojis, table))

    def convert(
        self,
        emoji_file: Optional[Path] = None,
        words_file: Optional[Path] = None,
        output_file: Optional[Path] = None,
    ) -> ConversionSummary:
        """Run the whole conversion.

        Args:
            emoji_file: Primary emoji document, defaults to config
            words_file: Keyword document, defaults to config
            output_file: Output document, defaults to config

        Returns:
            Summary of the run

        Raises:
            EmojiDataError: If any input can't be loaded or the output
                can't be written
        """
        emoji_file = emoji_file or self.config.emoji_file
        words_file = words_file or self.config.words_file
        output_file = output_file or self.config.output_file

        logger.info("Converting %s with keywords from %s", emoji_file, words_file)
        emojis, words = self.data_service.load_sources(emoji_file, words_file)

        table = self.build_table(words)
        converted = self.convert_records(emojis, table)

        self.data_service.write_output(converted, output_file)

        summary = ConversionSummary(
            total_entries=len(emojis),
            entries_with_keywords=sum(1 for r in emojis if match_keywords(r, table)),
            keyword_entries=len(words),
            table_size=len(table),
            output_path=output_file,
        )
        logger.info(
            "Converted %d entries, %d with keywords",
            summary.total_entries,
            summary.entries_with_keywords,
        )
        return summary
