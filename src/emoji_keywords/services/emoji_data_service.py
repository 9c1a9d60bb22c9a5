"""Reading and writing the emoji JSON documents."""

import json
import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any, Dict, List, Sequence, Tuple

from pydantic import ValidationError

from ..models import RecordList

logger = logging.getLogger(__name__)


class EmojiDataError(Exception):
    """Custom exception for emoji data read and write errors."""

    pass


class EmojiDataService:
    """Service for loading the source documents and writing the result."""

    def __init__(self, encoding: str = "utf-8", indent: int = 2) -> None:
        """Initialize data service.

        Args:
            encoding: Text encoding of all documents
            indent: Indentation used for the output document
        """
        self.encoding = encoding
        self.indent = indent

    def load_json_document(self, path: Path) -> Any:
        """Read and parse one JSON document.

        Args:
            path: Path to the JSON file

        Returns:
            Parsed JSON value

        Raises:
            EmojiDataError: If the file can't be read or isn't valid JSON
        """
        try:
            text = path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise EmojiDataError(f"Cannot read {path}: {e}") from e

        try:
            document = json.loads(text)
        except json.JSONDecodeError as e:
            raise EmojiDataError(f"Invalid JSON in {path}: {e}") from e

        logger.debug("Loaded %s (%d characters)", path, len(text))
        return document

    def load_records(self, path: Path) -> List[Dict[str, Any]]:
        """Read a JSON document that must be an array of objects.

        Raises:
            EmojiDataError: If the file can't be read, parsed, or has the
                wrong shape
        """
        document = self.load_json_document(path)
        try:
            records = RecordList.validate_python(document)
        except ValidationError as e:
            raise EmojiDataError(
                f"Expected a JSON array of objects in {path}: "
                f"{e.error_count()} validation error(s)"
            ) from e

        logger.info("Read %d records from %s", len(records), path)
        return records

    def load_sources(
        self, emoji_file: Path, words_file: Path
    ) -> Tuple[List[Dict[str, Any]], List[Dict[str, Any]]]:
        """Load the emoji and keyword documents concurrently.

        Both reads run in parallel and this returns once both are done. The
        first failure is re-raised.

        Args:
            emoji_file: Primary emoji document
            words_file: Keyword document

        Returns:
            Tuple of (emoji records, keyword records)
        """
        with ThreadPoolExecutor(max_workers=2) as executor:
            emoji_future = executor.submit(self.load_records, emoji_file)
            words_future = executor.submit(self.load_records, words_file)
            return emoji_future.result(), words_future.result()

    def dumps(self, records: Sequence[Dict[str, Any]]) -> str:
        """Serialize records the way they are written to disk."""
        return json.dumps(list(records), indent=self.indent, ensure_ascii=False)

    def write_output(self, records: Sequence[Dict[str, Any]], path: Path) -> None:
        """Write the converted records as pretty printed JSON.

        Args:
            records: Converted emoji records
            path: Output file path

        Raises:
            EmojiDataError: If the file can't be written
        """
        try:
            data = self.dumps(records).encode(self.encoding)
        except (TypeError, ValueError) as e:
            raise EmojiDataError(f"Cannot serialize output: {e}") from e

        try:
            path.write_bytes(data)
        except OSError as e:
            raise EmojiDataError(f"Cannot write {path}: {e}") from e

        logger.info("Wrote %d records to %s", len(records), path)
