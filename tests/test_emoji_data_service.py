"""Tests for EmojiDataService file handling."""

import json
import threading
from unittest.mock import patch

import pytest

from emoji_keywords.services.emoji_data_service import EmojiDataError, EmojiDataService

from conftest import write_json


@pytest.fixture
def data_service():
    """Create an EmojiDataService instance."""
    return EmojiDataService()


class TestLoadRecords:
    """Tests for load_json_document and load_records."""

    def test_loads_array_of_objects(self, data_service, tmp_path):
        path = write_json(tmp_path / "emoji.json", [{"unified": "1F600"}, {"a": 1}])

        assert data_service.load_records(path) == [{"unified": "1F600"}, {"a": 1}]

    def test_missing_file(self, data_service, tmp_path):
        with pytest.raises(EmojiDataError, match="Cannot read"):
            data_service.load_records(tmp_path / "missing.json")

    def test_invalid_json(self, data_service, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text('[{"unified": ', encoding="utf-8")

        with pytest.raises(EmojiDataError, match="Invalid JSON") as exc_info:
            data_service.load_records(path)
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)

    def test_top_level_object_rejected(self, data_service, tmp_path):
        path = write_json(tmp_path / "emoji.json", {"unified": "1F600"})

        with pytest.raises(EmojiDataError, match="array of objects"):
            data_service.load_records(path)

    def test_array_of_non_objects_rejected(self, data_service, tmp_path):
        path = write_json(tmp_path / "emoji.json", [1, "two"])

        with pytest.raises(EmojiDataError, match="array of objects"):
            data_service.load_records(path)

    def test_json_document_can_be_any_value(self, data_service, tmp_path):
        path = write_json(tmp_path / "value.json", {"a": [1, 2]})

        assert data_service.load_json_document(path) == {"a": [1, 2]}


class TestLoadSources:
    """Tests for the concurrent load of both documents."""

    def test_returns_both_documents(self, data_service, source_files):
        emoji_file, words_file = source_files

        emojis, words = data_service.load_sources(emoji_file, words_file)

        assert len(emojis) == 4
        assert len(words) == 5
        assert emojis[0]["short_name"] == "heart_eyes"

    def test_reads_run_in_parallel(self, data_service, source_files):
        emoji_file, words_file = source_files
        original = EmojiDataService.load_records
        barrier = threading.Barrier(2, timeout=5)

        def load_when_both_started(self, path):
            # Only passes if both reads are in flight at once
            barrier.wait()
            return original(self, path)

        with patch.object(EmojiDataService, "load_records", load_when_both_started):
            emojis, words = data_service.load_sources(emoji_file, words_file)

        assert len(emojis) == 4
        assert len(words) == 5

    def test_failure_in_either_read_propagates(self, data_service, source_files, tmp_path):
        emoji_file, _ = source_files

        with pytest.raises(EmojiDataError):
            data_service.load_sources(emoji_file, tmp_path / "missing.json")


class TestWriteOutput:
    """Tests for write_output."""

    def test_pretty_printed_with_two_spaces(self, data_service, tmp_path):
        path = tmp_path / "out.json"

        data_service.write_output([{"name": "A", "keywords": ["x"]}], path)

        assert path.read_text(encoding="utf-8") == (
            "[\n"
            "  {\n"
            '    "name": "A",\n'
            '    "keywords": [\n'
            '      "x"\n'
            "    ]\n"
            "  }\n"
            "]"
        )

    def test_non_ascii_written_verbatim(self, data_service, tmp_path):
        path = tmp_path / "out.json"

        data_service.write_output([{"char": "\N{GRINNING FACE}"}], path)

        assert "\N{GRINNING FACE}" in path.read_text(encoding="utf-8")

    def test_custom_indent(self, tmp_path):
        path = tmp_path / "out.json"

        EmojiDataService(indent=4).write_output([{"a": 1}], path)

        assert path.read_text(encoding="utf-8") == '[\n    {\n        "a": 1\n    }\n]'

    def test_unwritable_path(self, data_service, tmp_path):
        with pytest.raises(EmojiDataError, match="Cannot write"):
            data_service.write_output([], tmp_path / "missing_dir" / "out.json")

    def test_unserializable_record(self, data_service, tmp_path):
        with pytest.raises(EmojiDataError, match="Cannot serialize"):
            data_service.write_output([{"bad": object()}], tmp_path / "out.json")

    def test_unencodable_text_keeps_existing_file(self, data_service, tmp_path):
        path = tmp_path / "out.json"
        path.write_text("PREVIOUS", encoding="utf-8")

        with pytest.raises(EmojiDataError, match="Cannot serialize"):
            data_service.write_output([{"note": chr(0xD800)}], path)

        assert path.read_text(encoding="utf-8") == "PREVIOUS"
