"""Shared fixtures for emoji keyword tests."""

import json
from pathlib import Path

import pytest


def escaped(*units: int) -> str:
    """Build backslash escape tokens for the given code units."""
    return "".join("\\u%04X" % unit for unit in units)


def write_json(path: Path, document) -> Path:
    path.write_text(json.dumps(document, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def emoji_records():
    """Primary emoji records, deliberately out of order."""
    return [
        {
            "name": "SMILING FACE WITH HEART-SHAPED EYES",
            "unified": "1F60D",
            "short_name": "heart_eyes",
            "sort_order": 3,
        },
        {
            "name": "HASH KEY",
            "unified": "0023-FE0F-20E3",
            "short_name": "hash",
        },
        {
            "name": "GRINNING FACE",
            "unified": "1F600",
            "short_name": "grinning",
            "sort_order": 1,
            "skin_variations": None,
        },
        {
            "name": "RED HEART",
            "unified": "2764-FE0F",
            "short_name": "heart",
            "sort_order": 2,
        },
    ]


@pytest.fixture
def keyword_records():
    """Keyword records mixing literal and escaped characters."""
    return [
        {"e": "\N{GRINNING FACE}", "k": "happy joy smile"},
        {"e": escaped(0x2764, 0xFE0F), "k": " love heart "},
        {"e": escaped(0x23, 0xFE0F, 0x20E3), "k": "number"},
        {"e": "", "k": "nothing"},
        {"e": "\N{PILE OF POO}", "k": "   "},
    ]


@pytest.fixture
def source_files(tmp_path, emoji_records, keyword_records):
    """Emoji and keyword documents on disk."""
    emoji_file = write_json(tmp_path / "emoji.json", emoji_records)
    words_file = write_json(tmp_path / "words.json", keyword_records)
    return emoji_file, words_file
