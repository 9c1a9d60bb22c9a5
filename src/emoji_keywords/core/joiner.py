"""Join keyword annotations onto emoji records."""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from ..models import EmojiRecord, KeywordEntry
from .names import to_capital_case
from .signature import to_unified

logger = logging.getLogger(__name__)

KeywordTable = Dict[str, str]


def build_keyword_table(entries: Iterable[KeywordEntry]) -> KeywordTable:
    """Build the signature to keyword string table.

    Entries without a usable signature or with blank keywords are skipped.
    A later entry for the same signature replaces the earlier one.

    Args:
        entries: Parsed keyword source entries

    Returns:
        Mapping of signature to stripped keyword string
    """
    table: KeywordTable = {}
    skipped = 0

    for entry in entries:
        signature = to_unified(entry.e)
        keywords = entry.keyword_text
        if not signature or not keywords:
            skipped += 1
            continue

        if signature in table:
            logger.debug("Keywords for %s replaced by a later entry", signature)
        table[signature] = keywords

    logger.info(
        "Built keyword table with %d signatures (%d entries skipped)",
        len(table),
        skipped,
    )
    return table


def match_keywords(
    record: Mapping[str, Any], table: KeywordTable
) -> Optional[str]:
    """Get the keyword string joined to a record, if any."""
    unified = record.get("unified")
    if not isinstance(unified, str):
        return None
    return table.get(unified)


def annotate_emoji(record: Mapping[str, Any], table: KeywordTable) -> EmojiRecord:
    """Return a copy of one emoji record with normalized name and keywords."""
    annotated = dict(record)
    annotated["name"] = to_capital_case(record.get("name"))

    keywords = match_keywords(record, table)
    if keywords:
        annotated["keywords"] = keywords.split(" ")

    return annotated


def annotate_emojis(
    emojis: Iterable[Mapping[str, Any]], table: KeywordTable
) -> List[EmojiRecord]:
    """Annotate every emoji record; unmatched records only get their name fixed.

    Args:
        emojis: Primary emoji records
        table: Keyword table from :func:`build_keyword_table`

    Returns:
        New records in input order
    """
    return [annotate_emoji(record, table) for record in emojis]


def _sort_key(record: Mapping[str, Any]) -> float:
    sort_order = record.get("sort_order")
    if sort_order is None:
        return float("inf")
    return sort_order


def sort_by_sort_order(records: Iterable[EmojiRecord]) -> List[EmojiRecord]:
    """Sort records ascending by ``sort_order``, records without one last."""
    return sorted(records, key=_sort_key)
