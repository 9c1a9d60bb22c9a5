"""Core conversion logic: signatures, names and the keyword join."""

from .joiner import (
    KeywordTable,
    annotate_emoji,
    annotate_emojis,
    build_keyword_table,
    match_keywords,
    sort_by_sort_order,
)
from .names import to_capital_case
from .signature import combine_surrogates, format_code_point, to_unified

__all__ = [
    "KeywordTable",
    "annotate_emoji",
    "annotate_emojis",
    "build_keyword_table",
    "combine_surrogates",
    "format_code_point",
    "match_keywords",
    "sort_by_sort_order",
    "to_capital_case",
    "to_unified",
]
