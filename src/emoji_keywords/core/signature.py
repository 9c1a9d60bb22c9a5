"""Unicode code-point signatures used to join emoji datasets.

A signature is the hyphen-joined list of a character's scalar values in
uppercase hex, e.g. ``1F600`` or ``0023-FE0F-20E3``. The primary emoji data
already stores it in its ``unified`` field; keyword sources only carry the
character itself, either as literal text or as ``\\uXXXX`` escape tokens.
"""

import logging
import re
from typing import Any, Iterable, List

logger = logging.getLogger(__name__)

ESCAPE_MARKER = "\\u"
ESCAPE_TOKEN = re.compile(r"\\u([0-9A-Fa-f]{4})")

HIGH_SURROGATES = range(0xD800, 0xDC00)
LOW_SURROGATES = range(0xDC00, 0xE000)


def combine_surrogates(high: int, low: int) -> int:
    """Combine a UTF-16 surrogate pair into one scalar value."""
    return (high - 0xD800) * 0x400 + (low - 0xDC00) + 0x10000


def format_code_point(value: int) -> str:
    """Render a scalar value as uppercase hex, at least four digits wide."""
    return f"{value:04X}"


def _scalar_values(units: List[int]) -> Iterable[int]:
    """Collapse surrogate pairs in a sequence of code units.

    An unpaired high surrogate, or a lone low surrogate, is yielded as-is.
    """
    i = 0
    while i < len(units):
        unit = units[i]
        if (
            unit in HIGH_SURROGATES
            and i + 1 < len(units)
            and units[i + 1] in LOW_SURROGATES
        ):
            yield combine_surrogates(unit, units[i + 1])
            i += 2
        else:
            yield unit
            i += 1


def to_unified(value: Any) -> str:
    """Convert an emoji character into its code-point signature.

    Args:
        value: Literal text such as ``"😀"`` or escape tokens such as
            ``"\\uD83D\\uDE00"``

    Returns:
        The signature, or an empty string if the input can't be interpreted
    """
    if not value or not isinstance(value, str):
        logger.warning("Invalid input for signature: %r", value)
        return ""

    if ESCAPE_MARKER in value:
        tokens = ESCAPE_TOKEN.findall(value)
        if not tokens:
            logger.warning("No valid escaped Unicode in: %r", value)
            return ""
        units = [int(token, 16) for token in tokens]
    else:
        # Python strings are already scalar values; only surrogates that were
        # stored separately still need combining.
        units = [ord(char) for char in value]

    return "-".join(format_code_point(cp) for cp in _scalar_values(units))
