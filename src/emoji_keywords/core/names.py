"""Display name normalization."""

from typing import Any


def to_capital_case(value: Any) -> str:
    """Capitalize every space separated word of a name.

    The whole string is lowercased first, so ``"ALREADY CAPS"`` becomes
    ``"Already Caps"``. Runs of spaces are kept as they are.
    """
    if not value or not isinstance(value, str):
        return ""
    return " ".join(word[:1].upper() + word[1:] for word in value.lower().split(" "))
