"""CLI display and formatting utilities."""

from .formatters import display_conversion_summary, display_signatures

__all__ = ["display_conversion_summary", "display_signatures"]
