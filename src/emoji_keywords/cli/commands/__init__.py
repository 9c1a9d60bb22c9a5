"""CLI command modules."""

from .convert import convert_command
from .signature import signature_command

__all__ = ["convert_command", "signature_command"]
