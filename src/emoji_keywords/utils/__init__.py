"""Utility helpers for the emoji keyword converter."""

from .logging_config import setup_logging

__all__ = ["setup_logging"]
