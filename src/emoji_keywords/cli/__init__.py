"""Command-line interface for the emoji keyword converter."""
