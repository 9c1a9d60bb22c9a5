"""Command-line interface for the emoji keyword converter.

This is the main entry point that delegates to command modules.
"""

from pathlib import Path
from typing import Any, Optional

import click

from ..config import get_config
from ..utils.logging_config import setup_logging
from .commands import convert_command, signature_command


@click.group()
@click.option(
    "--log-level",
    default="INFO",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    help="Set logging level",
)
@click.option("--log-file", type=click.Path(), help="Log to file")
@click.pass_context
def cli(ctx: Any, log_level: str, log_file: Optional[str]) -> None:
    """Emoji keyword converter.

    Merges keyword annotations into emoji metadata by code-point signature.
    """
    setup_logging(log_level=log_level, log_file=Path(log_file) if log_file else None)
    ctx.obj = get_config()


cli.add_command(convert_command)
cli.add_command(signature_command)


if __name__ == "__main__":
    cli()
