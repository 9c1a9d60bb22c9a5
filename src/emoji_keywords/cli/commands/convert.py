"""Convert command: merge keywords into emoji metadata."""

import logging
from pathlib import Path
from typing import Any, Optional

import click
from rich.console import Console

from ...services import ConversionService, EmojiDataError
from ..display import display_conversion_summary

console = Console()
logger = logging.getLogger(__name__)


@click.command("convert")
@click.option(
    "--emoji-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Primary emoji metadata file (default: emoji.json)",
)
@click.option(
    "--words-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Keyword source file (default: words.json)",
)
@click.option(
    "--output",
    "-o",
    "output_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: emojis_with_keywords.json)",
)
@click.option(
    "--indent",
    type=click.IntRange(min=0),
    help="Indentation of the output JSON (default: 2)",
)
@click.pass_obj
def convert_command(
    config: Any,
    emoji_file: Optional[Path],
    words_file: Optional[Path],
    output_file: Optional[Path],
    indent: Optional[int],
) -> None:
    """Merge keywords into emoji metadata and write the sorted result."""
    if indent is not None:
        config.indent = indent

    service = ConversionService(config)
    try:
        with console.status("[bold green]Converting emoji data..."):
            summary = service.convert(emoji_file, words_file, output_file)
    except EmojiDataError as e:
        logger.exception("Conversion failed")
        console.print(f"[red]✗[/red] Conversion failed: {e}")
        raise click.ClickException(str(e))

    display_conversion_summary(summary)
