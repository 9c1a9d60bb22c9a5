"""Signature command: show the code-point signature of characters."""

from typing import Tuple

import click

from ...core import to_unified
from ..display import display_signatures


@click.command("signature")
@click.argument("values", nargs=-1, required=True)
@click.option(
    "--plain", is_flag=True, help="Print bare signatures, one per line"
)
def signature_command(values: Tuple[str, ...], plain: bool) -> None:
    """Print the signature of each VALUE.

    VALUE is either the character itself or escape tokens such as
    '\\uD83D\\uDE00'.
    """
    rows = [(value, to_unified(value)) for value in values]

    if plain:
        for _, signature in rows:
            click.echo(signature)
    else:
        display_signatures(rows)

    if not all(signature for _, signature in rows):
        raise click.ClickException("Some values have no valid signature")
