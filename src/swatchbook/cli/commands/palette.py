"""Palette editing commands."""

from typing import Optional

import click

from swatchbook.models import EndOfListToken, EntryToken, InsertPosition

from ._session import format_entry, open_session


@click.command(name="list")
@click.pass_context
def list_colors(ctx):
    """List the palette in display order."""
    with open_session(ctx) as session:
        entries = session.entries()
        if not entries:
            click.echo("Palette is empty.")
            return

        for index, entry in enumerate(entries):
            click.echo(format_entry(index, entry.hex_color, entry.name))


@click.command()
@click.pass_context
@click.argument('hex_color')
@click.option('--name', '-n', default=None, help='Display name for the color')
@click.option('--end', is_flag=True, help='Append at the end instead of the front')
def add(ctx, hex_color: str, name: Optional[str], end: bool):
    """Add HEX_COLOR (e.g. "#ff8800") to the palette."""
    with open_session(ctx) as session:
        if not session.staging.set_from_hex(hex_color):
            raise click.BadParameter(f"'{hex_color}' is not a 6-digit hex color", param_hint="HEX_COLOR")
        session.staging.set_name(name)

        position = InsertPosition.END if end else InsertPosition.FRONT
        key = session.staging.current_entry.key
        if session.add_current(position):
            click.echo(f"Added {key}")
        else:
            click.echo(f"{key} is already in the palette")


@click.command()
@click.pass_context
@click.argument('key')
def remove(ctx, key: str):
    """Remove the color with KEY (hex, or hex_name for named colors)."""
    with open_session(ctx) as session:
        if session.remove(key):
            click.echo(f"Removed {key}")
        else:
            click.echo(f"{key} is not in the palette")


@click.command()
@click.pass_context
@click.argument('source')
@click.argument('destination', required=False)
@click.option('--to-end', is_flag=True, help='Move SOURCE to the end of the palette')
def move(ctx, source: str, destination: Optional[str], to_end: bool):
    """Move SOURCE into the slot of DESTINATION (or to the end)."""
    if destination is None and not to_end:
        raise click.UsageError("Give a DESTINATION key or --to-end")

    with open_session(ctx) as session:
        target = EndOfListToken() if to_end else EntryToken(key=destination)
        if session.drag.drag_end(EntryToken(key=source), target):
            click.echo(f"Moved {source}")
        else:
            click.echo("Nothing moved")
