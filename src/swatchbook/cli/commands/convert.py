"""Color conversion command."""

from typing import Optional

import click

from swatchbook.services import StagingController


@click.command()
@click.argument('hex_color', required=False)
@click.option('--rgb', nargs=3, type=int, default=None, help='Red, green and blue (0-255)')
@click.option('--hsl', nargs=3, type=int, default=None, help='Hue (0-360), saturation and lightness (0-100)')
def convert(hex_color: Optional[str], rgb: Optional[tuple[int, int, int]], hsl: Optional[tuple[int, int, int]]):
    """Show a color as hex, RGB and HSL."""
    given = [value for value in (hex_color, rgb, hsl) if value]
    if len(given) != 1:
        raise click.UsageError("Give exactly one of HEX_COLOR, --rgb or --hsl")

    staging = StagingController()
    if hex_color:
        accepted = staging.set_from_hex(hex_color)
    elif rgb:
        accepted = staging.set_from_rgb(*rgb)
    else:
        accepted = staging.set_from_hsl(*hsl)

    if not accepted:
        raise click.BadParameter("Color value is malformed or out of range")

    click.echo(f"HEX: {staging.hex_color}")
    click.echo(f"RGB: {staging.rgb.r}, {staging.rgb.g}, {staging.rgb.b}")
    click.echo(f"HSL: {staging.hsl.h}, {staging.hsl.s}%, {staging.hsl.l}%")
