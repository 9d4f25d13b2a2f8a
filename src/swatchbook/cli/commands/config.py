"""Configuration command."""

import click


@click.command()
@click.pass_context
def config(ctx):
    """Show the effective configuration."""
    click.echo(ctx.obj.model_dump_json(indent=2))
    click.echo(f"\nPalette file: {ctx.obj.palette_path}")
