"""Shared helpers for palette commands."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import click

from swatchbook.exceptions import SwatchbookError, format_error_for_display
from swatchbook.models import AppConfig
from swatchbook.orchestration import PickerSession

logger = logging.getLogger(__name__)


@contextmanager
def open_session(ctx: click.Context) -> Iterator[PickerSession]:
    """
    Start a session over the configured palette.

    Swatchbook errors raised while the session is open are shown without a
    traceback and exit with status 1.
    """
    config: AppConfig = ctx.obj
    try:
        session = PickerSession(config)
        session.start()
        yield session
        if session.sync.last_error is not None:
            raise session.sync.last_error
    except SwatchbookError as e:
        logger.error(f"Command failed: {e.technical_message}")
        user_message, recovery_hint = format_error_for_display(e)
        click.echo(f"ERROR: {user_message}", err=True)
        if recovery_hint:
            click.echo(f"\n{recovery_hint}", err=True)
        ctx.exit(1)


def format_entry(index: int, hex_color: str, name: str | None) -> str:
    """One palette line: index, hex and optional name."""
    line = f"[{index}] {hex_color}"
    if name:
        line += f"  {name}"
    return line
