"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from .commands import add, config, convert, list_colors, move, remove

logger = logging.getLogger(__name__)

DEFAULT_LOG_DIR = Path.home() / ".swatchbook" / "logs"
LOG_FORMAT = '%(asctime)s %(levelname)-7s %(name)s: %(message)s'
LOG_MAX_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 5


def _log_level(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> int:
    if log_file:
        return logging.getLevelName(log_level.upper())
    if debug or verbose >= 2:
        return logging.DEBUG
    return logging.INFO if verbose == 1 else logging.WARNING


def _log_path(debug: bool, log_file: Optional[Path]) -> Path:
    if log_file:
        return log_file
    if debug:
        return Path.cwd() / "swatchbook-debug.log"
    DEFAULT_LOG_DIR.mkdir(parents=True, exist_ok=True)
    return DEFAULT_LOG_DIR / "swatchbook.log"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> None:
    """
    Send log records to a rotating file.

    The level comes from -v/-vv/--debug, unless --log-file is given, in which
    case --log-level decides. Without --log-file, logs go to
    ./swatchbook-debug.log in debug mode and ~/.swatchbook/logs otherwise.
    """
    level = _log_level(verbose, debug, log_file, log_level)
    path = _log_path(debug, log_file)

    handler = logging.handlers.RotatingFileHandler(path, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUPS)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)

    logger.debug(f"Logging at {logging.getLevelName(level)} to {path}")


@click.group()
@click.pass_context
@click.version_option(version="0.1.0", prog_name="swatchbook")
@click.option(
    '--config-file',
    '-c',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Configuration file (default: ~/.swatchbook/config.json)'
)
@click.option(
    '--palette',
    '-p',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Palette file to edit instead of the configured one'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./swatchbook-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
def cli(
    ctx,
    config_file: Optional[Path],
    palette: Optional[Path],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    Swatchbook - curate an ordered color palette.

    Colors are kept in a JSON palette file. Every change is written back
    immediately.

    \b
    Examples:
      # Show the palette
      swatchbook list

      # Add a named color at the front
      swatchbook add "#ff8800" --name Orange

      # Move a color to the end
      swatchbook move "#ff8800_Orange" --to-end

      # Convert between hex, RGB and HSL
      swatchbook convert --hsl 210 60 40
    """
    from swatchbook.exceptions import SwatchbookError, format_error_for_display
    from swatchbook.models import AppConfig

    setup_logging(verbose, debug, log_file, log_level)

    try:
        app_config = AppConfig.load_or_default(config_file)
    except SwatchbookError as e:
        logger.error(f"Failed to load configuration: {e.technical_message}")
        user_message, recovery_hint = format_error_for_display(e)
        click.echo(f"ERROR: {user_message}", err=True)
        if recovery_hint:
            click.echo(f"\n{recovery_hint}", err=True)
        ctx.exit(1)

    if palette is not None:
        app_config = app_config.model_copy(
            update={"resources_dir": palette.parent, "palette_filename": palette.name}
        )

    ctx.obj = app_config


cli.add_command(list_colors)
cli.add_command(add)
cli.add_command(remove)
cli.add_command(move)
cli.add_command(convert)
cli.add_command(config)

if __name__ == "__main__":
    cli()
