"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from colorwheel import __version__

from .commands import config, decode, encode, pick, run

logger = logging.getLogger(__name__)


def default_log_path() -> Path:
    """Log file used when none is given."""
    return Path.home() / ".colorwheel" / "logs" / "colorwheel.log"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> Path:
    """
    Configure logging for the application.

    The Textual host owns the terminal, so logs always go to a file.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode logging to ./colorwheel-debug.log
        log_file: Custom log file path (optional)
        log_level: Log level used together with a custom log file

    Returns:
        Path of the log file
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    if log_file:
        level = getattr(logging, log_level.upper())

    if debug and not log_file:
        log_path = Path.cwd() / "colorwheel-debug.log"
    elif log_file:
        log_path = log_file
    else:
        log_path = default_log_path()
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Keeps last 5 files, max 10MB each
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")
    return log_path


@click.group()
@click.version_option(version=__version__, prog_name="colorwheel")
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./colorwheel-debug.log)'
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
@click.pass_context
def cli(ctx, verbose: int, debug: bool, log_file: Optional[Path], log_level: str):
    """
    Color Wheel - pick a color for a dashboard entity on a circular wheel.

    \b
    Examples:
      # Try the card against an in-memory entity
      colorwheel run --entity input_text.lamp --value "#FF8800"

      # Drive a Home Assistant entity
      colorwheel run --entity input_text.lamp --ha-url http://ha.local:8123 --token $TOKEN

      # Inspect and convert values
      colorwheel decode "rgb(26, 43, 60)"
      colorwheel encode 26 43 60 --format array

      # What color sits 40px right of the center?
      colorwheel pick 40 0
    """
    ctx.ensure_object(dict)
    ctx.obj["log_path"] = setup_logging(verbose, debug, log_file, log_level)


cli.add_command(run)
cli.add_command(decode)
cli.add_command(encode)
cli.add_command(pick)
cli.add_command(config)

if __name__ == "__main__":
    cli()
