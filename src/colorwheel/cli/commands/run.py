"""Command launching the Textual card host."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

logger = logging.getLogger(__name__)


@click.command()
@click.option(
    '--config', '-c', 'config_path',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help='Card configuration JSON file'
)
@click.option('--entity', '-e', default=None, help='Entity holding the color value')
@click.option('--title', '-t', default=None, help='Card title')
@click.option(
    '--format', '-f', 'fmt',
    type=click.Choice(['auto', 'hex', 'rgb', 'array'], case_sensitive=False),
    default=None,
    help='Encoding used when writing (default: auto)'
)
@click.option(
    '--value',
    default='#FF0000',
    show_default=True,
    help='Initial value of the in-memory entity (ignored with --ha-url)'
)
@click.option('--ha-url', default=None, help='Home Assistant base URL, e.g. http://ha.local:8123')
@click.option('--token', envvar='HA_TOKEN', default=None, help='Home Assistant access token (or $HA_TOKEN)')
@click.option(
    '--poll',
    type=click.FloatRange(min=0),
    default=5.0,
    show_default=True,
    help='Seconds between state polls with --ha-url (0 disables)'
)
@click.option('--rows', type=click.IntRange(min=7), default=21, show_default=True, help='Terminal rows for the wheel')
@click.pass_context
def run(
    ctx,
    config_path: Optional[Path],
    entity: Optional[str],
    title: Optional[str],
    fmt: Optional[str],
    value: str,
    ha_url: Optional[str],
    token: Optional[str],
    poll: float,
    rows: int,
):
    """
    Open the color wheel card in the terminal.

    Press on the wheel and drag to preview; releasing writes the color to
    the entity. Without --ha-url the entity lives in memory.
    """
    # Lazy imports keep --help fast
    from pydantic import ValidationError

    from colorwheel.bindings import HomeAssistantBinding, InMemoryBinding
    from colorwheel.exceptions import format_error_for_display, wrap_pydantic_error
    from colorwheel.models import CardConfig
    from colorwheel.tui import ColorWheelApp

    log_path = (ctx.obj or {}).get("log_path")

    try:
        data = {}
        if config_path is not None:
            data = CardConfig.load(config_path).model_dump(by_alias=True, exclude_none=True)
        overrides = {"entity": entity, "title": title, "format": fmt}
        data.update({key: val for key, val in overrides.items() if val is not None})

        try:
            card_config = CardConfig.model_validate(data)
        except ValidationError as e:
            raise wrap_pydantic_error(e, str(config_path) if config_path else None) from e

        if ha_url:
            if not token:
                raise click.UsageError("--token (or $HA_TOKEN) is required with --ha-url")
            binding = HomeAssistantBinding(ha_url, token)
            poll_interval = poll
        else:
            binding = InMemoryBinding({card_config.entity: value})
            poll_interval = 0.0

        logger.info(f"Starting color wheel for {card_config.entity}")
        ColorWheelApp(card_config, binding, poll_interval=poll_interval, rows=rows).run()

    except click.ClickException:
        raise
    except KeyboardInterrupt:
        logger.info("Application interrupted by user")
    except Exception as e:
        logger.exception("Error running application")
        user_message, recovery_hint = format_error_for_display(e)

        click.echo(f"ERROR: {user_message}", err=True)
        if recovery_hint:
            click.echo(f"\n{recovery_hint}", err=True)
        if log_path:
            click.echo(f"\nFor details, check the log file: {log_path}", err=True)
        sys.exit(1)
