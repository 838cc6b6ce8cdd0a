"""Commands for card configuration files."""

import json
from pathlib import Path

import click

from colorwheel.exceptions import ConfigurationError
from colorwheel.models import CardConfig
from colorwheel.utils import PydanticPersistence


@click.group()
def config():
    """Create and check card configuration files."""
    pass


@config.command()
@click.argument('path', type=click.Path(dir_okay=False, path_type=Path))
@click.option('--entity', '-e', required=True, help='Entity holding the color value')
@click.option('--title', '-t', default=None, help='Card title')
@click.option('--force', is_flag=True, help='Overwrite an existing file')
def init(path: Path, entity: str, title: str | None, force: bool):
    """Write a new card configuration to PATH."""
    if path.exists() and not force:
        raise click.ClickException(f"{path} already exists (use --force to overwrite)")

    data = CardConfig.stub()
    data["entity"] = entity
    if title:
        data["title"] = title

    try:
        card_config = CardConfig.model_validate(data)
    except ValueError as e:
        raise click.ClickException(str(e))

    card_config.save(path)
    click.echo(f"Wrote {path}")


@config.command()
@click.argument('path', type=click.Path(exists=True, dir_okay=False, path_type=Path))
def validate(path: Path):
    """Check that PATH holds a valid card configuration."""
    is_valid, error = PydanticPersistence.validate_json(path, CardConfig)
    if not is_valid:
        raise click.ClickException(error or "Invalid configuration")
    click.echo(f"{path} is valid")


@config.command()
@click.argument('path', type=click.Path(exists=True, dir_okay=False, path_type=Path))
def show(path: Path):
    """Print the effective configuration in PATH, defaults included."""
    try:
        card_config = CardConfig.load(path)
    except ConfigurationError as e:
        raise click.ClickException(e.get_full_message())

    click.echo(json.dumps(card_config.model_dump(mode="json", by_alias=True), indent=2))
