"""Commands for inspecting and converting color values."""

from pathlib import Path

import click

from colorwheel.colors import ColorCodec, color_to_hsv
from colorwheel.core import WheelGeometry
from colorwheel.exceptions import ColorParseError, ConfigurationError
from colorwheel.models import CardConfig, Color, ColorFormat, Offset, WheelConfig

FORMAT_CHOICE = click.Choice([fmt.value for fmt in ColorFormat], case_sensitive=False)
OUTPUT_CHOICE = click.Choice(
    [fmt.value for fmt in ColorFormat if fmt != ColorFormat.AUTO], case_sensitive=False
)
CHANNEL = click.IntRange(0, 255)


@click.command()
@click.argument('value')
@click.option(
    '--format', '-f', 'fmt',
    type=FORMAT_CHOICE,
    default='auto',
    help='Encoding to parse as (default: auto-detect)'
)
def decode(value: str, fmt: str):
    """Decode an entity VALUE and show its RGB and HSV components."""
    try:
        color = ColorCodec.decode(value, ColorFormat(fmt))
    except ColorParseError as e:
        raise click.ClickException(f"{e.user_message}\n{e.recovery_hint}")

    detected = ColorCodec.detect_format(value)
    hsv = color_to_hsv(color)

    click.echo(f"Format: {detected.value if detected else fmt}")
    click.echo(f"RGB:    {color.r}, {color.g}, {color.b}")
    click.echo(f"Hex:    {color.to_hex()}")
    click.echo(f"HSV:    {hsv.h:.1f}°, {hsv.s:.3f}, {hsv.v:.3f}")


@click.command()
@click.argument('r', type=CHANNEL)
@click.argument('g', type=CHANNEL)
@click.argument('b', type=CHANNEL)
@click.option(
    '--format', '-f', 'fmt',
    type=OUTPUT_CHOICE,
    default='hex',
    help='Output encoding (default: hex)'
)
def encode(r: int, g: int, b: int, fmt: str):
    """Encode channels R G B as an entity value."""
    click.echo(ColorCodec.encode(Color(r=r, g=g, b=b), ColorFormat(fmt)))


@click.command()
@click.argument('x', type=float)
@click.argument('y', type=float)
@click.option(
    '--config', '-c', 'config_path',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help='Take wheel dimensions and output format from a card configuration'
)
@click.option('--radius', type=click.FloatRange(min=1), default=150.0, help='Wheel radius in px (default: 150)')
@click.option('--padding', type=click.FloatRange(min=0), default=5.0, help='Border padding in px (default: 5)')
@click.option(
    '--format', '-f', 'fmt',
    type=OUTPUT_CHOICE,
    default=None,
    help='Output encoding (default: hex, or the configured format)'
)
def pick(x: float, y: float, config_path: Path | None, radius: float, padding: float, fmt: str | None):
    """
    Show the color under a pointer offset X Y from the wheel center.

    Offsets are screen coordinates: x grows to the right, y grows downwards.
    Use "--" before negative offsets, e.g. "colorwheel pick -- 0 -100".
    """
    output_format = ColorFormat(fmt) if fmt else ColorFormat.HEX

    if config_path is not None:
        try:
            card_config = CardConfig.load(config_path)
        except ConfigurationError as e:
            raise click.ClickException(e.get_full_message())
        wheel = card_config.wheel_config()
        if fmt is None:
            output_format = card_config.format
    else:
        if padding >= radius:
            raise click.BadParameter("padding must be smaller than the radius", param_hint="--padding")
        wheel = WheelConfig(radius=radius, padding=padding)

    geometry = WheelGeometry(wheel)
    hsv, distance = geometry.point_to_color(Offset(x, y))
    color = geometry.color_at(Offset(x, y))
    marker = geometry.color_to_marker_position(hsv)

    click.echo(f"Hue:        {hsv.h:.1f}°")
    click.echo(f"Saturation: {hsv.s:.3f} (distance {distance:.1f}px)")
    click.echo(f"Marker:     ({marker.x:.1f}, {marker.y:.1f})")
    click.echo(f"Value:      {ColorCodec.encode(color, output_format)}")
