"""
Control commands for the saturation bounds.

Includes set-saturation, show-config, and a terminal gradient preview.
"""

import click
from models.colour import DEFAULT_PREVIEW_HUE, format_slider_value, gradient_swatches
from models.utils import get_client, swatch_line


@click.command(context_settings={'ignore_unknown_options': True})
@click.argument('sat_min')
@click.argument('sat_max')
@click.option('--url', '-u', help='Device base URL (overrides configured URL)')
def set_saturation_command(sat_min: str, sat_max: str, url: str | None):
    """Set minimum and maximum saturation (0-255).

    Values are clamped by the device; the stored values are shown.

    \b
    Examples:
      saturation-control set-saturation 100 220
      saturation-control set-saturation 0 255 --url http://192.168.1.100
    """
    client = get_client(url)
    bounds = client.set_saturation(sat_min, sat_max)
    if not bounds:
        click.secho("✗ Failed to set saturation", fg='red')
        return

    click.secho(f"✓ Saturation set to {bounds['min']}-{bounds['max']}", fg='green')
    if (str(bounds['min']), str(bounds['max'])) != (sat_min.strip(), sat_max.strip()):
        click.secho(f"  Requested {sat_min}-{sat_max}, device stored clamped values", fg='yellow')
    if bounds['min'] > bounds['max']:
        click.secho("  Note: minimum is above maximum", fg='yellow')


@click.command()
@click.option('--url', '-u', help='Device base URL (overrides configured URL)')
def show_config_command(url: str | None):
    """Show current saturation bounds and regeneration flag."""
    client = get_client(url)
    config = client.get_config()
    if not config:
        click.secho("✗ Failed to read device configuration", fg='red')
        return

    click.echo()
    click.secho("=== Saturation Configuration ===", fg='cyan', bold=True)
    click.echo(f"  Min saturation:  {config['min']}")
    click.echo(f"  Max saturation:  {config['max']}")
    pending = 'yes' if config['needs_regeneration'] else 'no'
    click.echo(f"  Regeneration:    {pending}")
    click.echo()


@click.command()
@click.option('--min', 'sat_min', default='128', help='Minimum saturation (0-255)')
@click.option('--max', 'sat_max', default='255', help='Maximum saturation (0-255)')
@click.option('--width', '-w', type=click.IntRange(0, 500), default=64, help='Gradient width in cells')
@click.option('--hue', type=click.IntRange(0, 255), default=DEFAULT_PREVIEW_HUE, help='Hue (0-255)')
def preview_command(sat_min: str, sat_max: str, width: int, hue: int):
    """Preview a saturation gradient as coloured terminal cells.

    \b
    Examples:
      saturation-control preview --min 100 --max 200
      saturation-control preview --hue 0 --width 40
    """
    min_text = format_slider_value(sat_min)
    max_text = format_slider_value(sat_max)

    colours = gradient_swatches(int(min_text), int(max_text), width, hue)
    click.echo(f"Saturation {min_text} → {max_text} (hue {hue})")
    click.echo(swatch_line(colours))
    if width > len(min_text) + len(max_text):
        click.echo(min_text + " " * (width - len(min_text) - len(max_text)) + max_text)
