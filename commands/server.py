"""Device server command.

Runs the HTTP endpoints and the saturation effect loop against one shared
SaturationRange.
"""

import threading

import click

from core.config import SaturationRange, load_settings
from core.effect import DEFAULT_HUE, DEFAULT_NUM_LEDS, SaturationEffect
from core.server import create_app


def start_effect_thread(effect: SaturationEffect) -> tuple[threading.Thread, threading.Event]:
    """Start the effect render loop on a daemon thread.

    Returns:
        Tuple of (thread, stop_event)
    """
    stop_event = threading.Event()
    thread = threading.Thread(target=effect.run, args=(stop_event,), daemon=True,
                              name='saturation-effect')
    thread.start()
    return thread, stop_event


@click.command(name='serve')
@click.option('--host', help='Address to bind (default from settings)')
@click.option('--port', '-p', type=int, help='Port to listen on (default from settings)')
@click.option('--leds', '-n', type=click.IntRange(1, 2000), default=DEFAULT_NUM_LEDS,
              help='Number of LEDs rendered per frame')
@click.option('--hue', type=click.IntRange(0, 255), default=DEFAULT_HUE, help='Effect hue (0-255)')
def serve_command(host: str | None, port: int | None, leds: int, hue: int):
    """Serve the saturation endpoints and run the effect loop.

    \b
    Endpoints:
      GET /set_saturation?min=<0-255>&max=<0-255>
      GET /config
      GET /status
    """
    settings = load_settings()
    host = host or settings['host']
    port = port or settings['port']

    saturation_range = SaturationRange()
    effect = SaturationEffect(saturation_range, num_leds=leds, hue=hue)
    thread, stop_event = start_effect_thread(effect)

    click.secho(f"✓ Effect running on {leds} LEDs (hue {hue})", fg='green')
    click.echo(f"  Saturation:  {saturation_range.get_min()}-{saturation_range.get_max()}")
    click.echo(f"  Listening:   http://{host}:{port}")
    click.echo()

    app = create_app(saturation_range)
    try:
        app.run(host=host, port=port)
    finally:
        stop_event.set()
        thread.join(timeout=1)
        click.echo(f"Effect stopped after {effect.frames_rendered} frame(s)")
