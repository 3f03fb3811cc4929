"""DeviceClient class for talking to a saturation-control device over HTTP.

This module contains the URL builders used by the web interface and the
client that the CLI commands use to read and update the saturation bounds.
"""

import requests
import click

from models.types import ConfigSnapshot, SaturationBounds

REQUEST_TIMEOUT = 5  # seconds


def build_set_saturation_url(base_url: str, sat_min, sat_max) -> str:
    """Build the set_saturation URL, e.g. http://host/set_saturation?min=100&max=220."""
    return f"{base_url.rstrip('/')}/set_saturation?min={sat_min}&max={sat_max}"


def build_config_url(base_url: str) -> str:
    """Build the config URL, e.g. http://host/config."""
    return f"{base_url.rstrip('/')}/config"


class DeviceClient:
    """Reads and updates saturation bounds on a device."""

    def __init__(self, base_url: str):
        """Initialise DeviceClient.

        Args:
            base_url: Device base URL (e.g. http://192.168.1.100:80)
        """
        self.base_url = base_url.rstrip('/')
        self.session = requests.Session()

    def _get(self, url: str) -> dict | None:
        """GET a URL and decode its JSON body."""
        try:
            response = self.session.get(url, timeout=REQUEST_TIMEOUT)
            response.raise_for_status()
            return response.json()
        except requests.exceptions.RequestException as e:
            click.echo(f"Device request error: {e}", err=True)
            # Show response body for debugging
            if getattr(e, 'response', None) is not None:
                click.echo(f"Response body: {e.response.text}", err=True)
            return None
        except ValueError as e:
            click.echo(f"Invalid response from device: {e}", err=True)
            return None

    def set_saturation(self, sat_min, sat_max) -> SaturationBounds | None:
        """Submit saturation bounds.

        Returns:
            The bounds the device stored (after clamping), or None on failure
        """
        result = self._get(build_set_saturation_url(self.base_url, sat_min, sat_max))
        if not result or 'min' not in result or 'max' not in result:
            return None
        return {'min': result['min'], 'max': result['max']}

    def get_config(self) -> ConfigSnapshot | None:
        """Fetch the current bounds and regeneration flag."""
        result = self._get(build_config_url(self.base_url))
        if not result or 'min' not in result or 'max' not in result:
            return None
        return {
            'min': result['min'],
            'max': result['max'],
            'needs_regeneration': result.get('needs_regeneration', False),
        }
