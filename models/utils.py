"""Utility functions for Saturation Control.

This module contains helper functions used across the application:
- get_client: Helper to create a DeviceClient from settings or an override URL
- command_match_score, suggest_commands: Typo suggestions for CLI commands
- swatch_line: Render colours as a line of terminal swatches
"""

import click

from models.types import RGBColour


def get_client(url: str | None = None):
    """Get a DeviceClient for the given URL, or the configured device URL.

    Args:
        url: Device base URL overriding the settings file

    Returns:
        A DeviceClient
    """
    # Import here to avoid circular dependency
    from core.client import DeviceClient
    from core.config import load_settings

    base_url = url or load_settings()['device_url']
    return DeviceClient(base_url)


def swatch_line(colours: list[RGBColour], char: str = ' ') -> str:
    """Render colours as terminal background-coloured cells."""
    return ''.join(
        click.style(char, bg=(colour['r'], colour['g'], colour['b']))
        for colour in colours
    )


def command_match_score(typed: str, command: str) -> int:
    """Score how closely a typed command name matches a registered one.

    Args:
        typed: Name the user typed
        command: Registered command name (e.g. 'set-saturation')

    Returns:
        100 for an exact match, 80 when either is a prefix of the other or of
        one of the command's dash-separated words, 60 for a substring, up to 50
        for an in-order character match, 0 when nothing lines up
    """
    typed = typed.lower()
    command = command.lower()

    if typed == command:
        return 100
    words = [command, *command.split('-')]
    if any(word.startswith(typed) or typed.startswith(word) for word in words if word):
        return 80
    if typed in command or command in typed:
        return 60

    # Count typed characters found in order within the command name
    remaining = iter(command)
    matches = sum(1 for char in typed if char in remaining)
    score = matches * 50 // max(len(typed), len(command))
    return score if score > 20 else 0


def suggest_commands(typed: str, commands: list[str], limit: int = 3) -> list[str]:
    """Registered commands closest to a mistyped name, best first."""
    if not typed:
        return []
    scored = [(command_match_score(typed, command), command) for command in commands]
    ranked = sorted((item for item in scored if item[0] > 0), key=lambda item: -item[0])
    return [command for _, command in ranked[:limit]]
