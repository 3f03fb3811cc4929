#!/usr/bin/env python3
"""
Saturation Control CLI
Serve and adjust the saturation bounds of a networked lighting effect.
"""

import click

# Import commands from command modules
from commands.setup import ColouredGroup, help_command, setup_command, configure_command
from commands.server import serve_command
from commands.control import (
    set_saturation_command,
    show_config_command,
    preview_command
)


@click.group(
    cls=ColouredGroup,
    context_settings={
        'help_option_names': ['-h', '--help'],
        'max_content_width': 999  # Very wide to prevent wrapping on wide terminals
    }
)
@click.version_option(version='0.1.0', prog_name='Saturation Control')
def cli():
    """Saturation Control CLI - Manage the saturation range of a lighting effect.

Run 'serve' on the device to expose the endpoints and render loop.
Run 'set-saturation MIN MAX' to update the bounds (values are clamped to 0-255).

Use 'help' for a quick reference of all commands.
Use 'COMMAND -h' or 'COMMAND --help' for detailed help on a specific command."""
    pass


# Register setup and help commands
cli.add_command(help_command)
cli.add_command(setup_command, name='setup')
cli.add_command(configure_command, name='configure')

# Register device command
cli.add_command(serve_command, name='serve')

# Register control commands
cli.add_command(set_saturation_command, name='set-saturation')
cli.add_command(show_config_command, name='show-config')
cli.add_command(preview_command, name='preview')


if __name__ == '__main__':
    cli()
