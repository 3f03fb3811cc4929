"""
Setup and help commands for Saturation Control CLI.

Contains custom Click group class for coloured help output and typo suggestions.
"""

from dataclasses import dataclass

import click
from core.config import USER_CONFIG_FILE, load_settings, save_settings
from models.utils import get_client, suggest_commands


@dataclass(frozen=True)
class CommandSection:
    """Represents a section in the help command."""
    name: str
    icon: str
    commands: list[tuple[str, str]]


class ColouredGroup(click.Group):
    """Command group with coloured command listing and typo suggestions."""

    def visible_commands(self, ctx) -> list[tuple[str, click.Command]]:
        """Registered, non-hidden commands in listing order."""
        found = [(name, self.get_command(ctx, name)) for name in self.list_commands(ctx)]
        return [(name, cmd) for name, cmd in found if cmd is not None and not cmd.hidden]

    def resolve_command(self, ctx, args):
        """Resolve a command, listing close matches when the name is unknown."""
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError as e:
            typed = args[0] if args else ''
            names = [name for name, _ in self.visible_commands(ctx)]
            suggestions = suggest_commands(typed, names)
            if 'No such command' not in str(e) or not suggestions:
                raise
            lines = [f"Error: No such command '{typed}'.", "",
                     click.style("Did you mean one of these?", fg='yellow')]
            lines += [click.style(f"  • {name}", fg='green') for name in suggestions]
            raise click.UsageError("\n".join(lines) + "\n")

    def format_commands(self, ctx, formatter):
        """List commands with green names and dimmed short help."""
        rows = [(name, cmd.get_short_help_str(limit=500)) for name, cmd in self.visible_commands(ctx)]
        if not rows:
            return

        width = max(16, *(len(name) for name, _ in rows))
        formatter.write_paragraph()
        formatter.write_text(click.style('Commands:', fg='yellow', bold=True))
        with formatter.indentation():
            for name, help_text in rows:
                formatter.write_text(click.style(name.ljust(width), fg='green') + '  ' +
                                     click.style(help_text, fg='white', dim=True))


@click.command(name='help')
def help_command():
    """Display help and common commands."""
    click.echo()
    click.secho("Saturation Control - Quick Reference", fg='cyan', bold=True)
    click.echo()

    COMMAND_SECTIONS = [
        CommandSection(
            name="DEVICE",
            icon="💡",
            commands=[
                ("serve", "Run the saturation endpoints and effect loop"),
                ("serve --port <port> --leds <n>", "Serve on a custom port with n LEDs"),
            ]
        ),
        CommandSection(
            name="CONTROL",
            icon="🎛️",
            commands=[
                ("set-saturation <min> <max>", "Set saturation bounds (0-255, clamped)"),
                ("show-config", "Show current bounds and regeneration flag"),
                ("preview --min <n> --max <n>", "Show the saturation gradient in the terminal"),
            ]
        ),
        CommandSection(
            name="CONFIGURATION",
            icon="📋",
            commands=[
                ("setup", "Show settings and test the device connection"),
                ("configure --url <url>", "Save the device URL"),
            ]
        ),
    ]

    for section in COMMAND_SECTIONS:
        click.secho(f"{section.icon} {section.name}", fg='yellow', bold=True)
        for cmd, desc in section.commands:
            click.echo("  ", nl=False)
            click.secho(cmd, fg='green', nl=False)
            click.echo(" " * (34 - len(cmd)) + "  " + desc)
        click.echo()

    click.echo("Use 'COMMAND -h' for detailed help on a specific command.")
    click.echo()


@click.command()
@click.option('--url', '-u', help='Device base URL (e.g. http://192.168.1.100:80)')
@click.option('--host', help='Address the serve command binds to')
@click.option('--port', '-p', type=int, help='Port the serve command listens on')
def configure_command(url: str | None, host: str | None, port: int | None):
    """Save device and server settings.

    \b
    Examples:
      saturation-control configure --url http://192.168.1.100:80
      saturation-control configure --host 127.0.0.1 --port 8000
    """
    settings = load_settings()

    if url is None and host is None and port is None:
        url = click.prompt("Device URL", default=settings['device_url'])

    if url is not None:
        settings['device_url'] = url.rstrip('/')
    if host is not None:
        settings['host'] = host
    if port is not None:
        settings['port'] = port

    save_settings(settings)
    click.secho(f"✓ Settings saved to {USER_CONFIG_FILE}", fg='green')
    click.echo(f"  Device URL:  {settings['device_url']}")
    click.echo(f"  Serve on:    {settings['host']}:{settings['port']}")


@click.command()
def setup_command():
    """Show current settings and test the device connection."""
    settings = load_settings()

    click.echo()
    click.secho("=== Saturation Control Configuration ===", fg='cyan', bold=True)
    click.echo()

    click.echo(click.style("Settings", fg='cyan', bold=True))
    if USER_CONFIG_FILE.exists():
        click.echo(f"   Path:        {USER_CONFIG_FILE}")
    else:
        click.echo(f"   Path:        {USER_CONFIG_FILE} (does not exist, using defaults)")
    click.echo(f"   Device URL:  {settings['device_url']}")
    click.echo(f"   Serve on:    {settings['host']}:{settings['port']}")
    click.echo()

    click.echo(click.style("Connection Test", fg='cyan', bold=True))
    click.echo("Testing connection to device...")

    config = get_client(settings['device_url']).get_config()
    if config:
        click.secho(f"✓ Connected to device at {settings['device_url']}", fg='green', bold=True)
        click.echo(f"  Saturation:  {config['min']}-{config['max']}")
    else:
        click.secho("✗ Connection failed", fg='red', bold=True)
        click.echo()
        click.echo("Check the device is running, or reconfigure:")
        click.echo(click.style("  saturation-control configure --url <url>", fg='green', bold=True))

    click.echo()
