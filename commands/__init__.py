"""CLI command modules.

This package contains:
- control: Saturation commands (set-saturation, show-config, preview)
- server: Device server command (serve)
- setup: Setup, configure and help commands
"""
