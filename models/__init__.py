"""Data models and utility functions.

This package contains:
- types: TypedDict definitions
- validation: Clamping of raw saturation input
- colour: HSV to RGB conversion and gradient preview
- utils: Utility functions (get_client, suggest_commands, etc.)
"""
