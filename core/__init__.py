"""Core functionality for saturation control.

This package contains:
- config: SaturationRange store and CLI settings
- sampler: Per-tick saturation sampling
- effect: Saturation effect render loop
- endpoint: Applying raw min/max updates to the range
- server: Flask app exposing the endpoints
- client: DeviceClient for talking to a device over HTTP
"""
