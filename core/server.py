"""Device-side HTTP endpoints.

Routes:
- /set_saturation?min=&max= : store clamped saturation bounds
- /config : current bounds and regeneration flag
- /status : plain-text endpoint listing
"""

from flask import Flask, jsonify, request

from core.config import SaturationStore
from core.endpoint import apply_saturation_update

STATUS_TEXT = """Saturation Control Status
Available Commands:
  GET /set_saturation?min=<0-255>&max=<0-255> - Set saturation bounds
  GET /config - View configuration
  GET /status - View status
"""


def create_app(saturation_range: SaturationStore) -> Flask:
    """Create the Flask app serving one saturation range.

    Args:
        saturation_range: The process-wide SaturationRange

    Returns:
        Configured Flask application
    """
    app = Flask(__name__)
    app.config['SATURATION_RANGE'] = saturation_range

    @app.route('/set_saturation')
    def set_saturation():
        bounds = apply_saturation_update(
            app.config['SATURATION_RANGE'],
            request.args.get('min'),
            request.args.get('max'),
        )
        return jsonify(success=True, **bounds)

    @app.route('/config')
    def config():
        store = app.config['SATURATION_RANGE']
        return jsonify(
            min=store.get_min(),
            max=store.get_max(),
            needs_regeneration=store.needs_regeneration(),
        )

    @app.route('/status')
    def status():
        return STATUS_TEXT, 200, {'Content-Type': 'text/plain; charset=utf-8'}

    return app
