"""
FLASK APP ENTRY POINT - OTP GENERATION SERVER
=============================================

Sets up the Flask app, enables CORS and registers the /api/v1 blueprint.

Configuration (app.config), overridable with FLASK_-prefixed env vars,
e.g. FLASK_OTP_DEFAULT_DIGITS=8:
- OTP_DEFAULT_DIGITS     digits used when a request omits them
- OTP_DEFAULT_PERIOD     TOTP period used when a request omits it
- OTP_DEFAULT_ALGORITHM  algorithm name used when a request omits it
"""
import logging

from flask import Flask, jsonify
from flask_cors import CORS

from otpgen.otp_core import DEFAULT_DIGITS, DEFAULT_TIME_STEP

from .api import otp_api

DEFAULT_CONFIG = {
    'OTP_DEFAULT_DIGITS': DEFAULT_DIGITS,
    'OTP_DEFAULT_PERIOD': DEFAULT_TIME_STEP,
    'OTP_DEFAULT_ALGORITHM': 'SHA1',
}


def create_app(config=None) -> Flask:
    app = Flask(__name__)
    app.config.from_mapping(DEFAULT_CONFIG)
    app.config.from_prefixed_env()
    if config:
        app.config.from_mapping(config)

    # Frontends on another origin call the API directly
    CORS(app)

    app.register_blueprint(otp_api)

    @app.route('/', methods=['GET'])
    def index():
        return jsonify({
            "service": "otpgen",
            "endpoints": [
                "POST /api/v1/validate",
                "POST /api/v1/counter",
                "POST /api/v1/hotp",
                "POST /api/v1/totp",
            ],
        })

    return app


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    create_app().run(debug=True, host='0.0.0.0', port=5000)
