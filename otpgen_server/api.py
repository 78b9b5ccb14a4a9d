"""
OTP API ROUTES - FLASK BLUEPRINT (/api/v1)

Stateless endpoints over the otpgen core. The secret travels in the
request body as Base32 and is never stored or logged.

Examples:
curl -X POST http://localhost:5000/api/v1/hotp -H "Content-Type: application/json" \
     -d '{"secret": "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ", "counter": 1}'
curl -X POST http://localhost:5000/api/v1/totp -H "Content-Type: application/json" \
     -d '{"secret": "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ", "digits": 8, "time": 59}'
"""

import logging
import time

from flask import Blueprint, current_app, jsonify, request

from otpgen.errors import GenerationError
from otpgen.otp_core import decode_base32_secret, generate_password, resolve_counter, validate
from otpgen.types import Algorithm, Counter, Timer

logger = logging.getLogger(__name__)

otp_api = Blueprint('otp_api', __name__, url_prefix='/api/v1')


class InvalidRequest(ValueError):
    """Malformed request body."""


# --- Request parsing helpers -----------------------------------------------
def _json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidRequest("JSON body required")
    return data


def _number(data: dict, name: str, default=None, integer: bool = False):
    value = data.get(name, default)
    if value is None:
        raise InvalidRequest(f"'{name}' is required")
    allowed = int if integer else (int, float)
    if isinstance(value, bool) or not isinstance(value, allowed):
        kind = "an integer" if integer else "a number"
        raise InvalidRequest(f"'{name}' must be {kind}")
    return value


def _digits(data: dict) -> int:
    return _number(data, 'digits', current_app.config['OTP_DEFAULT_DIGITS'], integer=True)


def _algorithm(data: dict) -> Algorithm:
    name = data.get('algorithm', current_app.config['OTP_DEFAULT_ALGORITHM'])
    if not isinstance(name, str):
        raise InvalidRequest("'algorithm' must be a string")
    return Algorithm.from_name(name)


def _secret(data: dict) -> bytes:
    secret_b32 = data.get('secret')
    if not isinstance(secret_b32, str) or not secret_b32:
        raise InvalidRequest("'secret' (Base32) is required")
    return decode_base32_secret(secret_b32)


def _factor(data: dict):
    """Body shape: {"factor": {"counter": 5}} or {"factor": {"period": 30}}."""
    factor = data.get('factor')
    if not isinstance(factor, dict):
        raise InvalidRequest("'factor' must be an object with 'counter' or 'period'")
    if 'counter' in factor:
        return Counter(_number(factor, 'counter', integer=True))
    if 'period' in factor:
        return Timer(_number(factor, 'period'))
    raise InvalidRequest("'factor' must contain 'counter' or 'period'")


def _time(data: dict) -> float:
    if data.get('time') is None:
        return time.time()
    return _number(data, 'time')


# --- Error handling --------------------------------------------------------
@otp_api.errorhandler(ValueError)
def handle_value_error(e):
    body = {"error": str(e)}
    if isinstance(e, GenerationError):
        body["kind"] = e.kind.value
    logger.warning("Rejected %s %s: %s", request.method, request.path, e)
    return jsonify(body), 400


# --- Endpoints -------------------------------------------------------------
@otp_api.route('/validate', methods=['POST'])
def validate_config():
    """
    Check a generator configuration.
    Body: {"factor": {"period": 30}, "digits": 6, "algorithm": "SHA1"}
    """
    data = _json_body()
    factor = _factor(data)
    is_valid = validate(factor, b"", _algorithm(data), _digits(data))
    return jsonify({"valid": is_valid})


@otp_api.route('/counter', methods=['POST'])
def counter():
    """
    Resolve the counter for a factor.
    Body: {"factor": {"period": 30}, "time": 59}
    """
    data = _json_body()
    factor = _factor(data)
    return jsonify({"counter": resolve_counter(factor, _time(data))})


@otp_api.route('/hotp', methods=['POST'])
def hotp():
    """
    HOTP code for an explicit counter.
    Body: {"secret": "...", "counter": 1, "digits": 6, "algorithm": "SHA1"}
    """
    data = _json_body()
    secret = _secret(data)
    algorithm = _algorithm(data)
    digits = _digits(data)
    value = resolve_counter(Counter(_number(data, 'counter', integer=True)), 0)

    code = generate_password(algorithm, digits, secret, value)
    logger.info("HOTP generated: algorithm=%s digits=%d counter=%d", algorithm.name, digits, value)
    return jsonify({"code": code, "counter": value})


@otp_api.route('/totp', methods=['POST'])
def totp():
    """
    TOTP code for now, or for "time" when given.
    Body: {"secret": "...", "period": 30, "time": 59, "digits": 8, "algorithm": "SHA1"}
    """
    data = _json_body()
    secret = _secret(data)
    algorithm = _algorithm(data)
    digits = _digits(data)
    period = _number(data, 'period', current_app.config['OTP_DEFAULT_PERIOD'])
    now = _time(data)

    value = resolve_counter(Timer(period), now)
    code = generate_password(algorithm, digits, secret, value)
    remaining = int(period - (now % period))
    logger.info("TOTP generated: algorithm=%s digits=%d counter=%d", algorithm.name, digits, value)
    return jsonify({"code": code, "counter": value, "remaining": remaining})
