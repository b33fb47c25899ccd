# game_backend/utils/general.py
"""
General-purpose helpers shared by every route.

This module contains request parsing (case-insensitive JSON bodies, path
parameters), service result handling, and the app-wide error handlers
that keep every response in the same JSON envelope.
"""

from flask import jsonify, request, current_app
from werkzeug.exceptions import HTTPException
from game_backend.errors import ApiError, MalformedRequest, InternalUnexpected

# Signed 32-bit range of the INT columns in UserInfo.
INT_MIN = -2**31
INT_MAX = 2**31 - 1


# --- REQUEST PARSING ---

def read_json_body():
    """
    Parses the request body as a JSON object and lower-cases its keys.

    Unity clients do not always send a JSON content type, so the body is
    parsed regardless of the header. Anything that is not an object is
    rejected.
    """
    data = request.get_json(force=True, silent=True)
    if not isinstance(data, dict):
        raise MalformedRequest()
    return {str(key).lower(): value for key, value in data.items()}


def get_string(data, *names):
    """Returns the first non-blank string found under any of names."""
    for name in names:
        value = data.get(name.lower())
        if isinstance(value, str) and value.strip():
            try:
                value.encode('utf-8')
            except UnicodeEncodeError:
                # Lone surrogates survive JSON decoding but not hashing or storage.
                raise MalformedRequest() from None
            return value
    raise MalformedRequest()


def get_int(data, name, required=True):
    """
    Returns data[name] as an int. Booleans, non-integral numbers and
    values outside the 32-bit INT column range are rejected. A missing key returns None when not required.
    """
    key = name.lower()
    if key not in data or data[key] is None:
        if required:
            raise MalformedRequest()
        return None

    value = data[key]
    if isinstance(value, bool):
        raise MalformedRequest()
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, int) or not INT_MIN <= value <= INT_MAX:
        raise MalformedRequest()
    return value


def require_path_param(value):
    """Rejects an absent or blank path parameter."""
    if value is None or not str(value).strip():
        raise MalformedRequest()
    return str(value).strip()


# --- RESPONSE HANDLING ---

def _handle_service_result(result, success_status=200, default_error_status=500):
    """
    Parses the result from a service function.
    If it's a tuple (error_dict, status_code), it uses the custom status code.
    Otherwise, it assumes success (success_status) or uses the default error status.

    Adds 'error_code' field to error responses for structured client handling.
    """
    # Check if the result is a tuple (error_dict, status_code)
    if isinstance(result, tuple) and len(result) == 2:
        error_dict, status_code = result
        if not error_dict.get("success", True):
            error_dict["error_code"] = error_dict.get("error_code", status_code)
        return jsonify(error_dict), status_code

    if result.get("success"):
        return jsonify(result), success_status
    else:
        result["error_code"] = result.get("error_code", default_error_status)
        return jsonify(result), default_error_status


def register_error_handlers(app):
    """Converts anything escaping a route into the failure envelope."""

    @app.errorhandler(ApiError)
    def handle_api_error(error):
        current_app.logger.warning(
            f"{request.method} {request.path} rejected with {error.status_code}: {type(error).__name__}"
        )
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        # Routing-level failures (unknown route, wrong method)
        body = {"success": False, "error": error.name, "error_code": error.code}
        # Keep headers such as Allow on 405; the body is JSON, not HTML.
        headers = [(name, value) for name, value in error.get_headers() if name.lower() != 'content-type']
        return jsonify(body), error.code, headers

    @app.errorhandler(Exception)
    def handle_unexpected(error):
        current_app.logger.error(
            f"Unhandled error on {request.method} {request.path}: {str(error)}", exc_info=True
        )
        return jsonify(InternalUnexpected().to_dict()), 500
