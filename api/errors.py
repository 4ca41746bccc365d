"""
api.errors - JSON error handlers for the API blueprint.
"""

from flask import jsonify
from werkzeug.exceptions import HTTPException

from api import api_bp
from import_engine import ShipmentImportError

_MESSAGES = {
    400: "bad request",
    404: "not found",
    405: "method not allowed",
    413: "upload too large",
    500: "internal server error",
}


def json_error(e: HTTPException):
    """JSON body for an HTTP error; also used by the app for unrouted /api/v1 paths."""
    return jsonify({"error": _MESSAGES.get(e.code, e.name.lower())}), e.code


@api_bp.errorhandler(ShipmentImportError)
def api_import_failed(e):
    return jsonify({"error": str(e)}), e.status_code


@api_bp.errorhandler(HTTPException)
def api_http_error(e):
    return json_error(e)


@api_bp.errorhandler(500)
def api_server_error(_e):
    return jsonify({"error": _MESSAGES[500]}), 500
