"""
api.routes_shipments - /api/v1/shipments read endpoints.
"""

from flask import request, jsonify, abort

from api import api_bp
from db import get_session
from services.shipments_service import ShipmentsService
import config


@api_bp.route("/health")
def health():
    return jsonify({"ok": True})


@api_bp.route("/shipments")
def list_shipments():
    """
    GET /api/v1/shipments?limit=100&offset=0

    Shipments ordered by shipment number.
    """
    limit  = min(request.args.get("limit", config.API_DEFAULT_LIMIT, type=int),
                 config.API_MAX_LIMIT)
    offset = max(request.args.get("offset", 0, type=int), 0)
    limit  = max(limit, 0)

    session = get_session()
    try:
        shipments = ShipmentsService.list(session, limit=limit, offset=offset)
        return jsonify({
            "total": ShipmentsService.count(session),
            "offset": offset,
            "limit": limit,
            "shipments": [s.to_dict() for s in shipments],
        })
    finally:
        session.close()


@api_bp.route("/shipments/<int:shipment_number>")
def get_shipment(shipment_number: int):
    session = get_session()
    try:
        shipment = ShipmentsService.get(session, shipment_number)
        if shipment is None:
            abort(404)
        return jsonify(shipment.to_dict())
    finally:
        session.close()
