"""
ui.routes_pages - Landing, help and export pages.
"""

import logging
from flask import request

from ui import ui_bp
from ui.template_set import render_view
from db import get_session
from services.shipments_service import ShipmentsService
from import_engine.field_map import SHIPMENT_COLUMNS, PLAIN_WIDTH, INDEXED_WIDTH
import config

logger = logging.getLogger(__name__)


@ui_bp.route("/")
def landing_page():
    session = get_session()
    try:
        total = ShipmentsService.count(session)
    finally:
        session.close()
    return render_view("landing", total=total)


@ui_bp.route("/help")
def help_page():
    return render_view(
        "help",
        columns=SHIPMENT_COLUMNS,
        plain_width=PLAIN_WIDTH,
        indexed_width=INDEXED_WIDTH,
        timestamp_format=config.TIMESTAMP_FORMAT,
        delimiter=config.CSV_DELIMITER,
        max_upload_mb=config.MAX_UPLOAD_BYTES >> 20,
    )


@ui_bp.route("/export")
def export_page():
    logger.info(f"exportHandler called - Method: {request.method}, URL: {request.url}")
    return render_view("export")
