"""
ui.routes_import - CSV import upload page.
"""

import logging
from flask import request

from ui import ui_bp
from ui.template_set import render_view
from import_engine import run_import, ShipmentImportError
from services.upload_service import extract_upload

logger = logging.getLogger(__name__)


@ui_bp.route("/import", methods=["GET", "POST"])
def import_page():
    logger.info(f"importHandler called - Method: {request.method}, URL: {request.url}")

    if request.method == "GET":
        return render_view("import")

    try:
        upload = extract_upload(request.files, request.form)
        report = run_import(upload)
    except ShipmentImportError as exc:
        logger.warning(f"Import rejected: {exc}")
        return render_view("error", code=exc.status_code,
                           message=str(exc)), exc.status_code

    return render_view("success", message="Data Imported Successfully!",
                       report=report.to_dict())
