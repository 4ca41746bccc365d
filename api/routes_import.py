"""
api.routes_import - /api/v1/import endpoint.

Accepts CSV via multipart file upload, a pasted-text form field, or the
raw request body.
"""

from flask import request, jsonify

from api import api_bp
from import_engine import run_import
from services.upload_service import extract_upload, upload_from_body


@api_bp.route("/import", methods=["POST"])
def api_import_csv():
    """
    POST /api/v1/import

    Multipart: field 'datafile', or form field 'data' with CSV text.
    Or: raw CSV as request body (Content-Type: text/csv).
    """
    content_type = request.content_type or ""
    if "multipart" in content_type or "form-urlencoded" in content_type:
        upload = extract_upload(request.files, request.form)
    else:
        upload = upload_from_body(request.get_data())

    report = run_import(upload)
    return jsonify(report.to_dict())
