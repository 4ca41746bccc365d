#!/usr/bin/env python3
"""
ShipDB - Export-shipment CSV import web application
===================================================

Single-command run:  python main.py

See config.py for all environment-variable tunables.
"""

import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

from flask import Flask, request
from werkzeug.exceptions import HTTPException

import config
from config import ConfigError
from db import init_db, get_session
from api import api_bp
from api.errors import json_error
from ui import ui_bp
from ui.template_set import EXTENSION_KEY, TemplateNotRegistered, TemplateSet, render_view

logger = logging.getLogger("shipdb")


def create_app() -> Flask:
    """
    Flask application factory.

    Raises ConfigError when the database environment or a template is
    missing.
    """
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = Flask(
        __name__,
        template_folder=str(config.TEMPLATES_DIR),
        static_folder=str(config.STATIC_DIR),
    )
    app.secret_key = config.SECRET
    app.config["MAX_CONTENT_LENGTH"] = config.MAX_UPLOAD_BYTES

    config.validate()

    # ── Initialise database ─────────────────────────────────────────
    init_db(config.database_url())

    # ── Load the view set ───────────────────────────────────────────
    app.extensions[EXTENSION_KEY] = TemplateSet.load(app.jinja_env)

    # ── Register blueprints ─────────────────────────────────────────
    app.register_blueprint(api_bp)
    app.register_blueprint(ui_bp)

    # ── Error handlers ──────────────────────────────────────────────
    @app.errorhandler(TemplateNotRegistered)
    def _missing_view(e):
        logger.error(f"Rendering failed: {e}")
        return "Internal Server Error", 500

    @app.errorhandler(HTTPException)
    def _http_error(e):
        # routing errors (404/405) never reach the api blueprint handlers
        if request.path.startswith(api_bp.url_prefix + "/"):
            return json_error(e)
        return render_view("error", code=e.code, message=e.description), e.code

    @app.errorhandler(500)
    def _500(e):
        logger.error(f"Unhandled error: {getattr(e, 'original_exception', e)}")
        return render_view("error", code=500,
                           message="Internal server error"), 500

    return app


def _seed_if_empty():
    """Auto-import the seed CSV when the table is empty."""
    from import_engine import FileUpload, ShipmentImportError, run_import
    from services.shipments_service import ShipmentsService

    if not config.CSV_SEED_PATH:
        return

    session = get_session()
    try:
        count = ShipmentsService.count(session)
    finally:
        session.close()

    if count > 0:
        print(f"\n  Database has {count} shipments.")
        return

    seed = Path(config.CSV_SEED_PATH)
    if not seed.is_file():
        print(f"\n  No seed CSV at {seed} - starting empty.")
        return

    print(f"\n  Database empty → importing {seed.name} …")
    upload = FileUpload(seed.name, datetime.now(timezone.utc),
                        seed.read_bytes(), source="seed")
    try:
        report = run_import(upload)
    except ShipmentImportError as exc:
        print(f"  Seed import failed: {exc}")
        return
    print(f"  Done: {report.imported} shipments imported")


def main():
    print("=" * 56)
    print("  ShipDB - Export Shipments")
    print("=" * 56)

    try:
        app = create_app()
    except ConfigError as exc:
        print(f"FATAL: {exc}")
        sys.exit(1)

    _seed_if_empty()

    print(f"\n  http://{config.HOST}:{config.PORT}")
    print("=" * 56)

    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG)


if __name__ == "__main__":
    main()
