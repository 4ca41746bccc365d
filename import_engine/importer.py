"""
import_engine.importer - Top-level orchestrator.

Coordinates csv_parser → converter → upsert and produces an ImportReport.
Nothing touches the database until the whole document has been parsed.
"""

from __future__ import annotations

import logging

import config
from db.engine import get_session
from import_engine.converter import convert_rows
from import_engine.csv_parser import read_rows
from import_engine.errors import ShipmentImportError
from import_engine.records import FileUpload
from import_engine.report import ImportReport
from import_engine.upsert import upsert_records

logger = logging.getLogger(__name__)


def run_import(upload: FileUpload) -> ImportReport:
    """
    Import one uploaded CSV document, all-or-nothing.

    Raises
    ------
    UploadError        empty document
    MalformedRowError  first row that fails to parse
    PersistenceError   database failure (transaction rolled back)
    """
    logger.info(f"Import started: {upload.label}")
    report = ImportReport(
        file_name=upload.file_name,
        source=upload.source,
        loaded_at=upload.loaded_at,
    )

    try:
        rows = read_rows(upload.content, config.CSV_DELIMITER)
        layout, records = convert_rows(rows)
        report.layout = layout.kind
        report.total_rows = len(records)

        session = get_session()
        try:
            report.imported = upsert_records(session, records)
        finally:
            session.close()
    except ShipmentImportError as exc:
        logger.warning(f"Import of {upload.label} failed: {exc}")
        raise

    logger.info(
        f"Import finished: {upload.label}, {report.imported} shipments "
        f"upserted ({report.layout} layout)"
    )
    return report
