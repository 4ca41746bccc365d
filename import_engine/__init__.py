"""
import_engine - CSV import pipeline.

Public API:
    run_import(upload) → ImportReport
    convert_rows(rows) → (ColumnLayout, [ShipmentRecord])
    upsert_records(session, records) → int
"""

from import_engine.converter import convert_rows              # noqa: F401
from import_engine.errors import (                             # noqa: F401
    MalformedRowError,
    PersistenceError,
    ShipmentImportError,
    UploadError,
)
from import_engine.importer import run_import                  # noqa: F401
from import_engine.records import FileUpload, ShipmentRecord   # noqa: F401
from import_engine.report import ImportReport                  # noqa: F401
from import_engine.upsert import upsert_records                # noqa: F401
