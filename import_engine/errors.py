"""
import_engine.errors - Failure taxonomy for one import request.

Every error carries the HTTP status the request boundary should answer
with; the message is shown to the user as-is.
"""

from __future__ import annotations


class ShipmentImportError(Exception):
    """Base class for everything that aborts an import."""

    status_code = 400


class UploadError(ShipmentImportError):
    """The upload itself is unusable (missing/extra field, empty, wrong type)."""


class MalformedRowError(ShipmentImportError):
    """A CSV record could not be turned into a ShipmentRecord."""

    def __init__(self, row: int, column: str | None, cause: str | Exception):
        self.row = row
        self.column = column
        self.cause = cause
        where = f"row {row}" if column is None else f"row {row}, column {column}"
        super().__init__(f"{where}: {cause}")


class PersistenceError(ShipmentImportError):
    """The database rejected the batch; the transaction was rolled back."""

    status_code = 500
