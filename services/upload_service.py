"""
services.upload_service - Pull exactly one CSV payload out of a request.

The caller passes Flask's request.files / request.form (or any mapping
with the same shape); nothing here touches the database.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import PurePath

import config
from import_engine.errors import UploadError
from import_engine.records import FileUpload

FILE_FIELD = "datafile"
TEXT_FIELD = "data"


def extract_upload(files, form) -> FileUpload:
    """
    Return the uploaded file or the pasted text, never both.
    Raises UploadError for every shape problem.
    """
    storage = files.get(FILE_FIELD)
    file_provided = storage is not None and bool(storage.filename)

    pasted = form.get(TEXT_FIELD) or ""
    pasted_provided = bool(pasted.strip())

    if file_provided and pasted_provided:
        raise UploadError(
            "please provide either an uploaded file OR pasted data, not both"
        )
    if not file_provided and not pasted_provided:
        raise UploadError("please provide either an uploaded file or pasted data")

    loaded_at = datetime.now(timezone.utc)
    if pasted_provided:
        return FileUpload(None, loaded_at, pasted, source="pasted")

    content = storage.read()
    validate_file(storage.filename, content)
    return FileUpload(storage.filename, loaded_at, content, source="file")


def upload_from_body(body: bytes) -> FileUpload:
    """Wrap a raw text/csv request body."""
    if not body or not body.strip():
        raise UploadError("empty body")
    return FileUpload(None, datetime.now(timezone.utc), body, source="body")


def validate_file(filename: str, content: bytes) -> None:
    if not content:
        raise UploadError("uploaded file is empty")

    ext = PurePath(filename).suffix.lower()
    if ext not in config.ALLOWED_EXTENSIONS:
        expected = ", ".join(sorted(config.ALLOWED_EXTENSIONS))
        raise UploadError(
            f"invalid extension: expected {expected}, got {ext or 'none'}"
        )
