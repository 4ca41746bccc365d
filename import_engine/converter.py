"""
import_engine.converter - Apply the row parser across a whole document.
"""

from __future__ import annotations

from import_engine.errors import UploadError
from import_engine.field_map import ColumnLayout, resolve_layout
from import_engine.records import ShipmentRecord
from import_engine.row_processor import parse_row


def convert_rows(rows: list[list[str]]) -> tuple[ColumnLayout, list[ShipmentRecord]]:
    """
    Turn every data row into a ShipmentRecord.

    rows[0] is the header; it picks the layout and is skipped.  The first
    malformed row aborts the batch (MalformedRowError propagates).
    """
    if not rows:
        raise UploadError("CSV has no header row or is empty")

    layout = resolve_layout(rows[0])
    records = [
        parse_row(row_number, row, layout)
        for row_number, row in enumerate(rows[1:], start=2)   # row 1 = header
    ]
    return layout, records
