"""
import_engine.row_processor - Validate and transform one CSV row into a
ShipmentRecord.

Single-responsibility: given a row and the batch's ColumnLayout, either
return a ShipmentRecord or raise MalformedRowError.
"""

from __future__ import annotations

import re
from datetime import datetime

import config
from import_engine.errors import MalformedRowError
from import_engine.field_map import BOOL, DATETIME, INT, TEXT, ColumnLayout, ColumnSpec
from import_engine.records import ShipmentRecord

_INT_RE = re.compile(r"[+-]?\d+")

# SQL INTEGER columns are 32-bit
INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1


def parse_int(value: str) -> int | None:
    if value == "":
        return None
    if not _INT_RE.fullmatch(value):
        raise ValueError(f"invalid integer {value!r}")
    number = int(value)
    if not INT_MIN <= number <= INT_MAX:
        raise ValueError(f"integer {value} out of range {INT_MIN}..{INT_MAX}")
    return number


def parse_timestamp(value: str, fmt: str | None = None) -> datetime | None:
    if value == "":
        return None
    fmt = fmt or config.TIMESTAMP_FORMAT
    parsed = datetime.strptime(value, fmt)
    # strptime accepts unpadded fields ("2024-1-1 1:5"); the layout does not
    if parsed.strftime(fmt) != value:
        raise ValueError(f"time data {value!r} does not match format {fmt!r}")
    return parsed


def parse_text(value: str) -> str | None:
    return value or None


def parse_flag(value: str) -> bool:
    # Anything but a case-insensitive "true" is false, including ""
    return value.lower() == "true"


_CONVERTERS = {
    INT: parse_int,
    DATETIME: parse_timestamp,
    TEXT: parse_text,
    BOOL: parse_flag,
}


def parse_cell(spec: ColumnSpec, value: str):
    value = value.strip()
    if spec.required and value == "":
        raise ValueError("value is required")
    return _CONVERTERS[spec.kind](value)


def parse_row(row_number: int, row: list[str], layout: ColumnLayout) -> ShipmentRecord:
    """
    Convert one CSV record to a ShipmentRecord.

    row_number is the 1-based record number in the file (header = 1) and
    only feeds error messages.
    """
    if len(row) != layout.width:
        raise MalformedRowError(
            row_number, None,
            f"expected {layout.width} columns, got {len(row)}",
        )

    values = {}
    for pos, spec in layout.columns:
        try:
            values[spec.attr] = parse_cell(spec, row[pos])
        except ValueError as exc:
            raise MalformedRowError(row_number, spec.header, exc) from exc

    return ShipmentRecord(**values)
