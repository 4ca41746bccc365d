"""
import_engine.csv_parser - Low-level CSV reading and cleaning.

Responsibilities:
  • BOM removal (UTF-8 / UTF-8-SIG)
  • Delimiter selection (comma, semicolon, or sniffed)
  • Empty-line skipping (lines with delimiters are records)
  • Returns the document as a list of records
"""

from __future__ import annotations

import csv
import io

from import_engine.errors import MalformedRowError

DELIMITERS = (",", ";")


def read_rows(raw: str | bytes, delimiter: str = ",") -> list[list[str]]:
    """
    Accept raw file content (bytes or str) and return every non-empty
    record.  Returns [] if content is empty.
    """
    text = _decode(raw)
    if not text.strip():
        return []

    if delimiter == "auto":
        delimiter = sniff_delimiter(text)
    elif delimiter not in DELIMITERS:
        raise ValueError(f"unsupported CSV delimiter {delimiter!r}")

    reader = csv.reader(io.StringIO(text, newline=""), delimiter=delimiter, strict=True)
    rows = []
    try:
        for record in reader:
            # only truly empty lines; ",,," is a record and must parse
            if not record:
                continue
            rows.append(record)
    except csv.Error as exc:
        # record number, header = 1
        raise MalformedRowError(len(rows) + 1, None, f"CSV syntax error: {exc}") from exc
    return rows


def sniff_delimiter(text: str) -> str:
    """Pick ',' or ';' by counting them on the header line."""
    header = text.lstrip().splitlines()[0]
    return ";" if header.count(";") > header.count(",") else ","


def _decode(raw: str | bytes) -> str:
    if isinstance(raw, bytes):
        # Strip UTF-8 BOM
        if raw.startswith(b"\xef\xbb\xbf"):
            raw = raw[3:]
        return raw.decode("utf-8", errors="ignore")
    if raw.startswith("\ufeff"):
        return raw[1:]
    return raw
