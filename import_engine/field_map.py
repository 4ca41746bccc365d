"""
import_engine.field_map - CSV column ↔ ExportShipment attribute mapping.

SHIPMENT_COLUMNS is the canonical column order of an export file.  The row
parser never indexes rows directly; it walks a ColumnLayout built from the
header, so files whose headers carry the known names may reorder columns
freely.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from import_engine.errors import MalformedRowError

INT      = "int"
TEXT     = "text"
DATETIME = "datetime"
BOOL     = "bool"


@dataclass(frozen=True)
class ColumnSpec:
    attr: str                 # ExportShipment / ShipmentRecord attribute
    header: str               # header used by the export files
    label: str                # CamelCase field name
    kind: str
    required: bool = False

    def aliases(self) -> frozenset[str]:
        return frozenset(_normalise(n) for n in (self.attr, self.header, self.label))


SHIPMENT_COLUMNS: tuple[ColumnSpec, ...] = (
    ColumnSpec("shipment_number",     "SpedNr",        "ShipmentNumber",    INT, required=True),
    ColumnSpec("air_waybill",         "AWB",           "AirWaybill",        TEXT),
    ColumnSpec("registration_date",   "RegDate",       "RegistrationDate",  DATETIME),
    ColumnSpec("created_date",        "CreatedDate",   "CreatedDate",       DATETIME),
    ColumnSpec("arrival_scan_time",   "ArrivalScan",   "ArrivalScanTime",   DATETIME),
    ColumnSpec("gateway_code",        "GTW",           "GatewayCode",       TEXT),
    ColumnSpec("shipper_name",        "ShipperName",   "ShipperName",       TEXT),
    ColumnSpec("last_signature",      "LastSign",      "LastSignature",     TEXT),
    ColumnSpec("product_code",        "ProductCode",   "ProductCode",       TEXT),
    ColumnSpec("line_item_count",     "LineItems",     "LineItemCount",     INT),
    ColumnSpec("hold_code",           "HoldCode",      "HoldCode",          TEXT),
    ColumnSpec("hold_code_date",      "HoldCodeDate",  "HoldCodeDate",      DATETIME),
    ColumnSpec("customs_status",      "TullStatus",    "CustomsStatus",     TEXT),
    ColumnSpec("customs_status_time", "TullStatusDT",  "CustomsStatusTime", DATETIME),
    ColumnSpec("control_check",       "ControllCheck", "ControlCheck",      BOOL),
    ColumnSpec("control_date",        "ControllDate",  "ControlDate",       DATETIME),
    ColumnSpec("bpo_check",           "BPOCheck",      "BPOCheck",          BOOL),
    ColumnSpec("bpo_date",            "BPODate",       "BPODate",           DATETIME),
    ColumnSpec("error_check",         "ErrorCheck",    "ErrorCheck",        BOOL),
    ColumnSpec("error_date",          "ErrorDate",     "ErrorDate",         DATETIME),
    ColumnSpec("image",               "Image",         "Image",             TEXT),
    ColumnSpec("image_date",          "ImageDate",     "ImageDate",         DATETIME),
)

PLAIN_WIDTH   = len(SHIPMENT_COLUMNS)
INDEXED_WIDTH = PLAIN_WIDTH + 1          # leading row-index column

# Layout kinds
NAMED   = "named"
PLAIN   = "plain"
INDEXED = "indexed"


@dataclass(frozen=True)
class ColumnLayout:
    kind: str
    width: int
    columns: tuple[tuple[int, ColumnSpec], ...]    # (position in row, spec)


def _normalise(name: str) -> str:
    return re.sub(r"[^0-9a-z]", "", name.lower())


def _named_layout(header: list[str]) -> ColumnLayout | None:
    positions = {}
    for pos, name in enumerate(header):
        positions.setdefault(_normalise(name), pos)

    pairs = []
    for spec in SHIPMENT_COLUMNS:
        hits = [positions[a] for a in spec.aliases() if a in positions]
        if not hits:
            return None
        pairs.append((min(hits), spec))
    return ColumnLayout(NAMED, len(header), tuple(pairs))


def resolve_layout(header: list[str]) -> ColumnLayout:
    """
    Decide how data rows are addressed, from the header row.

    Known header names win; otherwise the header width selects the plain
    (22) or indexed (23) positional layout.
    """
    named = _named_layout(header)
    if named is not None:
        return named

    if len(header) == PLAIN_WIDTH:
        return ColumnLayout(PLAIN, PLAIN_WIDTH, tuple(enumerate(SHIPMENT_COLUMNS)))
    if len(header) == INDEXED_WIDTH:
        return ColumnLayout(
            INDEXED, INDEXED_WIDTH,
            tuple((pos + 1, spec) for pos, spec in enumerate(SHIPMENT_COLUMNS)),
        )

    raise MalformedRowError(
        1, None,
        f"header has {len(header)} columns, expected {PLAIN_WIDTH} "
        f"or {INDEXED_WIDTH} (with a leading index column)",
    )
