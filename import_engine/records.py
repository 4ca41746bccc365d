"""
import_engine.records - Typed, transient form of one CSV row.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Optional


@dataclass
class ShipmentRecord:
    shipment_number: int
    air_waybill: Optional[str] = None
    registration_date: Optional[datetime] = None
    created_date: Optional[datetime] = None
    arrival_scan_time: Optional[datetime] = None
    gateway_code: Optional[str] = None
    shipper_name: Optional[str] = None
    last_signature: Optional[str] = None
    product_code: Optional[str] = None
    line_item_count: Optional[int] = None
    hold_code: Optional[str] = None
    hold_code_date: Optional[datetime] = None
    customs_status: Optional[str] = None
    customs_status_time: Optional[datetime] = None
    control_check: bool = False
    control_date: Optional[datetime] = None
    bpo_check: bool = False
    bpo_date: Optional[datetime] = None
    error_check: bool = False
    error_date: Optional[datetime] = None
    image: Optional[str] = None
    image_date: Optional[datetime] = None

    def to_params(self) -> dict:
        """Bind parameters for the upsert statement, keyed by column name."""
        return asdict(self)


@dataclass
class FileUpload:
    """CSV payload pulled out of one request, before any parsing."""

    file_name: Optional[str]
    loaded_at: datetime
    content: str | bytes
    source: str = "file"

    @property
    def label(self) -> str:
        return self.file_name or f"<{self.source}>"
