"""
db.models - SQLAlchemy ORM declarations.

Tables
------
export_shipments - one row per shipment number.  Every column except the
                   key is nullable apart from the three check flags, which
                   are always written as true/false by the importer.
"""

from __future__ import annotations

from sqlalchemy import Boolean, Column, DateTime, Integer, String
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


class ExportShipment(Base):
    __tablename__ = "export_shipments"

    # ── Primary key ────────────────────────────────────────────────────
    shipment_number = Column(Integer, primary_key=True, autoincrement=False)

    # ── Registration ───────────────────────────────────────────────────
    air_waybill       = Column(String(20))
    registration_date = Column(DateTime)
    created_date      = Column(DateTime)
    arrival_scan_time = Column(DateTime)
    gateway_code      = Column(String(10))
    shipper_name      = Column(String(255))
    last_signature    = Column(String(50))
    product_code      = Column(String(10))
    line_item_count   = Column(Integer)

    # ── Holds / customs ────────────────────────────────────────────────
    hold_code           = Column(String(50))
    hold_code_date      = Column(DateTime)
    customs_status      = Column(String(10))
    customs_status_time = Column(DateTime)

    # ── Checks ─────────────────────────────────────────────────────────
    control_check = Column(Boolean, nullable=False, default=False)
    control_date  = Column(DateTime)
    bpo_check     = Column(Boolean, nullable=False, default=False)
    bpo_date      = Column(DateTime)
    error_check   = Column(Boolean, nullable=False, default=False)
    error_date    = Column(DateTime)

    # ── Image ──────────────────────────────────────────────────────────
    image      = Column(String(255))
    image_date = Column(DateTime)

    # ── Serialisation ──────────────────────────────────────────────────
    def to_dict(self) -> dict:
        d = {}
        for col in self.__table__.columns:
            val = getattr(self, col.key)
            d[col.key] = val.isoformat() if hasattr(val, "isoformat") else val
        return d
