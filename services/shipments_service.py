"""
services.shipments_service - Read access to stored shipments.

All session management is the caller's responsibility (open before,
close after).  Writes go through import_engine.upsert only.
"""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from db.models import ExportShipment


class ShipmentsService:

    @staticmethod
    def get(session: Session, shipment_number: int) -> ExportShipment | None:
        return session.get(ExportShipment, shipment_number)

    @staticmethod
    def list(session: Session, limit: int = 100, offset: int = 0) -> list[ExportShipment]:
        stmt = (
            select(ExportShipment)
            .order_by(ExportShipment.shipment_number)
            .limit(limit)
            .offset(offset)
        )
        return list(session.scalars(stmt))

    @staticmethod
    def count(session: Session) -> int:
        return session.scalar(select(func.count()).select_from(ExportShipment)) or 0
