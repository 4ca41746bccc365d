"""
import_engine.upsert - Write a converted batch in one transaction.

One INSERT .. ON CONFLICT (shipment_number) DO UPDATE statement is built
per batch and executed once per record.  Every non-key column is taken from
the incoming row, so a re-import fully replaces the stored shipment.
"""

from __future__ import annotations

import logging

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from db.models import ExportShipment
from import_engine.errors import PersistenceError
from import_engine.records import ShipmentRecord

logger = logging.getLogger(__name__)

_INSERT_BY_DIALECT = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def build_upsert(dialect_name: str):
    """Return the parameterised upsert statement for the given dialect."""
    insert = _INSERT_BY_DIALECT.get(dialect_name)
    if insert is None:
        raise PersistenceError(f"upsert is not supported on the {dialect_name} dialect")

    table = ExportShipment.__table__
    stmt = insert(table)
    return stmt.on_conflict_do_update(
        index_elements=[table.c.shipment_number],
        set_={
            col.name: stmt.excluded[col.name]
            for col in table.columns
            if not col.primary_key
        },
    )


def upsert_records(session: Session, records: list[ShipmentRecord]) -> int:
    """
    Upsert every record, then commit.  Any database error rolls the whole
    batch back and is re-raised as PersistenceError.

    Returns the number of rows written.
    """
    stmt = build_upsert(session.get_bind().dialect.name)

    current = None
    try:
        for record in records:
            current = record.shipment_number
            session.execute(stmt, record.to_params())
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        cause = getattr(exc, "orig", None) or exc
        logger.error(f"Upsert rolled back at shipment {current}: {cause}")
        raise PersistenceError(
            f"failed to store shipment {current}, nothing was imported: {cause}"
        ) from exc

    return len(records)
