from datetime import datetime

import pytest
from sqlalchemy import event
from sqlalchemy.dialects import postgresql
from sqlalchemy.exc import OperationalError

from db import ExportShipment, get_engine
from import_engine.errors import PersistenceError
from import_engine.records import ShipmentRecord
from import_engine.upsert import build_upsert, upsert_records
from services.shipments_service import ShipmentsService
from tests.factories import ShipmentRecordFactory


def test_inserts_new_rows(session):
    written = upsert_records(session, [
        ShipmentRecordFactory(shipment_number=1001, air_waybill="AWB1", line_item_count=5,
                              control_check=True, registration_date=datetime(2024, 1, 1, 10, 0)),
        ShipmentRecord(1002),
    ])

    assert written == 2
    stored = ShipmentsService.get(session, 1001)
    assert stored.air_waybill == "AWB1"
    assert stored.line_item_count == 5
    assert stored.control_check is True
    assert stored.bpo_check is False
    assert stored.registration_date == datetime(2024, 1, 1, 10, 0)
    assert stored.created_date is None


def test_reimport_overwrites_every_column(session):
    upsert_records(session, [
        ShipmentRecordFactory(shipment_number=7, air_waybill="OLD", shipper_name="Acme",
                              line_item_count=3, error_check=True, image="a.png"),
    ])
    upsert_records(session, [ShipmentRecordFactory(shipment_number=7, air_waybill="NEW")])
    session.expire_all()

    assert ShipmentsService.count(session) == 1
    stored = session.get(ExportShipment, 7)
    assert stored.air_waybill == "NEW"
    # last write wins, no merge with the previous values
    assert stored.shipper_name is None
    assert stored.line_item_count is None
    assert stored.error_check is False
    assert stored.image is None


def test_importing_same_batch_twice_is_idempotent(session):
    batch = ShipmentRecordFactory.build_batch(3)
    upsert_records(session, batch)
    upsert_records(session, batch)
    assert ShipmentsService.count(session) == 3
    stored = ShipmentsService.get(session, batch[0].shipment_number)
    assert stored.air_waybill == batch[0].air_waybill
    assert stored.registration_date == batch[0].registration_date


def test_empty_batch_commits_nothing(session):
    assert upsert_records(session, []) == 0
    assert ShipmentsService.count(session) == 0


def test_failure_rolls_back_whole_batch(session):
    upsert_records(session, [ShipmentRecord(1)])
    engine = get_engine()
    inserts = []

    def _fail_second_insert(conn, cursor, statement, parameters, context, executemany):
        if statement.lstrip().upper().startswith("INSERT"):
            inserts.append(statement)
            if len(inserts) == 2:
                raise OperationalError(statement, parameters, Exception("disk I/O error"))

    event.listen(engine, "before_cursor_execute", _fail_second_insert)
    try:
        with pytest.raises(PersistenceError) as excinfo:
            upsert_records(session, [ShipmentRecord(2), ShipmentRecord(3)])
    finally:
        event.remove(engine, "before_cursor_execute", _fail_second_insert)

    assert "shipment 3" in str(excinfo.value)
    assert excinfo.value.status_code == 500
    assert ShipmentsService.get(session, 2) is None
    assert ShipmentsService.count(session) == 1


def test_statement_updates_all_non_key_columns():
    stmt = build_upsert("postgresql")
    sql = str(stmt.compile(dialect=postgresql.dialect()))
    assert "ON CONFLICT (shipment_number) DO UPDATE" in sql
    assert "air_waybill = excluded.air_waybill" in sql
    assert "image_date = excluded.image_date" in sql
    assert "shipment_number = excluded.shipment_number" not in sql


def test_unsupported_dialect():
    with pytest.raises(PersistenceError):
        build_upsert("mssql")
