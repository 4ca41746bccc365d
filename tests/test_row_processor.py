from datetime import datetime

import pytest

from import_engine.errors import MalformedRowError
from import_engine.field_map import resolve_layout
from import_engine.row_processor import parse_int, parse_row, parse_timestamp
from tests.factories import HEADER, SCENARIO_ROW, make_row

LAYOUT = resolve_layout(HEADER)


def test_scenario_row():
    """The reference row produces the expected typed record."""
    rec = parse_row(2, SCENARIO_ROW, LAYOUT)

    assert rec.shipment_number == 1001
    assert rec.air_waybill == "AWB1"
    assert rec.registration_date == datetime(2024, 1, 1, 10, 0)
    assert rec.created_date is None
    assert rec.arrival_scan_time is None
    assert rec.gateway_code == "GTW"
    assert rec.line_item_count == 5
    assert rec.control_check is True
    assert rec.bpo_check is False
    assert rec.error_check is False
    assert rec.control_date is None
    assert rec.image is None
    assert rec.image_date is None


def test_empty_optional_fields_become_none():
    rec = parse_row(2, make_row(7), LAYOUT)

    assert rec.shipment_number == 7
    for attr in ("air_waybill", "shipper_name", "hold_code", "customs_status",
                 "line_item_count", "hold_code_date", "error_date"):
        assert getattr(rec, attr) is None


@pytest.mark.parametrize("value,expected", [
    ("true", True),
    ("TRUE", True),
    ("True", True),
    ("tRuE", True),
    ("false", False),
    ("", False),
    ("yes", False),
    ("1", False),
])
def test_check_flags(value, expected):
    rec = parse_row(2, make_row(1, bpo_check=value), LAYOUT)
    assert rec.bpo_check is expected


@pytest.mark.parametrize("bad", ["abc", "12.5", "1e3", "5_000", ""])
def test_bad_shipment_number_is_fatal(bad):
    row = make_row(1)
    row[0] = bad
    with pytest.raises(MalformedRowError) as excinfo:
        parse_row(4, row, LAYOUT)

    assert excinfo.value.row == 4
    assert excinfo.value.column == "SpedNr"


def test_bad_line_item_count_names_column():
    with pytest.raises(MalformedRowError) as excinfo:
        parse_row(3, make_row(1, line_item_count="five"), LAYOUT)
    assert excinfo.value.column == "LineItems"
    assert "row 3, column LineItems" in str(excinfo.value)


@pytest.mark.parametrize("bad", ["2024-01-01", "01.01.2024 10:00", "2024-01-01T10:00", "soon"])
def test_unparsable_timestamp_is_fatal(bad):
    with pytest.raises(MalformedRowError) as excinfo:
        parse_row(2, make_row(1, customs_status_time=bad), LAYOUT)
    assert excinfo.value.column == "TullStatusDT"
    assert isinstance(excinfo.value.cause, ValueError)


def test_row_width_must_match_layout():
    with pytest.raises(MalformedRowError) as excinfo:
        parse_row(5, make_row(1)[:-1], LAYOUT)
    assert excinfo.value.column is None
    assert "expected 22 columns, got 21" in str(excinfo.value)


def test_cells_are_stripped():
    rec = parse_row(2, make_row(" 42 ", air_waybill="  AWB9 ", line_item_count=" 3",
                                control_check=" TRUE "), LAYOUT)
    assert rec.shipment_number == 42
    assert rec.air_waybill == "AWB9"
    assert rec.line_item_count == 3
    assert rec.control_check is True


def test_parse_int_signs():
    assert parse_int("+5") == 5
    assert parse_int("-12") == -12
    assert parse_int("") is None


def test_parse_timestamp_custom_format():
    assert parse_timestamp("01.02.2024 08:30", "%d.%m.%Y %H:%M") == datetime(2024, 2, 1, 8, 30)
    assert parse_timestamp("") is None


@pytest.mark.parametrize("row, column", [
    (make_row("2147483648"), "SpedNr"),
    (make_row("-2147483649"), "SpedNr"),
    (make_row(1, line_item_count="-2147483649"), "LineItems"),
    (make_row(1, line_item_count=str(10 ** 20)), "LineItems"),
])
def test_integers_beyond_32_bits_are_fatal(row, column):
    with pytest.raises(MalformedRowError) as excinfo:
        parse_row(2, row, LAYOUT)
    assert excinfo.value.column == column
    assert "out of range" in str(excinfo.value)


def test_parse_int_bounds():
    assert parse_int("2147483647") == 2147483647
    assert parse_int("-2147483648") == -2147483648


@pytest.mark.parametrize("bad", ["2024-1-1 1:5", "2024-01-01 9:05", "2024-01-1 10:00"])
def test_unpadded_timestamp_is_fatal(bad):
    with pytest.raises(MalformedRowError) as excinfo:
        parse_row(6, make_row(1, created_date=bad), LAYOUT)
    assert excinfo.value.row == 6
    assert excinfo.value.column == "CreatedDate"
