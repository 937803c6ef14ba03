from datetime import datetime, timezone

import pytest

from schemas.stock import Movement, INVALID_DATE
from utils.movements import classify_movement, classify_movements, describe_movement, display_quantity, parse_timestamp


def _classify(**row):
    row.setdefault("id", 1)
    row.setdefault("producto_id", 1)
    return classify_movement(Movement.model_validate(row))


@pytest.mark.parametrize(
    "row, expected",
    [
        ({"tipo": "SALIDA", "cantidad": -5}, "Sales Out: -5"),
        ({"tipo": "ENTRADA", "cantidad": 3, "referencia": "cancellation #2"}, "Sales Return: 3"),
        ({"tipo": "ENTRADA", "cantidad": 3, "referencia": "CANCELACIÓN pedido 9"}, "Sales Return: 3"),
        ({"tipo": "ENTRADA", "cantidad": 7, "referencia": "PO-100"}, "Purchases In: 7"),
        ({"tipo": "ENTRADA", "cantidad": 7}, "Purchases In: 7"),
        ({"tipo": "DEVOLUCIÓN VENTA", "cantidad": 2}, "Return In: 2"),
        ({"tipo": "FOO", "cantidad": 1}, "Unknown movement"),
        ({"cantidad": 1}, "Unknown movement"),
    ],
)
def test_descriptions(row, expected):
    assert _classify(**row).description == expected


def test_missing_quantity_counts_as_zero():
    view = _classify(tipo="SALIDA")
    assert view.display_quantity == 0
    assert view.description == "Sales Out: -0"


def test_fractional_quantity_is_kept():
    assert display_quantity(-2.5) == 2.5
    assert describe_movement("ENTRADA", 2.5, None) == "Purchases In: 2.5"


def test_unparseable_quantity_is_zero():
    assert _classify(tipo="ENTRADA", cantidad="lots").description == "Purchases In: 0"


def test_null_date_is_sentinel_not_error():
    view = _classify(tipo="SALIDA", cantidad=-1, fecha=None)
    assert view.date == INVALID_DATE


def test_malformed_date_is_sentinel():
    assert _classify(fecha="31/02/2024 later").date == INVALID_DATE
    assert _classify(fecha={"when": "now"}).date == INVALID_DATE


def test_valid_dates_are_parsed():
    view = _classify(fecha="2024-05-02T09:00:00Z")
    assert view.date == datetime(2024, 5, 2, 9, 0, tzinfo=timezone.utc)

    stamp = datetime(2024, 1, 1, 8, 30)
    assert parse_timestamp(stamp) == stamp
    assert parse_timestamp("   ") is None
    assert parse_timestamp(None) is None


def test_postgres_style_timestamps_are_parsed():
    # Postgres drops trailing zeros from fractional seconds
    assert parse_timestamp("2024-05-03T10:15:00.12345+00:00") == datetime(
        2024, 5, 3, 10, 15, 0, 123450, tzinfo=timezone.utc
    )
    assert _classify(fecha="2024-05-03 10:15:00.5+00:00").date != INVALID_DATE


def test_epoch_milliseconds_are_parsed():
    assert parse_timestamp(1714730000000) == datetime(2024, 5, 3, 9, 53, 20, tzinfo=timezone.utc)


def test_reference_placeholder():
    assert _classify(tipo="SALIDA", cantidad=-1).reference == "-"
    assert _classify(tipo="SALIDA", cantidad=-1, referencia="").reference == "-"
    assert _classify(tipo="SALIDA", cantidad=-1, referencia="Venta").reference == "Venta"


def test_classify_keeps_order(movement_rows):
    views = classify_movements(Movement.model_validate(r) for r in movement_rows)
    assert [v.id for v in views] == [10, 11, 12, 20, 21]
    assert [v.description for v in views] == [
        "Sales Out: -5",
        "Sales Return: 3",
        "Purchases In: 20",
        "Return In: 2",
        "Unknown movement",
    ]
    assert views[2].date == INVALID_DATE
    assert views[4].date == INVALID_DATE
