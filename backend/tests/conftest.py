import os

import pytest

os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"
os.environ["STORE_BACKEND"] = "sql"

from config import Settings  # noqa: E402


PRODUCT_ROWS = [
    {"id": 1, "nombre": "Aceite de oliva", "codigo": "ACE-001", "categoria": "Abarrotes",
     "stock": 42, "promocion": 129.9, "precio_normal": 149.9, "costo_final_usd": 4.1,
     "costo_final_mxn": 71.5, "imagen_url": None},
    {"id": 2, "nombre": "café molido", "codigo": "CAF-003", "categoria": "Bebidas",
     "stock": 18, "promocion": None, "precio_normal": "115", "costo_final_usd": 3.2,
     "costo_final_mxn": 55.8, "imagen_url": "https://img.example/caf.png"},
    {"id": 3, "nombre": None, "codigo": "DET-004", "categoria": "Limpieza",
     "stock": None, "promocion": None, "precio_normal": 189.0, "costo_final_usd": None,
     "costo_final_mxn": 99.4, "imagen_url": None},
    {"id": 4, "nombre": "Leche entera", "codigo": None, "categoria": None,
     "stock": "n/a", "promocion": 24.9, "precio_normal": 27.5, "costo_final_usd": 0.8,
     "costo_final_mxn": 13.9, "imagen_url": None},
]

MOVEMENT_ROWS = [
    {"id": 10, "producto_id": 1, "tipo": "SALIDA", "cantidad": -5, "referencia": "Venta mostrador",
     "fecha": "2024-05-03T10:15:00+00:00"},
    {"id": 11, "producto_id": 1, "tipo": "ENTRADA", "cantidad": 3, "referencia": "Cancelación venta #2",
     "fecha": "2024-05-02T09:00:00Z"},
    {"id": 12, "producto_id": 1, "tipo": "ENTRADA", "cantidad": 20, "referencia": None,
     "fecha": None},
    {"id": 20, "producto_id": 2, "tipo": "DEVOLUCIÓN VENTA", "cantidad": 2, "referencia": "Cliente #7",
     "fecha": "2024-04-30T12:00:00"},
    {"id": 21, "producto_id": 2, "tipo": "AJUSTE", "cantidad": 1, "referencia": "Conteo",
     "fecha": "not a date"},
]


@pytest.fixture()
def test_settings():
    return Settings(DATABASE_URL="sqlite+pysqlite:///:memory:", SEARCH_TRIM=False)


@pytest.fixture()
def product_rows():
    return [dict(r) for r in PRODUCT_ROWS]


@pytest.fixture()
def movement_rows():
    return [dict(r) for r in MOVEMENT_ROWS]
