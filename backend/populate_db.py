import os
import random
from datetime import datetime, timedelta

import pandas as pd

from database import SessionLocal, init_db
from models.product import Product
from models.stock import StockMovement

# Configuration
DATA_DIR = os.path.join(os.path.dirname(__file__), "data_source")
PRODUCTS_CSV = os.path.join(DATA_DIR, "productos.csv")
MOVEMENTS_PER_PRODUCT = (3, 12)  # min/max generated ledger lines
MOVEMENT_DATE_START = datetime(2024, 1, 1)
# End Configuration

REFERENCES = {
    "SALIDA": ["Venta mostrador", "Pedido web", None],
    "ENTRADA": ["PO-{n}", "Compra proveedor", "Cancelación venta #{n}", "cancellation #{n}", None],
    "DEVOLUCIÓN VENTA": ["Devolución cliente #{n}", None],
    "AJUSTE": ["Conteo físico", None],
}


def _none_if_nan(value):
    return None if pd.isna(value) else value


def _random_movement(product_id: int) -> StockMovement:
    tipo = random.choices(list(REFERENCES), weights=[6, 4, 1, 1])[0]
    qty = random.randint(1, 25)
    template = random.choice(REFERENCES[tipo])
    return StockMovement(
        product_id=product_id,
        type=tipo,
        quantity=-qty if tipo == "SALIDA" else qty,
        reference=template.format(n=random.randint(100, 999)) if template else None,
        # Some rows come without a date upstream
        timestamp=None if random.random() < 0.05 else MOVEMENT_DATE_START + timedelta(
            days=random.randint(0, 365), minutes=random.randint(0, 1439)
        ),
    )


def load_all_data():
    """Loads the product catalog CSV and generates a movement ledger for it."""
    init_db()
    session = SessionLocal()

    try:
        products_df = pd.read_csv(PRODUCTS_CSV)
    except FileNotFoundError:
        print(f"Error: product catalog not found at {PRODUCTS_CSV}.")
        session.close()
        return

    try:
        session.query(StockMovement).delete()
        session.query(Product).delete()

        print(f"Inserting {len(products_df)} products...")
        products = []
        for _, row in products_df.iterrows():
            product = Product(
                code=_none_if_nan(row["codigo"]),
                name=_none_if_nan(row["nombre"]),
                category=_none_if_nan(row["categoria"]),
                stock=_none_if_nan(row["stock"]),
                promo_price=_none_if_nan(row["promocion"]),
                normal_price=_none_if_nan(row["precio_normal"]),
                cost_usd=_none_if_nan(row["costo_final_usd"]),
                cost_mxn=_none_if_nan(row["costo_final_mxn"]),
                image_url=_none_if_nan(row["imagen_url"]),
            )
            session.add(product)
            products.append(product)
        session.flush()

        print("Products inserted. Generating movements...")
        count = 0
        for product in products:
            for _ in range(random.randint(*MOVEMENTS_PER_PRODUCT)):
                session.add(_random_movement(product.id))
                count += 1

        session.commit()
        print(f"Inserted {count} movements.")
    finally:
        session.close()


if __name__ == "__main__":
    load_all_data()
