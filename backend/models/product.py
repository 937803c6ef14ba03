# backend/models/product.py
from sqlalchemy import Column, Integer, String, Float
from database import Base

# Model Product
# Mirrors the remote product table. Column names follow the remote schema,
# attribute names are the ones used across the backend.
# The service never writes here; rows are created and updated elsewhere.
class Product(Base):
    __tablename__ = "productos"

    id = Column(Integer, primary_key=True, index=True)
    name = Column("nombre", String, nullable=True, index=True)
    code = Column("codigo", String, nullable=True, index=True)
    category = Column("categoria", String, nullable=True)

    # Stock on hand; absent means nothing has been counted yet.
    stock = Column("stock", Float, nullable=True)

    # Prices and landed costs.
    promo_price = Column("promocion", Float, nullable=True)
    normal_price = Column("precio_normal", Float, nullable=True)
    cost_usd = Column("costo_final_usd", Float, nullable=True)
    cost_mxn = Column("costo_final_mxn", Float, nullable=True)

    # Optional product picture URL.
    image_url = Column("imagen_url", String, nullable=True)
