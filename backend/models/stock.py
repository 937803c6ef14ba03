# backend/models/stock.py
from sqlalchemy import Column, Integer, String, Float, ForeignKey, DateTime
from database import Base

class StockMovement(Base):
    __tablename__ = "movimientos_inventario"

    id = Column(Integer, primary_key=True, index=True)
    product_id = Column("producto_id", Integer, ForeignKey("productos.id"), nullable=False, index=True)

    # Movement classification (SALIDA, ENTRADA, DEVOLUCIÓN VENTA); free text upstream
    type = Column("tipo", String, nullable=True)

    # Signed quantity involved in the movement
    quantity = Column("cantidad", Float, nullable=True)

    # Purchase order, invoice or cancellation note
    reference = Column("referencia", String, nullable=True)

    timestamp = Column("fecha", DateTime(timezone=True), nullable=True)
