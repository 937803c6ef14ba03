# backend/schemas/stock.py
from pydantic import BaseModel, Field, ConfigDict, AliasChoices, field_validator
from datetime import datetime
from enum import Enum
from typing import Any, List, Optional, Literal, Union

from schemas.product import Product, SortField, SortDirection
from utils.coerce import to_number

# Shown instead of a date when the movement timestamp is missing or malformed
INVALID_DATE = "Invalid Date"


# Movement types the ledger knows how to describe; anything else is "unknown"
class MovementType(str, Enum):
    OUT = "SALIDA"
    IN = "ENTRADA"
    SALE_RETURN = "DEVOLUCIÓN VENTA"


# A stock movement row as read from the store
class Movement(BaseModel):
    model_config = ConfigDict(from_attributes=True, coerce_numbers_to_str=True)

    id: Union[int, str]
    product_id: Union[int, str] = Field(validation_alias=AliasChoices("producto_id", "product_id"))
    type: Optional[str] = Field(default=None, validation_alias=AliasChoices("tipo", "type"))
    quantity: Optional[float] = Field(default=None, validation_alias=AliasChoices("cantidad", "quantity"))
    reference: Optional[str] = Field(default=None, validation_alias=AliasChoices("referencia", "reference"))
    # Kept raw; parsed (or rejected) when the movement is classified
    timestamp: Any = Field(default=None, validation_alias=AliasChoices("fecha", "timestamp"))

    @field_validator("quantity", mode="before")
    @classmethod
    def _coerce_quantity(cls, value):
        if value is None:
            return None
        return to_number(value)


# Ledger line ready for display
class MovementView(BaseModel):
    id: Union[int, str]
    product_id: Union[int, str]
    type: Optional[str] = None
    quantity: Optional[float] = None
    display_quantity: Union[int, float]
    description: str
    reference: str
    date: Union[datetime, Literal["Invalid Date"]]


class StockViewState(BaseModel):
    """Everything the stock screen shows, in one record.

    ``products`` is the last successful fetch, never merged; ``movements``
    always belong to ``selected_product``.
    """
    products: List[Product] = Field(default_factory=list)
    search: str = ""
    sort_by: SortField = "name"
    order: SortDirection = "asc"

    selected_product: Optional[Product] = None
    movements: List[MovementView] = Field(default_factory=list)

    loading: bool = True
    movements_loading: bool = False
    detail_open: bool = False


class MovementDetailResponse(BaseModel):
    product: Optional[Product] = None
    movements: List[MovementView]
    detail_open: bool
    loading: bool


class NoticeList(BaseModel):
    items: List[str]
