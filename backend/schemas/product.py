# backend/schemas/product.py
from pydantic import BaseModel, Field, ConfigDict, AliasChoices, field_validator, computed_field
from typing import Optional, List, Literal, Union

from utils.coerce import to_number


# Base configuration for ORM compatibility and store rows
class ORMBase(BaseModel):
    model_config = ConfigDict(from_attributes=True, coerce_numbers_to_str=True)


# Columns the list can be ordered by
SortField = Literal[
    "id", "name", "code", "category", "stock",
    "promo_price", "normal_price", "cost_usd", "cost_mxn", "image_url",
]
SortDirection = Literal["asc", "desc"]

NUMERIC = "numeric"
TEXT = "text"

# Comparator kind per sortable field
FIELD_KINDS = {
    "id": TEXT,
    "name": TEXT,
    "code": TEXT,
    "category": TEXT,
    "stock": NUMERIC,
    "promo_price": NUMERIC,
    "normal_price": NUMERIC,
    "cost_usd": NUMERIC,
    "cost_mxn": NUMERIC,
    "image_url": TEXT,
}

NUMERIC_FIELDS = tuple(f for f, kind in FIELD_KINDS.items() if kind == NUMERIC)


class Product(ORMBase):
    """A product row as read from the store.

    Accepts either the remote column names (``nombre``, ``codigo`` ...) or the
    attribute names, and always serializes with the attribute names.
    """
    id: Union[int, str]
    name: Optional[str] = Field(default=None, validation_alias=AliasChoices("nombre", "name"))
    code: Optional[str] = Field(default=None, validation_alias=AliasChoices("codigo", "code"))
    category: Optional[str] = Field(default=None, validation_alias=AliasChoices("categoria", "category"))
    stock: Optional[float] = None
    promo_price: Optional[float] = Field(default=None, validation_alias=AliasChoices("promocion", "promo_price"))
    normal_price: Optional[float] = Field(default=None, validation_alias=AliasChoices("precio_normal", "normal_price"))
    cost_usd: Optional[float] = Field(default=None, validation_alias=AliasChoices("costo_final_usd", "cost_usd"))
    cost_mxn: Optional[float] = Field(default=None, validation_alias=AliasChoices("costo_final_mxn", "cost_mxn"))
    image_url: Optional[str] = Field(default=None, validation_alias=AliasChoices("imagen_url", "image_url"))

    @field_validator(*NUMERIC_FIELDS, mode="before")
    @classmethod
    def _coerce_numeric(cls, value):
        # Null stays null (sorts last); garbage becomes 0
        if value is None:
            return None
        return to_number(value)

    @computed_field
    @property
    def stock_on_hand(self) -> float:
        return self.stock if self.stock is not None else 0.0


# Partial update of the list inputs (search box, sort header)
class ViewUpdate(BaseModel):
    search: Optional[str] = None
    sort_by: Optional[SortField] = None
    order: Optional[SortDirection] = None


class ProductListResponse(BaseModel):
    items: List[Product]
    total: int
    loaded: int
    search: str
    sort_by: SortField
    order: SortDirection
    loading: bool
