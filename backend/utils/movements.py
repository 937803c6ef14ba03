# backend/utils/movements.py
from datetime import datetime
from typing import Any, Iterable, List, Optional, Union

from pydantic import TypeAdapter, ValidationError

from schemas.stock import Movement, MovementView, MovementType, INVALID_DATE

CANCELLATION_MARKERS = ("cancelación", "cancellation")

_TIMESTAMP = TypeAdapter(datetime)


def display_quantity(raw: Optional[float]) -> Union[int, float]:
    qty = abs(raw or 0)
    if isinstance(qty, float) and qty.is_integer():
        return int(qty)
    return qty


def describe_movement(movement_type: Optional[str], quantity: Optional[float], reference: Optional[str]) -> str:
    qty = display_quantity(quantity)

    if movement_type == MovementType.OUT.value:
        return f"Sales Out: -{qty}"
    if movement_type == MovementType.IN.value:
        ref = (reference or "").lower()
        # Cancelled sales come back in as plain ENTRADA rows tagged in the reference
        if any(marker in ref for marker in CANCELLATION_MARKERS):
            return f"Sales Return: {qty}"
        return f"Purchases In: {qty}"
    if movement_type == MovementType.SALE_RETURN.value:
        return f"Return In: {qty}"
    return "Unknown movement"


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse a store timestamp (ISO text, datetime or epoch); returns None instead of raising."""
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
    try:
        return _TIMESTAMP.validate_python(value)
    except ValidationError:
        return None


def classify_movement(movement: Movement) -> MovementView:
    parsed = parse_timestamp(movement.timestamp)
    return MovementView(
        id=movement.id,
        product_id=movement.product_id,
        type=movement.type,
        quantity=movement.quantity,
        display_quantity=display_quantity(movement.quantity),
        description=describe_movement(movement.type, movement.quantity, movement.reference),
        reference=movement.reference or "-",
        date=parsed if parsed is not None else INVALID_DATE,
    )


def classify_movements(movements: Iterable[Movement]) -> List[MovementView]:
    return [classify_movement(m) for m in movements]
