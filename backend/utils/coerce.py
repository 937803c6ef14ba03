# backend/utils/coerce.py
import math
from typing import Any


def to_number(value: Any) -> float:
    """Coerce a store value to float; anything unparseable counts as 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number):
        return 0.0
    return number
