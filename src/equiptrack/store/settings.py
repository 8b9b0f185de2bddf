"""Persisted user settings.

Only the fuel price (R$/L) exists; it is stored as text in its own slot.
"""

from __future__ import annotations

import logging
import math

from sqlalchemy.exc import SQLAlchemyError

from equiptrack.core.numbers import parse_leading_float
from equiptrack.store.slots import SlotStorage

logger = logging.getLogger(__name__)

FUEL_PRICE_KEY = "preco_combustivel"


def load_fuel_price(storage: SlotStorage, key: str = FUEL_PRICE_KEY) -> float:
    """Get the stored fuel price, 0 when unset or unreadable.

    The leading number of the stored text is used ("5.89 R$" -> 5.89);
    non-finite values read as 0.
    """
    try:
        raw = storage.read(key)
    except SQLAlchemyError as e:
        logger.warning(f"Could not read fuel price: {e}")
        return 0.0

    return parse_leading_float(raw or "")


def save_fuel_price(storage: SlotStorage, price: float, key: str = FUEL_PRICE_KEY) -> float:
    """Persist the fuel price and return it as float.

    Raises:
        ValueError: If price is infinite or NaN.
    """
    value = float(price)
    if not math.isfinite(value):
        raise ValueError(f"Fuel price must be finite: {price!r}")
    storage.write(key, str(value))
    return value
