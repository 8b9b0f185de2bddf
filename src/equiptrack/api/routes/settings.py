"""Settings API endpoints.

GET /api/settings/fuel-price - Get fuel price
PUT /api/settings/fuel-price - Set fuel price
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from equiptrack.api.app import get_config, get_slot_storage
from equiptrack.config import AppConfig
from equiptrack.models.types import FuelPrice
from equiptrack.store.settings import load_fuel_price, save_fuel_price
from equiptrack.store.slots import SlotStorage

router = APIRouter()


@router.get("/settings/fuel-price", response_model=FuelPrice)
def get_fuel_price(
    storage: SlotStorage = Depends(get_slot_storage),
    config: AppConfig = Depends(get_config),
) -> FuelPrice:
    """Get the stored fuel price (0 when unset)."""
    return FuelPrice(price=load_fuel_price(storage, key=config.fuel_price_key))


@router.put("/settings/fuel-price", response_model=FuelPrice)
def set_fuel_price(
    payload: FuelPrice,
    storage: SlotStorage = Depends(get_slot_storage),
    config: AppConfig = Depends(get_config),
) -> FuelPrice:
    """Store a new fuel price."""
    price = save_fuel_price(storage, payload.price, key=config.fuel_price_key)
    return FuelPrice(price=price)
