"""Reports API endpoints.

GET /api/reports/summary - Metrics, rankings and shares (filterable)
GET /api/reports/charts - Chart series over all entries
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from equiptrack.aggregation.charts import build_chart_data
from equiptrack.aggregation.reports import build_report
from equiptrack.api.app import get_config, get_entry_store, get_slot_storage
from equiptrack.config import AppConfig
from equiptrack.models.types import ChartData, ReportFilters, ReportSummary
from equiptrack.store.entries import EntryStore
from equiptrack.store.settings import load_fuel_price
from equiptrack.store.slots import SlotStorage

router = APIRouter()


@router.get("/reports/summary", response_model=ReportSummary)
def get_report_summary(
    de: str | None = None,
    ate: str | None = None,
    modelo: str | None = None,
    equipamento: str | None = None,
    store: EntryStore = Depends(get_entry_store),
    storage: SlotStorage = Depends(get_slot_storage),
    config: AppConfig = Depends(get_config),
) -> ReportSummary:
    """Get the report for entries matching the filters.

    Args:
        de: Earliest ISO date (inclusive).
        ate: Latest ISO date (inclusive).
        modelo: Case-insensitive model substring.
        equipamento: Case-insensitive equipment substring.

    Returns:
        ReportSummary priced with the stored fuel price.
    """
    filters = ReportFilters(de=de, ate=ate, modelo=modelo, equipamento=equipamento)
    fuel_price = load_fuel_price(storage, key=config.fuel_price_key)
    return build_report(store.entries, fuel_price, filters)


@router.get("/reports/charts", response_model=ChartData)
def get_chart_data(store: EntryStore = Depends(get_entry_store)) -> ChartData:
    """Get chart series for all entries."""
    return build_chart_data(store.entries)
