"""Chart series derived from equipment entries.

Only the data is produced here; rendering is up to the client.
"""

from __future__ import annotations

from equiptrack.aggregation.reports import (
    PLACEHOLDER_KEY,
    group_by,
    map_group_sum,
    sum_values,
    total_km_from_row,
)
from equiptrack.models.domain import EquipmentEntry
from equiptrack.models.types import ChartData, ChartSeries, UtilizationSeries

CONSUMPTION_TOP_N = 10
UTILIZATION_MAX_EQUIPMENT = 8


def _label(entry: EquipmentEntry) -> str:
    return entry.equipamento or PLACEHOLDER_KEY


def _entry_efficiency(entry: EquipmentEntry) -> float:
    if entry.combustivel > 0:
        return total_km_from_row(entry) / entry.combustivel
    return entry.eficiencia or 0.0


def efficiency_series(entries: list[EquipmentEntry]) -> ChartSeries:
    """Per-entry km/L, falling back to the recorded efficiency."""
    return ChartSeries(
        label="Eficiência (km/L)",
        labels=[_label(e) for e in entries],
        values=[_entry_efficiency(e) for e in entries],
    )


def fuel_series(entries: list[EquipmentEntry]) -> ChartSeries:
    """Per-entry fuel consumed."""
    return ChartSeries(
        label="Combustível (L)",
        labels=[_label(e) for e in entries],
        values=[e.combustivel for e in entries],
    )


def hours_by_model_series(entries: list[EquipmentEntry]) -> ChartSeries:
    """Hours worked per model, all models."""
    hours = map_group_sum(group_by(entries, lambda e: e.modelo), "trabalhadas")
    return ChartSeries(
        label="Horas Trabalhadas",
        labels=list(hours.keys()),
        values=list(hours.values()),
    )


def consumption_rate_series(
    entries: list[EquipmentEntry], n: int = CONSUMPTION_TOP_N
) -> ChartSeries:
    """Entries with the highest fuel per hour (L/h), descending."""
    rates = [
        (_label(e), e.combustivel / e.trabalhadas if e.trabalhadas > 0 else 0.0)
        for e in entries
    ]
    rates.sort(key=lambda pair: pair[1], reverse=True)
    top = rates[:n]
    return ChartSeries(
        label="Consumo (L/h)",
        labels=[label for label, _ in top],
        values=[value for _, value in top],
    )


def utilization_series(
    entries: list[EquipmentEntry], limit: int = UTILIZATION_MAX_EQUIPMENT
) -> UtilizationSeries:
    """Hours and fuel per equipment for the first `limit` equipment groups."""
    by_equip = group_by(entries, lambda e: e.equipamento)
    names = list(by_equip.keys())[:limit]
    return UtilizationSeries(
        labels=names,
        horas=[sum_values(r.trabalhadas for r in by_equip[name]) for name in names],
        combustivel=[sum_values(r.combustivel for r in by_equip[name]) for name in names],
    )


def build_chart_data(entries: list[EquipmentEntry]) -> ChartData:
    """Bundle every chart series."""
    return ChartData(
        eficiencia=efficiency_series(entries),
        combustivel=fuel_series(entries),
        horas_por_modelo=hours_by_model_series(entries),
        consumo_hora=consumption_rate_series(entries),
        utilizacao=utilization_series(entries),
    )
