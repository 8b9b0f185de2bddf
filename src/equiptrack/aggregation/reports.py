"""Report aggregation over equipment entries.

Computes totals, rankings and percentage breakdowns from a flat list
of entries. Every function is pure: entries and the fuel price come in
as arguments, nothing is read from storage.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

from equiptrack.models.domain import EquipmentEntry
from equiptrack.models.types import (
    PERCENT_UNAVAILABLE,
    KeyValue,
    PercentBreakdown,
    PercentShare,
    ReportFilters,
    ReportMetrics,
    ReportSummary,
)

T = TypeVar("T")

# Group key used when an entry has no equipment/model name
PLACEHOLDER_KEY = "—"

TOP_N = 5


# ============================================================================
# Basic reductions
# ============================================================================


def sum_values(values: Iterable[float]) -> float:
    """Sum values; empty input gives 0."""
    return float(sum(values, 0.0))


def avg(values: Iterable[float]) -> float:
    """Arithmetic mean; empty input gives 0."""
    items = list(values)
    return sum_values(items) / len(items) if items else 0.0


def group_by(items: Iterable[T], key_fn: Callable[[T], str | None]) -> dict[str, list[T]]:
    """Partition items by key_fn.

    Empty or missing keys are grouped under PLACEHOLDER_KEY. Groups
    appear in first-occurrence order, but callers should not rely on it.
    """
    groups: dict[str, list[T]] = {}
    for item in items:
        key = key_fn(item) or PLACEHOLDER_KEY
        groups.setdefault(key, []).append(item)
    return groups


def _field_value(entry: EquipmentEntry, field: str) -> float:
    value = getattr(entry, field)
    return float(value) if value is not None else 0.0


def map_group_sum(groups: dict[str, list[EquipmentEntry]], field: str) -> dict[str, float]:
    """Sum a numeric entry field within each group."""
    return {key: sum_values(_field_value(e, field) for e in rows) for key, rows in groups.items()}


def max_entry(values: dict[str, float]) -> KeyValue | None:
    """Entry with the greatest value; first one wins ties. None if empty."""
    best: KeyValue | None = None
    for key, value in values.items():
        if best is None or value > best.value:
            best = KeyValue(key=key, value=value)
    return best


def min_entry(values: dict[str, float]) -> KeyValue | None:
    """Entry with the least value; first one wins ties. None if empty."""
    best: KeyValue | None = None
    for key, value in values.items():
        if best is None or value < best.value:
            best = KeyValue(key=key, value=value)
    return best


# ============================================================================
# Distance heuristic
# ============================================================================


def _km_from_speed(entry: EquipmentEntry) -> float:
    return entry.kmh * entry.trabalhadas


def _km_from_efficiency(entry: EquipmentEntry) -> float:
    if not entry.eficiencia or not entry.combustivel:
        return 0.0
    return entry.eficiencia * entry.combustivel


# Tried in order; the first strictly positive estimate is used
KM_POLICY: tuple[tuple[str, Callable[[EquipmentEntry], float]], ...] = (
    ("speed_x_hours", _km_from_speed),
    ("efficiency_x_fuel", _km_from_efficiency),
)


def total_km_from_row(entry: EquipmentEntry) -> float:
    """Estimate distance covered by one entry.

    Walks KM_POLICY and returns the first positive estimate, else 0.
    This is a heuristic: with neither speed nor efficiency recorded
    the distance is simply unknown and reported as 0.
    """
    for _name, formula in KM_POLICY:
        km = formula(entry)
        if km > 0:
            return km
    return 0.0


# ============================================================================
# Metrics and rankings
# ============================================================================


def calculate_metrics(entries: list[EquipmentEntry], fuel_price: float = 0.0) -> ReportMetrics:
    """Compute aggregate totals for a set of entries.

    Args:
        entries: Entries to summarize (already filtered).
        fuel_price: Price per liter used for cost figures.

    Returns:
        ReportMetrics with totals, averages and costs.
    """
    total_horas = sum_values(e.trabalhadas for e in entries)
    total_comb = sum_values(e.combustivel for e in entries)
    recorded = [e.eficiencia for e in entries if e.eficiencia is not None and e.eficiencia > 0]
    custo_total = fuel_price * total_comb

    return ReportMetrics(
        total_horas=total_horas,
        total_comb=total_comb,
        media_kmh=avg(e.kmh for e in entries),
        km_totais=sum_values(total_km_from_row(e) for e in entries),
        eficiencia_media=avg(recorded),
        custo_total=custo_total,
        custo_hora=custo_total / total_horas if total_horas > 0 else 0.0,
    )


def top_n(values: dict[str, float], n: int) -> list[KeyValue]:
    """Highest n values, descending; ties keep their original order."""
    ranked = sorted(values.items(), key=lambda kv: kv[1], reverse=True)
    return [KeyValue(key=k, value=v) for k, v in ranked[:n]]


def hours_by_model(entries: list[EquipmentEntry], n: int = TOP_N) -> list[KeyValue]:
    """Models with the most hours worked."""
    by_model = group_by(entries, lambda e: e.modelo)
    return top_n(map_group_sum(by_model, "trabalhadas"), n)


def consumption_rate_by_equipment(entries: list[EquipmentEntry], n: int = TOP_N) -> list[KeyValue]:
    """Equipment ranked by fuel per hour (L/h); 0 when no hours."""
    rates = {}
    for equip, rows in group_by(entries, lambda e: e.equipamento).items():
        horas = sum_values(r.trabalhadas for r in rows)
        comb = sum_values(r.combustivel for r in rows)
        rates[equip] = comb / horas if horas > 0 else 0.0
    return top_n(rates, n)


def efficiency_by_model(entries: list[EquipmentEntry], n: int = TOP_N) -> list[KeyValue]:
    """Models ranked by estimated km per liter; 0 when no fuel."""
    efficiencies = {}
    for modelo, rows in group_by(entries, lambda e: e.modelo).items():
        km = sum_values(total_km_from_row(r) for r in rows)
        comb = sum_values(r.combustivel for r in rows)
        efficiencies[modelo] = km / comb if comb > 0 else 0.0
    return top_n(efficiencies, n)


def percent_breakdown(values: dict[str, float], total: float) -> PercentBreakdown:
    """Share of each group in total, descending, one decimal place.

    Returns:
        List of PercentShare, or PERCENT_UNAVAILABLE ("-") when total <= 0.
    """
    if total <= 0:
        return PERCENT_UNAVAILABLE
    ranked = sorted(values.items(), key=lambda kv: kv[1], reverse=True)
    return [
        PercentShare(key=k, value=v, percentage=f"{100 * v / total:.1f}") for k, v in ranked
    ]


# ============================================================================
# Filtering and full report
# ============================================================================


def filter_entries(
    entries: list[EquipmentEntry], filters: ReportFilters | None
) -> list[EquipmentEntry]:
    """Apply date-range and substring filters.

    Dates compare as ISO strings, inclusive; an entry without a date
    compares as "" so it fails a lower bound but passes an upper one. Model and equipment filters are case-insensitive substring
    matches. Blank filter values are ignored.
    """
    if filters is None:
        return list(entries)

    rows = list(entries)
    if filters.de:
        rows = [r for r in rows if (r.data or "") >= filters.de]
    if filters.ate:
        rows = [r for r in rows if (r.data or "") <= filters.ate]
    modelo = (filters.modelo or "").strip().lower()
    if modelo:
        rows = [r for r in rows if modelo in r.modelo.lower()]
    equipamento = (filters.equipamento or "").strip().lower()
    if equipamento:
        rows = [r for r in rows if equipamento in r.equipamento.lower()]
    return rows


def build_report(
    entries: list[EquipmentEntry],
    fuel_price: float = 0.0,
    filters: ReportFilters | None = None,
) -> ReportSummary:
    """Build the full report for the entries matching filters.

    Args:
        entries: All entries.
        fuel_price: Price per liter for cost figures.
        filters: Optional report filters.

    Returns:
        ReportSummary with metrics, rankings and participation shares.
    """
    rows = filter_entries(entries, filters)
    metrics = calculate_metrics(rows, fuel_price)

    by_equip = group_by(rows, lambda e: e.equipamento)
    horas_por_equip = map_group_sum(by_equip, "trabalhadas")
    comb_por_equip = map_group_sum(by_equip, "combustivel")

    return ReportSummary(
        entry_count=len(rows),
        fuel_price=fuel_price,
        metrics=metrics,
        horas_por_modelo=hours_by_model(rows),
        equip_mais_horas=max_entry(horas_por_equip),
        equip_menos_horas=min_entry(horas_por_equip),
        ranking_consumo_hora=consumption_rate_by_equipment(rows),
        eficiencia_por_modelo=efficiency_by_model(rows),
        participacao_horas=percent_breakdown(horas_por_equip, metrics.total_horas),
        participacao_combustivel=percent_breakdown(comb_por_equip, metrics.total_comb),
    )
