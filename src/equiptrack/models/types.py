"""Pydantic models for the equiptrack API and reports.

Report field names follow the labels of the original spreadsheet
reports (horas, combustivel, custo...), in snake_case.
"""

from __future__ import annotations

from datetime import date
from typing import Literal

from pydantic import BaseModel, Field, FiniteFloat, field_validator

from equiptrack.models.domain import EquipmentEntry

# Sentinel rendered instead of a percentage list when the total is not positive
PERCENT_UNAVAILABLE = "-"


class EntryInput(BaseModel):
    """Payload for creating or replacing an entry."""

    equipamento: str = ""
    modelo: str = ""
    unidade: str = ""
    kmh: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    trabalhadas: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    combustivel: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    eficiencia: FiniteFloat | None = None
    data: date | None = None

    @field_validator("data", mode="before")
    @classmethod
    def _blank_date_is_unset(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def to_entry(self, entry_id: str) -> EquipmentEntry:
        """Build a domain entry with the given id."""
        return EquipmentEntry(
            id=entry_id,
            equipamento=self.equipamento.strip(),
            modelo=self.modelo.strip(),
            unidade=self.unidade.strip(),
            kmh=self.kmh,
            trabalhadas=self.trabalhadas,
            combustivel=self.combustivel,
            eficiencia=self.eficiencia,
            data=self.data.isoformat() if self.data else None,
        )


class EntryDetail(BaseModel):
    """Entry as returned by the API."""

    id: str
    equipamento: str
    modelo: str
    unidade: str
    kmh: float
    trabalhadas: float
    combustivel: float
    eficiencia: float | None
    data: str | None

    @classmethod
    def from_entry(cls, entry: EquipmentEntry) -> EntryDetail:
        return cls(
            id=entry.id,
            equipamento=entry.equipamento,
            modelo=entry.modelo,
            unidade=entry.unidade,
            kmh=entry.kmh,
            trabalhadas=entry.trabalhadas,
            combustivel=entry.combustivel,
            eficiencia=entry.eficiencia,
            data=entry.data,
        )


class ReportFilters(BaseModel):
    """Report filters; blank values are ignored."""

    de: str | None = None
    ate: str | None = None
    modelo: str | None = None
    equipamento: str | None = None


class ReportMetrics(BaseModel):
    """Aggregate totals over a set of entries."""

    total_horas: float
    total_comb: float
    media_kmh: float
    km_totais: float
    eficiencia_media: float
    custo_total: float
    custo_hora: float


class KeyValue(BaseModel):
    """A single (group key, value) pair."""

    key: str
    value: float


class PercentShare(BaseModel):
    """Share of one group in a grand total."""

    key: str
    value: float
    percentage: str  # one decimal place, e.g. "33.3"


PercentBreakdown = list[PercentShare] | Literal["-"]


class ReportSummary(BaseModel):
    """Full report for the (filtered) entries."""

    entry_count: int
    fuel_price: float
    metrics: ReportMetrics
    horas_por_modelo: list[KeyValue]
    equip_mais_horas: KeyValue | None
    equip_menos_horas: KeyValue | None
    ranking_consumo_hora: list[KeyValue]
    eficiencia_por_modelo: list[KeyValue]
    participacao_horas: PercentBreakdown
    participacao_combustivel: PercentBreakdown


class ChartSeries(BaseModel):
    """Labelled data series for one chart dataset."""

    label: str
    labels: list[str]
    values: list[float]


class UtilizationSeries(BaseModel):
    """Hours and fuel per equipment, sharing the same labels."""

    labels: list[str]
    horas: list[float]
    combustivel: list[float]


class ChartData(BaseModel):
    """All chart series derived from the entries."""

    eficiencia: ChartSeries
    combustivel: ChartSeries
    horas_por_modelo: ChartSeries
    consumo_hora: ChartSeries
    utilizacao: UtilizationSeries


class FuelPrice(BaseModel):
    """Fuel price setting (R$/L)."""

    price: float = Field(ge=0, allow_inf_nan=False)


class ImportResult(BaseModel):
    """Outcome of a CSV import."""

    imported: int
