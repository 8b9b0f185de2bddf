"""Domain models for equiptrack.

Pure Python dataclasses representing domain entities.
These models are independent of SQLAlchemy and of the HTTP layer;
the persisted JSON shape is produced and read here.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any

from equiptrack.core.identity import new_entry_id
from equiptrack.core.numbers import parse_float_value

logger = logging.getLogger(__name__)


# ============================================================================
# Equipment Entry Domain
# ============================================================================


@dataclass
class EquipmentEntry:
    """One equipment-usage record.

    Attributes:
        id: Opaque unique identifier, immutable once created.
        equipamento: Equipment name or tag.
        modelo: Model name.
        unidade: Operating unit or site.
        kmh: Average speed in km/h.
        trabalhadas: Hours worked (0 when not tracked).
        combustivel: Fuel consumed, liters.
        eficiencia: Recorded efficiency (km/L or L/h); None when unset.
        data: Optional ISO date (YYYY-MM-DD), only used for filtering.
    """

    id: str
    equipamento: str = ""
    modelo: str = ""
    unidade: str = ""
    kmh: float = 0.0
    trabalhadas: float = 0.0
    combustivel: float = 0.0
    eficiencia: float | None = None
    data: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the persisted JSON shape.

        Unset efficiency and date are written as empty strings.
        """
        return {
            "id": self.id,
            "equipamento": self.equipamento,
            "modelo": self.modelo,
            "unidade": self.unidade,
            "kmh": self.kmh,
            "trabalhadas": self.trabalhadas,
            "combustivel": self.combustivel,
            "eficiencia": "" if self.eficiencia is None else self.eficiencia,
            "data": self.data or "",
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> EquipmentEntry:
        """Build an entry from a persisted dict, tolerating loose values.

        Numeric fields accept numbers or numeric strings and fall back to 0.
        A missing id is replaced with a fresh one.

        Args:
            raw: Dict as stored in the entries slot.

        Returns:
            EquipmentEntry instance.
        """
        entry_id = raw.get("id")
        if not entry_id:
            entry_id = new_entry_id()
            logger.debug(f"Stored entry without id, assigned {entry_id}")

        return cls(
            id=str(entry_id),
            equipamento=_as_text(raw.get("equipamento")),
            modelo=_as_text(raw.get("modelo")),
            unidade=_as_text(raw.get("unidade")),
            kmh=_as_number(raw.get("kmh")),
            trabalhadas=_as_number(raw.get("trabalhadas")),
            combustivel=_as_number(raw.get("combustivel")),
            eficiencia=_as_optional_number(raw.get("eficiencia")),
            data=_as_text(raw.get("data")) or None,
        )


def _as_text(value: Any) -> str:
    return "" if value is None else str(value)


def _as_number(value: Any) -> float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return parse_float_value(value)
    if isinstance(value, str):
        # Stored values are plain decimals, not the CSV comma convention
        try:
            number = float(value)
        except ValueError:
            return parse_float_value(value)
        return number if math.isfinite(number) else 0.0
    return 0.0


def _as_optional_number(value: Any) -> float | None:
    if value is None or value == "":
        return None
    return _as_number(value)
