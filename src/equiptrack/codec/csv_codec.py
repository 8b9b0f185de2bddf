"""CSV import/export of equipment entries.

Export always writes the canonical six-column, semicolon-separated
layout. Import is lenient: it accepts ";", tab or "," as delimiter,
recognizes several spellings of each header, and degrades malformed
cells to empty strings or zeros instead of failing.

Fields are not quoted or escaped. A value containing the delimiter
shifts the remaining cells of its row on the next import.
"""

from __future__ import annotations

import logging
import re
import unicodedata

from equiptrack.core.identity import new_entry_id
from equiptrack.core.numbers import parse_float_value
from equiptrack.models.domain import EquipmentEntry

logger = logging.getLogger(__name__)

DELIMITER = ";"

HEADER = (
    "Equipamento",
    "Modelo",
    "Unidade",
    "KM/h Trabalhadas",
    "Combustivel Consumido",
    "Km/l / L/h",
)

# Field order of the canonical layout; also the positional fallback
FIELDS = ("equipamento", "modelo", "unidade", "trabalhadas", "combustivel", "eficiencia")

# Normalized header spellings per field, in lookup priority
HEADER_ALIASES: dict[str, tuple[str, ...]] = {
    "equipamento": ("equipamento",),
    "modelo": ("modelo",),
    "unidade": ("unidade",),
    "trabalhadas": ("km/h trabalhadas", "trabalhadas", "horas trabalhadas"),
    "combustivel": ("combustivel consumido", "combustivel", "consumo"),
    "eficiencia": ("km/l / l/h", "km/l", "l/h"),
}

_LINE_SPLIT = re.compile(r"\r?\n")
_NON_HEADER_CHARS = re.compile(r"[^a-z0-9/ ]+")
_WHITESPACE = re.compile(r"\s+")


# ============================================================================
# Encode
# ============================================================================


def to_csv(entries: list[EquipmentEntry]) -> str:
    """Encode entries in the canonical layout.

    Args:
        entries: Entries to export.

    Returns:
        CSV text, lines joined with "\\n", no trailing newline.
    """
    lines = [DELIMITER.join(HEADER)]
    for entry in entries:
        cells = [
            entry.equipamento,
            entry.modelo,
            entry.unidade,
            _format_cell_number(entry.trabalhadas),
            _format_cell_number(entry.combustivel),
            "" if entry.eficiencia is None else _format_cell_number(entry.eficiencia),
        ]
        lines.append(DELIMITER.join(cells))
    return "\n".join(lines)


def _format_cell_number(value: float) -> str:
    """Write a number with "," as decimal separator and no grouping.

    This is the convention parse_float_value reads back losslessly.
    """
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value)).replace(".", ",")


# ============================================================================
# Decode
# ============================================================================


def detect_delimiter(header_line: str) -> str:
    """Pick ";" if present in the header, else tab, else ","."""
    if ";" in header_line:
        return ";"
    if "\t" in header_line:
        return "\t"
    return ","


def normalize_header(name: str) -> str:
    """Normalize a header cell for alias lookup.

    Lowercases, strips accents, drops everything except a-z, 0-9, "/"
    and spaces, and collapses whitespace.

    >>> normalize_header("  Combustível  Consumido (L) ")
    'combustivel consumido l'
    """
    decomposed = unicodedata.normalize("NFKD", name.lower())
    ascii_only = "".join(c for c in decomposed if not unicodedata.combining(c))
    cleaned = _NON_HEADER_CHARS.sub("", ascii_only)
    return _WHITESPACE.sub(" ", cleaned).strip()


def resolve_columns(headers: list[str]) -> dict[str, int | None]:
    """Map each entry field to a column index.

    Matching is by normalized name through HEADER_ALIASES. When the
    header has exactly six columns, fields that found no match take
    their position in the canonical layout.

    Args:
        headers: Raw header cells.

    Returns:
        Field name -> column index, or None when the column is absent.
    """
    name_to_index: dict[str, int] = {}
    for i, header in enumerate(headers):
        # later duplicates win
        name_to_index[normalize_header(header)] = i

    columns: dict[str, int | None] = {}
    for field_name, aliases in HEADER_ALIASES.items():
        columns[field_name] = next(
            (name_to_index[alias] for alias in aliases if alias in name_to_index),
            None,
        )

    if len(headers) == len(FIELDS):
        for position, field_name in enumerate(FIELDS):
            if columns[field_name] is None:
                columns[field_name] = position

    return columns


def from_csv(text: str) -> list[EquipmentEntry]:
    """Decode CSV text into new entries.

    Every decoded row gets a fresh id; source ids are never preserved.
    Rows are never rejected: missing cells become "" and unreadable
    numbers become 0.

    Args:
        text: Raw file contents.

    Returns:
        Decoded entries; empty when the text has fewer than two
        non-blank lines.
    """
    lines = [line for line in _LINE_SPLIT.split(text) if line.strip()]
    if len(lines) < 2:
        return []

    delimiter = detect_delimiter(lines[0])
    headers = [h.strip() for h in lines[0].split(delimiter)]
    columns = resolve_columns(headers)

    unresolved = [name for name, idx in columns.items() if idx is None]
    if unresolved:
        logger.info(f"CSV columns not found, using defaults: {', '.join(unresolved)}")

    entries = []
    for line in lines[1:]:
        cells = line.split(delimiter)

        def cell(field_name: str) -> str:
            idx = columns[field_name]
            if idx is None or idx >= len(cells):
                return ""
            return cells[idx].strip()

        raw_efficiency = cell("eficiencia")
        entries.append(
            EquipmentEntry(
                id=new_entry_id(),
                equipamento=cell("equipamento"),
                modelo=cell("modelo"),
                unidade=cell("unidade"),
                # the layout carries hours, never speed
                kmh=0.0,
                trabalhadas=parse_float_value(cell("trabalhadas")),
                combustivel=parse_float_value(cell("combustivel")),
                eficiencia=parse_float_value(raw_efficiency) if raw_efficiency else None,
            )
        )

    logger.debug(f"Decoded {len(entries)} CSV rows with delimiter {delimiter!r}")
    return entries
