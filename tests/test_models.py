"""Tests for domain models and API payloads."""

import pytest
from pydantic import ValidationError

from equiptrack.models.domain import EquipmentEntry
from equiptrack.models.types import EntryDetail, EntryInput


class TestEquipmentEntry:
    """Test EquipmentEntry dict conversion."""

    def test_to_dict_shape(self):
        entry = EquipmentEntry(id="e-1", equipamento="104119", combustivel=3.5)
        assert entry.to_dict() == {
            "id": "e-1",
            "equipamento": "104119",
            "modelo": "",
            "unidade": "",
            "kmh": 0.0,
            "trabalhadas": 0.0,
            "combustivel": 3.5,
            "eficiencia": "",
            "data": "",
        }

    def test_from_dict_round_trip(self):
        entry = EquipmentEntry(id="e-1", eficiencia=2.5, data="2024-01-02")
        assert EquipmentEntry.from_dict(entry.to_dict()) == entry

    def test_from_dict_zero_efficiency_is_not_unset(self):
        entry = EquipmentEntry.from_dict({"id": "e-1", "eficiencia": 0})
        assert entry.eficiencia == 0.0

    def test_from_dict_ignores_booleans(self):
        entry = EquipmentEntry.from_dict({"id": "e-1", "kmh": True})
        assert entry.kmh == 0.0

    def test_from_dict_stringifies_text(self):
        entry = EquipmentEntry.from_dict({"id": 7, "equipamento": 104119})
        assert entry.id == "7"
        assert entry.equipamento == "104119"


class TestEntryInput:
    """Test EntryInput validation."""

    def test_defaults(self):
        entry = EntryInput().to_entry("e-1")
        assert entry.id == "e-1"
        assert entry.eficiencia is None
        assert entry.data is None

    def test_text_is_trimmed(self):
        entry = EntryInput(equipamento="  104119 ", modelo=" Ch570").to_entry("e-1")
        assert entry.equipamento == "104119"
        assert entry.modelo == "Ch570"

    def test_negative_numbers_rejected(self):
        with pytest.raises(ValidationError):
            EntryInput(combustivel=-1)

    def test_date_format(self):
        assert EntryInput(data="2024-05-01").to_entry("e-1").data == "2024-05-01"
        with pytest.raises(ValidationError):
            EntryInput(data="01/05/2024")

    def test_empty_date_is_unset(self):
        assert EntryInput(data="").to_entry("e-1").data is None

    def test_detail_from_entry(self):
        entry = EquipmentEntry(id="e-1", modelo="Ch570", eficiencia=None)
        detail = EntryDetail.from_entry(entry)
        assert detail.id == "e-1"
        assert detail.eficiencia is None

    def test_non_finite_numbers_rejected(self):
        for field in ("kmh", "trabalhadas", "combustivel", "eficiencia"):
            for value in ("inf", "nan", float("inf")):
                with pytest.raises(ValidationError):
                    EntryInput(**{field: value})

    def test_impossible_date_rejected(self):
        with pytest.raises(ValidationError):
            EntryInput(data="2024-13-45")

    def test_date_serialized_as_iso_text(self):
        entry = EntryInput(data="2024-02-29").to_entry("e-1")
        assert entry.data == "2024-02-29"


class TestFromDictNonFinite:
    """Non-finite stored numbers read as 0."""

    def test_infinity_strings(self):
        entry = EquipmentEntry.from_dict(
            {"id": "e-1", "kmh": "Infinity", "combustivel": "nan", "eficiencia": "inf"}
        )
        assert entry.kmh == 0
        assert entry.combustivel == 0
        assert entry.eficiencia == 0

    def test_infinity_floats(self):
        entry = EquipmentEntry.from_dict({"id": "e-1", "trabalhadas": float("inf")})
        assert entry.trabalhadas == 0
