#!/usr/bin/env python3
"""Seed a demo database with sample equipment entries.

Usage:
    python scripts/seed_demo.py

This script:
1. Writes a demo CSV in the spreadsheet layout if missing
2. Imports it into the demo database (replacing existing entries)
3. Stores a demo fuel price
4. Prints the resulting report
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from equiptrack.aggregation.reports import build_report  # noqa: E402
from equiptrack.cli import render_report  # noqa: E402
from equiptrack.codec.csv_codec import from_csv  # noqa: E402
from equiptrack.store.entries import EntryStore  # noqa: E402
from equiptrack.store.settings import save_fuel_price  # noqa: E402
from equiptrack.store.slots import SlotStorage  # noqa: E402

# Constants
DEMO_DB_PATH = PROJECT_ROOT / "demo.db"
DEMO_ASSETS_DIR = PROJECT_ROOT / "demo_assets"
DEMO_CSV_PATH = DEMO_ASSETS_DIR / "demo_equipamentos.csv"
DEMO_FUEL_PRICE = 5.89

DEMO_ROWS = [
    "Equipamento;Modelo;Unidade;KM/h Trabalhadas;Combustivel Consumido;Km/l / L/h",
    "104119;Ch570;Usina Norte;1.250,5;9.870,25;",
    "104120;Ch570;Usina Norte;980;7.540,8;",
    "205001;CT1500;Usina Sul;640,25;2.110;3,2",
    "205002;CT1500;Usina Sul;0;850,5;4,1",
    "310077;T8 Trator;Usina Sul;1.102;6.200;",
]


def create_demo_csv() -> Path:
    """Write the demo CSV unless it already exists.

    Returns:
        Path to the demo CSV.
    """
    DEMO_ASSETS_DIR.mkdir(parents=True, exist_ok=True)
    if not DEMO_CSV_PATH.exists():
        DEMO_CSV_PATH.write_text("\n".join(DEMO_ROWS) + "\n", encoding="utf-8")
        print(f"Created: {DEMO_CSV_PATH}")
    return DEMO_CSV_PATH


def seed_database(csv_path: Path) -> EntryStore:
    """Import the demo CSV and store the demo fuel price.

    Args:
        csv_path: CSV file to import.

    Returns:
        Loaded entry store.
    """
    storage = SlotStorage.from_path(DEMO_DB_PATH)
    store = EntryStore(storage)
    store.load()

    entries = from_csv(csv_path.read_text(encoding="utf-8"))
    store.replace_all(entries)
    print(f"Imported {len(entries)} entries")

    save_fuel_price(storage, DEMO_FUEL_PRICE)
    print(f"Fuel price set to {DEMO_FUEL_PRICE}")
    return store


def main() -> int:
    """Main entry point."""
    print("=" * 60)
    print("equiptrack Demo Seeding Script")
    print("=" * 60)

    print("\n[1/3] Creating demo CSV...")
    csv_path = create_demo_csv()

    print("\n[2/3] Seeding database...")
    store = seed_database(csv_path)

    print("\n[3/3] Report:")
    print(render_report(build_report(store.entries, DEMO_FUEL_PRICE)))

    print("\n" + "=" * 60)
    print("Demo seeding complete!")
    print(f"Database: {DEMO_DB_PATH}")
    print("=" * 60)

    return 0


if __name__ == "__main__":
    sys.exit(main())
