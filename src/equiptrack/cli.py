"""Command line interface for equiptrack.

Usage:
    equiptrack serve --port 8000
    equiptrack import planilha.csv
    equiptrack export equipamentos.csv
    equiptrack report --modelo ch570 --fuel-price 5,89
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from equiptrack.aggregation.reports import build_report
from equiptrack.codec.csv_codec import from_csv, to_csv
from equiptrack.config import AppConfig
from equiptrack.core.numbers import format_number, parse_float_value
from equiptrack.models.types import PERCENT_UNAVAILABLE, KeyValue, ReportFilters, ReportSummary
from equiptrack.store.entries import EntryStore
from equiptrack.store.settings import load_fuel_price, save_fuel_price
from equiptrack.store.slots import SlotStorage

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="equiptrack",
        description="Equipment fuel and usage tracker.",
    )
    parser.add_argument("--db", type=Path, default=None, help="SQLite database path.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the HTTP API.")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)

    imp = sub.add_parser("import", help="Replace all entries with a CSV file.")
    imp.add_argument("path", type=Path)

    exp = sub.add_parser("export", help="Write all entries to a CSV file.")
    exp.add_argument("path", type=Path)

    rep = sub.add_parser("report", help="Print the usage report.")
    rep.add_argument("--de", help="Earliest date, YYYY-MM-DD.")
    rep.add_argument("--ate", help="Latest date, YYYY-MM-DD.")
    rep.add_argument("--modelo", help="Model substring.")
    rep.add_argument("--equipamento", help="Equipment substring.")
    rep.add_argument(
        "--fuel-price",
        help="Fuel price in R$/L (e.g. 5,89); stored for later reports.",
    )

    return parser.parse_args(argv)


def _open_store(config: AppConfig) -> tuple[SlotStorage, EntryStore]:
    storage = SlotStorage.from_path(config.db_path)
    store = EntryStore(storage, key=config.entries_key)
    store.load()
    return storage, store


def _cmd_serve(config: AppConfig, args: argparse.Namespace) -> int:
    import uvicorn

    from equiptrack.api.app import create_app

    uvicorn.run(create_app(config), host=args.host, port=args.port)
    return 0


def _cmd_import(config: AppConfig, args: argparse.Namespace) -> int:
    try:
        text = args.path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Invalid CSV: {e}", file=sys.stderr)
        return 1

    _, store = _open_store(config)
    entries = from_csv(text)
    store.replace_all(entries)
    logger.info(f"Imported {len(entries)} entries from {args.path}")
    print(f"{len(entries)} entries imported")
    return 0


def _cmd_export(config: AppConfig, args: argparse.Namespace) -> int:
    _, store = _open_store(config)
    args.path.write_text(to_csv(store.entries), encoding="utf-8")
    print(f"{len(store)} entries exported to {args.path}")
    return 0


def _format_ranking(items: list[KeyValue], suffix: str = "") -> list[str]:
    return [f"  {i}. {item.key}: {format_number(item.value)}{suffix}" for i, item in enumerate(items, 1)]


def render_report(summary: ReportSummary) -> str:
    """Render a report summary as plain text with pt-BR numbers."""
    m = summary.metrics
    lines = [
        f"Registros: {summary.entry_count}",
        f"Total de Horas: {format_number(m.total_horas)} h",
        f"Combustível: {format_number(m.total_comb)} L",
        f"Média KM/h: {format_number(m.media_kmh)}",
        f"Km Totais: {format_number(m.km_totais)} km",
        f"Eficiência Média: {format_number(m.eficiencia_media)}",
        f"Custo Total: R$ {format_number(m.custo_total)}",
        f"Custo por Hora: R$ {format_number(m.custo_hora)}",
        "",
        "Horas por Modelo (top 5):",
        *_format_ranking(summary.horas_por_modelo, " h"),
    ]

    for title, extreme in (
        ("Mais Utilizado", summary.equip_mais_horas),
        ("Menos Utilizado", summary.equip_menos_horas),
    ):
        if extreme is None:
            lines.append(f"{title}: -")
        else:
            lines.append(f"{title}: {extreme.key} ({format_number(extreme.value)} h)")

    lines += [
        "",
        "Ranking Consumo/Hora (L/h):",
        *_format_ranking(summary.ranking_consumo_hora, " L/h"),
        "Eficiência por Modelo (km/L):",
        *_format_ranking(summary.eficiencia_por_modelo, " km/L"),
    ]

    for title, shares in (
        ("Participação em Horas", summary.participacao_horas),
        ("Participação em Combustível", summary.participacao_combustivel),
    ):
        if shares == PERCENT_UNAVAILABLE:
            lines.append(f"{title}: -")
            continue
        lines.append(f"{title}:")
        lines += [f"  {share.key}: {share.percentage}%" for share in shares]

    return "\n".join(lines)


def _cmd_report(config: AppConfig, args: argparse.Namespace) -> int:
    storage, store = _open_store(config)
    if args.fuel_price is not None:
        fuel_price = save_fuel_price(
            storage, parse_float_value(args.fuel_price), key=config.fuel_price_key
        )
    else:
        fuel_price = load_fuel_price(storage, key=config.fuel_price_key)

    filters = ReportFilters(
        de=args.de, ate=args.ate, modelo=args.modelo, equipamento=args.equipamento
    )
    print(render_report(build_report(store.entries, fuel_price, filters)))
    return 0


_COMMANDS = {
    "serve": _cmd_serve,
    "import": _cmd_import,
    "export": _cmd_export,
    "report": _cmd_report,
}


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    config = AppConfig.from_env(db_path=args.db)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return _COMMANDS[args.command](config, args)


if __name__ == "__main__":
    sys.exit(main())
