"""Command-line tool that prints the progress calendar for a month."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, List, Sequence

from unwind import config
from unwind.config.settings import LOG_FORMAT
from unwind.core.calendar_grid import (
    WEEKDAY_HEADERS,
    CalendarCell,
    DisplayedMonth,
    build_calendar_grid,
    grid_rows,
)

LOGGER = logging.getLogger(__name__)


def _month_number(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"{value!r} no es un mes válido") from exc
    if not 1 <= number <= 12:
        raise argparse.ArgumentTypeError("El mes debe estar entre 1 y 12")
    return number


def _day_list(value: str) -> List[int]:
    try:
        days = [int(part) for part in value.split(",") if part.strip()]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"{value!r} no es una lista de días válida") from exc
    if any(not 1 <= day <= 31 for day in days):
        raise argparse.ArgumentTypeError("Los días activos deben estar entre 1 y 31")
    return days


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Muestra la cuadrícula 6x7 del calendario de progreso.",
    )
    parser.add_argument("--config", default=None, help="YAML de configuración (por defecto UNWIND_CONFIG).")
    parser.add_argument("--year", type=int, default=None, help="Año a mostrar.")
    parser.add_argument(
        "--month",
        type=_month_number,
        default=None,
        help="Mes a mostrar, de 1 (enero) a 12 (diciembre).",
    )
    parser.add_argument(
        "--active",
        type=_day_list,
        default=None,
        help="Días practicados separados por comas, p. ej. 18,19,20.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Muestra mensajes de log detallados durante la ejecución.",
    )
    return parser


def _configure_logging(verbose: bool) -> None:
    level = logging.INFO if verbose else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)


def render_text_grid(month: DisplayedMonth, cells: Sequence[CalendarCell]) -> str:
    """Texto de la cuadrícula: días ajenos al mes entre paréntesis, activos con ``*``."""

    def _cell(cell: CalendarCell) -> str:
        if not cell.belongs_to_displayed_month:
            return f"({cell.day_number:>2})"
        marker = "*" if cell.is_active_day else " "
        return f" {cell.day_number:>2}{marker}"

    lines = [month.label.center(7 * 5 - 1)]
    lines.append(" ".join(f"{name:^4}" for name in WEEKDAY_HEADERS))
    lines.extend(" ".join(_cell(cell) for cell in row) for row in grid_rows(cells))
    return "\n".join(lines)


def main(argv: Iterable[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.verbose)

    cfg = config.load_config(args.config)
    year = args.year if args.year is not None else cfg.calendar.initial_year
    month = args.month - 1 if args.month is not None else cfg.calendar.initial_month
    active_days = args.active if args.active is not None else cfg.calendar.active_days

    displayed = DisplayedMonth(year, month)
    LOGGER.info("Generando calendario de %s con %d días activos", displayed.label, len(active_days))
    cells = build_calendar_grid(displayed.year, displayed.month, active_days)
    print(render_text_grid(displayed, cells))
    return 0


if __name__ == "__main__":
    sys.exit(main())
