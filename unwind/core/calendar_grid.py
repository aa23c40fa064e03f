"""Generación de la cuadrícula mensual de 6x7 días para la vista de progreso.

La cuadrícula empieza en domingo. Los huecos anteriores al día 1 se rellenan
con los últimos días del mes previo y los posteriores al último día con los
primeros del mes siguiente hasta completar 42 celdas. Solo los días del mes
mostrado pueden marcarse como activos."""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple, Union

from .errors import InvalidMonthError
from .types import MonthDirection, Weekday, as_choice

GRID_ROWS = 6
GRID_COLUMNS = 7
GRID_SIZE = GRID_ROWS * GRID_COLUMNS

WEEKDAY_HEADERS: Tuple[str, ...] = tuple(day.value for day in Weekday)


@dataclass(frozen=True)
class CalendarCell:
    day_number: int
    belongs_to_displayed_month: bool
    is_active_day: bool = False


@dataclass(frozen=True)
class DisplayedMonth:
    """Par ``(año, mes)`` con el mes en base 0 (enero = 0)."""

    year: int
    month: int

    def __post_init__(self) -> None:
        if not 0 <= int(self.month) <= 11:
            raise InvalidMonthError(f"Mes fuera de rango: {self.month!r} (se espera 0..11)")

    @property
    def label(self) -> str:
        return f"{calendar.month_name[self.month + 1]} {self.year}"

    def previous(self) -> "DisplayedMonth":
        if self.month == 0:
            return DisplayedMonth(self.year - 1, 11)
        return DisplayedMonth(self.year, self.month - 1)

    def following(self) -> "DisplayedMonth":
        if self.month == 11:
            return DisplayedMonth(self.year + 1, 0)
        return DisplayedMonth(self.year, self.month + 1)

    def shift(self, direction: Union[str, MonthDirection]) -> "DisplayedMonth":
        """Avanza o retrocede un mes ajustando el año en los extremos."""

        if as_choice(MonthDirection, direction) is MonthDirection.PREV:
            return self.previous()
        return self.following()


def _check_month(month: int) -> None:
    if not 0 <= month <= 11:
        raise InvalidMonthError(f"Mes fuera de rango: {month!r} (se espera 0..11)")


def days_in_month(year: int, month: int) -> int:
    """Número de días de ``month`` (base 0), teniendo en cuenta los bisiestos."""

    _check_month(month)
    return calendar.monthrange(year, month + 1)[1]


def first_weekday(year: int, month: int) -> int:
    """Día de la semana del día 1 con domingo = 0 y sábado = 6."""

    _check_month(month)
    # ``calendar`` numera con lunes = 0.
    return (calendar.monthrange(year, month + 1)[0] + 1) % 7


def build_calendar_grid(year: int, month: int, active_days: Iterable[int] = ()) -> List[CalendarCell]:
    """Construye las 42 celdas de ``(year, month)`` en orden de lectura."""

    active = set(active_days)
    leading = first_weekday(year, month)
    current_days = days_in_month(year, month)
    prev_month = DisplayedMonth(year, month).previous()
    prev_days = days_in_month(prev_month.year, prev_month.month)

    cells: List[CalendarCell] = [
        CalendarCell(day_number=prev_days - leading + 1 + offset, belongs_to_displayed_month=False)
        for offset in range(leading)
    ]
    cells.extend(
        CalendarCell(day_number=day, belongs_to_displayed_month=True, is_active_day=day in active)
        for day in range(1, current_days + 1)
    )
    trailing = GRID_SIZE - len(cells)
    cells.extend(
        CalendarCell(day_number=day, belongs_to_displayed_month=False)
        for day in range(1, trailing + 1)
    )
    return cells


def grid_rows(cells: Sequence[CalendarCell]) -> List[List[CalendarCell]]:
    """Parte la cuadrícula en filas de siete celdas."""

    return [list(cells[start:start + GRID_COLUMNS]) for start in range(0, len(cells), GRID_COLUMNS)]


def week_row(cells: Sequence[CalendarCell], day: int) -> List[CalendarCell]:
    """Fila que contiene el día ``day`` del mes mostrado (vista semanal).

    Si ``day`` no existe en el mes se usa la fila del día 1."""

    rows = grid_rows(cells)
    for row in rows:
        if any(cell.belongs_to_displayed_month and cell.day_number == day for cell in row):
            return row
    for row in rows:
        if any(cell.belongs_to_displayed_month and cell.day_number == 1 for cell in row):
            return row
    return rows[0] if rows else []
