"""Estado de la vista de progreso: mes mostrado, pestaña y modo del calendario."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import FrozenSet, List, Union

from .calendar_grid import CalendarCell, DisplayedMonth, build_calendar_grid, week_row
from .types import CalendarViewMode, MonthDirection, ProgressTab, as_choice

logger = logging.getLogger(__name__)


@dataclass
class ProgressView:
    displayed_month: DisplayedMonth
    active_days: FrozenSet[int] = field(default_factory=frozenset)
    tab: ProgressTab = ProgressTab.ACTIVITY
    view_mode: CalendarViewMode = CalendarViewMode.MONTH

    def navigate_month(self, direction: Union[str, MonthDirection]) -> DisplayedMonth:
        """Cambia solo el mes mostrado; el resto del estado no se toca."""

        self.displayed_month = self.displayed_month.shift(direction)
        logger.debug("Mes mostrado: %s", self.displayed_month.label)
        return self.displayed_month

    def toggle_tab(self, tab: Union[str, ProgressTab]) -> None:
        self.tab = as_choice(ProgressTab, tab)

    def set_view_mode(self, mode: Union[str, CalendarViewMode]) -> None:
        self.view_mode = as_choice(CalendarViewMode, mode)

    def grid(self) -> List[CalendarCell]:
        month = self.displayed_month
        return build_calendar_grid(month.year, month.month, self.active_days)

    def visible_cells(self, anchor_day: int = 1) -> List[CalendarCell]:
        """Celdas a dibujar según el modo: la cuadrícula completa o una semana."""

        cells = self.grid()
        if self.view_mode is CalendarViewMode.WEEK:
            return week_row(cells, anchor_day)
        return cells
