"""Vista de progreso: objetivo semanal, calendario mensual y logros."""

from __future__ import annotations

from datetime import date
from typing import Sequence

import streamlit as st

from unwind.core.calendar_grid import WEEKDAY_HEADERS, CalendarCell, DisplayedMonth, grid_rows
from unwind.core.controller import AppController
from unwind.core.types import CalendarViewMode, MonthDirection, ProgressTab
from unwind.ui.content import PROGRESS_STATS
from unwind.ui.state import safe_rerun

from .utils import bottom_nav, screen_container


def _cell_class(cell: CalendarCell) -> str:
    if not cell.belongs_to_displayed_month:
        return "calendar__day calendar__day--outside"
    if cell.is_active_day:
        return "calendar__day calendar__day--active"
    return "calendar__day"


def calendar_html(cells: Sequence[CalendarCell]) -> str:
    """Tabla HTML con cabecera de domingo a sábado y una fila por semana."""

    header = "".join(f"<th>{name}</th>" for name in WEEKDAY_HEADERS)
    body = "".join(
        "<tr>"
        + "".join(f"<td class='{_cell_class(cell)}'>{cell.day_number}</td>" for cell in row)
        + "</tr>"
        for row in grid_rows(cells)
    )
    return f"<table class='calendar'><thead><tr>{header}</tr></thead><tbody>{body}</tbody></table>"


def _anchor_day(month: DisplayedMonth) -> int:
    """Día usado por la vista semanal: hoy si cae en el mes mostrado, si no el 1."""

    today = date.today()
    if today.year == month.year and today.month == month.month + 1:
        return today.day
    return 1


def _activity_tab(controller: AppController) -> None:
    snapshot = controller.snapshot()
    weekly_goal = controller.config.ui.weekly_goal

    st.markdown(f"<div class='weekly-goal'><span>0/{weekly_goal}</span><small>Weekly goal</small></div>",
                unsafe_allow_html=True)
    for column, (value, label) in zip(st.columns(len(PROGRESS_STATS)), PROGRESS_STATS):
        column.metric(label, value)

    col_prev, col_label, col_next = st.columns([1, 4, 1])
    with col_prev:
        if st.button("‹", key="month_prev"):
            controller.navigate_month(MonthDirection.PREV)
            safe_rerun()
    with col_label:
        st.markdown(f"<h4 class='calendar__label'>{snapshot.displayed_month.label}</h4>",
                    unsafe_allow_html=True)
    with col_next:
        if st.button("›", key="month_next"):
            controller.navigate_month(MonthDirection.NEXT)
            safe_rerun()

    mode = st.radio(
        "View",
        options=[mode.value for mode in CalendarViewMode],
        format_func=str.capitalize,
        index=[mode for mode in CalendarViewMode].index(snapshot.view_mode),
        horizontal=True,
        label_visibility="collapsed",
        key="progress_view_mode",
    )
    if mode != snapshot.view_mode.value:
        controller.set_view_mode(mode)

    cells = controller.progress.visible_cells(_anchor_day(snapshot.displayed_month))
    st.markdown(calendar_html(cells), unsafe_allow_html=True)


def _achievements_tab() -> None:
    st.markdown("#### Achievements Coming Soon")
    st.write("Complete more sessions to unlock achievements and badges.")


def _progress_screen(controller: AppController) -> None:
    with screen_container("progress"):
        current_tab = controller.progress.tab
        col_activity, col_achievements = st.columns(2)
        for column, tab in ((col_activity, ProgressTab.ACTIVITY), (col_achievements, ProgressTab.ACHIEVEMENTS)):
            with column:
                if st.button(
                    tab.value.capitalize(),
                    key=f"progress_tab_{tab.value}",
                    type="primary" if tab is current_tab else "secondary",
                    use_container_width=True,
                ):
                    controller.toggle_progress_tab(tab)
                    safe_rerun()

        if controller.progress.tab is ProgressTab.ACTIVITY:
            _activity_tab(controller)
        else:
            _achievements_tab()

        bottom_nav(controller)
