"""Pequeños helpers de maquetación compartidos por las pantallas."""

from __future__ import annotations

from contextlib import contextmanager

import streamlit as st

from unwind.core.controller import AppController
from unwind.core.navigation import NavEvent, available_events
from unwind.core.types import Screen
from unwind.core.wizard import progress_markers
from unwind.ui.state import safe_rerun

TAB_ITEMS: list[tuple[NavEvent, Screen, str]] = [
    (NavEvent.TAB_HOME, Screen.DAILY_PLAN, "🏠 Home"),
    (NavEvent.TAB_LIBRARY, Screen.LIBRARY, "📚 Library"),
    (NavEvent.TAB_PROGRESS, Screen.PROGRESS, "📈 Progress"),
    (NavEvent.TAB_PROFILE, Screen.PROFILE, "👤 Profile"),
]


@contextmanager
def screen_container(name: str):
    """Crea un ``div`` con clases BEM para agrupar el contenido de la pantalla."""

    st.markdown(f"<div class='screen screen--{name}'>", unsafe_allow_html=True)
    try:
        yield
    finally:
        st.markdown("</div>", unsafe_allow_html=True)


def back_button(controller: AppController, *, key: str) -> None:
    if st.button("‹ Back", key=key):
        controller.back()
        safe_rerun()


def wizard_progress(screen: Screen) -> None:
    """Indicador de cuatro segmentos del asistente."""

    segments = "".join(
        f"<span class='wizard-progress__segment{' wizard-progress__segment--on' if on else ''}'></span>"
        for on in progress_markers(screen)
    )
    st.markdown(f"<div class='wizard-progress'>{segments}</div>", unsafe_allow_html=True)


def bottom_nav(controller: AppController) -> None:
    """Barra de pestañas inferior; la pestaña actual se muestra deshabilitada."""

    current = controller.screen
    exposed = set(available_events(current))
    columns = st.columns(len(TAB_ITEMS))
    for column, (event, target, label) in zip(columns, TAB_ITEMS):
        with column:
            if st.button(
                label,
                key=f"tab_{current.value}_{target.value}",
                disabled=event not in exposed,
                use_container_width=True,
            ):
                controller.dispatch(event)
                safe_rerun()
