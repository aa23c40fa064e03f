from __future__ import annotations

import streamlit as st

from unwind.core.controller import AppController
from unwind.core.navigation import NavEvent
from unwind.ui.content import PROFILE_MEMBER_SINCE, PROFILE_NAME, PROFILE_STATS
from unwind.ui.state import safe_rerun

from .utils import bottom_nav, screen_container

# Entradas de menú sin destino en el prototipo.
_STATIC_MENU = ["Account Settings", "Notifications", "Privacy & Security", "Help & Support"]


def _profile_screen(controller: AppController) -> None:
    with screen_container("profile"):
        st.markdown("## Profile")
        with st.container(border=True):
            st.markdown(f"### {PROFILE_NAME}")
            st.caption(PROFILE_MEMBER_SINCE)
            for column, (value, label) in zip(st.columns(len(PROFILE_STATS)), PROFILE_STATS):
                column.metric(label, value)

        for label in _STATIC_MENU:
            st.button(f"{label} ›", key=f"profile_{label}", use_container_width=True)

        if st.button("Terms of Use ›", key="profile_terms", use_container_width=True):
            controller.dispatch(NavEvent.OPEN_TERMS)
            safe_rerun()
        if st.button("Privacy Policy ›", key="profile_privacy", use_container_width=True):
            controller.dispatch(NavEvent.OPEN_PRIVACY)
            safe_rerun()
        if st.button("Logout", key="profile_logout", use_container_width=True):
            controller.logout()
            safe_rerun()

        bottom_nav(controller)
