from __future__ import annotations

import streamlit as st

from unwind.config import APP_NAME
from unwind.core.controller import AppController
from unwind.core.navigation import NavEvent
from unwind.ui.state import safe_rerun

from .utils import screen_container


def legal_links(controller: AppController, *, key_prefix: str) -> None:
    """Enlaces a Términos y Privacidad presentes en varias pantallas."""

    col_terms, col_privacy = st.columns(2)
    with col_terms:
        if st.button("Terms of Use", key=f"{key_prefix}_terms", type="tertiary"):
            controller.dispatch(NavEvent.OPEN_TERMS)
            safe_rerun()
    with col_privacy:
        if st.button("Privacy Policy", key=f"{key_prefix}_privacy", type="tertiary"):
            controller.dispatch(NavEvent.OPEN_PRIVACY)
            safe_rerun()


def _welcome_screen(controller: AppController) -> None:
    with screen_container("welcome"):
        st.markdown("<p class='welcome__kicker'>Welcome to</p>", unsafe_allow_html=True)
        st.markdown(f"<h1 class='welcome__title'>{APP_NAME}</h1>", unsafe_allow_html=True)
        if st.button("Continue", key="welcome_continue", type="primary", use_container_width=True):
            controller.dispatch(NavEvent.CONTINUE)
            safe_rerun()
        st.caption(
            "By tapping Continue, you agree to our Terms of Use and Privacy Policy. "
            "Please review them before continuing."
        )
        legal_links(controller, key_prefix="welcome")
