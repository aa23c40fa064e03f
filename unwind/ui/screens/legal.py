from __future__ import annotations

import streamlit as st

from unwind.core.controller import AppController
from unwind.ui.content import PRIVACY_POLICY, TERMS_OF_USE

from .utils import back_button, screen_container


def _render_sections(sections: list[tuple[str, str]]) -> None:
    for heading, body in sections:
        st.markdown(f"#### {heading}")
        st.write(body)


def _terms_screen(controller: AppController) -> None:
    with screen_container("terms"):
        back_button(controller, key="terms_back")
        st.markdown("## Terms of Use")
        _render_sections(TERMS_OF_USE)


def _privacy_screen(controller: AppController) -> None:
    with screen_container("privacy"):
        back_button(controller, key="privacy_back")
        st.markdown("## Privacy Policy")
        _render_sections(PRIVACY_POLICY)
