from __future__ import annotations

import streamlit as st

from unwind.core.controller import AppController
from unwind.ui.content import YOGA_POSES

from .utils import bottom_nav, screen_container


def _library_screen(controller: AppController) -> None:
    with screen_container("library"):
        st.markdown("## Library")
        for name, duration in YOGA_POSES:
            with st.container(border=True):
                col_name, col_duration = st.columns([4, 1])
                col_name.markdown(f"**{name}**")
                col_duration.caption(duration)
        bottom_nav(controller)
