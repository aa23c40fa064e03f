"""Plan diario: sesión del día, acceso a la biblioteca y diálogo de recordatorios."""

from __future__ import annotations

import streamlit as st

from unwind.core.controller import AppController
from unwind.core.navigation import NavEvent
from unwind.ui.state import safe_rerun

from .utils import bottom_nav, screen_container


def _notification_dialog(controller: AppController) -> None:
    with st.container(border=True):
        st.markdown("#### Stay on Track")
        st.write("Get gentle reminders for your daily yoga sessions and never miss a practice.")
        st.info("🔔 **Daily Reminders** · We'll notify you at your preferred practice time")
        if st.button("Enable Notifications", key="notif_enable", type="primary", use_container_width=True):
            controller.enable_notifications()
            safe_rerun()
        if st.button("Maybe Later", key="notif_later", use_container_width=True):
            controller.dismiss_notification_dialog()
            safe_rerun()


def _daily_plan_screen(controller: AppController) -> None:
    ui_cfg = controller.config.ui
    snapshot = controller.snapshot()
    with screen_container("daily-plan"):
        col_title, col_settings, col_bell = st.columns([6, 1, 1])
        with col_title:
            st.markdown(f"### {ui_cfg.greeting}")
        with col_settings:
            if st.button("⚙️", key="home_settings"):
                controller.dispatch(NavEvent.TAB_PROFILE)
                safe_rerun()
        with col_bell:
            bell = "🔔" if snapshot.notifications_enabled else "🔕"
            if st.button(bell, key="home_notifications"):
                controller.open_notification_dialog()
                safe_rerun()

        if snapshot.show_notification_dialog:
            _notification_dialog(controller)

        with st.container(border=True):
            st.markdown("## Your Daily Session")
            st.write(f"{ui_cfg.daily_session_minutes} min")
            plan = controller.wizard.summary()
            if plan:
                st.caption(f"Your plan: {plan}")
            st.button("Start", key="home_start", type="primary")

        if st.button("Browse More Poses ›", key="home_browse", use_container_width=True):
            controller.dispatch(NavEvent.TAB_LIBRARY)
            safe_rerun()

        bottom_nav(controller)
