"""Pantalla de acceso con validación por campo y acceso social."""

from __future__ import annotations

import streamlit as st

from unwind.config import APP_NAME
from unwind.core.controller import AppController
from unwind.core.types import SocialProvider
from unwind.core.validation import CredentialField
from unwind.ui.state import safe_rerun

from .utils import back_button, screen_container
from .welcome import legal_links


def _on_field_change(controller: AppController, name: CredentialField) -> None:
    """Sincroniza el widget con el formulario; borra el error de ese campo."""

    controller.edit_field(name, st.session_state[f"login_{name.value}"])


def _login_screen(controller: AppController) -> None:
    with screen_container("login"):
        back_button(controller, key="login_back")
        st.markdown(f"### Login to {APP_NAME}")
        st.caption("Continue your journey to mindfulness and health")

        snapshot = controller.snapshot()
        general = snapshot.errors.get(CredentialField.GENERAL.value)
        if general:
            st.error(general)

        st.text_input(
            "Email / Username",
            value=snapshot.credentials.email,
            placeholder="Enter your email",
            key="login_email",
            on_change=_on_field_change,
            args=(controller, CredentialField.EMAIL),
        )
        email_error = snapshot.errors.get(CredentialField.EMAIL.value)
        if email_error:
            st.markdown(f"<p class='field-error'>{email_error}</p>", unsafe_allow_html=True)

        st.text_input(
            "Password",
            value=snapshot.credentials.password,
            placeholder="Enter your password",
            type="default" if snapshot.show_password else "password",
            key="login_password",
            on_change=_on_field_change,
            args=(controller, CredentialField.PASSWORD),
        )
        password_error = snapshot.errors.get(CredentialField.PASSWORD.value)
        if password_error:
            st.markdown(f"<p class='field-error'>{password_error}</p>", unsafe_allow_html=True)

        if st.button(
            "Hide password" if snapshot.show_password else "Show password",
            key="login_toggle_password",
            type="tertiary",
        ):
            controller.toggle_password_visibility()
            safe_rerun()

        if st.button("Login", key="login_submit", type="primary", use_container_width=True):
            controller.submit_login()
            safe_rerun()

        st.markdown("<p class='login__divider'>or continue with</p>", unsafe_allow_html=True)
        col_google, col_facebook = st.columns(2)
        with col_google:
            if st.button("Google", key="login_google", use_container_width=True):
                controller.social_login(SocialProvider.GOOGLE)
                safe_rerun()
        with col_facebook:
            if st.button("Facebook", key="login_facebook", use_container_width=True):
                controller.social_login(SocialProvider.FACEBOOK)
                safe_rerun()

        legal_links(controller, key_prefix="login")
