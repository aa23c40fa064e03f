"""Operaciones con efectos secundarios sobre el estado almacenado en Streamlit."""

from __future__ import annotations

from typing import Optional

import streamlit as st

from unwind.config import Config, load_config
from unwind.core.controller import AppController

SESSION_KEY = "app_controller"


def get_controller(config: Optional[Config] = None) -> AppController:
    """Obtiene o crea el ``AppController`` guardado en la sesión del navegador."""

    if SESSION_KEY not in st.session_state:
        st.session_state[SESSION_KEY] = AppController(config if config is not None else load_config())
    controller: AppController = st.session_state[SESSION_KEY]
    return controller


def safe_rerun() -> None:
    """Intenta relanzar el script con la API estable y cae al método legacy."""

    rerun = getattr(st, "rerun", None) or getattr(st, "experimental_rerun")
    rerun()
