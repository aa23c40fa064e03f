# unwind/app.py
"""Interfaz Streamlit que dibuja la pantalla activa del prototipo."""

from __future__ import annotations

import sys
from pathlib import Path

import streamlit as st

# Garantizar que la raíz del proyecto esté en ``sys.path`` cuando Streamlit ejecute la app
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from unwind.config import APP_NAME, configure_logging
from unwind.core.controller import AppController
from unwind.ui.assets import inject_css
from unwind.ui.screens import SCREEN_RENDERERS
from unwind.ui.state import get_controller

configure_logging()
st.set_page_config(layout="centered", page_title=APP_NAME)


def render_screen(controller: AppController) -> None:
    """Delegar en el renderizador de la pantalla actual."""

    renderer = SCREEN_RENDERERS[controller.screen]
    renderer(controller)


def main() -> None:
    """Punto de entrada principal de Streamlit."""

    inject_css()
    controller = get_controller()
    render_screen(controller)


if __name__ == "__main__":
    main()
