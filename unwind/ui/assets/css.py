"""Hojas de estilo del tema Unwind."""

from __future__ import annotations

from pathlib import Path

import streamlit as st

THEME_DIR = Path(__file__).resolve().parent.parent / "theme"

# Las variables van primero: ``screens.css`` las referencia.
STYLESHEETS = ("variables.css", "screens.css")


def theme_css() -> str:
    return "\n\n".join((THEME_DIR / name).read_text(encoding="utf-8") for name in STYLESHEETS)


def inject_css() -> None:
    st.markdown(f"<style>{theme_css()}</style>", unsafe_allow_html=True)
