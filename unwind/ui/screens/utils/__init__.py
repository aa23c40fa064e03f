"""Agrupación de utilidades compartidas entre las pantallas."""

from .layout import back_button, bottom_nav, screen_container, wizard_progress

__all__ = ["back_button", "bottom_nav", "screen_container", "wizard_progress"]
