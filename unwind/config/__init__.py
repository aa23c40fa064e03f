"""Reexportaciones para mantener compatibilidad con ``from unwind import config``."""

from __future__ import annotations

# Dataclasses principales de configuración --------------------------------------
from .models import AuthConfig, CalendarConfig, Config, SessionConfig, UIConfig

# Funciones auxiliares de carga --------------------------------------------------
from .utils import from_yaml, load_config, load_default

# Constantes compartidas ---------------------------------------------------------
from .constants import APP_NAME, CONFIG_ENV_VAR, PROJECT_ROOT
from .settings import configure_logging

__all__ = [
    # Models
    "Config",
    "SessionConfig",
    "CalendarConfig",
    "AuthConfig",
    "UIConfig",

    # Utilities
    "load_default",
    "from_yaml",
    "load_config",
    "configure_logging",

    # Constants
    "APP_NAME",
    "CONFIG_ENV_VAR",
    "PROJECT_ROOT",
]
