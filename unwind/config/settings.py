"""Valores por defecto y utilidades de entorno para la app y la CLI."""

from __future__ import annotations

import logging
import os

from .constants import LOG_LEVEL_ENV_VAR

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: int | str | None = None) -> None:
    """Configura ``logging`` leyendo el nivel de ``UNWIND_LOG_LEVEL`` si no se indica."""

    if level is None:
        level = os.getenv(LOG_LEVEL_ENV_VAR, "WARNING")
    if isinstance(level, str):
        level = logging.getLevelName(level.strip().upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)


# --- SESIÓN ---
# Al cerrar sesión se conservan las elecciones y credenciales salvo que se
# active la limpieza.
DEFAULT_CLEAR_ON_LOGOUT = False

# Longitud mínima aceptada para la contraseña en el formulario de login.
MIN_PASSWORD_LENGTH = 6

# --- CALENDARIO ---
# Mes mostrado al abrir la vista de progreso (septiembre de 2025, base 0).
DEFAULT_CALENDAR_YEAR = 2025
DEFAULT_CALENDAR_MONTH = 8

# Días de práctica ilustrativos; no proceden de un historial real.
DEFAULT_ACTIVE_DAYS = (18, 19, 20, 21, 26, 28)

# --- PANTALLA DE INICIO ---
DEFAULT_GREETING = "Good evening!"
DEFAULT_DAILY_SESSION_MINUTES = 15
DEFAULT_WEEKLY_GOAL = 5
