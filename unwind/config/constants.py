"""Constantes globales de la aplicación y rutas del proyecto."""
from pathlib import Path

# --- CONFIGURACIÓN GENERAL ---
APP_NAME = "Unwind Yoga"
CONFIG_ENV_VAR = "UNWIND_CONFIG"
LOG_LEVEL_ENV_VAR = "UNWIND_LOG_LEVEL"

# --- RUTAS DE ARCHIVOS ---
# NOTA: usamos ``parents[2]`` porque este archivo vive en ``unwind/config/``.
PROJECT_ROOT = Path(__file__).resolve().parents[2]
