"""Utilidades para cargar configuraciones por defecto o desde archivos YAML.

La app Streamlit y la CLI llaman a ``load_config``: si la variable de entorno
``UNWIND_CONFIG`` apunta a un YAML, sus claves se mezclan con los valores base;
las claves desconocidas se ignoran."""
from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml

from .constants import CONFIG_ENV_VAR
from .models import Config, _update_dataclass

logger = logging.getLogger(__name__)


def load_default() -> Config:
    """Obtener la configuración por defecto empleada por la aplicación."""
    return Config()


def from_yaml(path: str | Path) -> Config:
    """Cargar una configuración desde un YAML y mezclarla con los valores base."""
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"El YAML {path} debe contener un mapeo en la raíz")
    cfg = load_default()
    _update_dataclass(cfg, data)
    logger.info("Configuración cargada desde %s", path)
    return cfg


def load_config(path: str | Path | None = None) -> Config:
    """Resolver la configuración desde ``path``, ``UNWIND_CONFIG`` o los valores base."""
    candidate = path or os.getenv(CONFIG_ENV_VAR)
    if candidate:
        return from_yaml(Path(candidate).expanduser())
    return load_default()
