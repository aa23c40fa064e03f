# tests/conftest.py
"""Utilidades de configuración comunes para la batería de pruebas."""
from __future__ import annotations

from pathlib import Path
import sys

import pytest

# Repo root = parent de 'tests'
ROOT = Path(__file__).resolve().parents[1]

# Asegura que el paquete ``unwind`` es importable sin instalarlo
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from unwind.config import Config  # noqa: E402
from unwind.core.controller import AppController  # noqa: E402
from unwind.services import InMemoryUserDirectory  # noqa: E402

RETURNING_EMAIL = "returning@unwind.test"


@pytest.fixture
def controller() -> AppController:
    """Controlador con un usuario recurrente conocido y Google ya vinculado."""

    cfg = Config()
    cfg.auth.known_emails = [RETURNING_EMAIL]
    cfg.auth.linked_providers = ["google"]
    return AppController(cfg)


@pytest.fixture
def directory() -> InMemoryUserDirectory:
    return InMemoryUserDirectory([RETURNING_EMAIL], ["google"])
