"""Modelos ``dataclass`` que describen la configuración de la aplicación."""
from __future__ import annotations
from dataclasses import dataclass, field, is_dataclass
from typing import Any, Dict, List
import copy

from .settings import (
    DEFAULT_ACTIVE_DAYS,
    DEFAULT_CALENDAR_MONTH,
    DEFAULT_CALENDAR_YEAR,
    DEFAULT_CLEAR_ON_LOGOUT,
    DEFAULT_DAILY_SESSION_MINUTES,
    DEFAULT_GREETING,
    DEFAULT_WEEKLY_GOAL,
    MIN_PASSWORD_LENGTH,
)


@dataclass
class SessionConfig:
    """Política de sesión: limpieza al salir y reglas del formulario."""
    clear_on_logout: bool = DEFAULT_CLEAR_ON_LOGOUT
    min_password_length: int = MIN_PASSWORD_LENGTH


@dataclass
class CalendarConfig:
    """Mes inicial de la vista de progreso y días marcados como practicados."""
    initial_year: int = DEFAULT_CALENDAR_YEAR
    initial_month: int = DEFAULT_CALENDAR_MONTH
    active_days: List[int] = field(default_factory=lambda: list(DEFAULT_ACTIVE_DAYS))


@dataclass
class AuthConfig:
    """Cuentas que el directorio en memoria trata como recurrentes."""
    known_emails: List[str] = field(default_factory=list)
    linked_providers: List[str] = field(default_factory=list)


@dataclass
class UIConfig:
    greeting: str = DEFAULT_GREETING
    daily_session_minutes: int = DEFAULT_DAILY_SESSION_MINUTES
    weekly_goal: int = DEFAULT_WEEKLY_GOAL


@dataclass
class Config:
    """Configuración de alto nivel consumida por el controlador y la interfaz."""
    session: SessionConfig = field(default_factory=SessionConfig)
    calendar: CalendarConfig = field(default_factory=CalendarConfig)
    auth: AuthConfig = field(default_factory=AuthConfig)
    ui: UIConfig = field(default_factory=UIConfig)

    def copy(self) -> "Config":
        """Devuelve una copia profunda del objeto de configuración."""
        return copy.deepcopy(self)

    def to_dict(self) -> Dict[str, Any]:
        """Entrega la configuración como diccionario de Python."""
        return _dataclass_to_dict(self)


# --- Internal utilities -------------------------------------------------------

def _dataclass_to_dict(obj: Any) -> Any:
    """Convierte recursivamente ``dataclasses`` (y anidados) en diccionarios."""
    if is_dataclass(obj):
        return {key: _dataclass_to_dict(value) for key, value in obj.__dict__.items()}
    if isinstance(obj, dict):
        return {key: _dataclass_to_dict(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_dataclass_to_dict(value) for value in obj]
    return obj


def _update_dataclass(instance: Any, updates: Dict[str, Any]) -> Any:
    """Actualiza recursivamente ``instance`` respetando los límites de cada ``dataclass``."""
    for key, value in updates.items():
        if not hasattr(instance, key):
            continue
        current = getattr(instance, key)
        if is_dataclass(current) and isinstance(value, dict):
            _update_dataclass(current, value)
        else:
            setattr(instance, key, value)
    return instance
