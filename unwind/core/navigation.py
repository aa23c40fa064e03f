"""Máquina de estados de pantallas y tabla de transiciones.

``Navigator.transition`` es un sumidero: nunca rechaza un destino. Las reglas de
orden (completar un paso del asistente, validar el login) viven en quien lo
invoca. ``next_screen`` expresa las rutas de los botones de cada pantalla como
una función pura ``(pantalla, evento) -> pantalla`` que puede probarse sin
renderizar nada."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, List, Optional

from .errors import InvalidTransitionError
from .types import Screen

logger = logging.getLogger(__name__)


class NavEvent(str, Enum):
    """Acciones de usuario que provocan un cambio de pantalla."""

    CONTINUE = "continue"
    BACK = "back"
    OPEN_TERMS = "open_terms"
    OPEN_PRIVACY = "open_privacy"
    LOGIN_NEW_USER = "login_new_user"
    LOGIN_RETURNING_USER = "login_returning_user"
    TAB_HOME = "tab_home"
    TAB_LIBRARY = "tab_library"
    TAB_PROGRESS = "tab_progress"
    TAB_PROFILE = "tab_profile"
    LOGOUT = "logout"


INITIAL_SCREEN = Screen.WELCOME

# Enlaces legales disponibles en bienvenida, login y perfil.
_LEGAL_LINKS: Dict[NavEvent, Screen] = {
    NavEvent.OPEN_TERMS: Screen.TERMS_OF_USE,
    NavEvent.OPEN_PRIVACY: Screen.PRIVACY_POLICY,
}

_TAB_BAR: Dict[NavEvent, Screen] = {
    NavEvent.TAB_HOME: Screen.DAILY_PLAN,
    NavEvent.TAB_LIBRARY: Screen.LIBRARY,
    NavEvent.TAB_PROGRESS: Screen.PROGRESS,
    NavEvent.TAB_PROFILE: Screen.PROFILE,
}


def _tabs_from(screen: Screen) -> Dict[NavEvent, Screen]:
    """Pestañas de la barra inferior salvo la que apunta a ``screen``."""

    return {event: target for event, target in _TAB_BAR.items() if target is not screen}


TRANSITIONS: Dict[Screen, Dict[NavEvent, Screen]] = {
    Screen.WELCOME: {NavEvent.CONTINUE: Screen.LOGIN, **_LEGAL_LINKS},
    Screen.LOGIN: {
        NavEvent.BACK: Screen.WELCOME,
        NavEvent.LOGIN_NEW_USER: Screen.PERSONALIZE,
        NavEvent.LOGIN_RETURNING_USER: Screen.DAILY_PLAN,
        **_LEGAL_LINKS,
    },
    Screen.PERSONALIZE: {NavEvent.BACK: Screen.LOGIN, NavEvent.CONTINUE: Screen.STRETCH_LEVEL},
    Screen.STRETCH_LEVEL: {NavEvent.BACK: Screen.PERSONALIZE, NavEvent.CONTINUE: Screen.TRAINING_DAYS},
    Screen.TRAINING_DAYS: {NavEvent.BACK: Screen.STRETCH_LEVEL, NavEvent.CONTINUE: Screen.DAILY_TIME},
    Screen.DAILY_TIME: {NavEvent.BACK: Screen.TRAINING_DAYS, NavEvent.CONTINUE: Screen.PRACTICE_TIME},
    Screen.PRACTICE_TIME: {NavEvent.BACK: Screen.DAILY_TIME, NavEvent.CONTINUE: Screen.DAILY_PLAN},
    Screen.DAILY_PLAN: _tabs_from(Screen.DAILY_PLAN),
    Screen.LIBRARY: _tabs_from(Screen.LIBRARY),
    Screen.PROGRESS: _tabs_from(Screen.PROGRESS),
    Screen.PROFILE: {**_tabs_from(Screen.PROFILE), **_LEGAL_LINKS, NavEvent.LOGOUT: Screen.WELCOME},
    Screen.TERMS_OF_USE: {NavEvent.BACK: Screen.WELCOME},
    Screen.PRIVACY_POLICY: {NavEvent.BACK: Screen.WELCOME},
}


def next_screen(current: Screen, event: NavEvent) -> Optional[Screen]:
    """Devuelve el destino de ``event`` desde ``current`` o ``None`` si no aplica."""

    return TRANSITIONS.get(current, {}).get(event)


def available_events(screen: Screen) -> List[NavEvent]:
    """Eventos que expone ``screen``, en el orden de la tabla."""

    return list(TRANSITIONS.get(screen, {}))


class Navigator:
    """Guarda la pantalla actual y ejecuta los cambios solicitados."""

    def __init__(self, initial: Screen = INITIAL_SCREEN) -> None:
        self._current = initial

    @property
    def current(self) -> Screen:
        return self._current

    def transition(self, target: Screen) -> None:
        """Cambia a ``target`` sin condiciones ni limpieza de otros estados."""

        target = Screen(target)
        if target is not self._current:
            logger.info("Pantalla %s -> %s", self._current.value, target.value)
        self._current = target

    def dispatch(self, event: NavEvent) -> Screen:
        """Resuelve ``event`` con la tabla de transiciones y lo aplica."""

        event = NavEvent(event)
        target = next_screen(self._current, event)
        if target is None:
            raise InvalidTransitionError(
                f"La pantalla {self._current.value!r} no expone el evento {event.value!r}"
            )
        self.transition(target)
        return target
