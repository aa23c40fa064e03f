"""Renderizadores de cada pantalla indexados por ``Screen``."""

from __future__ import annotations

from typing import Callable, Dict

from unwind.core.controller import AppController
from unwind.core.types import Screen

from .home import _daily_plan_screen
from .legal import _privacy_screen, _terms_screen
from .library import _library_screen
from .login import _login_screen
from .onboarding import ONBOARDING_SCREENS
from .profile import _profile_screen
from .progress import _progress_screen
from .welcome import _welcome_screen

SCREEN_RENDERERS: Dict[Screen, Callable[[AppController], None]] = {
    Screen.WELCOME: _welcome_screen,
    Screen.LOGIN: _login_screen,
    **ONBOARDING_SCREENS,
    Screen.DAILY_PLAN: _daily_plan_screen,
    Screen.LIBRARY: _library_screen,
    Screen.TERMS_OF_USE: _terms_screen,
    Screen.PRIVACY_POLICY: _privacy_screen,
    Screen.PROFILE: _profile_screen,
    Screen.PROGRESS: _progress_screen,
}

__all__ = ["SCREEN_RENDERERS"]
