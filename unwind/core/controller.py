"""Controlador único que posee todo el estado de una sesión de la interfaz.

Cada pantalla recibe el controlador de forma explícita, lee ``snapshot()`` y
llama a sus intenciones. Las comprobaciones de orden (pasos del asistente,
validación del login) se hacen aquí antes de pedir el cambio al ``Navigator``."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Union

from unwind.config.models import Config
from unwind.services.errors import UserLookupError
from unwind.services.user_directory import InMemoryUserDirectory, UserDirectory

from .calendar_grid import CalendarCell, DisplayedMonth
from .errors import InvalidTransitionError
from .navigation import NavEvent, Navigator, next_screen
from .progress import ProgressView
from .types import (
    CalendarViewMode,
    DailyTime,
    MonthDirection,
    PracticeTime,
    ProgressTab,
    Screen,
    SocialProvider,
    StretchLevel,
    Weekday,
    as_choice,
)
from .validation import CredentialField, CredentialInput, FieldErrors, LoginForm
from .wizard import WIZARD_STEPS, OnboardingWizard, PersonalizationChoices

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppSnapshot:
    """Modelo de lectura que consumen las vistas."""

    screen: Screen
    choices: PersonalizationChoices
    credentials: CredentialInput
    errors: FieldErrors
    displayed_month: DisplayedMonth
    calendar: List[CalendarCell]
    progress_tab: ProgressTab
    view_mode: CalendarViewMode
    show_password: bool
    notifications_enabled: bool
    show_notification_dialog: bool


class AppController:
    def __init__(
        self,
        config: Optional[Config] = None,
        user_directory: Optional[UserDirectory] = None,
    ) -> None:
        self.config = config if config is not None else Config()
        if user_directory is None:
            user_directory = InMemoryUserDirectory(
                self.config.auth.known_emails, self.config.auth.linked_providers
            )
        self.user_directory = user_directory
        self.navigator = Navigator()
        self.wizard = OnboardingWizard()
        self.login_form = LoginForm(min_password_length=self.config.session.min_password_length)
        calendar_cfg = self.config.calendar
        self.progress = ProgressView(
            displayed_month=DisplayedMonth(calendar_cfg.initial_year, calendar_cfg.initial_month),
            active_days=frozenset(int(day) for day in calendar_cfg.active_days),
        )
        self.show_password = False
        self.notifications_enabled = False
        self.show_notification_dialog = False

    # --- Lectura --------------------------------------------------------------
    @property
    def screen(self) -> Screen:
        return self.navigator.current

    def snapshot(self) -> AppSnapshot:
        return AppSnapshot(
            screen=self.navigator.current,
            choices=self.wizard.choices.copy(),
            credentials=CredentialInput(
                self.login_form.credentials.email, self.login_form.credentials.password
            ),
            errors=dict(self.login_form.errors),
            displayed_month=self.progress.displayed_month,
            calendar=self.progress.grid(),
            progress_tab=self.progress.tab,
            view_mode=self.progress.view_mode,
            show_password=self.show_password,
            notifications_enabled=self.notifications_enabled,
            show_notification_dialog=self.show_notification_dialog,
        )

    # --- Navegación -----------------------------------------------------------
    def navigate(self, target: Union[str, Screen]) -> None:
        """Salto directo sin condiciones (enlaces y pestañas)."""

        self.navigator.transition(as_choice(Screen, target))

    def dispatch(self, event: Union[str, NavEvent]) -> Screen:
        return self.navigator.dispatch(as_choice(NavEvent, event))

    def back(self) -> Screen:
        """Vuelve a la pantalla anterior sin borrar datos del asistente."""

        return self.navigator.dispatch(NavEvent.BACK)

    def logout(self) -> None:
        """Vuelve a ``welcome`` desde el perfil.

        La transición se resuelve antes de borrar nada: si la pantalla actual no
        permite cerrar sesión se lanza ``InvalidTransitionError`` y el estado
        queda intacto."""

        target = next_screen(self.navigator.current, NavEvent.LOGOUT)
        if target is None:
            raise InvalidTransitionError(
                f"La pantalla {self.navigator.current.value!r} no permite cerrar sesión"
            )
        if self.config.session.clear_on_logout:
            self.wizard.clear()
            self.login_form.reset()
            logger.info("Sesión cerrada; datos de onboarding y credenciales borrados")
        self.navigator.transition(target)

    # --- Asistente ------------------------------------------------------------
    def select_stretch_level(self, level: Union[str, StretchLevel]) -> None:
        self.wizard.select_stretch_level(level)

    def toggle_training_day(self, day: Union[str, Weekday]) -> None:
        self.wizard.toggle_training_day(day)

    def select_daily_time(self, value: Union[str, DailyTime]) -> None:
        self.wizard.select_daily_time(value)

    def select_practice_time(self, value: Union[str, PracticeTime]) -> None:
        self.wizard.select_practice_time(value)

    def can_continue(self) -> bool:
        return self.wizard.can_continue(self.navigator.current)

    def continue_wizard(self) -> bool:
        """Avanza al siguiente paso si el actual está completo.

        Un paso incompleto se ignora en silencio (el botón está deshabilitado en
        la vista). Desde ``practiceTime`` se termina en ``dailyPlan``."""

        current = self.navigator.current
        if current is not Screen.PERSONALIZE and current not in WIZARD_STEPS:
            return False
        if not self.wizard.can_continue(current):
            return False
        self.navigator.dispatch(NavEvent.CONTINUE)
        return True

    # --- Login ----------------------------------------------------------------
    def edit_field(self, name: Union[str, CredentialField], value: str) -> None:
        self.login_form.edit_field(name, value)

    def submit_login(self, credentials: Optional[CredentialInput] = None) -> bool:
        """Valida el formulario y, si es correcto, enruta según el tipo de usuario."""

        if not self.login_form.submit(credentials):
            return False
        try:
            is_new = self.user_directory.is_new_user(self.login_form.credentials.email)
        except UserLookupError:
            logger.exception("No se pudo consultar el directorio de usuarios")
            self.login_form.set_general_error()
            return False
        self._route_after_login(is_new)
        return True

    def social_login(self, provider: Union[str, SocialProvider]) -> bool:
        social = as_choice(SocialProvider, provider)
        try:
            is_new = self.user_directory.is_new_social_user(social)
        except UserLookupError:
            logger.exception("No se pudo consultar el proveedor %s", social.value)
            self.login_form.set_general_error()
            return False
        self._route_after_login(is_new)
        return True

    def _route_after_login(self, is_new_user: bool) -> None:
        event = NavEvent.LOGIN_NEW_USER if is_new_user else NavEvent.LOGIN_RETURNING_USER
        self.navigator.dispatch(event)

    def toggle_password_visibility(self) -> bool:
        self.show_password = not self.show_password
        return self.show_password

    # --- Progreso -------------------------------------------------------------
    def navigate_month(self, direction: Union[str, MonthDirection]) -> DisplayedMonth:
        return self.progress.navigate_month(direction)

    def toggle_progress_tab(self, tab: Union[str, ProgressTab]) -> None:
        self.progress.toggle_tab(tab)

    def set_view_mode(self, mode: Union[str, CalendarViewMode]) -> None:
        self.progress.set_view_mode(mode)

    # --- Notificaciones -------------------------------------------------------
    def open_notification_dialog(self) -> None:
        self.show_notification_dialog = True

    def dismiss_notification_dialog(self) -> None:
        self.show_notification_dialog = False

    def enable_notifications(self) -> None:
        self.notifications_enabled = True
        self.show_notification_dialog = False
