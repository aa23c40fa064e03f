"""Estado del asistente de personalización y predicados de cada paso."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Set, Tuple, Union

from .types import DailyTime, PracticeTime, Screen, StretchLevel, Weekday, as_choice

logger = logging.getLogger(__name__)

WIZARD_STEPS: Tuple[Screen, ...] = (
    Screen.STRETCH_LEVEL,
    Screen.TRAINING_DAYS,
    Screen.DAILY_TIME,
    Screen.PRACTICE_TIME,
)


@dataclass
class PersonalizationChoices:
    """Elecciones acumuladas durante el onboarding.

    Cada campo es opcional hasta que se alcanza su paso. Volver atrás nunca
    borra nada; ``training_days`` es un conjunto, así que no admite duplicados."""

    stretch_level: Optional[StretchLevel] = None
    training_days: Set[Weekday] = field(default_factory=set)
    daily_time: Optional[DailyTime] = None
    practice_time: Optional[PracticeTime] = None

    def ordered_training_days(self) -> List[Weekday]:
        """Días seleccionados en orden de semana (domingo primero)."""

        return [day for day in Weekday if day in self.training_days]

    def copy(self) -> "PersonalizationChoices":
        return PersonalizationChoices(
            stretch_level=self.stretch_level,
            training_days=set(self.training_days),
            daily_time=self.daily_time,
            practice_time=self.practice_time,
        )


def is_step_complete(step: Screen, choices: PersonalizationChoices) -> bool:
    """Indica si ``step`` tiene los datos necesarios para pulsar *Continue*."""

    if step is Screen.STRETCH_LEVEL:
        return choices.stretch_level is not None
    if step is Screen.TRAINING_DAYS:
        return bool(choices.training_days)
    if step is Screen.DAILY_TIME:
        return choices.daily_time is not None
    if step is Screen.PRACTICE_TIME:
        return choices.practice_time is not None
    # La introducción del asistente no pide datos.
    return step is Screen.PERSONALIZE


def step_number(step: Screen) -> Optional[int]:
    """Posición 1..4 de ``step`` dentro del asistente, o ``None`` si no es un paso."""

    try:
        return WIZARD_STEPS.index(step) + 1
    except ValueError:
        return None


def progress_markers(step: Screen) -> List[bool]:
    """Segmentos encendidos del indicador de progreso para ``step``."""

    number = step_number(step) or 0
    return [index < number for index in range(len(WIZARD_STEPS))]


class OnboardingWizard:
    """Acumula las elecciones del asistente y decide si se puede avanzar."""

    def __init__(self, choices: Optional[PersonalizationChoices] = None) -> None:
        self.choices = choices if choices is not None else PersonalizationChoices()

    def select_stretch_level(self, level: Union[str, StretchLevel]) -> None:
        self.choices.stretch_level = as_choice(StretchLevel, level)

    def toggle_training_day(self, day: Union[str, Weekday]) -> None:
        """Añade ``day`` si no estaba y lo quita si ya estaba."""

        weekday = as_choice(Weekday, day)
        if weekday in self.choices.training_days:
            self.choices.training_days.discard(weekday)
        else:
            self.choices.training_days.add(weekday)

    def select_daily_time(self, value: Union[str, DailyTime]) -> None:
        self.choices.daily_time = as_choice(DailyTime, value)

    def select_practice_time(self, value: Union[str, PracticeTime]) -> None:
        self.choices.practice_time = as_choice(PracticeTime, value)

    def can_continue(self, step: Screen) -> bool:
        complete = is_step_complete(step, self.choices)
        if not complete:
            logger.debug("Paso %s incompleto; se ignora Continue", step.value)
        return complete

    def is_complete(self) -> bool:
        return all(is_step_complete(step, self.choices) for step in WIZARD_STEPS)

    def summary(self) -> Optional[str]:
        """Resumen del plan elegido (``"Mon, Wed · 20 min · Morning"``).

        Devuelve ``None`` mientras quede algún paso sin completar."""

        if not self.is_complete():
            return None
        choices = self.choices
        days = ", ".join(day.value for day in choices.ordered_training_days())
        return f"{days} · {choices.daily_time.value} min · {choices.practice_time.value.capitalize()}"

    def clear(self) -> None:
        self.choices = PersonalizationChoices()
