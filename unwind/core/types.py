"""Tipos enumerados compartidos por la navegación, el asistente y el calendario.

Los valores de texto coinciden con los identificadores que usa la interfaz, de
modo que un ``Screen`` o una opción del asistente puede guardarse en
``st.session_state`` o en un YAML sin conversiones adicionales."""

from __future__ import annotations

from enum import Enum
from typing import Type, TypeVar, Union

from .errors import InvalidChoiceError


class Screen(str, Enum):
    """Pantallas completas de la aplicación; solo una está activa a la vez."""

    WELCOME = "welcome"
    LOGIN = "login"
    PERSONALIZE = "personalize"
    STRETCH_LEVEL = "stretchLevel"
    TRAINING_DAYS = "trainingDays"
    DAILY_TIME = "dailyTime"
    PRACTICE_TIME = "practiceTime"
    DAILY_PLAN = "dailyPlan"
    LIBRARY = "library"
    TERMS_OF_USE = "termsOfUse"
    PRIVACY_POLICY = "privacyPolicy"
    PROFILE = "profile"
    PROGRESS = "progress"


class StretchLevel(str, Enum):
    """Nivel de experiencia declarado en el primer paso del asistente."""

    NEWBIE = "newbie"
    NOVICE = "novice"
    FAMILIAR = "familiar"
    ADVANCED = "advanced"


class Weekday(str, Enum):
    """Días de la semana en orden de calendario, empezando en domingo."""

    SUN = "Sun"
    MON = "Mon"
    TUE = "Tue"
    WED = "Wed"
    THU = "Thu"
    FRI = "Fri"
    SAT = "Sat"


class DailyTime(str, Enum):
    """Minutos diarios que la persona puede dedicar a practicar."""

    TEN = "10"
    TWENTY = "20"
    THIRTY = "30"
    FORTY_FIVE_PLUS = "45+"


class PracticeTime(str, Enum):
    """Franja preferida para la práctica."""

    MORNING = "morning"
    EVENING = "evening"
    FLEXIBLE = "flexible"


class ProgressTab(str, Enum):
    ACTIVITY = "activity"
    ACHIEVEMENTS = "achievements"


class CalendarViewMode(str, Enum):
    WEEK = "week"
    MONTH = "month"


class MonthDirection(str, Enum):
    PREV = "prev"
    NEXT = "next"


class SocialProvider(str, Enum):
    GOOGLE = "google"
    FACEBOOK = "facebook"


E = TypeVar("E", bound=Enum)


def as_choice(enum_cls: Type[E], value: Union[str, E]) -> E:
    """Convertir ``value`` en un miembro de ``enum_cls``.

    Acepta el propio miembro, su valor (``"Mon"``) o su nombre sin distinguir
    mayúsculas (``"mon"``). Cualquier otra cosa es un error de programación y
    se señala con ``InvalidChoiceError``."""

    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return enum_cls(text)
        except ValueError:
            pass
        by_name = {member.name.lower(): member for member in enum_cls}
        by_value = {str(member.value).lower(): member for member in enum_cls}
        match = by_name.get(text.lower()) or by_value.get(text.lower())
        if match is not None:
            return match
    raise InvalidChoiceError(f"{value!r} no es un valor válido de {enum_cls.__name__}")
