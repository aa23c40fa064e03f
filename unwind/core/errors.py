"""Excepciones específicas del dominio para el núcleo de la aplicación.

Los errores de validación del formulario no se modelan como excepciones: se
devuelven como ``FieldErrors``. Estas clases señalan usos incorrectos de la API
(valores fuera de catálogo, meses imposibles, eventos no disponibles)."""


class UnwindError(Exception):
    """Excepción base para errores del núcleo."""


class InvalidChoiceError(UnwindError, ValueError):
    """Se lanza cuando un valor no pertenece al catálogo de opciones esperado."""


class InvalidMonthError(UnwindError, ValueError):
    """Se lanza cuando el mes indicado está fuera del rango 0..11."""


class InvalidTransitionError(UnwindError):
    """Se lanza cuando se despacha un evento que la pantalla actual no expone."""
