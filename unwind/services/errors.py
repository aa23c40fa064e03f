"""Excepciones de los colaboradores externos al núcleo."""


class ServiceError(Exception):
    """Excepción base para fallos de los servicios."""


class UserLookupError(ServiceError):
    """Se lanza cuando no es posible determinar si la cuenta ya existe."""
