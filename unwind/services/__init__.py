"""Colaboradores externos al núcleo (directorio de usuarios)."""

from .errors import ServiceError, UserLookupError
from .user_directory import InMemoryUserDirectory, UserDirectory

__all__ = ["InMemoryUserDirectory", "ServiceError", "UserDirectory", "UserLookupError"]
