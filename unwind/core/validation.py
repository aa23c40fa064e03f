"""Validación del formulario de acceso y gestión de errores por campo."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Union

from .errors import InvalidChoiceError
from .types import as_choice

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
DEFAULT_MIN_PASSWORD_LENGTH = 6

EMAIL_REQUIRED = "Email is required"
EMAIL_INVALID = "Please enter a valid email address"
PASSWORD_REQUIRED = "Password is required"
GENERAL_LOGIN_FAILED = "We couldn't sign you in. Please try again."


def password_too_short(min_length: int) -> str:
    return f"Password must be at least {min_length} characters"


class CredentialField(str, Enum):
    EMAIL = "email"
    PASSWORD = "password"
    GENERAL = "general"


# Solo contiene los campos con error; un diccionario vacío significa "válido".
FieldErrors = Dict[str, str]


@dataclass
class CredentialInput:
    email: str = ""
    password: str = ""


def validate_credentials(
    credentials: CredentialInput,
    *,
    min_password_length: int = DEFAULT_MIN_PASSWORD_LENGTH,
) -> FieldErrors:
    """Evalúa email y contraseña de forma independiente.

    Ambos errores pueden aparecer a la vez. La comprobación de formato del
    email se hace sobre el texto tal cual, sin recortar espacios."""

    errors: FieldErrors = {}

    email = credentials.email or ""
    if not email.strip():
        errors[CredentialField.EMAIL.value] = EMAIL_REQUIRED
    elif EMAIL_PATTERN.fullmatch(email) is None:
        errors[CredentialField.EMAIL.value] = EMAIL_INVALID

    password = credentials.password or ""
    if not password.strip():
        errors[CredentialField.PASSWORD.value] = PASSWORD_REQUIRED
    elif len(password) < min_password_length:
        errors[CredentialField.PASSWORD.value] = password_too_short(min_password_length)

    return errors


@dataclass
class LoginForm:
    """Entrada del formulario de login junto con sus errores visibles."""

    credentials: CredentialInput = field(default_factory=CredentialInput)
    errors: FieldErrors = field(default_factory=dict)
    min_password_length: int = DEFAULT_MIN_PASSWORD_LENGTH

    def edit_field(self, name: Union[str, CredentialField], value: str) -> None:
        """Actualiza un campo y borra su error sin volver a validar."""

        credential_field = as_choice(CredentialField, name)
        if credential_field is CredentialField.GENERAL:
            raise InvalidChoiceError("El campo 'general' no es editable")
        setattr(self.credentials, credential_field.value, value)
        self.errors.pop(credential_field.value, None)

    def submit(self, credentials: Optional[CredentialInput] = None) -> bool:
        """Recalcula todos los errores; devuelve ``True`` si no hay ninguno."""

        if credentials is not None:
            self.credentials = CredentialInput(credentials.email, credentials.password)
        self.errors = validate_credentials(
            self.credentials, min_password_length=self.min_password_length
        )
        if self.errors:
            logger.debug("Login rechazado por validación: %s", sorted(self.errors))
        return not self.errors

    def set_general_error(self, message: str = GENERAL_LOGIN_FAILED) -> None:
        self.errors[CredentialField.GENERAL.value] = message

    def reset(self) -> None:
        self.credentials = CredentialInput()
        self.errors = {}
