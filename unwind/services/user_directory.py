"""Directorio de usuarios en memoria que decide entre onboarding y plan diario.

Sustituye a una consulta real de autenticación: la respuesta depende solo de
la configuración, nunca del azar, para que el flujo sea reproducible."""

from __future__ import annotations

import logging
from typing import Iterable, Protocol, Union

from unwind.core.types import SocialProvider, as_choice

logger = logging.getLogger(__name__)


class UserDirectory(Protocol):
    """Contrato mínimo que necesita el controlador para enrutar el login."""

    def is_new_user(self, email: str) -> bool: ...

    def is_new_social_user(self, provider: SocialProvider) -> bool: ...


def _normalize_email(email: str) -> str:
    return email.strip().lower()


class InMemoryUserDirectory:
    """Cuentas conocidas declaradas en configuración.

    Un email es de un usuario recurrente si figura en ``known_emails``; un
    proveedor social lo es si figura en ``linked_providers``."""

    def __init__(
        self,
        known_emails: Iterable[str] = (),
        linked_providers: Iterable[Union[str, SocialProvider]] = (),
    ) -> None:
        self._known = {_normalize_email(email) for email in known_emails if email}
        self._linked = {as_choice(SocialProvider, provider) for provider in linked_providers}

    def is_new_user(self, email: str) -> bool:
        is_new = _normalize_email(email) not in self._known
        logger.debug("Usuario %s: %s", "nuevo" if is_new else "recurrente", _normalize_email(email))
        return is_new

    def is_new_social_user(self, provider: SocialProvider) -> bool:
        return as_choice(SocialProvider, provider) not in self._linked
