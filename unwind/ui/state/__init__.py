"""API pública para manipular el estado de la aplicación desde la UI."""

from .session import SESSION_KEY, get_controller, safe_rerun

__all__ = [
    "SESSION_KEY",
    "get_controller",
    "safe_rerun",
]
