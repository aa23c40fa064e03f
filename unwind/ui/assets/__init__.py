"""Utilidades para publicar recursos estáticos de la interfaz."""

from .css import inject_css

__all__ = ["inject_css"]
