"""Errores del dominio.

Solo `SourceUnavailable` es fatal (arranque). El resto se reporta y la sesión
interactiva continúa.
"""

from __future__ import annotations

from pathlib import Path


class BotChatError(Exception):
    """Base de los errores propios de la aplicación."""


class ConfigMissing(BotChatError):
    """Falta el dominio o la API key al intentar lanzar una ejecución."""

    def __init__(self, setting: str) -> None:
        self.setting = setting
        super().__init__(f"{setting} is not set. Please set it first.")


class SourceUnavailable(BotChatError):
    """No se pudo leer el fichero de preguntas."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read questions file {path}: {reason}")
