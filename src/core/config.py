"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Expone el almacén `.env` (`EnvFileStore`) donde el menú persiste dominio y
  API key entre reinicios.
"""

from __future__ import annotations

import re
from pathlib import Path

from dotenv import dotenv_values
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

DEFAULT_ENV_FILE = Path(".env")

DOMAIN_KEY = "DOMAIN"
API_KEY_KEY = "GAIA_API_KEY"

_NEEDS_QUOTES = re.compile(r"[\s#'\"\\]")


def _quote(value: str) -> str:
    """Entre comillas dobles si python-dotenv no lo leería tal cual (`#`, espacios, comillas)."""

    if not _NEEDS_QUOTES.search(value):
        return value
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class EnvFileStore:
    """Almacén clave=valor sobre un fichero `.env`.

    Reglas:
    - `set` reescribe solo la línea de su clave (o la añade al final).
    - Otras claves, comentarios y líneas en blanco se conservan tal cual.
    - Un valor vacío se persiste como `KEY=` y `get` lo devuelve como `None`.
    """

    def __init__(self, path: Path = DEFAULT_ENV_FILE) -> None:
        self.path = Path(path)

    def _read_lines(self) -> list[str]:
        if not self.path.exists():
            return []
        return self.path.read_text(encoding="utf-8").splitlines()

    def values(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        parsed = dotenv_values(self.path, encoding="utf-8")
        return {key: value for key, value in parsed.items() if value is not None}

    def get(self, key: str) -> str | None:
        return self.values().get(key) or None

    def set(self, key: str, value: str) -> None:
        entry = f"{key}={_quote(value)}"
        lines = self._read_lines()

        replaced = False
        out: list[str] = []
        for line in lines:
            if line.split("=", 1)[0].strip() == key and "=" in line:
                if not replaced:
                    out.append(entry)
                    replaced = True
                continue
            out.append(line)
        if not replaced:
            out.append(entry)

        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text("\n".join(out) + "\n", encoding="utf-8")


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars / `.env`) sin ensuciar el Core.
    - Un único contrato de configuración para CLI y adaptadores.
    """

    model_config = SettingsConfigDict(
        extra="ignore",
        case_sensitive=False,
        env_file=str(DEFAULT_ENV_FILE),
        env_file_encoding="utf-8",
    )

    domain: str = Field(
        default="",
        description="Subdominio de gaia.domains al que se envían las preguntas.",
    )
    gaia_api_key: str = Field(
        default="",
        description="API key enviada como Bearer token.",
    )
    questions_file: Path = Field(
        default=Path("questions.txt"),
        description="Fichero de preguntas (una por línea).",
    )
    endpoint_template: str = Field(
        default="https://{domain}.gaia.domains/v1/chat/completions",
        min_length=8,
        description="Plantilla de URL del endpoint de chat completions.",
    )
    http_timeout_seconds: float = Field(
        default=60.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    default_interval_seconds: int = Field(
        default=3,
        gt=0,
        description="Pausa por defecto entre preguntas (segundos).",
    )
    user_agent: str = Field(
        default="gaia-botchat/0.1",
        min_length=1,
        description="User-Agent para las peticiones HTTP.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging (DEBUG, INFO, WARNING, ...).",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Lo guardado desde el menú (.env) manda sobre el entorno del proceso.
        return init_settings, dotenv_settings, env_settings, file_secret_settings
