"""Modelos del dominio.

Por qué mezclar dataclasses y Pydantic v2:
- `Configuration` es estado mutable que el menú edita y pasa por referencia.
- Los resultados de cada petición son valores inmutables y validados.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.errors import ConfigMissing


@dataclass
class Configuration:
    """Credenciales en memoria (dominio + API key).

    Un campo vacío significa "no configurado". El menú es el único que la
    modifica, y siempre tras persistir el cambio en el `.env`.
    """

    domain: str = ""
    api_key: str = ""

    @property
    def domain_set(self) -> bool:
        return bool(self.domain)

    @property
    def api_key_set(self) -> bool:
        return bool(self.api_key)

    def ensure_ready(self) -> None:
        """Lanza `ConfigMissing` si falta algo para poder ejecutar."""

        if not self.api_key_set:
            raise ConfigMissing("GAIA API KEY")
        if not self.domain_set:
            raise ConfigMissing("Domain")


@dataclass(frozen=True)
class Bounded:
    """Número finito de iteraciones (0 = no ejecutar nada)."""

    count: int

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError("iteration count must not be negative")

    def label(self) -> str:
        return str(self.count)


@dataclass(frozen=True)
class Unbounded:
    """Iterar hasta que el proceso sea interrumpido."""

    def label(self) -> str:
        return "infinite"


Iterations = Union[Bounded, Unbounded]


@dataclass(frozen=True)
class RunParameters:
    interval_seconds: int = 3
    iterations: Iterations = Unbounded()

    def __post_init__(self) -> None:
        if self.interval_seconds < 0:
            raise ValueError("interval_seconds must not be negative")


class Success(BaseModel):
    """El endpoint devolvió una respuesta de chat válida."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["success"] = "success"
    content: str = Field(..., description="Contenido del primer `choice`.")


class DomainError(BaseModel):
    """El subdominio sirve una página HTML en lugar de la API de chat.

    - `bad_domain`: respuesta normal (< 500) con cuerpo HTML.
    - `invalid_domain`: fallo de transporte cuyo cuerpo también es HTML.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["domain_error"] = "domain_error"
    reason: Literal["bad_domain", "invalid_domain"]


class RequestFailure(BaseModel):
    """Fallo de red, de transporte o payload inesperado."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["request_failure"] = "request_failure"
    detail: str = Field(..., description="Payload remoto o mensaje de la excepción.")


ChatResult = Union[Success, DomainError, RequestFailure]


@dataclass
class RunSummary:
    """Contadores acumulados por el bucle de ejecución."""

    iterations: int = 0
    requests: int = 0
    successes: int = 0
    domain_errors: int = 0
    failures: int = 0

    def record(self, result: ChatResult) -> None:
        self.requests += 1
        if isinstance(result, Success):
            self.successes += 1
        elif isinstance(result, DomainError):
            self.domain_errors += 1
        else:
            self.failures += 1
