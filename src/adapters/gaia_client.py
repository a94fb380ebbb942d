"""Cliente de chat completions de Gaia.

Implementación:
- Una petición POST por pregunta contra
  `https://{domain}.gaia.domains/v1/chat/completions`.
- Status < 500 es un resultado "normal"; >= 500 se escala como fallo de
  transporte.

Clasificación (el orden importa):
1) cuerpo HTML en una respuesta normal => `DomainError("bad_domain")`
2) `choices[0].message.content` => `Success`
3) fallo de transporte con cuerpo HTML => `DomainError("invalid_domain")`
4) cualquier otro fallo => `RequestFailure` con el payload remoto o el
   mensaje de la excepción.
"""

from __future__ import annotations

import json
from typing import Any

import httpx

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.models import ChatResult, DomainError, RequestFailure, Success
from core.formatting import looks_like_html
from core.interfaces.chat_client import ChatClient

SYSTEM_PROMPT = "You are a helpful assistant."


class UnexpectedPayload(Exception):
    """La respuesta no tiene la forma de un chat completion."""

    def __init__(self, message: str, response: httpx.Response) -> None:
        super().__init__(message)
        self.response = response


def build_payload(question: str) -> dict[str, Any]:
    return {
        "messages": [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": question},
        ]
    }


def _extract_content(response: httpx.Response) -> str:
    try:
        content = response.json()["choices"][0]["message"]["content"]
    except (ValueError, KeyError, IndexError, TypeError) as exc:
        raise UnexpectedPayload(f"Unexpected chat completion payload: {exc!r}", response) from exc
    if not isinstance(content, str):
        raise UnexpectedPayload("Chat completion content is not a string", response)
    return content


def _failure_detail(exc: Exception, response: httpx.Response | None) -> str:
    if response is not None and response.content:
        try:
            return json.dumps(response.json(), ensure_ascii=False)
        except ValueError:
            return response.text.strip()
    return str(exc) or exc.__class__.__name__


class GaiaChatClient(ChatClient):
    """Envía preguntas al endpoint de un subdominio de gaia.domains."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    def endpoint_for(self, domain: str) -> str:
        return self._settings.endpoint_template.format(domain=domain)

    async def ask(self, domain: str, api_key: str, question: str) -> ChatResult:
        url = self.endpoint_for(domain)
        headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

        try:
            async with build_async_client(
                self._settings, extra_headers=headers, transport=self._transport
            ) as client:
                response = await client.post(url, json=build_payload(question))

            if response.status_code >= 500:
                raise httpx.HTTPStatusError(
                    f"Server error '{response.status_code} {response.reason_phrase}' for url '{url}'",
                    request=response.request,
                    response=response,
                )

            if looks_like_html(response.text):
                return DomainError(reason="bad_domain")

            return Success(content=_extract_content(response))
        except (httpx.HTTPError, httpx.InvalidURL, UnexpectedPayload, UnicodeEncodeError) as exc:
            # Headers must be ASCII; a pasted non-ASCII API key fails here.
            response = getattr(exc, "response", None)
            if response is not None and looks_like_html(response.text):
                return DomainError(reason="invalid_domain")
            return RequestFailure(detail=_failure_detail(exc, response))
