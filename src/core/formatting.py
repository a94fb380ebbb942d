"""Helpers de texto compartidos por la CLI y el cliente HTTP."""

from __future__ import annotations

ELLIPSIS = "..."

_HTML_DECLARATION = "<!doctype html"


def truncate(text: str, max_length: int = 50) -> str:
    """Recorta `text` a `max_length` caracteres terminando en `...`."""

    if len(text) <= max_length:
        return text
    return text[: max_length - len(ELLIPSIS)] + ELLIPSIS


def looks_like_html(body: object) -> bool:
    """True si `body` es texto que empieza por una declaración `<!DOCTYPE html`."""

    return isinstance(body, str) and body.lstrip().lower().startswith(_HTML_DECLARATION)
