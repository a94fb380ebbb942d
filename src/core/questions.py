"""Carga del fichero de preguntas.

Formato: texto plano, una pregunta por línea. Las líneas vacías (o solo con
espacios) se descartan; el resto se conserva tal cual y en orden.
"""

from __future__ import annotations

from pathlib import Path

from core.domain.errors import SourceUnavailable


def load_questions(path: Path) -> tuple[str, ...]:
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SourceUnavailable(path, exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise SourceUnavailable(path, f"not valid UTF-8 ({exc.reason})") from exc

    return tuple(line for line in raw.splitlines() if line.strip())
