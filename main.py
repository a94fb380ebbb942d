"""Lanzador local: `python main.py` sin `pip install -e .`.

Hace lo mismo que el script `gaia-botchat` de pyproject.toml, pero antes
añade `src/` al path porque los paquetes `cli`, `core` y `adapters` viven ahí.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

from cli.main import run  # noqa: E402

if __name__ == "__main__":
    run()
