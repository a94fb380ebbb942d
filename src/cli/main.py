"""CLI entrypoint (Typer).

Un único comando sin opciones: carga configuración y preguntas y abre el
menú interactivo.
"""

from __future__ import annotations

import sys

import typer
from rich.console import Console

from adapters.gaia_client import GaiaChatClient
from cli.menu import MenuController
from cli.ui_components import print_error
from core.config import DEFAULT_ENV_FILE, AppSettings, EnvFileStore
from core.domain.errors import SourceUnavailable
from core.domain.models import Configuration
from core.logging_config import setup_logging
from core.questions import load_questions

app = typer.Typer(add_completion=False, help="Send a list of questions to a Gaia chat endpoint on a schedule.")

_console = Console()


@app.command()
def botchat() -> None:
    """Open the interactive menu."""

    settings = AppSettings()
    setup_logging(settings.log_level)

    try:
        questions = load_questions(settings.questions_file)
    except SourceUnavailable as exc:
        print_error(_console, str(exc))
        raise typer.Exit(code=1) from exc

    controller = MenuController(
        console=_console,
        store=EnvFileStore(DEFAULT_ENV_FILE),
        config=Configuration(domain=settings.domain, api_key=settings.gaia_api_key),
        questions=questions,
        client=GaiaChatClient(settings),
        default_interval=settings.default_interval_seconds,
    )
    try:
        controller.loop()
    except (KeyboardInterrupt, EOFError):
        _console.print("\n[bold yellow]Exiting...[/bold yellow]")


def run() -> None:
    # Workaround for UnicodeEncodeError on Windows terminals (cp1252 vs utf-8).
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")
    app()
