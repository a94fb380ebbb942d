"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar la máquina de estados del menú con detalles visuales.
- El bucle de ejecución recibe `render_result` como hook y no sabe nada de
  colores.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from core.domain.models import ChatResult, Configuration, DomainError, RunSummary, Success
from core.formatting import truncate

MENU_TITLE = "=== Gaia API BotChat ==="

BAD_DOMAIN_MESSAGE = "Your domain is bad (it returned an HTML page instead of the API), please change it."
INVALID_DOMAIN_MESSAGE = "Your domain is invalid, please change it."


def print_menu(console: Console, config: Configuration) -> None:
    """Imprime el menú principal con la configuración en memoria."""

    domain = f"[green]{escape(config.domain)}[/green]" if config.domain_set else "[green]Not Set[/green]"
    key_status = "[green]API Key Set[/green]" if config.api_key_set else "[red]API Key Not Set[/red]"

    console.print(f"\n[bold yellow]{MENU_TITLE}[/bold yellow]")
    console.print(f"[white]1. Set domain (current domain: {domain})[/white]")
    console.print(f"[white]2. Add GAIA API KEY ({key_status})[/white]")
    console.print("[white]3. Run script[/white]")
    console.print("[white]4. Exit[/white]")


def print_error(console: Console, message: str) -> None:
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_iteration_banner(console: Console, number: int) -> None:
    console.print(f"\n[bold magenta]=== Iteration {number} ===[/bold magenta]")


def render_result(console: Console, question: str, result: ChatResult) -> None:
    """Muestra el resultado de una pregunta (respuesta recortada o error)."""

    if isinstance(result, Success):
        console.print(f"\n[bold green]Question: {escape(question)}[/bold green]")
        console.print("[bold blue]Response:[/bold blue]")
        console.print(f"[cyan]{escape(truncate(result.content))}[/cyan]")
    elif isinstance(result, DomainError):
        message = BAD_DOMAIN_MESSAGE if result.reason == "bad_domain" else INVALID_DOMAIN_MESSAGE
        print_error(console, message)
    else:
        console.print(
            f'[bold red]Error for question "{escape(question)}":[/bold red] {escape(result.detail)}'
        )


def build_summary_table(summary: RunSummary) -> Table:
    """Tabla Rich con los contadores de una ejecución finita."""

    table = Table(title="Run summary")
    table.add_column("Iterations", style="magenta", no_wrap=True)
    table.add_column("Requests", style="white")
    table.add_column("Answered", style="green")
    table.add_column("Domain errors", style="yellow")
    table.add_column("Failures", style="red")
    table.add_row(
        str(summary.iterations),
        str(summary.requests),
        str(summary.successes),
        str(summary.domain_errors),
        str(summary.failures),
    )
    return table
