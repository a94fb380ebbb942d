"""Interactive menu state machine.

States are explicit (`MenuState`); every handler returns the next state.
Only `SHOW_MENU` branches, every other state goes back to it except `EXIT`.
Input is read through an injectable callable so the whole flow can be driven
from tests with scripted answers.
"""

from __future__ import annotations

import asyncio
import logging
import re
from enum import Enum
from typing import Any, Callable, Coroutine, Sequence

from rich.console import Console

from cli.ui_components import (
    build_summary_table,
    print_error,
    print_iteration_banner,
    print_menu,
    render_result,
)
from core.config import API_KEY_KEY, DOMAIN_KEY, EnvFileStore
from core.domain.errors import ConfigMissing
from core.domain.models import Bounded, Configuration, Iterations, RunParameters, Unbounded
from core.interfaces.chat_client import ChatClient
from core.services.run_loop import RunHooks, Sleep, run_questions

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_SECONDS = 3

Runner = Callable[[Coroutine[Any, Any, Any]], Any]

_LEADING_INT = re.compile(r"[+-]?\d+")


class MenuState(str, Enum):
    SHOW_MENU = "show_menu"
    EDIT_DOMAIN = "edit_domain"
    EDIT_API_KEY = "edit_api_key"
    CONFIGURE_AND_RUN = "configure_and_run"
    EXIT = "exit"


MENU_CHOICES: dict[str, MenuState] = {
    "1": MenuState.EDIT_DOMAIN,
    "2": MenuState.EDIT_API_KEY,
    "3": MenuState.CONFIGURE_AND_RUN,
    "4": MenuState.EXIT,
}


def leading_int(raw: str) -> int | None:
    """Integer prefix of `raw` (`"5abc"` -> 5, `"1.5"` -> 1), or None."""

    match = _LEADING_INT.match(raw.strip())
    return int(match.group()) if match else None


def parse_interval(raw: str, default: int = DEFAULT_INTERVAL_SECONDS) -> int:
    """Seconds between questions; no positive integer prefix gives `default`."""

    value = leading_int(raw)
    return value if value is not None and value > 0 else default


def parse_iterations(raw: str) -> Iterations:
    """Empty or non-numeric input runs forever; zero or negative runs nothing."""

    value = leading_int(raw)
    if value is None:
        return Unbounded()
    return Bounded(max(value, 0))


class MenuController:
    def __init__(
        self,
        *,
        console: Console,
        store: EnvFileStore,
        config: Configuration,
        questions: Sequence[str],
        client: ChatClient,
        default_interval: int = DEFAULT_INTERVAL_SECONDS,
        read_input: Callable[[str], str] | None = None,
        runner: Runner = asyncio.run,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self.console = console
        self.store = store
        self.config = config
        self.questions = questions
        self.client = client
        self.default_interval = default_interval
        self._read_input = read_input or console.input
        self._runner = runner
        self._sleep = sleep
        self._handlers: dict[MenuState, Callable[[], MenuState]] = {
            MenuState.SHOW_MENU: self.show_menu,
            MenuState.EDIT_DOMAIN: self.edit_domain,
            MenuState.EDIT_API_KEY: self.edit_api_key,
            MenuState.CONFIGURE_AND_RUN: self.configure_and_run,
        }

    def _ask(self, prompt: str) -> str:
        return self._read_input(f"[bold yellow]{prompt}[/bold yellow]").strip()

    def loop(self) -> None:
        state = MenuState.SHOW_MENU
        while state is not MenuState.EXIT:
            state = self._handlers[state]()
        self.console.print("[bold yellow]Exiting...[/bold yellow]")

    def show_menu(self) -> MenuState:
        print_menu(self.console, self.config)
        choice = self._ask("Choose an option: ")
        state = MENU_CHOICES.get(choice)
        if state is None:
            print_error(self.console, "Invalid option. Please try again.")
            return MenuState.SHOW_MENU
        return state

    def edit_domain(self) -> MenuState:
        domain = self._ask("Enter custom domain (leave empty to unset): ")
        self.store.set(DOMAIN_KEY, domain)
        self.config.domain = domain
        logger.info("Domain %s", f"set to {domain!r}" if domain else "unset")
        return MenuState.SHOW_MENU

    def edit_api_key(self) -> MenuState:
        api_key = self._ask("Enter GAIA API KEY: ")
        if api_key:
            self.store.set(API_KEY_KEY, api_key)
            self.config.api_key = api_key
            self.console.print("[bold green]API Key set successfully![/bold green]")
        return MenuState.SHOW_MENU

    def configure_and_run(self) -> MenuState:
        try:
            self.config.ensure_ready()
        except ConfigMissing as exc:
            print_error(self.console, f"Error: {exc}")
            return MenuState.SHOW_MENU

        interval = parse_interval(
            self._ask(f"Enter interval between questions in seconds (default: {self.default_interval}): "),
            default=self.default_interval,
        )
        iterations = parse_iterations(self._ask("Enter number of iterations (default: infinite): "))
        if iterations == Bounded(0):
            self.console.print("[yellow]Nothing to run (0 iterations).[/yellow]")
            return MenuState.SHOW_MENU
        params = RunParameters(interval_seconds=interval, iterations=iterations)
        logger.info("Starting run: interval=%ss iterations=%s", interval, iterations.label())

        hooks = RunHooks(
            iteration_started=lambda n: print_iteration_banner(self.console, n),
            on_result=lambda q, r: render_result(self.console, q, r),
        )
        try:
            summary = self._runner(
                run_questions(
                    client=self.client,
                    config=self.config,
                    questions=self.questions,
                    params=params,
                    hooks=hooks,
                    sleep=self._sleep,
                )
            )
        except KeyboardInterrupt:
            self.console.print("\n[yellow]Run interrupted.[/yellow]")
            return MenuState.SHOW_MENU

        self.console.print(build_summary_table(summary))
        return MenuState.SHOW_MENU
