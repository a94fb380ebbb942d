from __future__ import annotations

import io
from typing import Callable

import pytest
from rich.console import Console

from core.domain.models import ChatResult, Success


class FakeChatClient:
    """In-memory `ChatClient` that records every question it is asked."""

    def __init__(self, respond: Callable[[str], ChatResult] | None = None) -> None:
        self.calls: list[tuple[str, str, str]] = []
        self._respond = respond or (lambda question: Success(content=f"answer to {question}"))

    @property
    def questions(self) -> list[str]:
        return [question for _, _, question in self.calls]

    async def ask(self, domain: str, api_key: str, question: str) -> ChatResult:
        self.calls.append((domain, api_key, question))
        return self._respond(question)


class ScriptedInput:
    """Feeds canned answers to the menu and remembers the prompts shown."""

    def __init__(self, answers: list[str]) -> None:
        self.answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {prompt}")
        return self.answers.pop(0)


class RecordingSleep:
    def __init__(self) -> None:
        self.calls: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=200, color_system=None, force_terminal=False)


@pytest.fixture
def fake_client() -> FakeChatClient:
    return FakeChatClient()


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


def console_output(console: Console) -> str:
    return console.file.getvalue()  # type: ignore[attr-defined]
