"""Question scheduling loop.

The loop walks the whole question list once per iteration, asking each
question through a `ChatClient` and pausing `interval_seconds` after every
request, including the last one of an iteration. Printing is left to the
caller through `RunHooks`, which keeps side-effects (colors, banners) out of
the scheduling logic and lets tests drive the loop without a terminal.
"""

from __future__ import annotations

import asyncio
import itertools
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Iterator, Sequence

from core.domain.models import (
    Bounded,
    ChatResult,
    Configuration,
    DomainError,
    Iterations,
    RequestFailure,
    RunParameters,
    RunSummary,
)
from core.interfaces.chat_client import ChatClient

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]


@dataclass
class RunHooks:
    """Optional callbacks for UI layers (banners, per-question output)."""

    iteration_started: Callable[[int], None] | None = None
    on_result: Callable[[str, ChatResult], None] | None = None


def iteration_numbers(iterations: Iterations) -> Iterator[int]:
    """1-based iteration numbers; endless for `Unbounded`."""

    if isinstance(iterations, Bounded):
        return iter(range(1, iterations.count + 1))
    return itertools.count(1)


async def run_questions(
    *,
    client: ChatClient,
    config: Configuration,
    questions: Sequence[str],
    params: RunParameters,
    hooks: RunHooks | None = None,
    sleep: Sleep = asyncio.sleep,
) -> RunSummary:
    hooks = hooks or RunHooks()
    summary = RunSummary()

    for number in iteration_numbers(params.iterations):
        if hooks.iteration_started:
            hooks.iteration_started(number)

        for question in questions:
            logger.debug("Iteration %d: asking %r", number, question)
            result = await client.ask(config.domain, config.api_key, question)
            summary.record(result)
            if isinstance(result, DomainError):
                logger.info("Domain %r returned an HTML page (%s)", config.domain, result.reason)
            elif isinstance(result, RequestFailure):
                logger.info("Request failed for %r: %s", question, result.detail)
            if hooks.on_result:
                hooks.on_result(question, result)
            await sleep(params.interval_seconds)

        if not questions and not isinstance(params.iterations, Bounded):
            # Nothing to ask; still yield so an endless run can be cancelled.
            await sleep(params.interval_seconds)

        summary.iterations = number

    return summary
