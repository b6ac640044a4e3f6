from __future__ import annotations

import asyncio
import os
import sys
from dataclasses import dataclass
from typing import Protocol

import structlog

log = structlog.get_logger()


@dataclass(frozen=True, slots=True)
class ShutdownRequest:
    """
    A request to terminate the process, produced by a successful
    admin authorization and acted on after the response is sent.
    """

    exit_code: int = 1
    delay_seconds: float = 0.1
    reason: str = "admin.kill"


class Terminator(Protocol):
    def terminate(self, exit_code: int) -> None: ...


class ProcessTerminator:
    """
    Hard-exits the interpreter.

    ``os._exit`` skips atexit handlers and uvicorn's own shutdown, so a
    supervisor sees the non-zero status exactly as a crash.
    """

    def terminate(self, exit_code: int) -> None:
        sys.stdout.flush()
        sys.stderr.flush()
        os._exit(exit_code)


class ShutdownScheduler:
    """
    Executes shutdown requests on behalf of the bootstrap layer.

    ``execute`` is meant to run as a post-response background task:
    it waits on the event loop (never blocking it) and then hands the
    exit code to the terminator.
    """

    def __init__(self, *, terminator: Terminator) -> None:
        self._terminator = terminator

    async def execute(self, request: ShutdownRequest) -> None:
        if request.delay_seconds > 0:
            await asyncio.sleep(request.delay_seconds)

        log.warning(
            "admin.shutdown.executing",
            exit_code=request.exit_code,
            reason=request.reason,
        )
        self._terminator.terminate(request.exit_code)
