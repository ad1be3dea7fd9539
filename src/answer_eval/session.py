from __future__ import annotations
import asyncio
import logging
from typing import Awaitable, Callable

from .grader import Verdict

logger = logging.getLogger(__name__)

STATE_IDLE = "idle"
STATE_PENDING = "pending"
STATE_RESOLVED = "resolved"
STATE_FAILED = "failed"
STATE_CANCELLED = "cancelled"


class AnswerCheck:
    """One learner submission: idle -> pending -> resolved | failed | cancelled.

    Once cancelled, a late verdict is dropped and ``on_result`` is not called,
    so an abandoned screen never receives it.
    """

    def __init__(self, on_result: Callable[[Verdict], None] | None = None) -> None:
        self._on_result = on_result
        self._task: asyncio.Task[Verdict] | None = None
        self.state = STATE_IDLE
        self.verdict: Verdict | None = None
        self.error: BaseException | None = None

    @property
    def done(self) -> bool:
        return self.state in (STATE_RESOLVED, STATE_FAILED, STATE_CANCELLED)

    def start(self, evaluation: Awaitable[Verdict]) -> None:
        if self.state != STATE_IDLE:
            raise RuntimeError(f"answer check already {self.state}")
        self.state = STATE_PENDING
        self._task = asyncio.ensure_future(evaluation)
        self._task.add_done_callback(self._settle)

    def _settle(self, task: asyncio.Task[Verdict]) -> None:
        if self.state != STATE_PENDING:
            return
        if task.cancelled():
            self.state = STATE_CANCELLED
            return
        exc = task.exception()
        if exc is not None:
            self.state = STATE_FAILED
            self.error = exc
            logger.error("answer_check_failed error=%s: %s", type(exc).__name__, exc)
            return
        self.verdict = task.result()
        self.state = STATE_RESOLVED
        if self._on_result is not None:
            self._on_result(self.verdict)

    def cancel(self) -> bool:
        if self.state != STATE_PENDING:
            return False
        self.state = STATE_CANCELLED
        if self._task is not None:
            self._task.cancel()
        logger.info("answer_check_cancelled")
        return True

    async def wait(self) -> Verdict | None:
        """Verdict once settled; ``None`` if cancelled; re-raises programmer errors."""
        if self._task is None:
            raise RuntimeError("answer check was never started")
        try:
            await asyncio.shield(self._task)
        except asyncio.CancelledError:
            if self.state != STATE_CANCELLED:
                raise
            return None
        if self.state == STATE_CANCELLED:
            return None
        return self.verdict
