"""Debounce bursts of change triggers into one serialised run."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Generic, Optional, TypeVar

from ttl_grammar.constants import NOTIFICATION_SOURCE
from ttl_grammar.errors import GrammarError
from ttl_grammar.interfaces.notifier import INotifier

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DebounceScheduler(Generic[T]):
    def __init__(
        self,
        action: Callable[[T], Awaitable[Any]],
        notifier: INotifier,
        notification_source: str = NOTIFICATION_SOURCE,
    ) -> None:
        self._action = action
        self._notifier = notifier
        self._notification_source = notification_source
        self._timer: Optional[asyncio.TimerHandle] = None
        self._runs: set[asyncio.Task[None]] = set()
        self._lock = asyncio.Lock()
        self._idle = asyncio.Event()
        self._idle.set()

    @property
    def pending(self) -> bool:
        return self._timer is not None

    @property
    def running(self) -> bool:
        return bool(self._runs)

    def schedule(self, latest_inputs: T, quiet_period: float) -> None:
        """Arm the timer, replacing any pending run with ``latest_inputs``.

        Must be called from the thread running the event loop.
        """
        loop = asyncio.get_running_loop()
        if self._timer is not None:
            self._timer.cancel()
            logger.debug("Re-arming pending run")
        self._idle.clear()
        self._timer = loop.call_later(quiet_period, self._fire, latest_inputs)

    def cancel(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self._update_idle()

    async def wait_idle(self) -> None:
        await self._idle.wait()

    def _fire(self, inputs: T) -> None:
        self._timer = None
        task = asyncio.get_running_loop().create_task(self._run(inputs))
        self._runs.add(task)
        task.add_done_callback(self._on_run_done)

    def _on_run_done(self, task: "asyncio.Task[None]") -> None:
        self._runs.discard(task)
        self._update_idle()

    def _update_idle(self) -> None:
        if self._timer is None and not self._runs:
            self._idle.set()

    async def _run(self, inputs: T) -> None:
        async with self._lock:
            try:
                await self._action(inputs)
            except Exception as exc:
                logger.warning("Scheduled grammar update failed: %s", exc)
                if isinstance(exc, GrammarError) and exc.reported:
                    return
                self._notifier.warning(self._notification_source, str(exc))
