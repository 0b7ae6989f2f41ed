"""Registry of detached asyncio tasks that must finish before the process exits.

Request handlers schedule write-back coroutines here and return immediately.
The registry keeps a strong reference to every task until it completes (a
bare create_task result may be garbage-collected mid-flight), absorbs and logs
any failure, and is drained from the application lifespan on shutdown.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Coroutine
from typing import Any

from isp_translator.domain.exceptions import TranslatorException

logger = logging.getLogger(__name__)


class BackgroundTaskRegistry:
    """Owns background tasks from schedule() until they finish or drain() abandons them."""

    def __init__(self) -> None:
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def pending(self) -> int:
        """Number of tasks not yet finished."""
        return len(self._tasks)

    def schedule(self, coro: Coroutine[Any, Any, Any], name: str) -> None:
        """Start coro as a background task. Must be called from a running event loop."""
        task = asyncio.create_task(self._run(coro, name), name=name)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _run(self, coro: Coroutine[Any, Any, Any], name: str) -> None:
        try:
            await coro
        except TranslatorException as e:
            logger.warning(
                "Background task %s failed: %s (%s) %s",
                name,
                e.message,
                e.error_code,
                e.details,
            )
        except Exception:
            logger.exception("Background task %s failed", name)

    async def drain(self, timeout: float | None = None) -> int:
        """Wait for outstanding tasks; cancel those still running after timeout.

        Tasks scheduled while draining are waited for as well.

        Args:
            timeout: Seconds to wait in total; None waits indefinitely.

        Returns:
            Number of tasks abandoned (cancelled) because the timeout expired.
        """
        loop = asyncio.get_running_loop()
        deadline = None if timeout is None else loop.time() + timeout
        while self._tasks:
            remaining = None if deadline is None else max(deadline - loop.time(), 0.0)
            _, still_pending = await asyncio.wait(set(self._tasks), timeout=remaining)
            if not still_pending:
                continue
            if deadline is not None and loop.time() >= deadline:
                for task in still_pending:
                    logger.warning(
                        "Abandoning background task %s after %ss drain timeout",
                        task.get_name(),
                        timeout,
                    )
                    task.cancel()
                await asyncio.gather(*still_pending, return_exceptions=True)
                return len(still_pending)
        return 0
