# Copyright (c) 2026 Itameter
# SPDX-License-Identifier: MIT

"""
Per-key debounce scheduling on the running asyncio loop.

Each key holds at most one pending call. Scheduling again for the same key
discards the pending call (last write wins); calls for different keys are
independent and fire in no guaranteed order.
"""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Hashable

from itameter.logging_config import get_logger

logger = get_logger(__name__)


class DebounceScheduler:
    """
    Map of key → cancellable timer handle.

    Must be used from code running inside an asyncio event loop; the
    scheduler never creates a loop or a thread of its own.

    Attributes:
        delay: Quiescence delay in seconds
    """

    def __init__(self, delay: float) -> None:
        if delay < 0:
            raise ValueError(f"Debounce delay must be >= 0, got {delay}")
        self.delay = delay
        self._handles: dict[Hashable, asyncio.TimerHandle] = {}

    def schedule(self, key: Hashable, callback: Callable[..., Any], *args: Any) -> asyncio.TimerHandle:
        """Cancel any pending call for ``key`` and schedule ``callback(*args)``."""
        loop = asyncio.get_running_loop()
        self.cancel(key)
        handle = loop.call_later(self.delay, self._fire, key, callback, args)
        self._handles[key] = handle
        logger.debug("Debounced call scheduled", key=str(key), delay=self.delay)
        return handle

    def cancel(self, key: Hashable) -> bool:
        """Discard the pending call for ``key``. Returns True if one existed."""
        handle = self._handles.pop(key, None)
        if handle is None:
            return False
        handle.cancel()
        return True

    def cancel_all(self) -> None:
        """Discard every pending call."""
        for handle in self._handles.values():
            handle.cancel()
        self._handles.clear()

    def is_pending(self, key: Hashable) -> bool:
        return key in self._handles

    def __len__(self) -> int:
        return len(self._handles)

    def _fire(self, key: Hashable, callback: Callable[..., Any], args: tuple) -> None:
        self._handles.pop(key, None)
        callback(*args)
