"""Cancellable per-frame callback scheduling.

Mirrors request/cancel animation-frame semantics on top of a plain frame
loop: a callback is armed once and fires on the next ``pump``; to keep
running it has to request itself again.
"""

from __future__ import annotations

from typing import Callable

FrameCallback = Callable[[float], None]


class FrameScheduler:
    def __init__(self) -> None:
        self._pending: FrameCallback | None = None

    @property
    def active(self) -> bool:
        return self._pending is not None

    def request(self, callback: FrameCallback) -> None:
        self._pending = callback

    def cancel(self) -> None:
        self._pending = None

    def pump(self, now_ms: float) -> bool:
        """Fire the armed callback, if any. Returns whether one ran."""
        callback = self._pending
        if callback is None:
            return False
        self._pending = None
        callback(now_ms)
        return True
