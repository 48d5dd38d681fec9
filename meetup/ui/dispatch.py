"""Retour sur le thread Tkinter des callbacks émis par d'autres threads."""

from __future__ import annotations

import queue
from typing import Callable

AfterFn = Callable[[int, Callable[[], None]], object]
AfterCancelFn = Callable[[object], None]

POLL_INTERVAL_MS = 50


class TkDispatcher:
    """File thread-safe vidée périodiquement via ``after``.

    ``post`` peut être appelé depuis n'importe quel thread ; les callbacks
    s'exécutent uniquement pendant ``drain``, sur le thread de l'interface.
    """

    def __init__(
        self,
        after: AfterFn,
        after_cancel: AfterCancelFn,
        *,
        interval_ms: int = POLL_INTERVAL_MS,
    ) -> None:
        self._after = after
        self._after_cancel = after_cancel
        self._interval_ms = max(10, interval_ms)
        self._queue: queue.SimpleQueue[Callable[[], None]] = queue.SimpleQueue()
        self._handle: object | None = None

    @property
    def running(self) -> bool:
        return self._handle is not None

    def post(self, callback: Callable[[], None]) -> None:
        self._queue.put(callback)

    def drain(self) -> int:
        """Exécute les callbacks en attente et retourne leur nombre."""
        count = 0
        while True:
            try:
                callback = self._queue.get_nowait()
            except queue.Empty:
                return count
            callback()
            count += 1

    def start(self) -> None:
        if self._handle is None:
            self._handle = self._after(self._interval_ms, self._tick)

    def stop(self) -> None:
        if self._handle is not None:
            self._after_cancel(self._handle)
            self._handle = None

    def _tick(self) -> None:
        try:
            self.drain()
        finally:
            if self._handle is not None:
                self._handle = self._after(self._interval_ms, self._tick)
