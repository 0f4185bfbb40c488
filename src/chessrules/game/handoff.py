"""Single-slot blocking handoff between a move source and the controller."""

from __future__ import annotations

import logging
import threading
from typing import Generic, TypeVar

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


class HandoffCancelled(Exception):
    """Raised by :meth:`Handoff.wait` when the request was cancelled."""


class Handoff(Generic[T]):
    """A request that resolves exactly once, with a value or a cancellation.

    ``deliver`` and ``cancel`` may be called from any thread; the first one
    wins and later calls return ``False``. ``wait`` blocks the calling
    thread until resolution.
    """

    __slots__ = ("_lock", "_resolved", "_value", "_cancelled", "label")

    def __init__(self, label: str = "") -> None:
        self._lock = threading.Lock()
        self._resolved = threading.Event()
        self._value: T | None = None
        self._cancelled = False
        self.label = label

    # ── Resolution ───────────────────────────────────────────────────────

    def deliver(self, value: T) -> bool:
        """Resolve with *value*. Returns ``False`` if already resolved."""
        with self._lock:
            if self._resolved.is_set():
                return False
            self._value = value
            self._resolved.set()
        _LOGGER.debug("Handoff %s delivered %r", self.label, value)
        return True

    def cancel(self) -> bool:
        """Resolve as cancelled. Returns ``False`` if already resolved."""
        with self._lock:
            if self._resolved.is_set():
                return False
            self._cancelled = True
            self._resolved.set()
        _LOGGER.debug("Handoff %s cancelled", self.label)
        return True

    # ── Waiting ──────────────────────────────────────────────────────────

    def wait(self, timeout: float | None = None) -> T:
        """Block until resolved and return the delivered value.

        Raises:
            HandoffCancelled: the request was cancelled.
            TimeoutError: nothing arrived within *timeout* seconds.
        """
        if not self._resolved.wait(timeout):
            raise TimeoutError(f"No answer for {self.label or 'request'} in {timeout}s")
        if self._cancelled:
            raise HandoffCancelled(self.label)
        return self._value  # type: ignore[return-value]

    @property
    def done(self) -> bool:
        return self._resolved.is_set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @classmethod
    def resolved(cls, value: T, label: str = "") -> Handoff[T]:
        """A handoff that already holds *value*."""
        handoff: Handoff[T] = cls(label)
        handoff.deliver(value)
        return handoff
