"""A bounded, thread-safe FIFO mailbox."""

from __future__ import annotations

import errno
import threading
from datetime import timedelta
from typing import Generic, TypeVar

from .locks import Semaphore

T = TypeVar("T")

_EMPTY = object()


class MboxError(OSError):
    """The mailbox had no room (post) or no message (receive)."""

    def __init__(self, message: str) -> None:
        super().__init__(errno.ENOBUFS, message)


class Mbox(Generic[T]):
    """A mailbox holding at most *size* messages, delivered in FIFO order."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"mailbox size must be non-negative, got {size}")
        self._slots: list[object] = [_EMPTY] * (size + 1)
        self._readsem = Semaphore(0)
        self._writesem = Semaphore(size)
        self._readpos = 0
        self._writepos = 0
        self._pos_lock = threading.Lock()

    def _advance(self, pos: int) -> int:
        return pos + 1 if pos + 1 != len(self._slots) else 0

    def _do_recv(self) -> T:
        with self._pos_lock:
            pos = self._readpos
            self._readpos = self._advance(pos)
            msg = self._slots[pos]
            self._slots[pos] = _EMPTY
        self._writesem.signal()
        return msg  # type: ignore[return-value]

    def _do_post(self, msg: T) -> None:
        with self._pos_lock:
            pos = self._writepos
            self._writepos = self._advance(pos)
            self._slots[pos] = msg
        self._readsem.signal()

    def post(self, msg: T) -> None:
        """Post a message, blocking until there is room."""
        self._writesem.wait()
        self._do_post(msg)

    def post_try(self, msg: T) -> None:
        """Post a message, raising :class:`MboxError` if the mailbox is full."""
        if not self._writesem.try_wait():
            raise MboxError("mailbox is full")
        self._do_post(msg)

    def post_to(self, msg: T, duration: float | timedelta) -> None:
        """Post a message, waiting at most *duration* for room."""
        if not self._writesem.wait_for(duration):
            raise MboxError("mailbox is full")
        self._do_post(msg)

    def recv(self) -> T:
        """Receive the oldest message, blocking until one arrives."""
        self._readsem.wait()
        return self._do_recv()

    def recv_try(self) -> T:
        """Receive the oldest message, raising :class:`MboxError` if empty."""
        if not self._readsem.try_wait():
            raise MboxError("mailbox is empty")
        return self._do_recv()

    def recv_to(self, duration: float | timedelta) -> T:
        """Receive the oldest message, waiting at most *duration* for one."""
        if not self._readsem.wait_for(duration):
            raise MboxError("mailbox is empty")
        return self._do_recv()