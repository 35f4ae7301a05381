"""Blocking synchronisation primitives: a recursive mutex and a counting semaphore."""

from __future__ import annotations

import threading
import time
from datetime import timedelta
from types import TracebackType


def _seconds(duration: float | timedelta) -> float:
    if isinstance(duration, timedelta):
        duration = duration.total_seconds()
    if duration < 0:
        raise ValueError(f"duration must be non-negative, got {duration}")
    return float(duration)


class Mutex:
    """A recursive mutex owned by the thread that locked it.

    The owning thread may lock it again; it is released once every lock
    has been matched by an :meth:`unlock`.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._owner: int | None = None
        self._lock_count = 0

    def _acquire_locked(self) -> bool:
        current = threading.get_ident()
        if self._owner is None:
            self._owner = current
            self._lock_count = 1
            return True
        if self._owner == current:
            self._lock_count += 1
            return True
        return False

    def lock(self) -> None:
        """Lock the mutex, blocking until it becomes available."""
        with self._cond:
            while not self._acquire_locked():
                self._cond.wait()

    def try_lock(self) -> bool:
        """Lock the mutex if that is possible without blocking."""
        with self._cond:
            return self._acquire_locked()

    def lock_for(self, duration: float | timedelta) -> bool:
        """Try to lock the mutex within *duration*; return whether it was locked."""
        deadline = time.monotonic() + _seconds(duration)
        with self._cond:
            while not self._acquire_locked():
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    return False
                self._cond.wait(remaining)
            return True

    def is_locked(self) -> bool:
        """Return whether any thread holds the mutex."""
        with self._cond:
            return self._owner is not None

    def unlock(self) -> None:
        """Release one level of locking held by the calling thread."""
        with self._cond:
            if self._owner != threading.get_ident():
                raise RuntimeError("mutex unlocked by a thread that does not own it")
            self._lock_count -= 1
            if self._lock_count == 0:
                self._owner = None
                self._cond.notify()

    def __enter__(self) -> Mutex:
        self.lock()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.unlock()


class Semaphore:
    """A counting semaphore.

    A positive count is the number of free resources; a negative count is
    the number of threads waiting.
    """

    def __init__(self, count: int) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._count = count
        self._wakeups = 0

    def wait(self) -> None:
        """Take one resource, blocking until one is available."""
        with self._cond:
            previous = self._count
            self._count -= 1
            if previous > 0:
                return
            while self._wakeups == 0:
                self._cond.wait()
            self._wakeups -= 1

    def try_wait(self) -> bool:
        """Take one resource if one is free, without blocking."""
        with self._cond:
            if self._count <= 0:
                return False
            self._count -= 1
            return True

    def wait_for(self, duration: float | timedelta) -> bool:
        """Take one resource within *duration*; return whether it was taken."""
        deadline = time.monotonic() + _seconds(duration)
        with self._cond:
            previous = self._count
            self._count -= 1
            if previous > 0:
                return True
            while self._wakeups == 0:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    self._count += 1
                    return False
                self._cond.wait(remaining)
            self._wakeups -= 1
            return True

    def signal(self) -> None:
        """Release one resource, waking one waiting thread if there is one."""
        with self._cond:
            previous = self._count
            self._count += 1
            if previous < 0:
                self._wakeups += 1
                self._cond.notify()

    def count(self) -> int:
        """Return the current count."""
        with self._cond:
            return self._count