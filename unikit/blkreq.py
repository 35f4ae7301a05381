"""Block device requests: the operation, its sectors and buffer, and its completion."""

from __future__ import annotations

import threading
from enum import Enum, auto
from typing import Any, Callable, Optional

BlkreqCallback = Callable[["Blkreq", Any], None]


class BlkreqOp(Enum):
    """Operations a block request can carry."""

    READ = auto()
    WRITE = auto()
    FFLUSH = auto()  # flush the volatile write cache


class Blkreq:
    """A request sent to a block device.

    Input fields describe the operation. The device sets :attr:`result`
    (negative on error) and marks the request finished through :meth:`finish`.
    """

    def __init__(
        self,
        operation: BlkreqOp,
        start_sector: int,
        nb_sectors: int,
        buffer: Optional[bytearray | memoryview] = None,
        callback: Optional[BlkreqCallback] = None,
        cookie: Any = None,
    ) -> None:
        if not isinstance(operation, BlkreqOp):
            raise TypeError(f"operation must be a BlkreqOp, got {operation!r}")
        if start_sector < 0:
            raise ValueError(f"start sector must be non-negative, got {start_sector}")
        if nb_sectors < 0:
            raise ValueError(f"sector count must be non-negative, got {nb_sectors}")
        self.operation = operation
        self.start_sector = start_sector
        self.nb_sectors = nb_sectors
        self.buffer = buffer
        self.callback = callback
        self.cookie = cookie
        self.result = 0
        self._finished = threading.Event()

    def is_done(self) -> bool:
        """Return whether the request has been finished."""
        return self._finished.is_set()

    def finish(self, result: int = 0) -> None:
        """Mark the request finished with *result* and run its callback."""
        self.result = result
        self._finished.set()
        if self.callback is not None:
            self.callback(self, self.cookie)

    def __repr__(self) -> str:
        state = "finished" if self.is_done() else "pending"
        return (
            f"Blkreq({self.operation.name}, start={self.start_sector}, "
            f"count={self.nb_sectors}, {state}, result={self.result})"
        )