"""Core block device types: states, configurations, queues, driver operations."""

from __future__ import annotations

import errno
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Any, Callable, Optional

from .blkreq import Blkreq

if TYPE_CHECKING:
    from .blkdev import Blkdev

# Largest number of queues a block device may have.
MAX_NB_QUEUES = 16

# Status flags returned by a queue's submit operation.
STATUS_SUCCESS = 0x1
STATUS_MORE = 0x2

_INT_MIN = -(2**31)

QueueEvent = Callable[["Blkdev", int, Any], None]


class BlkdevError(OSError):
    """A block device operation failed; ``errno`` tells why."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(code, message)


class BlkdevState(IntEnum):
    """Life-cycle state of a block device, in the order it is reached."""

    INVALID = 0
    UNCONFIGURED = 1
    CONFIGURED = 2
    RUNNING = 3


@dataclass
class BlkdevConf:
    """Configuration of a block device."""

    nb_queues: int


@dataclass
class BlkdevInfo:
    """Device capabilities reported before negotiation."""

    max_queues: int = 0


@dataclass
class BlkdevQueueInfo:
    """Descriptor ring limitations of a queue."""

    nb_max: int = 0
    nb_min: int = 0
    nb_align: int = 0
    nb_is_power_of_two: bool = False


@dataclass
class BlkdevQueueConf:
    """Configuration of a block device queue."""

    callback: Optional[QueueEvent] = None
    callback_cookie: Any = None
    allocator: Any = None


@dataclass(frozen=True)
class BlkdevCap:
    """Device geometry and access limits."""

    sectors: int
    ssize: int
    mode: int
    max_sectors_per_req: int
    ioalign: int


@dataclass
class BlkdevQueue:
    """A queue used for both requests and responses, owned by a driver."""

    queue_id: int
    intr_enabled: bool = False
    allocator: Any = None


@dataclass
class EventHandler:
    """Callback and argument registered for a queue's events."""

    callback: Optional[QueueEvent] = None
    cookie: Any = None

    def fire(self, dev: Blkdev, queue_id: int) -> bool:
        """Run the callback for an event on *queue_id*; return whether one ran."""
        if self.callback is None:
            return False
        self.callback(dev, queue_id, self.cookie)
        return True


def _not_supported(what: str) -> BlkdevError:
    return BlkdevError(errno.ENOTSUP, f"{what} is not supported by this driver")


class BlkdevOps(ABC):
    """Functions a block device driver exports.

    Failures are reported by raising :class:`BlkdevError`.
    """

    @abstractmethod
    def get_info(self) -> BlkdevInfo:
        """Return the initial device capabilities."""

    @abstractmethod
    def dev_configure(self, conf: BlkdevConf) -> None:
        """Configure the device."""

    @abstractmethod
    def queue_get_info(self, queue_id: int) -> BlkdevQueueInfo:
        """Return the limitations of a queue."""

    @abstractmethod
    def queue_configure(
        self, queue_id: int, nb_desc: int, queue_conf: BlkdevQueueConf
    ) -> BlkdevQueue:
        """Set up a queue and return it."""

    @abstractmethod
    def dev_start(self) -> None:
        """Start a configured device."""

    @abstractmethod
    def dev_stop(self) -> None:
        """Stop a running device."""

    def queue_intr_enable(self, queue: BlkdevQueue) -> None:
        """Enable interrupts on a queue.

        A queue whose interrupts are already on is left as it is; otherwise a
        driver without interrupt support raises ``ENOTSUP``.
        """
        if queue.intr_enabled:
            return
        raise _not_supported("enabling queue interrupts")

    def queue_intr_disable(self, queue: BlkdevQueue) -> None:
        """Disable interrupts on a queue.

        A queue whose interrupts are already off is left as it is; otherwise a
        driver without interrupt support raises ``ENOTSUP``.
        """
        if not queue.intr_enabled:
            return
        raise _not_supported("disabling queue interrupts")

    @abstractmethod
    def queue_unconfigure(self, queue: BlkdevQueue) -> None:
        """Release a queue."""

    @abstractmethod
    def dev_unconfigure(self) -> None:
        """Undo the device configuration."""

    @abstractmethod
    def submit_one(self, dev: Blkdev, queue: BlkdevQueue, req: Blkreq) -> int:
        """Queue one request; return status flags (STATUS_SUCCESS, STATUS_MORE)."""

    @abstractmethod
    def finish_reqs(self, dev: Blkdev, queue: BlkdevQueue) -> int:
        """Process the responses waiting on a queue."""


def status_test_set(status: int, flag: int) -> bool:
    """Return whether every bit of *flag* is set and *status* is not an error."""
    return (status & (flag | _INT_MIN)) == flag


def status_test_unset(status: int, flag: int) -> bool:
    """Return whether no bit of *flag* is set and *status* is not an error."""
    return (status & (flag | _INT_MIN)) == 0


def status_successful(status: int) -> bool:
    """Return whether *status* reports a successful submission."""
    return status_test_set(status, STATUS_SUCCESS)


def status_notready(status: int) -> bool:
    """Return whether *status* says the submission should be retried."""
    return status_test_unset(status, STATUS_SUCCESS)


def status_more(status: int) -> bool:
    """Return whether *status* reports success with room for another request."""
    return status_test_set(status, STATUS_SUCCESS | STATUS_MORE)