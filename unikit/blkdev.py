"""Block devices: the device life cycle, queue handling, I/O and device registry."""

from __future__ import annotations

import errno
import logging
import threading
from typing import Iterator, Optional

from .blkdev_core import (
    MAX_NB_QUEUES,
    BlkdevCap,
    BlkdevConf,
    BlkdevError,
    BlkdevInfo,
    BlkdevOps,
    BlkdevQueue,
    BlkdevQueueConf,
    BlkdevQueueInfo,
    BlkdevState,
    EventHandler,
    status_successful,
)
from .blkreq import Blkreq, BlkreqOp

log = logging.getLogger(__name__)


class Blkdev:
    """A block device driven by a :class:`BlkdevOps` implementation.

    The device goes UNCONFIGURED -> CONFIGURED -> RUNNING and back; each
    operation checks that the device is in the state it needs and raises
    :class:`BlkdevError` with ``EINVAL`` otherwise.
    """

    def __init__(
        self, ops: BlkdevOps, capabilities: BlkdevCap, drv_name: str = ""
    ) -> None:
        self.ops = ops
        self.drv_name = drv_name
        self.id: Optional[int] = None
        self.state = BlkdevState.UNCONFIGURED
        self._capabilities = capabilities
        self._queues: list[Optional[BlkdevQueue]] = [None] * MAX_NB_QUEUES
        self._handlers = [EventHandler() for _ in range(MAX_NB_QUEUES)]

    @property
    def queues(self) -> tuple[Optional[BlkdevQueue], ...]:
        """The configured queue of each queue id, or None where there is none."""
        return tuple(self._queues)

    def _name(self) -> str:
        return f"blkdev{self.id if self.id is not None else '?'}"

    def _require_state(self, *states: BlkdevState) -> None:
        if self.state not in states:
            wanted = " or ".join(s.name for s in states)
            raise BlkdevError(
                errno.EINVAL,
                f"{self._name()} is {self.state.name}, operation needs {wanted}",
            )

    @staticmethod
    def _check_queue_id(queue_id: int) -> None:
        if not 0 <= queue_id < MAX_NB_QUEUES:
            raise IndexError(f"queue id {queue_id} outside 0..{MAX_NB_QUEUES - 1}")

    def _queue(self, queue_id: int) -> BlkdevQueue:
        self._check_queue_id(queue_id)
        queue = self._queues[queue_id]
        if queue is None:
            raise BlkdevError(
                errno.EINVAL, f"{self._name()}-q{queue_id} is not configured"
            )
        return queue

    def get_info(self) -> BlkdevInfo:
        """Ask the driver for the device capabilities, capped by the API limits."""
        info = self.ops.get_info()
        return BlkdevInfo(max_queues=min(MAX_NB_QUEUES, info.max_queues))

    def configure(self, conf: BlkdevConf) -> None:
        """Configure the device; also allowed again once it has been stopped."""
        self._require_state(BlkdevState.UNCONFIGURED, BlkdevState.CONFIGURED)
        info = self.get_info()
        if conf.nb_queues > info.max_queues:
            raise BlkdevError(
                errno.ENOMEM,
                f"{self._name()}: {conf.nb_queues} queues requested, "
                f"at most {info.max_queues} supported",
            )
        self.ops.dev_configure(conf)
        self.state = BlkdevState.CONFIGURED
        log.info("%s: configured interface", self._name())

    def queue_get_info(self, queue_id: int) -> BlkdevQueueInfo:
        """Return the descriptor limits of a queue."""
        self._check_queue_id(queue_id)
        return self.ops.queue_get_info(queue_id)

    def queue_configure(
        self, queue_id: int, nb_desc: int, queue_conf: BlkdevQueueConf
    ) -> BlkdevQueue:
        """Set up a queue with *nb_desc* descriptors and return it."""
        self._require_state(BlkdevState.CONFIGURED)
        self._check_queue_id(queue_id)
        if self._queues[queue_id] is not None:
            raise BlkdevError(
                errno.EBUSY, f"{self._name()}-q{queue_id} is already configured"
            )
        handler = self._handlers[queue_id]
        handler.callback = queue_conf.callback
        handler.cookie = queue_conf.callback_cookie
        try:
            queue = self.ops.queue_configure(queue_id, nb_desc, queue_conf)
        except BaseException:
            self._handlers[queue_id] = EventHandler()
            log.warning("%s-q%d: failed to configure", self._name(), queue_id)
            raise
        self._queues[queue_id] = queue
        log.info("%s: configured queue %d", self._name(), queue_id)
        return queue

    def start(self) -> None:
        """Start a configured device."""
        self._require_state(BlkdevState.CONFIGURED)
        self.ops.dev_start()
        self.state = BlkdevState.RUNNING
        log.info("%s: started interface", self._name())

    def capabilities(self) -> BlkdevCap:
        """Return the device geometry; the device must be running."""
        self._require_state(BlkdevState.RUNNING)
        return self._capabilities

    def queue_intr_enable(self, queue_id: int) -> None:
        """Enable interrupts on a queue."""
        queue = self._queue(queue_id)
        self.ops.queue_intr_enable(queue)
        queue.intr_enabled = True

    def queue_intr_disable(self, queue_id: int) -> None:
        """Disable interrupts on a queue."""
        queue = self._queue(queue_id)
        self.ops.queue_intr_disable(queue)
        queue.intr_enabled = False

    def queue_submit_one(self, queue_id: int, req: Blkreq) -> int:
        """Submit a request without blocking; return the driver's status flags."""
        self._require_state(BlkdevState.RUNNING)
        queue = self._queue(queue_id)
        return self.ops.submit_one(self, queue, req)

    def queue_finish_reqs(self, queue_id: int) -> int:
        """Let the driver process the responses waiting on a queue."""
        self._require_state(BlkdevState.RUNNING)
        queue = self._queue(queue_id)
        return self.ops.finish_reqs(self, queue)

    def queue_event(self, queue_id: int) -> bool:
        """Forward a queue event to its callback; return whether one ran."""
        self._check_queue_id(queue_id)
        return self._handlers[queue_id].fire(self, queue_id)

    def sync_io(
        self,
        queue_id: int,
        operation: BlkreqOp,
        start_sector: int,
        nb_sectors: int,
        buffer: Optional[bytearray | memoryview],
    ) -> Blkreq:
        """Submit a request and block until it is finished.

        The request must be completed from elsewhere (the driver itself, an
        interrupt handler or another thread calling :meth:`queue_finish_reqs`).
        Returns the finished request; a negative result raises BlkdevError.
        """
        self._require_state(BlkdevState.RUNNING)
        self._queue(queue_id)
        done = threading.Event()
        req = Blkreq(
            operation,
            start_sector,
            nb_sectors,
            buffer,
            callback=lambda _req, event: event.set(),
            cookie=done,
        )
        status = self.queue_submit_one(queue_id, req)
        if not status_successful(status):
            code = -status if status < 0 else errno.EAGAIN
            raise BlkdevError(code, f"{self._name()}-q{queue_id}: request not queued")
        done.wait()
        if req.result < 0:
            raise BlkdevError(-req.result, f"{self._name()}: {operation.name} failed")
        return req

    def sync_read(
        self,
        queue_id: int,
        sector: int,
        nb_sectors: int,
        buffer: bytearray | memoryview,
    ) -> Blkreq:
        """Read *nb_sectors* sectors starting at *sector* into *buffer*."""
        return self.sync_io(queue_id, BlkreqOp.READ, sector, nb_sectors, buffer)

    def sync_write(
        self,
        queue_id: int,
        sector: int,
        nb_sectors: int,
        buffer: bytearray | memoryview,
    ) -> Blkreq:
        """Write *nb_sectors* sectors starting at *sector* from *buffer*."""
        return self.sync_io(queue_id, BlkreqOp.WRITE, sector, nb_sectors, buffer)

    def stop(self) -> None:
        """Stop a running device, leaving it configured."""
        self._require_state(BlkdevState.RUNNING)
        log.info("trying to stop %s", self._name())
        self.ops.dev_stop()
        self.state = BlkdevState.CONFIGURED
        log.info("stopped %s", self._name())

    def queue_unconfigure(self, queue_id: int) -> None:
        """Release a queue of a stopped device."""
        self._require_state(BlkdevState.CONFIGURED)
        queue = self._queue(queue_id)
        self.ops.queue_unconfigure(queue)
        self._handlers[queue_id] = EventHandler()
        self._queues[queue_id] = None
        log.info("%s: released queue %d", self._name(), queue_id)

    def unconfigure(self) -> None:
        """Undo the configuration; every queue must have been released."""
        self._require_state(BlkdevState.CONFIGURED)
        busy = [qid for qid, q in enumerate(self._queues) if q is not None]
        if busy:
            raise BlkdevError(
                errno.EBUSY, f"{self._name()}: queues {busy} still configured"
            )
        self.ops.dev_unconfigure()
        self.state = BlkdevState.UNCONFIGURED
        log.info("unconfigured %s", self._name())

    def __repr__(self) -> str:
        return f"Blkdev(id={self.id}, drv_name={self.drv_name!r}, state={self.state.name})"


class BlkdevRegistry:
    """The list of registered block devices, looked up by id."""

    def __init__(self) -> None:
        self._devices: dict[int, Blkdev] = {}
        self._next_id = 0
        self._lock = threading.Lock()

    def register(self, dev: Blkdev) -> int:
        """Add a device found by a driver and return the id given to it."""
        with self._lock:
            if dev.id is not None:
                raise ValueError(f"{dev!r} is already registered")
            dev_id = self._next_id
            self._next_id += 1
            dev.id = dev_id
            dev.state = BlkdevState.UNCONFIGURED
            self._devices[dev_id] = dev
        log.info("registered blkdev%d: %s", dev_id, dev.drv_name)
        return dev_id

    def unregister(self, dev: Blkdev) -> None:
        """Remove an unconfigured device from the registry."""
        with self._lock:
            if dev.id is None or self._devices.get(dev.id) is not dev:
                raise KeyError(f"{dev!r} is not registered")
            if dev.state is not BlkdevState.UNCONFIGURED:
                raise BlkdevError(
                    errno.EINVAL, f"blkdev{dev.id} is {dev.state.name}, not UNCONFIGURED"
                )
            dev_id = dev.id
            del self._devices[dev_id]
            dev.id = None
            dev.state = BlkdevState.INVALID
        log.info("unregistered blkdev%d", dev_id)

    def get(self, dev_id: int) -> Optional[Blkdev]:
        """Return the device with *dev_id*, or None if there is none."""
        with self._lock:
            return self._devices.get(dev_id)

    def count(self) -> int:
        """Return the number of registered devices."""
        with self._lock:
            return len(self._devices)

    def __iter__(self) -> Iterator[Blkdev]:
        with self._lock:
            return iter(list(self._devices.values()))