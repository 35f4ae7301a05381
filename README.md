# unikit

Building blocks in the style of a small library operating system, in plain
Python with no third-party dependencies.

## Modules

- `unikit.color`: the frozen `Color` dataclass (`red`, `green`, `blue`, each
  0..255) with `to_bgra(alpha)`, and the named web colours as module
  constants (`LIGHT_CYAN`, `RED`, `WHITE` and the rest).
- `unikit.framebuffer`: `Framebuffer(width, height, background)`, an
  in-memory grid of BGRA pixels. `clear(color)` fills it with an opaque
  colour. `draw_line(direction, start_x, start_y, length, color, alpha,
  line_width)` draws a `Direction.HORIZONTAL` or `Direction.VERTICAL` line,
  clipped at the right and bottom edges. `pixel(x, y)` returns
  `(Color, alpha)`. `flush()` copies the working buffer to `presented` and
  increments `flush_count`. `clear` flushes too.
- `unikit.locks`: `Mutex`, a recursive mutex owned by the thread that locked
  it. It has `lock`, `try_lock`, `lock_for(duration)`, `is_locked` and
  `unlock`, and can be used in a `with` block. `Semaphore(count)` is a
  counting semaphore with `wait`, `try_wait`, `wait_for(duration)`, `signal`
  and `count`. A duration is a number of seconds or a `datetime.timedelta`.
- `unikit.mbox`: `Mbox(size)`, a bounded FIFO mailbox. It offers blocking
  `post`/`recv`, non-blocking `post_try`/`recv_try` and timed
  `post_to`/`recv_to`. A non-blocking or timed call that cannot complete
  raises `MboxError`, an `OSError` with `errno.ENOBUFS`.
- `unikit.netdev`: the network device interface:
  - `Netdev(ops, drv_name)` keeps per-queue RX handlers, set with
    `set_rx_handler(queue_id, callback, cookie)` and fired with
    `rx_event(queue_id)`.
  - The abstract `Operations` driver interface.
  - Records: `Info`, `QueueInfo`, `Conf`, `RxqueueConf`, `TxqueueConf`,
    `Einfo`, `EventHandler` and `Hwaddr`.
  - The enums `State` and `EinfoType`.
  - `Ipv4Addr`, which parses with `Ipv4Addr.parse("10.0.0.1")` and prints
    in dotted-quad form.
  - Ethernet size constants and `rxintr_supported(feature)`.
- `unikit.blkreq`: `Blkreq`, a block request carrying a `BlkreqOp` (`READ`,
  `WRITE`, `FFLUSH`). Call `finish(result)` to mark it done and run its
  callback, and `is_done()` to check whether it has finished.
- `unikit.blkdev_core`:
  - Block device records: `BlkdevConf`, `BlkdevInfo`, `BlkdevQueueInfo`,
    `BlkdevQueueConf`, `BlkdevCap` and `BlkdevQueue`.
  - `BlkdevState` and `BlkdevError`.
  - The abstract `BlkdevOps` driver interface.
  - The submit-status helpers `status_test_set`, `status_test_unset`,
    `status_successful`, `status_notready` and `status_more`.
- `unikit.blkdev`:
  - `Blkdev(ops, capabilities, drv_name)` runs through the device life cycle:
    `configure`, `queue_configure`, `start`, `queue_submit_one`,
    `queue_finish_reqs`, `stop`, `queue_unconfigure` and `unconfigure`.
  - `sync_io`, `sync_read` and `sync_write` submit a request and block until
    it finishes.
  - `BlkdevRegistry` hands out device ids (`register`, `unregister`, `get`,
    `count`).
  - Calling an operation in the wrong state, or a driver failure, raises
    `BlkdevError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from unikit.color import Color
from unikit.framebuffer import Direction, Framebuffer
from unikit.mbox import Mbox, MboxError

fb = Framebuffer(64, 32, Color(224, 255, 255))
fb.draw_line(Direction.HORIZONTAL, 0, 4, 20, Color(255, 0, 0), 255, 2)
print(fb.pixel(3, 4))   # (Color(red=255, green=0, blue=0), 255)

box = Mbox(2)
box.post("hello")
print(box.recv())       # hello
try:
    box.recv_try()
except MboxError:
    print("mailbox is empty")
```

## What it does not do

- The framebuffer lives in memory only. Nothing is drawn on a real screen,
  and there is no text or font rendering.
- There are no device drivers. Network and block devices do work only
  through an `Operations` or `BlkdevOps` implementation that you supply.
- The network device API has no packet transmit or receive, and no
  registry of network devices.
- There is no command-line program.