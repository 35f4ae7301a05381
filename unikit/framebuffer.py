"""An in-memory BGRA framebuffer with clearing and line drawing."""

from __future__ import annotations

from enum import Enum

from .color import LIGHT_CYAN, Color

_BYTES_PER_PIXEL = 4


class Direction(Enum):
    """Orientation of a line drawn with :meth:`Framebuffer.draw_line`."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Framebuffer:
    """A width x height grid of BGRA pixels.

    Drawing changes the working buffer; :meth:`flush` publishes it to
    :attr:`presented`, which stands for what is shown on screen.
    """

    def __init__(self, width: int, height: int, background: Color = LIGHT_CYAN) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"resolution must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._buffer = bytearray(width * height * _BYTES_PER_PIXEL)
        self.presented = b""
        self.flush_count = 0
        self.clear(background)

    def resolution(self) -> tuple[int, int]:
        """Return (width, height) in pixels."""
        return self._width, self._height

    @property
    def data(self) -> bytes:
        """A copy of the working buffer."""
        return bytes(self._buffer)

    def pixel(self, x: int, y: int) -> tuple[Color, int]:
        """Return the colour and alpha stored at (x, y)."""
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"pixel ({x}, {y}) outside {self._width}x{self._height}")
        idx = (y * self._width + x) * _BYTES_PER_PIXEL
        blue, green, red, alpha = self._buffer[idx:idx + _BYTES_PER_PIXEL]
        return Color(red, green, blue), alpha

    def clear(self, color: Color) -> None:
        """Fill the whole buffer with an opaque colour and flush it."""
        self._buffer[:] = color.to_bgra(255) * (self._width * self._height)
        self.flush()

    def _fill_span(self, x: int, y: int, count: int, pixel: bytes) -> None:
        start = (y * self._width + x) * _BYTES_PER_PIXEL
        self._buffer[start:start + count * _BYTES_PER_PIXEL] = pixel * count

    def draw_line(
        self,
        direction: Direction,
        start_x: int,
        start_y: int,
        length: int,
        color: Color,
        alpha: int,
        line_width: int,
    ) -> None:
        """Draw a thick line, clipped at the right and bottom edges."""
        if min(start_x, start_y, length, line_width) < 0:
            raise ValueError("line coordinates and sizes must be non-negative")
        if start_x > self._width or start_y > self._height:
            raise ValueError(
                f"start ({start_x}, {start_y}) outside {self._width}x{self._height}"
            )
        pixel = color.to_bgra(alpha)
        room_x = self._width - start_x
        room_y = self._height - start_y
        if direction is Direction.HORIZONTAL:
            span = min(length, room_x)
            rows = min(line_width, room_y)
        elif direction is Direction.VERTICAL:
            span = min(line_width, room_x)
            rows = min(length, room_y)
        else:
            raise TypeError(f"unknown direction {direction!r}")
        if span == 0:
            return
        for y in range(start_y, start_y + rows):
            self._fill_span(start_x, y, span, pixel)

    def flush(self) -> None:
        """Publish the working buffer to :attr:`presented`."""
        self.presented = bytes(self._buffer)
        self.flush_count += 1