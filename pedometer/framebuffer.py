"""Monochrome page-organised frame buffer with drawing primitives."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import IntEnum
from itertools import pairwise

DEFAULT_WIDTH = 128
DEFAULT_HEIGHT = 64
CIRCLE_APPROXIMATION_SEGMENTS = 36
FIRST_CHAR = 32
LAST_CHAR = 126


class Color(IntEnum):
    """Pixel colour."""

    BLACK = 0
    WHITE = 1

    def inverted(self) -> "Color":
        return Color.WHITE if self is Color.BLACK else Color.BLACK


@dataclass(frozen=True)
class Font:
    """Bitmap font: one 16-bit row word per line, leftmost pixel in bit 15.

    ``data`` holds ``height`` rows for each printable character from space
    onwards; ``char_width`` gives proportional advances, or None for monospace.
    """

    width: int
    height: int
    data: Sequence[int]
    char_width: Sequence[int] | None = None


@dataclass(frozen=True)
class Vertex:
    """A point of a polyline."""

    x: int
    y: int


def _u8(value: int) -> int:
    return value & 0xFF


def _s8(value: int) -> int:
    value &= 0xFF
    return value - 0x100 if value >= 0x80 else value


def _deg_to_rad(degrees: float) -> float:
    return degrees * (3.14 / 180.0)


def _normalize_0_360(degrees: int) -> int:
    if degrees <= 360:
        return degrees
    return degrees % 360 or 360


class Framebuffer:
    """Pixel memory laid out in 8-row pages, one byte per column per page.

    Coordinates are unsigned 8-bit values; anything outside the screen is ignored.
    """

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> None:
        if not isinstance(width, int) or not 0 < width <= 256:
            raise ValueError(f"width must be between 1 and 256: {width!r}")
        if not isinstance(height, int) or not 0 < height <= 256 or height % 8:
            raise ValueError(f"height must be a multiple of 8 up to 256: {height!r}")
        self.width = width
        self.height = height
        self._buffer = bytearray(width * height // 8)
        self._cursor_x = 0
        self._cursor_y = 0

    @property
    def data(self) -> bytes:
        """A copy of the whole buffer."""
        return bytes(self._buffer)

    @property
    def pages(self) -> int:
        return self.height // 8

    @property
    def cursor(self) -> tuple[int, int]:
        return self._cursor_x, self._cursor_y

    def fill(self, color: Color | int) -> None:
        """Set every pixel to one colour."""
        value = 0x00 if Color(color) is Color.BLACK else 0xFF
        self._buffer[:] = bytes([value]) * len(self._buffer)

    def load(self, data: bytes | bytearray | Sequence[int]) -> None:
        """Copy raw bytes into the start of the buffer."""
        data = bytes(data)
        if len(data) > len(self._buffer):
            raise ValueError(
                f"data of {len(data)} bytes does not fit a {len(self._buffer)}-byte buffer"
            )
        self._buffer[: len(data)] = data

    def page(self, index: int) -> bytes:
        """Return the bytes of one 8-row page."""
        if not 0 <= index < self.pages:
            raise IndexError(f"page index out of range: {index!r}")
        start = index * self.width
        return bytes(self._buffer[start : start + self.width])

    def pixel(self, x: int, y: int) -> Color:
        """Return the colour of an on-screen pixel."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel off screen: ({x}, {y})")
        lit = self._buffer[x + (y // 8) * self.width] >> (y % 8) & 1
        return Color(lit)

    def draw_pixel(self, x: int, y: int, color: Color | int) -> None:
        """Set one pixel; coordinates are taken modulo 256."""
        x, y = _u8(x), _u8(y)
        if x >= self.width or y >= self.height:
            return
        index = x + (y // 8) * self.width
        bit = 1 << (y % 8)
        if Color(color) is Color.WHITE:
            self._buffer[index] |= bit
        else:
            self._buffer[index] &= ~bit & 0xFF

    def set_cursor(self, x: int, y: int) -> None:
        """Move the text cursor."""
        self._cursor_x, self._cursor_y = _u8(x), _u8(y)

    def write_char(self, ch: str, font: Font, color: Color | int) -> bool:
        """Draw one printable character at the cursor; False if it cannot be drawn."""
        if len(ch) != 1:
            raise ValueError(f"expected a single character: {ch!r}")
        code = ord(ch)
        if code < FIRST_CHAR or code > LAST_CHAR:
            return False
        if (
            self.width < self._cursor_x + font.width
            or self.height < self._cursor_y + font.height
        ):
            return False

        color = Color(color)
        background = color.inverted()
        base = (code - FIRST_CHAR) * font.height
        for i in range(font.height):
            row = font.data[base + i]
            for j in range(font.width):
                lit = (row << j) & 0x8000
                self.draw_pixel(
                    self._cursor_x + j, self._cursor_y + i, color if lit else background
                )

        if font.char_width is not None:
            advance = font.char_width[code - FIRST_CHAR]
        else:
            advance = font.width
        self._cursor_x = (self._cursor_x + advance) & 0xFFFF
        return True

    def write_string(self, text: str, font: Font, color: Color | int) -> str:
        """Draw text at the cursor; return what could not be drawn ("" on success)."""
        for pos, ch in enumerate(text):
            if not self.write_char(ch, font, color):
                return text[pos:]
        return ""

    def line(self, x1: int, y1: int, x2: int, y2: int, color: Color | int) -> None:
        """Draw a straight line with Bresenham's algorithm."""
        x1, y1, x2, y2 = _u8(x1), _u8(y1), _u8(x2), _u8(y2)
        delta_x = abs(x2 - x1)
        delta_y = abs(y2 - y1)
        sign_x = 1 if x1 < x2 else -1
        sign_y = 1 if y1 < y2 else -1
        error = delta_x - delta_y

        self.draw_pixel(x2, y2, color)
        while x1 != x2 or y1 != y2:
            self.draw_pixel(x1, y1, color)
            error2 = error * 2
            if error2 > -delta_y:
                error -= delta_y
                x1 += sign_x
            if error2 < delta_x:
                error += delta_x
                y1 += sign_y

    def polyline(self, vertices: Iterable[Vertex], color: Color | int) -> None:
        """Join consecutive vertices with lines."""
        for a, b in pairwise(vertices):
            self.line(a.x, a.y, b.x, b.y, color)

    @staticmethod
    def _arc_point(x: int, y: int, radius: int, degrees: float) -> tuple[int, int]:
        rad = _deg_to_rad(degrees)
        return (
            _u8(x + _s8(int(math.sin(rad) * radius))),
            _u8(y + _s8(int(math.cos(rad) * radius))),
        )

    def _arc_segments(self, x, y, radius, start_angle, sweep):
        x, y, radius = _u8(x), _u8(y), _u8(radius)
        loc_sweep = _normalize_0_360(start_angle * 0 + (sweep & 0xFFFF))
        count = (
            _normalize_0_360(start_angle & 0xFFFF) * CIRCLE_APPROXIMATION_SEGMENTS // 360
        )
        segments = loc_sweep * CIRCLE_APPROXIMATION_SEGMENTS // 360
        if segments == 0:
            return None
        step = loc_sweep / segments
        points = []
        while count < segments:
            p1 = self._arc_point(x, y, radius, count * step)
            count += 1
            end = count * step if count != segments else loc_sweep
            points.append((p1, self._arc_point(x, y, radius, end)))
        first = self._arc_point(
            x, y, radius,
            (_normalize_0_360(start_angle & 0xFFFF) * CIRCLE_APPROXIMATION_SEGMENTS // 360)
            * step,
        )
        return first, points

    def draw_arc(self, x, y, radius, start_angle, sweep, color) -> None:
        """Draw an arc of straight segments, angles in degrees.

        Arcs shorter than one segment (10 degrees) draw nothing.
        """
        arc = self._arc_segments(x, y, radius, start_angle, sweep)
        if arc is None:
            return
        for (x1, y1), (x2, y2) in arc[1]:
            self.line(x1, y1, x2, y2, color)

    def draw_arc_with_radius_line(self, x, y, radius, start_angle, sweep, color) -> None:
        """Draw an arc plus the radii to its first and last points."""
        arc = self._arc_segments(x, y, radius, start_angle, sweep)
        if arc is None:
            return
        first, segments = arc
        last = (0, 0)
        for (x1, y1), (x2, y2) in segments:
            self.line(x1, y1, x2, y2, color)
            last = (x2, y2)
        self.line(x, y, first[0], first[1], color)
        self.line(x, y, last[0], last[1], color)

    def _circle_steps(self, r: int):
        """Yield the (x, y) offsets of Bresenham's circle, x from -r up to 0."""
        x = -r
        y = 0
        err = 2 - 2 * r
        while True:
            yield x, y
            e2 = err
            if e2 <= y:
                y += 1
                err += y * 2 + 1
                if -x == y and e2 <= x:
                    e2 = 0
            if e2 > x:
                x += 1
                err += x * 2 + 1
            if x > 0:
                return

    def draw_circle(self, x: int, y: int, r: int, color: Color | int) -> None:
        """Draw a circle outline centred on (x, y)."""
        x, y, r = _u8(x), _u8(y), _u8(r)
        if x >= self.width or y >= self.height:
            return
        for dx, dy in self._circle_steps(r):
            self.draw_pixel(x - dx, y + dy, color)
            self.draw_pixel(x + dx, y + dy, color)
            self.draw_pixel(x + dx, y - dy, color)
            self.draw_pixel(x - dx, y - dy, color)

    def fill_circle(self, x: int, y: int, r: int, color: Color | int) -> None:
        """Draw a filled circle centred on (x, y)."""
        x, y, r = _u8(x), _u8(y), _u8(r)
        if x >= self.width or y >= self.height:
            return
        for dx, dy in self._circle_steps(r):
            for py in range(max(y - dy, 0), min(y + dy, 0xFF) + 1):
                for px in range(max(x + dx, 0), min(x - dx, 0xFF) + 1):
                    self.draw_pixel(px, py, color)

    def draw_rectangle(self, x1: int, y1: int, x2: int, y2: int, color: Color | int) -> None:
        """Draw a rectangle outline."""
        self.line(x1, y1, x2, y1, color)
        self.line(x2, y1, x2, y2, color)
        self.line(x2, y2, x1, y2, color)
        self.line(x1, y2, x1, y1, color)

    def fill_rectangle(self, x1: int, y1: int, x2: int, y2: int, color: Color | int) -> None:
        """Fill a rectangle, corners in either order, clipped to the screen."""
        x_start, x_end = sorted((_u8(x1), _u8(x2)))
        y_start, y_end = sorted((_u8(y1), _u8(y2)))
        for py in range(y_start, min(y_end, self.height - 1) + 1):
            for px in range(x_start, min(x_end, self.width - 1) + 1):
                self.draw_pixel(px, py, color)

    def invert_rectangle(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """Invert every pixel of a rectangle, borders included."""
        x1, y1, x2, y2 = _u8(x1), _u8(y1), _u8(x2), _u8(y2)
        if x2 >= self.width or y2 >= self.height:
            raise ValueError(f"rectangle corner off screen: ({x2}, {y2})")
        if x1 > x2 or y1 > y2:
            raise ValueError("first corner must be the top-left corner")
        width = self.width
        top_mask = (0xFF << (y1 % 8)) & 0xFF
        bottom_mask = 0xFF >> (7 - (y2 % 8))
        if y1 // 8 != y2 // 8:
            for x in range(x1, x2 + 1):
                self._buffer[x + (y1 // 8) * width] ^= top_mask
                for i in range(x + (y1 // 8 + 1) * width, x + (y2 // 8) * width, width):
                    self._buffer[i] ^= 0xFF
                self._buffer[x + (y2 // 8) * width] ^= bottom_mask
        else:
            mask = top_mask & bottom_mask
            for i in range(x1 + (y1 // 8) * width, x2 + (y2 // 8) * width + 1):
                self._buffer[i] ^= mask

    def draw_bitmap(
        self,
        x: int,
        y: int,
        bitmap: bytes | Sequence[int],
        w: int,
        h: int,
        color: Color | int,
    ) -> None:
        """Draw the set bits of a row-major, byte-padded, MSB-first bitmap."""
        x, y, w, h = _u8(x), _u8(y), _u8(w), _u8(h)
        if x >= self.width or y >= self.height:
            return
        byte_width = (w + 7) // 8
        for j in range(h):
            byte = 0
            for i in range(w):
                if i & 7:
                    byte = (byte << 1) & 0xFF
                else:
                    byte = bitmap[j * byte_width + i // 8]
                if byte & 0x80:
                    self.draw_pixel(x + i, y + j, color)