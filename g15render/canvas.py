"""Monochrome frame buffer for the 160x43 G15 LCD."""

from __future__ import annotations

from enum import IntEnum

BYTE_SIZE = 8
BUFFER_LEN = 1048
LCD_OFFSET = 32
LCD_HEIGHT = 43
LCD_WIDTH = 160
MAX_FACE = 5


class Color(IntEnum):
    """Pixel colours."""

    WHITE = 0
    BLACK = 1


class TextSize(IntEnum):
    """Standard text sizes of the default font."""

    SMALL = 0
    MED = 1
    LARGE = 2
    HUGE = 3


class Justify(IntEnum):
    """Horizontal text justification."""

    LEFT = 0
    CENTER = 1
    RIGHT = 2


def _locate(x: int, y: int) -> tuple[int, int] | None:
    """Return (byte index, bit mask) of a pixel, or None when off screen."""
    if not (0 <= x < LCD_WIDTH and 0 <= y < LCD_HEIGHT):
        return None
    offset = y * LCD_WIDTH + x
    return offset // BYTE_SIZE, 1 << (7 - offset % BYTE_SIZE)


class Canvas:
    """Pixel buffer with xor and reverse drawing modes.

    Pixels are packed row by row, eight to a byte, most significant bit first.
    """

    def __init__(self) -> None:
        self.buffer = bytearray(BUFFER_LEN)
        self.mode_xor = False
        self.mode_cache = False
        self.mode_reverse = False

    def get_pixel(self, x: int, y: int) -> int:
        """Return 1 if the pixel at (x, y) is set, else 0; off-screen is 0."""
        where = _locate(x, y)
        if where is None:
            return 0
        index, mask = where
        return 1 if self.buffer[index] & mask else 0

    def set_pixel(self, x: int, y: int, val: int) -> None:
        """Set the pixel at (x, y), honouring the xor and reverse modes.

        Off-screen coordinates are ignored.
        """
        where = _locate(x, y)
        if where is None:
            return
        index, mask = where
        value = int(val)
        if self.mode_xor:
            value ^= self.get_pixel(x, y)
        if self.mode_reverse:
            value = not value
        if value:
            self.buffer[index] |= mask
        else:
            self.buffer[index] &= ~mask & 0xFF

    def clear(self, color: int) -> None:
        """Fill the whole buffer with the given colour."""
        fill = 0xFF if color else 0x00
        self.buffer[:] = bytes([fill]) * BUFFER_LEN

    def reset(self) -> None:
        """Clear the buffer to white and switch every mode off."""
        self.buffer[:] = bytes(BUFFER_LEN)
        self.mode_cache = False
        self.mode_reverse = False
        self.mode_xor = False

    def fill_rect(self, x1: int, y1: int, x2: int, y2: int, color: int) -> None:
        """Set every pixel in the box bounded by (x1, y1) and (x2, y2), inclusive."""
        left, right = sorted((x1, x2))
        top, bottom = sorted((y1, y2))
        for y in range(top, bottom + 1):
            for x in range(left, right + 1):
                self.set_pixel(x, y, color)