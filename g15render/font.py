"""Bitmap fonts in the G15 ``GFNT`` file format and rendering them on a canvas."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from g15render.canvas import Canvas

MAGIC = b"GFNT"
FONT_HEADER_SIZE = 15
CHAR_HEADER_SIZE = 4
MAX_GLYPH = 256
SPACE = 32

_FONT_HEADER = struct.Struct("<4s5HB")
_CHAR_HEADER = struct.Struct("<2H")

Text = Union[str, bytes, bytearray]


class FontError(Exception):
    """Raised when a font cannot be read, parsed or written."""


def _codes(text: Text) -> bytes:
    """Return the character codes of a string as bytes."""
    if isinstance(text, (bytes, bytearray)):
        return bytes(text)
    return text.encode("latin-1")


def _code(character: int | str) -> int:
    """Return the code of a single character given as an int or a string."""
    if isinstance(character, int):
        code = character
    else:
        encoded = _codes(character)
        if len(encoded) != 1:
            raise ValueError("expected a single character")
        code = encoded[0]
    if not 0 <= code < MAX_GLYPH:
        raise ValueError(f"character code {code} out of range")
    return code


def _row_bytes(width: int) -> int:
    return (width + 7) // 8


@dataclass
class Glyph:
    """One character bitmap: rows of ``(width + 7) // 8`` bytes, MSB first."""

    width: int
    buffer: bytes
    gap: int = 0


@dataclass
class G15Font:
    """A single-size bitmap font; ``glyphs`` holds the active characters by code."""

    font_height: int = 0
    ascender_height: int = 0
    lineheight: int = 0
    default_gap: int = 0
    glyphs: dict[int, Glyph] = field(default_factory=dict)

    @property
    def numchars(self) -> int:
        """Number of active glyphs."""
        return len(self.glyphs)

    def _glyph_size(self, width: int) -> int:
        return self.font_height * _row_bytes(width)

    @classmethod
    def from_bytes(cls, data: bytes) -> G15Font:
        """Parse a font from the contents of a ``GFNT`` file."""
        if len(data) < FONT_HEADER_SIZE:
            raise FontError("truncated font header")
        magic, height, ascender, lineheight, _features, numchars, gap = (
            _FONT_HEADER.unpack_from(data, 0)
        )
        if magic != MAGIC:
            raise FontError("not a G15 font file")
        font = cls(
            font_height=height,
            ascender_height=ascender,
            lineheight=lineheight,
            default_gap=gap,
        )
        pos = FONT_HEADER_SIZE
        for _ in range(numchars):
            if pos + CHAR_HEADER_SIZE > len(data):
                raise FontError("truncated glyph header")
            code, width = _CHAR_HEADER.unpack_from(data, pos)
            pos += CHAR_HEADER_SIZE
            if code >= MAX_GLYPH:
                raise FontError(f"glyph code {code} out of range")
            width &= 0xFF
            size = font._glyph_size(width)
            chunk = data[pos:pos + size]
            if len(chunk) < size:
                raise FontError(f"truncated bitmap for glyph {code}")
            pos += size
            font.glyphs[code] = Glyph(width=width, buffer=bytes(chunk))
        return font

    def to_bytes(self) -> bytes:
        """Serialise the font to the ``GFNT`` file format."""
        try:
            parts = [
                _FONT_HEADER.pack(
                    MAGIC,
                    self.font_height,
                    self.ascender_height,
                    self.lineheight,
                    0,
                    self.numchars,
                    self.default_gap,
                )
            ]
            for code in sorted(self.glyphs):
                glyph = self.glyphs[code]
                if not 0 <= code < MAX_GLYPH:
                    raise FontError(f"glyph code {code} out of range")
                if not 0 <= glyph.width < 256:
                    raise FontError(f"glyph {code} width {glyph.width} out of range")
                size = self._glyph_size(glyph.width)
                if len(glyph.buffer) != size:
                    raise FontError(
                        f"glyph {code} has {len(glyph.buffer)} bytes, expected {size}"
                    )
                parts.append(_CHAR_HEADER.pack(code, glyph.width))
                parts.append(bytes(glyph.buffer))
        except struct.error as exc:
            raise FontError(f"font header value out of range: {exc}") from exc
        return b"".join(parts)

    @classmethod
    def load(cls, path: str | Path) -> G15Font:
        """Read a font file."""
        try:
            data = Path(path).read_bytes()
        except OSError as exc:
            raise FontError(f"cannot read font {path}: {exc}") from exc
        return cls.from_bytes(data)

    def save(self, path: str | Path) -> None:
        """Write the font to a file."""
        data = self.to_bytes()
        try:
            Path(path).write_bytes(data)
        except OSError as exc:
            raise FontError(f"cannot write font {path}: {exc}") from exc

    def text_width(self, text: Text) -> int:
        """Width in pixels of ``text`` when rendered in this font."""
        total = 0
        for code in _codes(text):
            glyph = self.glyphs.get(code)
            if glyph is None:
                total += self.default_gap
                continue
            gap = 0 if code == SPACE else glyph.gap
            total += glyph.width + gap + self.default_gap
        return total

    def render_glyph(
        self,
        canvas: Canvas,
        character: int | str,
        x: int,
        y: int,
        colour: int,
        paint_bg: bool,
    ) -> int:
        """Draw one glyph and return the advance in pixels (0 if it is absent)."""
        code = _code(character)
        glyph = self.glyphs.get(code)
        if glyph is None:
            return 0
        top = y - (self.font_height - self.ascender_height - 1)
        background = colour ^ 1
        if paint_bg:
            canvas.fill_rect(
                x,
                top - 1,
                x + glyph.width + self.default_gap,
                top + self.lineheight,
                background,
            )
        stride = _row_bytes(glyph.width)
        for row in range(self.font_height):
            bits = glyph.buffer[row * stride:(row + 1) * stride]
            for col in range(glyph.width):
                if bits[col // 8] & (0x80 >> (col % 8)):
                    canvas.set_pixel(x + col + 1, top + row, colour)
                elif paint_bg:
                    canvas.set_pixel(x + col + 1, top + row, background)
        if code == SPACE:
            return glyph.width
        return glyph.width + self.default_gap

    def render_string(
        self,
        canvas: Canvas,
        text: Text,
        row: int,
        sx: int,
        sy: int,
        colour: int,
        paint_bg: bool,
    ) -> None:
        """Draw ``text`` starting at (sx, sy), moved down by ``row`` lines."""
        sy += self.lineheight * row
        advance = 0
        for code in _codes(text):
            sx += advance
            advance = self.render_glyph(canvas, code, sx, sy, colour, paint_bg)