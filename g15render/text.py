"""Text output with the default G15 fonts, loaded on demand by size."""

from __future__ import annotations

from pathlib import Path

from g15render.canvas import LCD_WIDTH, Canvas, Color, Justify, TextSize
from g15render.font import G15Font, Text

_PREFIX = "/usr/local"
_MAX_SIZE = 39


def default_font_dir() -> Path:
    """Directory where the default G15 fonts are installed."""
    return Path(_PREFIX) / "share" / "g15tools" / "fonts"


def _clamp_size(size: int) -> int:
    return max(0, min(_MAX_SIZE, size))


class DefaultFontCache:
    """Loads the default fonts ``G15/default-NN.fnt`` once each and draws text with them."""

    def __init__(self, font_dir: str | Path | None = None) -> None:
        self.font_dir = Path(font_dir) if font_dir is not None else default_font_dir()
        self._fonts: dict[int, G15Font] = {}

    def font_path(self, size: int) -> Path:
        """Path of the default font for ``size``, clamped to 0..39."""
        size = _clamp_size(size)
        return self.font_dir / "G15" / f"default-{size:02d}.fnt"

    def request(self, size: int) -> G15Font:
        """Return the default font at ``size``, loading it if needed.

        Raises FontError when the font file cannot be loaded.
        """
        size = _clamp_size(size)
        font = self._fonts.get(size)
        if font is None:
            font = G15Font.load(self.font_path(size))
            self._fonts[size] = font
        return font

    def print_text(
        self,
        canvas: Canvas,
        text: Text,
        x: int,
        y: int,
        size: int,
        center: int,
        colour: int,
        row: int,
    ) -> None:
        """Draw ``text`` in the default font, left, centred or right justified."""
        font = self.request(size)
        paint_bg = size < TextSize.HUGE
        if paint_bg:
            x -= 1
            y -= 1
        if center == Justify.LEFT:
            font.render_string(canvas, text, row, x, y, colour, paint_bg)
        elif center == Justify.CENTER:
            width = font.text_width(text)
            font.render_string(
                canvas, text, row, LCD_WIDTH // 2 - width // 2, y, colour, paint_bg
            )
        elif center == Justify.RIGHT:
            width = font.text_width(text)
            font.render_string(canvas, text, row, LCD_WIDTH - width, y, colour, paint_bg)

    def _render_character(
        self,
        canvas: Canvas,
        col: int,
        row: int,
        character: int | str,
        sx: int,
        sy: int,
        cell: int,
        size: int,
    ) -> None:
        text = bytes([character]) if isinstance(character, int) else character
        self.print_text(
            canvas, text, col * cell + sx, sy, size, Justify.LEFT, Color.BLACK, row
        )

    def render_character_large(
        self, canvas: Canvas, col: int, row: int, character: int | str, sx: int, sy: int
    ) -> None:
        """Draw one character in the large font in an 8-pixel column grid."""
        self._render_character(canvas, col, row, character, sx, sy, 8, TextSize.LARGE)

    def render_character_medium(
        self, canvas: Canvas, col: int, row: int, character: int | str, sx: int, sy: int
    ) -> None:
        """Draw one character in the medium font in a 5-pixel column grid."""
        self._render_character(canvas, col, row, character, sx, sy, 5, TextSize.MED)

    def render_character_small(
        self, canvas: Canvas, col: int, row: int, character: int | str, sx: int, sy: int
    ) -> None:
        """Draw one character in the small font in a 4-pixel column grid."""
        self._render_character(canvas, col, row, character, sx, sy, 4, TextSize.SMALL)

    def render_string(
        self, canvas: Canvas, text: Text, row: int, size: int, sx: int, sy: int
    ) -> None:
        """Draw ``text`` left justified in black at the given size."""
        self.print_text(canvas, text, sx, sy, size, Justify.LEFT, Color.BLACK, row)