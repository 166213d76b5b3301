# g15render

An in-memory drawing surface for the 160×43 monochrome LCD found on
G15-style keyboards, plus a reader, writer and renderer for the G15
bitmap font format (`.fnt` files whose first bytes are `GFNT`).

The canvas keeps its pixels in `Canvas.buffer`, a 1048-byte `bytearray`
packed one bit per pixel, most significant bit first, row by row.

## Installation

```
pip install g15render
```

## Canvas

```python
from g15render.canvas import Canvas, Color

canvas = Canvas()
canvas.set_pixel(10, 5, Color.BLACK)
assert canvas.get_pixel(10, 5) == Color.BLACK

canvas.fill_rect(0, 0, 20, 10, Color.BLACK)   # inclusive box
canvas.clear(Color.WHITE)
canvas.reset()        # clears the buffer and the xor/reverse/cache modes
```

Pixels outside the display area are ignored when written and read back as
0 (white). With `mode_xor` set, each write is xor-ed with the pixel that is
already there. With `mode_reverse` set, the value written is inverted.
`mode_cache` is a flag kept for the application's own use; the canvas does
not act on it.

The module also defines the enums `Color` (`WHITE`, `BLACK`), `TextSize`
(`SMALL`, `MED`, `LARGE`, `HUGE`) and `Justify` (`LEFT`, `CENTER`, `RIGHT`).

## Fonts

```python
from g15render.canvas import Canvas, Color
from g15render.font import G15Font

font = G15Font.load("default-08.fnt")
print(font.numchars, font.text_width("Hello"))

canvas = Canvas()
font.render_string(canvas, "Hello", 0, 2, 10, Color.BLACK, False)
font.save("copy.fnt")
```

A `G15Font` holds `font_height`, `ascender_height`, `lineheight`,
`default_gap` and a `glyphs` dictionary mapping character codes (0–255) to
`Glyph` objects (`width`, `buffer`, `gap`). `G15Font.from_bytes` and
`G15Font.to_bytes` work on the raw file contents. Malformed data, unreadable
or unwritable files, and values that do not fit the format raise
`FontError`.

`render_glyph` draws one character and returns how far to advance;
characters missing from the font draw nothing and return 0. With
`paint_bg` true the glyph's cell is painted in the opposite colour first.
Text may be given as `str` (Latin-1) or `bytes`.

## Default fonts

`DefaultFontCache` loads the numbered default fonts (`G15/default-NN.fnt`)
from a font directory the first time each size is asked for, and keeps them
for later calls. Without an argument it uses `default_font_dir()`,
`/usr/local/share/g15tools/fonts`.

```python
from g15render.canvas import Canvas, Color, Justify, TextSize
from g15render.text import DefaultFontCache

fonts = DefaultFontCache("/path/to/fonts")
canvas = Canvas()
fonts.print_text(canvas, "12:34", 0, 10, TextSize.LARGE, Justify.CENTER, Color.BLACK, 0)
fonts.render_string(canvas, "status ok", 1, TextSize.MED, 0, 0)
fonts.render_character_small(canvas, 3, 0, "A", 0, 0)
```

The size selects the file `default-NN.fnt`; sizes are clamped to 0–39.
For sizes below `TextSize.HUGE` the text is drawn with its background
painted and shifted up and left by one pixel. `request` raises `FontError`
if the font file cannot be loaded. `render_character_large`, `_medium` and
`_small` place a single character on a column grid 8, 5 or 4 pixels wide.

## What this package does not do

It only draws into memory. It does not talk to a keyboard or display, so
sending `Canvas.buffer` to the device is up to the caller. Drawing is
limited to single pixels, filled rectangles and bitmap-font text: there are
no line, circle, bar or image routines, no TrueType font support, and no
command-line tool for converting fonts. No default font files are
included; they must be supplied in the font directory.