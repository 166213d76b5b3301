import pytest

from g15render.canvas import (
    BUFFER_LEN,
    LCD_HEIGHT,
    LCD_WIDTH,
    Canvas,
    Color,
    Justify,
    TextSize,
)


@pytest.fixture
def canvas():
    return Canvas()


def test_new_canvas_is_blank(canvas):
    assert len(canvas.buffer) == BUFFER_LEN
    assert not any(canvas.buffer)
    assert (canvas.mode_xor, canvas.mode_cache, canvas.mode_reverse) == (
        False,
        False,
        False,
    )


def test_enum_values_drive_canvas(canvas):
    assert [int(s) for s in TextSize] == [0, 1, 2, 3]
    assert [int(j) for j in Justify] == [0, 1, 2]
    canvas.set_pixel(4, 4, Color.BLACK)
    assert canvas.get_pixel(4, 4) == Color.BLACK == 1
    canvas.set_pixel(4, 4, Color.WHITE)
    assert canvas.get_pixel(4, 4) == Color.WHITE == 0
    canvas.clear(Color.BLACK)
    assert canvas.buffer[0] == 0xFF


def test_first_pixel_is_most_significant_bit(canvas):
    canvas.set_pixel(0, 0, Color.BLACK)
    assert canvas.buffer[0] == 0x80
    assert canvas.get_pixel(0, 0) == 1


def test_pixel_packing_is_row_major(canvas):
    canvas.set_pixel(0, 1, 1)
    index = LCD_WIDTH // 8
    assert canvas.buffer[index] == 0x80
    assert sum(1 for b in canvas.buffer if b) == 1


@pytest.mark.parametrize(
    "x,y", [(0, 0), (5, 3), (LCD_WIDTH - 1, LCD_HEIGHT - 1), (80, 21)]
)
def test_set_then_get_round_trip(canvas, x, y):
    canvas.set_pixel(x, y, 1)
    assert canvas.get_pixel(x, y) == 1
    canvas.set_pixel(x, y, 0)
    assert canvas.get_pixel(x, y) == 0
    assert not any(canvas.buffer)


@pytest.mark.parametrize(
    "x,y", [(-1, 0), (0, -1), (LCD_WIDTH, 0), (0, LCD_HEIGHT), (1000, 1000)]
)
def test_off_screen_is_ignored(canvas, x, y):
    canvas.set_pixel(x, y, 1)
    assert not any(canvas.buffer)
    assert canvas.get_pixel(x, y) == 0


def test_xor_mode_toggles(canvas):
    canvas.mode_xor = True
    canvas.set_pixel(3, 3, 1)
    assert canvas.get_pixel(3, 3) == 1
    canvas.set_pixel(3, 3, 1)
    assert canvas.get_pixel(3, 3) == 0


def test_reverse_mode_inverts(canvas):
    canvas.mode_reverse = True
    canvas.set_pixel(2, 2, 0)
    assert canvas.get_pixel(2, 2) == 1
    canvas.set_pixel(2, 2, 1)
    assert canvas.get_pixel(2, 2) == 0


def test_clear_black_and_white(canvas):
    canvas.clear(Color.BLACK)
    assert all(b == 0xFF for b in canvas.buffer)
    assert canvas.get_pixel(LCD_WIDTH - 1, LCD_HEIGHT - 1) == 1
    canvas.clear(Color.WHITE)
    assert not any(canvas.buffer)


def test_reset_clears_buffer_and_modes(canvas):
    canvas.clear(Color.BLACK)
    canvas.mode_xor = True
    canvas.mode_reverse = True
    canvas.mode_cache = True
    canvas.reset()
    assert not any(canvas.buffer)
    assert not (canvas.mode_xor or canvas.mode_reverse or canvas.mode_cache)
    assert len(canvas.buffer) == BUFFER_LEN


def test_fill_rect_is_inclusive(canvas):
    canvas.fill_rect(2, 3, 5, 7, Color.BLACK)
    set_pixels = {
        (x, y)
        for y in range(LCD_HEIGHT)
        for x in range(LCD_WIDTH)
        if canvas.get_pixel(x, y)
    }
    assert set_pixels == {(x, y) for x in range(2, 6) for y in range(3, 8)}


def test_fill_rect_accepts_swapped_corners(canvas):
    other = Canvas()
    canvas.fill_rect(10, 10, 4, 2, 1)
    other.fill_rect(4, 2, 10, 10, 1)
    assert canvas.buffer == other.buffer


def test_fill_rect_clips_off_screen(canvas):
    canvas.fill_rect(-5, -5, LCD_WIDTH + 5, LCD_HEIGHT + 5, 1)
    assert all(
        canvas.get_pixel(x, y) == 1
        for y in range(LCD_HEIGHT)
        for x in range(LCD_WIDTH)
    )