import math

import pytest

from pedometer.framebuffer import Color, Font, Framebuffer, Vertex


def lit(fb):
    return {
        (x, y)
        for y in range(fb.height)
        for x in range(fb.width)
        if fb.pixel(x, y) is Color.WHITE
    }


def make_font(char_width=None):
    data = [0] * (95 * 2)
    # '!' is the second printable character: rows at indices 2 and 3.
    data[2] = 0xA000
    data[3] = 0x4000
    return Font(width=3, height=2, data=data, char_width=char_width)


def test_default_size():
    fb = Framebuffer()
    assert (fb.width, fb.height) == (128, 64)
    assert len(fb.data) == fb.width * fb.height // 8


def test_bad_height_rejected():
    with pytest.raises(ValueError):
        Framebuffer(128, 60)


def test_fill_white_and_black():
    fb = Framebuffer()
    fb.fill(Color.WHITE)
    assert set(fb.data) == {0xFF}
    fb.fill(Color.BLACK)
    assert set(fb.data) == {0}


def test_draw_pixel_sets_and_clears():
    fb = Framebuffer()
    fb.draw_pixel(5, 9, Color.WHITE)
    assert lit(fb) == {(5, 9)}
    assert fb.page(1)[5] == 0x02
    fb.draw_pixel(5, 9, Color.BLACK)
    assert lit(fb) == set()


def test_draw_pixel_off_screen_ignored():
    fb = Framebuffer()
    fb.draw_pixel(200, 10, Color.WHITE)
    fb.draw_pixel(10, 100, Color.WHITE)
    assert set(fb.data) == {0}


def test_load_and_page_round_trip():
    fb = Framebuffer()
    page = bytes(range(fb.width))
    fb.load(page)
    assert fb.page(0) == page
    assert fb.page(1) == bytes(fb.width)


def test_load_too_large():
    fb = Framebuffer()
    with pytest.raises(ValueError):
        fb.load(bytes(len(fb.data) + 1))


def test_page_out_of_range():
    fb = Framebuffer()
    with pytest.raises(IndexError):
        fb.page(fb.pages)


def test_horizontal_line():
    fb = Framebuffer()
    fb.line(2, 3, 6, 3, Color.WHITE)
    assert lit(fb) == {(x, 3) for x in range(2, 7)}


def test_diagonal_line():
    fb = Framebuffer()
    fb.line(0, 0, 5, 5, Color.WHITE)
    assert lit(fb) == {(i, i) for i in range(6)}


def test_polyline_is_union_of_lines():
    vertices = [Vertex(0, 0), Vertex(10, 0), Vertex(10, 7)]
    fb = Framebuffer()
    fb.polyline(vertices, Color.WHITE)
    expected = Framebuffer()
    expected.line(0, 0, 10, 0, Color.WHITE)
    expected.line(10, 0, 10, 7, Color.WHITE)
    assert fb.data == expected.data


def test_draw_rectangle_outline():
    fb = Framebuffer()
    fb.draw_rectangle(2, 2, 8, 6, Color.WHITE)
    pixels = lit(fb)
    assert {(2, 2), (8, 2), (2, 6), (8, 6)} <= pixels
    assert (5, 4) not in pixels


def test_fill_rectangle_either_corner_order():
    a = Framebuffer()
    a.fill_rectangle(3, 4, 9, 12, Color.WHITE)
    b = Framebuffer()
    b.fill_rectangle(9, 12, 3, 4, Color.WHITE)
    assert a.data == b.data
    assert lit(a) == {(x, y) for x in range(3, 10) for y in range(4, 13)}


def test_fill_rectangle_clipped():
    fb = Framebuffer()
    fb.fill_rectangle(120, 60, 200, 200, Color.WHITE)
    assert lit(fb) == {(x, y) for x in range(120, fb.width) for y in range(60, fb.height)}


@pytest.mark.parametrize("rect", [(1, 2, 6, 5), (4, 3, 20, 30), (0, 0, 127, 63)])
def test_invert_rectangle_matches_fill_and_is_involution(rect):
    fb = Framebuffer()
    fb.invert_rectangle(*rect)
    expected = Framebuffer()
    expected.fill_rectangle(*rect, Color.WHITE)
    assert fb.data == expected.data
    fb.invert_rectangle(*rect)
    assert set(fb.data) == {0}


def test_invert_rectangle_errors():
    fb = Framebuffer()
    with pytest.raises(ValueError):
        fb.invert_rectangle(0, 0, fb.width, 5)
    with pytest.raises(ValueError):
        fb.invert_rectangle(10, 0, 5, 5)


def test_draw_circle_on_radius():
    fb = Framebuffer()
    fb.draw_circle(32, 32, 5, Color.WHITE)
    pixels = lit(fb)
    assert {(37, 32), (27, 32), (32, 37), (32, 27)} <= pixels
    for x, y in pixels:
        assert abs(math.hypot(x - 32, y - 32) - 5) < 1
        assert (64 - x, y) in pixels


def test_fill_circle_contains_outline():
    outline = Framebuffer()
    outline.draw_circle(40, 30, 6, Color.WHITE)
    filled = Framebuffer()
    filled.fill_circle(40, 30, 6, Color.WHITE)
    pixels = lit(filled)
    assert lit(outline) <= pixels
    assert (40, 30) in pixels
    for x, y in pixels:
        assert math.hypot(x - 40, y - 30) <= 6.5


def test_fill_circle_at_corner():
    fb = Framebuffer()
    fb.fill_circle(0, 0, 3, Color.WHITE)
    pixels = lit(fb)
    assert (0, 0) in pixels
    assert all(x <= 3 and y <= 3 for x, y in pixels)


def test_draw_arc_full_circle_near_radius():
    fb = Framebuffer()
    fb.draw_arc(60, 30, 20, 0, 360, Color.WHITE)
    pixels = lit(fb)
    assert pixels
    for x, y in pixels:
        assert abs(math.hypot(x - 60, y - 30) - 20) <= 2


def test_short_arc_draws_nothing():
    fb = Framebuffer()
    fb.draw_arc(60, 30, 20, 0, 5, Color.WHITE)
    fb.draw_arc_with_radius_line(60, 30, 20, 0, 5, Color.WHITE)
    assert set(fb.data) == {0}


def test_arc_with_radius_line_reaches_centre():
    fb = Framebuffer()
    fb.draw_arc_with_radius_line(60, 30, 20, 0, 90, Color.WHITE)
    assert (60, 30) in lit(fb)


def test_write_char_draws_glyph_and_advances():
    fb = Framebuffer()
    font = make_font()
    assert fb.write_char("!", font, Color.WHITE)
    assert lit(fb) == {(0, 0), (2, 0), (1, 1)}
    assert fb.cursor == (font.width, 0)


def test_write_char_black_inverts_background():
    fb = Framebuffer()
    fb.write_char("!", make_font(), Color.BLACK)
    assert lit(fb) == {(1, 0), (0, 1), (2, 1)}


def test_write_char_proportional_advance():
    widths = [1] * 95
    widths[1] = 7
    fb = Framebuffer()
    fb.write_char("!", make_font(widths), Color.WHITE)
    assert fb.cursor == (7, 0)


def test_write_char_rejects_unprintable_and_overflow():
    fb = Framebuffer()
    font = make_font()
    assert not fb.write_char("\n", font, Color.WHITE)
    fb.set_cursor(fb.width - 2, 0)
    assert not fb.write_char("!", font, Color.WHITE)
    assert set(fb.data) == {0}


def test_write_string_returns_unwritten_rest():
    fb = Framebuffer()
    font = make_font()
    assert fb.write_string("!!", font, Color.WHITE) == ""
    fb.set_cursor(fb.width - 4, 0)
    assert fb.write_string("!!!", font, Color.WHITE) == "!!"


def test_draw_bitmap_set_bits_only():
    fb = Framebuffer()
    fb.fill(Color.WHITE)
    fb.draw_bitmap(10, 20, bytes([0b10100000, 0b01000000]), 3, 2, Color.BLACK)
    assert fb.pixel(10, 20) is Color.BLACK
    assert fb.pixel(11, 20) is Color.WHITE
    assert fb.pixel(12, 20) is Color.BLACK
    assert fb.pixel(11, 21) is Color.BLACK
    assert fb.pixel(10, 21) is Color.WHITE


def test_pixel_off_screen_raises():
    fb = Framebuffer()
    with pytest.raises(IndexError):
        fb.pixel(fb.width, 0)