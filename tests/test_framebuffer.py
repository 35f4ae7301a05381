import pytest

from unikit.color import BLUE, LIGHT_CYAN, RED, Color
from unikit.framebuffer import Direction, Framebuffer


@pytest.fixture
def fb():
    return Framebuffer(10, 5)


def test_resolution(fb):
    assert fb.resolution() == (10, 5)


def test_initial_background_is_light_cyan_opaque(fb):
    assert fb.pixel(0, 0) == (LIGHT_CYAN, 255)
    assert fb.pixel(9, 4) == (LIGHT_CYAN, 255)
    assert fb.presented == fb.data
    assert fb.flush_count == 1


def test_custom_background():
    frame = Framebuffer(3, 2, Color(7, 8, 9))
    assert frame.pixel(2, 1) == (Color(7, 8, 9), 255)


def test_clear_fills_and_flushes(fb):
    fb.clear(RED)
    assert all(fb.pixel(x, y) == (RED, 255) for x in range(10) for y in range(5))
    assert fb.presented == RED.to_bgra(255) * 50
    assert fb.flush_count == 2


def test_memory_layout_is_bgra(fb):
    fb.clear(RED)
    assert fb.data[0:4] == RED.to_bgra(255)


def test_horizontal_line_clipped_at_right_edge(fb):
    fb.draw_line(Direction.HORIZONTAL, 8, 1, 5, BLUE, 100, 1)
    assert fb.pixel(8, 1) == (BLUE, 100)
    assert fb.pixel(9, 1) == (BLUE, 100)
    assert fb.pixel(7, 1) == (LIGHT_CYAN, 255)
    assert fb.pixel(8, 0) == (LIGHT_CYAN, 255)
    assert fb.pixel(8, 2) == (LIGHT_CYAN, 255)


def test_horizontal_line_thickness_clipped_at_bottom(fb):
    fb.draw_line(Direction.HORIZONTAL, 0, 3, 2, RED, 255, 10)
    assert fb.pixel(1, 3) == (RED, 255)
    assert fb.pixel(1, 4) == (RED, 255)
    assert fb.pixel(2, 4) == (LIGHT_CYAN, 255)


def test_vertical_line(fb):
    fb.draw_line(Direction.VERTICAL, 2, 1, 3, RED, 255, 2)
    painted = {(x, y) for x in range(10) for y in range(5) if fb.pixel(x, y)[0] == RED}
    assert painted == {(x, y) for x in (2, 3) for y in (1, 2, 3)}


def test_drawing_does_not_flush(fb):
    before = fb.presented
    fb.draw_line(Direction.VERTICAL, 0, 0, 5, RED, 255, 1)
    assert fb.presented == before
    fb.flush()
    assert fb.presented == fb.data
    assert fb.presented != before


def test_line_at_edge_draws_nothing(fb):
    before = fb.data
    fb.draw_line(Direction.HORIZONTAL, 10, 0, 4, RED, 255, 1)
    assert fb.data == before


def test_start_outside_raises(fb):
    with pytest.raises(ValueError):
        fb.draw_line(Direction.HORIZONTAL, 11, 0, 1, RED, 255, 1)
    with pytest.raises(ValueError):
        fb.draw_line(Direction.VERTICAL, 0, 6, 1, RED, 255, 1)


def test_pixel_out_of_range(fb):
    with pytest.raises(IndexError):
        fb.pixel(10, 0)
    with pytest.raises(IndexError):
        fb.pixel(0, -1)


def test_invalid_resolution():
    with pytest.raises(ValueError):
        Framebuffer(0, 5)