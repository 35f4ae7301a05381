import dataclasses

import pytest

from unikit import color
from unikit.color import Color


def test_to_bgra_orders_blue_green_red_alpha():
    assert Color(1, 2, 3).to_bgra(4) == bytes([3, 2, 1, 4])


def test_to_bgra_length_and_alpha_position():
    encoded = color.TOMATO.to_bgra(200)
    assert len(encoded) == 4
    assert encoded[3] == 200
    assert encoded[2] == color.TOMATO.red


def test_named_constants_match_source():
    assert color.LIGHT_CYAN == Color(224, 255, 255)
    assert color.REBECCA_PURPLE == Color(102, 51, 153)
    assert color.BLACK == Color(0, 0, 0)


def test_aliases_encode_identically():
    assert color.AQUA.to_bgra(255) == color.CYAN.to_bgra(255) == bytes([255, 255, 0, 255])
    assert color.FUCHSIA.to_bgra(10) == color.MAGENTA.to_bgra(10) == bytes([255, 0, 255, 10])


@pytest.mark.parametrize("args", [(256, 0, 0), (0, -1, 0), (0, 0, 300)])
def test_out_of_range_channel_rejected(args):
    with pytest.raises(ValueError):
        Color(*args)


def test_non_int_channel_rejected():
    with pytest.raises(TypeError):
        Color(1.5, 0, 0)


def test_bad_alpha_rejected():
    with pytest.raises(ValueError):
        color.WHITE.to_bgra(256)


def test_color_is_immutable():
    c = Color(10, 20, 30)
    with pytest.raises(dataclasses.FrozenInstanceError):
        c.red = 5
    assert c.red == 10