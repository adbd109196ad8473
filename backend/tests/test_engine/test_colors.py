"""Tests for colour mapping."""

from rectiling.engine.colors import RGB, color_for


def test_zero_size_is_cyan():
    assert color_for(0, 0, 20) == RGB(red=0, green=255, blue=255)


def test_max_size_is_red():
    assert color_for(20, 20, 20) == RGB(red=255, green=0, blue=0)
    assert color_for(20, 20, 20).hex == "#ff0000"


def test_halves_round_up():
    # red 63.75 -> 64, green and blue 127.5 -> 128
    assert color_for(10, 10, 20) == RGB(64, 128, 128)


def test_sign_is_ignored():
    assert color_for(-10, 10, 20) == color_for(10, 10, 20)
    assert color_for(10, -4, 20) == color_for(10, 4, 20)


def test_channels_are_clamped():
    c = color_for(40, 1, 20)
    assert c.green == 0
    assert c.red == 26
    big = color_for(100, 100, 20)
    assert big.red == 255 and big.green == 0 and big.blue == 0


def test_hex_is_zero_padded():
    assert RGB(0, 10, 255).hex == "#000aff"
