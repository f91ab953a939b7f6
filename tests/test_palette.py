import logging

import pytest

from pnglib import InvalidColorError, PNGImage
from pnglib.layout import plan_layout, prime_buffer
from pnglib.palette import Palette, color_key


@pytest.fixture
def palette():
    layout = plan_layout(2, 2, 3)
    buf = prime_buffer(layout)
    return Palette(buf, layout), buf, layout


def test_color_key_packs_argb():
    assert color_key((0x11, 0x22, 0x33, 0x44)) == 0x44112233


def test_register_assigns_sequential_indices(palette):
    pal, buf, layout = palette
    assert pal.register(10, 20, 30) == 0
    assert pal.register("red") == 1
    assert pal.register((1, 2, 3, 4)) == 2
    plte = bytes(buf[layout.plte.body:layout.plte.body + 9])
    trns = bytes(buf[layout.trns.body:layout.trns.body + 3])
    assert plte == bytes([10, 20, 30, 255, 0, 0, 1, 2, 3])
    assert trns == bytes([255, 255, 4])
    assert pal.colors() == [(10, 20, 30, 255), (255, 0, 0, 255), (1, 2, 3, 4)]


def test_register_is_idempotent(palette):
    pal, buf, _ = palette
    first = pal.register(200, 100, 50, 25)
    snapshot = bytes(buf)
    assert pal.register(200, 100, 50, 25) == first
    assert pal.register((200, 100, 50, 25)) == first
    assert bytes(buf) == snapshot
    assert len(pal) == 1


def test_name_and_components_share_an_entry(palette):
    pal, _, _ = palette
    assert pal.register("white") == pal.register(255, 255, 255)
    assert pal.register("#ffffff") == 0
    assert len(pal) == 1


def test_alpha_defaults_to_opaque(palette):
    pal, _, _ = palette
    a = pal.register(1, 2, 3)
    assert pal.register(1, 2, 3, -1) == a
    assert pal.register(1, 2, 3, 255) == a
    assert pal.register(1, 2, 3, 0) != a


def test_full_palette_returns_zero_and_warns(palette, caplog):
    pal, buf, _ = palette
    assert [pal.register(c) for c in ("red", "green", "blue")] == [0, 1, 2]
    assert pal.full
    snapshot = bytes(buf)

    with caplog.at_level(logging.WARNING, logger="pnglib.palette"):
        assert pal.register("yellow") == 0
    assert any("exhausted" in rec.getMessage() for rec in caplog.records)

    assert bytes(buf) == snapshot
    assert pal.register("red") == 0
    assert pal.register("green") == 1
    assert pal.register("blue") == 2
    assert "yellow" not in pal


def test_unknown_name_raises(palette):
    pal, _, _ = palette
    with pytest.raises(InvalidColorError) as e:
        pal.register("not-a-color")
    assert "not-a-color" in str(e.value)
    assert len(pal) == 0


@pytest.mark.parametrize("bad", [(256, 0, 0), (0, -1, 0), (0, 0, 0, 300), (1, 2), (1.5, 0, 0), (1, 2, 3, "x")])
def test_bad_components_raise(palette, bad):
    pal, _, _ = palette
    with pytest.raises(InvalidColorError):
        pal.register(bad)


def test_invalid_color_is_a_value_error():
    with pytest.raises(ValueError):
        PNGImage(1, 1, 1, background="nope")


def test_background_is_index_zero():
    img = PNGImage(2, 2, 4, background=(9, 8, 7))
    assert img.palette_colors() == [(9, 8, 7, 255)]
    assert img.color(9, 8, 7) == 0


def test_default_background_is_transparent_black():
    img = PNGImage(2, 2)
    assert img.capacity == 8
    assert img.palette_colors() == [(0, 0, 0, 0)]
    assert img.color("transparent") == 0


def test_separate_non_numeric_alpha_raises(palette):
    pal, _, _ = palette
    with pytest.raises(InvalidColorError, match="alpha"):
        pal.register(1, 2, 3, "x")


def test_contains_unrecognized_name_is_false(palette):
    pal, _, _ = palette
    pal.register("red")
    assert "red" in pal
    assert "blurple" not in pal
    assert (1, 2) not in pal
