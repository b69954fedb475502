import pytest

from oledarcade.fonts import (
    BIG_NUMBERS,
    MEDIUM_NUMBERS,
    SMALL_FONT,
    TINY_FONT,
    Font,
    load_font,
)

ALL_FONTS = [SMALL_FONT, MEDIUM_NUMBERS, BIG_NUMBERS, TINY_FONT]


def _header(font):
    return bytes([font.width, font.height, font.offset, font.count])


def test_small_font_header():
    assert (SMALL_FONT.width, SMALL_FONT.height) == (6, 8)
    assert (SMALL_FONT.offset, SMALL_FONT.count) == (0x20, 0x5F)
    assert SMALL_FONT.covers(" ")
    assert SMALL_FONT.covers("~")
    assert len(SMALL_FONT.glyph_bytes("A")) == 6


def test_number_font_headers():
    assert (MEDIUM_NUMBERS.width, MEDIUM_NUMBERS.height) == (0x0C, 0x10)
    assert (BIG_NUMBERS.width, BIG_NUMBERS.height) == (0x0E, 0x18)
    assert MEDIUM_NUMBERS.offset == BIG_NUMBERS.offset == 0x2D
    assert MEDIUM_NUMBERS.count == BIG_NUMBERS.count == 0x0D
    assert len(MEDIUM_NUMBERS.glyph_bytes("0")) == 24
    assert len(BIG_NUMBERS.glyph_bytes("0")) == 42
    assert MEDIUM_NUMBERS.covers("-")
    assert BIG_NUMBERS.covers("9")


def test_tiny_font_is_not_paged():
    assert TINY_FONT.height == 6
    assert TINY_FONT.paged is False
    assert SMALL_FONT.paged is True
    assert TINY_FONT.glyph_bytes(" ") == bytes(3)
    assert TINY_FONT.glyph_bytes("!") == bytes([0x03, 0xA0, 0x00])


def test_small_font_glyphs_match_table():
    assert SMALL_FONT.glyph_bytes("A") == bytes([0x00, 0x7C, 0x12, 0x11, 0x12, 0x7C])
    assert SMALL_FONT.glyph_bytes("|") == bytes([0x00, 0x00, 0x00, 0xFF, 0x00, 0x00])
    assert SMALL_FONT.glyph_bytes("~") == bytes([0x00, 0x00, 0x06, 0x09, 0x09, 0x06])


def test_space_is_blank():
    assert SMALL_FONT.glyph_bytes(" ") == bytes(SMALL_FONT.glyph_size)


def test_glyph_bytes_accepts_code_point():
    assert SMALL_FONT.glyph_bytes(ord("A")) == SMALL_FONT.glyph_bytes("A")


@pytest.mark.parametrize("font", ALL_FONTS)
def test_every_glyph_has_full_size(font):
    reloaded = load_font(_header(font) + font.data)
    assert reloaded == font
    for code in range(reloaded.offset, reloaded.offset + reloaded.count):
        assert reloaded.covers(chr(code))
        assert len(reloaded.glyph_bytes(code)) == reloaded.glyph_size
    assert len(reloaded.data) == reloaded.count * reloaded.glyph_size


def test_covers_range():
    assert SMALL_FONT.covers(" ")
    assert SMALL_FONT.covers("~")
    assert not SMALL_FONT.covers("\x7f")
    assert not SMALL_FONT.covers("\x1f")
    assert MEDIUM_NUMBERS.covers("9")
    assert MEDIUM_NUMBERS.covers("-")
    assert not MEDIUM_NUMBERS.covers("A")


def test_glyph_outside_font_raises():
    with pytest.raises(ValueError):
        BIG_NUMBERS.glyph_bytes("x")


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        SMALL_FONT.covers("AB")


def test_load_font_round_trip():
    reloaded = load_font(_header(SMALL_FONT) + SMALL_FONT.data)
    assert reloaded == SMALL_FONT
    assert isinstance(reloaded, Font)


def test_load_font_ignores_trailing_bytes():
    blob = bytes([8, 8, 65, 1]) + bytes(range(8)) + b"\xff\xff"
    font = load_font(blob)
    assert font.glyph_bytes("A") == bytes(range(8))
    assert not font.covers("B")


def test_load_font_too_short_header():
    with pytest.raises(ValueError):
        load_font(b"\x06\x08")


def test_load_font_missing_glyph_data():
    with pytest.raises(ValueError):
        load_font(bytes([6, 8, 32, 2]) + bytes(6))


def test_load_font_zero_size():
    with pytest.raises(ValueError):
        load_font(bytes([0, 8, 32, 1]))