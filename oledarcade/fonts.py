"""Bitmap fonts for the 128x64 monochrome display.

A font blob starts with a four byte header: glyph width, glyph height,
code of the first character and the number of characters. Glyph data
follows, one fixed-size record per character.
"""

from __future__ import annotations

from dataclasses import dataclass

HEADER_SIZE = 4


@dataclass(frozen=True)
class Font:
    """A fixed-size bitmap font."""

    width: int
    height: int
    offset: int
    count: int
    data: bytes

    @property
    def glyph_size(self) -> int:
        """Number of bytes holding one glyph."""
        return self.width * self.height // 8

    @property
    def paged(self) -> bool:
        """True when glyphs are stored as 8-pixel-high column pages."""
        return self.height % 8 == 0

    @staticmethod
    def _code(char: str | int) -> int:
        if isinstance(char, int):
            return char
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return ord(char)

    def covers(self, char: str | int) -> bool:
        """Tell whether the font has a glyph for ``char``."""
        code = self._code(char)
        return self.offset <= code < self.offset + self.count

    def glyph_bytes(self, char: str | int) -> bytes:
        """Return the raw glyph record for ``char``."""
        if not self.covers(char):
            raise ValueError(f"character {char!r} is not in this font")
        start = (self._code(char) - self.offset) * self.glyph_size
        return self.data[start:start + self.glyph_size]


def load_font(data: bytes | bytearray) -> Font:
    """Parse a font blob (header followed by glyph records)."""
    blob = bytes(data)
    if len(blob) < HEADER_SIZE:
        raise ValueError("font data is shorter than its header")
    width, height, offset, count = blob[:HEADER_SIZE]
    if width == 0 or height == 0:
        raise ValueError("font glyphs must have a non-zero size")
    glyph_size = width * height // 8
    needed = count * glyph_size
    body = blob[HEADER_SIZE:]
    if len(body) < needed:
        raise ValueError(
            f"font data holds {len(body)} glyph bytes, {needed} are needed"
        )
    return Font(width, height, offset, count, body[:needed])


_SMALL_FONT_DATA = bytes.fromhex(
    "0608205f"
    "000000000000" "0000002f0000" "000007000700" "00147f147f14"
    "00242a7f2a12" "002313086462" "003649552250" "000005030000"
    "00001c224100" "000041221c00" "0014083e0814" "0008083e0808"
    "000000a06000" "000808080808" "000060600000" "002010080402"
    "003e5149453e" "0000427f4000" "004261514946" "002141454b31"
    "001814127f10" "002745454539" "003c4a494930" "000171090503"
    "003649494936" "00064949291e" "000036360000" "000056360000"
    "000814224100" "001414141414" "000041221408" "000201510906"
    "00324959513e" "007c1211127c" "007f49494936" "003e41414122"
    "007f4141221c" "007f49494941" "007f09090901" "003e4149497a"
    "007f0808087f" "0000417f4100" "002040413f01" "007f08142241"
    "007f40404040" "007f020c027f" "007f0408107f" "003e4141413e"
    "007f09090906" "003e4151215e" "007f09192946" "004649494931"
    "0001017f0101" "003f4040403f" "001f2040201f" "003f4038403f"
    "006314081463" "000708700807" "006151494543" "00007f414100"
    "aa55aa55aa55" "000041417f00" "000402010204" "004040404040"
    "000003050000" "002054545478" "007f48444438" "003844444420"
    "00384444487f" "003854545418" "00087e090102" "0018a4a4a47c"
    "007f08040478" "0000447d4000" "004080847d00" "007f10284400"
    "0000417f4000" "007c04180478" "007c08040478" "003844444438"
    "00fc24242418" "0018242418fc" "007c08040408" "004854545420"
    "00043f444020" "003c4040207c" "001c2040201c" "003c4030403c"
    "004428102844" "001ca0a0a07c" "004464544c44" "0000107c8200"
    "000000ff0000" "0000827c1000" "000006090906"
)

_MEDIUM_NUMBERS_DATA = bytes.fromhex(
    "0c102d0d"
    "000000808080808080000000" "000001030303030303010000"
    "000000000000000000000000" "0000000000c0c00000000000"
    "000002868686868686020000" "000081c3c3c3c3c3c3810000"
    "00fc7a0606060606067afc00" "007ebcc0c0c0c0c0c0bc7e00"
    "00000000000000000078fc00" "0000000000000000003c7e00"
    "0000028686868686867afc00" "007ebdc3c3c3c3c3c3810000"
    "0000028686868686867afc00" "000081c3c3c3c3c3c3bd7e00"
    "00fc7880808080808078fc00" "0000010303030303033d7e00"
    "00fc7a868686868686020000" "000081c3c3c3c3c3c3bd7e00"
    "00fc7a868686868686020000" "007ebdc3c3c3c3c3c3bd7e00"
    "0000020606060606067afc00" "0000000000000000003c7e00"
    "00fc7a8686868686867afc00" "007ebdc3c3c3c3c3c3bd7e00"
    "00fc7a8686868686867afc00" "000081c3c3c3c3c3c3bd7e00"
)

_BIG_NUMBERS_DATA = bytes.fromhex(
    "0e182d0d"
    "0000000000000000000000000000"
    "0000103838383838383838100000"
    "0000000000000000000000000000"

    "0000000000000000000000000000"
    "0000000000000000000000000000"
    "000000000040e0e0400000000000"

    "000002060e0e0e0e0e0e06020000"
    "0000103838383838383838100000"
    "000080c0e0e0e0e0e0e0c0800000"

    "00fcfaf60e0e0e0e0e0ef6fafc00"
    "00efc78300000000000083c7ef00"
    "007fbfdfe0e0e0e0e0e0dfbf7f00"

    "00000000000000000000f0f8fc00"
    "0000000000000000000083c7ef00"
    "000000000000000000001f3f7f00"

    "000002060e0e0e0e0e0ef6fafc00"
    "00e0d0b83838383838383b170f00"
    "007fbfdfe0e0e0e0e0e0c0800000"

    "000002060e0e0e0e0e0ef6fafc00"
    "00001038383838383838bbd7ef00"
    "000080c0e0e0e0e0e0e0dfbf7f00"

    "00fcf8f0000000000000f0f8fc00"
    "000f173b383838383838bbd7ef00"
    "000000000000000000001f3f7f00"

    "00fcfaf60e0e0e0e0e0e06020000"
    "000f173b383838383838b8d0e000"
    "000080c0e0e0e0e0e0e0dfbf7f00"

    "00fcfaf60e0e0e0e0e0e06020000"
    "00efd7bb383838383838b8d0e000"
    "007fbfdfe0e0e0e0e0e0dfbf7f00"

    "000002060e0e0e0e0e0ef6fafc00"
    "0000000000000000000083c7ef00"
    "000000000000000000001f3f7f00"

    "00fcfaf60e0e0e0e0e0ef6fafc00"
    "00efd7bb383838383838bbd7ef00"
    "007fbfdfe0e0e0e0e0e0dfbf7f00"

    "00fcfaf60e0e0e0e0e0ef6fafc00"
    "000f173b383838383838bbd7ef00"
    "000080c0e0e0e0e0e0e0dfbf7f00"
)

_TINY_FONT_DATA = bytes.fromhex(
    "0406205f"
    "000000" "03a000" "c00c00" "f94f80" "6beb00" "988c80" "52a580" "030000"
    "01c880" "89c000" "508500" "21c200" "084000" "208200" "002000" "188c00"
    "fa2f80" "4be080" "5a6680" "8aa500" "e08f80" "eaab00" "72a900" "9a8c00"
    "faaf80" "4aa700" "014000" "094000" "214880" "514500" "894200" "426600"
    "72a680" "7a8780" "faa500" "722500" "fa2700" "faa880" "fa8800" "722b00"
    "f88f80" "8be880" "8be800" "f88d80" "f82080" "f90f80" "f9cf80" "722700"
    "fa8400" "722740" "fa8580" "4aa900" "83e800" "f02f00" "e06e00" "f0ef00"
    "d88d80" "c0ec00" "9aac80" "03e880" "c08180" "8be000" "420400" "082080"
    "020400" "312380" "f92300" "312480" "312f80" "316280" "23ea00" "255380"
    "f90380" "02e000" "06e000" "f84280" "03e000" "798780" "390380" "312300"
    "7d2300" "3127c0" "788400" "294000" "43e400" "702700" "606600" "706700"
    "48c480" "745780" "59e680" "23e880" "036000" "8be200" "610c00"
)

SMALL_FONT = load_font(_SMALL_FONT_DATA)
MEDIUM_NUMBERS = load_font(_MEDIUM_NUMBERS_DATA)
BIG_NUMBERS = load_font(_BIG_NUMBERS_DATA)
TINY_FONT = load_font(_TINY_FONT_DATA)