"""Frame buffer and drawing primitives for a 128x64 SSD1306 style display.

Pixels live in a 1024 byte buffer organised as eight pages of 128 columns;
each byte holds eight vertically stacked pixels, least significant bit on top.
Wire traffic is handed to a *sink*, a callable taking the control byte and
the payload; commands use control byte ``0x00`` and frame data ``0x40``.
"""

from __future__ import annotations

import struct
from typing import Callable, Optional, Sequence

from .fonts import Font, load_font

WIDTH = 128
HEIGHT = 64
BUFFER_SIZE = WIDTH * HEIGHT // 8

LEFT = 0
RIGHT = 9999
CENTER = 9998

SSD1306_ADDR = 0x3C
SSD1306_COMMAND = 0x00
SSD1306_DATA = 0xC0
SSD1306_DATA_CONTINUE = 0x40

SSD1306_SET_CONTRAST_CONTROL = 0x81
SSD1306_DISPLAY_ALL_ON_RESUME = 0xA4
SSD1306_DISPLAY_ALL_ON = 0xA5
SSD1306_NORMAL_DISPLAY = 0xA6
SSD1306_INVERT_DISPLAY = 0xA7
SSD1306_DISPLAY_OFF = 0xAE
SSD1306_DISPLAY_ON = 0xAF
SSD1306_NOP = 0xE3
SSD1306_MEMORY_ADDR_MODE = 0x20
SSD1306_SET_COLUMN_ADDR = 0x21
SSD1306_SET_PAGE_ADDR = 0x22
SSD1306_SET_START_LINE = 0x40
SSD1306_SET_SEGMENT_REMAP = 0xA0
SSD1306_SET_MULTIPLEX_RATIO = 0xA8
SSD1306_COM_SCAN_DIR_INC = 0xC0
SSD1306_COM_SCAN_DIR_DEC = 0xC8
SSD1306_SET_DISPLAY_OFFSET = 0xD3
SSD1306_SET_COM_PINS = 0xDA
SSD1306_CHARGE_PUMP = 0x8D
SSD1306_SET_DISPLAY_CLOCK_DIV_RATIO = 0xD5
SSD1306_SET_PRECHARGE_PERIOD = 0xD9
SSD1306_SET_VCOM_DESELECT = 0xDB

INIT_SEQUENCE = (
    SSD1306_DISPLAY_OFF,
    SSD1306_SET_DISPLAY_CLOCK_DIV_RATIO, 0x80,
    SSD1306_SET_MULTIPLEX_RATIO, 0x3F,
    SSD1306_SET_DISPLAY_OFFSET, 0x00,
    SSD1306_SET_START_LINE | 0x00,
    SSD1306_CHARGE_PUMP, 0x14,
    SSD1306_MEMORY_ADDR_MODE, 0x00,
    SSD1306_SET_SEGMENT_REMAP | 0x01,
    SSD1306_COM_SCAN_DIR_DEC,
    SSD1306_SET_COM_PINS, 0x12,
    SSD1306_SET_CONTRAST_CONTROL, 0xCF,
    SSD1306_SET_PRECHARGE_PERIOD, 0xF1,
    SSD1306_SET_VCOM_DESELECT, 0x40,
    SSD1306_DISPLAY_ALL_ON_RESUME,
    SSD1306_NORMAL_DISPLAY,
    SSD1306_DISPLAY_ON,
)

Sink = Callable[[int, bytes], None]


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    return int(a / b)


class Display:
    """A monochrome frame buffer with drawing and text helpers."""

    def __init__(self, sink: Optional[Sink] = None) -> None:
        self._sink = sink
        self._buf = bytearray(BUFFER_SIZE)
        self._font: Optional[Font] = None
        self._inverted_text = False

    # -- wire -------------------------------------------------------------

    def _command(self, value: int) -> None:
        if self._sink is not None:
            self._sink(SSD1306_COMMAND, bytes([value & 0xFF]))

    def begin(self) -> None:
        """Send the controller set-up sequence and blank the screen."""
        for value in INIT_SEQUENCE:
            self._command(value)
        self.clear()
        self.update()
        self._font = None

    def update(self) -> None:
        """Push the whole frame buffer to the controller."""
        for value in (SSD1306_SET_COLUMN_ADDR, 0, WIDTH - 1,
                      SSD1306_SET_PAGE_ADDR, 0, HEIGHT // 8 - 1):
            self._command(value)
        if self._sink is not None:
            self._sink(SSD1306_DATA_CONTINUE, bytes(self._buf))

    def set_brightness(self, value: int) -> None:
        """Set the contrast level (0-255)."""
        if not 0 <= value <= 255:
            raise ValueError(f"brightness must be 0..255, got {value}")
        self._command(SSD1306_SET_CONTRAST_CONTROL)
        self._command(value)

    def invert(self, mode: bool) -> None:
        """Switch the whole panel between inverted and normal output."""
        self._command(SSD1306_INVERT_DISPLAY if mode else SSD1306_NORMAL_DISPLAY)

    # -- buffer -----------------------------------------------------------

    def clear(self) -> None:
        """Turn every pixel off."""
        self._buf[:] = bytes(BUFFER_SIZE)

    def fill(self) -> None:
        """Turn every pixel on."""
        self._buf[:] = b"\xff" * BUFFER_SIZE

    @staticmethod
    def _locate(x: float, y: float) -> Optional[tuple[int, int]]:
        x, y = int(x), int(y)
        if 0 <= x < WIDTH and 0 <= y < HEIGHT:
            return (y // 8) * WIDTH + x, 1 << (y % 8)
        return None

    def get_pixel(self, x: float, y: float) -> bool:
        """Tell whether a pixel is lit; off-screen pixels read as off."""
        spot = self._locate(x, y)
        return spot is not None and bool(self._buf[spot[0]] & spot[1])

    def set_pixel(self, x: float, y: float) -> None:
        """Light one pixel; off-screen coordinates are ignored."""
        spot = self._locate(x, y)
        if spot is not None:
            self._buf[spot[0]] |= spot[1]

    def clear_pixel(self, x: float, y: float) -> None:
        """Turn one pixel off; off-screen coordinates are ignored."""
        spot = self._locate(x, y)
        if spot is not None:
            self._buf[spot[0]] &= ~spot[1] & 0xFF

    def invert_pixel(self, x: float, y: float) -> None:
        """Toggle one pixel; off-screen coordinates are ignored."""
        spot = self._locate(x, y)
        if spot is not None:
            self._buf[spot[0]] ^= spot[1]

    def buffer(self) -> bytes:
        """Return a copy of the raw frame buffer."""
        return bytes(self._buf)

    def render_text(self) -> str:
        """Render the frame as 64 lines of '#' (lit) and '.' (dark)."""
        return "\n".join(
            "".join("#" if self.get_pixel(x, y) else "." for x in range(WIDTH))
            for y in range(HEIGHT)
        )

    # -- text -------------------------------------------------------------

    def invert_text(self, mode: bool) -> None:
        """Draw following text inverted (dark on lit) or normally."""
        self._inverted_text = bool(mode)

    def set_font(self, font: Font | bytes | bytearray) -> None:
        """Select the font used by the print methods."""
        self._font = font if isinstance(font, Font) else load_font(font)
        self._inverted_text = False

    def _paint(self, x: int, y: int, on: bool) -> None:
        if on != self._inverted_text:
            self.set_pixel(x, y)
        else:
            self.clear_pixel(x, y)

    def _print_char(self, font: Font, char: str, x: int, y: int) -> None:
        glyph = font.glyph_bytes(char)
        if font.paged:
            for row in range(font.height // 8):
                for col in range(font.width):
                    byte = glyph[col + row * font.width]
                    for bit in range(8):
                        self._paint(x + col, y + row * 8 + bit,
                                    bool(byte & (1 << bit)))
        else:
            bits = int.from_bytes(glyph, "big")
            total = len(glyph) * 8
            index = 0
            for cx in range(font.width):
                for cy in range(font.height):
                    lit = bool(bits >> (total - 1 - index) & 1)
                    self._paint(x + cx, y + cy, lit)
                    index += 1

    def print(self, text: object, x: int, y: int) -> None:
        """Draw text with the top left corner at (x, y).

        ``x`` may be ``RIGHT`` or ``CENTER`` to align the text.
        """
        if self._font is None:
            raise RuntimeError("no font selected; call set_font first")
        font = self._font
        text = str(text)
        x, y = int(x), int(y)
        span = len(text) * font.width
        if x == RIGHT:
            x = WIDTH - span
        if x == CENTER:
            x = _trunc_div(WIDTH - span, 2)
        for position, char in enumerate(text):
            self._print_char(font, char, x + position * font.width, y)

    def print_int(self, num: int, x: int, y: int, length: int = 0,
                  filler: str = " ") -> None:
        """Print an integer, padded on the left to ``length`` with ``filler``."""
        num = int(num)
        if num == 0:
            text = filler * max(0, length - 1) + "0"
        else:
            sign = "-" if num < 0 else ""
            digits = str(abs(num))
            pad = max(0, length - len(digits) - len(sign))
            text = sign + filler * pad + digits
        self.print(text, x, y)

    def print_float(self, num: float, dec: int, x: int, y: int,
                    divider: str = ".", length: int = 0,
                    filler: str = " ") -> None:
        """Print a number with ``dec`` decimals, width ``length``."""
        negative = num < 0
        text = f"{num:.{dec}f}"
        if length < 0:
            text = text.ljust(-length)
        else:
            text = text.rjust(length)
        if divider != ".":
            text = text.replace(".", divider)
        if filler != " ":
            if negative:
                rest = "".join(filler if c in " -" else c for c in text[1:])
                text = "-" + rest
            else:
                text = text.replace(" ", filler)
        self.print(text, x, y)

    # -- lines ------------------------------------------------------------

    def _hline(self, x: float, y: float, length: float, on: bool) -> None:
        x, y, length = int(x), int(y), int(length)
        spot = self._locate(x, y)
        if spot is None:
            return
        start, mask = spot
        for index in range(start, min(start + length, BUFFER_SIZE)):
            if on:
                self._buf[index] |= mask
            else:
                self._buf[index] &= ~mask & 0xFF

    def _vline(self, x: float, y: float, length: float, on: bool) -> None:
        x, y, length = int(x), int(y), int(length)
        if self._locate(x, y) is None:
            return
        plot = self.set_pixel if on else self.clear_pixel
        for dy in range(length):
            plot(x, y + dy)

    def draw_hline(self, x: float, y: float, length: float) -> None:
        """Light ``length`` pixels to the right of (x, y), inclusive."""
        self._hline(x, y, length, True)

    def clear_hline(self, x: float, y: float, length: float) -> None:
        """Clear ``length`` pixels to the right of (x, y), inclusive."""
        self._hline(x, y, length, False)

    def draw_vline(self, x: float, y: float, length: float) -> None:
        """Light ``length`` pixels downward from (x, y), inclusive."""
        self._vline(x, y, length, True)

    def clear_vline(self, x: float, y: float, length: float) -> None:
        """Clear ``length`` pixels downward from (x, y), inclusive."""
        self._vline(x, y, length, False)

    def _line(self, x1: float, y1: float, x2: float, y2: float,
              on: bool) -> None:
        x1, y1, x2, y2 = int(x1), int(y1), int(x2), int(y2)
        plot = self.set_pixel if on else self.clear_pixel
        if x2 - x1 < 0:
            x1, y1, x2, y2 = x2, y2, x1, y1
        if y2 - y1 < 0:
            x1, y1, x2, y2 = x2, y2, x1, y1

        if y1 == y2:
            if x1 > x2:
                x1, x2 = x2, x1
            self._hline(x1, y1, x2 - x1, on)
        elif x1 == x2:
            if y1 > y2:
                y1, y2 = y2, y1
            self._vline(x1, y1, y2 - y1, on)
        elif abs(x2 - x1) > abs(y2 - y1):
            delta = (y2 - y1) / (x2 - x1)
            ty = float(y1)
            if x1 > x2:
                for i in range(x1, x2 - 1, -1):
                    plot(i, int(ty + 0.5))
                    ty -= delta
            else:
                for i in range(x1, x2 + 1):
                    plot(i, int(ty + 0.5))
                    ty += delta
        else:
            delta = _f32(_f32(x2 - x1) / _f32(y2 - y1))
            tx = float(x1)
            if y1 > y2:
                for i in range(y2 + 1, y1, -1):
                    plot(int(tx + 0.5), i)
                    tx += delta
            else:
                for i in range(y1, y2 + 1):
                    plot(int(tx + 0.5), i)
                    tx += delta

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        """Draw a straight line between two points."""
        self._line(x1, y1, x2, y2, True)

    def clear_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        """Clear a straight line between two points."""
        self._line(x1, y1, x2, y2, False)

    # -- shapes -----------------------------------------------------------

    @staticmethod
    def _corners(x1: float, y1: float, x2: float,
                 y2: float) -> tuple[int, int, int, int]:
        x1, y1, x2, y2 = int(x1), int(y1), int(x2), int(y2)
        return min(x1, x2), min(y1, y2), max(x1, x2), max(y1, y2)

    def _rect(self, x1, y1, x2, y2, on: bool) -> None:
        x1, y1, x2, y2 = self._corners(x1, y1, x2, y2)
        self._hline(x1, y1, x2 - x1, on)
        self._hline(x1, y2, x2 - x1, on)
        self._vline(x1, y1, y2 - y1, on)
        self._vline(x2, y1, y2 - y1 + 1, on)

    def draw_rect(self, x1: float, y1: float, x2: float, y2: float) -> None:
        """Draw the outline of a rectangle."""
        self._rect(x1, y1, x2, y2, True)

    def clear_rect(self, x1: float, y1: float, x2: float, y2: float) -> None:
        """Clear the outline of a rectangle."""
        self._rect(x1, y1, x2, y2, False)

    def _round_rect(self, x1, y1, x2, y2, on: bool) -> None:
        x1, y1, x2, y2 = self._corners(x1, y1, x2, y2)
        if x2 - x1 <= 4 or y2 - y1 <= 4:
            return
        plot = self.set_pixel if on else self.clear_pixel
        plot(x1 + 1, y1 + 1)
        plot(x2 - 1, y1 + 1)
        plot(x1 + 1, y2 - 1)
        plot(x2 - 1, y2 - 1)
        self._hline(x1 + 2, y1, x2 - x1 - 3, on)
        self._hline(x1 + 2, y2, x2 - x1 - 3, on)
        self._vline(x1, y1 + 2, y2 - y1 - 3, on)
        self._vline(x2, y1 + 2, y2 - y1 - 3, on)

    def draw_round_rect(self, x1: float, y1: float, x2: float,
                        y2: float) -> None:
        """Draw a rectangle with cut corners; tiny rectangles are skipped."""
        self._round_rect(x1, y1, x2, y2, True)

    def clear_round_rect(self, x1: float, y1: float, x2: float,
                         y2: float) -> None:
        """Clear a rectangle with cut corners; tiny rectangles are skipped."""
        self._round_rect(x1, y1, x2, y2, False)

    def _circle(self, x: float, y: float, radius: float, on: bool) -> None:
        x, y, radius = int(x), int(y), int(radius)
        plot = self.set_pixel if on else self.clear_pixel
        f = 1 - radius
        ddf_x = 1
        ddf_y = -2 * radius
        x1 = 0
        y1 = radius
        plot(x, y + radius)
        plot(x, y - radius)
        plot(x + radius, y)
        plot(x - radius, y)
        while x1 < y1:
            if f >= 0:
                y1 -= 1
                ddf_y += 2
                f += ddf_y
            x1 += 1
            ddf_x += 2
            f += ddf_x
            for px, py in ((x1, y1), (y1, x1)):
                plot(x + px, y + py)
                plot(x - px, y + py)
                plot(x + px, y - py)
                plot(x - px, y - py)

    def draw_circle(self, x: float, y: float, radius: float) -> None:
        """Draw a circle outline centred on (x, y)."""
        self._circle(x, y, radius, True)

    def clear_circle(self, x: float, y: float, radius: float) -> None:
        """Clear a circle outline centred on (x, y)."""
        self._circle(x, y, radius, False)

    def draw_bitmap(self, x: float, y: float, bitmap: Sequence[int],
                    sx: int, sy: int) -> None:
        """Copy a page-organised bitmap of ``sx`` by ``sy`` pixels to (x, y)."""
        x, y = int(x), int(y)
        for cy in range(sy):
            mask = 1 << (cy % 8)
            for cx in range(sx):
                data = bitmap[cx + (cy // 8) * sx]
                if data & mask:
                    self.set_pixel(x + cx, y + cy)
                else:
                    self.clear_pixel(x + cx, y + cy)