"""Start menu: pick a game or the records page with the joystick."""

from __future__ import annotations

import time
from enum import IntEnum
from typing import Callable, Optional

from .display import Display
from .joystick import Direction, Joystick

Sleep = Callable[[float], None]

POINTER_ROWS = (2, 20, 40)
POINTER_COLUMN = 100
MOVE_DELAY = 1.0
FRAME_DELAY = 0.01


class MenuChoice(IntEnum):
    """Entry picked from the start menu."""

    CAR = 1
    PONG = 2
    RECORDS = 3


_CHOICES = {
    POINTER_ROWS[0]: MenuChoice.CAR,
    POINTER_ROWS[1]: MenuChoice.PONG,
    POINTER_ROWS[2]: MenuChoice.RECORDS,
}


class MainWindow:
    """The start menu; the pointer moves with up/down and the switch picks."""

    def __init__(self, display: Display, joystick: Joystick,
                 sleep: Sleep = time.sleep) -> None:
        self._display = display
        self._joystick = joystick
        self._sleep = sleep
        self.pointer = POINTER_ROWS[0]
        self._drawn_pointer = POINTER_ROWS[0]

    def _shift(self, step: int) -> None:
        index = POINTER_ROWS.index(self.pointer)
        self.pointer = POINTER_ROWS[(index + step) % len(POINTER_ROWS)]
        self._sleep(MOVE_DELAY)

    def process_input(self) -> None:
        """Move the pointer down or up one entry, wrapping round."""
        direction = self._joystick.direction()
        if direction is Direction.DOWN:
            self._shift(1)
        elif direction is Direction.UP:
            self._shift(-1)

    def button_level(self) -> int:
        """Read the switch level (0 means pressed)."""
        return self._joystick.switch_level()

    def poll(self) -> Optional[MenuChoice]:
        """Handle one frame; return the chosen entry, or None if none yet."""
        self.process_input()
        d = self._display
        if self.button_level() != 1:
            d.clear()
            d.update()
            return _CHOICES[self.pointer]
        if self.pointer != self._drawn_pointer:
            d.clear()
            self._drawn_pointer = self.pointer
        d.print("Super Car", 2, POINTER_ROWS[0])
        d.print("|", POINTER_COLUMN, self.pointer)
        d.print("Records:", 2, POINTER_ROWS[2])
        d.print("Pong", 2, POINTER_ROWS[1])
        d.update()
        self._sleep(FRAME_DELAY)
        return None