"""Page showing the stored play counts and records."""

from __future__ import annotations

import time
from typing import Callable

from .display import Display
from .joystick import Joystick
from .storage import CAR_GAMES, CAR_RECORD, PONG_GAMES, PONG_RECORD, Eeprom

Sleep = Callable[[float], None]

FRAME_DELAY = 0.005
ENTER_DELAY = 0.5


class RecordPage:
    """A table of games played and best scores, read from the store."""

    def __init__(self, display: Display, joystick: Joystick, eeprom: Eeprom,
                 sleep: Sleep = time.sleep) -> None:
        self._display = display
        self._joystick = joystick
        self._eeprom = eeprom
        self._sleep = sleep

    def draw(self) -> None:
        """Draw the table and push it to the screen."""
        d, store = self._display, self._eeprom
        d.clear()
        d.draw_line(1, 20, 128, 20)
        d.print("CarGame", 5, 25)
        d.draw_line(1, 40, 128, 40)
        d.print("PongGame", 5, 45)
        d.draw_line(60, 1, 60, 64)
        d.print("Games", 62, 5)
        d.print("Rec", 97, 5)
        d.draw_line(95, 1, 95, 64)
        d.print(str(store.read(PONG_GAMES)), 63, 23)
        d.print(str(store.read(PONG_RECORD)), 97, 23)
        d.print(str(store.read(CAR_GAMES)), 63, 43)
        d.print(str(store.read(CAR_RECORD)), 97, 43)
        d.update()

    def run(self) -> None:
        """Show the table until the switch is pressed."""
        self._sleep(ENTER_DELAY)
        while self._joystick.switch_level() != 0:
            self.draw()
            self._sleep(FRAME_DELAY)
        self._display.clear()
        self._sleep(ENTER_DELAY)