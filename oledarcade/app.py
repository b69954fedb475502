"""The console: start menu plus the games, and a scripted command line."""

from __future__ import annotations

import argparse
import random
import time
from collections import deque
from pathlib import Path
from typing import Callable, Optional

from .car import CarGame
from .display import Display
from .fonts import SMALL_FONT
from .joystick import Joystick
from .menu import MainWindow, MenuChoice
from .pong import PongGame
from .records import RecordPage
from .storage import Eeprom, initialise_records

Sleep = Callable[[float], None]


class GameConsole:
    """Ties the menu, the two games and the records page together."""

    def __init__(self, display: Display, joystick: Joystick, eeprom: Eeprom,
                 sleep: Sleep = time.sleep,
                 rng: Optional[random.Random] = None) -> None:
        rng = rng if rng is not None else random.Random()
        initialise_records(eeprom)
        display.begin()
        display.set_font(SMALL_FONT)
        self.display = display
        self.eeprom = eeprom
        self.menu = MainWindow(display, joystick, sleep)
        self.car = CarGame(display, joystick, eeprom, sleep, rng)
        self.pong = PongGame(display, joystick, eeprom, sleep, rng)
        self.records = RecordPage(display, joystick, eeprom, sleep)
        self._screens = {
            MenuChoice.CAR: self.car.run,
            MenuChoice.PONG: self.pong.run,
            MenuChoice.RECORDS: self.records.run,
        }

    def loop_once(self) -> Optional[MenuChoice]:
        """Show one menu frame and run whatever was picked."""
        choice = self.menu.poll()
        if choice is not None:
            self._screens[choice]()
        return choice

    def run(self) -> None:
        """Run the menu loop forever."""
        while True:
            self.loop_once()


class _ScriptEnded(Exception):
    """Raised when a scripted joystick has no input left."""


_TOKENS = {
    ".": (300, 300),
    "u": (5, 510),
    "d": (1020, 510),
    "l": (511, 1010),
    "r": (511, 5),
    "p": (511, 510),
}


class _Script:
    """Joystick input from a string; each character is one reading.

    ``u d l r`` deflect the stick, ``.`` leaves it idle and ``p`` presses
    the switch, which the next switch reading then sees once.
    """

    def __init__(self, text: str) -> None:
        tokens = [c for c in text.lower() if not c.isspace()]
        unknown = sorted(set(tokens) - set(_TOKENS))
        if unknown:
            raise ValueError(f"unknown input characters: {''.join(unknown)}")
        self._tokens = deque(tokens)
        self._pressed = False

    def axes(self) -> tuple[int, int]:
        if not self._tokens:
            raise _ScriptEnded
        token = self._tokens.popleft()
        self._pressed = token == "p"
        return _TOKENS[token]

    def switch(self) -> int:
        if self._pressed:
            self._pressed = False
            return 0
        return 1


def main(argv: Optional[list[str]] = None) -> int:
    """Play the console from a scripted joystick input."""
    parser = argparse.ArgumentParser(
        prog="oledarcade",
        description="Run the arcade console with scripted joystick input.",
    )
    parser.add_argument("--input", default="",
                        help="readings: u d l r move, . idle, p press")
    parser.add_argument("--eeprom", type=Path,
                        help="file holding the persistent store")
    parser.add_argument("--seed", type=int, help="random seed")
    parser.add_argument("--delay", action="store_true",
                        help="wait in real time between frames")
    parser.add_argument("--show", action="store_true",
                        help="print the final screen")
    args = parser.parse_args(argv)

    try:
        script = _Script(args.input)
    except ValueError as exc:
        parser.error(str(exc))

    eeprom = Eeprom()
    if args.eeprom is not None and args.eeprom.exists():
        eeprom.load(args.eeprom)

    sleep: Sleep = time.sleep if args.delay else (lambda _seconds: None)
    display = Display()
    joystick = Joystick(script.axes, script.switch)
    console = GameConsole(display, joystick, eeprom, sleep,
                          random.Random(args.seed))
    try:
        console.run()
    except _ScriptEnded:
        pass

    if args.eeprom is not None:
        eeprom.save(args.eeprom)
    if args.show:
        print(display.render_text())
    return 0