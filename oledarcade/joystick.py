"""Analogue joystick with a push switch.

The two axes read 0..1023. Only a handful of narrow windows count as a
deflection; anything else counts as no direction at all.
"""

from __future__ import annotations

import logging
from enum import Enum, IntEnum
from typing import Callable

logger = logging.getLogger(__name__)

AxisReader = Callable[[], "tuple[int, int]"]
SwitchReader = Callable[[], int]


class Direction(IntEnum):
    """Direction reported by the joystick."""

    NONE = 0
    LEFT = 1
    RIGHT = 2
    STOP = 3
    UP = 4
    DOWN = 5


class JoystickPosition(Enum):
    """Coarse stick position."""

    CENTER = "Center"
    UP = "Up"
    DOWN = "Down"
    LEFT = "Left"
    RIGHT = "Right"


_POSITIONS = {
    Direction.LEFT: JoystickPosition.LEFT,
    Direction.RIGHT: JoystickPosition.RIGHT,
    Direction.UP: JoystickPosition.UP,
    Direction.DOWN: JoystickPosition.DOWN,
}


def classify(x: int, y: int) -> Direction:
    """Turn raw axis readings into a direction."""
    if 500 <= x <= 522:
        if 1000 <= y <= 1023:
            return Direction.LEFT
        if 0 <= y <= 10:
            return Direction.RIGHT
        if 500 <= y <= 515:
            return Direction.STOP
    if 0 <= x <= 10 and 500 <= y <= 518:
        return Direction.UP
    if 1018 <= x <= 1023 and 500 <= y <= 518:
        return Direction.DOWN
    return Direction.NONE


def position_name(position: object) -> str:
    """Return the display name of a position, or "Unknown"."""
    if isinstance(position, JoystickPosition):
        return position.value
    return "Unknown"


class Joystick:
    """A joystick read through two callables.

    ``read_axes`` returns the (x, y) axis readings; ``read_switch`` returns
    the switch level, which is 0 while the button is held down.
    """

    def __init__(self, read_axes: AxisReader, read_switch: SwitchReader) -> None:
        self._read_axes = read_axes
        self._read_switch = read_switch

    def direction(self) -> Direction:
        """Read the axes and classify them."""
        x, y = self._read_axes()
        result = classify(x, y)
        if result is not Direction.NONE:
            logger.debug("joystick: %s", result.name)
        return result

    def switch_level(self) -> int:
        """Read the push switch level (0 means pressed)."""
        return int(self._read_switch())

    def poll_position(self) -> JoystickPosition:
        """Read the stick as a coarse position; no deflection is the centre."""
        return _POSITIONS.get(self.direction(), JoystickPosition.CENTER)