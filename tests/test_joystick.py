import pytest

from oledarcade.joystick import (
    Direction,
    Joystick,
    JoystickPosition,
    classify,
    position_name,
)


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (511, 1010, Direction.LEFT),
        (500, 1000, Direction.LEFT),
        (522, 1023, Direction.LEFT),
        (511, 5, Direction.RIGHT),
        (500, 0, Direction.RIGHT),
        (511, 507, Direction.STOP),
        (522, 515, Direction.STOP),
        (5, 510, Direction.UP),
        (0, 518, Direction.UP),
        (1020, 510, Direction.DOWN),
        (1018, 500, Direction.DOWN),
    ],
)
def test_classify_windows(x, y, expected):
    assert classify(x, y) is expected


@pytest.mark.parametrize(
    "x, y",
    [(523, 1010), (499, 5), (511, 516), (11, 510), (1017, 510), (300, 300)],
)
def test_classify_outside_windows(x, y):
    assert classify(x, y) is Direction.NONE


@pytest.mark.parametrize(
    "position, name",
    [
        (JoystickPosition.CENTER, "Center"),
        (JoystickPosition.UP, "Up"),
        (JoystickPosition.DOWN, "Down"),
        (JoystickPosition.LEFT, "Left"),
        (JoystickPosition.RIGHT, "Right"),
    ],
)
def test_position_name(position, name):
    assert position_name(position) == name


def test_position_name_unknown():
    assert position_name(42) == "Unknown"


def test_joystick_reads_axes_and_switch():
    joy = Joystick(lambda: (511, 1010), lambda: 0)
    assert joy.direction() is Direction.LEFT
    assert joy.switch_level() == 0


@pytest.mark.parametrize(
    "axes, position",
    [
        ((511, 1010), JoystickPosition.LEFT),
        ((511, 5), JoystickPosition.RIGHT),
        ((5, 510), JoystickPosition.UP),
        ((1020, 510), JoystickPosition.DOWN),
        ((511, 507), JoystickPosition.CENTER),
        ((300, 300), JoystickPosition.CENTER),
    ],
)
def test_poll_position(axes, position):
    joy = Joystick(lambda: axes, lambda: 1)
    assert joy.poll_position() is position