import pytest

from oledarcade.display import Display
from oledarcade.fonts import SMALL_FONT
from oledarcade.joystick import Joystick
from oledarcade.menu import POINTER_ROWS, MainWindow, MenuChoice

IDLE = (300, 300)
CENTER = (511, 510)
UP = (5, 510)
DOWN = (1020, 510)


def make_joystick(axes, switches):
    axis_iter = iter(axes)
    switch_iter = iter(switches)
    return Joystick(lambda: next(axis_iter), lambda: next(switch_iter))


def make_menu(axes, switches):
    display = Display()
    display.set_font(SMALL_FONT)
    sleeps = []
    menu = MainWindow(display, make_joystick(axes, switches), sleeps.append)
    return menu, display, sleeps


def test_idle_poll_returns_none_and_draws():
    menu, display, sleeps = make_menu([IDLE], [1])
    assert menu.poll() is None
    assert menu.pointer == 2
    assert any(display.buffer())
    assert sleeps == [0.01]


def test_down_moves_pointer_and_waits():
    menu, _, sleeps = make_menu([DOWN], [1])
    assert menu.poll() is None
    assert menu.pointer == 20
    assert 1.0 in sleeps


@pytest.mark.parametrize(
    "move, expected",
    [(DOWN, [20, 40, 2]), (UP, [40, 20, 2])],
)
def test_pointer_cycles(move, expected):
    menu, _, _ = make_menu([move] * 3, [1] * 3)
    seen = []
    for _ in range(3):
        menu.poll()
        seen.append(menu.pointer)
    assert seen == expected
    assert set(seen) == set(POINTER_ROWS)


def test_press_selects_car_and_blanks_screen():
    menu, display, _ = make_menu([CENTER], [0])
    assert menu.poll() is MenuChoice.CAR
    assert display.buffer() == bytes(len(display.buffer()))


@pytest.mark.parametrize(
    "move, choice",
    [(DOWN, MenuChoice.PONG), (UP, MenuChoice.RECORDS)],
)
def test_move_then_press(move, choice):
    menu, _, _ = make_menu([move], [0])
    assert menu.poll() is choice


def test_button_level_passes_switch_through():
    menu, _, _ = make_menu([], [1, 0])
    assert menu.button_level() == 1
    assert menu.button_level() == 0


def test_old_pointer_is_erased_after_move():
    menu, display, _ = make_menu([IDLE, DOWN], [1, 1])
    menu.poll()
    assert display.get_pixel(103, 2)
    menu.poll()
    assert display.get_pixel(103, 20)
    assert not display.get_pixel(103, 2)