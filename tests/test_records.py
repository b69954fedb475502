from oledarcade.display import SSD1306_DATA_CONTINUE, Display
from oledarcade.fonts import SMALL_FONT
from oledarcade.joystick import Joystick
from oledarcade.records import RecordPage
from oledarcade.storage import CAR_RECORD, PONG_GAMES, Eeprom, initialise_records


def make_page(switches, eeprom=None):
    pushes = []
    display = Display(lambda control, payload: pushes.append(control))
    display.set_font(SMALL_FONT)
    if eeprom is None:
        eeprom = Eeprom()
        initialise_records(eeprom)
    switch_iter = iter(switches)
    joystick = Joystick(lambda: (300, 300), lambda: next(switch_iter))
    sleeps = []
    page = RecordPage(display, joystick, eeprom, sleeps.append)
    return page, display, sleeps, pushes


def data_pushes(pushes):
    return pushes.count(SSD1306_DATA_CONTINUE)


def test_draw_shows_grid_lines():
    page, display, _, _ = make_page([])
    page.draw()
    assert display.get_pixel(60, 30)
    assert display.get_pixel(95, 50)
    assert display.get_pixel(64, 20)
    assert display.get_pixel(30, 40)


def test_draw_depends_on_stored_values():
    first = Eeprom()
    initialise_records(first)
    second = Eeprom()
    initialise_records(second)
    second.write(PONG_GAMES, 7)
    page_a, display_a, _, _ = make_page([], first)
    page_b, display_b, _, _ = make_page([], second)
    page_a.draw()
    page_b.draw()
    assert display_a.buffer() != display_b.buffer()


def test_draw_is_repeatable_and_leaves_store_alone():
    eeprom = Eeprom()
    initialise_records(eeprom)
    eeprom.write(CAR_RECORD, 12)
    page, display, _, pushes = make_page([], eeprom)
    page.draw()
    first = display.buffer()
    page.draw()
    assert display.buffer() == first
    assert eeprom.read(CAR_RECORD) == 12
    assert data_pushes(pushes) == 2


def test_run_exits_at_once_when_pressed():
    page, display, sleeps, pushes = make_page([0])
    page.run()
    assert sleeps == [0.5, 0.5]
    assert data_pushes(pushes) == 0
    assert display.buffer() == bytes(len(display.buffer()))


def test_run_draws_each_frame_until_pressed():
    page, display, sleeps, pushes = make_page([1, 1, 0])
    page.run()
    assert data_pushes(pushes) == 2
    assert sleeps == [0.5, 0.005, 0.005, 0.5]
    assert not any(display.buffer())