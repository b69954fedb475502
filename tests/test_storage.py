import pytest

from oledarcade.storage import (
    CAR_GAMES,
    CAR_RECORD,
    FLAG_ADDRESS,
    PONG_GAMES,
    PONG_RECORD,
    Eeprom,
    initialise_records,
)


def test_fresh_store_reads_erased():
    assert Eeprom().read(5) == 255


def test_write_read_round_trip():
    store = Eeprom(32)
    store.write(3, 42)
    assert store.read(3) == 42
    assert len(store) == 32


def test_write_keeps_low_byte():
    store = Eeprom(16)
    store.write(1, 256 + 7)
    assert store.read(1) == 7


@pytest.mark.parametrize("address", [-1, 16, 100])
def test_out_of_range_address(address):
    store = Eeprom(16)
    with pytest.raises(IndexError):
        store.read(address)
    with pytest.raises(IndexError):
        store.write(address, 1)


def test_bad_size():
    with pytest.raises(ValueError):
        Eeprom(0)


def test_save_load_round_trip(tmp_path):
    path = tmp_path / "store.bin"
    store = Eeprom(64)
    store.write(10, 9)
    store.write(63, 200)
    store.save(path)
    other = Eeprom(64)
    other.load(path)
    assert other.read(10) == 9
    assert other.read(63) == 200


def test_load_wrong_size(tmp_path):
    path = tmp_path / "store.bin"
    Eeprom(32).save(path)
    with pytest.raises(ValueError):
        Eeprom(64).load(path)


def test_initialise_records_first_use():
    store = Eeprom()
    assert initialise_records(store) is True
    assert store.read(FLAG_ADDRESS) == 1
    for address in (PONG_GAMES, PONG_RECORD, CAR_GAMES, CAR_RECORD):
        assert store.read(address) == 0


def test_initialise_records_keeps_existing():
    store = Eeprom()
    initialise_records(store)
    store.write(CAR_RECORD, 12)
    assert initialise_records(store) is False
    assert store.read(CAR_RECORD) == 12