"""Byte-addressed persistent store holding play counts and records."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

DEFAULT_SIZE = 1024
ERASED = 0xFF

FLAG_ADDRESS = 0
PONG_GAMES = 10
PONG_RECORD = 11
CAR_GAMES = 15
CAR_RECORD = 16

PathLike = Union[str, "os.PathLike[str]"]


class Eeprom:
    """A fixed-size array of bytes; a fresh store reads 0xFF everywhere."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size <= 0:
            raise ValueError(f"size must be positive, got {size}")
        self._data = bytearray([ERASED]) * size

    def __len__(self) -> int:
        return len(self._data)

    def _check(self, address: int) -> int:
        if not 0 <= address < len(self._data):
            raise IndexError(f"address {address} outside 0..{len(self._data) - 1}")
        return address

    def read(self, address: int) -> int:
        """Return the byte stored at ``address``."""
        return self._data[self._check(address)]

    def write(self, address: int, value: int) -> None:
        """Store the low eight bits of ``value`` at ``address``."""
        self._data[self._check(address)] = int(value) & 0xFF

    def save(self, path: PathLike) -> None:
        """Write the whole store to a file."""
        Path(path).write_bytes(bytes(self._data))

    def load(self, path: PathLike) -> None:
        """Replace the contents with a file written by :meth:`save`."""
        data = Path(path).read_bytes()
        if len(data) != len(self._data):
            raise ValueError(
                f"file holds {len(data)} bytes, store has {len(self._data)}"
            )
        self._data[:] = data


def initialise_records(eeprom: Eeprom) -> bool:
    """Zero the counters on first use; return True if that happened."""
    if eeprom.read(FLAG_ADDRESS) == 1:
        return False
    eeprom.write(FLAG_ADDRESS, 1)
    for address in (PONG_GAMES, PONG_RECORD, CAR_GAMES, CAR_RECORD):
        eeprom.write(address, 0)
    return True