"""Dodge-the-traffic racing game."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from typing import Callable, Optional

from .display import Display
from .joystick import Direction, Joystick
from .storage import CAR_GAMES, CAR_RECORD, Eeprom

Sleep = Callable[[float], None]

ROAD_LEFT = 25
ROAD_RIGHT = 103
PASS_LINE = 70
START_SPEED = 0.3
ACCELERATION = 0.001
FRAME_DELAY = 0.005
CRASH_DELAY = 2.5
ENTER_DELAY = 0.5


@dataclass
class Car:
    """A traffic car; ``x`` runs down the screen, ``y`` is its lane column."""

    x: float
    y: float
    lanes: tuple[int, int]
    restart: float
    start: tuple[float, float]
    fresh_lane: bool = False

    def reset(self) -> None:
        self.x, self.y = self.start


def _traffic() -> list[Car]:
    return [
        Car(-10, 40, (30, 50), -10, (-10, 40), fresh_lane=True),
        Car(-50, 70, (50, 70), -80, (-50, 70)),
        Car(-30, 60, (70, 85), -60, (-30, 60)),
    ]


class CarGame:
    """Steer a car between the road edges and avoid the oncoming traffic."""

    def __init__(self, display: Display, joystick: Joystick, eeprom: Eeprom,
                 sleep: Sleep = time.sleep,
                 rng: Optional[random.Random] = None) -> None:
        self._display = display
        self._joystick = joystick
        self._eeprom = eeprom
        self._sleep = sleep
        self._rng = rng if rng is not None else random.Random()
        self.cars = _traffic()
        self.speed = START_SPEED
        self.score = 0
        self.best = 0
        self.x1, self.x2 = 40.0, 50.0
        self.y1, self.y2 = 45.0, 60.0
        self.games = eeprom.read(CAR_GAMES)
        self.stored_record = eeprom.read(CAR_RECORD)

    def reset(self) -> None:
        """Start a new round, keeping the best score and counting the game."""
        self.speed = START_SPEED
        for car in self.cars:
            car.reset()
        self.best = max(self.score, self.best)
        self.score = 0
        self.x1, self.x2 = 40.0, 50.0
        self.y1, self.y2 = 45.0, 60.0
        self.games += 1

    def move_player(self, direction: Direction) -> None:
        """Move the player's car one notch, staying on the road."""
        if direction is Direction.RIGHT:
            if self.x1 + 5 < ROAD_RIGHT and self.x2 + 5 < ROAD_RIGHT:
                self.x1 += 2
                self.x2 += 2
        elif direction is Direction.LEFT:
            if self.x1 - 5 > ROAD_LEFT and self.x2 - 5 > ROAD_LEFT:
                self.x1 -= 2
                self.x2 -= 2
        elif direction is Direction.DOWN:
            if self.y1 + 1 < 64 and self.y2 < 64:
                self.y1 += 2
                self.y2 += 2
        elif direction is Direction.UP:
            if self.y1 - 1 > 0 and self.y2 > 0:
                self.y1 -= 2
                self.y2 -= 2

    def _hits(self, car: Car) -> bool:
        return (car.x - 15 < self.y1 <= car.x + 10
                and car.y - 14 < self.x1 < car.y + 14)

    def collided(self) -> bool:
        """Tell whether the player overlaps any traffic car."""
        return any(self._hits(car) for car in self.cars)

    def _draw_car(self, car: Car) -> None:
        d, x, y = self._display, car.x, car.y
        d.draw_rect(y, x, y + 10, x + 10)
        d.draw_rect(y, x + 1, y - 3, x + 4)
        d.draw_rect(y, x + 7, y - 3, x + 10)
        d.draw_rect(y + 10, x + 7, y + 13, x + 10)
        d.draw_rect(y + 10, x + 1, y + 13, x + 4)

    def _respawn(self, car: Car) -> None:
        if car.x <= PASS_LINE:
            return
        low, high = car.lanes
        lane = self._rng.randrange(low, high)
        if car.fresh_lane:
            while lane == car.y:
                lane = self._rng.randrange(low, high)
        car.y = lane
        car.x = car.restart
        self.score += 1

    def _draw_player(self) -> None:
        d = self._display
        x1, y1, x2, y2 = self.x1, self.y1, self.x2, self.y2
        d.draw_rect(x1, y1, x2, y2)
        d.draw_rect(x1, y1 + 1, x2 - 14, y2 - 9)
        d.draw_rect(x1, y1 + 10, x2 - 14, y2)
        d.draw_rect(x1 + 14, y1 + 10, x2, y2)
        d.draw_rect(x1 + 14, y1 + 1, x2, y2 - 9)

    def _crash(self) -> None:
        d = self._display
        d.clear()
        d.print("GAME OVER!", 30, 30)
        d.update()
        self._sleep(CRASH_DELAY)
        self.reset()

    def step(self) -> bool:
        """Play one frame; return True if the player crashed in it."""
        direction = self._joystick.direction()
        d = self._display
        d.clear()
        d.draw_line(ROAD_LEFT, 1, ROAD_LEFT, 64)
        d.draw_line(ROAD_RIGHT, 1, ROAD_RIGHT, 64)
        d.print("c=", 2, 2)
        d.print(str(self.score), 14, 2)
        d.print("r=", 2, 10)
        d.print(str(self.best), 14, 10)
        for car in self.cars:
            self._draw_car(car)
            self._respawn(car)
        self.move_player(direction)
        self._draw_player()
        crashed = self.collided()
        if crashed:
            self._crash()
        self.speed += ACCELERATION
        for car in self.cars:
            car.x += self.speed
        d.update()
        self._sleep(FRAME_DELAY)
        return crashed

    def run(self) -> None:
        """Play until the switch is pressed, then store the counters."""
        self._sleep(ENTER_DELAY)
        while self._joystick.switch_level() != 0:
            self.step()
        self._eeprom.write(CAR_GAMES, self.games)
        if self.best > self.stored_record:
            self._eeprom.write(CAR_RECORD, self.best)
        self._display.clear()
        self._sleep(ENTER_DELAY)