"""Single-player pong: keep the ball off the bottom edge."""

from __future__ import annotations

import random
import time
from typing import Callable, Optional

from .display import Display
from .joystick import Direction, Joystick
from .storage import PONG_GAMES, PONG_RECORD, Eeprom

Sleep = Callable[[float], None]

PADDLE_WIDTH = 20
PADDLE_STEP = 3
BALL_RADIUS = 4
ACCELERATION = 0.001
FRAME_DELAY = 0.005
SERVE_DELAY = 0.05
START_DELAY = 0.2
MISS_DELAY = 1.0
EXIT_DELAY = 0.5


class PongGame:
    """Bounce a ball off the walls and a paddle along the bottom."""

    def __init__(self, display: Display, joystick: Joystick, eeprom: Eeprom,
                 sleep: Sleep = time.sleep,
                 rng: Optional[random.Random] = None) -> None:
        self._display = display
        self._joystick = joystick
        self._eeprom = eeprom
        self._sleep = sleep
        self._rng = rng if rng is not None else random.Random()
        self.paddle = 30.0
        self.ball_x = 30.0
        self.ball_y = 35.0
        self.dx = 1.0
        self.dy = 1.0
        self.speed = 0.0
        self.score = 0
        self.best = 0
        self.games = eeprom.read(PONG_GAMES)
        self.stored_record = eeprom.read(PONG_RECORD)

    def serve(self) -> None:
        """Place the ball and pick its directions at random."""
        start = self._rng.randrange(6, 45)
        self.ball_x = float(start)
        self._sleep(SERVE_DELAY)
        self._rng.randrange(6, 120)
        self.ball_y = float(start)
        self._sleep(SERVE_DELAY)
        vertical = self._rng.randrange(1, 1024)
        self._sleep(SERVE_DELAY)
        self.dy = -1.0 if vertical % 2 == 0 else 1.0
        self._rng.randrange(1, 1024)
        self._sleep(SERVE_DELAY)
        horizontal = self._rng.randrange(1, 1024)
        self.dx = -1.0 if horizontal % 2 == 0 else 1.0

    def _miss(self) -> None:
        self.best = max(self.best, self.score)
        d = self._display
        d.clear()
        d.print("GAME OVER!", 30, 20)
        d.print("Your chet:", 20, 30)
        d.print(str(self.score), 100, 30)
        d.print("Record:", 20, 40)
        d.print(str(self.best), 100, 40)
        d.update()
        self._sleep(MISS_DELAY)
        self.paddle = 30.0
        self.ball_x = 30.0
        self.ball_y = 35.0
        self.speed = 0.0
        self.score = 0
        self.games += 1

    def move_ball(self) -> bool:
        """Bounce and advance the ball; return True if it was missed."""
        missed = False
        if self.ball_y - 5 <= 1:
            self.dy = -self.dy
        if self.ball_y >= 62:
            if self.paddle - 2 <= self.ball_x <= self.paddle + 22:
                self.dy = -self.dy
                self.score += 1
            else:
                self._miss()
                missed = True
        if self.ball_x - 5 <= 1:
            self.dx = -self.dx
        if self.ball_x + 5 >= 128:
            self.dx = -self.dx

        self.speed += ACCELERATION
        self.ball_y += self.dy + (self.speed if self.dy > 0 else -self.speed)
        self.ball_x += self.dx + (self.speed if self.dx > 0 else -self.speed)
        return missed

    def move_paddle(self, direction: Direction) -> None:
        """Slide the paddle, keeping it on screen."""
        if direction is Direction.RIGHT and self.paddle + 21 < 127:
            self.paddle += PADDLE_STEP
        if direction is Direction.LEFT and self.paddle - 1 > 1:
            self.paddle -= PADDLE_STEP

    def step(self) -> bool:
        """Play one frame; return True if the ball was missed in it."""
        direction = self._joystick.direction()
        d = self._display
        d.clear()
        d.draw_line(1, 1, 1, 64)
        d.draw_line(127, 1, 127, 64)
        d.draw_line(1, 1, 128, 1)
        missed = self.move_ball()
        d.draw_circle(self.ball_x, self.ball_y, BALL_RADIUS)
        self.move_paddle(direction)
        d.draw_line(self.paddle, 63, self.paddle + PADDLE_WIDTH, 63)
        d.update()
        self._sleep(FRAME_DELAY)
        return missed

    def run(self) -> None:
        """Play until the switch is pressed, then store the counters."""
        self.serve()
        self._sleep(START_DELAY)
        while self._joystick.switch_level() != 0:
            self.step()
        self._eeprom.write(PONG_GAMES, self.games)
        if self.best > self.stored_record:
            self._eeprom.write(PONG_RECORD, self.best)
        self._display.clear()
        self._sleep(EXIT_DELAY)