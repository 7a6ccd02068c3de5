"""The ball, the paddles and the input flags of a game of Pong."""

from __future__ import annotations

from dataclasses import dataclass

from basicgames.geometry import Rect


@dataclass
class InputState:
    """Which movement keys are currently held for one paddle."""

    paddle_up: bool = False
    paddle_down: bool = False


@dataclass
class Ball:
    """A square ball that bounces off the top and bottom of the screen."""

    x: int = 0
    y: int = 0
    w: int = 32
    h: int = 32
    speed_x: int = 6
    speed_y: int = 6

    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.w, self.h)

    def update(self, screen_width: int, screen_height: int) -> None:
        """Move one step and bounce off the top or bottom edge."""
        self.x += self.speed_x
        self.y += self.speed_y
        if self.y < 0:
            self.vertical_bounce(0)
        if self.y > screen_height - self.h:
            self.vertical_bounce(screen_height - self.h)

    def horizontal_bounce(self, x: int) -> None:
        """Reverse horizontal direction and place the ball at ``x``."""
        self.speed_x = -self.speed_x
        self.x = x

    def vertical_bounce(self, y: int) -> None:
        """Reverse vertical direction and place the ball at ``y``."""
        self.speed_y = -self.speed_y
        self.y = y


@dataclass
class Paddle:
    """A vertical paddle that moves up and down within the screen."""

    x: int = 0
    y: int = 0
    w: int = 32
    h: int = 128
    speed_y: int = 6

    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.w, self.h)

    def update(self, input_state: InputState, screen_height: int) -> None:
        """Move according to the held keys."""
        if input_state.paddle_up:
            self.move_up()
        if input_state.paddle_down:
            self.move_down(screen_height)

    def update_ai(self, screen_height: int, ball_y: int) -> None:
        """Follow the ball when it leaves the middle half of the paddle."""
        quarter = self.h // 4
        if ball_y < self.y + quarter:
            self.move_up()
        if ball_y > self.y + quarter * 3:
            self.move_down(screen_height)

    def move_up(self) -> None:
        self.y = max(self.y - self.speed_y, 0)

    def move_down(self, screen_height: int) -> None:
        self.y = min(self.y + self.speed_y, screen_height - self.h)