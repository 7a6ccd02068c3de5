"""The ball, bricks, paddle and input flags of a brick-breaking game."""

from __future__ import annotations

from dataclasses import dataclass

from basicgames.geometry import Rect

LAUNCH_SPEED = 6
BRICK_SIZE = 40


@dataclass
class InputState:
    """Which movement keys are currently held."""

    paddle_left: bool = False
    paddle_right: bool = False


@dataclass
class Ball:
    """A ball that bounces off the left, right and top edges of the screen."""

    x: int = 0
    y: int = 0
    w: int = 10
    h: int = 10
    speed_x: int = 0
    speed_y: int = 0
    is_reset: bool = True

    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.w, self.h)

    def reset(self, x: int, y: int) -> None:
        """Place the ball at ``(x, y)`` and stop it."""
        self.x = x
        self.y = y
        self.speed_x = 0
        self.speed_y = 0

    def set_direction(self, input_state: InputState) -> None:
        """Launch the ball diagonally towards the side the paddle is moving."""
        if input_state.paddle_left:
            self.speed_x = -LAUNCH_SPEED
            self.speed_y = LAUNCH_SPEED
        elif input_state.paddle_right:
            self.speed_x = LAUNCH_SPEED
            self.speed_y = LAUNCH_SPEED

    def update(self, screen_width: int, screen_height: int) -> None:
        """Move one step and bounce off the left, right and top edges."""
        self.x += self.speed_x
        self.y += self.speed_y
        if self.x < 0:
            self.horizontal_bounce()
        if self.x > screen_width - self.w:
            self.horizontal_bounce()
        if self.y < 0:
            self.vertical_bounce()

    def horizontal_bounce(self) -> None:
        self.speed_x = -self.speed_x

    def vertical_bounce(self) -> None:
        self.speed_y = -self.speed_y


@dataclass
class Brick:
    """A square brick that disappears once hit."""

    x: int
    y: int
    w: int = BRICK_SIZE
    h: int = BRICK_SIZE
    destroyed: bool = False

    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.w, self.h)


@dataclass
class Paddle:
    """A horizontal paddle that moves left and right within the screen."""

    x: int = 0
    y: int = 0
    w: int = 250
    h: int = 16
    speed_x: int = 10

    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.w, self.h)

    def move_left(self) -> None:
        self.x = max(self.x - self.speed_x, 0)

    def move_right(self, screen_width: int) -> None:
        self.x = min(self.x + self.speed_x, screen_width - self.w)

    def update(self, input_state: InputState, screen_width: int) -> None:
        """Move according to the held keys; left wins when both are held."""
        if input_state.paddle_left:
            self.move_left()
        elif input_state.paddle_right:
            self.move_right(screen_width)