"""One level of the brick-breaking game: its bricks, ball, paddle and rules."""

from __future__ import annotations

import enum
import re
from pathlib import Path

from basicgames.brickbreaker_objects import Ball, Brick, InputState, Paddle
from basicgames.geometry import Rect, aabb_collision

START_BALLS = 5

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class Side(enum.Enum):
    """Which way a ball struck a rectangle."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Key(enum.Enum):
    """The two keys that steer the paddle."""

    LEFT = "left"
    RIGHT = "right"


def _atoi(field: str) -> int:
    match = _LEADING_INT.match(field)
    return int(match.group(1)) if match else 0


def parse_level(text: str) -> list[tuple[int, int]]:
    """Parse ``size=N,x1,y1,x2,y2,...`` into brick positions.

    A text that does not start with the ``size`` header holds no bricks.
    """
    header, _, rest = text.partition("=")
    if header != "size":
        return []
    fields = rest.split(",")
    count = _atoi(fields[0])
    if count < 0:
        raise ValueError(f"negative number of values: {count}")
    if count % 2:
        raise ValueError(f"odd number of coordinates: {count}")
    values = fields[1:1 + count]
    if len(values) < count:
        raise ValueError(f"expected {count} values, found {len(values)}")
    numbers = [_atoi(v) for v in values]
    return list(zip(numbers[0::2], numbers[1::2]))


def load_level(path: str | Path) -> list[tuple[int, int]]:
    """Read brick positions from a level file."""
    return parse_level(Path(path).read_text())


def sides_collision(a: Rect, b: Rect, ball: Ball) -> Side | None:
    """Predict whether the ball's next step hits ``b`` from the side or from above/below."""
    if not (a.right + ball.speed_x < b.x or a.x + ball.speed_x > b.right
            or a.bottom < b.y or a.y > b.bottom):
        return Side.HORIZONTAL
    if not (a.right < b.x or a.x > b.right
            or a.bottom + ball.speed_y < b.y or a.y + ball.speed_y > b.bottom):
        return Side.VERTICAL
    return None


class Scene:
    """The state and rules of one level."""

    def __init__(self, path: str | Path, width: int, height: int):
        self.path = Path(path)
        self.width = width
        self.height = height
        self.bricks: list[Brick] = []
        self.ball_count = START_BALLS
        self.paddle = Paddle()
        self.ball = Ball()
        self.input_state = InputState()

    def load(self) -> None:
        """Place the paddle and ball and read the bricks from the level file."""
        self.paddle = Paddle(300, 730, 250, 16, 10)
        self.ball = Ball(self.paddle.x + self.paddle.w // 2 - 5, self.paddle.y - 10,
                         10, 10, 0, 0)
        self.input_state = InputState()
        self.ball_count = START_BALLS
        self.bricks = [Brick(x, y) for x, y in load_level(self.path)]

    def update(self) -> None:
        """Advance one frame."""
        ball, paddle = self.ball, self.paddle
        ball.update(self.width, self.height)
        paddle.update(self.input_state, self.width)

        ball_rect = ball.rect()
        paddle_rect = paddle.rect()

        for brick in self.bricks:
            side = sides_collision(ball_rect, brick.rect(), ball)
            if brick.destroyed or side is None:
                continue
            if side is Side.HORIZONTAL:
                ball.horizontal_bounce()
            else:
                ball.vertical_bounce()
            brick.destroyed = True

        if aabb_collision(ball_rect, paddle_rect):
            ball.vertical_bounce()
            ball.y = paddle_rect.y - ball_rect.h

        if ball.y > self.height - ball.h:
            ball.reset(paddle.x + paddle.w // 2 - ball.w // 2, paddle.y - ball.h)
            self.ball_count -= 1
            ball.is_reset = True

    def press(self, key: Key) -> None:
        """Hold a steering key; a resting ball is launched in that direction."""
        if key is Key.LEFT:
            self.input_state.paddle_left = True
        else:
            self.input_state.paddle_right = True
        if self.ball.is_reset:
            self.ball.set_direction(self.input_state)
            self.ball.is_reset = False

    def release(self, key: Key) -> None:
        if key is Key.LEFT:
            self.input_state.paddle_left = False
        else:
            self.input_state.paddle_right = False

    def is_won(self) -> bool:
        """True once every brick has been destroyed."""
        return all(brick.destroyed for brick in self.bricks)

    def is_lost(self) -> bool:
        """True once the ball has been lost more times than there are balls."""
        return self.ball_count < 0