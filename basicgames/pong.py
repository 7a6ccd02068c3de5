"""Pong against a computer-controlled paddle, first to seven points wins."""

from __future__ import annotations

import enum
from collections.abc import Sequence

import pygame

from basicgames.geometry import aabb_collision
from basicgames.pong_objects import Ball, InputState, Paddle

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 480
WINNING_SCORE = 7

BACKGROUND = (0x00, 0x00, 0x50)
FOREGROUND = (0xFF, 0xFF, 0xFF)


class Event(enum.Enum):
    """Things that happened during one update, used to trigger sounds."""

    PADDLE_HIT = "paddle hit"
    SCORE = "score"
    VICTORY = "victory"


class PongMatch:
    """The state and rules of one match, independent of any display."""

    def __init__(self) -> None:
        self.ball = Ball(0, 100, 32, 32, 6, 6)
        self.left_paddle = Paddle(x=0, y=200, w=32, h=128, speed_y=4)
        self.right_paddle = Paddle(x=SCREEN_WIDTH - 32, y=200, w=32, h=128, speed_y=4)
        self.input_left = InputState()
        self.input_right = InputState()
        self.player_score = 0
        self.opponent_score = 0
        self.finished = False
        self.result_text = ""

    def update(self) -> list[Event]:
        """Advance one frame; return the events that occurred."""
        events: list[Event] = []
        if self.finished:
            return events

        ball = self.ball
        ball.update(SCREEN_WIDTH, SCREEN_HEIGHT)
        self.left_paddle.update(self.input_left, SCREEN_HEIGHT)
        self.right_paddle.update_ai(SCREEN_HEIGHT, ball.y)

        ball_rect = ball.rect()
        left_rect = self.left_paddle.rect()
        right_rect = self.right_paddle.rect()
        if aabb_collision(ball_rect, left_rect):
            ball.horizontal_bounce(left_rect.x + left_rect.w)
            events.append(Event.PADDLE_HIT)
        elif aabb_collision(ball_rect, right_rect):
            ball.horizontal_bounce(right_rect.x - right_rect.w)
            events.append(Event.PADDLE_HIT)

        if ball.x > SCREEN_WIDTH - ball.w:
            self.player_score += 1
            ball.x = SCREEN_WIDTH // 2
            events.append(Event.SCORE)
            if self.player_score >= WINNING_SCORE:
                self._finish("Player 1 wins!", events)
        elif ball.x < 0:
            self.opponent_score += 1
            ball.x = SCREEN_WIDTH // 2
            events.append(Event.SCORE)
            if self.opponent_score >= WINNING_SCORE:
                self._finish("Computer wins!", events)
        return events

    def _finish(self, text: str, events: list[Event]) -> None:
        self.finished = True
        self.result_text = text
        events.append(Event.VICTORY)


class SoundEffect:
    """A sound loaded from a file; playing it is silent if loading failed."""

    def __init__(self, filename: str):
        self.filename = filename
        self._sound: pygame.mixer.Sound | None = None

    @property
    def loaded(self) -> bool:
        return self._sound is not None

    def load(self) -> None:
        try:
            self._sound = pygame.mixer.Sound(self.filename)
        except (pygame.error, FileNotFoundError, OSError):
            self._sound = None

    def play(self) -> bool:
        """Play the sound once; return whether anything was played."""
        if self._sound is None:
            return False
        self._sound.play()
        return True


class TextLabel:
    """A line of text stretched to fit a fixed rectangle."""

    FONT_SIZE = 28

    def __init__(self, x: int, y: int, w: int, h: int):
        self.x = x
        self.y = y
        self.w = w
        self.h = h
        self.colour = FOREGROUND
        self.text = ""
        self._font: pygame.font.Font | None = None
        self._rendered: pygame.Surface | None = None

    def set_text(self, text: str) -> None:
        """Change the text, rendering it again only when it differs."""
        if text == self.text and (self._rendered is not None or not text):
            return
        self.text = text
        if not text:
            self._rendered = None
            return
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, self.FONT_SIZE)
        self._rendered = self._font.render(text, False, self.colour)

    def draw(self, surface: pygame.Surface) -> None:
        if self._rendered is None:
            return
        scaled = pygame.transform.scale(self._rendered, (self.w, self.h))
        surface.blit(scaled, (self.x, self.y))


_LEFT_KEYS = {pygame.K_z: "paddle_up", pygame.K_s: "paddle_down"}
_RIGHT_KEYS = {pygame.K_i: "paddle_up", pygame.K_j: "paddle_down"}


def _apply_key(match: PongMatch, key: int, pressed: bool) -> None:
    if key in _LEFT_KEYS:
        setattr(match.input_left, _LEFT_KEYS[key], pressed)
    if key in _RIGHT_KEYS:
        setattr(match.input_right, _RIGHT_KEYS[key], pressed)


def run() -> None:
    """Open the window and play until it is closed."""
    pygame.init()
    try:
        try:
            pygame.mixer.init(44100, -16, 2, 2048)
        except pygame.error:
            pass
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Pong")
        clock = pygame.time.Clock()

        match = PongMatch()
        player_label = TextLabel(120, 50, 25, 50)
        opponent_label = TextLabel(650, 50, 25, 50)
        result_label = TextLabel(SCREEN_WIDTH // 2 - 50, SCREEN_HEIGHT // 2, 100, 25)
        sounds = {
            Event.VICTORY: SoundEffect("victory.wav"),
            Event.PADDLE_HIT: SoundEffect("paddleHit.wav"),
            Event.SCORE: SoundEffect("score.wav"),
        }
        for sound in sounds.values():
            sound.load()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                    _apply_key(match, event.key, event.type == pygame.KEYDOWN)

            for happened in match.update():
                sounds[happened].play()

            player_label.set_text(str(match.player_score))
            opponent_label.set_text(str(match.opponent_score))
            result_label.set_text(match.result_text)

            screen.fill(BACKGROUND)
            for label in (player_label, opponent_label, result_label):
                label.draw(screen)
            for item in (match.ball, match.left_paddle, match.right_paddle):
                r = item.rect()
                pygame.draw.rect(screen, FOREGROUND, pygame.Rect(r.x, r.y, r.w, r.h))
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game."""
    run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())