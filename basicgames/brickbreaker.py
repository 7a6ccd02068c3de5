"""Brick breaker: clear each level's bricks before running out of balls."""

from __future__ import annotations

import argparse
import enum
from collections.abc import Sequence
from pathlib import Path

import pygame

from basicgames.brickbreaker_scene import Key, Scene
from basicgames.pong import TextLabel

WINDOW_WIDTH = 1024
WINDOW_HEIGHT = 768
LEVEL_FILES = ("scene00.txt", "scene01.txt", "scene02.txt")

BACKGROUND = (0, 0, 0)
FOREGROUND = (0xFF, 0xFF, 0xFF)

_KEYS = {pygame.K_q: Key.LEFT, pygame.K_s: Key.RIGHT}


class Status(enum.Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class BrickBreaker:
    """A sequence of levels played one after another."""

    def __init__(self, level_paths: Sequence[str | Path]):
        if not level_paths:
            raise ValueError("at least one level is needed")
        self.scenes = [Scene(p, WINDOW_WIDTH, WINDOW_HEIGHT) for p in level_paths]
        self.scene_index = 0
        self.status = Status.PLAYING
        self.current.load()

    @property
    def current(self) -> Scene:
        return self.scenes[self.scene_index]

    def update(self) -> Status:
        """Advance one frame, moving to the next level when this one is cleared."""
        if self.status is not Status.PLAYING:
            return self.status
        scene = self.current
        scene.update()
        if scene.is_won():
            if self.scene_index + 1 < len(self.scenes):
                self.scene_index += 1
                self.current.load()
            else:
                self.status = Status.WON
        elif scene.is_lost():
            self.status = Status.LOST
        return self.status


def _draw(screen: pygame.Surface, scene: Scene, label: TextLabel) -> None:
    screen.fill(BACKGROUND)
    items = [scene.paddle, scene.ball]
    items.extend(brick for brick in scene.bricks if not brick.destroyed)
    for item in items:
        r = item.rect()
        pygame.draw.rect(screen, FOREGROUND, pygame.Rect(r.x, r.y, r.w, r.h))
    label.set_text(str(scene.ball_count))
    label.draw(screen)
    pygame.display.flip()


def run(level_dir: str | Path = ".") -> Status:
    """Open the window and play the levels found in ``level_dir``."""
    game = BrickBreaker([Path(level_dir) / name for name in LEVEL_FILES])
    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("Brick Breaker")
        clock = pygame.time.Clock()
        label = TextLabel(50, 50, 20, 50)
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return game.status
                if event.type in (pygame.KEYDOWN, pygame.KEYUP) and event.key in _KEYS:
                    key = _KEYS[event.key]
                    if event.type == pygame.KEYDOWN:
                        game.current.press(key)
                    else:
                        game.current.release(key)
            if game.update() is not Status.PLAYING:
                return game.status
            _draw(screen, game.current, label)
            clock.tick(60)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game."""
    parser = argparse.ArgumentParser(description="Play brick breaker.")
    parser.add_argument("level_dir", nargs="?", default=".",
                        help="directory holding the level files")
    args = parser.parse_args(argv)
    run(args.level_dir)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())