"""A roguelike star map: pick locations on a general map and explore their local maps."""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass

import pygame

from basicgames.general_map import GeneralMap
from basicgames.geometry import Rect
from basicgames.local_map import LocalMap
from basicgames.space_node import EDGE_COLOUR, HOVER_OUTLINE, EventKind, Node

WINDOW_WIDTH = 1024
WINDOW_HEIGHT = 768
WINDOW_TITLE = "2DSpaceRogue"

BACKGROUND = (89, 89, 89, 255)
SHIP_COLOUR = (238, 136, 164, 255)


@dataclass
class Ship:
    """The player's ship, placed on the general map."""

    x: int = 100
    y: int = 100
    w: int = 10
    h: int = 10

    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.w, self.h)

    def set_position(self, x: int, y: int) -> None:
        self.x = x
        self.y = y


def _to_pygame(rect: Rect) -> pygame.Rect:
    return pygame.Rect(rect.x, rect.y, rect.w, rect.h)


def _draw_node(surface: pygame.Surface, node: Node) -> None:
    colour = node.fill_colour()
    if colour is None:
        return
    rect = _to_pygame(node.rect())
    pygame.draw.rect(surface, colour, rect)
    # A clicked node is filled over its outline, so the outline only shows on hover.
    if node.hovered and not node.clicked:
        pygame.draw.rect(surface, HOVER_OUTLINE, rect, 1)


def _draw_edges(surface: pygame.Surface, node: Node) -> None:
    start = (int(node.x), int(node.y))
    for neighbour in node.neighbours:
        pygame.draw.line(surface, EDGE_COLOUR, start, (int(neighbour.x), int(neighbour.y)))


def _draw_local_map(surface: pygame.Surface, local: LocalMap) -> None:
    for node in local.nodes:
        _draw_node(surface, node)
        _draw_edges(surface, node)


class SpaceRogue:
    """The game state: a generated general map and the ship."""

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()
        self.general_map = GeneralMap(self.rng)
        self.general_map.generate()
        self.ship = Ship()

    @property
    def current_map(self) -> LocalMap | None:
        return self.general_map.current_map

    def handle_event(self, kind: EventKind, mouse_pos: tuple[float, float]) -> None:
        """Pass a mouse event to the maps."""
        self.general_map.handle_event(kind, mouse_pos)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the general map and the current local map onto ``surface``."""
        surface.fill(BACKGROUND)
        for node in self.general_map.nodes:
            _draw_node(surface, node)
        if self.current_map is not None:
            _draw_local_map(surface, self.current_map)


_MOUSE_KINDS = {
    pygame.MOUSEMOTION: EventKind.MOUSE_MOTION,
    pygame.MOUSEBUTTONDOWN: EventKind.MOUSE_DOWN,
    pygame.MOUSEBUTTONUP: EventKind.MOUSE_UP,
}


def run() -> None:
    """Open the window and play until it is closed."""
    pygame.init()
    try:
        try:
            pygame.mixer.init(44100, -16, 2, 2048)
        except pygame.error:
            pass
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()
        game = SpaceRogue()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                    break
                kind = _MOUSE_KINDS.get(event.type)
                if kind is not None:
                    game.handle_event(kind, pygame.mouse.get_pos())
            game.draw(screen)
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