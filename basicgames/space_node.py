"""A location on a star map: its kind, its links and its mouse state."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from basicgames.geometry import Rect
from basicgames.vector2 import Vector2

NODE_SIZE = 20

CLICKED_COLOUR = (255, 0, 208, 255)
HOVER_OUTLINE = (255, 255, 255, 255)
EDGE_COLOUR = (0, 0, 0, 0)


class NodeType(enum.IntEnum):
    """Kinds of location; the first group belongs to the general map, the rest to local maps."""

    UNDEFINED = 0
    START = 1
    END = 2
    UNCHARTED = 3
    CIVILISED = 4
    ASTEROID = 5
    STRANDED = 6
    TRADE = 7
    WRECK = 8
    LIVE = 9


class EventKind(enum.Enum):
    """Mouse events a node reacts to."""

    MOUSE_MOTION = "motion"
    MOUSE_DOWN = "down"
    MOUSE_UP = "up"


TYPE_COLOURS: dict[NodeType, tuple[int, int, int, int]] = {
    NodeType.START: (0, 0, 0, 255),
    NodeType.END: (0, 0, 0, 255),
    NodeType.UNCHARTED: (0, 0, 255, 255),
    NodeType.CIVILISED: (0, 255, 0, 255),
    NodeType.ASTEROID: (255, 0, 0, 255),
    NodeType.STRANDED: (146, 230, 140, 255),
    NodeType.TRADE: (245, 230, 64, 255),
    NodeType.WRECK: (215, 179, 255, 255),
    NodeType.LIVE: (34, 117, 242, 255),
}


@dataclass(eq=False)
class Node:
    """A square location linked to neighbouring locations."""

    pos: Vector2
    loc_type: NodeType = NodeType.UNDEFINED
    w: int = NODE_SIZE
    h: int = NODE_SIZE
    neighbours: list[Node] = field(default_factory=list, repr=False)
    hovered: bool = False
    clicked: bool = False
    selected: bool = False

    @property
    def x(self) -> float:
        return self.pos.x

    @property
    def y(self) -> float:
        return self.pos.y

    def add_neighbour(self, other: Node) -> None:
        self.neighbours.append(other)

    def rect(self) -> Rect:
        return Rect(int(self.pos.x), int(self.pos.y), self.w, self.h)

    def fill_colour(self) -> tuple[int, int, int, int] | None:
        """The colour the node shows, or None if an undefined node is not drawn."""
        base = TYPE_COLOURS.get(self.loc_type)
        if base is None:
            return None
        return CLICKED_COLOUR if self.clicked else base

    def contains(self, point: tuple[float, float]) -> bool:
        """True if the point lies strictly inside the node's square."""
        px, py = point
        return self.x < px < self.x + self.w and self.y < py < self.y + self.h

    def handle_event(self, kind: EventKind, mouse_pos: tuple[float, float]) -> None:
        """Update the hover and click state from a mouse event."""
        if kind is EventKind.MOUSE_MOTION:
            self.hovered = self.contains(mouse_pos)
        elif kind is EventKind.MOUSE_DOWN:
            if self.hovered:
                self.clicked = True
        elif kind is EventKind.MOUSE_UP:
            self.clicked = False