"""A randomly laid out local map of connected encounter sites."""

from __future__ import annotations

import random

from basicgames.space_node import EventKind, Node, NodeType
from basicgames.vector2 import Vector2

NUM_NODES = 12
MIN_SPACING = 50
MAX_SPREAD = 600
EDGE_RANGE = 200

_S, _T, _W, _L = NodeType.STRANDED, NodeType.TRADE, NodeType.WRECK, NodeType.LIVE
_ENDPOINT_TABLE = ((25, _S), (50, _T), (75, _W), (100, _L))

# For each kind of general-map location: upper roll bounds (1-100) and the site they give.
TYPE_TABLES: dict[NodeType, tuple[tuple[int, NodeType], ...]] = {
    NodeType.START: _ENDPOINT_TABLE,
    NodeType.END: _ENDPOINT_TABLE,
    NodeType.UNCHARTED: ((10, _S), (50, _T), (60, _W), (100, _L)),
    NodeType.CIVILISED: ((40, _S), (45, _T), (85, _W), (100, _L)),
    NodeType.ASTEROID: ((40, _S), (45, _T), (90, _W), (100, _L)),
}


class LocalMap:
    """Sites spread over the screen, linked to their near neighbours."""

    def __init__(self, map_type: NodeType = NodeType.UNDEFINED,
                 rng: random.Random | None = None):
        self.map_type = NodeType(map_type)
        self.rng = rng or random.Random()
        self.nodes: list[Node] = []
        self.selected = False

    def generate(self) -> None:
        """Place sites until the map is full, linking each new one, then give them types."""
        while len(self.nodes) < NUM_NODES:
            coord = self.random_coord()
            if not self.nodes:
                self.add_node(coord)
                continue
            if all(MIN_SPACING <= (node.pos - coord).length() <= MAX_SPREAD
                   for node in self.nodes):
                self.connect(self.add_node(coord))
        self.assign_types()

    def random_coord(self) -> Vector2:
        x = self.rng.randrange(924) + 50
        y = self.rng.randrange(384) + 192
        return Vector2(float(x), float(y))

    def assign_types(self) -> None:
        """Mark the leftmost site as start, the rightmost as end, and roll the rest."""
        if not self.nodes:
            raise ValueError("the map has no nodes")
        min(self.nodes, key=lambda n: n.x).loc_type = NodeType.START
        max(self.nodes, key=lambda n: n.x).loc_type = NodeType.END

        table = TYPE_TABLES.get(self.map_type)
        if table is None:
            return
        for node in self.nodes:
            if node.loc_type is NodeType.UNDEFINED:
                roll = self.rng.randint(1, 100)
                node.loc_type = next(kind for bound, kind in table if roll <= bound)

    def connect(self, node: Node) -> None:
        """Link a site to every other site in range, or else to the nearest one."""
        distances = [(other, (node.pos - other.pos).length()) for other in self.nodes]
        others = [(other, d) for other, d in distances if d != 0]
        near = [other for other, d in others if d < EDGE_RANGE]
        if not near and others:
            near = [min(others, key=lambda pair: pair[1])[0]]
        for other in near:
            node.add_neighbour(other)
            other.add_neighbour(node)

    def add_node(self, pos: Vector2) -> Node:
        node = Node(pos)
        self.nodes.append(node)
        return node

    def handle_event(self, kind: EventKind, mouse_pos: tuple[float, float]) -> Node | None:
        """Pass a mouse event to every site; return the site that is clicked, if any."""
        clicked = None
        for node in self.nodes:
            node.handle_event(kind, mouse_pos)
            if node.clicked and clicked is None:
                clicked = node
        return clicked