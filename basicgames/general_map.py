"""The general star map: a fixed grid of locations, each holding a local map."""

from __future__ import annotations

import random

from basicgames.local_map import LocalMap
from basicgames.space_node import EventKind, Node, NodeType
from basicgames.vector2 import Vector2

GRID_COORDS: tuple[tuple[float, float], ...] = (
    (50, 50), (80, 50), (110, 50), (140, 50),
    (50, 80), (80, 80), (110, 80), (140, 80),
    (50, 110), (80, 110), (110, 110), (140, 110),
    (50, 140), (80, 140), (110, 140), (140, 140),
)

EDGES: tuple[tuple[int, int], ...] = (
    (0, 1), (0, 5), (0, 4), (1, 4), (1, 5), (1, 2), (1, 6),
    (2, 5), (2, 6), (2, 7), (2, 3), (3, 6), (3, 7),
    (4, 5), (4, 9), (4, 8),
    (5, 6), (5, 10), (5, 9), (5, 8),
    (6, 7), (6, 11), (6, 10), (6, 9),
    (7, 11), (7, 10),
    (8, 9), (8, 13), (8, 12),
    (9, 10), (9, 14), (9, 13), (9, 12),
    (10, 11), (10, 15), (10, 14), (10, 15),
    (11, 15), (11, 14),
    (12, 13), (13, 14), (14, 15),
)

ASTEROID_CHANCE = 10
UNCHARTED_CHANCE = 40


class GeneralMap:
    """Locations on a grid, typed at random, each with its own local map."""

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()
        self.nodes: list[Node] = []
        self.local_maps: list[LocalMap] = []
        self.current_map: LocalMap | None = None

    def generate(self) -> None:
        """Build the grid, its links, the location types and the local maps."""
        for x, y in GRID_COORDS:
            self.add_node(x, y)
        self.generate_edges()
        self.generate_types()
        self.generate_local_maps()
        self.current_map = self.local_maps[0]

    def add_node(self, x: float, y: float) -> Node:
        node = Node(Vector2(float(x), float(y)))
        self.nodes.append(node)
        return node

    def add_edge(self, u: int, v: int) -> None:
        node_u, node_v = self.nodes[u], self.nodes[v]
        node_u.add_neighbour(node_v)
        node_v.add_neighbour(node_u)

    def generate_edges(self) -> None:
        for u, v in EDGES:
            self.add_edge(u, v)

    def _roll(self) -> int:
        return self.rng.randint(1, 100)

    def generate_types(self) -> None:
        """Give every location a type.

        The first and last locations are the start and end; each gets an asteroid
        neighbour; other locations may become asteroids, their neighbours may become
        uncharted, and whatever is left is civilised.
        """
        if not self.nodes:
            raise ValueError("the map has no nodes")
        first, last = self.nodes[0], self.nodes[-1]
        first.loc_type = NodeType.START
        last.loc_type = NodeType.END

        range_start = len(first.neighbours)
        first.neighbours[self.rng.randrange(range_start)].loc_type = NodeType.ASTEROID
        self._seed_neighbours(first, range_start, len(last.neighbours))

        range_end = len(last.neighbours)
        last.neighbours[self.rng.randrange(range_end)].loc_type = NodeType.ASTEROID
        self._seed_neighbours(last, range_start, len(last.neighbours))

        for node in self.nodes:
            if node.loc_type is NodeType.UNDEFINED and self._roll() <= ASTEROID_CHANCE:
                node.loc_type = NodeType.ASTEROID

        for node in self.nodes:
            if node.loc_type is not NodeType.ASTEROID:
                continue
            for neighbour in node.neighbours:
                roll = self._roll()
                if roll <= UNCHARTED_CHANCE and neighbour.loc_type is NodeType.UNDEFINED:
                    neighbour.loc_type = NodeType.UNCHARTED

        for node in self.nodes:
            if node.loc_type is NodeType.UNDEFINED:
                node.loc_type = NodeType.CIVILISED

    def _seed_neighbours(self, node: Node, pick_range: int, attempts: int) -> None:
        """Try to make one random neighbour an asteroid and another civilised."""
        for attempt in range(attempts):
            pick = node.neighbours[self.rng.randrange(pick_range)]
            if pick.loc_type is not NodeType.UNDEFINED:
                continue
            if attempt == 0:
                pick.loc_type = NodeType.ASTEROID
            elif attempt == 1:
                pick.loc_type = NodeType.CIVILISED

    def generate_local_maps(self) -> None:
        for node in self.nodes:
            local = LocalMap(node.loc_type, self.rng)
            self.local_maps.append(local)
            local.generate()

    def handle_event(self, kind: EventKind, mouse_pos: tuple[float, float]) -> None:
        """Pass a mouse event on; clicking a location opens its local map."""
        if self.current_map is not None:
            self.current_map.handle_event(kind, mouse_pos)
        for index, node in enumerate(self.nodes):
            node.handle_event(kind, mouse_pos)
            if node.clicked:
                self.current_map = self.local_maps[index]