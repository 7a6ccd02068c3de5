import random

import pytest

from basicgames.general_map import EDGES, GRID_COORDS, GeneralMap
from basicgames.space_node import EventKind, NodeType


def _grid(seed=0):
    general = GeneralMap(random.Random(seed))
    for x, y in GRID_COORDS:
        general.add_node(x, y)
    general.generate_edges()
    return general


def test_nodes_follow_grid_coordinates():
    general = _grid()
    assert [(n.x, n.y) for n in general.nodes] == [
        (float(x), float(y)) for x, y in GRID_COORDS
    ]


def test_add_edge_links_both_ways():
    general = GeneralMap()
    a = general.add_node(0, 0)
    b = general.add_node(10, 10)
    general.add_edge(0, 1)
    assert a.neighbours == [b]
    assert b.neighbours == [a]


def test_edges_match_listing():
    general = _grid()
    nodes = general.nodes
    assert nodes[0].neighbours == [nodes[1], nodes[5], nodes[4]]
    assert nodes[15].neighbours == [nodes[10], nodes[10], nodes[11], nodes[14]]
    assert sum(len(n.neighbours) for n in nodes) == 2 * len(EDGES)


def test_generate_types_on_empty_map_raises():
    with pytest.raises(ValueError):
        GeneralMap(random.Random(0)).generate_types()


@pytest.mark.parametrize("seed", range(8))
def test_generate_types_invariants(seed):
    general = _grid(seed)
    general.generate_types()
    nodes = general.nodes
    assert nodes[0].loc_type is NodeType.START
    assert nodes[-1].loc_type is NodeType.END
    assert all(n.loc_type is not NodeType.UNDEFINED for n in nodes)
    assert [n.loc_type for n in nodes].count(NodeType.START) == 1
    assert any(n.loc_type is NodeType.ASTEROID for n in nodes[0].neighbours)
    assert any(n.loc_type is NodeType.ASTEROID for n in nodes[-1].neighbours)
    for node in nodes:
        if node.loc_type is NodeType.UNCHARTED:
            assert any(n.loc_type is NodeType.ASTEROID for n in node.neighbours)


@pytest.mark.parametrize("seed", [0, 1])
def test_generate_builds_a_local_map_per_node(seed):
    general = GeneralMap(random.Random(seed))
    general.generate()
    assert len(general.local_maps) == len(general.nodes) == len(GRID_COORDS)
    assert general.current_map is general.local_maps[0]
    for node, local in zip(general.nodes, general.local_maps):
        assert local.map_type is node.loc_type
        assert local.nodes


def test_same_seed_gives_same_map():
    a = GeneralMap(random.Random(42))
    b = GeneralMap(random.Random(42))
    a.generate()
    b.generate()
    assert [n.loc_type for n in a.nodes] == [n.loc_type for n in b.nodes]
    assert ([n.pos for n in a.local_maps[3].nodes]
            == [n.pos for n in b.local_maps[3].nodes])


def test_clicking_a_location_opens_its_local_map():
    general = GeneralMap(random.Random(7))
    general.generate()
    node_x, node_y = GRID_COORDS[5]
    pos = (node_x + 5, node_y + 5)
    general.handle_event(EventKind.MOUSE_MOTION, pos)
    assert general.current_map is general.local_maps[0]
    general.handle_event(EventKind.MOUSE_DOWN, pos)
    assert general.current_map is general.local_maps[5]
    general.handle_event(EventKind.MOUSE_UP, pos)
    assert not general.nodes[5].clicked
    assert general.current_map is general.local_maps[5]