import pytest

from basicgames.geometry import Rect, aabb_collision


def test_overlapping_rects_collide():
    a = Rect(10, 10, 20, 20)
    b = Rect(15, 15, 20, 20)
    assert aabb_collision(a, b) is True


def test_separated_rects_do_not_collide():
    a = Rect(0, 0, 10, 10)
    b = Rect(50, 50, 10, 10)
    assert aabb_collision(a, b) is False


def test_touching_edges_count_as_collision():
    a = Rect(0, 0, 10, 10)
    b = Rect(a.right, 0, 10, 10)
    assert aabb_collision(a, b) is True


def test_one_pixel_gap_is_not_a_collision():
    a = Rect(0, 0, 10, 10)
    b = Rect(a.right + 1, 0, 10, 10)
    assert aabb_collision(a, b) is False


def test_vertical_gap_is_not_a_collision():
    a = Rect(0, 0, 10, 10)
    b = Rect(0, a.bottom + 1, 10, 10)
    assert aabb_collision(a, b) is False


def test_contained_rect_collides():
    outer = Rect(0, 0, 100, 100)
    inner = Rect(40, 40, 5, 5)
    assert aabb_collision(outer, inner) is True


@pytest.mark.parametrize(
    "a, b",
    [
        (Rect(0, 0, 10, 10), Rect(5, 5, 10, 10)),
        (Rect(0, 0, 10, 10), Rect(30, 0, 10, 10)),
        (Rect(100, 100, 1, 1), Rect(0, 0, 100, 100)),
        (Rect(-5, -5, 3, 3), Rect(-1, -1, 2, 2)),
    ],
)
def test_collision_is_symmetric(a, b):
    assert aabb_collision(a, b) == aabb_collision(b, a)


def test_right_and_bottom_follow_size():
    r = Rect(3, 4, 5, 6)
    assert (r.right - r.x, r.bottom - r.y) == (r.w, r.h)