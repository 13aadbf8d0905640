import pytest
from pygame.math import Vector2

from dodge.entity import Direction, Entity, Role


def box(x, y, w, h=None):
    return Entity.obstacle(x, y, w, "#808080", (1, 1)) if h is None else Entity(
        w, h, "#808080", Vector2(x, y), Vector2(0, 0), Role.OBSTACLE
    )


def test_overlapping_boxes_collide_both_ways():
    a = box(0, 0, 10)
    b = box(5, 5, 10)
    assert a.overlaps(b)
    assert b.overlaps(a)


def test_disjoint_boxes_do_not_collide():
    a = box(0, 0, 10)
    b = box(50, 50, 10)
    assert not a.overlaps(b)
    assert not b.overlaps(a)


@pytest.mark.parametrize("bx, by", [(10, 0), (-10, 0), (0, 10), (0, -10), (10, 10)])
def test_touching_edges_do_not_collide(bx, by):
    a = box(0, 0, 10)
    b = box(bx, by, 10)
    assert not a.overlaps(b)
    assert not b.overlaps(a)


def test_contained_box_collides():
    assert box(0, 0, 10).overlaps(box(2, 2, 3))


def test_rectangles_of_different_height():
    tall = box(0, 0, 2, 50)
    wide = box(-10, 40, 30, 2)
    assert tall.overlaps(wide)


def test_is_within_surface_inclusive_bounds():
    assert box(0, 0, 10).is_within_surface(10, 10)
    assert box(90, 40, 10).is_within_surface(100, 50)


@pytest.mark.parametrize("x, y", [(-0.5, 5), (5, -0.5), (91, 5), (5, 41)])
def test_partially_offscreen_is_not_within_surface(x, y):
    assert not box(x, y, 10).is_within_surface(100, 50)


def test_advance_moves_without_clamping():
    e = Entity.obstacle(-5, 3, 4, "#777777", (-2.5, 1.0))
    e.advance()
    e.advance()
    assert e.x == pytest.approx(-10)
    assert e.y == pytest.approx(5)


def test_player_starts_at_rest():
    p = Entity.player(10, 20, 10, "red")
    assert p.role is Role.PLAYER
    assert p.is_player
    assert p.velocity == Vector2(0, 0)
    p.advance()
    assert (p.x, p.y) == (10, 20)


@pytest.mark.parametrize(
    "direction, expected",
    [
        (Direction.UP, (0, -2)),
        (Direction.DOWN, (0, 2)),
        (Direction.LEFT, (-2, 0)),
        (Direction.RIGHT, (2, 0)),
    ],
)
def test_steer_is_axis_aligned(direction, expected):
    p = Entity.player(0, 0, 10, "red")
    p.steer(Direction.RIGHT, 2)
    p.steer(Direction.DOWN, 2)
    p.steer(direction, 2)
    assert tuple(p.velocity) == expected


def test_obstacles_cannot_be_steered():
    e = Entity.obstacle(0, 0, 4, "#777777", (1, 1))
    with pytest.raises(ValueError):
        e.steer(Direction.UP, 2)
    assert tuple(e.velocity) == (1, 1)


def test_draw_issues_one_rect(surface):
    e = Entity.obstacle(3, 4, 5, "#A0A0A0", (1, 1))
    e.draw(surface)
    e.draw(surface)
    assert surface.calls == [("rect", 3, 4, 5, 5, "#A0A0A0")] * 2
