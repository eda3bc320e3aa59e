# src/tests/geometry_unit.py
import pygame
from src.game.geometry import Rect, overlaps


def test_overlap_basic():
    a = Rect(0, 0, 10, 10)
    assert overlaps(a, Rect(5, 5, 10, 10))
    assert overlaps(Rect(5, 5, 10, 10), a), "overlap must be symmetric"
    assert not overlaps(a, Rect(20, 0, 10, 10))
    assert not overlaps(a, Rect(0, 20, 10, 10))


def test_touching_edges_do_not_overlap():
    a = Rect(0, 0, 10, 10)
    assert not overlaps(a, Rect(10, 0, 10, 10)), "shared vertical edge"
    assert not overlaps(a, Rect(0, 10, 10, 10)), "shared horizontal edge"
    assert not overlaps(a, Rect(10, 10, 5, 5)), "shared corner"
    assert overlaps(a, Rect(9.999, 9.999, 5, 5))


def test_containment_overlaps():
    outer = Rect(0, 0, 100, 100)
    inner = Rect(40, 40, 2, 2)
    assert overlaps(outer, inner) and overlaps(inner, outer)


def test_rect_helpers():
    r = Rect(1.5, 2.0, 3.0, 4.0)
    assert r.right == 4.5 and r.bottom == 6.0
    m = r.moved(dx=-1.5)
    assert (m.x, m.y) == (0.0, 2.0) and r.x == 1.5, "moved() returns a new rect"
    pr = Rect(1.6, 2.4, 3.0, 4.0).to_pygame()
    assert isinstance(pr, pygame.Rect)
    assert (pr.x, pr.y, pr.w, pr.h) == (2, 2, 3, 4)


def main():
    test_overlap_basic()
    test_touching_edges_do_not_overlap()
    test_containment_overlaps()
    test_rect_helpers()
    print("✓ geometry unit sanity passed")


if __name__ == "__main__":
    main()
