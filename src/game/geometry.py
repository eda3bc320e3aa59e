# src/game/geometry.py
from __future__ import annotations
from dataclasses import dataclass

import pygame


@dataclass(frozen=True)
class Rect:
    """Float axis-aligned rectangle, top-left origin, y grows downward."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def moved(self, dx: float = 0.0, dy: float = 0.0) -> "Rect":
        return Rect(self.x + dx, self.y + dy, self.width, self.height)

    def to_pygame(self) -> pygame.Rect:
        """Integer rect for drawing (pygame truncates, so round first)."""
        return pygame.Rect(round(self.x), round(self.y), round(self.width), round(self.height))


def overlaps(a, b) -> bool:
    """
    Strict AABB intersection with half-open spans: rectangles that only
    touch along an edge do not overlap. Works on anything with x/y/width/height.
    """
    return (a.x < b.x + b.width and a.x + a.width > b.x
            and a.y < b.y + b.height and a.y + a.height > b.y)
