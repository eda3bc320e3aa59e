# src/game/parallax.py
from __future__ import annotations
import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .config import (
    LAYER_COUNT, LAYER_OVERSCAN, LAYER_BASE_MULTIPLIER, LAYER_MULTIPLIER_STEP,
    LAYER_BASE_HEIGHT, LAYER_HEIGHT_STEP, LAYER_BOTTOM_GAP, LAYER_STACK_STEP,
)
from .geometry import Rect


@dataclass
class Tile:
    x: float
    y: float


@dataclass
class Layer:
    """
    One parallax stripe of identical, contiguous tiles.
    Tiles are kept left-to-right; the list order IS the on-screen order.
    """
    name: str
    index: int
    multiplier: float
    tile_width: float
    tile_height: float
    tiles: List[Tile] = field(default_factory=list)
    overscan: float = LAYER_OVERSCAN

    def __post_init__(self):
        assert self.tile_width > 0, f"layer {self.name!r}: tile_width must be > 0"
        assert self.multiplier >= 0, f"layer {self.name!r}: multiplier must be >= 0"

    @classmethod
    def covering(cls, name: str, index: int, multiplier: float,
                 tile_width: float, tile_height: float, y: float,
                 view_width: float, overscan: float = LAYER_OVERSCAN) -> "Layer":
        """Build a layer whose tiles span [-overscan, view_width + overscan] with room to scroll."""
        assert tile_width > 0, f"layer {name!r}: tile_width must be > 0"
        count = math.ceil((view_width + 2 * overscan) / tile_width) + 2
        tiles = [Tile(x=-overscan + i * tile_width, y=y) for i in range(count)]
        return cls(name=name, index=index, multiplier=multiplier,
                   tile_width=tile_width, tile_height=tile_height,
                   tiles=tiles, overscan=overscan)

    def advance(self, base_speed: float):
        """Shift every tile left, then recycle tiles that left the screen to the right end."""
        dx = base_speed * self.multiplier
        for t in self.tiles:
            t.x -= dx

        if len(self.tiles) < 2:
            return
        # A while loop, not an if: at high speeds several tiles can expire in one tick.
        while self.tiles[0].x + self.tile_width < -self.overscan:
            t = self.tiles.pop(0)
            t.x = self.tiles[-1].x + self.tile_width
            self.tiles.append(t)

    def tile_rects(self) -> List[Rect]:
        return [Rect(t.x, t.y, self.tile_width, self.tile_height) for t in self.tiles]


def build_layers(width: float, height: float,
                 count: int = LAYER_COUNT,
                 aspect_ratios: Optional[Sequence[Optional[float]]] = None) -> List[Layer]:
    """
    Default background: back layers slower and shorter, front layers faster and taller.
    aspect_ratios[i] (width / height of the layer's artwork) overrides the tile width,
    so the host can keep images undistorted.
    """
    assert width > 0 and height > 0, "viewport must be positive"
    layers: List[Layer] = []
    for i in range(max(1, count)):
        multiplier = LAYER_BASE_MULTIPLIER + i * LAYER_MULTIPLIER_STEP
        layer_h = round(height * (LAYER_BASE_HEIGHT + i * LAYER_HEIGHT_STEP))
        tile_w = round(width / (2 + i))
        if aspect_ratios is not None and i < len(aspect_ratios) and aspect_ratios[i]:
            tile_w = round(aspect_ratios[i] * layer_h) or tile_w
        y = height - layer_h - LAYER_BOTTOM_GAP - i * LAYER_STACK_STEP
        layers.append(Layer.covering(
            name=f"buildings{i + 1}", index=i, multiplier=multiplier,
            tile_width=tile_w, tile_height=layer_h, y=y, view_width=width,
        ))
    return layers


def advance_layers(layers: Sequence[Layer], base_speed: float):
    """Layers are independent; each one scrolls at its own multiplier."""
    for layer in layers:
        layer.advance(base_speed)
