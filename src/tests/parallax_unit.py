# src/tests/parallax_unit.py
"""
Tile coverage checks for the scrolling background.

Usage (from repo root):
  python -m src.tests.parallax_unit
"""
import random

from src.game.config import LAYER_OVERSCAN
from src.game.parallax import Layer, advance_layers, build_layers

EPS = 1e-6


def assert_covered(layer: Layer, view_w: float):
    """Tiles are contiguous and span [-overscan, view_w + overscan]."""
    tiles = layer.tiles
    for a, b in zip(tiles, tiles[1:]):
        assert abs((b.x - a.x) - layer.tile_width) < EPS * max(1.0, layer.tile_width), \
            f"gap/overlap between tiles in {layer.name}: {a.x} -> {b.x}"
    assert tiles[0].x <= -layer.overscan + EPS, f"left edge uncovered: {tiles[0].x}"
    assert tiles[-1].x + layer.tile_width >= view_w + layer.overscan - EPS, "right edge uncovered"


def test_initial_layers_cover_view():
    layers = build_layers(800, 350)
    assert len(layers) == 3
    assert [l.index for l in layers] == [0, 1, 2]
    assert layers[0].multiplier < layers[1].multiplier < layers[2].multiplier
    for layer in layers:
        assert_covered(layer, 800)


def test_aspect_ratio_sets_tile_width():
    layers = build_layers(800, 350, aspect_ratios=[2.0, None])
    assert layers[0].tile_width == round(2.0 * layers[0].tile_height)
    assert layers[1].tile_width == round(800 / 3)


def test_recycle_moves_first_tile_to_end():
    layer = Layer.covering("t", 0, 1.0, tile_width=100, tile_height=10, y=0, view_width=300)
    first = layer.tiles[0]
    n = len(layer.tiles)
    # first tile starts at -50 with right edge at 50: 101 px pushes it past -50
    layer.advance(101.0)
    assert len(layer.tiles) == n, "recycling never adds or drops tiles"
    assert layer.tiles[-1] is first
    assert abs(first.x - (layer.tiles[-2].x + 100)) < EPS


def test_zero_speed_is_still():
    layer = Layer.covering("t", 0, 0.5, tile_width=64, tile_height=10, y=0, view_width=200)
    before = [t.x for t in layer.tiles]
    for _ in range(10):
        layer.advance(0.0)
    assert [t.x for t in layer.tiles] == before


def test_layers_move_independently():
    layers = build_layers(800, 350)
    starts = [l.tiles[0].x for l in layers]
    advance_layers(layers, 10.0)
    deltas = [s - l.tiles[0].x for s, l in zip(starts, layers)]
    for layer, d in zip(layers, deltas):
        assert abs(d - 10.0 * layer.multiplier) < EPS


def test_coverage_randomized():
    """Coverage holds for random widths, speeds and multipliers, including speeds > tile width."""
    rng = random.Random(2024)
    for _ in range(200):
        view_w = rng.uniform(100, 1200)
        tile_w = rng.uniform(5, 400)
        mult = rng.uniform(0.0, 2.0)
        layer = Layer.covering("r", 0, mult, tile_width=tile_w, tile_height=20, y=0,
                               view_width=view_w, overscan=LAYER_OVERSCAN)
        n = len(layer.tiles)
        for _ in range(50):
            layer.advance(rng.uniform(0.0, 3.0 * tile_w))
            assert len(layer.tiles) == n
            assert_covered(layer, view_w)


def test_non_positive_tile_width_fails_fast():
    for bad in (0, -5):
        try:
            Layer.covering("bad", 0, 1.0, tile_width=bad, tile_height=10, y=0, view_width=100)
        except AssertionError:
            continue
        raise AssertionError(f"tile_width={bad} should be rejected")


def main():
    test_initial_layers_cover_view()
    test_aspect_ratio_sets_tile_width()
    test_recycle_moves_first_tile_to_end()
    test_zero_speed_is_still()
    test_layers_move_independently()
    test_coverage_randomized()
    test_non_positive_tile_width_fails_fast()
    print("✓ parallax unit sanity passed")


if __name__ == "__main__":
    main()
