# src/game/daynight.py
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Sequence, Tuple

from .config import SCENE_DURATION_S, SUN_Y_FRACTION, SUN_SWING_FRACTION, SUN_MIN_RADIUS

RGB = Tuple[int, int, int]


def hex_to_rgb(value: str) -> RGB:
    value = value.lstrip("#")
    n = int(value, 16)
    return (n >> 16) & 255, (n >> 8) & 255, n & 255


def _lerp(a: float, b: float, t: float) -> int:
    # round half up, so 0.5 steps match the browser version of the palette
    return int(math.floor(a + (b - a) * t + 0.5))


def lerp_color(c1: RGB, c2: RGB, t: float) -> RGB:
    return (_lerp(c1[0], c2[0], t), _lerp(c1[1], c2[1], t), _lerp(c1[2], c2[2], t))


@dataclass(frozen=True)
class Scene:
    name: str
    top: RGB
    bottom: RGB
    sun: RGB


SCENES: Tuple[Scene, ...] = (
    Scene("morning", hex_to_rgb("#a8d0ff"), hex_to_rgb("#eaf6ff"), hex_to_rgb("#ffd166")),
    Scene("day",     hex_to_rgb("#87ceeb"), hex_to_rgb("#bfefff"), hex_to_rgb("#fff59d")),
    Scene("evening", hex_to_rgb("#ffcf9b"), hex_to_rgb("#ff9aa2"), hex_to_rgb("#ffd166")),
    Scene("night",   hex_to_rgb("#0b2447"), hex_to_rgb("#071133"), hex_to_rgb("#f5f3ce")),
)


@dataclass(frozen=True)
class CycleSample:
    scene: str        # name of the scene being blended FROM
    next_scene: str
    blend: float      # [0, 1)
    cycle_t: float    # [0, 1) position in the full cycle
    top: RGB
    bottom: RGB
    sun: RGB
    sun_pos: Tuple[int, int]
    sun_radius: float


def sample_cycle(elapsed_s: float, width: float, height: float,
                 scenes: Sequence[Scene] = SCENES,
                 scene_duration_s: float = SCENE_DURATION_S) -> CycleSample:
    """
    Sky colors and sun placement at `elapsed_s` seconds into the run.
    Pure: the caller owns the clock, so tests can pass synthetic time.
    """
    n = len(scenes)
    assert n > 0, "day/night cycle needs at least one scene"
    assert scene_duration_s > 0, "scene_duration_s must be > 0"

    total = n * scene_duration_s
    cycle_t = (elapsed_s % total) / total          # Python % keeps this in [0, 1) for negatives too
    pos = cycle_t * n
    idx = int(math.floor(pos)) % n
    nxt = (idx + 1) % n
    blend = pos - math.floor(pos)

    cur, nex = scenes[idx], scenes[nxt]
    sun_x = round(width * cycle_t)
    sun_y = round(height * SUN_Y_FRACTION + math.sin(cycle_t * math.pi * 2) * (height * SUN_SWING_FRACTION))

    return CycleSample(
        scene=cur.name,
        next_scene=nex.name,
        blend=blend,
        cycle_t=cycle_t,
        top=lerp_color(cur.top, nex.top, blend),
        bottom=lerp_color(cur.bottom, nex.bottom, blend),
        sun=lerp_color(cur.sun, nex.sun, blend),
        sun_pos=(sun_x, sun_y),
        sun_radius=max(SUN_MIN_RADIUS, height * SUN_SWING_FRACTION),
    )
