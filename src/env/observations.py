# src/env/observations.py
from __future__ import annotations
from typing import List, Sequence
import numpy as np

from src.game.geometry import Rect
from src.game.player import CharacterState
from src.game.simulation import Snapshot

OBS_SIZE = 11
# How far ahead the "distance to next thing" features look, in viewport widths
HORIZON_WIDTHS = 1.0

def _clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else (1.0 if x > 1.0 else x)

def _clamp11(x: float) -> float:
    return -1.0 if x < -1.0 else (1.0 if x > 1.0 else x)

def _ahead(rects: Sequence[Rect], x_from: float) -> List[Rect]:
    """Rects whose right edge is still in front of x_from, nearest first."""
    return sorted((r for r in rects if r.right > x_from), key=lambda r: r.x)

def build_observation(snap: Snapshot,
                      jump_impulse: float,
                      gravity: float,
                      start_speed: float,
                      start_balance: int) -> np.ndarray:
    """
    Returns a fixed (11,) float32 vector:
      [ height_norm, vy_norm, airborne, speed_norm, balance_norm,
        obst1_dx, obst1_h, obst2_dx, obst2_h,
        coin_dx, coin_h ]
    - height_norm : height above the ground line / jump apex, in [0,1]
    - vy_norm     : vy / |jump_impulse|, in [-1,1] (negative = rising)
    - airborne    : 0.0 / 1.0
    - speed_norm  : speed / (2 * start_speed), clipped to [0,1]
    - balance_norm: balance / (2 * start_balance), clipped to [0,1]
    - *_dx        : gap between the character's right edge and the entity,
                    / viewport width; sentinel 1.0 when nothing is ahead
    - obst*_h     : obstacle height / viewport height; 0.0 when absent
    - coin_h      : how high the coin's bottom floats above the character's
                    feet / viewport height; 0.0 when absent
    """
    me = snap.character
    apex = max(1.0, jump_impulse * jump_impulse / (2.0 * max(1e-6, gravity)))
    horizon = max(1.0, HORIZON_WIDTHS * snap.width)
    feet_y = snap.ground_y + me.height

    def dx_norm(r: Rect) -> float:
        return _clamp01((r.x - me.right) / horizon)

    feats: List[float] = [
        _clamp01((snap.ground_y - me.y) / apex),
        _clamp11(snap.character_vy / max(1e-6, abs(jump_impulse))),
        1.0 if snap.character_state is CharacterState.AIRBORNE else 0.0,
        _clamp01(snap.speed / max(1e-6, 2.0 * start_speed)),
        _clamp01(snap.balance / max(1, 2 * start_balance)),
    ]

    obstacles = _ahead([o.rect for o in snap.obstacles], me.x)
    for i in range(2):
        if i < len(obstacles):
            r = obstacles[i]
            feats.extend([dx_norm(r), _clamp01(r.height / snap.height)])
        else:
            feats.extend([1.0, 0.0])

    coins = _ahead([c.rect for c in snap.coins], me.x)
    if coins:
        c = coins[0]
        feats.extend([dx_norm(c), _clamp01((feet_y - c.bottom) / snap.height)])
    else:
        feats.extend([1.0, 0.0])

    return np.asarray(feats, dtype=np.float32)
