# src/game/spawner.py
from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from typing import List, Tuple

from .config import (
    OBSTACLE_HEIGHT_FRACTION, OBSTACLE_MIN_HEIGHT, OBSTACLE_VARIANTS,
    COIN_SIZE_FRACTION, COIN_MIN_SIZE, COIN_BAND_OFFSET, COIN_BAND_SPAN,
    RunnerConfig,
)
from .geometry import Rect

logger = logging.getLogger(__name__)


@dataclass
class Obstacle:
    rect: Rect
    variant: int  # artwork index, no gameplay effect

    def scroll(self, dx: float):
        self.rect = self.rect.moved(dx=-dx)


@dataclass
class Coin:
    rect: Rect
    value: int

    def scroll(self, dx: float):
        self.rect = self.rect.moved(dx=-dx)


class Spawner:
    """
    Emits one obstacle every `obstacle_cadence` ticks and one coin every
    `coin_cadence` ticks at the right edge of the view. The only state is the RNG.
    """
    def __init__(self, seed: int | None, config: RunnerConfig):
        if seed is None:
            seed = random.randrange(0, 2**32 - 1)
        self.seed = seed
        self.rng = random.Random(seed)
        self.config = config

    def reseed(self, seed: int | None = None):
        """Restart the variant/height sequence (same seed unless a new one is given)."""
        if seed is not None:
            self.seed = seed
        self.rng = random.Random(self.seed)

    def spawn_due(self, tick: int, view_w: float, view_h: float,
                  ground_y: float, char_h: float) -> Tuple[List[Obstacle], List[Coin]]:
        """Entities whose cadence fires on `tick` (ticks count from 1 after a reset)."""
        obstacles: List[Obstacle] = []
        coins: List[Coin] = []
        if tick % self.config.obstacle_cadence == 0:
            obstacles.append(self.make_obstacle(view_w, view_h, ground_y, char_h))
        if tick % self.config.coin_cadence == 0:
            coins.append(self.make_coin(view_w, view_h, ground_y))
        return obstacles, coins

    def make_obstacle(self, view_w: float, view_h: float,
                      ground_y: float, char_h: float) -> Obstacle:
        h = max(OBSTACLE_MIN_HEIGHT, round(view_h * OBSTACLE_HEIGHT_FRACTION))
        w = h
        # bottom flush with the character's feet when it stands on the ground line
        y = ground_y + char_h - h
        variant = self.rng.randrange(OBSTACLE_VARIANTS)
        ob = Obstacle(rect=Rect(view_w + self.config.spawn_margin, y, w, h), variant=variant)
        logger.debug("spawn obstacle variant=%d at x=%.1f", variant, ob.rect.x)
        return ob

    def make_coin(self, view_w: float, view_h: float, ground_y: float) -> Coin:
        size = round(view_h * COIN_SIZE_FRACTION) or COIN_MIN_SIZE
        y = ground_y - COIN_BAND_OFFSET - self.rng.random() * COIN_BAND_SPAN
        # bottom never below the standing character's top
        y = min(y, ground_y - size)
        coin = Coin(rect=Rect(view_w + self.config.spawn_margin, y, size, size),
                    value=self.config.coin_reward)
        logger.debug("spawn coin at x=%.1f y=%.1f", coin.rect.x, coin.rect.y)
        return coin
