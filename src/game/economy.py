# src/game/economy.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List

from .geometry import Rect, overlaps
from .spawner import Coin, Obstacle


@dataclass
class CollisionReport:
    obstacles_hit: int = 0
    coins_collected: int = 0
    balance_before: int = 0
    balance_after: int = 0
    depleted: bool = False

    @property
    def changed(self) -> bool:
        return self.balance_after != self.balance_before


def resolve_collisions(me: Rect,
                       obstacles: List[Obstacle],
                       coins: List[Coin],
                       balance: int,
                       penalty: int) -> CollisionReport:
    """
    Apply this tick's contacts to the balance. Mutates the entity lists in place.

    Order is fixed: every overlapping obstacle first (list order, each removed as
    it is charged so it can never be charged twice), then the depletion check,
    then coins. A tick that depletes the balance collects no coins.
    The balance never goes below 0.
    """
    report = CollisionReport(balance_before=balance)

    kept_obstacles: List[Obstacle] = []
    for ob in obstacles:
        if overlaps(me, ob.rect):
            balance -= penalty
            report.obstacles_hit += 1
        else:
            kept_obstacles.append(ob)
    obstacles[:] = kept_obstacles

    if balance <= 0:
        report.balance_after = 0
        report.depleted = True
        return report

    kept_coins: List[Coin] = []
    for c in coins:
        if overlaps(me, c.rect):
            balance += c.value
            report.coins_collected += 1
        else:
            kept_coins.append(c)
    coins[:] = kept_coins

    report.balance_after = balance
    return report
