# src/game/player.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

from .config import GRAVITY, JUMP_IMPULSE
from .geometry import Rect


class CharacterState(Enum):
    GROUNDED = "grounded"
    AIRBORNE = "airborne"


@dataclass
class Character:
    """
    Runner with a single jump:
    - y is the TOP of the sprite, screen coordinates (grows downward)
    - ground_y is the resting value of y; the character never goes below it
    - vy < 0 means moving up
    """
    x: float
    y: float
    width: float
    height: float
    ground_y: float
    vy: float = 0.0
    state: CharacterState = CharacterState.GROUNDED
    gravity: float = GRAVITY
    jump_impulse: float = JUMP_IMPULSE

    def __post_init__(self):
        assert self.gravity > 0.0, "gravity must be positive (pulls down)"
        assert self.jump_impulse < 0.0, "jump impulse must be negative (points up)"

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    @property
    def airborne(self) -> bool:
        return self.state is CharacterState.AIRBORNE

    @property
    def grounded(self) -> bool:
        return self.state is CharacterState.GROUNDED

    def can_jump(self) -> bool:
        return self.grounded

    def try_jump(self) -> bool:
        """Leave the ground with the jump impulse. Returns True if performed; no double jump."""
        if not self.can_jump():
            return False
        self.state = CharacterState.AIRBORNE
        self.vy = self.jump_impulse
        return True

    def update_physics(self):
        """One tick of explicit Euler: move by vy, then accelerate. Lands exactly on ground_y."""
        if not self.airborne:
            return
        self.y += self.vy
        self.vy += self.gravity
        if self.y >= self.ground_y:
            self.land()

    def land(self):
        self.y = self.ground_y
        self.vy = 0.0
        self.state = CharacterState.GROUNDED

    def place(self, x: float, width: float, height: float, ground_y: float):
        """Re-anchor after a viewport change; the character is put back on the ground."""
        self.x = x
        self.width = width
        self.height = height
        self.ground_y = ground_y
        self.land()
