# src/game/simulation.py
from __future__ import annotations
import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from .config import (
    WIDTH, HEIGHT, SEED_DEFAULT, clamp_view_height,
    GROUND_FRACTION, PLAYER_SIZE_FRACTION, PLAYER_X_FRACTION,
    RunnerConfig,
)
from .daynight import CycleSample, sample_cycle
from .economy import resolve_collisions
from .geometry import Rect
from .parallax import Layer, advance_layers, build_layers
from .player import Character, CharacterState
from .spawner import Coin, Obstacle, Spawner

logger = logging.getLogger(__name__)


@dataclass
class RunState:
    balance: int
    speed: float
    tick: int = 0
    terminal: bool = False


@dataclass(frozen=True)
class ObstacleView:
    rect: Rect
    variant: int


@dataclass(frozen=True)
class CoinView:
    rect: Rect
    value: int


@dataclass(frozen=True)
class LayerView:
    name: str
    index: int
    tiles: Tuple[Rect, ...]


@dataclass(frozen=True)
class Snapshot:
    """Read-only copy of everything a renderer or HUD needs for one frame."""
    width: float
    height: float
    balance: int
    terminal: bool
    tick: int
    speed: float
    character: Rect
    character_state: CharacterState
    character_vy: float
    ground_y: float
    obstacles: Tuple[ObstacleView, ...]
    coins: Tuple[CoinView, ...]
    layers: Tuple[LayerView, ...]
    sky: CycleSample


def viewport_geometry(width: float, height: float) -> Tuple[float, float, float]:
    """(character x, character side, ground line) for a viewport."""
    ground_y = height - round(height * GROUND_FRACTION)
    size = round(height * PLAYER_SIZE_FRACTION)
    x = round(width * PLAYER_X_FRACTION)
    return x, size, ground_y


class Simulation:
    """
    Frame-locked runner world. The host calls tick() once per frame, feeds input
    through request_jump()/request_reset() and reads snapshot() to draw.

    Observers:
      on_balance_change(balance) -> after any balance change and after a reset
      on_game_over(final_balance) -> exactly once per run, on the terminal transition
    """
    def __init__(self,
                 width: float = WIDTH,
                 height: float = HEIGHT,
                 seed: int | None = SEED_DEFAULT,
                 config: Optional[RunnerConfig] = None,
                 clock: Callable[[], float] = time.monotonic,
                 on_balance_change: Optional[Callable[[int], None]] = None,
                 on_game_over: Optional[Callable[[int], None]] = None,
                 layer_aspects: Optional[Sequence[Optional[float]]] = None):
        assert width > 0 and height > 0, "viewport must be positive"
        self.config = (config or RunnerConfig()).validate()
        self.width = float(width)
        self.height = float(clamp_view_height(height))
        self.clock = clock
        self.on_balance_change = on_balance_change
        self.on_game_over = on_game_over
        self.layer_aspects = layer_aspects

        self.spawner = Spawner(seed, self.config)
        x, size, ground_y = viewport_geometry(self.width, self.height)
        self.character = Character(
            x=x, y=ground_y, width=size, height=size, ground_y=ground_y,
            gravity=self.config.gravity, jump_impulse=self.config.jump_impulse,
        )
        self.layers: List[Layer] = build_layers(self.width, self.height, aspect_ratios=layer_aspects)
        self.obstacles: List[Obstacle] = []
        self.coins: List[Coin] = []
        self.state = RunState(balance=self.config.start_balance, speed=self.config.start_speed)
        self._pending_jump = False
        self._started_at = self.clock()

    @property
    def seed(self) -> int:
        return self.spawner.seed

    @property
    def elapsed_s(self) -> float:
        return self.clock() - self._started_at

    # -------------------- Input --------------------

    def request_jump(self) -> bool:
        """Queue one jump for the next physics step. Returns False if the request was dropped."""
        if self.state.terminal:
            logger.debug("jump ignored: run is over")
            return False
        if self._pending_jump or self.character.airborne:
            logger.debug("jump dropped (pending=%s, airborne=%s)", self._pending_jump, self.character.airborne)
            return False
        self._pending_jump = True
        return True

    def request_reset(self, seed: int | None = None):
        """
        Start a new run right away. Same seed => same obstacle/coin sequence.
        Parallax layers keep scrolling from where they are.
        """
        self.spawner.reseed(seed)
        self.obstacles.clear()
        self.coins.clear()
        self.character.place(self.character.x, self.character.width,
                             self.character.height, self.character.ground_y)
        self.state = RunState(balance=self.config.start_balance, speed=self.config.start_speed)
        self._pending_jump = False
        self._started_at = self.clock()
        logger.info("run reset (seed=%s)", self.spawner.seed)
        if self.on_balance_change is not None:
            self.on_balance_change(self.state.balance)

    def resize(self, width: float, height: float):
        """
        Re-derive every viewport-dependent size. Entities in flight keep their rects.
        The height is clamped to VIEW_MIN_HEIGHT..VIEW_MAX_HEIGHT; read it back from self.height.
        """
        assert width > 0 and height > 0, "viewport must be positive"
        self.width = float(width)
        self.height = float(clamp_view_height(height))
        x, size, ground_y = viewport_geometry(self.width, self.height)
        self.character.place(x, size, size, ground_y)
        self.layers = build_layers(self.width, self.height, aspect_ratios=self.layer_aspects)

    # -------------------- Clock --------------------

    def tick(self):
        st = self.state
        if st.terminal:
            return
        cfg = self.config

        st.tick += 1
        if st.tick % cfg.speed_ramp_every == 0:
            st.speed += cfg.speed_ramp_delta

        new_obstacles, new_coins = self.spawner.spawn_due(
            st.tick, self.width, self.height, self.character.ground_y, self.character.height)

        # Scroll what was already on screen; newborns start moving next tick.
        for ob in self.obstacles:
            ob.scroll(st.speed)
        for c in self.coins:
            c.scroll(st.speed)
        limit = -cfg.despawn_margin
        self.obstacles[:] = [ob for ob in self.obstacles if ob.rect.right > limit]
        self.coins[:] = [c for c in self.coins if c.rect.right > limit]
        self.obstacles.extend(new_obstacles)
        self.coins.extend(new_coins)

        advance_layers(self.layers, st.speed)

        if self._pending_jump:
            self._pending_jump = False
            self.character.try_jump()
        self.character.update_physics()

        report = resolve_collisions(self.character.rect, self.obstacles, self.coins,
                                    st.balance, cfg.obstacle_penalty)
        if report.changed:
            st.balance = report.balance_after
            if self.on_balance_change is not None:
                self.on_balance_change(st.balance)
        if report.depleted:
            st.terminal = True
            logger.info("game over at tick %d (obstacles hit this tick: %d)", st.tick, report.obstacles_hit)
            if self.on_game_over is not None:
                self.on_game_over(st.balance)

    def run_ticks(self, n: int):
        for _ in range(n):
            if self.state.terminal:
                break
            self.tick()

    # -------------------- Output --------------------

    def sky(self, elapsed_s: Optional[float] = None) -> CycleSample:
        if elapsed_s is None:
            elapsed_s = self.elapsed_s
        return sample_cycle(elapsed_s, self.width, self.height,
                            scene_duration_s=self.config.scene_duration_s)

    def snapshot(self, elapsed_s: Optional[float] = None) -> Snapshot:
        st = self.state
        return Snapshot(
            width=self.width,
            height=self.height,
            balance=st.balance,
            terminal=st.terminal,
            tick=st.tick,
            speed=st.speed,
            character=self.character.rect,
            character_state=self.character.state,
            character_vy=self.character.vy,
            ground_y=self.character.ground_y,
            obstacles=tuple(ObstacleView(ob.rect, ob.variant) for ob in self.obstacles),
            coins=tuple(CoinView(c.rect, c.value) for c in self.coins),
            layers=tuple(LayerView(l.name, l.index, tuple(l.tile_rects())) for l in self.layers),
            sky=self.sky(elapsed_s),
        )
