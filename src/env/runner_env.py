# src/env/runner_env.py
from __future__ import annotations
from typing import Optional, Dict, Any
import numpy as np
import gymnasium as gym
import pygame

from src.game.config import WIDTH, HEIGHT, FPS, RunnerConfig, clamp_view_height
from src.game.render import draw_frame
from src.game.simulation import Simulation
from src.env.observations import OBS_SIZE, build_observation


class RunnerEnv(gym.Env):
    """
    Bank Runner Gymnasium environment (vector observations).
    - Simulation is frame-locked at 60 ticks per second of game time.
    - Agent acts every `frame_skip` ticks (default 4) -> 15 decisions/sec.
    - Observation: shape (11,), float32 (see build_observation).
    - Reward per decision: +0.01 for surviving, plus balance change / obstacle penalty
      (one obstacle = -1, one default coin = +0.4); -1 on the decision that ends the run.
    """
    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": FPS}

    def __init__(self,
                 render_mode: Optional[str] = None,
                 frame_skip: int = 4,
                 time_limit_seconds: Optional[float] = 60.0,
                 width: int = WIDTH,
                 height: int = HEIGHT,
                 config: Optional[RunnerConfig] = None):
        super().__init__()
        assert frame_skip >= 1, "frame_skip must be >= 1"
        assert render_mode is None or render_mode in self.metadata["render_modes"], \
            f"Unknown render_mode {render_mode}"
        self.render_mode = render_mode
        self.frame_skip = int(frame_skip)
        self.width = int(width)
        self.height = int(clamp_view_height(height))
        self.config = (config or RunnerConfig()).validate()

        self.sim_fps = FPS

        self.time_limit_decisions = None
        if time_limit_seconds is not None:
            # decisions per second = sim_fps / frame_skip
            self.time_limit_decisions = int(self.sim_fps * time_limit_seconds / self.frame_skip)

        # --- Gym spaces ---
        # Actions: 0 = NOOP, 1 = JUMP
        self.action_space = gym.spaces.Discrete(2)
        low = np.array([0.0, -1.0] + [0.0] * (OBS_SIZE - 2), dtype=np.float32)
        high = np.ones(OBS_SIZE, dtype=np.float32)
        self.observation_space = gym.spaces.Box(low=low, high=high, dtype=np.float32)

        # --- Runtime state ---
        self.sim: Optional[Simulation] = None
        self.timestep: int = 0                   # number of *decision* steps elapsed
        self.current_seed: Optional[int] = None  # Spawner's effective seed for this episode
        self.final_balance: Optional[int] = None
        self._game_time_s: float = 0.0           # drives the day/night cycle

        # Rendering
        self.screen = None
        self.clock = None
        self.font = None

    # -------------------- Core API --------------------

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None):
        super().reset(seed=seed)  # initializes self.np_random

        # A given reset seed fixes the spawn sequence; otherwise draw one from np_random
        # so that env.reset(seed=s) followed by plain resets stays reproducible.
        if seed is not None:
            spawn_seed = int(seed)
        else:
            spawn_seed = int(self.np_random.integers(0, 2**31 - 1))

        self._game_time_s = 0.0
        self.final_balance = None
        self.sim = Simulation(
            self.width, self.height,
            seed=spawn_seed,
            config=self.config,
            clock=lambda: self._game_time_s,
            on_game_over=self._on_game_over,
        )
        self.timestep = 0
        self.current_seed = self.sim.seed

        obs = self._get_obs()
        info = {"seed": self.current_seed, "balance": self.sim.state.balance}
        return obs, info

    def step(self, action: int):
        assert self.action_space.contains(action), f"Invalid action {action}"
        assert self.sim is not None, "call reset() before step()"
        sim = self.sim

        balance_before = sim.state.balance
        jumped = False
        if action == 1:
            jumped = sim.request_jump()

        for _ in range(self.frame_skip):
            sim.tick()
            self._game_time_s += 1.0 / self.sim_fps
            if sim.state.terminal:
                break

        terminated = sim.state.terminal
        if terminated:
            reward = -1.0
        else:
            reward = 0.01 + (sim.state.balance - balance_before) / float(self.config.obstacle_penalty)

        self.timestep += 1
        truncated = False
        if (self.time_limit_decisions is not None) and (self.timestep >= self.time_limit_decisions):
            truncated = not terminated

        obs = self._get_obs()
        info = {
            "balance": sim.state.balance,
            "tick": sim.state.tick,
            "timestep": self.timestep,
            "seed": self.current_seed,
            "speed": sim.state.speed,
            "airborne": sim.character.airborne,
            "jumped": jumped,
            "final_balance": self.final_balance,
        }

        if self.render_mode == "human":
            self.render()

        return obs, float(reward), terminated, truncated, info

    # -------------------- Helpers --------------------

    def _on_game_over(self, final_balance: int):
        self.final_balance = final_balance

    def _get_obs(self) -> np.ndarray:
        assert self.sim is not None
        return build_observation(
            self.sim.snapshot(),
            jump_impulse=self.config.jump_impulse,
            gravity=self.config.gravity,
            start_speed=self.config.start_speed,
            start_balance=self.config.start_balance,
        )

    # -------------------- Rendering --------------------

    def render(self):
        if self.render_mode is None or self.sim is None:
            return

        if self.screen is None:
            pygame.init()
            if self.render_mode == "human":
                self.screen = pygame.display.set_mode((self.width, self.height))
                pygame.display.set_caption("Bank Runner: Gym Env")
                self.clock = pygame.time.Clock()
            else:
                self.screen = pygame.Surface((self.width, self.height))
            self.font = pygame.font.SysFont("roboto,arial", max(12, round(self.height * 0.05)))

        draw_frame(self.screen, self.sim.snapshot(), font=self.font)

        if self.render_mode == "human":
            # Pump minimal event queue so the OS doesn't think we're hung
            pygame.event.pump()
            pygame.display.flip()
            if self.clock is not None:
                self.clock.tick(self.metadata.get("render_fps", FPS))
            return None

        # rgb_array: (H, W, 3) uint8
        arr = pygame.surfarray.array3d(self.screen)  # (W, H, 3)
        return np.transpose(arr, (1, 0, 2))

    def close(self):
        if self.screen is not None:
            if self.render_mode == "human":
                pygame.display.quit()
            pygame.quit()
            self.screen = None
            self.clock = None
            self.font = None
