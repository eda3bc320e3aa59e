# src/tests/observations_unit.py
import numpy as np
from src.env.observations import OBS_SIZE, build_observation
from src.game.config import RunnerConfig
from src.game.geometry import Rect
from src.game.simulation import Simulation
from src.game.spawner import Coin, Obstacle

CFG = RunnerConfig()


def observe(sim: Simulation) -> np.ndarray:
    return build_observation(sim.snapshot(elapsed_s=0.0),
                             jump_impulse=CFG.jump_impulse, gravity=CFG.gravity,
                             start_speed=CFG.start_speed, start_balance=CFG.start_balance)


def test_shape_and_empty_world():
    sim = Simulation(800, 350, seed=1, clock=lambda: 0.0)
    obs = observe(sim)
    assert isinstance(obs, np.ndarray) and obs.dtype == np.float32 and obs.shape == (OBS_SIZE,)
    height, vy, airborne, speed, balance = obs[:5]
    assert height == 0.0 and vy == 0.0 and airborne == 0.0
    assert abs(speed - 0.5) < 1e-6 and abs(balance - 0.5) < 1e-6
    # sentinels: nothing ahead
    assert obs[5] == 1.0 and obs[6] == 0.0 and obs[7] == 1.0 and obs[8] == 0.0
    assert obs[9] == 1.0 and obs[10] == 0.0


def test_nearest_obstacles_first():
    sim = Simulation(800, 350, seed=1, clock=lambda: 0.0)
    right = sim.character.rect.right
    sim.obstacles.append(Obstacle(rect=Rect(right + 400, 273, 35, 35), variant=0))
    sim.obstacles.append(Obstacle(rect=Rect(right + 80, 273, 35, 35), variant=1))
    sim.obstacles.append(Obstacle(rect=Rect(-200, 273, 35, 35), variant=2))   # already behind
    sim.coins.append(Coin(rect=Rect(right + 160, 150, 35, 35), value=10))
    obs = observe(sim)
    assert abs(obs[5] - 80 / 800) < 1e-6
    assert abs(obs[6] - 35 / 350) < 1e-6
    assert abs(obs[7] - 400 / 800) < 1e-6
    assert abs(obs[9] - 160 / 800) < 1e-6
    # coin bottom at 185, feet at 308
    assert abs(obs[10] - (308 - 185) / 350) < 1e-6


def test_airborne_features():
    sim = Simulation(800, 350, seed=1, clock=lambda: 0.0)
    sim.request_jump()
    sim.tick()
    obs = observe(sim)
    assert obs[2] == 1.0
    assert 0.0 < obs[0] <= 1.0
    assert -1.0 <= obs[1] < 0.0, "rising means negative vy"


def main():
    test_shape_and_empty_world()
    test_nearest_obstacles_first()
    test_airborne_features()
    print("✓ observations unit sanity passed")


if __name__ == "__main__":
    main()
