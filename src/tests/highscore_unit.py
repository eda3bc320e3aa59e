# src/tests/highscore_unit.py
import json
import tempfile
from pathlib import Path

from src.game.highscore import HighScoreStore, PeakTracker
from src.game.simulation import Simulation
from src.game.geometry import Rect
from src.game.spawner import Coin, Obstacle


def test_missing_file_starts_at_zero():
    with tempfile.TemporaryDirectory() as d:
        store = HighScoreStore(Path(d) / "nested" / "hs.json")
        assert store.best == 0


def test_submit_keeps_only_the_best():
    with tempfile.TemporaryDirectory() as d:
        path = Path(d) / "nested" / "hs.json"
        store = HighScoreStore(path)
        assert store.submit(120)
        assert not store.submit(90)
        assert not store.submit(120)
        assert json.loads(path.read_text(encoding="utf-8")) == {"best_balance": 120}
        assert HighScoreStore(path).best == 120, "value survives a reload"


def test_corrupt_file_is_ignored():
    with tempfile.TemporaryDirectory() as d:
        path = Path(d) / "hs.json"
        path.write_text("{not json", encoding="utf-8")
        assert HighScoreStore(path).best == 0


def test_store_as_game_over_observer():
    """The store only listens; the simulation never reads it back."""
    with tempfile.TemporaryDirectory() as d:
        store = HighScoreStore(Path(d) / "hs.json")
        peak = [0]
        sim = Simulation(800, 350, seed=1, clock=lambda: 0.0,
                         on_balance_change=lambda b: peak.__setitem__(0, max(peak[0], b)),
                         on_game_over=lambda final: store.submit(peak[0]))
        me = sim.character.rect
        for _ in range(5):
            sim.obstacles.append(Obstacle(rect=Rect(me.x + 6, me.y, 20, 20), variant=0))
        sim.tick()
        assert sim.state.terminal
        assert store.best == 0, "the starting balance is only reported by a reset"
        sim.request_reset()
        assert peak[0] == 100
        for _ in range(4):
            sim.obstacles.append(Obstacle(rect=Rect(me.x + 6, me.y, 20, 20), variant=0))
        sim.tick()
        assert store.best == 100


def test_peak_tracker_scores_runs_by_their_peak():
    with tempfile.TemporaryDirectory() as d:
        store = HighScoreStore(Path(d) / "hs.json")
        tracker = PeakTracker(store)
        sim = Simulation(800, 350, seed=1, clock=lambda: 0.0,
                         on_balance_change=tracker.on_balance_change,
                         on_game_over=tracker.on_game_over)
        tracker.peak = sim.state.balance
        me = sim.character.rect
        for _ in range(5):
            sim.obstacles.append(Obstacle(rect=Rect(me.x + 6, me.y, 20, 20), variant=0))
        sim.tick()
        assert sim.state.terminal and store.best == 100 and tracker.peak == 0


def test_starting_a_new_run_mid_game_keeps_the_peak():
    """A run abandoned for a fresh seed still reaches the store."""
    with tempfile.TemporaryDirectory() as d:
        store = HighScoreStore(Path(d) / "hs.json")
        tracker = PeakTracker(store)
        sim = Simulation(800, 350, seed=1, clock=lambda: 0.0,
                         on_balance_change=tracker.on_balance_change,
                         on_game_over=tracker.on_game_over)
        tracker.peak = sim.state.balance
        me = sim.character.rect
        sim.coins.append(Coin(rect=Rect(me.x + 6, me.y, 20, 20), value=10))
        sim.coins.append(Coin(rect=Rect(me.x + 6, me.y + 10, 20, 20), value=10))
        sim.tick()
        assert not sim.state.terminal and tracker.peak == 120

        assert tracker.flush()
        sim.request_reset(seed=2)
        assert store.best == 120
        assert tracker.peak == 100, "the reset reports the new run's starting balance"
        assert not tracker.flush(), "100 does not beat 120"


def main():
    test_missing_file_starts_at_zero()
    test_submit_keeps_only_the_best()
    test_corrupt_file_is_ignored()
    test_store_as_game_over_observer()
    test_peak_tracker_scores_runs_by_their_peak()
    test_starting_a_new_run_mid_game_keeps_the_peak()
    print("✓ high score unit sanity passed")


if __name__ == "__main__":
    main()
