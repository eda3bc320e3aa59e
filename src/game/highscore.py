# src/game/highscore.py
from __future__ import annotations
import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_PATH = Path.home() / ".bank_runner" / "highscore.json"


class HighScoreStore:
    """Best final balance across runs, kept in a small JSON file. Never feeds back into the game."""

    def __init__(self, path: Path | str = DEFAULT_PATH):
        self.path = Path(path)
        self.best = self._load()

    def _load(self) -> int:
        if not self.path.exists():
            return 0
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            return int(data.get("best_balance", 0))
        except (OSError, ValueError, AttributeError) as e:
            logger.warning("unreadable high score file %s: %s", self.path, e)
            return 0

    def submit(self, balance: int) -> bool:
        """Record a final balance. Returns True if it beat the stored best."""
        if balance <= self.best:
            return False
        self.best = int(balance)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps({"best_balance": self.best}), encoding="utf-8")
        except OSError as e:
            logger.warning("could not save high score to %s: %s", self.path, e)
        return True


class PeakTracker:
    """
    Feeds a HighScoreStore from Simulation observers. The final balance is always 0,
    so a run is scored by the highest balance it reached.
    """

    def __init__(self, store: HighScoreStore):
        self.store = store
        self.peak = 0

    def on_balance_change(self, balance: int):
        self.peak = max(self.peak, balance)

    def on_game_over(self, final_balance: int):
        self.flush()

    def flush(self) -> bool:
        """Submit the current run's peak and start counting a new run. True on a new best."""
        improved = self.store.submit(self.peak)
        if improved:
            logger.info("new best balance %d", self.store.best)
        self.peak = 0
        return improved
