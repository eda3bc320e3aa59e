# experiments/replay.py
"""
Replay tool for RunnerEnv: quick command cheat sheet

# Typical usage (run from REPO ROOT so `src/...` imports work)

# Replay a HEURISTIC episode by seed (uses actions at experiments/runs/traces/heuristic/<seed>_actions.npy)
python -m experiments.replay --policy heuristic --seed 105

# Replay by pointing directly to a specific actions file (bypasses --policy/--seed lookup)
python -m experiments.replay --trace experiments/runs/traces/heuristic/105_actions.npy --frame-skip 4

# Slow the display to ~decision rate (~15 fps) for readability
python -m experiments.replay --policy heuristic --seed 105 --slow

# Controls during replay
SPACE = pause/resume
N     = single step (when paused)
R     = restart episode
ESC   = quit

# Notes
- Deterministic: given the same seed, frame_skip, and action sequence, replay matches the recorded run.
- If you pass --trace, the script does not read meta; supply --frame-skip if different from 4.
- Expected trace layout from sanity rollouts: experiments/runs/traces/<policy>/<seed>_actions.npy
"""

from __future__ import annotations
import argparse
from pathlib import Path
from typing import Dict, Optional, Tuple

import numpy as np
import pygame

from src.env.runner_env import RunnerEnv

DEFAULT_OUT_DIR = "experiments/runs"
DEFAULT_FRAME_SKIP = 4

def _find_trace(out_dir: Path, policy: str, seed: int) -> Path:
    p = out_dir / "traces" / policy / f"{seed}_actions.npy"
    if not p.exists():
        raise FileNotFoundError(f"Trace not found: {p}")
    return p

def _read_meta(out_dir: Path, policy: str, seed: int) -> Dict[str, str]:
    meta_path = out_dir / "traces" / policy / f"{seed}_meta.txt"
    meta: Dict[str, str] = {}
    if meta_path.exists():
        for line in meta_path.read_text(encoding="utf-8").splitlines():
            if "=" in line:
                k, v = line.split("=", 1)
                meta[k.strip()] = v.strip()
    return meta

def load_trace(out_dir: Path,
               policy: str,
               seed: Optional[int],
               trace: str = "",
               frame_skip: int = -1) -> Tuple[np.ndarray, int, int]:
    """Resolve (actions, frame_skip, seed) from either an explicit file or the rollout layout."""
    if trace:
        trace_path = Path(trace)
        if not trace_path.exists():
            raise FileNotFoundError(f"Trace file not found: {trace_path}")
        if seed is None:
            # <seed>_actions.npy
            try:
                seed = int(trace_path.stem.split("_")[0])
            except ValueError:
                raise SystemExit(f"Cannot infer a seed from {trace_path.name}; pass --seed")
    else:
        if seed is None:
            raise SystemExit("Please provide --seed or --trace")
        trace_path = _find_trace(out_dir, policy, seed)

    actions = np.load(trace_path)
    if actions.ndim != 1:
        raise ValueError(f"Expected 1D action array, got shape {actions.shape}")

    fs = frame_skip
    if fs < 0:
        fs = DEFAULT_FRAME_SKIP
        if not trace:
            meta = _read_meta(out_dir, policy, seed)
            if "frame_skip" in meta:
                fs = int(meta["frame_skip"])
    return actions, fs, seed

def _draw_overlay(env: RunnerEnv, step_idx: int, action: Optional[int]):
    surf = pygame.display.get_surface()
    if surf is None or env.sim is None:
        return
    font = pygame.font.SysFont("jetbrainsmono", 16)
    st = env.sim.state

    lines = [
        f"Step={step_idx}  Action={'NOOP' if action == 0 else ('JUMP' if action == 1 else '-')}",
        f"Tick={st.tick}  Speed={st.speed:.2f}  Balance={st.balance}",
    ]

    panel = pygame.Surface((300, 20 * (len(lines) + 1)), pygame.SRCALPHA)
    panel.fill((10, 20, 35, 160))
    surf.blit(panel, (12, 40))
    for i, txt in enumerate(lines):
        surf.blit(font.render(txt, True, (210, 230, 255)), (20, 46 + i * 20))

    pygame.display.flip()

def replay_episode(seed: int, actions: np.ndarray, frame_skip: int, slow: bool = False):
    """
    Replays an episode deterministically with an on-screen overlay.
    Controls:
      SPACE: pause/resume   N: single-step when paused
      R: restart episode    ESC: quit
    """
    env = RunnerEnv(render_mode="human", frame_skip=frame_skip, time_limit_seconds=None)
    env.reset(seed=seed)
    env.render()

    paused = False
    single_step = False
    step_idx = 0
    action: Optional[int] = None
    clock = pygame.time.Clock()

    try:
        running = True
        while running and step_idx < len(actions):
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_SPACE:
                        paused = not paused
                    elif event.key == pygame.K_n and paused:
                        single_step = True
                    elif event.key == pygame.K_r:
                        env.reset(seed=seed)
                        step_idx = 0
                        paused = False

            if paused and not single_step:
                env.render()
                _draw_overlay(env, step_idx, action=None)
                clock.tick(60)
                continue
            single_step = False

            action = int(actions[step_idx])
            _, _, term, trunc, _ = env.step(action)
            _draw_overlay(env, step_idx, action)
            step_idx += 1

            # Optional slow mode: cap to ~15 fps (decision rate) for readability
            clock.tick(15 if slow else 60)

            if term or trunc:
                pygame.time.delay(600)
                break
    finally:
        env.close()

def main():
    ap = argparse.ArgumentParser(description="Replay a recorded RunnerEnv episode with overlay.")
    ap.add_argument("--seed", type=int, help="Episode seed")
    ap.add_argument("--policy", type=str, default="random",
                    help="Trace subfolder name, e.g. random / heuristic")
    ap.add_argument("--trace", type=str, default="",
                    help="Optional explicit path to a .npy action file")
    ap.add_argument("--out-dir", type=str, default=DEFAULT_OUT_DIR,
                    help="Base directory where experiments/runs live")
    ap.add_argument("--frame-skip", type=int, default=-1,
                    help="Override frame_skip. If <0, use meta or default=4")
    ap.add_argument("--slow", action="store_true", help="Slow display (~15 fps) for readability")
    args = ap.parse_args()

    actions, fs, seed = load_trace(Path(args.out_dir), args.policy, args.seed,
                                   trace=args.trace, frame_skip=args.frame_skip)

    print(f"Replaying seed={seed}  policy={args.policy}  steps={len(actions)}  frame_skip={fs}")
    print("Controls: SPACE pause/resume | N step (when paused) | R restart | ESC quit")

    replay_episode(seed=seed, actions=actions, frame_skip=fs, slow=args.slow)

if __name__ == "__main__":
    main()
