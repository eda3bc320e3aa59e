# src/game/game.py
import sys, argparse, logging, random
import pygame
from pygame import K_SPACE, K_UP, K_ESCAPE, K_r, K_n
from .config import WIDTH, HEIGHT, FPS, SEED_DEFAULT, clamp_view_height
from .highscore import HighScoreStore, PeakTracker, DEFAULT_PATH
from .render import draw_frame
from .simulation import Simulation


def parse_args():
    p = argparse.ArgumentParser()
    p.add_argument("--seed", type=int, default=None,
                   help="Spawn seed. Omit for SEED_DEFAULT, use -1 for random each launch.")
    p.add_argument("--width", type=int, default=WIDTH)
    p.add_argument("--height", type=int, default=HEIGHT,
                   help="Clamped to VIEW_MIN_HEIGHT..VIEW_MAX_HEIGHT (260..400).")
    p.add_argument("--highscore", type=str, default=str(DEFAULT_PATH),
                   help="JSON file holding the best balance")
    p.add_argument("--log-level", type=str, default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args()


def run():
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # Resolve seed: None -> use SEED_DEFAULT; -1 -> random
    if args.seed is None:
        launch_seed = SEED_DEFAULT
    elif args.seed == -1:
        launch_seed = None  # signals Spawner to randomize
    else:
        launch_seed = args.seed

    height = int(clamp_view_height(args.height))
    pygame.init()
    pygame.display.set_caption("Bank Runner")
    screen = pygame.display.set_mode((args.width, height), pygame.RESIZABLE)
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("roboto,arial", max(12, round(height * 0.05)))

    store = HighScoreStore(args.highscore)
    tracker = PeakTracker(store)

    def on_game_over(final_balance: int):
        if tracker.flush():
            print(f"New high bank: {store.best}")

    sim = Simulation(args.width, height, seed=launch_seed,
                     on_balance_change=tracker.on_balance_change, on_game_over=on_game_over)
    tracker.peak = sim.state.balance

    while True:
        clock.tick(FPS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if event.type == pygame.VIDEORESIZE:
                sim.resize(event.w, event.h)
                # snap the window back into the playable height range
                screen = pygame.display.set_mode((event.w, int(sim.height)), pygame.RESIZABLE)
            if event.type == pygame.KEYDOWN:
                if event.key == K_ESCAPE:
                    pygame.quit(); sys.exit()
                if event.key in (K_SPACE, K_UP):
                    sim.request_jump()
                if event.key == K_r and sim.state.terminal:
                    # Restart SAME seed; the run already submitted at game over
                    sim.request_reset()
                if event.key == K_n:
                    # Restart with NEW RANDOM seed (even if still alive); keep an abandoned run's peak
                    if tracker.flush():
                        print(f"New high bank: {store.best}")
                    sim.request_reset(seed=random.randrange(0, 2**32 - 1))
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                sim.request_jump()

        sim.tick()

        # --- Render ---
        draw_frame(screen, sim.snapshot(), font=font, best=store.best)
        pygame.display.flip()


if __name__ == "__main__":
    run()
