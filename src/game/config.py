from dataclasses import dataclass

# --- Display ---
WIDTH = 800
HEIGHT = 350
FPS = 60
VIEW_MIN_HEIGHT = 260      # world height range; the fixed per-tick jump
VIEW_MAX_HEIGHT = 400      # clears obstacles only inside it

# --- World / Physics (per tick, frame-locked) ---
START_SPEED = 6.0            # base scroll speed (px/tick)
SPEED_RAMP_EVERY = 1000      # ticks between speed increments
SPEED_RAMP_DELTA = 0.15      # px/tick added at each increment
GRAVITY = 1.2                # px/tick^2, positive = down
JUMP_IMPULSE = -16.0         # px/tick, negative = up

# --- Character (fractions of the viewport) ---
GROUND_FRACTION = 0.28       # ground line sits this far above the bottom edge
PLAYER_SIZE_FRACTION = 0.16  # square character, side = H * fraction
PLAYER_X_FRACTION = 0.06     # fixed column

# --- Economy ---
START_BALANCE = 100
OBSTACLE_PENALTY = 25
COIN_REWARD = 10

# --- Spawning ---
OBSTACLE_CADENCE = 90        # ticks
COIN_CADENCE = 160           # ticks
SPAWN_MARGIN = 20            # px right of the viewport
DESPAWN_MARGIN = 50          # px left of the viewport
OBSTACLE_HEIGHT_FRACTION = 0.10
OBSTACLE_MIN_HEIGHT = 24
OBSTACLE_VARIANTS = 4
COIN_SIZE_FRACTION = 0.10
COIN_MIN_SIZE = 32
COIN_BAND_OFFSET = 80        # px above the ground line (lowest coin top)
COIN_BAND_SPAN = 60          # px of random extra height
SEED_DEFAULT = 12345

# --- Parallax ---
LAYER_COUNT = 3
LAYER_OVERSCAN = 50          # px kept covered beyond both screen edges
LAYER_BASE_MULTIPLIER = 0.18
LAYER_MULTIPLIER_STEP = 0.12
LAYER_BASE_HEIGHT = 0.18
LAYER_HEIGHT_STEP = 0.05
LAYER_BOTTOM_GAP = 40
LAYER_STACK_STEP = 6

# --- Day / night ---
SCENE_DURATION_S = 15.0
SUN_Y_FRACTION = 0.18
SUN_SWING_FRACTION = 0.06
SUN_MIN_RADIUS = 10

# --- Colors (RGB) ---
COLOR_FG = (21, 101, 192)
COLOR_PLAYER = (46, 125, 50)
COLOR_OBSTACLE = (183, 28, 28)
COLOR_COIN = (255, 235, 59)
COLOR_ROAD = (58, 58, 58)
COLOR_CURB = (107, 107, 107)
COLOR_PANEL = (40, 60, 90)
COLOR_PANEL_EDGE = (90, 130, 180)
COLOR_PANEL_TEXT = (220, 235, 255)


@dataclass(frozen=True)
class RunnerConfig:
    """Gameplay tunables for one Simulation. Defaults mirror the module constants."""
    start_balance: int = START_BALANCE
    obstacle_penalty: int = OBSTACLE_PENALTY
    coin_reward: int = COIN_REWARD
    obstacle_cadence: int = OBSTACLE_CADENCE
    coin_cadence: int = COIN_CADENCE
    spawn_margin: float = SPAWN_MARGIN
    despawn_margin: float = DESPAWN_MARGIN
    start_speed: float = START_SPEED
    speed_ramp_every: int = SPEED_RAMP_EVERY
    speed_ramp_delta: float = SPEED_RAMP_DELTA
    gravity: float = GRAVITY
    jump_impulse: float = JUMP_IMPULSE
    scene_duration_s: float = SCENE_DURATION_S

    def validate(self) -> "RunnerConfig":
        assert self.obstacle_cadence >= 1, "obstacle_cadence must be >= 1"
        assert self.coin_cadence >= 1, "coin_cadence must be >= 1"
        assert self.speed_ramp_every >= 1, "speed_ramp_every must be >= 1"
        assert self.gravity > 0.0, "gravity must pull down (> 0)"
        assert self.jump_impulse < 0.0, "jump_impulse must point up (< 0)"
        assert self.scene_duration_s > 0.0, "scene_duration_s must be > 0"
        return self


def clamp_view_height(height: float) -> float:
    """Viewport height the world is laid out in; the pixel jump only fits this range."""
    return min(VIEW_MAX_HEIGHT, max(VIEW_MIN_HEIGHT, height))
