"""Game configuration constants for Dragon Flight."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

# Window
WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
FPS = 60

# Physics (per tick, assumes a steady FPS cadence)
GRAVITY = 0.05  # px/tick^2
FLAP_VELOCITY = -4.0  # px/tick
TERMINAL_VELOCITY = 5.0  # px/tick

# Pillars
PILLAR_SPEED = 3.0  # px/tick
PILLAR_GAP = 300
PILLAR_WIDTH = 600
SPAWN_INTERVAL_MS = 2000
GAP_MARGIN = 150  # gap center stays this far from the top and bottom edges
CULL_X = -100  # pillars left of this x are dropped

# Collision leniency
HORIZONTAL_BUFFER = 200  # shrinks the pillar band from both sides
VERTICAL_BUFFER = 100  # widens the gap above and below

# Dragon
DRAGON_WIDTH = 180
DRAGON_HEIGHT = 180

# Assets
ASSET_DIR = Path(__file__).resolve().parent / "sprites"
ASSET_MANIFEST = {
    "dragon_up": "dragon_up.xpm",
    "dragon_down": "dragon_down.xpm",
    "pillar": "pillar.xpm",
}

# Palette (dusk over lava fields)
COL_BG_TOP = (28, 18, 46)
COL_BG_BOTTOM = (120, 44, 30)
SCORE_OUTER = (255, 69, 0)
SCORE_MIDDLE = (255, 140, 0)
SCORE_INNER = (255, 215, 0)
TEXT_COLOR = (235, 230, 225)
TEXT_DIM = (200, 195, 205)
OVERLAY_SHADE = (0, 0, 0, 150)


@dataclass(frozen=True)
class Tuning:
    """Gameplay constants that define how the game plays.

    Everything that materially changes playability is here so a session can be
    run with non-reference values (tests use smaller dragons, for example).
    """

    gravity: float = GRAVITY
    flap_velocity: float = FLAP_VELOCITY
    terminal_velocity: float = TERMINAL_VELOCITY
    pillar_speed: float = PILLAR_SPEED
    gap_height: float = PILLAR_GAP
    pillar_width: float = PILLAR_WIDTH
    spawn_interval_ms: float = SPAWN_INTERVAL_MS
    gap_margin: float = GAP_MARGIN
    cull_x: float = CULL_X
    horizontal_buffer: float = HORIZONTAL_BUFFER
    vertical_buffer: float = VERTICAL_BUFFER
    dragon_width: float = DRAGON_WIDTH
    dragon_height: float = DRAGON_HEIGHT

    def __post_init__(self) -> None:
        for name in ("spawn_interval_ms", "gap_height", "pillar_width", "dragon_width", "dragon_height"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)!r}")


DEFAULT_TUNING = Tuning()


@dataclass
class FieldGeometry:
    """Current play-field size; replaced whenever the window is resized."""

    width: int = WINDOW_WIDTH
    height: int = WINDOW_HEIGHT
