"""Vertical physics for the dragon: gravity, flaps, ceiling and floor."""

from __future__ import annotations

from .config import DEFAULT_TUNING, Tuning
from .entities import Dragon


def apply_gravity(dragon: Dragon, field_height: float, tuning: Tuning = DEFAULT_TUNING) -> bool:
    """Advance the dragon by one tick.

    Gravity is a fixed per-tick increment, so the fall speed depends on the
    tick cadence. Returns True when the dragon has dropped through the floor.
    The ceiling only stops the dragon; the floor is fatal.
    """
    dragon.velocity = min(dragon.velocity + tuning.gravity, tuning.terminal_velocity)
    dragon.y += dragon.velocity

    if dragon.y < 0:
        dragon.y = 0.0
        dragon.velocity = 0.0
        return False
    return dragon.y + dragon.height > field_height


def apply_flap(dragon: Dragon, tuning: Tuning = DEFAULT_TUNING) -> None:
    # Overwrite rather than add: repeated flaps never stack
    dragon.velocity = tuning.flap_velocity
    dragon.frame = 2 if dragon.frame == 1 else 1
