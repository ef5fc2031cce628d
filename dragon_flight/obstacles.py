"""Pillar spawning, scrolling and culling."""

from __future__ import annotations

import logging
import random

from .config import DEFAULT_TUNING, FieldGeometry, Tuning
from .entities import Pillar

logger = logging.getLogger(__name__)


def spawn_due(now_ms: float, last_spawn_ms: float, interval_ms: float) -> bool:
    return now_ms - last_spawn_ms >= interval_ms


def spawn_pillar(field: FieldGeometry, tuning: Tuning = DEFAULT_TUNING, rng: random.Random | None = None) -> Pillar:
    """Create a pillar at the right edge with a random gap center.

    The gap center is drawn uniformly from ``[gap_margin, height - gap_margin]``
    of the current field, so the whole gap stays on screen.
    """
    rng = rng or random
    gap_center = rng.uniform(tuning.gap_margin, field.height - tuning.gap_margin)
    return Pillar(field.width, gap_center, tuning)


def maybe_spawn(
    pillars: list[Pillar],
    now_ms: float,
    last_spawn_ms: float,
    field: FieldGeometry,
    tuning: Tuning = DEFAULT_TUNING,
    rng: random.Random | None = None,
) -> float:
    """Append a new pillar if the spawn interval has elapsed.

    Returns the last spawn time, updated to ``now_ms`` when a pillar was added.
    """
    if not spawn_due(now_ms, last_spawn_ms, tuning.spawn_interval_ms):
        return last_spawn_ms
    pillar = spawn_pillar(field, tuning, rng)
    pillars.append(pillar)
    logger.debug("spawned %r at t=%.0fms", pillar, now_ms)
    return now_ms


def advance(pillars: list[Pillar], speed: float, cull_x: float) -> list[Pillar]:
    """Scroll every pillar left and return the ones still in play, in order."""
    for pillar in pillars:
        pillar.update(speed)
    return [p for p in pillars if not p.offscreen(cull_x)]
