"""Pass detection and the lenient dragon/pillar overlap test."""

from __future__ import annotations

from .config import DEFAULT_TUNING, Tuning
from .entities import Dragon, Pillar


def check_pass(pillar: Pillar, dragon: Dragon) -> bool:
    """Mark the pillar passed once its leading edge is behind the dragon.

    Returns True only on the call that flips the flag, so each pillar is worth
    exactly one point however many ticks satisfy the condition.
    """
    if not pillar.passed and pillar.x < dragon.x:
        pillar.passed = True
        return True
    return False


def check_collision(pillar: Pillar, dragon: Dragon, tuning: Tuning = DEFAULT_TUNING) -> bool:
    """Axis-aligned test with a narrowed pillar band and a widened gap.

    Geometry comes from the pillar itself; ``tuning`` only supplies the
    leniency. The dragon only counts as inside the pillar horizontally once it
    is ``horizontal_buffer`` deep on either side, and the gap is extended by
    ``vertical_buffer`` above and below.
    """
    hbuf = tuning.horizontal_buffer
    vbuf = tuning.vertical_buffer

    if dragon.right < pillar.x + hbuf or dragon.left > pillar.right - hbuf:
        return False

    if dragon.top < pillar.gap_top - vbuf or dragon.bottom > pillar.gap_bottom + vbuf:
        return True

    return False
