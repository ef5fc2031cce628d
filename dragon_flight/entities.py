"""Game entities: the player-controlled dragon and the pillars it flies through."""

from __future__ import annotations

from .config import DEFAULT_TUNING, Tuning


class Dragon:
    def __init__(self, x: float, y: float, width: float, height: float) -> None:
        self.x = float(x)
        self.y = float(y)
        self.width = float(width)
        self.height = float(height)
        self.velocity = 0.0
        # Which sprite to show: 1 = wings up, 2 = wings down
        self.frame = 1

    def reset(self, x: float, y: float) -> None:
        self.x = float(x)
        self.y = float(y)
        self.velocity = 0.0
        self.frame = 1

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height


class Pillar:
    """A pair of pillars (above and below) with a passable gap between them.

    Only ``x`` moves; the gap center is fixed at spawn. Width and gap height are
    shared by every pillar and come from the session's tuning.
    """

    def __init__(self, x: float, gap_center: float, tuning: Tuning = DEFAULT_TUNING) -> None:
        self.x = float(x)
        self.gap_center = float(gap_center)
        self.passed = False
        self._tuning = tuning

    @property
    def width(self) -> float:
        return self._tuning.pillar_width

    @property
    def right(self) -> float:
        return self.x + self._tuning.pillar_width

    @property
    def gap_top(self) -> float:
        return self.gap_center - self._tuning.gap_height / 2

    @property
    def gap_bottom(self) -> float:
        return self.gap_center + self._tuning.gap_height / 2

    def update(self, speed: float) -> None:
        self.x -= speed

    def offscreen(self, cull_x: float) -> bool:
        return self.x < cull_x

    def __repr__(self) -> str:
        return f"Pillar(x={self.x:.1f}, gap_center={self.gap_center:.1f}, passed={self.passed})"
