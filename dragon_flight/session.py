"""Game session: owns the dragon, the pillars and the score, and runs one tick at a time."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from .collision import check_collision, check_pass
from .config import DEFAULT_TUNING, FieldGeometry, Tuning
from .entities import Dragon, Pillar
from .obstacles import advance, maybe_spawn
from .physics import apply_flap, apply_gravity
from .state import ACCEPTED_EVENTS, GameState, InputEvent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DragonView:
    x: float
    y: float
    width: float
    height: float
    frame: int


@dataclass(frozen=True)
class PillarView:
    x: float
    gap_center: float
    passed: bool


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of one tick, everything the renderer needs."""

    state: GameState
    score: int
    best: int
    field_width: int
    field_height: int
    dragon: DragonView
    pillars: tuple[PillarView, ...]
    gap_height: float
    pillar_width: float


class GameSession:
    """Single owner of all mutable game state.

    Nothing outside this class touches the dragon or the pillar list; input
    arrives through :meth:`handle` and time through :meth:`tick`.
    """

    def __init__(
        self,
        field: FieldGeometry | None = None,
        tuning: Tuning = DEFAULT_TUNING,
        seed: int | None = None,
    ) -> None:
        self.field = field or FieldGeometry()
        self.tuning = tuning
        self.rng = random.Random(seed)
        self.state = GameState.START
        self.score = 0
        self.best = 0
        self.pillars: list[Pillar] = []
        self.last_spawn_ms = 0.0
        self.dragon = Dragon(0, 0, tuning.dragon_width, tuning.dragon_height)
        self._place_dragon()

    def _place_dragon(self) -> None:
        self.dragon.reset(self.field.width / 4, self.field.height / 2)

    def resize(self, width: int, height: int) -> None:
        self.field = FieldGeometry(width, height)
        logger.debug("field resized to %dx%d", width, height)

    def _start_round(self, now_ms: float) -> None:
        self.score = 0
        self.pillars = []
        self.last_spawn_ms = now_ms
        self._place_dragon()
        self.state = GameState.PLAYING
        logger.info("round started")

    def _game_over(self, cause: str) -> None:
        self.state = GameState.GAME_OVER
        self.best = max(self.best, self.score)
        logger.info("game over (%s), score=%d best=%d", cause, self.score, self.best)

    def handle(self, event: InputEvent, now_ms: float = 0.0) -> bool:
        """Apply an input event. Returns False if the current state ignores it."""
        if event not in ACCEPTED_EVENTS[self.state]:
            logger.debug("ignored %s while %s", event.value, self.state.value)
            return False
        if event is InputEvent.FLAP:
            apply_flap(self.dragon, self.tuning)
        else:
            # BEGIN from the start screen and RESET after a crash both go
            # straight into a fresh round
            self._start_round(now_ms)
        return True

    def tick(self, now_ms: float) -> None:
        if self.state is not GameState.PLAYING:
            return

        if apply_gravity(self.dragon, self.field.height, self.tuning):
            self._game_over("floor")
            return

        self.last_spawn_ms = maybe_spawn(
            self.pillars, now_ms, self.last_spawn_ms, self.field, self.tuning, self.rng
        )
        self.pillars = advance(self.pillars, self.tuning.pillar_speed, self.tuning.cull_x)

        for pillar in self.pillars:
            if check_pass(pillar, self.dragon):
                self.score += 1
            if check_collision(pillar, self.dragon, self.tuning):
                self._game_over("pillar")
                return

    def snapshot(self) -> Snapshot:
        d = self.dragon
        return Snapshot(
            state=self.state,
            score=self.score,
            best=self.best,
            field_width=self.field.width,
            field_height=self.field.height,
            dragon=DragonView(d.x, d.y, d.width, d.height, d.frame),
            pillars=tuple(PillarView(p.x, p.gap_center, p.passed) for p in self.pillars),
            gap_height=self.tuning.gap_height,
            pillar_width=self.tuning.pillar_width,
        )
