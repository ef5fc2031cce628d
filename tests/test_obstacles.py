import random

from dragon_flight.config import GAP_MARGIN, SPAWN_INTERVAL_MS, FieldGeometry, Tuning
from dragon_flight.entities import Pillar
from dragon_flight.obstacles import advance, maybe_spawn, spawn_due, spawn_pillar


def test_spawn_due_at_interval() -> None:
    assert spawn_due(1999, 0, 2000) is False
    assert spawn_due(2000, 0, 2000) is True
    assert spawn_due(5000, 1000, 2000) is True


def test_spawn_pillar_at_right_edge_within_margin() -> None:
    rng = random.Random(7)
    field = FieldGeometry(1280, 720)
    for _ in range(200):
        pillar = spawn_pillar(field, rng=rng)
        assert pillar.x == 1280
        assert GAP_MARGIN <= pillar.gap_center <= 720 - GAP_MARGIN
        assert pillar.passed is False


def test_spawn_follows_current_geometry() -> None:
    rng = random.Random(8)
    pillar = spawn_pillar(FieldGeometry(800, 1000), rng=rng)
    assert pillar.x == 800
    assert GAP_MARGIN <= pillar.gap_center <= 1000 - GAP_MARGIN


def test_maybe_spawn_respects_cadence() -> None:
    rng = random.Random(9)
    field = FieldGeometry()
    pillars: list[Pillar] = []
    last = maybe_spawn(pillars, 1000, 0, field, rng=rng)
    assert pillars == [] and last == 0
    last = maybe_spawn(pillars, SPAWN_INTERVAL_MS, last, field, rng=rng)
    assert len(pillars) == 1 and last == SPAWN_INTERVAL_MS
    last = maybe_spawn(pillars, SPAWN_INTERVAL_MS + 10, last, field, rng=rng)
    assert len(pillars) == 1 and last == SPAWN_INTERVAL_MS


def test_maybe_spawn_custom_interval() -> None:
    pillars: list[Pillar] = []
    tuning = Tuning(spawn_interval_ms=100)
    last = maybe_spawn(pillars, 100, 0, FieldGeometry(), tuning, random.Random(1))
    assert last == 100
    assert pillars[0].width == tuning.pillar_width


def test_advance_moves_and_culls_in_order() -> None:
    pillars = [Pillar(-99, 300), Pillar(-50, 300), Pillar(-98, 300), Pillar(500, 300)]
    survivors = advance(pillars, 3, -100)
    assert [p.x for p in survivors] == [-53, 497]


def test_advance_handles_adjacent_removals() -> None:
    # Consecutive culls must not skip the element after a removed one
    pillars = [Pillar(-99, 300), Pillar(-99, 300), Pillar(-99, 300)]
    assert advance(pillars, 3, -100) == []


def test_advance_returns_new_list() -> None:
    pillars = [Pillar(500, 300)]
    survivors = advance(pillars, 3, -100)
    assert survivors is not pillars
    assert survivors[0] is pillars[0]
