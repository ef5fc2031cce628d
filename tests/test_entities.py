from dragon_flight.config import PILLAR_GAP, PILLAR_WIDTH, Tuning
from dragon_flight.entities import Dragon, Pillar


def test_dragon_box_edges() -> None:
    dragon = Dragon(100, 50, 180, 120)
    assert dragon.left == 100
    assert dragon.right == 280
    assert dragon.top == 50
    assert dragon.bottom == 170


def test_dragon_reset_clears_motion_and_frame() -> None:
    dragon = Dragon(100, 50, 180, 180)
    dragon.velocity = 3.5
    dragon.frame = 2
    dragon.reset(320, 360)
    assert (dragon.x, dragon.y) == (320, 360)
    assert dragon.velocity == 0.0
    assert dragon.frame == 1


def test_pillar_gap_geometry() -> None:
    pillar = Pillar(1000, 400)
    assert pillar.gap_top == 400 - PILLAR_GAP / 2
    assert pillar.gap_bottom == 400 + PILLAR_GAP / 2
    assert pillar.right == 1000 + PILLAR_WIDTH
    assert pillar.passed is False


def test_pillar_uses_session_tuning() -> None:
    tuning = Tuning(gap_height=100, pillar_width=50)
    pillar = Pillar(10, 200, tuning)
    assert pillar.gap_top == 150
    assert pillar.gap_bottom == 250
    assert pillar.width == 50


def test_pillar_update_and_offscreen() -> None:
    pillar = Pillar(-95, 300)
    assert pillar.offscreen(-100) is False
    pillar.update(3)
    assert pillar.x == -98
    pillar.update(3)
    assert pillar.offscreen(-100) is True
