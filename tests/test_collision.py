import pytest

from dragon_flight.collision import check_collision, check_pass
from dragon_flight.config import Tuning
from dragon_flight.entities import Dragon, Pillar


def dragon_box(left: float, top: float, bottom: float, width: float = 180) -> Dragon:
    return Dragon(left, top, width, bottom - top)


def test_inside_gap_is_safe() -> None:
    pillar = Pillar(0, 400)  # gap 250..550
    dragon = dragon_box(250, 260, 350)
    assert check_collision(pillar, dragon) is False


def test_below_loosened_gap_collides() -> None:
    pillar = Pillar(0, 400)
    dragon = dragon_box(250, 260, 700)  # 700 > 550 + 100
    assert check_collision(pillar, dragon) is True


def test_vertical_buffer_is_forgiving() -> None:
    pillar = Pillar(0, 400)
    assert check_collision(pillar, dragon_box(250, 160, 640)) is False
    assert check_collision(pillar, dragon_box(250, 149, 400)) is True


@pytest.mark.parametrize("top,bottom", [(0, 50), (260, 350), (600, 720), (-500, 2000)])
def test_outside_tightened_band_never_collides(top: float, bottom: float) -> None:
    pillar = Pillar(1000, 400)  # band is 1200..1400
    assert check_collision(pillar, dragon_box(1000 - 180, top, bottom)) is False  # right edge 1000 < 1200
    assert check_collision(pillar, dragon_box(1401, top, bottom)) is False


def test_band_edges_are_inclusive() -> None:
    pillar = Pillar(1000, 400)
    # right edge exactly at pillar_left + buffer counts as inside
    assert check_collision(pillar, dragon_box(1200 - 180, 0, 50)) is True
    # left edge exactly at pillar_right - buffer counts as inside
    assert check_collision(pillar, dragon_box(1400, 0, 50)) is True


def test_buffers_come_from_tuning() -> None:
    strict = Tuning(horizontal_buffer=0, vertical_buffer=0)
    pillar = Pillar(0, 400)
    dragon = dragon_box(-150, 240, 300)
    assert check_collision(pillar, dragon, strict) is True
    assert check_collision(pillar, dragon) is False


def test_gap_comes_from_the_pillar() -> None:
    narrow = Pillar(0, 400, Tuning(gap_height=100))  # loosened gap 250..550
    dragon = dragon_box(250, 200, 300)
    assert check_collision(narrow, dragon) is True
    assert check_collision(Pillar(0, 400), dragon) is False


def test_width_comes_from_the_pillar() -> None:
    slim = Pillar(0, 400, Tuning(pillar_width=500))  # band 200..300
    dragon = dragon_box(320, 0, 50)
    assert check_collision(slim, dragon) is False
    assert check_collision(Pillar(0, 400), dragon) is True


def test_check_pass_fires_once() -> None:
    pillar = Pillar(319, 400)
    dragon = dragon_box(320, 300, 400)
    assert check_pass(pillar, dragon) is True
    assert pillar.passed is True
    for _ in range(5):
        assert check_pass(pillar, dragon) is False
    assert pillar.passed is True


def test_check_pass_waits_for_leading_edge() -> None:
    pillar = Pillar(320, 400)
    dragon = dragon_box(320, 300, 400)
    assert check_pass(pillar, dragon) is False
    assert pillar.passed is False
