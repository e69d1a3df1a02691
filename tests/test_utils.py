import pytest

from game.shapes.palette import ENEMY_COLORS, enemy_color
from game.shapes.utils import circles_overlap, clamp, flip_y, to_surface


@pytest.mark.parametrize("level,index", [(1, 0), (4, 0), (5, 1), (9, 1), (10, 2), (25, 2)])
def test_enemy_color_tiers(level, index):
    assert enemy_color(level) == ENEMY_COLORS[index]


def test_to_surface_flips_y_at_native_size():
    size = (1920, 1080)
    assert to_surface(100, 1080, size, size) == (100, 0)
    assert to_surface(100, 0, size, size) == (100, 1080)


def test_to_surface_scales_smaller_window():
    # 960x540 fullscreen stretched over the 1920x1080 surface
    assert to_surface(480, 270, (960, 540), (1920, 1080)) == pytest.approx((960, 540))
    assert to_surface(0, 540, (960, 540), (1920, 1080)) == pytest.approx((0, 0))


def test_to_surface_scales_larger_window():
    assert to_surface(2560, 0, (2560, 1440), (1920, 1080)) == pytest.approx((1920, 1080))


def test_flip_y_is_its_own_inverse():
    assert flip_y(flip_y(123.0, 1080), 1080) == 123.0


def test_clamp():
    assert clamp(-1, 0, 5) == 0
    assert clamp(7, 0, 5) == 5
    assert clamp(3, 0, 5) == 3


def test_touching_circles_do_not_overlap():
    assert not circles_overlap(0, 0, 5, 10, 0, 5)
    assert circles_overlap(0, 0, 5, 9.9, 0, 5)
