import math

import pygame as pg
from pytest import approx

from uiuniversals.layout.rotated import (
    RotatedLayout,
    VerticalLayout,
    measure_rotated_bounds,
    place_centered,
)
from uiuniversals.types import Rect


def test_identity():
    assert measure_rotated_bounds(100, 50, 0) == (100, 50)
    assert measure_rotated_bounds(100, 50, 0, 1) == (100, 50)


def test_quarter_turn():
    assert measure_rotated_bounds(100, 50, math.pi / 2) == approx((50, 100))
    assert measure_rotated_bounds(100, 50, -math.pi / 2) == approx((50, 100))


def test_symmetry():
    for angle in (0, 0.1, math.pi / 6, math.pi / 4, 1.2, math.pi / 2):
        assert measure_rotated_bounds(100, 50, angle) == approx(
            measure_rotated_bounds(50, 100, math.pi / 2 - angle)
        )


def test_scale():
    for angle in (0, 0.3, math.pi / 4):
        width, height = measure_rotated_bounds(80, 30, angle)
        assert measure_rotated_bounds(80, 30, angle, 2.5) == approx(
            (width * 2.5, height * 2.5)
        )


def test_diagonal():
    side = 100 * math.sqrt(2)
    assert measure_rotated_bounds(100, 100, math.pi / 4) == approx((side, side))


def test_never_negative():
    assert measure_rotated_bounds(100, 50, math.pi) == approx((100, 50))
    assert measure_rotated_bounds(-100, 50, 0) == (0, 50)
    assert measure_rotated_bounds(100, 50, 0.5, -1) == (0, 0)


def test_place_centered():
    assert place_centered(Rect(0, 0, 100, 100), (40, 20)) == Rect(30, 40, 40, 20)
    layout = RotatedLayout(math.pi / 4)
    assert layout.place(Rect(10, 10, 100, 100), (40, 20)).center == (60, 60)


def test_vertical_layout():
    layout = VerticalLayout()
    assert layout.size_that_fits((40, 20)) == (20, 40)
    content = pg.Surface((40, 20), flags=pg.SRCALPHA)
    assert layout.render(content).get_size() == (20, 40)


def test_draw():
    content = pg.Surface((40, 20), flags=pg.SRCALPHA)
    content.fill("red")
    surf = pg.Surface((100, 100), flags=pg.SRCALPHA)
    surf.fill((0, 0, 0, 0))
    layout = RotatedLayout(math.pi / 2)
    bounds = layout.draw(surf, content, (0, 0))
    assert bounds.size == (20, 40)
    assert surf.get_at(bounds.center) == pg.Color("red")
    assert surf.get_at((90, 90)).a == 0
