import random

import pygame as pg
from pytest import approx

from uiuniversals.layout import (
    FlowItem,
    FlowPlacement,
    WrappedRow,
    compute_flow_placement,
    flow_rows,
)

widths = [50, 60, 40, 90, 30]


def make_items(widths, height=20):
    return [FlowItem(i, w, height) for i, w in enumerate(widths)]


def test_rows():
    """
    120 fits into 150, adding 40 would make it 170.
    140 fits, adding 30 would make it 180.
    """
    placement = compute_flow_placement(make_items(widths), 150, 10)
    assert placement.rows == [[0, 1], [2, 3], [4]]
    assert [(p.x, p.y) for p in placement.positions] == [
        (0, 0),
        (60, 0),
        (0, 30),
        (50, 30),
        (0, 60),
    ]
    # 3 rows of 20 and 2 gaps of 10
    assert placement.container_height == 80


def test_flow_rows():
    assert flow_rows(widths, 150, 10) == [[0, 1], [2, 3], [4]]
    assert flow_rows(widths, 1000, 10) == [[0, 1, 2, 3, 4]]
    assert flow_rows([], 100, 10) == []


def test_empty():
    placement = compute_flow_placement([], 150)
    assert placement == FlowPlacement()
    assert placement.container_height == 0
    assert placement.positions == []


def test_oversized():
    placement = compute_flow_placement(make_items([50, 200, 50]), 100, 10)
    assert placement.rows == [[0], [1], [2]]
    assert placement.positions[1].x == 0
    assert placement.positions[1].y == 30

    # an oversized first item doesn't leave an empty row in front of it
    placement = compute_flow_placement(make_items([200, 30]), 100, 10)
    assert placement.rows == [[0], [1]]
    assert placement.positions[0].y == 0


def test_vertical_centering():
    items = [FlowItem("small", 20, 20), FlowItem("tall", 20, 40)]
    placement = compute_flow_placement(items, 100, 10)
    assert placement.position_of("small").y == 10
    assert placement.position_of("tall").y == 0
    assert placement.container_height == 40


def test_tuples_and_ids():
    # ids only need to support ==
    placement = compute_flow_placement([([1], 10, 10), ([2], 10, 10)], 100, 5)
    assert placement.position_of([2]).x == 15
    assert placement.position_of([3]) is None


def test_default_spacing():
    placement = compute_flow_placement(make_items([10, 10]), 100)
    assert placement.positions[1].x == 20


def test_clamping():
    placement = compute_flow_placement(make_items([10, 10]), 100, -5)
    assert placement.positions[1].x == 10
    placement = compute_flow_placement([("a", -10, -10), ("b", 10, 10)], 100, 0)
    assert placement.positions[1].x == 0
    assert placement.positions[0].y == 5
    # every item gets its own row
    placement = compute_flow_placement(make_items([10, 10]), -100, 0)
    assert placement.rows == [[0], [1]]


def test_properties():
    rng = random.Random(1234)
    for _ in range(50):
        items = [
            FlowItem(i, rng.uniform(0, 120), rng.uniform(1, 40))
            for i in range(rng.randint(0, 30))
        ]
        available_width = rng.uniform(50, 300)
        spacing = rng.uniform(0, 20)
        placement = compute_flow_placement(items, available_width, spacing)
        # idempotence
        assert placement == compute_flow_placement(items, available_width, spacing)
        # order is preserved
        flattened = [i for row in placement.rows for i in row]
        assert flattened == list(range(len(items)))
        for row in placement.rows:
            xs = [placement.positions[i].x for i in row]
            assert xs == sorted(xs)
            # no overflow except for single items
            if len(row) > 1:
                used = sum(items[i].width for i in row) + (len(row) - 1) * spacing
                assert used <= available_width + 1e-9
        heights = [max(items[i].height for i in row) for row in placement.rows]
        expected = sum(heights) + max(0, len(heights) - 1) * spacing
        assert placement.container_height == approx(expected)


def test_wrapped_row():
    row = WrappedRow([50, 60, 40], lambda width: pg.Surface((width, 10)), spacing=10)
    row.layout(120)
    assert row.height == 30
    row.rel_pos((100, 100))
    assert row.collide((165, 105)) == 60
    assert row.collide((105, 125)) == 40
    assert row.collide((0, 0)) is None
    surf = pg.Surface((300, 300))
    row.draw(surf)
    assert WrappedRow([], lambda obj: pg.Surface((1, 1))).layout(100).height == 0
