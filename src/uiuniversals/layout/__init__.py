"""
This is layout utilities for views

The flow layout places items left to right and starts a new row
whenever the next item would overflow the available width.

Placement happens in two passes.
First the items are grouped into rows, only looking at their widths.
Then every row gets its y position from the true heights of the rows before it
and every item is vertically centered inside its row.

Positions are the topleft of each item relative to the container, y grows downwards.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Iterable, NamedTuple, Sequence

import uiuniversals.config as config
from uiuniversals.types import Coordinate, Rect, Surface, V_T


class FlowItem(NamedTuple):
    id: Any
    width: float
    height: float


class FlowPosition(NamedTuple):
    id: Any
    x: float
    y: float


@dataclass
class FlowPlacement:
    positions: list[FlowPosition] = field(default_factory=list)
    container_height: float = 0
    # indices into the placed sequence, one list per row
    rows: list[list[int]] = field(default_factory=list)

    def position_of(self, id: Any) -> FlowPosition | None:
        """
        The position of the first item with the given id
        """
        for position in self.positions:
            if position.id == id:
                return position
        return None


def _clamped(value: float, name: str) -> float:
    if value < 0:
        if config.DEBUG:
            logging.debug(f"Clamping negative {name} to 0: {value}")
        return 0
    return value


def flow_rows(
    widths: Sequence[float], available_width: float, spacing: float
) -> list[list[int]]:
    """
    Groups the items into rows. Returns the indices of the items in each row.

    A new row is started when the item is not the first in its row
    and it would overflow the available width.
    """
    rows: list[list[int]] = []
    current_row: list[int] = []
    x = 0.0
    for i, width in enumerate(widths):
        if x > 0 and x + width > available_width:
            rows.append(current_row)
            current_row = []
            x = 0.0
        current_row.append(i)
        x += width + spacing
    if current_row:
        rows.append(current_row)
    return rows


def compute_flow_placement(
    items: Iterable[FlowItem | tuple[Any, float, float]],
    available_width: float,
    spacing: float = config.default_spacing,
) -> FlowPlacement:
    """
    Places the items in rows bounded by the available width.

    Items wider than the available width get a row for themselves at x=0.
    The spacing is only put between items and between rows.
    """
    _items = [
        FlowItem(id, _clamped(width, "width"), _clamped(height, "height"))
        for id, width, height in items
    ]
    available_width = _clamped(available_width, "available width")
    spacing = _clamped(spacing, "spacing")

    rows = flow_rows([item.width for item in _items], available_width, spacing)

    positions: list[FlowPosition | None] = [None] * len(_items)
    y = 0.0
    for row in rows:
        row_height = max(_items[i].height for i in row)
        x = 0.0
        for i in row:
            item = _items[i]
            positions[i] = FlowPosition(item.id, x, y + (row_height - item.height) / 2)
            x += item.width + spacing
        y += row_height + spacing

    # the last row is not followed by spacing
    container_height = y - spacing if rows else 0
    return FlowPlacement(positions, container_height, rows)  # type: ignore


@dataclass(init=False)
class WrappedRow(Generic[V_T]):
    """
    A container that lays out one child per object in the collection in a flow layout.

    `content` makes the child Surface for an object.
    Call `layout(width)`, then `rel_pos(pos)`, then `draw(surf)`.
    """

    collection: list[V_T]
    content: Callable[[V_T], Surface]
    spacing: float
    height: float

    def __init__(
        self,
        collection: Iterable[V_T],
        content: Callable[[V_T], Surface],
        spacing: float = config.default_spacing,
    ):
        self.collection = list(collection)
        self.content = content
        self.spacing = spacing
        self.height = 0
        self.children: list[Surface] = []
        self.placement = FlowPlacement()
        # implementation detail
        # available after rel_pos
        self.abs_rects: list[Rect] = []

    def layout(self, width: float):
        self.children = [self.content(obj) for obj in self.collection]
        self.placement = compute_flow_placement(
            (
                FlowItem(i, *child.get_size())
                for i, child in enumerate(self.children)
            ),
            width,
            self.spacing,
        )
        self.height = self.placement.container_height
        self.abs_rects = []
        return self

    def rel_pos(self, pos: Coordinate):
        """
        Makes the positions that were relative to the container
        be absolute to the screen
        """
        x, y = pos
        self.abs_rects = [
            Rect((x + position.x, y + position.y), child.get_size())
            for position, child in zip(self.placement.positions, self.children)
        ]

    def draw(self, surf: Surface):
        for rect, child in zip(self.abs_rects, self.children):
            surf.blit(child, rect)

    def collide(self, pos: Coordinate) -> V_T | None:
        for rect, obj in zip(self.abs_rects, self.collection):
            if rect.collidepoint(pos):
                return obj
        return None

    def __bool__(self):
        return bool(self.collection)
