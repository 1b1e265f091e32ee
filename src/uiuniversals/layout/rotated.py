"""
Rotated layouts

A RotatedLayout reserves the axis aligned bounding box of its content rotated
by an angle (optionally scaled) and keeps the content centered inside it.
"""
import logging
import math

import pygame as pg

import uiuniversals.config as config
from uiuniversals.types import Coordinate, Rect, Size, Surface
from uiuniversals.utils.func import not_neg


def measure_rotated_bounds(
    width: float, height: float, angle: float, scale: float = 1
) -> Size:
    """
    The size of the smallest axis aligned box that contains a `width`x`height`
    rectangle rotated by `angle` (radians), multiplied by `scale`.

    Negative sizes and scales are treated as 0.
    """
    if config.DEBUG and min(width, height, scale) < 0:
        logging.debug(f"Clamping rotated bounds input: {(width, height, scale)}")
    width, height, scale = not_neg(width), not_neg(height), not_neg(scale)
    angle = abs(angle)
    # abs keeps the box a real bounding box for angles beyond a quarter turn
    cos, sin = abs(math.cos(angle)), abs(math.sin(angle))
    return Size(
        (width * cos + height * sin) * scale,
        (height * cos + width * sin) * scale,
    )


def place_centered(bounds: Rect, size: Coordinate) -> Rect:
    """
    A rect of the given size centered in bounds
    """
    rect = Rect((0, 0), size)
    rect.center = bounds.center
    return rect


class RotatedLayout:
    """
    Lays out a single child rotated by angle (radians) and scaled by scale
    """

    def __init__(self, angle: float, scale: float = 1):
        # signed, positive turns clockwise
        self.rotation = angle
        self.angle = abs(angle)
        self.scale = scale

    def size_that_fits(self, content_size: Coordinate) -> Size:
        return measure_rotated_bounds(*content_size, self.angle, self.scale)

    def place(self, bounds: Rect, content_size: Coordinate) -> Rect:
        return place_centered(bounds, content_size)

    def render(self, content: Surface) -> Surface:
        """
        The content rotated and scaled on a transparent surface
        """
        return pg.transform.rotozoom(content, -math.degrees(self.rotation), self.scale)

    def draw(self, surf: Surface, content: Surface, pos: Coordinate) -> Rect:
        """
        Draws the content at pos (the topleft of the bounds).
        Returns the rect of the reserved bounds.
        """
        bounds = Rect(pos, self.size_that_fits(content.get_size()))
        rendered = self.render(content)
        surf.blit(rendered, place_centered(bounds, rendered.get_size()))
        return bounds


class VerticalLayout(RotatedLayout):
    """
    A quarter turn: width and height of the content are swapped exactly
    """

    def __init__(self):
        super().__init__(math.pi / 2)

    def size_that_fits(self, content_size: Coordinate) -> Size:
        width, height = content_size
        return Size(height, width)

    def render(self, content: Surface) -> Surface:
        return pg.transform.rotate(content, -90)
