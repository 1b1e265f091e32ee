"""
Pygame related drawing utilities
"""

from enum import Flag, auto

import numpy as np
import pygame as pg

from uiuniversals.types import Color, ColorValue, Font, Rect, Surface


class Corner(Flag):
    top_left = auto()
    top_right = auto()
    bottom_left = auto()
    bottom_right = auto()
    all = top_left | top_right | bottom_left | bottom_right


def draw_rect(surf: Surface, color: ColorValue, rect: Rect, **kwargs):
    """
    Draws a better rect than default pygame (handles transparent colors).
    kwargs are passed to pg.draw.rect (border_radius, width, ...)
    """
    color = Color(color)
    rect = Rect(rect)
    if color.a == 255:
        pg.draw.rect(surf, color, rect, **kwargs)
        return
    drawn_rect = Surface(rect.size, flags=pg.SRCALPHA)
    pg.draw.rect(drawn_rect, color, drawn_rect.get_rect(), **kwargs)
    surf.blit(drawn_rect, rect)


def draw_rounded_rect(
    surf: Surface,
    color: ColorValue,
    rect: Rect,
    radius: float,
    corners: Corner = Corner.all,
    width: int = 0,
):
    """
    Draws a rect where only the given corners are rounded
    """
    radius = int(min(radius, Rect(rect).width / 2, Rect(rect).height / 2))
    radii = {
        f"border_{corner.name}_radius": radius if corner in corners else 0
        for corner in (
            Corner.top_left,
            Corner.top_right,
            Corner.bottom_left,
            Corner.bottom_right,
        )
    }
    draw_rect(surf, color, rect, width=width, border_radius=radius, **radii)


def draw_text(surf: Surface, text: str, font: Font, color, **kwargs):
    color = Color(color)
    if color.a:
        text_surf = font.render(text, True, color)
        dest = text_surf.get_rect(**kwargs)
        if color.a != 255:
            text_surf.set_alpha(color.a)
        surf.blit(text_surf, dest)


def box_blur(surf: Surface, radius: int) -> Surface:
    """
    Blurs the surface with a box blur of the given radius (in pixels)
    """
    radius = int(radius)
    if radius < 1:
        return surf.copy()
    rgb = pg.surfarray.array3d(surf).astype(np.float64)
    for axis in (0, 1):
        rgb = _blur_axis(rgb, radius, axis)
    blurred = pg.surfarray.make_surface(rgb.round().astype(np.uint8))
    return blurred


def _blur_axis(arr: np.ndarray, radius: int, axis: int) -> np.ndarray:
    """
    Moving average over 2*radius+1 pixels, edges are repeated
    """
    pad = [(0, 0)] * arr.ndim
    pad[axis] = (radius + 1, radius)
    padded = np.pad(arr, pad, mode="edge")
    summed = np.cumsum(padded, axis=axis)
    size = 2 * radius + 1
    upper = np.take(summed, range(size, summed.shape[axis]), axis=axis)
    lower = np.take(summed, range(0, summed.shape[axis] - size), axis=axis)
    return (upper - lower) / size

