from .Backgrounds import (
    draw_divider,
    image_background,
    rectangular_background,
    universal_background,
)
from .Buttons import ArrowDirection, LargeTextButton, VerticalAlignment
from .Text import ResizeableIcon, TextCase, UniversalText

__all__ = [
    "ArrowDirection",
    "LargeTextButton",
    "ResizeableIcon",
    "TextCase",
    "UniversalText",
    "VerticalAlignment",
    "draw_divider",
    "image_background",
    "rectangular_background",
    "universal_background",
]
