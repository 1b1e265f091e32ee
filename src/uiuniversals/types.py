"""
A single source of thruth for types that are used in the other modules.
Instead of importing Rects or Colors from pygame, import them from here.
"""
from __future__ import annotations

from enum import Enum as _Enum
from typing import NamedTuple, TypeVar, Union

from pygame import Color
from pygame.font import Font
from pygame.math import Vector2
from pygame.rect import Rect
from pygame.surface import Surface


class BugError(AssertionError):
    """A type of error that should never occur. If it occurs, something needs to be fixed."""


# Aliases
##########################################################################

# a size, vector, or position
Coordinate = Union[tuple[float, float], Vector2]
ColorValue = Union[Color, str, tuple[int, int, int], tuple[int, int, int, int]]

V_T = TypeVar("V_T")


class Size(NamedTuple):
    width: float
    height: float


class Enum(_Enum):
    def __repr__(self):
        return f"{self.__class__.__name__}.{self.name}"


__all__ = [
    "BugError",
    "Color",
    "ColorValue",
    "Coordinate",
    "Enum",
    "Font",
    "Rect",
    "Size",
    "Surface",
    "V_T",
    "Vector2",
]
