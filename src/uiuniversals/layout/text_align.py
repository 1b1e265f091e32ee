"""
Text align

Horizontal alignment of stacked lines inside a box of max_width.

Should support:

leading, center, trailing

"""

from typing import Protocol

from uiuniversals.types import BugError, Enum


class TextAlignment(Enum):
    leading = "leading"
    center = "center"
    trailing = "trailing"


class TextAlign(Protocol):
    def __call__(self, max_width: float, widths: list[float]) -> list[float]:
        """
        Aligns lines of text
        """


def space_left(max_width, width):
    return max_width - width


def leading(max_width, widths):
    return [0.0 for _ in widths]


def trailing(max_width, widths):
    return [space_left(max_width, w) for w in widths]


def center(max_width, widths):
    return [space_left(max_width, w) / 2 for w in widths]


def align_by(
    alignment: TextAlignment, max_width: float, widths: list[float]
) -> list[float]:
    align: TextAlign | None = globals().get(alignment.value)
    if align is None:
        raise BugError(f"No alignment function for {alignment!r}")
    return align(max_width, widths)
