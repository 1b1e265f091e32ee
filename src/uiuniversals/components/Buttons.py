"""
Buttons
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Callable

import pygame as pg

from uiuniversals.components.Text import TextCase, UniversalText
from uiuniversals.layout.rotated import RotatedLayout, place_centered
from uiuniversals.layout.text_align import TextAlignment
from uiuniversals.Theme import ColorScheme, Theme
from uiuniversals.types import Color, ColorValue, Enum, Rect, Size, Surface
from uiuniversals.utils.aio import call
from uiuniversals.utils.fonts import FontProvider
from uiuniversals.utils.func import noop
from uiuniversals.utils.pg import draw_rounded_rect

button_scale = 0.9
text_scale = 0.7
arrow_padding = 20


class VerticalAlignment(Enum):
    top = "top"
    center = "center"
    bottom = "bottom"


class ArrowDirection(Enum):
    up = 1
    down = -1


@dataclass
class LargeTextButton:
    """
    A tall, rotated button with big stacked text and an optional arrow.

    `angle` is in degrees.
    """

    text: str
    angle: float
    aspect_ratio: float = 2
    vertical_text_alignment: VerticalAlignment = VerticalAlignment.bottom
    arrow: bool = True
    arrow_direction: ArrowDirection = ArrowDirection.down
    arrow_width: float = 4
    color: ColorValue = field(default_factory=lambda: Color("red"))
    width: float = 100
    action: Callable[[], Any] = noop

    def __post_init__(self):
        if self.vertical_text_alignment is VerticalAlignment.center:
            self.arrow = False

    @property
    def frame_size(self) -> Size:
        return Size(self.width, self.width * self.aspect_ratio)

    @property
    def angle_radians(self) -> float:
        return math.radians(self.angle)

    @property
    def transformed_text(self) -> str:
        """
        Every word on its own line
        """
        return "\n".join(self.text.split())

    @property
    def inverted_alignment(self) -> VerticalAlignment:
        match self.vertical_text_alignment:
            case VerticalAlignment.top:
                return VerticalAlignment.bottom
            case VerticalAlignment.bottom:
                return VerticalAlignment.top
            case _:
                return self.vertical_text_alignment

    @property
    def layout(self) -> RotatedLayout:
        return RotatedLayout(self.angle_radians, button_scale)

    @property
    def bounds(self) -> Size:
        return self.layout.size_that_fits(self.frame_size)

    @staticmethod
    def arrow_head_width(width: float) -> float:
        return width / 2.5

    def arrow_rect(self) -> Rect:
        """
        The area of the arrow inside the frame. It sits opposite to the text.
        """
        width, height = self.frame_size
        arrow_height = height / 2 if self.text.strip() else height - arrow_padding
        rect = Rect(0, 0, width, arrow_height - arrow_padding)
        if self.inverted_alignment is VerticalAlignment.top:
            rect.top = arrow_padding
        else:
            rect.bottom = int(height) - arrow_padding
        return rect

    def draw_arrow(self, surf: Surface, rect: Rect, color: ColorValue):
        """
        A shaft with two head strokes at 45° pointing in the arrow direction
        """
        stroke = max(1, round(self.arrow_width))
        head = self.arrow_head_width(rect.width)
        tip = rect.midtop if self.arrow_direction is ArrowDirection.up else rect.midbottom
        back = rect.midbottom if self.arrow_direction is ArrowDirection.up else rect.midtop
        pg.draw.line(surf, color, tip, back, stroke)
        reach = head / math.sqrt(2)
        direction = self.arrow_direction.value  # up: the head opens downwards
        for side in (-1, 1):
            end = (tip[0] + side * reach, tip[1] + direction * reach)
            pg.draw.line(surf, color, tip, end, stroke)

    def render_frame(
        self, theme: Theme, scheme: ColorScheme, provider: FontProvider
    ) -> Surface:
        """
        The unrotated button
        """
        width, height = self.frame_size
        frame = Surface((math.ceil(width), math.ceil(height)), flags=pg.SRCALPHA)
        frame.fill((0, 0, 0, 0))
        frame_rect = frame.get_rect()
        draw_rounded_rect(frame, self.color, frame_rect, theme.constants.corner_radius)

        text_color = theme.text_color(scheme)
        if self.arrow:
            self.draw_arrow(frame, self.arrow_rect(), text_color)
        if self.text.strip():
            text = UniversalText(
                self.transformed_text,
                size=(theme.constants.header_text_size + 10) * text_scale,
                font=theme.main_font,
                case=TextCase.uppercase,
                scale=True,
                alignment=TextAlignment.center,
                line_spacing=-25 * text_scale,
            ).render(theme, scheme, provider, width=frame_rect.width * text_scale)
            text_rect = text.get_rect(centerx=frame_rect.centerx)
            match self.vertical_text_alignment:
                case VerticalAlignment.top:
                    text_rect.top = arrow_padding
                case VerticalAlignment.bottom:
                    text_rect.bottom = frame_rect.bottom - arrow_padding
                case _:
                    text_rect.centery = frame_rect.centery
            frame.blit(text, text_rect)
        return frame

    def render(
        self, theme: Theme, scheme: ColorScheme, provider: FontProvider
    ) -> Surface:
        """
        The rotated button on a surface the size of its bounds
        """
        bounds = self.bounds
        surf = Surface(
            (math.ceil(bounds.width), math.ceil(bounds.height)), flags=pg.SRCALPHA
        )
        surf.fill((0, 0, 0, 0))
        rotated = self.layout.render(self.render_frame(theme, scheme, provider))
        surf.blit(rotated, place_centered(surf.get_rect(), rotated.get_size()))
        return surf

    def click(self):
        return call(self.action)
