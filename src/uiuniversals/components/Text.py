"""
Text and icons

UniversalText renders text in one of the provided fonts with the universal
text styling: a text case, a line limit, line spacing (negative values pull
lines together), horizontal alignment and optional shrinking to fit.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

import pygame as pg

import uiuniversals.config as config
from uiuniversals.layout import flow_rows
from uiuniversals.layout.text_align import TextAlignment, align_by
from uiuniversals.Theme import ColorScheme, Theme
from uiuniversals.types import Enum, Font, Surface
from uiuniversals.utils.fonts import FontProvider, ProvidedFont, UniversalFont
from uiuniversals.utils.pg import draw_text


class TextCase(Enum):
    lowercase = "lowercase"
    uppercase = "uppercase"


@dataclass
class UniversalText:
    text: str
    size: float
    font: ProvidedFont | UniversalFont = ProvidedFont.made_tommy_regular
    case: TextCase | None = TextCase.lowercase
    wrap: bool = True
    # fixed text ignores the content scale
    fixed: bool = False
    scale: bool = False
    alignment: TextAlignment = TextAlignment.leading
    line_spacing: float = 0.5

    @property
    def display_text(self) -> str:
        match self.case:
            case TextCase.lowercase:
                return self.text.lower()
            case TextCase.uppercase:
                return self.text.upper()
            case _:
                return self.text

    @property
    def line_limit(self) -> int:
        return config.wrapped_line_limit if self.wrap else 1

    def layout_lines(self, font: Font, width: float | None = None) -> list[str]:
        """
        Splits the text into lines, wrapping words to width if given.
        Without wrapping every paragraph stays a single line.
        """
        lines: list[str] = []
        space = font.size(" ")[0]
        for paragraph in self.display_text.split("\n"):
            words = paragraph.split()
            if width is None or not words or not self.wrap:
                lines.append(" ".join(words))
                continue
            rows = flow_rows([font.size(word)[0] for word in words], width, space)
            lines.extend(" ".join(words[i] for i in row) for row in rows)
        return lines[: self.line_limit]

    def line_offsets(self, count: int) -> list[float]:
        return [i * self.line_spacing for i in range(count)]

    def bottom_padding(self, count: int) -> float:
        """
        Negative line spacing shrinks the block by the overlap of its lines
        """
        if self.line_spacing >= 0 or count < 1:
            return 0
        return (count - 1) * self.line_spacing

    def font_size(self, content_scale: float = 1) -> float:
        return self.size if self.fixed else self.size * content_scale

    def fit_font(
        self,
        provider: FontProvider,
        width: float | None = None,
        content_scale: float = 1,
    ) -> Font:
        """
        The font to render with. With `scale` it shrinks (down to a tenth)
        until the widest line fits into width.
        """
        size = self.font_size(content_scale)
        font = provider.get(self.font, size)
        if not self.scale or width is None:
            return font
        widest = max(
            (font.size(line)[0] for line in self.layout_lines(font, width)),
            default=0,
        )
        if widest <= width:
            return font
        factor = max(config.min_scale_factor, width / widest)
        return provider.get(self.font, size * factor)

    def render(
        self,
        theme: Theme,
        scheme: ColorScheme,
        provider: FontProvider,
        width: float | None = None,
        content_scale: float = 1,
        reversed: bool = False,
    ) -> Surface:
        font = self.fit_font(provider, width, content_scale)
        lines = self.layout_lines(font, width)
        widths = [font.size(line)[0] for line in lines]
        box_width = max(widths, default=0) if width is None else width
        line_height = font.get_linesize()
        count = len(lines)
        gaps = (count - 1) * max(0, self.line_spacing)
        height = count * line_height + gaps + self.bottom_padding(count)

        surf = Surface(
            (math.ceil(box_width), math.ceil(max(0, height))), flags=pg.SRCALPHA
        )
        surf.fill((0, 0, 0, 0))
        color = theme.text_color(scheme, reversed)
        for i, (x, line, offset) in enumerate(
            zip(align_by(self.alignment, box_width, widths), lines, self.line_offsets(len(lines)))
        ):
            draw_text(surf, line, font, color, topleft=(x, i * line_height + offset))
        return surf


@dataclass
class ResizeableIcon:
    """
    An icon scaled to a height, keeping its aspect ratio
    """

    icon: Surface
    size: float

    def render(self) -> Surface:
        width, height = self.icon.get_size()
        if not height:
            return self.icon.copy()
        factor = self.size / height
        return pg.transform.scale(
            self.icon, (max(1, round(width * factor)), max(1, round(self.size)))
        )
