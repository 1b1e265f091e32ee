"""
Styles and themes

A Theme bundles the colors, font sizes and fonts of an application.
It is passed to everything that draws, together with the ColorScheme
(light or dark) the result should be drawn in.
Themes are immutable, the set_* methods return changed copies:

```python
theme = default_theme.set_colors(light_accent=ConvenienceColor(69, 121, 251))
```
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import auto

import uiuniversals.config as config
from uiuniversals.types import Color, Enum
from uiuniversals.utils.colors import make_color
from uiuniversals.utils.fonts import ProvidedFont, UniversalFont


class UniversalStyle(Enum):
    accent = "accent"  # the accent colors of the app
    primary = "primary"  # the base colors of the app
    secondary = "secondary"  # the secondary colors of the app
    transparent = "transparent"  # no color, a translucent material

    @property
    def id(self):
        return self.value


class ColorScheme(Enum):
    light = auto()
    dark = auto()


@dataclass(frozen=True)
class ConvenienceColor:
    """
    A color in base 255 for easily passing colors into `Theme.set_colors`
    """

    red: float
    green: float
    blue: float

    def convert(self) -> Color:
        return make_color(self.red, self.green, self.blue)


@dataclass(frozen=True)
class Constants:
    """
    Standard font sizes that work well with the provided fonts
    and some other universal values
    """

    large_text_size: float = config.default_font_sizes["large"]
    title_text_size: float = config.default_font_sizes["title"]
    main_header_text_size: float = config.default_font_sizes["main_header"]
    header_text_size: float = config.default_font_sizes["header"]
    sub_header_text_size: float = config.default_font_sizes["sub_header"]
    default_text_size: float = config.default_font_sizes["default"]
    small_text_size: float = config.default_font_sizes["small"]
    corner_radius: float = config.default_corner_radius
    bottom_of_page_padding: float = config.bottom_of_page_padding


def _keep(new, old):
    return old if new is None else new


@dataclass(frozen=True)
class Theme:
    # backgrounds of buttons, text, views. Neutral and unintrusive
    base_light: Color = field(default_factory=lambda: make_color(245, 234, 208))
    base_dark: Color = field(default_factory=lambda: make_color(0, 0, 0))
    # shows up on top of the base colors
    secondary_light: Color = field(default_factory=lambda: make_color(220, 207, 188))
    secondary_dark: Color = field(
        default_factory=lambda: make_color(25.5, 25.5, 25.5, 0.9 * 255)
    )
    # styled buttons, text fields, highlighted content
    light_accent: Color = field(default_factory=lambda: make_color(0, 87, 66))
    dark_accent: Color = field(default_factory=lambda: make_color(0, 87, 66))

    constants: Constants = field(default_factory=Constants)
    title_font: UniversalFont = field(
        default_factory=ProvidedFont.made_tommy_regular.font
    )
    main_font: UniversalFont = field(
        default_factory=ProvidedFont.made_tommy_regular.font
    )

    # color lookup
    def get_accent(self, scheme: ColorScheme) -> Color:
        return self.dark_accent if scheme is ColorScheme.dark else self.light_accent

    def get_base(self, scheme: ColorScheme) -> Color:
        return self.base_light if scheme is ColorScheme.light else self.base_dark

    def get_secondary_base(self, scheme: ColorScheme) -> Color:
        return (
            self.secondary_light
            if scheme is ColorScheme.light
            else self.secondary_dark
        )

    def get_color(self, style: UniversalStyle, scheme: ColorScheme) -> Color:
        match style:
            case UniversalStyle.primary:
                return self.get_base(scheme)
            case UniversalStyle.secondary:
                return self.get_secondary_base(scheme)
            case UniversalStyle.accent:
                return self.get_accent(scheme)
            case _:
                return self.light_accent

    def text_color(self, scheme: ColorScheme, reversed: bool = False) -> Color:
        dark_text = (scheme is ColorScheme.light) != reversed
        return Color("black") if dark_text else Color("white")

    def stroke_color(self, scheme: ColorScheme) -> Color:
        return Color("white") if scheme is ColorScheme.dark else Color("black")

    # changing the theme
    def set_colors(
        self,
        base_light: ConvenienceColor | None = None,
        secondary_light: ConvenienceColor | None = None,
        base_dark: ConvenienceColor | None = None,
        secondary_dark: ConvenienceColor | None = None,
        light_accent: ConvenienceColor | None = None,
        dark_accent: ConvenienceColor | None = None,
    ) -> Theme:
        """
        Changes the accent, base and secondary colors. `None` keeps a color.
        """
        given = {
            "base_light": base_light,
            "secondary_light": secondary_light,
            "base_dark": base_dark,
            "secondary_dark": secondary_dark,
            "light_accent": light_accent,
            "dark_accent": dark_accent,
        }
        return replace(
            self,
            **{
                name: color.convert()
                for name, color in given.items()
                if color is not None
            },
        )

    def set_default_fonts(
        self,
        main_font: UniversalFont | ProvidedFont | None = None,
        title_font: UniversalFont | ProvidedFont | None = None,
    ) -> Theme:
        if isinstance(main_font, ProvidedFont):
            main_font = main_font.font()
        if isinstance(title_font, ProvidedFont):
            title_font = title_font.font()
        return replace(
            self,
            main_font=_keep(main_font, self.main_font),
            title_font=_keep(title_font, self.title_font),
        )

    def set_font_sizes(self, **sizes: float | None) -> Theme:
        """
        `theme.set_font_sizes(header_text_size=45)`
        """
        changes = {name: size for name, size in sizes.items() if size is not None}
        return replace(self, constants=replace(self.constants, **changes))


default_theme = Theme()
