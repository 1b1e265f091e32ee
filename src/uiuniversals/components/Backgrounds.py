"""
Backgrounds and styling

Each function draws one of the universal styles onto a surface,
resolving its colors from the given theme and color scheme.
"""
import uiuniversals.config as config
from uiuniversals.Theme import ColorScheme, Theme, UniversalStyle
from uiuniversals.types import Color, ColorValue, Font, Rect, Surface
from uiuniversals.utils.colors import with_opacity
from uiuniversals.utils.fonts import FontProvider, ProvidedFont
from uiuniversals.utils.pg import box_blur, draw_rect, draw_rounded_rect

shadow_color = with_opacity("black", 0.2)
shadow_offset = (0, 5)
image_overlay_opacity = 0.55


def material_color(scheme: ColorScheme) -> Color:
    """
    The translucent fill used by the transparent style
    """
    if scheme is ColorScheme.light:
        return with_opacity("white", 0.55)
    return with_opacity("black", 0.55)


def style_color(theme: Theme, scheme: ColorScheme, style: UniversalStyle) -> Color:
    if style is UniversalStyle.transparent:
        return material_color(scheme)
    return theme.get_color(style, scheme)


def universal_background(
    surf: Surface,
    rect: Rect,
    theme: Theme,
    scheme: ColorScheme,
    style: UniversalStyle = UniversalStyle.primary,
    padding: float = 0,
    color: ColorValue | None = None,
) -> Rect:
    """
    Fills rect with the color of the style (or the given color).
    Returns the content rect inset by padding.
    """
    draw_rect(surf, theme.get_color(style, scheme) if color is None else color, rect)
    return Rect(rect).inflate(-2 * padding, -2 * padding)


def rectangular_background(
    surf: Surface,
    content_rect: Rect,
    theme: Theme,
    scheme: ColorScheme,
    padding: float | None = None,
    style: UniversalStyle = UniversalStyle.primary,
    stroke: bool = False,
    corner_radius: float | None = None,
    shadow: bool = False,
) -> Rect:
    """
    Draws a rounded rect behind the content, padding it on all sides.
    Returns the rect of the background.
    """
    if padding is None:
        padding = config.default_padding
    if corner_radius is None:
        corner_radius = theme.constants.corner_radius
    rect = Rect(content_rect).inflate(2 * padding, 2 * padding)

    if shadow:
        draw_rounded_rect(surf, shadow_color, rect.move(shadow_offset), corner_radius)
    draw_rounded_rect(surf, style_color(theme, scheme, style), rect, corner_radius)
    if stroke:
        draw_rounded_rect(
            surf, theme.stroke_color(scheme), rect, corner_radius, width=1
        )
    return rect


def image_background(
    image: Surface,
    theme: Theme,
    scheme: ColorScheme,
    blur_radius: int = 30,
) -> Surface:
    """
    A blurred copy of the image, tinted with the secondary base color
    """
    background = box_blur(image, blur_radius)
    overlay = with_opacity(
        theme.get_secondary_base(scheme),
        image_overlay_opacity * theme.get_secondary_base(scheme).a / 255,
    )
    draw_rect(background, overlay, background.get_rect())
    return background


def draw_divider(
    surf: Surface,
    rect: Rect,
    vertical: bool = False,
    stroke_width: float = 1,
    color: ColorValue = "black",
) -> Rect:
    """
    A line along the top (or the left if vertical) of rect
    """
    rect = Rect(rect)
    if vertical:
        line = Rect(rect.topleft, (stroke_width, rect.height))
    else:
        line = Rect(rect.topleft, (rect.width, stroke_width))
    draw_rect(surf, color, line)
    return line


def accent_color(theme: Theme, scheme: ColorScheme) -> Color:
    """
    The foreground and background color of accented views
    """
    return theme.get_accent(scheme)


def text_field_style(theme: Theme, provider: FontProvider) -> tuple[Color, Font]:
    """
    Tint and font of text fields
    """
    tint = theme.light_accent
    font = provider.get(ProvidedFont.reno_mono, theme.constants.default_text_size)
    return tint, font
