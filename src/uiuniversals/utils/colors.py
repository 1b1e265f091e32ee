from uiuniversals.types import Color, ColorValue
from uiuniversals.utils.func import in_bounds


############################# Colors #####################################
def make_color(r: float, g: float, b: float, a: float = 255) -> Color:
    """
    r,g,b,a in [0,255]
    """
    return Color(*(round(in_bounds(x, 0, 255)) for x in (r, g, b, a)))


def with_opacity(color: ColorValue, opacity: float) -> Color:
    """
    opacity in [0,1], replaces the alpha channel of the color
    """
    color = Color(color)
    color.a = round(in_bounds(opacity, 0, 1) * 255)
    return color


def components(color: ColorValue) -> tuple[float, float, float, float]:
    """
    red, green, blue and opacity, each in [0,1]
    """
    color = Color(color)
    return (color.r / 255, color.g / 255, color.b / 255, color.a / 255)


def to_hex(color: ColorValue) -> str:
    """
    "#rrggbbaa" of the color
    """
    color = Color(color)
    return "#%02x%02x%02x%02x" % (color.r, color.g, color.b, color.a)


# palette
yellow = make_color(234, 169, 40)
pink = make_color(198, 62, 120)
purple = make_color(106, 38, 153)
grape = make_color(70, 42, 171)
blue = make_color(69, 121, 251)
red = make_color(236, 81, 46)
