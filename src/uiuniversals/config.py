""" Any global variables are stored here"""
import os
from typing import Any

from .types import Color

# fmt: off
g: dict[str, Any] = {
    # User settable
    "W": 900,                       # int
    "H": 600,                       # int
    "window_bg": Color("white"),    # Color
    "resizable": True,              # bool
    "default_title": "UIUniversals",
    "FPS": 60,                      # float
}

DEBUG = True

################################ constant data ########################

# timings in seconds
MINUTE_TIME: float = 60
HOUR_TIME: float = 3600
DAY_TIME: float = 86400
WEEK_TIME: float = 604800
YEAR_TIME: float = 31557600

# layout
default_spacing: float = 10
default_padding: float = 16
min_scale_factor = 0.1
wrapped_line_limit = 30

# font sizes
default_font_sizes = {
    "large": 130,
    "title": 80,
    "main_header": 60,
    "header": 40,
    "sub_header": 30,
    "default": 20,
    "small": 15,
}
default_corner_radius: float = 40
bottom_of_page_padding: float = 130

# where the provided font files are looked up
font_dir = os.path.join(os.path.dirname(__file__), "resources", "fonts")
# fmt: on
