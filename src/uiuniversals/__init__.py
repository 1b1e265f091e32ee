"""
UI components, style modifiers and layouts for pygame
"""
from uiuniversals.layout import (
    FlowItem,
    FlowPlacement,
    FlowPosition,
    WrappedRow,
    compute_flow_placement,
)
from uiuniversals.layout.rotated import RotatedLayout, VerticalLayout, measure_rotated_bounds
from uiuniversals.Theme import (
    ColorScheme,
    Constants,
    ConvenienceColor,
    Theme,
    UniversalStyle,
    default_theme,
)
from uiuniversals.utils.fonts import FontProvider, ProvidedFont, UniversalFont

__all__ = [
    # layout
    "FlowItem",
    "FlowPlacement",
    "FlowPosition",
    "WrappedRow",
    "compute_flow_placement",
    "RotatedLayout",
    "VerticalLayout",
    "measure_rotated_bounds",
    # styling
    "ColorScheme",
    "Constants",
    "ConvenienceColor",
    "Theme",
    "UniversalStyle",
    "default_theme",
    # fonts
    "FontProvider",
    "ProvidedFont",
    "UniversalFont",
]
