"""
Utils around fonts

The package ships three display fonts. A FontProvider registers them once and
hands out pygame Fonts for them (or for any other UniversalFont).
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

import pygame as pg
from frozendict import frozendict
from pygame.font import match_font

import uiuniversals.config as config
from uiuniversals.types import Enum, Font
from uiuniversals.utils import log_error_once


@dataclass(frozen=True)
class UniversalFont:
    postscript_name: str
    extension: str

    @property
    def filename(self):
        return f"{self.postscript_name}.{self.extension}"


class ProvidedFont(Enum):
    made_tommy_regular = 0  # a simple sans serif, light-weight font
    reno_mono = 1  # a designer mono-space font
    syne_heavy = 2  # a wide format, sans-serif display font

    @property
    def id(self):
        return self.value

    def font(self) -> UniversalFont:
        return provided_fonts[self]


provided_fonts: frozendict[ProvidedFont, UniversalFont] = frozendict(
    {
        ProvidedFont.made_tommy_regular: UniversalFont("MadeTommy", "otf"),
        ProvidedFont.reno_mono: UniversalFont("RenoMono-Regular", "otf"),
        ProvidedFont.syne_heavy: UniversalFont("Syne-Bold", "ttf"),
    }
)


@dataclass
class FontProvider:
    """
    Registers the provided fonts and loads pygame Fonts for UniversalFonts.

    `provider[ProvidedFont.reno_mono]` gives the UniversalFont,
    `provider.get(font, size)` gives a pygame Font of that size.
    """

    font_dir: str = config.font_dir
    registered_default_fonts: bool = False
    registered: dict[str, str] = field(default_factory=dict)
    font_cache: dict[tuple[str, int], Font] = field(default_factory=dict)

    def __getitem__(self, font: ProvidedFont) -> UniversalFont:
        return font.font()

    def register_font(self, font: UniversalFont) -> bool:
        """
        Registers a single font file. Returns whether the file could be found.
        """
        path = os.path.join(self.font_dir, font.filename)
        if not os.path.isfile(path):
            log_error_once(f"Couldn't find font file: {path!r}")
            return False
        self.registered[font.postscript_name] = path
        logging.debug(f"Registered font: {font.postscript_name!r}")
        return True

    def register_fonts(self):
        """
        Registers all provided fonts. Should be called at the start of the app.
        Calling it again does nothing.
        """
        if self.registered_default_fonts:
            return
        for font in provided_fonts.values():
            self.register_font(font)
        self.registered_default_fonts = True

    @staticmethod
    def load(path: str, size: int) -> Font | None:
        """
        Loads a font file, None if pygame can't read it
        """
        try:
            return Font(path, size)
        except (OSError, RuntimeError) as e:  # pg.error is a RuntimeError
            log_error_once(f"Couldn't load font file {path!r}: {e}")
            return None

    def get(self, font: UniversalFont | ProvidedFont, size: float) -> Font:
        """
        Takes a font and a size and tries to find the most fitting font.
        Registered files win over system fonts, the pygame default font is the last resort.
        """
        if isinstance(font, ProvidedFont):
            font = font.font()
        size = max(1, int(size))
        cache_key = (font.postscript_name, size)
        if _font := self.font_cache.get(cache_key):
            return _font
        if not pg.font.get_init():
            pg.font.init()
        _font = None
        if path := self.registered.get(font.postscript_name):
            _font = self.load(path, size)
        if _font is None and (path := match_font(font.postscript_name)):
            _font = self.load(path, size)
        if _font is None:
            log_error_once(f"Failed to find font {font.postscript_name!r}, using default")
            _font = Font(None, size)
        self.font_cache[cache_key] = _font
        return _font
