"""
The preview window that shows the components
"""

import asyncio
import logging
import os
import random
from contextlib import redirect_stdout

with open(os.devnull, "w") as f, redirect_stdout(f):
    import pygame as pg

import uiuniversals.config as config
from uiuniversals.components import (
    LargeTextButton,
    UniversalText,
    VerticalAlignment,
    rectangular_background,
)
from uiuniversals.layout import WrappedRow
from uiuniversals.Theme import ColorScheme, Theme, UniversalStyle, default_theme
from uiuniversals.types import Rect, Surface
from uiuniversals.utils import colors
from uiuniversals.utils.aio import AsyncLoader
from uiuniversals.utils.fonts import FontProvider, ProvidedFont
from uiuniversals.utils.pg import draw_rounded_rect, draw_text

from .config import g

CLOCK = pg.time.Clock()
""" The global pygame clock """

margin = 20


def make_random_data(count: int = 30) -> list[str]:
    return ["0" * random.randint(1, 7) for _ in range(count)]


def make_chip(
    text: str, theme: Theme, scheme: ColorScheme, provider: FontProvider
) -> Surface:
    font = provider.get(theme.main_font, theme.constants.small_text_size)
    width, height = font.size(text)
    chip = Surface((width + 20, height + 10), flags=pg.SRCALPHA)
    chip.fill((0, 0, 0, 0))
    draw_rounded_rect(chip, theme.get_secondary_base(scheme), chip.get_rect(), 10)
    draw_text(chip, text, font, theme.text_color(scheme), center=chip.get_rect().center)
    return chip


class Preview:
    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.scheme = ColorScheme.light
        self.provider = FontProvider()
        self.loader = AsyncLoader(self.provider.register_fonts)
        self.header = UniversalText(
            "Hello World!",
            size=theme.constants.sub_header_text_size,
            font=ProvidedFont.syne_heavy,
        )
        self.chips = WrappedRow(
            make_random_data(),
            lambda text: make_chip(text, self.theme, self.scheme, self.provider),
        )
        self.button = LargeTextButton(
            "hel lo",
            angle=45,
            aspect_ratio=1.5,
            vertical_text_alignment=VerticalAlignment.bottom,
            color=colors.blue,
            action=lambda: logging.info("Button pressed"),
        )
        self.button_rect = Rect(0, 0, 0, 0)

    def draw(self, screen: Surface):
        width = screen.get_width() - 2 * margin
        screen.fill(self.theme.get_base(self.scheme))

        header = self.header.render(self.theme, self.scheme, self.provider, width)
        header_rect = header.get_rect(topleft=(margin, margin))
        background = rectangular_background(
            screen,
            header_rect,
            self.theme,
            self.scheme,
            style=UniversalStyle.transparent,
            corner_radius=20,
            shadow=True,
        )
        screen.blit(header, header_rect)

        self.chips.layout(width)
        self.chips.rel_pos((margin, background.bottom + margin))
        self.chips.draw(screen)

        button = self.button.render(self.theme, self.scheme, self.provider)
        self.button_rect = button.get_rect(
            topleft=(margin, background.bottom + 2 * margin + self.chips.height)
        )
        screen.blit(button, self.button_rect)

    def handle_event(self, event: pg.event.Event):
        if event.type == pg.KEYDOWN and event.key == pg.K_d:
            self.scheme = (
                ColorScheme.dark
                if self.scheme is ColorScheme.light
                else ColorScheme.light
            )
        elif event.type == pg.MOUSEBUTTONDOWN:
            if self.button_rect.collidepoint(event.pos):
                self.button.click()
            elif (chip := self.chips.collide(event.pos)) is not None:
                logging.info(f"Clicked chip: {chip!r}")


async def main():
    """The main function that includes the main event-loop"""
    flags = pg.RESIZABLE * g["resizable"]
    screen = pg.display.set_mode((g["W"], g["H"]), flags)
    pg.display.set_caption(g["default_title"])
    preview = Preview()
    while True:
        if pg.event.peek(pg.QUIT):
            return
        await preview.loader.ensure_loaded()
        if preview.loader.content_visible():
            preview.draw(screen)
        else:
            screen.fill(g["window_bg"])
        if config.DEBUG:
            draw_text(
                screen,
                str(round(CLOCK.get_fps())),
                pg.font.SysFont("Arial", 18),
                "black",
                topright=(screen.get_width() - 20, 20),
            )
        pg.display.flip()
        await asyncio.to_thread(CLOCK.tick, g["FPS"])
        for event in pg.event.get(exclude=pg.QUIT):
            preview.handle_event(event)


async def arun():
    """
    Runs the preview

    ```py
    await arun()
    ```
    """
    logging.info("Starting")
    pg.init()
    try:
        await main()
    except asyncio.exceptions.CancelledError:
        pass
    finally:
        logging.info("Exiting")
        pg.quit()


def run():
    """
    Runs the preview synchronously
    """
    logging.basicConfig(level=logging.INFO)
    asyncio.run(arun())
