import asyncio
from datetime import datetime

import pygame as pg
from pytest import approx

import uiuniversals.utils as util
import uiuniversals.utils.colors as color_utils
import uiuniversals.utils.dates as dates
from uiuniversals.types import Color, Rect
from uiuniversals.utils.aio import AsyncLoader, ScenePhase, acall, call, is_visible


def test_func():
    assert util.in_bounds(3, 4, 5) == 4
    assert util.not_neg(-3) == 0
    assert util.count_all([1, 2, 3, 4], lambda x: x % 2 == 0) == 2

    assert util.round_to(3.14159, 2) == 3.14
    assert util.round_to(2.999, 1) == 2.9

    assert util.remove_first("hello", "l") == "helo"
    assert util.remove_first("abc", "z") == "abc"
    assert util.remove_non_numbers("$12.50 USD") == "12.50"


def test_phone_number():
    assert util.format_phone_number(15551234567) == "+1 (555) 123-4567"
    assert util.format_phone_number("1-555-123-4567") == "+1 (555) 123-4567"
    # stops when the digits run out
    assert util.format_phone_number(1234) == "+1 (234"


def test_colors():
    assert color_utils.to_hex(color_utils.make_color(0, 87, 66)) == "#005742ff"
    assert color_utils.to_hex("white") == "#ffffffff"
    assert color_utils.components(Color(255, 0, 0)) == (1, 0, 0, 1)
    assert color_utils.with_opacity("black", 0.2).a == 51
    assert color_utils.make_color(300, -5, 10) == Color(255, 0, 10)


def test_dates():
    date = datetime(2023, 1, 28, 5, 30, 30)
    assert dates.hours_from_start_of_day(date) == 5.5
    assert dates.minutes_from_start_of_hour(date) == 30.5
    assert dates.reset_to_start_of_day(date) == datetime(2023, 1, 28)
    assert dates.years_since(datetime(2024, 1, 1), datetime(2023, 1, 1)) == approx(
        365 / 365.25
    )

    assert dates.matches(date, datetime(2023, 1, 2), "month")
    assert not dates.matches(date, datetime(2023, 1, 2), "day")
    assert not dates.matches(date, datetime(2022, 1, 28), "day")

    assert dates.date_by_setting_hour(date, 7.25) == datetime(2023, 1, 28, 7, 15)
    assert dates.date_by_setting_hour(date, 7.25, ignore_minutes=True) == datetime(
        2023, 1, 28, 7, 30
    )
    # there is no 25 o'clock
    assert dates.date_by_setting_hour(date, 25) == date
    assert dates.date_by_setting_minutes(date, 10.5) == datetime(2023, 1, 28, 5, 10, 30)
    assert dates.date_by_setting_date(date, datetime(2020, 6, 1, 12)) == datetime(
        2020, 6, 1, 5, 30, 30
    )

    assert dates.prioritize_component(date, "year") == datetime(2023, 1, 1)
    assert dates.prioritize_component(date, "month") == datetime(2023, 1, 1)
    assert dates.prioritize_component(date, "day") == datetime(2023, 1, 28)

    assert dates.is_first_of_month(datetime(2023, 3, 1))
    assert not dates.is_first_of_month(date)
    assert dates.is_sunday(datetime(2023, 1, 29))
    assert not dates.is_sunday(date)

    assert dates.set_month(date, 3) == datetime(2023, 3, 28)
    # April has no 31st
    assert dates.set_month(datetime(2023, 1, 31), 4) == datetime(2023, 5, 1)
    assert dates.set_day(datetime(2023, 2, 10), 30) == datetime(2023, 3, 2)
    # month 0 and day 0 roll backwards
    assert dates.set_month(date, 0) == datetime(2022, 12, 28)
    assert dates.set_month(date, -1) == datetime(2022, 11, 28)
    assert dates.set_day(date, 0) == datetime(2022, 12, 31)
    assert dates.set_day(datetime(2023, 3, 5), -1) == datetime(2023, 2, 27)
    # year 0 does not exist
    assert dates.set_month(datetime(1, 1, 1), 0) == datetime(1, 1, 1)


async def test_async():
    def func(a):
        return a

    async def afunc(b):
        return b

    def kwfunc(a, b=2, d="123"):
        return a, b, d

    assert await acall(func, 1, 2) == 1
    assert await acall(afunc, 1, 2) == 1
    assert await acall(kwfunc, 1, d=3) == (1, 2, 3)
    assert call(func, 1, 2) == 1
    assert await call(afunc, 3) == 3


async def test_async_loader():
    calls = []

    async def block():
        await asyncio.sleep(0)
        calls.append(1)

    loader = AsyncLoader(block)
    assert loader.loading
    assert not loader.content_visible()

    await asyncio.gather(loader.ensure_loaded(), loader.ensure_loaded())
    await loader.ensure_loaded()
    assert calls == [1]
    assert loader.content_visible()
    assert not loader.content_visible(ScenePhase.background)
    assert not loader.content_visible(ScenePhase.inactive)

    loader.on_scene_phase_change(ScenePhase.inactive)
    assert not loader.loading
    loader.on_scene_phase_change(ScenePhase.active)
    assert loader.loading
    await loader.ensure_loaded()
    assert calls == [1, 1]

    loader.on_becoming_visible()
    assert loader.loading


async def test_async_loader_sync_block():
    calls = []
    loader = AsyncLoader(lambda: calls.append(1))
    await loader.ensure_loaded()
    assert calls == [1]
    assert not loader.loading


def test_is_visible():
    screen = Rect(0, 0, 100, 100)
    assert is_visible(Rect(90, 90, 20, 20), screen)
    assert not is_visible(Rect(100, 0, 20, 20), screen)
    assert not is_visible(Rect(-30, -30, 20, 20), screen)
