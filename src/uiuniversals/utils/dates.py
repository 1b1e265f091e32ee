"""
Date helpers

Every function returns a new datetime. If the requested date cannot exist
(hour 25, minute 61, ...) the given date is returned unchanged.
Months and days out of range roll over into the neighbouring year or month.
"""
from datetime import datetime, timedelta
from typing import Literal

from uiuniversals.config import MINUTE_TIME, YEAR_TIME

Component = Literal["year", "month", "day", "hour", "minute", "second"]

_components: tuple[Component, ...] = ("year", "month", "day", "hour", "minute", "second")


def _replace(date: datetime, **kwargs) -> datetime:
    try:
        return date.replace(**kwargs)
    except ValueError:
        return date


def _rolling_date(date: datetime, year: int, month: int, day: int) -> datetime:
    """
    Builds a date at midnight where a month or day out of range rolls over
    into the next (or previous) year or month
    """
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    try:
        return date.replace(
            year=year, month=month, day=1, hour=0, minute=0, second=0, microsecond=0
        ) + timedelta(days=day - 1)
    except (ValueError, OverflowError):
        # outside of the years datetime supports
        return date


def hours_from_start_of_day(date: datetime) -> float:
    """
    5:30AM -> 5.5
    """
    return date.minute / MINUTE_TIME + date.hour


def minutes_from_start_of_hour(date: datetime) -> float:
    """
    5:30:30AM -> 30.5
    """
    return date.second / 60 + date.minute


def years_since(date: datetime, other: datetime) -> float:
    return (date - other).total_seconds() / YEAR_TIME


def reset_to_start_of_day(date: datetime) -> datetime:
    return date.replace(hour=0, minute=0, second=0, microsecond=0)


def matches(date: datetime, other: datetime, component: Component) -> bool:
    """
    Whether both dates match up to the given component.
    Smaller components require all larger components to match as well.
    """
    assert component in _components
    index = _components.index(component)
    return all(
        getattr(date, comp) == getattr(other, comp)
        for comp in _components[: index + 1]
    )


def date_by_setting_hour(
    date: datetime, hour: float, ignore_minutes: bool = False
) -> datetime:
    """
    Sets the time of day from fractional hours: 5.5 -> 5:30.
    With `ignore_minutes` the minutes of the date are kept.
    """
    int_hour = int(hour)
    minutes = (hour - int_hour) * MINUTE_TIME
    return _replace(
        date,
        hour=int_hour,
        minute=date.minute if ignore_minutes else int(minutes),
        second=0,
        microsecond=0,
    )


def date_by_setting_minutes(date: datetime, minutes: float) -> datetime:
    """
    Sets the minutes (and seconds) from fractional minutes: 30.5 -> xx:30:30
    """
    int_minutes = int(minutes)
    seconds = (minutes - int_minutes) * 60
    return _replace(date, minute=int_minutes, second=int(seconds), microsecond=0)


def date_by_setting_date(date: datetime, other: datetime) -> datetime:
    """
    The time of `date` on the calendar day of `other`
    """
    return _replace(
        other,
        hour=date.hour,
        minute=date.minute,
        second=date.second,
        microsecond=0,
    )


def prioritize_component(date: datetime, component: Component) -> datetime:
    """
    Erases everything below the component. Only year, month and day are supported:
    prioritizing the month of 1/28/23 gives 1/1/23.
    """
    match component:
        case "month":
            return _rolling_date(date, date.year, date.month, 1)
        case "day":
            return _rolling_date(date, date.year, date.month, date.day)
        case _:
            return _rolling_date(date, date.year, 1, 1)


def is_first_of_month(date: datetime) -> bool:
    return date.day == 1


def is_sunday(date: datetime) -> bool:
    return date.weekday() == 6


def set_month(date: datetime, month: int) -> datetime:
    """
    Sets the month keeping the day. Days the month doesn't have roll over into the next month,
    month 0 is December of the year before.
    """
    return _rolling_date(date, date.year, month, date.day)


def set_day(date: datetime, day: int) -> datetime:
    """
    Day 0 is the last day of the month before
    """
    return _rolling_date(date, date.year, date.month, day)
