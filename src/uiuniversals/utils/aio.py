"""
This module is explicitly for anything related to asyncio

This includes

calling sync or async callbacks the same way,
running an initialization block before showing content

"""

import asyncio
import inspect
import logging
from contextlib import suppress
from enum import auto
from typing import Any, Awaitable, Callable

from uiuniversals.types import Enum, Rect


async def acall(callback, *args, **kwargs):
    """
    Intelligently calls the callback with the given arguments, matching the most args
    """
    sig = inspect.signature(callback)
    _args = args[
        : min(
            len(
                [
                    param
                    for param in sig.parameters.values()
                    if not param.kind is inspect.Parameter.KEYWORD_ONLY
                ]
            ),
            len(args),
        )
    ]
    return await (
        callback(*_args, **kwargs)
        if inspect.iscoroutinefunction(callback)
        else asyncio.to_thread(callback, *_args, **kwargs)
    )


def call(callback, *args, **kwargs):
    """
    Synchronous version of acall. Awaitable results are scheduled as tasks.
    """
    _args = args
    with suppress(ValueError):
        sig = inspect.signature(callback)
        _args = args[
            : min(
                len(
                    [
                        param
                        for param in sig.parameters.values()
                        if not param.kind is inspect.Parameter.KEYWORD_ONLY
                    ]
                ),
                len(args),
            )
        ]
    rv = callback(*_args, **kwargs)
    if inspect.isawaitable(rv):
        return asyncio.ensure_future(rv)
    return rv


class ScenePhase(Enum):
    active = auto()
    inactive = auto()
    background = auto()


def is_visible(rect: Rect, screen_rect: Rect) -> bool:
    """
    Whether any part of rect is on the screen
    """
    return bool(Rect(screen_rect).colliderect(rect))


class AsyncLoader:
    """
    Runs `block` before its content is shown.

    Loading is armed again whenever the scene becomes active
    or the loader becomes visible.
    """

    def __init__(self, block: Callable[[], Awaitable[Any] | Any]):
        self.block = block
        self.loading = True
        self._lock = asyncio.Lock()

    async def ensure_loaded(self):
        """
        Runs the block once if loading, concurrent callers wait for the same run.
        """
        async with self._lock:
            if not self.loading:
                return
            logging.debug(f"Loading: {self.block!r}")
            await acall(self.block)
            self.loading = False

    def content_visible(self, phase: ScenePhase = ScenePhase.active) -> bool:
        return not self.loading and phase not in (
            ScenePhase.background,
            ScenePhase.inactive,
        )

    def on_scene_phase_change(self, phase: ScenePhase):
        if phase is ScenePhase.active:
            self.loading = True

    def on_becoming_visible(self):
        self.loading = True
