"""Concurrency helpers for controlling background thread usage."""

from __future__ import annotations

from functools import partial
from typing import Any, Callable

import anyio

from rfm_api.core.config import settings

_generate_sem = anyio.Semaphore(settings.GENERATE_MAX_CONCURRENCY)


async def run_in_thread_limited(func: Callable[..., Any], *args: Any, **kwargs: Any):
    """Run a sync callable in a worker thread with bounded concurrency."""

    async with _generate_sem:
        return await anyio.to_thread.run_sync(partial(func, *args, **kwargs))
