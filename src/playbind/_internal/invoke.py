"""Invoke helpers — call sync or async route handlers uniformly.

Route handlers can be ``def`` or ``async def``. Any code that calls a
user-provided handler must handle both cases. This module provides a
single helper so the sync/async check lives in exactly one place.

Usage::

    from playbind._internal.invoke import invoke

    result = await invoke(handler, route, request)
"""

import functools
import inspect
from typing import Any

import anyio


async def invoke(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Call a handler, awaiting coroutine functions.

    Coroutine functions are awaited on the current event loop. Plain
    callables run in an anyio worker thread so a blocking handler (one that
    fulfills a route with a synchronous HTTP call, say) does not stall the
    loop delivering other interception events::

        # sync: runs in a worker thread
        def block_images(route, request):
            route.abort()

        # async: awaited directly
        async def mock_api(route, request):
            await route.fulfill(json={"ok": True})
    """
    if inspect.iscoroutinefunction(handler):
        return await handler(*args, **kwargs)
    result = await anyio.to_thread.run_sync(functools.partial(handler, *args, **kwargs))
    if inspect.isawaitable(result):
        result = await result
    return result
