"""Invoke helpers — run sync or async middleware bodies uniformly.

``Adaptor.run()`` can be ``def`` or ``async def``. Either way the active
invocation has to be visible to ``chain()`` while the body executes. For a
sync body that means "while the call is on the stack"; for an async body
it means "while the coroutine is being awaited", which happens after the
entry point has already returned.

Usage::

    from weave_adaptor._internal.invoke import invoke_bound

    result = invoke_bound(invocation_var, invocation, self.run, request)
"""

import inspect
from collections.abc import Callable, Coroutine
from contextvars import ContextVar
from typing import Any


def invoke_bound[T](var: ContextVar[T], value: T, func: Callable[..., Any], *args: Any) -> Any:
    """Call ``func`` with ``var`` set to ``value``.

    Only coroutines (an ``async def`` body that has not started yet) are
    wrapped, so that ``var`` is set to ``value`` again while they run.
    Every other result, awaitable or not, is returned as-is.
    ``var`` is reset on the way out in both cases, including on error.
    """
    token = var.set(value)
    try:
        result = func(*args)
    finally:
        var.reset(token)
    if inspect.iscoroutine(result):
        return _await_bound(var, value, result)
    return result


async def _await_bound[T](var: ContextVar[T], value: T, coro: Coroutine[Any, Any, Any]) -> Any:
    token = var.set(value)
    try:
        return await coro
    finally:
        var.reset(token)
