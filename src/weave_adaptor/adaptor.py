"""Middleware adaptor — one implementation, three calling conventions.

Subclass ``Adaptor`` and implement ``run()``::

    class Timing(Adaptor):
        def run(self, request):
            start = time.monotonic()
            response = self.chain(request)
            return response.with_header("X-Time", f"{time.monotonic() - start:.3f}")

    timing = Timing()

    timing(request, next)              # single-pass pipelines
    timing(request, response, next)   # double-pass pipelines
    timing.process(request, handler)   # standard delegate pipelines

Or skip inheritance and wrap a function that receives the invocation::

    @adapt
    def timing(request, invocation):
        return invocation.forward(request)

``run()`` may also be ``async def``; the entry point then returns an
awaitable and ``await self.chain(request)`` works as expected.
"""

import functools
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from weave_adaptor._internal.invoke import invoke_bound
from weave_adaptor._internal.types import Request, Response
from weave_adaptor.config import AdaptorConfig
from weave_adaptor.context import (
    Convention,
    Invocation,
    current_invocation,
    get_invocation,
    invocation_var,
)
from weave_adaptor.handlers import resolve_next
from weave_adaptor.protocol import AnyResponse, Next

logger = logging.getLogger("weave_adaptor")


class Adaptor(ABC):
    """Base class for middleware that runs under any calling convention.

    Per-request state lives in a ContextVar, never on the instance, so a
    single adaptor can be shared across threads and tasks.
    """

    config: AdaptorConfig = AdaptorConfig()

    def __init__(self, config: AdaptorConfig | None = None) -> None:
        self.config = config or AdaptorConfig()

    def __call__(
        self, request: Request, response_or_next: Any, next: Next | None = None
    ) -> AnyResponse:
        """Single-pass or double-pass entry point.

        A callable second argument is the next handler (single-pass) and
        ``next`` is ignored. Anything else is the response being carried
        down a double-pass pipeline, with ``next`` as the next handler.
        """
        if callable(response_or_next):
            invocation = self._resolve(Convention.SINGLE_PASS, response_or_next, None)
        else:
            invocation = self._resolve(Convention.DOUBLE_PASS, next, response_or_next)
        return self._dispatch(invocation, request)

    def process(self, request: Request, next: Next) -> AnyResponse:
        """Standard entry point.

        ``next`` is a delegate, so it is never mistaken for a single-pass
        callable even if it defines ``__call__``.
        """
        invocation = self._resolve(Convention.STANDARD, next, None)
        return self._dispatch(invocation, request)

    @abstractmethod
    def run(self, request: Request) -> AnyResponse:
        """Do the middleware's work. Call ``self.chain(request)`` to continue."""

    def chain(self, request: Request) -> AnyResponse:
        """Forward ``request`` to the next handler in the pipeline.

        Raises ``NoActiveInvocation`` when called outside ``run()``.
        """
        return get_invocation().forward(request)

    def response_object(self) -> Response | None:
        """Return the response carried in by a double-pass pipeline, or ``None``.

        Rarely needed. Middleware should normally build on the response
        returned by ``chain()``.
        """
        invocation = current_invocation()
        if invocation is None:
            return None
        return invocation.response

    def _resolve(self, convention: Convention, next_ref: Any, response: Response | None) -> Invocation:
        handler = resolve_next(next_ref, response, strict=self.config.strict)
        logger.debug(
            "%s entered %s, forwarding via %s",
            type(self).__name__,
            convention.value,
            type(handler).__name__,
        )
        return Invocation(convention=convention, next=next_ref, handler=handler, response=response)

    def _dispatch(self, invocation: Invocation, request: Request) -> AnyResponse:
        return invoke_bound(invocation_var, invocation, self.run, request)


class FunctionAdaptor(Adaptor):
    """Adaptor around a plain ``func(request, invocation)`` callable."""

    def __init__(
        self,
        func: Callable[[Request, Invocation], AnyResponse],
        config: AdaptorConfig | None = None,
    ) -> None:
        super().__init__(config)
        self.func = func
        functools.update_wrapper(self, func)

    def run(self, request: Request) -> AnyResponse:
        return self.func(request, get_invocation())

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {getattr(self.func, '__qualname__', self.func)!r}>"


def adapt(
    func: Callable[[Request, Invocation], AnyResponse] | None = None,
    *,
    config: AdaptorConfig | None = None,
) -> Any:
    """Turn a function into a multi-convention middleware.

    Usable bare or with arguments::

        @adapt
        def auth(request, invocation): ...

        @adapt(config=AdaptorConfig(strict=True))
        def auth(request, invocation): ...
    """
    if func is None:
        return functools.partial(FunctionAdaptor, config=config)
    return FunctionAdaptor(func, config)
