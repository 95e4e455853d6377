"""Calling-convention protocols.

The adaptor is invoked by, and forwards to, three middleware shapes::

    # Single-pass: next takes the request
    def mw(request, next): return next(request)

    # Double-pass: a response travels alongside the request
    def mw(request, response, next): return next(request, response)

    # Standard: a delegate object owns the rest of the pipeline
    class Mw:
        def process(self, request, handler): return handler.handle(request)

None of these need a base class. The adaptor checks the shape, not the
lineage. These protocols exist for type checkers and documentation.
"""

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from weave_adaptor._internal.types import Request, Response

# Whatever the pipeline produces. Owned by the HTTP message library.
type AnyResponse = Any


@runtime_checkable
class RequestHandler(Protocol):
    """A delegate exposing ``handle(request)``."""

    def handle(self, request: Request) -> AnyResponse: ...


@runtime_checkable
class Delegate(Protocol):
    """A delegate exposing ``process(request)`` (pre-``handle`` drafts)."""

    def process(self, request: Request) -> AnyResponse: ...


type SinglePassNext = Callable[[Request], AnyResponse]
type DoublePassNext = Callable[[Request, Response], AnyResponse]

# Every shape the adaptor can forward to
type Next = RequestHandler | Delegate | SinglePassNext | DoublePassNext


@runtime_checkable
class LegacyMiddleware(Protocol):
    """Middleware invoked directly, single-pass or double-pass."""

    def __call__(
        self, request: Request, response_or_next: Any, next: Next | None = None
    ) -> AnyResponse: ...


@runtime_checkable
class StandardMiddleware(Protocol):
    """Middleware invoked through ``process(request, handler)``."""

    def process(self, request: Request, next: Next) -> AnyResponse: ...
