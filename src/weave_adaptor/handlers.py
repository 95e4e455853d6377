"""Next-handler classification and forwarding.

A raw "next" reference is classified once, when the adaptor is entered,
into one of four variants. Forwarding is then a plain ``match`` with no
reflection::

    handler = resolve_next(next_ref, response)
    result = forward(handler, request)

Precedence, highest first:

1. ``handle(request)`` on an object
2. ``process(request)`` on an object
3. ``next(request, response)`` when a response was carried in
4. ``next(request)``
"""

from dataclasses import dataclass
from typing import Any

from weave_adaptor._internal.types import Request, Response
from weave_adaptor.errors import InvalidNextHandler
from weave_adaptor.protocol import AnyResponse


@dataclass(frozen=True, slots=True)
class HandleCapable:
    """Next reference exposing ``handle(request)``."""

    target: Any


@dataclass(frozen=True, slots=True)
class ProcessCapable:
    """Next reference exposing ``process(request)``."""

    target: Any


@dataclass(frozen=True, slots=True)
class DoublePassCallable:
    """Next reference called as ``target(request, response)``."""

    target: Any
    response: Response


@dataclass(frozen=True, slots=True)
class SinglePassCallable:
    """Next reference called as ``target(request)``."""

    target: Any


type NextHandler = HandleCapable | ProcessCapable | DoublePassCallable | SinglePassCallable


def _has_method(obj: object, name: str) -> bool:
    return callable(getattr(obj, name, None))


def resolve_next(next_ref: Any, response: Response | None = None, *, strict: bool = False) -> NextHandler:
    """Classify a raw next reference.

    With ``strict=False`` anything without ``handle``/``process`` is
    assumed callable; if it is not, the forwarding call raises the usual
    ``TypeError``. With ``strict=True`` that case raises
    ``InvalidNextHandler`` here instead.
    """
    if _has_method(next_ref, "handle"):
        return HandleCapable(next_ref)
    if _has_method(next_ref, "process"):
        return ProcessCapable(next_ref)
    if strict and not callable(next_ref):
        raise InvalidNextHandler(next_ref)
    if response is not None:
        return DoublePassCallable(next_ref, response)
    return SinglePassCallable(next_ref)


def forward(handler: NextHandler, request: Request) -> AnyResponse:
    """Make exactly one call to the next handler and return its result."""
    match handler:
        case HandleCapable(target=target):
            return target.handle(request)
        case ProcessCapable(target=target):
            return target.process(request)
        case DoublePassCallable(target=target, response=response):
            return target(request, response)
        case SinglePassCallable(target=target):
            return target(request)
