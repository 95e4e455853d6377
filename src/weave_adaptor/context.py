"""Invocation-scoped context via ContextVar.

Provides:
- ``Invocation``: the resolved state of one adaptor invocation.
- ``invocation_var``: the active ``Invocation`` for this task/thread.

The adaptor sets ``invocation_var`` around each call to ``run()`` and
resets it afterwards, so nothing carries over from one request to the
next and nested adaptors see their own state.

Thread safety:
    ``ContextVar`` is task-local under asyncio and thread-local under
    threads. One adaptor instance can serve concurrent requests.
"""

from contextvars import ContextVar
from dataclasses import dataclass
from enum import Enum
from typing import Any

from weave_adaptor._internal.types import Request, Response
from weave_adaptor.errors import NoActiveInvocation
from weave_adaptor.handlers import NextHandler, forward
from weave_adaptor.protocol import AnyResponse


class Convention(Enum):
    """How the adaptor was entered."""

    SINGLE_PASS = "single-pass"
    DOUBLE_PASS = "double-pass"
    STANDARD = "standard"


@dataclass(frozen=True, slots=True)
class Invocation:
    """Everything resolved at the entry point for a single request.

    ``next`` is the reference exactly as the pipeline passed it;
    ``handler`` is the same reference classified for forwarding.
    """

    convention: Convention
    next: Any
    handler: NextHandler
    response: Response | None = None

    def forward(self, request: Request) -> AnyResponse:
        """Pass ``request`` to the next handler and return its result."""
        return forward(self.handler, request)

    def response_object(self) -> Response | None:
        """The response carried in by a double-pass pipeline, if any."""
        return self.response


invocation_var: ContextVar[Invocation] = ContextVar("weave_adaptor_invocation")
"""The active invocation. Set by the adaptor entry points."""


def get_invocation() -> Invocation:
    """Return the active invocation.

    Raises ``NoActiveInvocation`` (a ``LookupError``) outside ``run()``.
    """
    try:
        return invocation_var.get()
    except LookupError:
        raise NoActiveInvocation() from None


def current_invocation() -> Invocation | None:
    """Return the active invocation, or ``None`` outside ``run()``."""
    return invocation_var.get(None)
