"""Adaptor exception hierarchy.

Errors raised by ``run()`` or by downstream handlers are never wrapped,
so these types only cover misuse of the adaptor itself.
"""


class AdaptorError(Exception):
    """Base for all weave_adaptor-specific errors."""


class ConfigurationError(AdaptorError):
    """Raised when an ``AdaptorConfig`` is invalid."""


class NoActiveInvocation(AdaptorError, LookupError):  # noqa: N818 — mirrors LookupError semantics
    """Raised when ``chain()`` or ``get_invocation()`` runs outside an invocation.

    Subclasses ``LookupError`` so code written against a bare
    ``ContextVar.get()`` keeps working.
    """

    def __init__(self, detail: str = "") -> None:
        super().__init__(
            detail
            or (
                "No active invocation. chain() can only be called from run() "
                "while the adaptor is being invoked as middleware."
            )
        )


class InvalidNextHandler(AdaptorError, TypeError):
    """Raised in strict mode when the next reference cannot be forwarded to.

    The reference must expose ``handle()`` or ``process()``, or be callable.
    """

    def __init__(self, next_ref: object) -> None:
        self.next_ref = next_ref
        super().__init__(
            f"{type(next_ref).__name__!r} object cannot be used as the next handler: "
            "expected a callable or an object with a handle() or process() method"
        )
