"""Tests for weave_adaptor.protocol — runtime-checkable delegate and middleware shapes."""

from weave_adaptor.adaptor import adapt
from weave_adaptor.protocol import (
    Delegate,
    LegacyMiddleware,
    RequestHandler,
    StandardMiddleware,
)

from .fakes import BothDelegate, HandleDelegate, PassThrough, ProcessDelegate, SinglePass


def test_handle_delegate_is_request_handler() -> None:
    assert isinstance(HandleDelegate(), RequestHandler)
    assert not isinstance(HandleDelegate(), Delegate)


def test_process_delegate_is_delegate() -> None:
    assert isinstance(ProcessDelegate(), Delegate)
    assert not isinstance(ProcessDelegate(), RequestHandler)


def test_both() -> None:
    delegate = BothDelegate()
    assert isinstance(delegate, RequestHandler)
    assert isinstance(delegate, Delegate)


def test_plain_callable_is_neither() -> None:
    assert not isinstance(SinglePass(), RequestHandler)
    assert not isinstance(SinglePass(), Delegate)


class TestMiddlewareShapes:
    def test_adaptor_is_standard_middleware(self) -> None:
        assert isinstance(PassThrough(), StandardMiddleware)

    def test_adaptor_is_legacy_middleware(self) -> None:
        assert isinstance(PassThrough(), LegacyMiddleware)

    def test_function_adaptor_satisfies_both(self) -> None:
        @adapt
        def noop(request, invocation):
            return invocation.forward(request)

        assert isinstance(noop, LegacyMiddleware)
        assert isinstance(noop, StandardMiddleware)

    def test_plain_function_is_legacy_only(self) -> None:
        def single_pass(request, next):
            return next(request)

        assert isinstance(single_pass, LegacyMiddleware)
        assert not isinstance(single_pass, StandardMiddleware)

    def test_handle_delegate_is_not_middleware(self) -> None:
        assert not isinstance(HandleDelegate(), StandardMiddleware)
