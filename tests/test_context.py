"""Tests for weave_adaptor.context — Invocation and the invocation ContextVar."""

import pytest

from weave_adaptor.context import (
    Convention,
    Invocation,
    current_invocation,
    get_invocation,
    invocation_var,
)
from weave_adaptor.errors import NoActiveInvocation
from weave_adaptor.handlers import resolve_next

from .fakes import DoublePass, FakeRequest, FakeResponse, SinglePass


def _invocation(next_ref, response=None, convention=Convention.SINGLE_PASS) -> Invocation:
    return Invocation(
        convention=convention,
        next=next_ref,
        handler=resolve_next(next_ref, response),
        response=response,
    )


class TestInvocationVar:
    def test_get_invocation_raises_outside_context(self) -> None:
        with pytest.raises(NoActiveInvocation, match="No active invocation"):
            get_invocation()

    def test_current_invocation_none_outside_context(self) -> None:
        assert current_invocation() is None

    def test_set_and_get(self) -> None:
        invocation = _invocation(SinglePass())
        token = invocation_var.set(invocation)
        try:
            assert get_invocation() is invocation
            assert current_invocation() is invocation
        finally:
            invocation_var.reset(token)
        assert current_invocation() is None


class TestInvocation:
    def test_forward_single_pass(self) -> None:
        next_fn = SinglePass()
        request = FakeRequest()
        assert _invocation(next_fn).forward(request) is next_fn.result
        assert next_fn.calls == [(request,)]

    def test_forward_double_pass(self) -> None:
        next_fn = DoublePass()
        request, response = FakeRequest(), FakeResponse()
        invocation = _invocation(next_fn, response, Convention.DOUBLE_PASS)
        invocation.forward(request)
        assert next_fn.calls == [(request, response)]

    def test_response_object(self) -> None:
        response = FakeResponse()
        assert _invocation(DoublePass(), response).response_object() is response
        assert _invocation(SinglePass()).response_object() is None

    def test_frozen(self) -> None:
        invocation = _invocation(SinglePass())
        with pytest.raises(AttributeError):
            invocation.response = FakeResponse()  # type: ignore[misc]


class TestConvention:
    def test_values(self) -> None:
        assert [c.value for c in Convention] == ["single-pass", "double-pass", "standard"]
