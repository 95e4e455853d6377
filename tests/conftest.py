import pytest

from .fakes import FakeRequest, FakeResponse


@pytest.fixture
def request_() -> FakeRequest:
    return FakeRequest(path="/items")


@pytest.fixture
def response() -> FakeResponse:
    return FakeResponse(status=200)
