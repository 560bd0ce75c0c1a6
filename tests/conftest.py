"""Shared fixtures for the validator and handler tests."""

import pytest

from tests.fakes import FakeResponse, FakeSession, load_fixture


@pytest.fixture
def soap_session():
    """Builds a FakeSession answering with the named SOAP fixture."""

    def _make(name: str) -> FakeSession:
        return FakeSession(FakeResponse(load_fixture(name)))

    return _make
