"""Service test fixtures — fakes wired to a shared call log.

Invariants:
    - Every fixture in one test shares the same `calls` list
"""

import pytest

from tests.services.fakes import (
    FakeCredentials,
    FakeManifest,
    FakePresenter,
    FakeProjectIdProvider,
    FakeReader,
    FakeRegistry,
)


@pytest.fixture
def calls() -> list:
    return []


@pytest.fixture
def registry(calls) -> FakeRegistry:
    return FakeRegistry(calls)


@pytest.fixture
def manifest(calls) -> FakeManifest:
    return FakeManifest(calls)


@pytest.fixture
def provider(calls) -> FakeProjectIdProvider:
    return FakeProjectIdProvider(calls)


@pytest.fixture
def credentials(calls) -> FakeCredentials:
    return FakeCredentials(calls)


@pytest.fixture
def presenter(calls) -> FakePresenter:
    return FakePresenter(calls)


@pytest.fixture
def reader(calls) -> FakeReader:
    return FakeReader(calls)
