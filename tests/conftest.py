import os

import pytest

from patterncraft.domain.http import HttpRequest
from patterncraft.infrastructure.patterns import SingletonRegistry


@pytest.fixture(autouse=True)
def reset_singletons():
    """Every test starts with an empty singleton registry."""
    SingletonRegistry.get_instance().reset()
    yield
    SingletonRegistry.get_instance().reset()


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep PATTERNCRAFT_* variables from the outer shell out of the tests."""
    for name in list(os.environ):
        if name.startswith("PATTERNCRAFT_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def api_request_builder():
    return (
        HttpRequest.builder()
        .url("https://api.example.com/users")
        .method("POST")
        .header("Content-Type", "application/json")
        .header("Authorization", "Bearer token123")
        .body('{"name": "John Doe"}')
        .timeout(60)
    )


@pytest.fixture
def api_request(api_request_builder):
    return api_request_builder.build()
