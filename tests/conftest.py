"""Shared test fixtures and configuration for all tests.

This conftest.py provides config and client factories wired to the test
doubles in tests/fixtures. No test talks to the network unless it is a live
integration test (skipped without credentials).
"""

import os
import random
from typing import Any, Callable

import pytest

from chaindoc.config import ChaindocConfig
from chaindoc.http.client import HttpClient
from fixtures import TEST_BASE_URL, TEST_SECRET_KEY, FixedRandom, ScriptedTransport, SleepRecorder


@pytest.fixture(autouse=True)
def clean_chaindoc_env(monkeypatch):
    """Keep CHAINDOC_* variables from the host environment out of unit tests.

    CHAINDOC_LIVE_* variables configure the integration tests and are kept.
    """
    for name in list(os.environ):
        upper = name.upper()
        if upper.startswith("CHAINDOC_") and not upper.startswith("CHAINDOC_LIVE_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_config() -> Callable[..., ChaindocConfig]:
    """Factory for test configs; override fields per test.

    Example:
        def test_something(make_config):
            config = make_config(timeout=5000, retry={"max_retries": 1})
    """

    def _make(**overrides: Any) -> ChaindocConfig:
        values: dict[str, Any] = {"secret_key": TEST_SECRET_KEY, "base_url": TEST_BASE_URL}
        values.update(overrides)
        return ChaindocConfig(**values)

    return _make


@pytest.fixture
def sleep_recorder() -> SleepRecorder:
    return SleepRecorder()


@pytest.fixture
def make_http_client(make_config, sleep_recorder) -> Callable[..., HttpClient]:
    """Factory wiring an HttpClient to a ScriptedTransport and the sleep recorder.

    Jitter defaults to zero (FixedRandom(0.5)) so delays equal the capped
    exponential delay.
    """

    def _make(scripted: ScriptedTransport, rng: random.Random | None = None, **overrides: Any) -> HttpClient:
        return HttpClient(
            make_config(**overrides),
            transport=scripted.transport,
            sleep=sleep_recorder,
            rng=rng or FixedRandom(0.5),
        )

    return _make
