"""Integration test fixtures (credentials and API reachability).

Integration tests are skipped if no live secret key is configured or the
API cannot be reached.
"""

import os

import httpx
import pytest

from chaindoc import Chaindoc


LIVE_SECRET_KEY_ENV = "CHAINDOC_LIVE_SECRET_KEY"
LIVE_ENVIRONMENT_ENV = "CHAINDOC_LIVE_ENVIRONMENT"


@pytest.fixture(scope="session")
def live_secret_key():
    """Secret key for the live API.

    Skips tests if CHAINDOC_LIVE_SECRET_KEY is not set.
    """
    secret_key = os.environ.get(LIVE_SECRET_KEY_ENV)
    if not secret_key:
        pytest.skip(f"{LIVE_SECRET_KEY_ENV} not set")
    return secret_key


@pytest.fixture(scope="session")
def live_environment():
    return os.environ.get(LIVE_ENVIRONMENT_ENV, "staging")


@pytest.fixture(scope="session")
def check_chaindoc_api(live_environment):
    """Check that the Chaindoc API answers at all.

    Skips tests if the API is not reachable.
    """
    from chaindoc.config import ENVIRONMENT_URLS

    try:
        httpx.get(f"{ENVIRONMENT_URLS[live_environment]}/api/v1/health", timeout=5)
    except httpx.HTTPError as e:
        pytest.skip(f"Chaindoc API not reachable: {e}")


@pytest.fixture
def live_chaindoc(live_secret_key, live_environment, check_chaindoc_api):
    """Real Chaindoc client for integration tests.

    Uses a single retry so failing tests finish quickly.
    """
    return Chaindoc(
        secret_key=live_secret_key,
        environment=live_environment,
        timeout=15000,
        retry={"max_retries": 1},
    )
