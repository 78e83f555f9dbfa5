"""
Test doubles for the Chaindoc SDK.

Contains:
- respond / fail: outcome builders for scripted transports
- ScriptedTransport: httpx.MockTransport replaying outcomes in order
- SleepRecorder: backoff sleep double
- FixedRandom: deterministic jitter source
"""

import random
from typing import Any, Callable, Union

import httpx


TEST_SECRET_KEY = "sk_test_1234567890"
TEST_BASE_URL = "https://api.test.chaindoc.io"

Outcome = Callable[[httpx.Request], httpx.Response]


def respond(
    status_code: int = 200,
    json: Any = None,
    *,
    content: Union[bytes, str, None] = None,
    headers: dict[str, str] | None = None,
) -> Outcome:
    """Build an outcome that returns a fresh response on every call."""

    def _outcome(request: httpx.Request) -> httpx.Response:
        if json is not None:
            return httpx.Response(status_code, json=json, headers=headers)
        return httpx.Response(status_code, content=content, headers=headers)

    return _outcome


def fail(exc_type: type[Exception], message: str = "") -> Outcome:
    """Build an outcome that raises a fresh exception on every call."""

    def _outcome(request: httpx.Request) -> httpx.Response:
        if issubclass(exc_type, httpx.RequestError):
            raise exc_type(message, request=request)
        raise exc_type(message)

    return _outcome


class ScriptedTransport:
    """
    httpx transport double replaying outcomes in order.

    The last outcome repeats once the script is exhausted. Every request
    received is kept in `requests` with its body already read.
    """

    def __init__(self, *outcomes: Outcome):
        if not outcomes:
            outcomes = (respond(200, {"success": True}),)
        self.outcomes = list(outcomes)
        self.requests: list[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        index = min(len(self.requests), len(self.outcomes)) - 1
        return self.outcomes[index](request)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


class SleepRecorder:
    """Backoff sleep double: records requested delays instead of sleeping."""

    def __init__(self):
        self.calls: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)

    @property
    def delays_ms(self) -> list[int]:
        return [round(seconds * 1000) for seconds in self.calls]


class FixedRandom(random.Random):
    """Random source whose random() always returns the same value."""

    def __init__(self, value: float):
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value
