"""
Unit tests for HttpClient request building and response decoding.
"""

import json
from unittest.mock import patch

import httpx
import pytest

from chaindoc.exceptions import ConfigurationError, ErrorKind, HTTPStatusError
from chaindoc.http.client import HttpClient
from fixtures import TEST_BASE_URL, TEST_SECRET_KEY, ScriptedTransport, respond


# ============================================================================
# Success payloads
# ============================================================================


@pytest.mark.asyncio
async def test_json_payload_is_returned(make_http_client):
    scripted = ScriptedTransport(respond(200, {"documentId": "doc-1", "status": "draft"}))
    client = make_http_client(scripted)

    assert await client.get("/api/v1/documents/doc-1") == {"documentId": "doc-1", "status": "draft"}


@pytest.mark.asyncio
async def test_204_returns_none_without_decoding(make_http_client):
    scripted = ScriptedTransport(respond(204))
    client = make_http_client(scripted)

    with patch.object(httpx.Response, "json") as mock_json:
        result = await client.delete("/api/v1/documents/doc-1")

    assert result is None
    mock_json.assert_not_called()


@pytest.mark.asyncio
async def test_zero_content_length_returns_none(make_http_client):
    scripted = ScriptedTransport(
        respond(200, content=b"", headers={"content-length": "0", "content-type": "application/json"})
    )
    client = make_http_client(scripted)

    with patch.object(httpx.Response, "json") as mock_json:
        result = await client.post("/api/v1/kyc/share", {"email": "a@b.c"})

    assert result is None
    mock_json.assert_not_called()


@pytest.mark.asyncio
async def test_non_json_content_type_returns_none(make_http_client):
    scripted = ScriptedTransport(
        respond(200, content=b"<html>ok</html>", headers={"content-type": "text/html"})
    )
    client = make_http_client(scripted)

    assert await client.get("/api/v1/health") is None


@pytest.mark.asyncio
async def test_malformed_json_is_swallowed(make_http_client):
    scripted = ScriptedTransport(
        respond(200, content=b"{not json", headers={"content-type": "application/json"})
    )
    client = make_http_client(scripted)

    assert await client.get("/api/v1/health") is None


@pytest.mark.asyncio
async def test_json_content_type_with_charset_is_decoded(make_http_client):
    scripted = ScriptedTransport(
        respond(200, content=b'{"status": "ok"}', headers={"content-type": "application/json; charset=utf-8"})
    )
    client = make_http_client(scripted)

    assert await client.get("/api/v1/health") == {"status": "ok"}


# ============================================================================
# Error payloads
# ============================================================================


@pytest.mark.asyncio
async def test_error_without_json_body_uses_fallback_message(make_http_client):
    scripted = ScriptedTransport(
        respond(404, content=b"Not Found", headers={"content-type": "text/plain"})
    )
    client = make_http_client(scripted)

    with pytest.raises(HTTPStatusError) as exc_info:
        await client.get("/api/v1/documents/missing")

    assert exc_info.value.message == "request failed with status 404"
    assert exc_info.value.response is None


@pytest.mark.asyncio
async def test_error_with_non_string_message_uses_fallback(make_http_client):
    scripted = ScriptedTransport(respond(400, {"message": ["name must not be empty"], "statusCode": 400}))
    client = make_http_client(scripted)

    with pytest.raises(HTTPStatusError) as exc_info:
        await client.post("/api/v1/documents", {"name": ""})

    assert exc_info.value.message == "request failed with status 400"
    assert exc_info.value.response == {"message": ["name must not be empty"], "statusCode": 400}


@pytest.mark.asyncio
async def test_empty_error_response_still_raises(make_http_client):
    scripted = ScriptedTransport(respond(403, content=b"", headers={"content-length": "0"}))
    client = make_http_client(scripted)

    with pytest.raises(HTTPStatusError) as exc_info:
        await client.get("/api/v1/me")

    assert exc_info.value.status_code == 403
    assert exc_info.value.response is None


# ============================================================================
# Request building
# ============================================================================


@pytest.mark.asyncio
async def test_default_headers_are_sent(make_http_client):
    scripted = ScriptedTransport()
    client = make_http_client(scripted)

    await client.get("/api/v1/me")

    request = scripted.last_request
    assert request.headers["authorization"] == f"Bearer {TEST_SECRET_KEY}"
    assert request.headers["content-type"] == "application/json"
    assert str(request.url) == f"{TEST_BASE_URL}/api/v1/me"


@pytest.mark.asyncio
async def test_headers_merge_with_per_call_precedence(make_http_client):
    scripted = ScriptedTransport()
    client = make_http_client(scripted, headers={"X-Tenant": "acme", "X-Trace": "config"})

    await client.get("/api/v1/me", headers={"X-Trace": "call", "X-Request-Id": "req-1"})

    request = scripted.last_request
    assert request.headers["x-tenant"] == "acme"
    assert request.headers["x-trace"] == "call"
    assert request.headers["x-request-id"] == "req-1"
    assert request.headers["authorization"] == f"Bearer {TEST_SECRET_KEY}"


@pytest.mark.asyncio
async def test_configured_headers_can_override_defaults(make_http_client):
    scripted = ScriptedTransport()
    client = make_http_client(scripted, headers={"Content-Type": "application/vnd.chaindoc+json"})

    await client.post("/api/v1/documents", {"name": "x"})

    assert scripted.last_request.headers["content-type"] == "application/vnd.chaindoc+json"


@pytest.mark.asyncio
async def test_configured_headers_override_defaults_case_insensitively(make_http_client):
    scripted = ScriptedTransport()
    client = make_http_client(
        scripted,
        headers={"content-type": "application/vnd.chaindoc+json", "authorization": "Bearer sk_other"},
    )

    await client.post("/api/v1/documents", {"name": "x"})

    request = scripted.last_request
    assert request.headers.get_list("content-type") == ["application/vnd.chaindoc+json"]
    assert request.headers.get_list("authorization") == ["Bearer sk_other"]


@pytest.mark.asyncio
async def test_per_call_headers_override_defaults_case_insensitively(make_http_client):
    scripted = ScriptedTransport()
    client = make_http_client(scripted, headers={"X-Tenant": "acme"})

    await client.get("/api/v1/me", headers={"x-tenant": "other", "CONTENT-TYPE": "text/plain"})

    request = scripted.last_request
    assert request.headers.get_list("x-tenant") == ["other"]
    assert request.headers.get_list("content-type") == ["text/plain"]


@pytest.mark.asyncio
async def test_body_is_serialized_as_json(make_http_client):
    scripted = ScriptedTransport()
    client = make_http_client(scripted)
    body = {"name": "Contract", "hashtags": ["#legal"], "meta": [{"key": "k", "value": "v"}]}

    await client.post("/api/v1/documents", body)

    request = scripted.last_request
    assert request.method == "POST"
    assert json.loads(request.content) == body


@pytest.mark.asyncio
async def test_get_without_body_sends_no_content(make_http_client):
    scripted = ScriptedTransport()
    client = make_http_client(scripted)

    await client.get("/api/v1/health")

    assert scripted.last_request.content == b""


@pytest.mark.asyncio
async def test_same_body_is_sent_on_every_attempt(make_http_client):
    scripted = ScriptedTransport(respond(503), respond(200, {"ok": True}))
    client = make_http_client(scripted)

    await client.put("/api/v1/documents/doc-1", {"name": "v2"})

    first, second = scripted.requests
    assert first.content == second.content
    assert json.loads(second.content) == {"name": "v2"}


@pytest.mark.asyncio
async def test_trailing_slash_in_base_url_is_removed(make_http_client):
    scripted = ScriptedTransport()
    client = make_http_client(scripted, base_url=f"{TEST_BASE_URL}/")

    await client.get("/api/v1/health")

    assert str(scripted.last_request.url) == f"{TEST_BASE_URL}/api/v1/health"


@pytest.mark.asyncio
async def test_unsupported_method_is_rejected(make_http_client):
    scripted = ScriptedTransport()
    client = make_http_client(scripted)

    with pytest.raises(ValueError, match="Unsupported HTTP method"):
        await client.request("/api/v1/health", "PATCH")

    assert scripted.call_count == 0


# ============================================================================
# Timeouts
# ============================================================================


@pytest.mark.asyncio
async def test_default_timeout_is_applied_per_request(make_http_client):
    scripted = ScriptedTransport()
    client = make_http_client(scripted)

    await client.get("/api/v1/health")

    assert scripted.last_request.extensions["timeout"]["read"] == 30.0


@pytest.mark.asyncio
async def test_timeout_override_applies_to_single_call(make_http_client):
    scripted = ScriptedTransport()
    client = make_http_client(scripted)

    await client.get("/api/v1/health", timeout=5000)
    await client.get("/api/v1/health")

    first, second = scripted.requests
    assert first.extensions["timeout"]["read"] == 5.0
    assert second.extensions["timeout"]["read"] == 30.0


@pytest.mark.asyncio
@pytest.mark.parametrize("timeout", [0, -1000])
async def test_non_positive_timeout_override_is_rejected_before_sending(make_http_client, timeout):
    scripted = ScriptedTransport()
    client = make_http_client(scripted)

    with pytest.raises(ConfigurationError) as exc_info:
        await client.get("/api/v1/me", timeout=timeout)

    assert exc_info.value.kind is ErrorKind.CONFIGURATION
    assert exc_info.value.details == {"timeout": timeout}
    assert scripted.call_count == 0


# ============================================================================
# Lifecycle
# ============================================================================


@pytest.mark.asyncio
async def test_close_leaves_caller_owned_client_open(make_config):
    scripted = ScriptedTransport()
    http_client = httpx.AsyncClient(transport=scripted.transport)
    client = HttpClient(make_config(), http_client=http_client)

    await client.get("/api/v1/health")
    await client.close()

    assert http_client.is_closed is False
    await http_client.aclose()


@pytest.mark.asyncio
async def test_context_manager_closes_owned_client(make_config):
    scripted = ScriptedTransport()

    async with HttpClient(make_config(), transport=scripted.transport) as client:
        await client.get("/api/v1/health")
        inner = client._client

    assert inner.is_closed is True


def test_repr_does_not_leak_secret(make_config):
    client = HttpClient(make_config())

    assert TEST_SECRET_KEY not in repr(client)
    assert "max_retries=3" in repr(client)
