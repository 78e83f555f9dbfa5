"""
Response classification and decoding.

Turns an httpx.Response into either a decoded payload (or None when the
response carries no usable JSON) or an HTTPStatusError.
"""

from typing import Any

import httpx
import structlog

from chaindoc.exceptions import HTTPStatusError
from chaindoc.retry.classification import is_retryable_status


logger = structlog.get_logger(__name__)

JSON_CONTENT_TYPE = "application/json"


def is_empty_response(response: httpx.Response) -> bool:
    """204 No Content, or an explicit zero content length."""
    return response.status_code == 204 or response.headers.get("content-length") == "0"


def decode_json_body(response: httpx.Response) -> Any:
    """
    Decode a JSON body, or return None.

    Bodies whose content type is not JSON are never decoded. Decode failures
    on JSON-typed bodies are swallowed and reported as None; there is no
    strict mode that raises instead.
    """
    content_type = response.headers.get("content-type", "")
    if JSON_CONTENT_TYPE not in content_type:
        return None

    try:
        return response.json()
    except ValueError as e:
        logger.debug(
            "Discarding undecodable JSON body",
            status_code=response.status_code,
            error=str(e),
        )
        return None


def extract_error_message(data: Any, status_code: int, operation: str = "request") -> str:
    """Use the body's `message` field when it is a string."""
    if isinstance(data, dict) and isinstance(data.get("message"), str):
        return data["message"]
    return f"{operation} failed with status {status_code}"


def build_status_error(response: httpx.Response, operation: str = "request") -> HTTPStatusError:
    """
    Build the error for a non-2xx response.

    Args:
        response: Response with a non-2xx status
        operation: "request" or "upload", used in the fallback message

    Returns:
        HTTPStatusError carrying status, decoded body and retryability
    """
    data = None if is_empty_response(response) else decode_json_body(response)
    status_code = response.status_code
    return HTTPStatusError(
        extract_error_message(data, status_code, operation),
        status_code=status_code,
        response=data,
        is_retryable=is_retryable_status(status_code),
    )


def parse_success(response: httpx.Response) -> Any:
    """Payload of a 2xx response (None for empty or non-JSON bodies)."""
    if is_empty_response(response):
        return None
    return decode_json_body(response)
