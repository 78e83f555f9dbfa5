"""
Shared plumbing for API resources.

Resources are thin bindings: they shape paths and payloads and hand the
call to the HttpClient, which owns retries, timeouts and error mapping.
Responses are validated into models where they fit; a payload that does
not (missing fields, new status values) is returned as decoded.
"""

from typing import Any, Union
from urllib.parse import urlencode

from chaindoc.http.client import HttpClient
from chaindoc.models.base import ChaindocModel, ModelT, parse_response
from chaindoc.models.common import PaginationParams


class BaseResource:
    """Base class for resource bindings."""

    def __init__(self, client: HttpClient):
        self._client = client

    @staticmethod
    def _payload(params: Union[ChaindocModel, dict], model: type[ModelT]) -> dict[str, Any]:
        """Validate params (model or plain dict) and dump them for the wire."""
        if not isinstance(params, model):
            params = model.model_validate(params)
        return params.to_payload()

    @staticmethod
    def _parse(data: Any, model: type[ModelT]) -> Union[ModelT, Any, None]:
        """Response model, raw payload when it does not fit the model, or None."""
        return parse_response(data, model)

    @staticmethod
    def _with_pagination(path: str, pagination: Union[PaginationParams, dict, None]) -> str:
        if pagination is None:
            return path
        if not isinstance(pagination, PaginationParams):
            pagination = PaginationParams.model_validate(pagination)
        query = urlencode(pagination.to_query())
        return f"{path}?{query}" if query else path
