"""
Signatures API: signature requests and signing.
"""

from typing import Optional, Union

from chaindoc.models.common import PaginationParams
from chaindoc.models.signatures import (
    CreateSignatureRequestParams,
    GetMyRequestsResponse,
    GetSignaturesResponse,
    SignatureRequestResponse,
    SignatureRequestStatus,
    SignDocumentParams,
    SignDocumentResponse,
)
from chaindoc.resources.base import BaseResource


class Signatures(BaseResource):
    async def create_request(
        self, params: Union[CreateSignatureRequestParams, dict]
    ) -> Optional[SignatureRequestResponse]:
        """
        Create a signature request.

        The deadline is sent as an ISO-8601 UTC timestamp. With
        embedded_flow and is_kyc_required both set, every recipient needs a
        share_token; the backend validates KYC before creating the request.
        """
        data = await self._client.post(
            "/api/v1/signatures/requests",
            self._payload(params, CreateSignatureRequestParams),
        )
        return self._parse(data, SignatureRequestResponse)

    async def get_request_status(self, request_id: str) -> Optional[SignatureRequestStatus]:
        data = await self._client.get(f"/api/v1/signatures/requests/{request_id}/status")
        return self._parse(data, SignatureRequestStatus)

    async def get_my_requests(
        self, pagination: Union[PaginationParams, dict, None] = None
    ) -> Optional[GetMyRequestsResponse]:
        """Signature requests created by the current user."""
        path = self._with_pagination("/api/v1/signatures/requests", pagination)
        data = await self._client.get(path)
        return self._parse(data, GetMyRequestsResponse)

    async def sign(self, params: Union[SignDocumentParams, dict]) -> Optional[SignDocumentResponse]:
        """Sign a document. The API key owner must be one of the signatories."""
        data = await self._client.post("/api/v1/signatures/sign", self._payload(params, SignDocumentParams))
        return self._parse(data, SignDocumentResponse)

    async def get_signatures(
        self, pagination: Union[PaginationParams, dict, None] = None
    ) -> Optional[GetSignaturesResponse]:
        """Signature requests where the current user is a signer."""
        path = self._with_pagination("/api/v1/signatures", pagination)
        data = await self._client.get(path)
        return self._parse(data, GetSignaturesResponse)
