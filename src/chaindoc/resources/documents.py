"""
Documents API: create, version, share and verify documents.
"""

from typing import Optional, Union

from chaindoc.models.documents import (
    CreateDocumentParams,
    DocumentResponse,
    UpdateDocumentParams,
    UpdateDocumentRightsParams,
    VerifyDocumentParams,
    VerifyDocumentResponse,
)
from chaindoc.resources.base import BaseResource


class Documents(BaseResource):
    async def create(self, params: Union[CreateDocumentParams, dict]) -> Optional[DocumentResponse]:
        """
        Create a new document with its first version.

        Set status to "published" to verify it in the blockchain immediately.
        """
        data = await self._client.post("/api/v1/documents", self._payload(params, CreateDocumentParams))
        return self._parse(data, DocumentResponse)

    async def update(
        self, document_id: str, params: Union[UpdateDocumentParams, dict]
    ) -> Optional[DocumentResponse]:
        """Update a document by creating a new version."""
        data = await self._client.put(
            f"/api/v1/documents/{document_id}", self._payload(params, UpdateDocumentParams)
        )
        return self._parse(data, DocumentResponse)

    async def update_rights(
        self, document_id: str, params: Union[UpdateDocumentRightsParams, dict]
    ) -> Optional[DocumentResponse]:
        data = await self._client.put(
            f"/api/v1/documents/{document_id}/rights",
            self._payload(params, UpdateDocumentRightsParams),
        )
        return self._parse(data, DocumentResponse)

    async def verify(self, params: Union[VerifyDocumentParams, dict]) -> Optional[VerifyDocumentResponse]:
        """Verify a document version hash (and optionally a certificate) in the blockchain."""
        data = await self._client.post(
            "/api/v1/documents/verify", self._payload(params, VerifyDocumentParams)
        )
        return self._parse(data, VerifyDocumentResponse)

    async def get_verification_status(self, version_id: str) -> Optional[VerifyDocumentResponse]:
        data = await self._client.get(f"/api/v1/documents/versions/{version_id}/verification")
        return self._parse(data, VerifyDocumentResponse)
