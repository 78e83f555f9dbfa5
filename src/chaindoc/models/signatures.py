"""
Signature request payload models.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_serializer

from chaindoc.models.base import ChaindocModel, to_iso8601
from chaindoc.models.common import Media, MetaTag
from chaindoc.models.enums import SignRequestStatus, VerificationTxStatus


class Recipient(ChaindocModel):
    """
    Signer invited to a signature request.

    share_token is required when the request uses the embedded flow with
    KYC enabled: the backend verifies the signer before creating the request.
    """

    email: str
    share_token: Optional[str] = None


class CreateSignatureRequestParams(ChaindocModel):
    version_id: str
    message: Optional[str] = None
    recipients: list[Recipient]
    embedded_flow: Optional[bool] = None
    is_kyc_required: Optional[bool] = None
    deadline: datetime
    meta: Optional[list[MetaTag]] = None

    @field_serializer("deadline")
    def _serialize_deadline(self, value: datetime) -> str:
        return to_iso8601(value)


class SignDocumentParams(ChaindocModel):
    request_id: str
    signature_id: int
    message_text: Optional[str] = None
    meta: Optional[list[MetaTag]] = None


class SignerUser(ChaindocModel):
    id: Optional[int] = None
    username: Optional[str] = None
    email: Optional[str] = None
    image_media: Optional[Media] = None
    background_color: Optional[str] = None
    text_color: Optional[str] = None
    reputation: Optional[float] = None


class Signer(ChaindocModel):
    id: int
    request_id: int
    signer_id: Optional[int] = None
    signer_email: str
    meta: Optional[list[MetaTag]] = None
    message_text: Optional[str] = None
    signature_hash: Optional[str] = None
    signature: Optional[str] = None
    hash: Optional[str] = None
    signed_at: Optional[str] = None
    reminded_at: Optional[str] = None
    signer: Optional[SignerUser] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class SignatureRequest(ChaindocModel):
    id: int
    uuid: str
    user_id: int
    version_id: int
    status: SignRequestStatus
    meta: Optional[list[MetaTag]] = None
    message_text: Optional[str] = None
    due_date: str
    is_kyc_required: bool = False
    tx_hash: Optional[str] = None
    embedded_flow: Optional[bool] = None
    tx_status: VerificationTxStatus
    certificate: Optional[Media] = None
    certificate_hash: Optional[str] = None
    signers: list[Signer] = Field(default_factory=list)
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class SignatureRequestStatus(ChaindocModel):
    success: bool
    request_id: int
    status: SignRequestStatus
    version_id: int
    total_signers: int
    signed_count: int
    pending_count: int
    is_completed: bool
    due_date: str
    signers: list[Signer] = Field(default_factory=list)


class SignatureRequestResponse(ChaindocModel):
    signature_request: SignatureRequest
    recipients: list[Signer] = Field(default_factory=list)


class SignDocumentResponse(ChaindocModel):
    success: bool
    request_id: str
    signed_at: str
    message: Optional[str] = None


class GetMyRequestsResponse(ChaindocModel):
    items: list[SignatureRequest] = Field(default_factory=list)
    total: int
    page_number: int
    page_size: int


class GetSignaturesResponse(GetMyRequestsResponse):
    total_pending: int
    total_completed: int
    total_expired: int
