"""
Pydantic data models for Chaindoc API payloads.

Includes:
- Enums (MediaType, DocumentStatus, AccessType, SignRequestStatus, ...)
- Common models (Media, MetaTag, PaginationParams, ApiKeyInfo, ...)
- Documents, signatures, embedded sessions and KYC request/response models
"""

from chaindoc.models.base import ChaindocModel, parse_response, to_iso8601
from chaindoc.models.common import (
    ApiKeyInfo,
    HealthCheckResponse,
    Media,
    MediaUploadResponse,
    MetaTag,
    PaginationParams,
)
from chaindoc.models.documents import (
    AccessEmail,
    AccessRole,
    CreateDocumentParams,
    Document,
    DocumentResponse,
    DocumentTag,
    DocumentVersion,
    UpdateDocumentParams,
    UpdateDocumentRightsParams,
    VerificationStatus,
    VerifyDocumentParams,
    VerifyDocumentResponse,
)
from chaindoc.models.embedded import (
    CreateEmbeddedSessionParams,
    EmbeddedSessionMetadata,
    EmbeddedSessionResponse,
)
from chaindoc.models.enums import (
    AccessLevel,
    AccessType,
    DocumentStatus,
    MediaType,
    SignRequestStatus,
    VerificationTxStatus,
)
from chaindoc.models.kyc import KycData, ShareKycParams, ShareKycResponse
from chaindoc.models.signatures import (
    CreateSignatureRequestParams,
    GetMyRequestsResponse,
    GetSignaturesResponse,
    Recipient,
    SignatureRequest,
    SignatureRequestResponse,
    SignatureRequestStatus,
    SignDocumentParams,
    SignDocumentResponse,
    Signer,
    SignerUser,
)

__all__ = [
    # Base
    "ChaindocModel",
    "parse_response",
    "to_iso8601",
    # Enums
    "AccessLevel",
    "AccessType",
    "DocumentStatus",
    "MediaType",
    "SignRequestStatus",
    "VerificationTxStatus",
    # Common
    "ApiKeyInfo",
    "HealthCheckResponse",
    "Media",
    "MediaUploadResponse",
    "MetaTag",
    "PaginationParams",
    # Documents
    "AccessEmail",
    "AccessRole",
    "CreateDocumentParams",
    "Document",
    "DocumentResponse",
    "DocumentTag",
    "DocumentVersion",
    "UpdateDocumentParams",
    "UpdateDocumentRightsParams",
    "VerificationStatus",
    "VerifyDocumentParams",
    "VerifyDocumentResponse",
    # Embedded
    "CreateEmbeddedSessionParams",
    "EmbeddedSessionMetadata",
    "EmbeddedSessionResponse",
    # KYC
    "KycData",
    "ShareKycParams",
    "ShareKycResponse",
    # Signatures
    "CreateSignatureRequestParams",
    "GetMyRequestsResponse",
    "GetSignaturesResponse",
    "Recipient",
    "SignatureRequest",
    "SignatureRequestResponse",
    "SignatureRequestStatus",
    "SignDocumentParams",
    "SignDocumentResponse",
    "Signer",
    "SignerUser",
]
