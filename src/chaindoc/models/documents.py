"""
Document and verification payload models.
"""

from typing import Optional

from pydantic import Field

from chaindoc.models.base import ChaindocModel
from chaindoc.models.common import Media, MetaTag
from chaindoc.models.enums import AccessLevel, AccessType, DocumentStatus


class AccessEmail(ChaindocModel):
    email: str
    level: AccessLevel


class AccessRole(ChaindocModel):
    role_id: int
    level: AccessLevel


class UpdateDocumentParams(ChaindocModel):
    """Payload for a new document version."""

    name: str
    description: str
    media: Media
    meta: list[MetaTag] = Field(default_factory=list)
    hashtags: list[str] = Field(default_factory=list)
    status: DocumentStatus
    is_for_signing: Optional[bool] = None


class CreateDocumentParams(UpdateDocumentParams):
    """Payload for a new document (first version plus access rights)."""

    access_type: Optional[AccessType] = None
    access_emails: Optional[list[AccessEmail]] = None
    access_roles: Optional[list[AccessRole]] = None


class UpdateDocumentRightsParams(ChaindocModel):
    access_type: AccessType
    access_emails: Optional[list[AccessEmail]] = None
    access_roles: Optional[list[AccessRole]] = None


class DocumentTag(ChaindocModel):
    id: int
    tag: str


class DocumentVersion(ChaindocModel):
    id: int
    uuid: str
    name: Optional[str] = None
    document_version: str
    description: Optional[str] = None
    media: Optional[Media] = None
    meta: Optional[list[MetaTag]] = None
    is_for_signing: bool = False
    status: DocumentStatus
    version_hash: Optional[str] = None
    document_id: int
    tags: list[DocumentTag] = Field(default_factory=list)
    created_at: str
    updated_at: str


class Document(ChaindocModel):
    id: int
    uuid: str
    txt_id: str
    user_id: int
    core_team_id: int
    current_version_id: Optional[int] = None
    access_type: AccessType
    versions: list[DocumentVersion] = Field(default_factory=list)
    current_version: Optional[DocumentVersion] = None
    created_at: str
    updated_at: str


class DocumentResponse(ChaindocModel):
    success: bool
    document_id: str
    document: Document
    message: Optional[str] = None


class VerifyDocumentParams(ChaindocModel):
    version_hash: str
    certificate_hash: Optional[str] = None


class VerificationStatus(ChaindocModel):
    tx_hash: str
    chain_id: int
    status: str
    verified_at: str


class VerifiedDocument(ChaindocModel):
    id: str
    version_id: str
    name: str
    version_hash: str
    status: str


class CertificateCheck(ChaindocModel):
    valid: bool
    hash: str


class VerifyDocumentResponse(ChaindocModel):
    success: bool
    verified: bool
    document: Optional[VerifiedDocument] = None
    verification: Optional[VerificationStatus] = None
    certificate: Optional[CertificateCheck] = None
