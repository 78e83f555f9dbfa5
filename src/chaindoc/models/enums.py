"""
Enumerations for Chaindoc API data models.
"""

from enum import Enum


class MediaType(str, Enum):
    DOCUMENT = "document"
    IMAGE = "image"
    VIDEO = "video"
    TEXT = "text"
    CALL_TO_ACTION = "call_to_action"


class DocumentStatus(str, Enum):
    """
    Lifecycle status of a document version.

    Setting PUBLISHED on create/update triggers blockchain verification.
    """

    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"
    PENDING_SIGNATURE = "pending_signature"
    SIGNED = "signed"


class AccessType(str, Enum):
    PRIVATE = "private"
    PUBLIC = "public"
    RESTRICTED = "restricted"
    TEAM = "team"


class AccessLevel(str, Enum):
    READ = "read"
    WRITE = "write"


class SignRequestStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    EXPIRED = "expired"
    CANCELLED = "cancelled"


class VerificationTxStatus(str, Enum):
    """Status of the blockchain transaction backing a signature request."""

    INITIALIZED = "initialized"
    PENDING = "pending"
    VERIFIED = "verified"
    FAILED = "failed"
