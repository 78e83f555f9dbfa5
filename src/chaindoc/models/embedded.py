"""
Embedded signing session models.
"""

from typing import Any, Optional

from pydantic import Field

from chaindoc.models.base import ChaindocModel


class EmbeddedSessionMetadata(ChaindocModel):
    """Session metadata; extra keys are forwarded to the API unchanged."""

    document_id: str
    signature_request_id: Optional[str] = None
    return_url: Optional[str] = None


class CreateEmbeddedSessionParams(ChaindocModel):
    email: str
    metadata: EmbeddedSessionMetadata


class EmbeddedSessionResponse(ChaindocModel):
    """
    Created session.

    Sessions are valid for 10 minutes and an OTP is sent to the email.
    Pass session_id to the frontend embed SDK.
    """

    success: bool
    session_id: str
    email: str
    status: str
    expires_at: str
    expires_in_minutes: int
    metadata: dict[str, Any] = Field(default_factory=dict)
    message: Optional[str] = None
    created_at: str
