"""
Shared payload models: media objects, meta tags, pagination and account info.
"""

from typing import Optional

from pydantic import Field

from chaindoc.models.base import ChaindocModel
from chaindoc.models.enums import MediaType


class MetaTag(ChaindocModel):
    key: str
    value: str


class PaginationParams(ChaindocModel):
    """Page selection; zero or missing values are not sent."""

    page_number: Optional[int] = Field(default=None, ge=0)
    page_size: Optional[int] = Field(default=None, ge=0)

    def to_query(self) -> dict[str, str]:
        query: dict[str, str] = {}
        if self.page_number:
            query["pageNumber"] = str(self.page_number)
        if self.page_size:
            query["pageSize"] = str(self.page_size)
        return query


class Media(ChaindocModel):
    """
    Uploaded media object.

    Returned by the media upload endpoint and passed back verbatim when
    creating or updating documents.
    """

    type: Optional[MediaType] = None
    name: str
    key: str
    url: str
    hash: Optional[str] = None
    size: Optional[int] = None
    thumbnail: Optional[str] = None
    blured_thumbnail: Optional[str] = None
    compressed: Optional[str] = None


class MediaUploadResponse(ChaindocModel):
    success: bool
    media: list[Media] = Field(default_factory=list)
    message: Optional[str] = None


class ApiKeyInfo(ChaindocModel):
    key_id: int
    key_name: str
    user_id: int
    last_used_at: Optional[str] = None
    is_active: bool
    access_level: str


class HealthCheckResponse(ChaindocModel):
    status: str
    timestamp: str
    api_key_valid: bool
    user_id: Optional[int] = None
