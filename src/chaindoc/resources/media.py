"""
Media API: file uploads.
"""

from typing import Optional, Sequence

from chaindoc.http.multipart import FileInput
from chaindoc.models.common import MediaUploadResponse
from chaindoc.resources.base import BaseResource


class Media(BaseResource):
    async def upload(self, files: Sequence[FileInput]) -> Optional[MediaUploadResponse]:
        """
        Upload media files.

        Supported types: PDF, DOC(X), XLS(X), PPT(X), TXT documents; JPG, PNG,
        GIF, WEBP, SVG images; MP4, AVI, MOV, WMV videos. Use the returned
        media objects when creating documents.
        """
        data = await self._client.upload_files("/api/v1/media/upload", files)
        return self._parse(data, MediaUploadResponse)
