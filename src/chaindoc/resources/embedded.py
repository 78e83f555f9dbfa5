"""
Embedded sessions API.
"""

from typing import Optional, Union

from chaindoc.models.embedded import CreateEmbeddedSessionParams, EmbeddedSessionResponse
from chaindoc.resources.base import BaseResource


class Embedded(BaseResource):
    async def create_session(
        self, params: Union[CreateEmbeddedSessionParams, dict]
    ) -> Optional[EmbeddedSessionResponse]:
        """
        Create an embedded signing session.

        The session is valid for 10 minutes and an OTP is sent to the given
        email. Pass the returned session_id to the frontend embed SDK.
        """
        data = await self._client.post(
            "/api/v1/embedded/sessions",
            self._payload(params, CreateEmbeddedSessionParams),
        )
        return self._parse(data, EmbeddedSessionResponse)
