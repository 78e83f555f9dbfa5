"""
KYC API.
"""

from typing import Optional, Union

from chaindoc.models.kyc import ShareKycParams, ShareKycResponse
from chaindoc.resources.base import BaseResource


class Kyc(BaseResource):
    async def share(self, params: Union[ShareKycParams, dict]) -> Optional[ShareKycResponse]:
        """Share a user's KYC data via a provider share token, to pre-verify signers."""
        data = await self._client.post("/api/v1/kyc/share", self._payload(params, ShareKycParams))
        return self._parse(data, ShareKycResponse)
