"""
KYC sharing models.
"""

from typing import Optional

from chaindoc.models.base import ChaindocModel


class ShareKycParams(ChaindocModel):
    email: str
    share_token: Optional[str] = None


class KycData(ChaindocModel):
    verified: bool
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    middle_name: Optional[str] = None
    dob: Optional[str] = None
    country: Optional[str] = None
    nationality: Optional[str] = None
    review_status: Optional[str] = None
    applicant_id: Optional[str] = None


class ShareKycResponse(ChaindocModel):
    success: bool
    message: Optional[str] = None
    share_token: Optional[str] = None
    email: str
    shared_at: str
    kyc_data: Optional[KycData] = None
    error: Optional[str] = None
