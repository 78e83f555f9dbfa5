"""
API resource bindings.

Components:
- Documents: create/update documents, rights, blockchain verification
- Signatures: signature requests and signing
- Embedded: embedded signing sessions
- Media: multipart file uploads
- Kyc: KYC data sharing
"""

from chaindoc.resources.documents import Documents
from chaindoc.resources.embedded import Embedded
from chaindoc.resources.kyc import Kyc
from chaindoc.resources.media import Media
from chaindoc.resources.signatures import Signatures

__all__ = [
    "Documents",
    "Embedded",
    "Kyc",
    "Media",
    "Signatures",
]
