"""
Base model for Chaindoc API payloads.

Python attributes are snake_case; the wire format is camelCase. Unknown
fields returned by the API are kept rather than rejected.
"""

from datetime import datetime, timezone
from typing import Any, TypeVar, Union

import structlog
from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel


logger = structlog.get_logger(__name__)


class ChaindocModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_payload(self) -> dict[str, Any]:
        """Request body representation (camelCase, None fields omitted)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def to_iso8601(value: datetime) -> str:
    """
    Format a datetime as UTC ISO-8601 with millisecond precision.

    Naive datetimes are taken to be UTC.

    Examples:
        >>> to_iso8601(datetime(2025, 12, 31))
        '2025-12-31T00:00:00.000Z'
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    utc = value.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


ModelT = TypeVar("ModelT", bound=ChaindocModel)


def parse_response(data: Any, model: type[ModelT]) -> Union[ModelT, Any, None]:
    """
    Validate a decoded 2xx payload into `model`.

    Payloads that do not fit the model (missing fields, status values added
    by the API later, non-object bodies) are returned as decoded, so a
    successful call never fails on the client side.

    Args:
        data: Decoded JSON payload, or None for responses without a body
        model: Response model to validate against

    Returns:
        Model instance, the raw payload when it does not validate, or None
    """
    if data is None:
        return None

    try:
        return model.model_validate(data)
    except ValidationError as e:
        logger.warning(
            "Returning unvalidated Chaindoc payload",
            model=model.__name__,
            error_count=e.error_count(),
            errors=[".".join(str(part) for part in err["loc"]) for err in e.errors(include_url=False)],
        )
        return data
