"""
Pre-flight request schemas.

Only app settings retrieval and SMS sending are validated locally; other
resources rely on the API to reject malformed input.
"""

from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


class GetAppSettingsArgs(BaseModel):
    """Query parameters for app settings retrieval."""

    model_config = ConfigDict(strict=True)

    target_id: Optional[int] = None
    target_type: Optional[str] = None


class SendSMSRequest(BaseModel):
    """Body of an SMS send request."""

    model_config = ConfigDict(strict=True, extra="forbid")

    text: Optional[str] = None
    to_numbers: Optional[List[str]] = None
    user_id: Optional[int] = None
    from_number: Optional[str] = None
    channel_hashtag: Optional[str] = None
    infer_country_code: Optional[bool] = False
    media: Optional[str] = None
    sender_group_id: Optional[int] = None
    sender_group_type: Optional[str] = None


def validate_payload(model: Type[ModelT], data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate data against a schema and return the wire payload.

    None values count as omitted, so schema defaults apply to them, and
    fields still None after validation are dropped from the payload.

    Raises:
        ValidationError: If the data does not match the schema
    """
    provided = {k: v for k, v in data.items() if v is not None}
    try:
        instance = model.model_validate(provided)
    except PydanticValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise ValidationError(
            f"Invalid {model.__name__}: {fields}",
            details=e.errors()
        ) from e
    return instance.model_dump(exclude_none=True)
