"""
SMS API - Sending text messages.
"""

from typing import Optional, Any, List

from ._http import HTTPClient
from .resource import Resource
from .schemas import SendSMSRequest, validate_payload


class SMSAPI:
    """API for sending SMS."""

    def __init__(self, http: HTTPClient):
        """
        Initialize SMS API.

        Args:
            http: HTTP client instance
        """
        self._resource = Resource(http, "sms")

    def send_sms(
        self,
        text: Optional[str] = None,
        to_numbers: Optional[List[str]] = None,
        *,
        user_id: Optional[int] = None,
        from_number: Optional[str] = None,
        channel_hashtag: Optional[str] = None,
        infer_country_code: Optional[bool] = None,
        media: Optional[str] = None,
        sender_group_id: Optional[int] = None,
        sender_group_type: Optional[str] = None
    ) -> Any:
        """
        Send an SMS to phone numbers or a Dialpad channel on behalf of a user.

        The body is validated before sending; fields left as None are
        omitted and infer_country_code defaults to False.

        Args:
            text: Message text
            to_numbers: E.164 recipient numbers
            user_id: ID of the sending user
            from_number: Number to send from
            channel_hashtag: Channel to post to instead of phone numbers
            infer_country_code: Infer the country code of local-format numbers
            media: Base64-encoded media attachment
            sender_group_id: ID of the office, call center or department sending
            sender_group_type: Type of the sender group

        Returns:
            The created SMS (id, status, created_at, ...)

        Raises:
            ValidationError: If the arguments do not match the SMS schema
        """
        body = validate_payload(SendSMSRequest, {
            "text": text,
            "to_numbers": to_numbers,
            "user_id": user_id,
            "from_number": from_number,
            "channel_hashtag": channel_hashtag,
            "infer_country_code": infer_country_code,
            "media": media,
            "sender_group_id": sender_group_id,
            "sender_group_type": sender_group_type,
        })
        return self._resource.post(data=body)
