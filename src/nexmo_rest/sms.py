"""SMS request/response models and delivery status codes.

see: https://docs.nexmo.com/messaging/sms-api/api-reference
"""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ConfigDict, Field

from .base import ResponseModel

# Delivery status codes returned per recipient in ``messages[].status``.
# Only STATUS_OK means the message was accepted for delivery; every other
# code is a reason, not a boolean.
STATUS_OK: Final[str] = "0"
STATUS_UNKNOWN: Final[str] = "1"
STATUS_ABSENT_SUBSCRIBER_TEMPORARY: Final[str] = "2"
STATUS_ABSENT_SUBSCRIBER_PERMANENT: Final[str] = "3"
STATUS_CALL_BARRED_USER: Final[str] = "4"
STATUS_PORTABILITY_ERROR: Final[str] = "5"
STATUS_ANTI_SPAM_REJECTION: Final[str] = "6"
STATUS_HANDSET_BUSY: Final[str] = "7"
STATUS_NETWORK_ERROR: Final[str] = "8"
STATUS_ILLEGAL_NUMBER: Final[str] = "9"
STATUS_INVALID_MESSAGE: Final[str] = "10"
STATUS_UNROUTABLE: Final[str] = "11"
STATUS_DESTINATION_UNREACHABLE: Final[str] = "12"
STATUS_AGE_RESTRICTION: Final[str] = "13"
STATUS_BLOCKED_BY_CARRIER: Final[str] = "14"
STATUS_PREPAID_INSUFFICIENT: Final[str] = "15"
STATUS_GENERAL_ERROR: Final[str] = "99"

STATUS_DESCRIPTIONS: Final[dict[str, str]] = {
    STATUS_OK: "Delivered",
    STATUS_UNKNOWN: "Unknown error from the carrier, or unknown destination",
    STATUS_ABSENT_SUBSCRIBER_TEMPORARY: "Absent subscriber (temporary), retry later",
    STATUS_ABSENT_SUBSCRIBER_PERMANENT: "Absent subscriber (permanent), remove the number",
    STATUS_CALL_BARRED_USER: "Call barred by user",
    STATUS_PORTABILITY_ERROR: "Portability error after the user changed carrier",
    STATUS_ANTI_SPAM_REJECTION: "Anti-spam rejection by the carrier",
    STATUS_HANDSET_BUSY: "Handset busy, retry later",
    STATUS_NETWORK_ERROR: "Network error, retry later",
    STATUS_ILLEGAL_NUMBER: "Illegal number (recipient opted out)",
    STATUS_INVALID_MESSAGE: "Invalid message parameters (e.g. type or udh)",
    STATUS_UNROUTABLE: "Unroutable: no route available for this number",
    STATUS_DESTINATION_UNREACHABLE: "Destination unreachable",
    STATUS_AGE_RESTRICTION: "Blocked by subscriber age restriction",
    STATUS_BLOCKED_BY_CARRIER: "Number blocked by carrier",
    STATUS_PREPAID_INSUFFICIENT: "Recipient pre-paid account has insufficient funds",
    STATUS_GENERAL_ERROR: "General error on the chosen route",
}

# Temporary failures: the same message may succeed if sent again later.
TEMPORARY_FAILURE_STATUSES: Final[frozenset[str]] = frozenset(
    {
        STATUS_ABSENT_SUBSCRIBER_TEMPORARY,
        STATUS_HANDSET_BUSY,
        STATUS_NETWORK_ERROR,
    }
)


class SmsRequest(BaseModel):
    """
    Nexmo SMS request.

    Fields are addressed by their Python names and serialised under the wire
    names (``from``, ``status-report-req``, ...). Only ``to``, ``from`` and
    ``text`` are required; empty optional fields are never sent.

    see: https://docs.nexmo.com/messaging/sms-api/api-reference#request
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    to: str
    from_: str = Field(alias="from")
    text: str
    type: str | None = None
    status_report_req: str | None = Field(default=None, alias="status-report-req")
    client_ref: str | None = Field(default=None, alias="client-ref")
    vcard: str | None = None
    vcal: str | None = None
    callback: str | None = None
    message_class: str | None = Field(default=None, alias="message-class")
    udh: str | None = None
    protocol_id: str | None = Field(default=None, alias="protocol-id")
    body: str | None = None
    title: str | None = None
    url: str | None = None
    validity: str | None = None


class SmsMessage(ResponseModel):
    """One recipient's delivery record inside an SMS response."""

    status: str = ""
    message_id: str = Field(default="", alias="message-id")
    to: str = ""
    client_ref: str = Field(default="", alias="client-ref")
    remaining_balance: str = Field(default="", alias="remaining-balance")
    message_price: str = Field(default="", alias="message-price")
    network: str = ""
    error_text: str = Field(default="", alias="error-text")

    @property
    def delivered(self) -> bool:
        return self.status == STATUS_OK

    @property
    def should_retry_later(self) -> bool:
        return self.status in TEMPORARY_FAILURE_STATUSES

    @property
    def status_description(self) -> str:
        return STATUS_DESCRIPTIONS.get(self.status, f"Unrecognised status {self.status!r}")


class SmsResponse(ResponseModel):
    """
    Nexmo SMS response.

    see: https://docs.nexmo.com/messaging/sms-api/api-reference#response
    """

    message_count: str = Field(default="", alias="message-count")
    messages: list[SmsMessage] = Field(default_factory=list)
