"""
Voice call request/response models.

see: https://docs.nexmo.com/voice/call
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .base import ResponseModel


class CallRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    to: str
    answer_url: str
    from_: str | None = Field(default=None, alias="from")
    machine_detection: str | None = None
    machine_timeout: str | None = None
    answer_method: str | None = None
    error_url: str | None = None
    error_method: str | None = None
    status_url: str | None = None
    status_method: str | None = None


class CallResponse(ResponseModel):
    # The call API uses dashed keys and an integer status.
    call_id: str = Field(default="", alias="call-id")
    to: str = ""
    status: int = 0
    error_text: str = Field(default="", alias="error-text")
