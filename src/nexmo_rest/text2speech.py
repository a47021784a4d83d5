"""
Text-to-speech request/response models.

see: https://docs.nexmo.com/voice/text-to-speech
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .base import ResponseModel


class TextToSpeechRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    to: str
    text: str
    from_: str | None = Field(default=None, alias="from")
    # Wire name is "lg", e.g. "en-us"
    language: str | None = Field(default=None, alias="lg")
    voice: str | None = None
    repeat: int | None = None
    machine_detection: str | None = None
    machine_timeout: str | None = None
    callback: str | None = None
    callback_method: str | None = None


class TextToSpeechResponse(ResponseModel):
    # Unlike the call API, keys use underscores and status is a string.
    call_id: str = ""
    to: str = ""
    status: str = ""
    error_text: str = ""
