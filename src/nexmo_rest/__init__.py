from __future__ import annotations

from .call import CallRequest, CallResponse
from .client import DEFAULT_TIMEOUT, NexmoClient, new_call, new_sms, new_text2speech
from .endpoints import DEFAULT_ENDPOINTS, Endpoint
from .errors import (
    BadRequest,
    EmptyResponse,
    InvalidCredentials,
    InvalidKeyError,
    InvalidSecretError,
    NexmoError,
    UnsupportedOperation,
)
from .sms import SmsMessage, SmsRequest, SmsResponse
from .text2speech import TextToSpeechRequest, TextToSpeechResponse

__all__ = [
    "DEFAULT_ENDPOINTS",
    "DEFAULT_TIMEOUT",
    "BadRequest",
    "CallRequest",
    "CallResponse",
    "EmptyResponse",
    "Endpoint",
    "InvalidCredentials",
    "InvalidKeyError",
    "InvalidSecretError",
    "NexmoClient",
    "NexmoError",
    "SmsMessage",
    "SmsRequest",
    "SmsResponse",
    "TextToSpeechRequest",
    "TextToSpeechResponse",
    "UnsupportedOperation",
    "new_call",
    "new_sms",
    "new_text2speech",
]
