from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final

OP_SMS: Final[str] = "sms"
OP_CALL: Final[str] = "call"
OP_TEXT2SPEECH: Final[str] = "text2speech"


@dataclass(frozen=True)
class Endpoint:
    doc: str  # API reference, for diagnostics only
    method: str
    url: str


def make_registry(entries: Mapping[str, Endpoint]) -> Mapping[str, Endpoint]:
    """Return a read-only copy of ``entries`` suitable for a Dispatcher."""
    return MappingProxyType(dict(entries))


DEFAULT_ENDPOINTS: Final[Mapping[str, Endpoint]] = make_registry(
    {
        OP_SMS: Endpoint(
            doc="https://docs.nexmo.com/messaging/sms-api/api-reference",
            method="POST",
            url="https://rest.nexmo.com/sms/json",
        ),
        OP_CALL: Endpoint(
            doc="https://docs.nexmo.com/voice/call",
            method="POST",
            url="https://rest.nexmo.com/call/json",
        ),
        OP_TEXT2SPEECH: Endpoint(
            doc="https://docs.nexmo.com/voice/text-to-speech",
            method="POST",
            url="https://api.nexmo.com/tts/json",
        ),
    }
)
