"""Exceptions raised by the Nexmo client.

Transport failures (``requests.RequestException``), bodies that are not
JSON (``requests.JSONDecodeError``) and JSON of the wrong shape
(``pydantic.ValidationError``) are not part of this hierarchy and propagate
unchanged. The two decode failures carry the raw response body as a note.
"""

from __future__ import annotations


class NexmoError(Exception):
    """Base class for every error raised by nexmo_rest itself."""


class InvalidCredentials(NexmoError):
    """The API key or secret is empty."""


class InvalidKeyError(InvalidCredentials):
    def __init__(self) -> None:
        super().__init__("nexmo: invalid key length")


class InvalidSecretError(InvalidCredentials):
    def __init__(self) -> None:
        super().__init__("nexmo: invalid secret length")


class UnsupportedOperation(NexmoError):
    """No endpoint is registered for the requested operation."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"nexmo: operation not supported: {operation!r}")


class BadRequest(NexmoError):
    """The API answered with a non-200 status. The body is never decoded."""

    def __init__(self, operation: str, status_code: int) -> None:
        self.operation = operation
        self.status_code = status_code
        super().__init__(f"nexmo: invalid request ({operation}: HTTP {status_code})")


class EmptyResponse(NexmoError):
    """An SMS send returned HTTP 200 but no delivery records."""

    def __init__(self) -> None:
        super().__init__("nexmo: response is empty")
