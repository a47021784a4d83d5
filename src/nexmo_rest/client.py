from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Final

import requests

from .call import CallRequest, CallResponse
from .config import Settings, get_settings
from .dispatch import Credentials, Dispatcher, build_session
from .endpoints import DEFAULT_ENDPOINTS, OP_CALL, OP_SMS, OP_TEXT2SPEECH, Endpoint
from .errors import EmptyResponse, InvalidCredentials, InvalidKeyError, InvalidSecretError
from .sms import SmsRequest, SmsResponse
from .text2speech import TextToSpeechRequest, TextToSpeechResponse

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT: Final[float] = 10.0


def new_sms(to: str, from_: str, text: str) -> SmsRequest:
    """SMS request with only the required fields set."""
    return SmsRequest(to=to, from_=from_, text=text)


def new_call(to: str, answer_url: str) -> CallRequest:
    return CallRequest(to=to, answer_url=answer_url)


def new_text2speech(
    to: str,
    from_: str,
    text: str,
    lang: str = "",
    voice: str = "",
) -> TextToSpeechRequest:
    # Empty lang/voice are dropped at dispatch, so the API defaults apply.
    return TextToSpeechRequest(to=to, from_=from_, text=text, language=lang, voice=voice)


class NexmoClient:
    """
    Client for the Nexmo SMS, call and text-to-speech REST APIs.

    Credentials, endpoints and timeout are fixed at construction. The
    underlying requests.Session is not documented as thread-safe (its cookie
    jar and adapters are mutable), so give each thread its own client.
    Each operation is one synchronous HTTP round trip; nothing is retried.
    """

    def __init__(
        self,
        key: str,
        secret: str,
        timeout: float = DEFAULT_TIMEOUT,
        *,
        endpoints: Mapping[str, Endpoint] | None = None,
        session: requests.Session | None = None,
    ) -> None:
        if not key:
            raise InvalidKeyError()
        if not secret:
            raise InvalidSecretError()

        self.credentials = Credentials(key=key, secret=secret)
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session if session is not None else build_session()
        self._dispatcher = Dispatcher(
            credentials=self.credentials,
            endpoints=endpoints if endpoints is not None else DEFAULT_ENDPOINTS,
            session=self.session,
            timeout=timeout,
        )

    @classmethod
    def must(cls, key: str, secret: str, timeout: float = DEFAULT_TIMEOUT) -> NexmoClient:
        """
        Construct a client or abort the process.

        For startup code that cannot do anything useful without valid
        credentials.
        """
        try:
            return cls(key, secret, timeout)
        except InvalidCredentials as exc:
            logger.critical("cannot create Nexmo client: %s", exc)
            raise SystemExit(str(exc)) from exc

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> NexmoClient:
        settings = settings or get_settings()
        return cls(
            settings.nexmo_api_key,
            settings.nexmo_api_secret,
            settings.nexmo_timeout_s,
        )

    # --- operations ---

    def send_message(self, request: SmsRequest) -> SmsResponse:
        """
        Send an SMS.

        Raises EmptyResponse when the API answers 200 but returns no delivery
        records; that is how it reports that nothing was accepted. Callers
        should still check each record's ``status`` (see sms.STATUS_*).
        """
        res = self._dispatcher.dispatch(OP_SMS, request, SmsResponse)
        if not res.messages:
            raise EmptyResponse()
        return res

    def basic_sms(self, to: str, from_: str, text: str) -> SmsResponse:
        return self.send_message(new_sms(to, from_, text))

    def place_call(self, request: CallRequest) -> CallResponse:
        return self._dispatcher.dispatch(OP_CALL, request, CallResponse)

    def synthesize(self, request: TextToSpeechRequest) -> TextToSpeechResponse:
        return self._dispatcher.dispatch(OP_TEXT2SPEECH, request, TextToSpeechResponse)

    # --- lifecycle ---

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> NexmoClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
