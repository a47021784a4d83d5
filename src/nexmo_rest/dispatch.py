"""
Shared request path for every Nexmo operation.

Every client method funnels through Dispatcher.dispatch(), which:

  - resolves the operation in the endpoint registry
  - flattens the request model and drops empty fields
  - injects api_key / api_secret
  - performs exactly one HTTP call
  - decodes the JSON body into the caller's response model
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Final, TypeVar

import requests
from pydantic import BaseModel, ValidationError
from requests.adapters import HTTPAdapter

from .endpoints import Endpoint
from .errors import BadRequest, UnsupportedOperation

logger = logging.getLogger(__name__)

CREDENTIAL_FIELDS: Final[tuple[str, str]] = ("api_key", "api_secret")

ResponseT = TypeVar("ResponseT", bound=BaseModel)


@dataclass(frozen=True)
class Credentials:
    key: str
    secret: str

    def __repr__(self) -> str:
        return f"Credentials(key={self.key!r}, secret='***')"


def build_session() -> requests.Session:
    """A plain Session with automatic retries turned off."""
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=0)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    return s


def encode_params(request: BaseModel, credentials: Credentials) -> dict[str, Any]:
    """
    Flatten ``request`` to wire-named parameters.

    None and "" values are never sent. Credentials are written last; no
    request field can override them.
    """
    params = {
        name: value
        for name, value in request.model_dump(by_alias=True).items()
        if value is not None and value != ""
    }
    params["api_key"] = credentials.key
    params["api_secret"] = credentials.secret
    return params


class Dispatcher:
    def __init__(
        self,
        credentials: Credentials,
        endpoints: Mapping[str, Endpoint],
        session: requests.Session,
        timeout: float,
    ) -> None:
        self.credentials = credentials
        self.endpoints = endpoints
        self.session = session
        self.timeout = timeout

    def dispatch(
        self,
        operation: str,
        request: BaseModel,
        response_model: type[ResponseT],
    ) -> ResponseT:
        endpoint = self.endpoints.get(operation)
        if endpoint is None:
            raise UnsupportedOperation(operation)

        params = encode_params(request, self.credentials)
        logger.debug(
            "nexmo %s: %s %s fields=%s",
            operation,
            endpoint.method,
            endpoint.url,
            sorted(name for name in params if name not in CREDENTIAL_FIELDS),
        )

        # Transport errors (timeouts, refused connections, DNS) propagate as-is.
        resp = self.session.request(
            endpoint.method,
            endpoint.url,
            params=params,
            timeout=self.timeout,
        )

        if resp.status_code != requests.codes.ok:
            logger.debug("nexmo %s: HTTP %s", operation, resp.status_code)
            raise BadRequest(operation, resp.status_code)

        # Decode failures propagate unchanged, with the raw body attached as a
        # note and logged; requests.JSONDecodeError also keeps it on ``.doc``.
        try:
            data = resp.json()
        except requests.JSONDecodeError as exc:
            exc.add_note(f"response body: {resp.text!r}")
            logger.warning("nexmo %s: response is not JSON: %r", operation, resp.text)
            raise
        try:
            return response_model.model_validate(data)
        except ValidationError as exc:
            exc.add_note(f"response body: {resp.text!r}")
            logger.warning("nexmo %s: unexpected response shape: %r", operation, resp.text)
            raise
