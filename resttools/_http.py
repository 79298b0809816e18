"""Thin HTTP client wrapping requests.Session with bearer auth and a JSON codec."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
import json
import logging
from typing import Any

import requests
from requests.auth import AuthBase
from requests.structures import CaseInsensitiveDict

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JsonCodec:
    """Serializer pair used for request and response bodies."""

    dumps: Callable[[Any], str] = json.dumps
    loads: Callable[[str], Any] = json.loads
    content_type: str = "application/json"


DEFAULT_CODEC = JsonCodec()


class BearerAuth(AuthBase):
    """Attach ``Authorization: Bearer <token>`` to every request."""

    def __init__(self, token: str):
        self.token = token

    def __call__(self, r: requests.PreparedRequest) -> requests.PreparedRequest:
        r.headers["Authorization"] = f"Bearer {self.token}"
        return r

    def __eq__(self, other: object) -> bool:
        return isinstance(other, BearerAuth) and self.token == other.token

    def __hash__(self) -> int:
        return hash(self.token)

    def __repr__(self) -> str:
        return "BearerAuth(token=***)"


@dataclass
class RestResponse:
    """Outcome of a single request.

    Transport and decode failures are kept on ``error`` instead of being
    raised, with ``status_code`` 0 when no response arrived.
    """

    status_code: int
    content: str | None = None
    data: Any = None
    error: Exception | None = None
    headers: CaseInsensitiveDict = field(default_factory=CaseInsensitiveDict)

    @property
    def is_successful(self) -> bool:
        return self.error is None and 200 <= self.status_code < 300


class RestClient:
    """HTTP client bound to a base URL. Built by :func:`resttools.create_client`."""

    def __init__(
        self,
        base_url: str,
        auth: AuthBase | None = None,
        codec: JsonCodec = DEFAULT_CODEC,
        timeout: float | None = None,
        follow_redirects: bool = True,
    ):
        self._session = requests.Session()
        self._session.auth = auth
        self._session.headers["Accept"] = codec.content_type
        self._base_url = base_url.rstrip("/")
        self._codec = codec
        self._timeout = timeout
        # Off when callers want a 302 login bounce to reach the classifier.
        self._follow_redirects = follow_redirects

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def codec(self) -> JsonCodec:
        return self._codec

    @property
    def auth(self) -> AuthBase | None:
        return self._session.auth  # type: ignore[return-value]

    def _decode(self, resp: requests.Response) -> RestResponse:
        result = RestResponse(
            status_code=resp.status_code,
            content=resp.text or None,
            headers=CaseInsensitiveDict(resp.headers),
        )
        if result.content and 200 <= resp.status_code < 300:
            try:
                result.data = self._codec.loads(result.content)
            except ValueError as e:
                logger.debug("Failed to decode response body: %s", result.content[:200])
                result.error = e
        return result

    def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> RestResponse:
        """Send a request. Never raises for HTTP or transport failures."""
        url = f"{self._base_url}/{path.lstrip('/')}"
        send_headers = dict(headers or {})
        body = None
        if json is not None:
            body = self._codec.dumps(json)
            send_headers.setdefault("Content-Type", self._codec.content_type)

        logger.debug("%s %s", method, url)
        try:
            resp = self._session.request(
                method,
                url,
                data=body,
                params=params,
                headers=send_headers,
                timeout=self._timeout,
                allow_redirects=self._follow_redirects,
            )
        except requests.RequestException as e:
            logger.debug("Request %s %s failed: %s", method, url, e)
            return RestResponse(status_code=0, error=e)

        try:
            return self._decode(resp)
        finally:
            resp.close()

    def get(self, path: str, params: dict[str, Any] | None = None) -> RestResponse:
        return self.request("GET", path, params=params)

    def post(self, path: str, json: Any = None) -> RestResponse:
        return self.request("POST", path, json=json)

    def put(self, path: str, json: Any = None) -> RestResponse:
        return self.request("PUT", path, json=json)

    def delete(self, path: str) -> RestResponse:
        return self.request("DELETE", path)

    def close(self) -> None:
        """Close the session."""
        self._session.close()

    def __enter__(self) -> RestClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
