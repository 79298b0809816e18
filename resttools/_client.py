"""Client construction and the base class for application API wrappers."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from typing import Any

import requests

from ._classifier import classify_delete_error, classify_read_error, classify_write_error
from ._exceptions import ConfigurationError, RestToolsError
from ._http import DEFAULT_CODEC, BearerAuth, JsonCodec, RestClient, RestResponse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClientConfig:
    """Inputs to :func:`create_client_from_config`."""

    base_url: str
    token: str | None = None
    timeout: float | None = None
    codec: JsonCodec = DEFAULT_CODEC
    follow_redirects: bool = True

    @classmethod
    def from_env(cls, prefix: str = "RESTTOOLS_") -> ClientConfig:
        """Read ``<prefix>BASE_URL``, ``<prefix>TOKEN`` and ``<prefix>TIMEOUT``."""
        base_url = os.environ.get(f"{prefix}BASE_URL")
        if not base_url:
            raise ConfigurationError(f"No base URL provided. Set {prefix}BASE_URL env var.")

        raw_timeout = os.environ.get(f"{prefix}TIMEOUT")
        try:
            timeout = float(raw_timeout) if raw_timeout else None
        except ValueError as e:
            raise ConfigurationError(f"Invalid {prefix}TIMEOUT: {raw_timeout!r}") from e

        return cls(
            base_url=base_url,
            token=os.environ.get(f"{prefix}TOKEN") or None,
            timeout=timeout,
        )


def _validate_base_url(base_url: str, session: requests.Session) -> None:
    # Both raise requests' own MissingSchema / InvalidURL / InvalidSchema.
    requests.PreparedRequest().prepare_url(base_url, None)
    session.get_adapter(base_url)


def create_client(
    base_url: str,
    token: str | None = None,
    *,
    codec: JsonCodec = DEFAULT_CODEC,
    timeout: float | None = None,
    follow_redirects: bool = True,
) -> RestClient:
    """Build a client bound to ``base_url``, with bearer auth when ``token`` is given.

    The token is passed through as-is. No request is sent here.
    """
    auth = BearerAuth(token) if token is not None else None
    client = RestClient(
        base_url, auth=auth, codec=codec, timeout=timeout, follow_redirects=follow_redirects
    )
    try:
        _validate_base_url(client.base_url, client._session)
    except requests.RequestException:
        client.close()
        raise
    logger.debug("Created REST client for %s (auth=%s)", client.base_url, auth is not None)
    return client


def create_client_from_config(config: ClientConfig) -> RestClient:
    return create_client(
        config.base_url,
        config.token,
        codec=config.codec,
        timeout=config.timeout,
        follow_redirects=config.follow_redirects,
    )


class BaseApiClient:
    """Base class for service wrappers that talk to one REST API.

    Usage:
        class UsersApi(BaseApiClient):
            def __init__(self, base_url, token):
                self._client = self.initialize_rest_client(base_url, token)

            def get(self, user_id):
                resp = self._client.get(f"/users/{user_id}")
                if not resp.is_successful:
                    raise self.error_for_response(resp, "user", resource_id=user_id)
                return resp.data
    """

    def initialize_rest_client(self, base_url: str, token: str | None = None) -> RestClient:
        return create_client(base_url, token)

    def error_handler(
        self,
        status_code: int,
        response_content: str | None,
        content_objects: str,
        exception: BaseException | None,
        resource_id: int | None = None,
    ) -> RestToolsError:
        """Error for a GET, with or without a single target id."""
        return classify_read_error(
            status_code, response_content, content_objects, exception, resource_id
        )

    def post_error_handler(
        self,
        status_code: int,
        response_content: str | None,
        content_objects: str,
        exception: BaseException | None,
        resource_model: Any,
    ) -> RestToolsError:
        return classify_write_error(
            status_code, response_content, content_objects, exception, resource_model
        )

    def put_error_handler(
        self,
        status_code: int,
        response_content: str | None,
        content_objects: str,
        exception: BaseException | None,
        resource_model: Any,
        resource_id: int,
    ) -> RestToolsError:
        return classify_write_error(
            status_code, response_content, content_objects, exception, resource_model, resource_id
        )

    def delete_error_handler(
        self,
        status_code: int,
        response_content: str | None,
        content_objects: str,
        exception: BaseException | None,
        resource_id: int,
    ) -> RestToolsError:
        return classify_delete_error(
            status_code, response_content, content_objects, exception, resource_id
        )

    def error_for_response(
        self,
        response: RestResponse,
        content_objects: str,
        *,
        write: bool = False,
        resource_model: Any = None,
        resource_id: int | None = None,
    ) -> RestToolsError:
        """Classify a failed :class:`RestResponse` in one call."""
        if write:
            return classify_write_error(
                response.status_code,
                response.content,
                content_objects,
                response.error,
                resource_model,
                resource_id,
            )
        return classify_read_error(
            response.status_code, response.content, content_objects, response.error, resource_id
        )
