"""
resttools - helpers for talking to JSON REST APIs over requests.

Builds bearer-authenticated clients and turns failed calls into typed errors.
"""

__version__ = "0.1.0"

from ._classifier import (
    ErrorContext,
    classify,
    classify_delete_error,
    classify_read_error,
    classify_write_error,
)
from ._client import BaseApiClient, ClientConfig, create_client, create_client_from_config
from ._exceptions import (
    ConfigurationError,
    FetchFailedError,
    NotFoundError,
    RestToolsError,
    SaveFailedError,
    UnauthorizedError,
)
from ._http import DEFAULT_CODEC, BearerAuth, JsonCodec, RestClient, RestResponse

__all__ = [
    "DEFAULT_CODEC",
    "BaseApiClient",
    "BearerAuth",
    "ClientConfig",
    "ConfigurationError",
    "ErrorContext",
    "FetchFailedError",
    "JsonCodec",
    "NotFoundError",
    "RestClient",
    "RestResponse",
    "RestToolsError",
    "SaveFailedError",
    "UnauthorizedError",
    "classify",
    "classify_delete_error",
    "classify_read_error",
    "classify_write_error",
    "create_client",
    "create_client_from_config",
]
