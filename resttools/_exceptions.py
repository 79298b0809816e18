"""Typed error hierarchy produced by classifying REST call outcomes."""

from __future__ import annotations

from typing import Any


class RestToolsError(Exception):
    """Base exception for all resttools errors."""

    default_message = "REST call failed"

    def __init__(
        self,
        message: str | None = None,
        cause: BaseException | None = None,
        trace: str | None = None,
        payload: Any = None,
        resource_id: int | None = None,
    ):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.trace = trace
        self.payload = payload
        self.resource_id = resource_id
        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> dict[str, Any]:
        """Diagnostic fields as a plain dict, for logging or support tickets."""
        return {
            "type": type(self).__name__,
            "message": self.message,
            "cause": repr(self.cause) if self.cause is not None else None,
            "trace": self.trace,
            "payload": self.payload,
            "resource_id": self.resource_id,
        }

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return (
            self.message == other.message
            and self.cause is other.cause
            and self.trace == other.trace
            and self.payload == other.payload
            and self.resource_id == other.resource_id
        )

    def __hash__(self) -> int:
        return hash((type(self), self.message, self.resource_id))


class NotFoundError(RestToolsError):
    """404: the target resource does not exist."""

    default_message = "Resource not found"


class UnauthorizedError(RestToolsError):
    """401 or 302: missing or expired credentials."""

    default_message = "Not authorized"


class SaveFailedError(RestToolsError):
    """Create, update or delete failed for a reason other than 404/401."""


class FetchFailedError(RestToolsError):
    """Read failed for a reason other than 404/401."""


class ConfigurationError(RestToolsError):
    """Client configuration is missing or malformed."""
