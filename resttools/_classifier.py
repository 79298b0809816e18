"""Map HTTP call outcomes to typed resttools errors.

Every public function here returns an error instance instead of raising it,
so the caller decides whether to raise, log or hand it back as a result.
"""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
import logging
from typing import Any

from ._exceptions import (
    FetchFailedError,
    NotFoundError,
    RestToolsError,
    SaveFailedError,
    UnauthorizedError,
)

logger = logging.getLogger(__name__)

# A 302 redirect is read as a bounce to the login page.
_UNAUTHORIZED_STATUS = {HTTPStatus.UNAUTHORIZED, HTTPStatus.FOUND}


@dataclass(frozen=True)
class ErrorContext:
    """Everything known about a failed call at the point of classification."""

    status_code: int
    response_body: str | None
    resource_label: str
    is_write_operation: bool = False
    cause: BaseException | None = None
    payload: Any = None
    resource_id: int | None = None


def classify(context: ErrorContext) -> RestToolsError:
    """Pick the error variant for ``context``. First matching rule wins."""
    status = int(context.status_code)

    if status == HTTPStatus.NOT_FOUND:
        error: RestToolsError = NotFoundError()
    elif status in _UNAUTHORIZED_STATUS:
        error = UnauthorizedError()
    elif context.is_write_operation:
        error = SaveFailedError(
            f"Failed to create/update/delete {context.resource_label}",
            cause=context.cause,
            trace=context.response_body,
            payload=context.payload,
            resource_id=context.resource_id,
        )
    else:
        error = FetchFailedError(
            f"Failed to fetch {context.resource_label}",
            cause=context.cause,
            trace=context.response_body,
            payload=context.payload,
            resource_id=context.resource_id,
        )

    logger.debug(
        "Classified HTTP %s for %s as %s", status, context.resource_label, type(error).__name__
    )
    return error


def classify_read_error(
    status_code: int,
    response_body: str | None,
    resource_label: str,
    cause: BaseException | None = None,
    resource_id: int | None = None,
) -> RestToolsError:
    """Classify a failed GET, for a collection or a single resource."""
    return classify(
        ErrorContext(
            status_code=status_code,
            response_body=response_body,
            resource_label=resource_label,
            cause=cause,
            resource_id=resource_id,
        )
    )


def classify_write_error(
    status_code: int,
    response_body: str | None,
    resource_label: str,
    cause: BaseException | None = None,
    payload: Any = None,
    resource_id: int | None = None,
) -> RestToolsError:
    """Classify a failed POST or PUT, keeping the body that was sent."""
    return classify(
        ErrorContext(
            status_code=status_code,
            response_body=response_body,
            resource_label=resource_label,
            is_write_operation=True,
            cause=cause,
            payload=payload,
            resource_id=resource_id,
        )
    )


def classify_delete_error(
    status_code: int,
    response_body: str | None,
    resource_label: str,
    cause: BaseException | None,
    resource_id: int | None,
) -> RestToolsError:
    """Classify a failed DELETE."""
    return classify(
        ErrorContext(
            status_code=status_code,
            response_body=response_body,
            resource_label=resource_label,
            is_write_operation=True,
            cause=cause,
            resource_id=resource_id,
        )
    )
