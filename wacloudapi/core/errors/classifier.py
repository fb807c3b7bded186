"""
Outbound error classifier.

Turns a failed HTTP response (status + raw body) into an
``ErrorClassification``. The decision depends only on the HTTP status and
the parsed numeric error code, never on message text.
"""

import json
from typing import Final

from pydantic import ValidationError

from .models import (
    ApiErrorResponse,
    ErrorClassification,
    GenericError,
    InvalidToken,
    RateLimited,
)

# https://developers.facebook.com/docs/whatsapp/cloud-api/support/error-codes
INVALID_TOKEN_CODES: Final[frozenset[int]] = frozenset({190})
RATE_LIMIT_CODES: Final[frozenset[int]] = frozenset({4, 17, 32, 613})


def _body_text(raw_body: bytes | str) -> str:
    if isinstance(raw_body, bytes):
        return raw_body.decode("utf-8", errors="replace")
    return raw_body


def parse_error_body(raw_body: bytes | str) -> ApiErrorResponse | None:
    """Parse a Graph API error body, returning None when it has another shape."""
    try:
        return ApiErrorResponse.model_validate(json.loads(raw_body))
    except (ValueError, TypeError, ValidationError):
        return None


def classify_error(http_status: int, raw_body: bytes | str) -> ErrorClassification:
    """
    Classify a failed Graph API response.

    Args:
        http_status: HTTP status code of the response
        raw_body: Response body exactly as received

    Returns:
        InvalidToken for code 190, RateLimited for throttling codes,
        GenericError otherwise. A body that is not a Graph API error
        (gateway pages, empty bodies) yields GenericError with the HTTP
        status as code and the body text as message.
    """
    parsed = parse_error_body(raw_body)
    if parsed is None:
        return GenericError(code=http_status, message=_body_text(raw_body))

    error = parsed.error
    if error.code in INVALID_TOKEN_CODES:
        return InvalidToken()
    if error.code in RATE_LIMIT_CODES:
        # The Graph API does not send a retry hint in the error body.
        return RateLimited(retry_after=None)

    detail = (
        error.error_data.model_dump(exclude_none=True) if error.error_data else None
    )
    return GenericError(
        code=error.code,
        message=error.message,
        subcode=error.error_subcode,
        detail=detail,
    )
