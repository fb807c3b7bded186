"""Outbound error classification and the SDK exception hierarchy."""

from .classifier import (
    INVALID_TOKEN_CODES,
    RATE_LIMIT_CODES,
    classify_error,
    parse_error_body,
)
from .exceptions import (
    ApiError,
    InvalidSignatureError,
    InvalidTokenError,
    MediaError,
    RateLimitedError,
    ResponseParseError,
    WebhookChallengeError,
    WebhookError,
    WebhookParseError,
    WhatsAppApiError,
    WhatsAppError,
    raise_for_classification,
)
from .models import (
    ApiErrorData,
    ApiErrorDetail,
    ApiErrorResponse,
    ErrorClassification,
    GenericError,
    InvalidToken,
    RateLimited,
)

__all__ = [
    "INVALID_TOKEN_CODES",
    "RATE_LIMIT_CODES",
    "ApiError",
    "ApiErrorData",
    "ApiErrorDetail",
    "ApiErrorResponse",
    "ErrorClassification",
    "GenericError",
    "InvalidSignatureError",
    "InvalidToken",
    "InvalidTokenError",
    "MediaError",
    "RateLimited",
    "RateLimitedError",
    "ResponseParseError",
    "WebhookChallengeError",
    "WebhookError",
    "WebhookParseError",
    "WhatsAppApiError",
    "WhatsAppError",
    "classify_error",
    "parse_error_body",
    "raise_for_classification",
]
