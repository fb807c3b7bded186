"""
Exception hierarchy for the SDK.

Transport failures raised by aiohttp (``aiohttp.ClientError``,
``asyncio.TimeoutError``) are not wrapped and reach the caller unchanged.
"""

from .models import ErrorClassification, GenericError, InvalidToken, RateLimited


class WhatsAppError(Exception):
    """Base class for every error raised by wacloudapi."""


class WhatsAppApiError(WhatsAppError):
    """The Graph API answered with a non-2xx status."""

    def __init__(self, classification: ErrorClassification, status: int):
        self.classification = classification
        self.status = status
        super().__init__(self._describe())

    def _describe(self) -> str:
        return f"WhatsApp API error (HTTP {self.status})"


class InvalidTokenError(WhatsAppApiError):
    """Access token expired, revoked or malformed."""

    def _describe(self) -> str:
        return f"Invalid or expired access token (HTTP {self.status})"


class RateLimitedError(WhatsAppApiError):
    """A Graph API rate limit was hit."""

    @property
    def retry_after(self) -> int | None:
        return self.classification.retry_after

    def _describe(self) -> str:
        return f"Rate limited by WhatsApp API (HTTP {self.status})"


class ApiError(WhatsAppApiError):
    """Any other API failure; exposes the vendor code and message."""

    @property
    def code(self) -> int:
        return self.classification.code

    @property
    def subcode(self) -> int | None:
        return self.classification.subcode

    @property
    def message(self) -> str:
        return self.classification.message

    def _describe(self) -> str:
        return f"API error {self.classification.code}: {self.classification.message}"


class ResponseParseError(WhatsAppError):
    """A 2xx response body was not JSON or did not match the expected model."""


class WebhookError(WhatsAppError):
    """Base class for webhook boundary failures."""


class WebhookParseError(WebhookError):
    """The webhook body is not JSON or not a webhook envelope."""


class InvalidSignatureError(WebhookError):
    """The X-Hub-Signature-256 header did not match the payload."""


class WebhookChallengeError(WebhookError):
    """A subscription verification request was rejected."""


class MediaError(WhatsAppError):
    """Media upload, download or validation failure."""


def raise_for_classification(
    classification: ErrorClassification, status: int
) -> None:
    """Raise the exception matching an error classification."""
    if isinstance(classification, InvalidToken):
        raise InvalidTokenError(classification, status)
    if isinstance(classification, RateLimited):
        raise RateLimitedError(classification, status)
    if isinstance(classification, GenericError):
        raise ApiError(classification, status)
    raise TypeError(f"Unknown error classification: {classification!r}")
