"""
wacloudapi - async Python SDK for the WhatsApp Cloud API.

Quick start:
    from wacloudapi import WhatsAppClient

    async with WhatsAppClient(token, phone_number_id) as client:
        await client.messages.send_text("15551234567", "Hello!")

Webhooks:
    from wacloudapi import WebhookReceiver

    receiver = WebhookReceiver(app_secret)
    events = receiver.receive(raw_body, headers["X-Hub-Signature-256"])
"""

from wacloudapi.client import WhatsAppClient
from wacloudapi.core.config import DEFAULT_API_VERSION, GRAPH_API_URL, Settings
from wacloudapi.core.errors import (
    ApiError,
    ErrorClassification,
    GenericError,
    InvalidSignatureError,
    InvalidToken,
    InvalidTokenError,
    MediaError,
    RateLimited,
    RateLimitedError,
    ResponseParseError,
    WebhookChallengeError,
    WebhookParseError,
    WhatsAppApiError,
    WhatsAppError,
    classify_error,
)
from wacloudapi.webhooks import (
    NO_ERROR_CODE,
    DomainEvent,
    WebhookEnvelope,
    WebhookReceiver,
    classify_webhook,
    parse_webhook,
    verify_signature,
    verify_webhook_challenge,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_API_VERSION",
    "GRAPH_API_URL",
    "NO_ERROR_CODE",
    "ApiError",
    "DomainEvent",
    "ErrorClassification",
    "GenericError",
    "InvalidSignatureError",
    "InvalidToken",
    "InvalidTokenError",
    "MediaError",
    "RateLimited",
    "RateLimitedError",
    "ResponseParseError",
    "Settings",
    "WebhookChallengeError",
    "WebhookEnvelope",
    "WebhookParseError",
    "WebhookReceiver",
    "WhatsAppApiError",
    "WhatsAppClient",
    "WhatsAppError",
    "classify_error",
    "classify_webhook",
    "parse_webhook",
    "verify_signature",
    "verify_webhook_challenge",
]
