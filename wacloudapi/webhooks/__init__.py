"""Inbound webhook authentication, parsing and normalization."""

from .events import (
    NO_ERROR_CODE,
    AudioMessage,
    ButtonReply,
    ContactMessage,
    DocumentMessage,
    DomainEvent,
    ImageMessage,
    ListReply,
    LocationMessage,
    MessageDelivered,
    MessageFailed,
    MessageRead,
    MessageSent,
    Reaction,
    StickerMessage,
    TextMessage,
    Unknown,
    VideoMessage,
)
from .models import WebhookChange, WebhookEntry, WebhookEnvelope, WebhookValue
from .normalizer import classify_message, classify_status, classify_webhook
from .parser import parse_webhook
from .receiver import WebhookReceiver
from .signature import (
    SIGNATURE_HEADER,
    SIGNATURE_PREFIX,
    compute_signature,
    verify_signature,
)
from .verification import verify_webhook_challenge

__all__ = [
    "NO_ERROR_CODE",
    "SIGNATURE_HEADER",
    "SIGNATURE_PREFIX",
    "AudioMessage",
    "ButtonReply",
    "ContactMessage",
    "DocumentMessage",
    "DomainEvent",
    "ImageMessage",
    "ListReply",
    "LocationMessage",
    "MessageDelivered",
    "MessageFailed",
    "MessageRead",
    "MessageSent",
    "Reaction",
    "StickerMessage",
    "TextMessage",
    "Unknown",
    "VideoMessage",
    "WebhookChange",
    "WebhookEntry",
    "WebhookEnvelope",
    "WebhookReceiver",
    "WebhookValue",
    "classify_message",
    "classify_status",
    "classify_webhook",
    "compute_signature",
    "parse_webhook",
    "verify_signature",
    "verify_webhook_challenge",
]
