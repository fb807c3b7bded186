"""HTTP transport for the Graph API."""

from .whatsapp_client import (
    DEFAULT_TIMEOUT,
    WhatsAppClient,
    WhatsAppFormDataBuilder,
    WhatsAppUrlBuilder,
)

__all__ = [
    "DEFAULT_TIMEOUT",
    "WhatsAppClient",
    "WhatsAppFormDataBuilder",
    "WhatsAppUrlBuilder",
]
