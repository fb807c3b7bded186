"""
Webhook receiver: authenticate, parse and normalize one delivery.

Framework-agnostic; a web handler passes the raw body and the signature
header and gets back domain events or an exception.
"""

from wacloudapi.core.config import Settings
from wacloudapi.core.errors import InvalidSignatureError
from wacloudapi.core.logging import (
    ContextLogger,
    clear_request_context,
    get_logger,
    set_request_context,
)

from .events import DomainEvent, Unknown
from .models import WebhookEnvelope
from .normalizer import classify_webhook
from .parser import parse_webhook
from .signature import verify_signature
from .verification import verify_webhook_challenge


class WebhookReceiver:
    """Entry point for webhook deliveries of one Meta app."""

    def __init__(
        self,
        app_secret: bytes | str,
        verify_token: str | None = None,
        logger: ContextLogger | None = None,
    ):
        if not app_secret:
            raise ValueError("app_secret is required to authenticate webhooks")
        self._app_secret = app_secret
        self._verify_token = verify_token
        self.logger = logger or get_logger(__name__)

    @classmethod
    def from_settings(cls, settings: Settings) -> "WebhookReceiver":
        settings.validate_webhook_credentials()
        return cls(settings.app_secret, verify_token=settings.webhook_verify_token)

    def verify_challenge(
        self,
        hub_mode: str | None,
        hub_verify_token: str | None,
        hub_challenge: str | None,
    ) -> str:
        """Answer the subscription verification GET request."""
        if self._verify_token is None:
            raise ValueError("verify_token was not configured for this receiver")
        challenge = verify_webhook_challenge(
            hub_mode, hub_verify_token, hub_challenge, self._verify_token
        )
        self.logger.info("Webhook subscription verified")
        return challenge

    def authenticate(self, raw_body: bytes, signature_header: str | None) -> None:
        """Raise InvalidSignatureError unless the body carries a valid signature."""
        if not verify_signature(raw_body, signature_header, self._app_secret):
            self.logger.warning(
                f"Rejected webhook with invalid signature ({len(raw_body)} bytes)"
            )
            raise InvalidSignatureError("Webhook signature verification failed")

    def receive(
        self, raw_body: bytes, signature_header: str | None
    ) -> list[DomainEvent]:
        """
        Process one webhook delivery.

        Raises:
            InvalidSignatureError: signature missing or wrong
            WebhookParseError: body is not a webhook envelope
        """
        # A worker thread reuses its context between deliveries
        clear_request_context()
        self.authenticate(raw_body, signature_header)
        envelope = parse_webhook(raw_body)
        self._bind_context(envelope)

        events = classify_webhook(envelope)
        unknown = sum(1 for event in events if isinstance(event, Unknown))
        self.logger.info(
            f"Webhook processed: {len(events)} events ({unknown} unknown)"
        )
        if unknown:
            self.logger.debug(
                f"Unknown events: {[e.raw_type for e in events if isinstance(e, Unknown)]}"
            )
        return events

    @staticmethod
    def _bind_context(envelope: WebhookEnvelope) -> None:
        for entry in envelope.entry:
            for change in entry.changes:
                phone_number_id = change.value.phone_number_id
                if phone_number_id:
                    contacts = change.value.parsed_contacts()
                    set_request_context(
                        tenant_id=phone_number_id,
                        user_id=contacts[0].wa_id if contacts else None,
                    )
                    return
