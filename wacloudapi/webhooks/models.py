"""
Top-level webhook container models.

The envelope is strict about its skeleton (``object``, ``entry[].id``,
``entry[].changes[].field/value``) and lenient about everything inside a
change value. Messages and statuses are kept as raw items and parsed one by
one by the normalizer; metadata, contacts and errors are parsed on demand.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .events import DomainEvent
from .message_types import WebhookContact, WebhookErrorDetail, WebhookMetadata


class WebhookValue(BaseModel):
    """
    Payload of a single change.

    Usually only one of ``messages`` / ``statuses`` is present, but both,
    neither, or unrelated keys (template status updates, account alerts)
    are all accepted.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    messaging_product: Any = Field(
        None, description="'whatsapp' for WhatsApp Business webhooks"
    )
    metadata: Any = Field(None, description="Business phone number metadata")
    contacts: Any = Field(None, description="Sender profiles for incoming messages")
    messages: list[Any] | None = Field(
        None, description="Incoming messages, parsed individually"
    )
    statuses: list[Any] | None = Field(
        None, description="Outgoing message statuses, parsed individually"
    )
    errors: Any = Field(None, description="System, app or account level errors")

    def parsed_metadata(self) -> WebhookMetadata | None:
        """Metadata if it matches the expected shape, else None."""
        if self.metadata is None:
            return None
        try:
            return WebhookMetadata.model_validate(self.metadata)
        except ValidationError:
            return None

    @property
    def phone_number_id(self) -> str | None:
        metadata = self.parsed_metadata()
        return metadata.phone_number_id if metadata else None

    def parsed_contacts(self) -> list[WebhookContact]:
        """Contacts that match the expected shape; malformed ones are skipped."""
        return _parse_items(WebhookContact, self.contacts)

    def parsed_errors(self) -> list[WebhookErrorDetail]:
        """Value-level errors that match the expected shape."""
        return _parse_items(WebhookErrorDetail, self.errors)


class WebhookChange(BaseModel):
    """What changed; ``field`` is 'messages' for message and status traffic."""

    model_config = ConfigDict(extra="allow", frozen=True)

    field: str = Field(..., description="Subscribed webhook field")
    value: WebhookValue = Field(..., description="The change payload")


class WebhookEntry(BaseModel):
    """Changes for one WhatsApp Business Account."""

    model_config = ConfigDict(extra="allow", frozen=True)

    id: str = Field(..., description="WhatsApp Business Account id")
    changes: list[WebhookChange] = Field(default_factory=list)


class WebhookEnvelope(BaseModel):
    """A whole webhook delivery as posted by Meta."""

    model_config = ConfigDict(extra="allow", frozen=True)

    object: str = Field(..., description="'whatsapp_business_account'")
    entry: list[WebhookEntry] = Field(..., description="Entries in delivery order")

    def events(self) -> list[DomainEvent]:
        """Normalize the envelope into its ordered list of domain events."""
        # Deferred: the normalizer imports this module
        from .normalizer import classify_webhook

        return classify_webhook(self)


def _parse_items(model: type[BaseModel], items: Any) -> list:
    if not isinstance(items, list):
        return []
    parsed = []
    for item in items:
        try:
            parsed.append(model.model_validate(item))
        except ValidationError:
            continue
    return parsed
