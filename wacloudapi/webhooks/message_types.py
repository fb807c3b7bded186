"""
Typed models for the items carried inside a webhook change value.

Each inbound message and status is validated individually from its raw
dict, so one malformed item never invalidates the rest of the delivery.
Unknown keys are tolerated everywhere; Meta adds fields without notice.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _WireModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)


# ---------------------------------------------------------------------------
# Change value building blocks
# ---------------------------------------------------------------------------


class WebhookMetadata(_WireModel):
    """Business phone number that received the event."""

    display_phone_number: str | None = Field(
        None, description="Business phone number as displayed to users"
    )
    phone_number_id: str | None = Field(
        None, description="Phone number id used in API calls"
    )


class ContactProfile(_WireModel):
    name: str | None = None


class WebhookContact(_WireModel):
    """Sender of an inbound message."""

    wa_id: str = Field(..., description="WhatsApp id of the user")
    profile: ContactProfile | None = None


class WebhookErrorData(_WireModel):
    details: str | None = None


class WebhookErrorDetail(_WireModel):
    """Error object attached to a message, status or change value."""

    code: int
    title: str | None = None
    message: str | None = None
    href: str | None = None
    error_data: WebhookErrorData | None = None


# ---------------------------------------------------------------------------
# Inbound message sub-objects
# ---------------------------------------------------------------------------


class TextContent(_WireModel):
    body: str


class MediaContent(_WireModel):
    """Image, video, audio or sticker payload."""

    id: str = Field(..., description="Media id, usable with the media API")
    mime_type: str | None = None
    sha256: str | None = None
    caption: str | None = None
    animated: bool | None = None
    voice: bool | None = None


class DocumentContent(MediaContent):
    filename: str | None = None


class LocationContent(_WireModel):
    latitude: float
    longitude: float
    name: str | None = None
    address: str | None = None
    url: str | None = None


class ContactName(_WireModel):
    formatted_name: str
    first_name: str | None = None
    last_name: str | None = None


class ContactPhone(_WireModel):
    phone: str
    phone_type: str | None = Field(None, alias="type")
    wa_id: str | None = None


class ContactCard(_WireModel):
    """One shared contact card."""

    name: ContactName
    phones: list[ContactPhone] | None = None


class ReactionContent(_WireModel):
    message_id: str = Field(..., description="Id of the message reacted to")
    emoji: str = Field("", description="Empty when the reaction is removed")


class ButtonReplyContent(_WireModel):
    id: str
    title: str


class ListReplyContent(_WireModel):
    id: str
    title: str
    description: str | None = None


class InteractiveContent(_WireModel):
    """Reply to an interactive message; ``type`` names the populated field."""

    interactive_type: str = Field(..., alias="type")
    button_reply: Any = Field(None, description="Parsed only when type is button_reply")
    list_reply: Any = Field(None, description="Parsed only when type is list_reply")
    nfm_reply: Any = Field(None, description="Flow completion payload")


class ButtonContent(_WireModel):
    """Quick-reply button tapped on a template message."""

    text: str
    payload: str | None = None


class MessageContext(_WireModel):
    """Reply / forward context of an inbound message."""

    message_id: str | None = Field(None, alias="id")
    from_: str | None = Field(None, alias="from")
    forwarded: bool | None = None
    frequently_forwarded: bool | None = None
    referred_product: dict[str, Any] | None = None


class ReferralInfo(_WireModel):
    """Click-to-WhatsApp ad referral."""

    source_url: str | None = None
    source_type: str | None = None
    source_id: str | None = None
    headline: str | None = None
    body: str | None = None
    media_type: str | None = None
    image_url: str | None = None
    video_url: str | None = None
    thumbnail_url: str | None = None


class ProductItem(_WireModel):
    product_retailer_id: str
    quantity: int
    item_price: float | str
    currency: str


class OrderContent(_WireModel):
    catalog_id: str
    product_items: list[ProductItem]
    text: str | None = None


class SystemContent(_WireModel):
    body: str | None = None
    identity: str | None = None
    new_wa_id: str | None = None
    wa_id: str | None = None
    system_type: str | None = Field(None, alias="type")
    customer: str | None = None


class InboundMessageHeader(_WireModel):
    """Fields shared by every inbound message, regardless of type."""

    from_: str = Field(..., alias="from", description="Sender wa_id")
    id: str = Field(..., description="wamid of the inbound message")
    timestamp: str | int | None = None
    message_type: str = Field(..., alias="type")
    context: MessageContext | None = None


# ---------------------------------------------------------------------------
# Outbound message status
# ---------------------------------------------------------------------------


class ConversationOrigin(_WireModel):
    origin_type: str | None = Field(None, alias="type")


class ConversationInfo(_WireModel):
    id: str | None = None
    origin: ConversationOrigin | None = None
    expiration_timestamp: str | int | None = None


class PricingInfo(_WireModel):
    billable: bool | None = None
    pricing_model: str | None = None
    category: str | None = None


class StatusUpdate(_WireModel):
    """Delivery status of a message the business sent."""

    id: str = Field(..., description="wamid of the outbound message")
    recipient_id: str
    status: str
    timestamp: str | int | None = None
    conversation: ConversationInfo | None = None
    pricing: PricingInfo | None = None
    errors: list[Any] | None = Field(
        None, description="Raw error objects; the first one explains a failure"
    )
    biz_opaque_callback_data: str | None = None
