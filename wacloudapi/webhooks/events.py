"""
Domain events emitted by the webhook normalizer.

``DomainEvent`` is a closed union discriminated by ``kind``. Events are
frozen; consumers branch on the concrete class or on ``kind``.
"""

from typing import Annotated, Final, Literal

from pydantic import BaseModel, ConfigDict, Field

# MessageFailed.error_code when Meta reported the failure without an error object
NO_ERROR_CODE: Final[int] = 0


class _Event(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class _InboundEvent(_Event):
    from_: str = Field(..., alias="from", description="Sender wa_id")
    message_id: str


# ---------------------------------------------------------------------------
# Inbound messages
# ---------------------------------------------------------------------------


class TextMessage(_InboundEvent):
    kind: Literal["text"] = "text"
    text: str


class ImageMessage(_InboundEvent):
    kind: Literal["image"] = "image"
    media_id: str
    caption: str | None = None


class VideoMessage(_InboundEvent):
    kind: Literal["video"] = "video"
    media_id: str
    caption: str | None = None


class AudioMessage(_InboundEvent):
    kind: Literal["audio"] = "audio"
    media_id: str


class DocumentMessage(_InboundEvent):
    kind: Literal["document"] = "document"
    media_id: str
    filename: str | None = None


class StickerMessage(_InboundEvent):
    kind: Literal["sticker"] = "sticker"
    media_id: str


class LocationMessage(_InboundEvent):
    kind: Literal["location"] = "location"
    latitude: float
    longitude: float


class ContactMessage(_InboundEvent):
    kind: Literal["contacts"] = "contacts"


class Reaction(_Event):
    """A reaction to a message; ``message_id`` is the message reacted to."""

    kind: Literal["reaction"] = "reaction"
    from_: str = Field(..., alias="from")
    message_id: str
    emoji: str = Field("", description="Empty string when the reaction is removed")


class ButtonReply(_InboundEvent):
    kind: Literal["button_reply"] = "button_reply"
    button_id: str
    button_title: str


class ListReply(_InboundEvent):
    kind: Literal["list_reply"] = "list_reply"
    row_id: str
    row_title: str


# ---------------------------------------------------------------------------
# Outbound message status
# ---------------------------------------------------------------------------


class _StatusEvent(_Event):
    message_id: str
    recipient: str


class MessageSent(_StatusEvent):
    kind: Literal["sent"] = "sent"


class MessageDelivered(_StatusEvent):
    kind: Literal["delivered"] = "delivered"


class MessageRead(_StatusEvent):
    kind: Literal["read"] = "read"


class MessageFailed(_StatusEvent):
    kind: Literal["failed"] = "failed"
    error_code: int = NO_ERROR_CODE

    @property
    def has_error_code(self) -> bool:
        return self.error_code != NO_ERROR_CODE


class Unknown(_Event):
    """Anything the normalizer could not map to a more specific event."""

    kind: Literal["unknown"] = "unknown"
    raw_type: str | None = Field(None, description="Message type or status value")
    message_id: str | None = None


DomainEvent = Annotated[
    TextMessage
    | ImageMessage
    | VideoMessage
    | AudioMessage
    | DocumentMessage
    | StickerMessage
    | LocationMessage
    | ContactMessage
    | Reaction
    | ButtonReply
    | ListReply
    | MessageSent
    | MessageDelivered
    | MessageRead
    | MessageFailed
    | Unknown,
    Field(discriminator="kind"),
]
