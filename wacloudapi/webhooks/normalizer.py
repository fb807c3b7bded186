"""
Webhook normalizer.

Walks a parsed envelope and emits one domain event per inbound message and
per status update, in entry → change → messages → statuses order. The
walk is total: any item that cannot be mapped becomes ``Unknown`` and the
walk continues.
"""

from collections.abc import Callable, Iterator
from types import MappingProxyType
from typing import Any, NamedTuple

from pydantic import BaseModel, ValidationError

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
from .message_types import (
    ButtonReplyContent,
    DocumentContent,
    InboundMessageHeader,
    InteractiveContent,
    ListReplyContent,
    LocationContent,
    MediaContent,
    ReactionContent,
    StatusUpdate,
    TextContent,
    WebhookErrorDetail,
)
from .models import WebhookEnvelope


class _MessageRoute(NamedTuple):
    """How one inbound ``type`` maps to an event.

    ``content`` is None for types whose event needs no sub-object.
    """

    content: type[BaseModel] | None
    build: Callable[[InboundMessageHeader, Any], DomainEvent]


def _text(msg: InboundMessageHeader, text: TextContent) -> DomainEvent:
    return TextMessage(from_=msg.from_, text=text.body, message_id=msg.id)


def _image(msg: InboundMessageHeader, media: MediaContent) -> DomainEvent:
    return ImageMessage(
        from_=msg.from_, media_id=media.id, message_id=msg.id, caption=media.caption
    )


def _video(msg: InboundMessageHeader, media: MediaContent) -> DomainEvent:
    return VideoMessage(
        from_=msg.from_, media_id=media.id, message_id=msg.id, caption=media.caption
    )


def _audio(msg: InboundMessageHeader, media: MediaContent) -> DomainEvent:
    return AudioMessage(from_=msg.from_, media_id=media.id, message_id=msg.id)


def _document(msg: InboundMessageHeader, doc: DocumentContent) -> DomainEvent:
    return DocumentMessage(
        from_=msg.from_, media_id=doc.id, message_id=msg.id, filename=doc.filename
    )


def _sticker(msg: InboundMessageHeader, media: MediaContent) -> DomainEvent:
    return StickerMessage(from_=msg.from_, media_id=media.id, message_id=msg.id)


def _location(msg: InboundMessageHeader, loc: LocationContent) -> DomainEvent:
    return LocationMessage(
        from_=msg.from_,
        latitude=loc.latitude,
        longitude=loc.longitude,
        message_id=msg.id,
    )


def _contacts(msg: InboundMessageHeader, _: None) -> DomainEvent:
    return ContactMessage(from_=msg.from_, message_id=msg.id)


def _reaction(msg: InboundMessageHeader, reaction: ReactionContent) -> DomainEvent:
    # The event points at the reacted-to message, not the reaction itself
    return Reaction(
        from_=msg.from_, message_id=reaction.message_id, emoji=reaction.emoji
    )


def _interactive(
    msg: InboundMessageHeader, interactive: InteractiveContent
) -> DomainEvent:
    # Only the sub-object named by the inner type is read
    reply_type = interactive.interactive_type
    if reply_type == "button_reply" and interactive.button_reply is not None:
        button = ButtonReplyContent.model_validate(interactive.button_reply)
        return ButtonReply(
            from_=msg.from_,
            button_id=button.id,
            button_title=button.title,
            message_id=msg.id,
        )
    if reply_type == "list_reply" and interactive.list_reply is not None:
        row = ListReplyContent.model_validate(interactive.list_reply)
        return ListReply(
            from_=msg.from_,
            row_id=row.id,
            row_title=row.title,
            message_id=msg.id,
        )
    return Unknown(raw_type=f"interactive.{reply_type}", message_id=msg.id)


MESSAGE_ROUTES: MappingProxyType[str, _MessageRoute] = MappingProxyType(
    {
        "text": _MessageRoute(TextContent, _text),
        "image": _MessageRoute(MediaContent, _image),
        "video": _MessageRoute(MediaContent, _video),
        "audio": _MessageRoute(MediaContent, _audio),
        "document": _MessageRoute(DocumentContent, _document),
        "sticker": _MessageRoute(MediaContent, _sticker),
        "location": _MessageRoute(LocationContent, _location),
        "contacts": _MessageRoute(None, _contacts),
        "reaction": _MessageRoute(ReactionContent, _reaction),
        "interactive": _MessageRoute(InteractiveContent, _interactive),
    }
)

STATUS_EVENTS: MappingProxyType[str, type[BaseModel]] = MappingProxyType(
    {
        "sent": MessageSent,
        "delivered": MessageDelivered,
        "read": MessageRead,
    }
)


def classify_message(raw: Any) -> DomainEvent:
    """Map one raw inbound message to its domain event."""
    try:
        msg = InboundMessageHeader.model_validate(raw)
    except ValidationError:
        return Unknown()

    route = MESSAGE_ROUTES.get(msg.message_type)
    if route is None:
        return Unknown(raw_type=msg.message_type, message_id=msg.id)

    content = None
    if route.content is not None:
        # The sub-object lives under the key named by the type discriminator
        try:
            content = route.content.model_validate(
                (msg.model_extra or {}).get(msg.message_type)
            )
        except ValidationError:
            return Unknown(raw_type=msg.message_type, message_id=msg.id)

    try:
        return route.build(msg, content)
    except ValidationError:
        return Unknown(raw_type=msg.message_type, message_id=msg.id)


def first_error_code(errors: list[Any] | None) -> int:
    """Code of the first error object, or NO_ERROR_CODE when there is none."""
    if not errors:
        return NO_ERROR_CODE
    try:
        return WebhookErrorDetail.model_validate(errors[0]).code
    except ValidationError:
        return NO_ERROR_CODE


def classify_status(raw: Any) -> DomainEvent:
    """Map one raw status update to its domain event."""
    try:
        status = StatusUpdate.model_validate(raw)
    except ValidationError:
        return Unknown()

    if status.status == "failed":
        return MessageFailed(
            message_id=status.id,
            recipient=status.recipient_id,
            error_code=first_error_code(status.errors),
        )

    event_type = STATUS_EVENTS.get(status.status)
    if event_type is None:
        return Unknown(raw_type=status.status, message_id=status.id)
    return event_type(message_id=status.id, recipient=status.recipient_id)


def iter_events(envelope: WebhookEnvelope) -> Iterator[DomainEvent]:
    """Lazily yield the events of an envelope in delivery order."""
    for entry in envelope.entry:
        for change in entry.changes:
            for raw_message in change.value.messages or ():
                yield classify_message(raw_message)
            for raw_status in change.value.statuses or ():
                yield classify_status(raw_status)


def classify_webhook(envelope: WebhookEnvelope) -> list[DomainEvent]:
    """
    Normalize a webhook envelope into an ordered list of domain events.

    Produces exactly one event per message and per status. Never raises
    for a parsed envelope; unmappable items become ``Unknown``.
    """
    return list(iter_events(envelope))
