"""
Outbound messages: POST /{phone-number-id}/messages.
"""

from typing import Literal

from pydantic import Field

from wacloudapi.models import MessageResponse, SuccessResponse

from .base import MESSAGING_PRODUCT, RequestModel, ResourceApi

# ---------------------------------------------------------------------------
# Request building blocks
# ---------------------------------------------------------------------------


class MediaObject(RequestModel):
    """Media reference: either an uploaded media ``id`` or a public ``link``."""

    id: str | None = None
    link: str | None = None
    caption: str | None = None
    filename: str | None = None

    @classmethod
    def from_id(cls, media_id: str, **kwargs) -> "MediaObject":
        return cls(id=media_id, **kwargs)

    @classmethod
    def from_url(cls, url: str, **kwargs) -> "MediaObject":
        return cls(link=url, **kwargs)


class ContactName(RequestModel):
    formatted_name: str
    first_name: str | None = None
    last_name: str | None = None
    middle_name: str | None = None
    suffix: str | None = None
    prefix: str | None = None


class ContactPhone(RequestModel):
    phone: str
    phone_type: str | None = Field(None, alias="type")
    wa_id: str | None = None


class ContactEmail(RequestModel):
    email: str
    email_type: str | None = Field(None, alias="type")


class ContactUrl(RequestModel):
    url: str
    url_type: str | None = Field(None, alias="type")


class ContactAddress(RequestModel):
    street: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    country: str | None = None
    country_code: str | None = None
    address_type: str | None = Field(None, alias="type")


class ContactOrg(RequestModel):
    company: str | None = None
    department: str | None = None
    title: str | None = None


class Contact(RequestModel):
    """A contact card to share."""

    name: ContactName
    phones: list[ContactPhone] | None = None
    emails: list[ContactEmail] | None = None
    urls: list[ContactUrl] | None = None
    addresses: list[ContactAddress] | None = None
    org: ContactOrg | None = None
    birthday: str | None = Field(None, description="YYYY-MM-DD")

    @classmethod
    def simple(cls, formatted_name: str, phone: str) -> "Contact":
        return cls(
            name=ContactName(formatted_name=formatted_name),
            phones=[ContactPhone(phone=phone)],
        )


class Currency(RequestModel):
    fallback_value: str
    code: str
    amount_1000: int


class DateTime(RequestModel):
    fallback_value: str


class TemplateParameter(RequestModel):
    """A value substituted into a template placeholder."""

    param_type: str = Field(..., alias="type")
    text: str | None = None
    payload: str | None = None
    currency: Currency | None = None
    date_time: DateTime | None = None
    image: MediaObject | None = None
    document: MediaObject | None = None
    video: MediaObject | None = None

    @classmethod
    def text_value(cls, text: str) -> "TemplateParameter":
        return cls(param_type="text", text=text)

    @classmethod
    def image_url(cls, url: str) -> "TemplateParameter":
        return cls(param_type="image", image=MediaObject(link=url))

    @classmethod
    def document_url(cls, url: str, filename: str | None = None) -> "TemplateParameter":
        return cls(param_type="document", document=MediaObject(link=url, filename=filename))

    @classmethod
    def video_url(cls, url: str) -> "TemplateParameter":
        return cls(param_type="video", video=MediaObject(link=url))


class TemplateComponent(RequestModel):
    component_type: str = Field(..., alias="type")
    sub_type: str | None = None
    index: str | None = None
    parameters: list[TemplateParameter] | None = None

    @classmethod
    def header(cls, parameters: list[TemplateParameter]) -> "TemplateComponent":
        return cls(component_type="header", parameters=parameters)

    @classmethod
    def body(cls, parameters: list[TemplateParameter]) -> "TemplateComponent":
        return cls(component_type="body", parameters=parameters)

    @classmethod
    def button(
        cls, sub_type: str, index: int, parameters: list[TemplateParameter]
    ) -> "TemplateComponent":
        return cls(
            component_type="button",
            sub_type=sub_type,
            index=str(index),
            parameters=parameters,
        )


class ReplyButton(RequestModel):
    id: str = Field(..., max_length=256)
    title: str = Field(..., max_length=20)


class Button(RequestModel):
    """Reply button of an interactive button message."""

    button_type: Literal["reply"] = Field("reply", alias="type")
    reply: ReplyButton

    @classmethod
    def reply_button(cls, button_id: str, title: str) -> "Button":
        return cls(reply=ReplyButton(id=button_id, title=title))


class ListRow(RequestModel):
    id: str = Field(..., max_length=200)
    title: str = Field(..., max_length=24)
    description: str | None = Field(None, max_length=72)


class ListSection(RequestModel):
    title: str = Field(..., max_length=24)
    rows: list[ListRow]


def _interactive(
    interactive_type: str,
    body_text: str,
    action: dict,
    header: str | None = None,
    footer: str | None = None,
) -> dict:
    interactive: dict = {"type": interactive_type, "body": {"text": body_text}}
    if header:
        interactive["header"] = {"type": "text", "text": header}
    if footer:
        interactive["footer"] = {"text": footer}
    interactive["action"] = action
    return interactive


# ---------------------------------------------------------------------------
# API
# ---------------------------------------------------------------------------


class MessagesApi(ResourceApi):
    """Send messages from the configured business phone number."""

    async def send_text(
        self, to: str, text: str, preview_url: bool = False
    ) -> MessageResponse:
        return await self._send_message(
            to, "text", {"preview_url": preview_url, "body": text}
        )

    async def send_text_with_preview(self, to: str, text: str) -> MessageResponse:
        return await self.send_text(to, text, preview_url=True)

    async def send_reply(
        self, to: str, text: str, message_id: str
    ) -> MessageResponse:
        """Reply to ``message_id`` (quoted in the chat)."""
        return await self._send_message(
            to,
            "text",
            {"preview_url": False, "body": text},
            context={"message_id": message_id},
        )

    async def send_reaction(
        self, to: str, message_id: str, emoji: str
    ) -> MessageResponse:
        return await self._send_message(
            to, "reaction", {"message_id": message_id, "emoji": emoji}
        )

    async def remove_reaction(self, to: str, message_id: str) -> MessageResponse:
        """An empty emoji removes a previous reaction."""
        return await self.send_reaction(to, message_id, "")

    async def send_media(
        self, to: str, media_type: str, media: MediaObject
    ) -> MessageResponse:
        if not (media.id or media.link):
            raise ValueError("media needs either an id or a link")
        return await self._send_message(to, media_type, media)

    async def send_image_url(
        self, to: str, url: str, caption: str | None = None
    ) -> MessageResponse:
        return await self.send_media(to, "image", MediaObject(link=url, caption=caption))

    async def send_image_id(
        self, to: str, media_id: str, caption: str | None = None
    ) -> MessageResponse:
        return await self.send_media(to, "image", MediaObject(id=media_id, caption=caption))

    async def send_video_url(
        self, to: str, url: str, caption: str | None = None
    ) -> MessageResponse:
        return await self.send_media(to, "video", MediaObject(link=url, caption=caption))

    async def send_video_id(
        self, to: str, media_id: str, caption: str | None = None
    ) -> MessageResponse:
        return await self.send_media(to, "video", MediaObject(id=media_id, caption=caption))

    async def send_audio_url(self, to: str, url: str) -> MessageResponse:
        return await self.send_media(to, "audio", MediaObject(link=url))

    async def send_audio_id(self, to: str, media_id: str) -> MessageResponse:
        return await self.send_media(to, "audio", MediaObject(id=media_id))

    async def send_document_url(
        self,
        to: str,
        url: str,
        filename: str | None = None,
        caption: str | None = None,
    ) -> MessageResponse:
        return await self.send_media(
            to, "document", MediaObject(link=url, filename=filename, caption=caption)
        )

    async def send_document_id(
        self,
        to: str,
        media_id: str,
        filename: str | None = None,
        caption: str | None = None,
    ) -> MessageResponse:
        return await self.send_media(
            to, "document", MediaObject(id=media_id, filename=filename, caption=caption)
        )

    async def send_sticker_url(self, to: str, url: str) -> MessageResponse:
        return await self.send_media(to, "sticker", MediaObject(link=url))

    async def send_sticker_id(self, to: str, media_id: str) -> MessageResponse:
        return await self.send_media(to, "sticker", MediaObject(id=media_id))

    async def send_location(
        self,
        to: str,
        latitude: float,
        longitude: float,
        name: str | None = None,
        address: str | None = None,
    ) -> MessageResponse:
        location = {"latitude": latitude, "longitude": longitude}
        if name is not None:
            location["name"] = name
        if address is not None:
            location["address"] = address
        return await self._send_message(to, "location", location)

    async def send_contacts(self, to: str, contacts: list[Contact]) -> MessageResponse:
        if not contacts:
            raise ValueError("at least one contact is required")
        return await self._send_message(to, "contacts", contacts)

    async def send_template(
        self,
        to: str,
        template_name: str,
        language_code: str,
        components: list[TemplateComponent] | None = None,
    ) -> MessageResponse:
        template: dict = {"name": template_name, "language": {"code": language_code}}
        if components:
            template["components"] = [c.to_payload() for c in components]
        return await self._send_message(to, "template", template)

    async def send_buttons(
        self,
        to: str,
        body_text: str,
        buttons: list[Button],
        header: str | None = None,
        footer: str | None = None,
    ) -> MessageResponse:
        """Send up to three reply buttons."""
        if not 1 <= len(buttons) <= 3:
            raise ValueError("interactive button messages take 1 to 3 buttons")
        action = {"buttons": [b.to_payload() for b in buttons]}
        return await self._send_message(
            to, "interactive", _interactive("button", body_text, action, header, footer)
        )

    async def send_list(
        self,
        to: str,
        body_text: str,
        button_text: str,
        sections: list[ListSection],
        header: str | None = None,
        footer: str | None = None,
    ) -> MessageResponse:
        """Send a list message; rows across all sections are capped at ten."""
        if sum(len(section.rows) for section in sections) > 10:
            raise ValueError("list messages take at most 10 rows")
        action = {
            "button": button_text,
            "sections": [s.to_payload() for s in sections],
        }
        return await self._send_message(
            to, "interactive", _interactive("list", body_text, action, header, footer)
        )

    async def mark_as_read(self, message_id: str) -> SuccessResponse:
        payload = {
            "messaging_product": MESSAGING_PRODUCT,
            "status": "read",
            "message_id": message_id,
        }
        response = await self.client.post(
            self.client.phone_path("messages"),
            payload,
            response_model=SuccessResponse,
        )
        self.logger.debug(f"Marked {message_id} as read")
        return response
