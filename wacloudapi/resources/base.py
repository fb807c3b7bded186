"""Shared plumbing for resource APIs."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict

from wacloudapi.core.logging import get_logger
from wacloudapi.models import MessageResponse

if TYPE_CHECKING:
    from wacloudapi.client import WhatsAppClient

MESSAGING_PRODUCT = "whatsapp"


class RequestModel(BaseModel):
    """Base for request bodies; ``None`` fields are never sent."""

    model_config = ConfigDict(populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True, by_alias=True, mode="json")


def dump(value: Any) -> Any:
    """Serialize request models (or lists of them) into plain JSON values."""
    if isinstance(value, RequestModel):
        return value.to_payload()
    if isinstance(value, list):
        return [dump(item) for item in value]
    return value


class ResourceApi:
    """Base class: holds the client and a module logger."""

    def __init__(self, client: WhatsAppClient):
        self.client = client
        self.logger = get_logger(type(self).__module__)

    async def _send_message(
        self, to: str, message_type: str, content: Any, **extra: Any
    ) -> MessageResponse:
        """POST a message envelope to ``{phone_number_id}/messages``."""
        payload: dict[str, Any] = {
            "messaging_product": MESSAGING_PRODUCT,
            "recipient_type": "individual",
            "to": to,
            "type": message_type,
            message_type: dump(content),
        }
        payload.update({k: dump(v) for k, v in extra.items() if v is not None})

        response = await self.client.post(
            self.client.phone_path("messages"),
            payload,
            response_model=MessageResponse,
        )
        self.logger.info(f"{message_type} message sent to {to}, id: {response.message_id}")
        return response
