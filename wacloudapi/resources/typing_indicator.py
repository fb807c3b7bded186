"""Typing indicator: shown to the user until the next message or ~25 seconds."""

from wacloudapi.models import SuccessResponse

from .base import MESSAGING_PRODUCT, ResourceApi


class TypingApi(ResourceApi):
    async def show(self, to: str) -> SuccessResponse:
        payload = {
            "messaging_product": MESSAGING_PRODUCT,
            "recipient_type": "individual",
            "to": to,
            "status": "typing",
        }
        return await self.client.post(
            self.client.phone_path("messages"),
            payload,
            response_model=SuccessResponse,
        )
