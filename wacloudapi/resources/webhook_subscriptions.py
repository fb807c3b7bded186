"""
Webhook subscriptions of a Meta app: /{app-id}/subscriptions.

These calls need an app access token (``{app-id}|{app-secret}``), not the
system user token used for messaging.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from pydantic import Field

from wacloudapi.models import GraphModel, SuccessResponse

from .base import ResourceApi

if TYPE_CHECKING:
    from wacloudapi.client import WhatsAppClient

WHATSAPP_BUSINESS_ACCOUNT = "whatsapp_business_account"


class SubscriptionField(str, Enum):
    MESSAGES = "messages"
    MESSAGE_TEMPLATE_STATUS_UPDATE = "message_template_status_update"
    MESSAGE_TEMPLATE_QUALITY_UPDATE = "message_template_quality_update"
    ACCOUNT_ALERTS = "account_alerts"
    ACCOUNT_REVIEW_UPDATE = "account_review_update"
    ACCOUNT_UPDATE = "account_update"
    BUSINESS_CAPABILITY_UPDATE = "business_capability_update"
    PHONE_NUMBER_NAME_UPDATE = "phone_number_name_update"
    PHONE_NUMBER_QUALITY_UPDATE = "phone_number_quality_update"
    SECURITY = "security"
    FLOWS = "flows"


class SubscribedField(GraphModel):
    name: str
    version: str | None = None


class WebhookSubscription(GraphModel):
    object: str
    callback_url: str
    active: bool
    fields: list[SubscribedField] = Field(default_factory=list)


class WebhookSubscriptionsResponse(GraphModel):
    data: list[WebhookSubscription] = Field(default_factory=list)


class WebhookSubscriptionsApi(ResourceApi):
    def __init__(self, client: WhatsAppClient, app_id: str):
        super().__init__(client)
        self.app_id = app_id

    @property
    def _path(self) -> str:
        return f"{self.app_id}/subscriptions"

    async def get(self) -> WebhookSubscriptionsResponse:
        return await self.client.get(
            self._path, response_model=WebhookSubscriptionsResponse
        )

    async def subscribe(
        self,
        callback_url: str,
        verify_token: str,
        fields: list[SubscriptionField],
    ) -> SuccessResponse:
        """Point the app's webhook at ``callback_url``.

        Meta immediately sends the verification GET to the callback, so the
        endpoint must already answer with ``verify_webhook_challenge``.
        """
        response = await self.client.post(
            self._path,
            {
                "object": WHATSAPP_BUSINESS_ACCOUNT,
                "callback_url": callback_url,
                "verify_token": verify_token,
                "fields": ",".join(SubscriptionField(f).value for f in fields),
            },
            response_model=SuccessResponse,
        )
        self.logger.info(f"App {self.app_id} subscribed {callback_url}")
        return response

    async def unsubscribe(self, object_type: str = WHATSAPP_BUSINESS_ACCOUNT) -> SuccessResponse:
        return await self.client.delete(
            self._path, params={"object": object_type}, response_model=SuccessResponse
        )

    async def unsubscribe_all(self) -> SuccessResponse:
        return await self.client.delete(self._path, response_model=SuccessResponse)
