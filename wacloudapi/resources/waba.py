"""WhatsApp Business Account (WABA) management."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import Field

from wacloudapi.models import GraphModel, Paging, PhoneNumbersResponse, SuccessResponse

from .base import ResourceApi
from .templates import TemplatesResponse
from .webhook_subscriptions import SubscriptionField

if TYPE_CHECKING:
    from wacloudapi.client import WhatsAppClient

DEFAULT_SUBSCRIBED_FIELDS = (
    SubscriptionField.MESSAGES,
    SubscriptionField.MESSAGE_TEMPLATE_STATUS_UPDATE,
)


class WabaDetails(GraphModel):
    id: str
    name: str | None = None
    timezone_id: str | None = None
    message_template_namespace: str | None = None
    account_review_status: str | None = None
    business_verification_status: str | None = None
    primary_funding_id: str | None = None
    purchase_order_number: str | None = None


class SubscribedApp(GraphModel):
    id: str | None = None
    name: str | None = None
    subscribed_fields: list[str] = Field(default_factory=list)


class SubscribedAppsResponse(GraphModel):
    data: list[SubscribedApp] = Field(default_factory=list)


class AssignedUser(GraphModel):
    id: str
    name: str | None = None
    tasks: list[str] = Field(default_factory=list)


class AssignedUsersResponse(GraphModel):
    data: list[AssignedUser] = Field(default_factory=list)
    paging: Paging | None = None


class SystemUser(GraphModel):
    id: str
    name: str | None = None
    role: str | None = None


class SystemUsersResponse(GraphModel):
    data: list[SystemUser] = Field(default_factory=list)
    paging: Paging | None = None


class WabaApi(ResourceApi):
    def __init__(self, client: WhatsAppClient, waba_id: str):
        super().__init__(client)
        self.waba_id = waba_id

    def _edge(self, edge: str) -> str:
        return f"{self.waba_id}/{edge}"

    async def get(self) -> WabaDetails:
        return await self.client.get(self.waba_id, response_model=WabaDetails)

    async def subscribe_fields(self, fields: list[SubscriptionField]) -> SuccessResponse:
        response = await self.client.post(
            self._edge("subscribed_apps"),
            {"subscribed_fields": [SubscriptionField(f).value for f in fields]},
            response_model=SuccessResponse,
        )
        self.logger.info(f"WABA {self.waba_id} subscribed to {len(fields)} fields")
        return response

    async def subscribe_webhooks(self) -> SuccessResponse:
        """Subscribe the app to message and template status webhooks."""
        return await self.subscribe_fields(list(DEFAULT_SUBSCRIBED_FIELDS))

    async def unsubscribe_webhooks(self) -> SuccessResponse:
        return await self.client.delete(
            self._edge("subscribed_apps"), response_model=SuccessResponse
        )

    async def get_subscribed_apps(self) -> SubscribedAppsResponse:
        return await self.client.get(
            self._edge("subscribed_apps"), response_model=SubscribedAppsResponse
        )

    async def get_phone_numbers(self) -> PhoneNumbersResponse:
        return await self.client.get(
            self._edge("phone_numbers"), response_model=PhoneNumbersResponse
        )

    async def get_assigned_users(self, business_id: str | None = None) -> AssignedUsersResponse:
        params = {"business": business_id} if business_id else None
        return await self.client.get(
            self._edge("assigned_users"),
            params=params,
            response_model=AssignedUsersResponse,
        )

    async def get_system_users(self) -> SystemUsersResponse:
        return await self.client.get(
            self._edge("system_users"), response_model=SystemUsersResponse
        )

    async def get_templates(self) -> TemplatesResponse:
        return await self.client.get(
            self._edge("message_templates"), response_model=TemplatesResponse
        )
