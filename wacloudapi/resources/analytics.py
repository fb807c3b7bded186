"""Conversation, template and phone number analytics of a WABA."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

from pydantic import Field

from wacloudapi.models import GraphModel

from .base import ResourceApi

if TYPE_CHECKING:
    from wacloudapi.client import WhatsAppClient


class Granularity(str, Enum):
    HALF_HOUR = "HALF_HOUR"
    DAILY = "DAILY"
    MONTHLY = "MONTHLY"


class ConversationDataPoint(GraphModel):
    start: int
    end: int
    conversation: int = 0
    cost: float | None = None
    phone_number: str | None = None
    conversation_direction: str | None = None
    conversation_type: str | None = None
    conversation_category: str | None = None


class ConversationAnalytics(GraphModel):
    data: list[ConversationDataPoint] = Field(default_factory=list)


class ConversationAnalyticsResponse(GraphModel):
    conversation_analytics: ConversationAnalytics


class TemplateDataPoint(GraphModel):
    start: int
    end: int
    template_id: str
    sent: int = 0
    delivered: int = 0
    read: int = 0
    clicked: int = 0


class TemplateAnalytics(GraphModel):
    data: list[TemplateDataPoint] = Field(default_factory=list)


class TemplateAnalyticsResponse(GraphModel):
    template_analytics: TemplateAnalytics


class PhoneNumberDataPoint(GraphModel):
    start: int
    end: int
    sent: int = 0
    delivered: int = 0


class PhoneNumberAnalytics(GraphModel):
    phone_number: str | None = None
    data: list[PhoneNumberDataPoint] = Field(default_factory=list)


class PhoneNumberAnalyticsResponse(GraphModel):
    analytics: PhoneNumberAnalytics


def _timestamp(value: int | datetime) -> str:
    if isinstance(value, datetime):
        return str(int(value.timestamp()))
    return str(value)


class AnalyticsApi(ResourceApi):
    def __init__(self, client: WhatsAppClient, waba_id: str):
        super().__init__(client)
        self.waba_id = waba_id

    def _params(
        self,
        field: str,
        start: int | datetime,
        end: int | datetime,
        granularity: Granularity,
    ) -> dict[str, str]:
        return {
            "start": _timestamp(start),
            "end": _timestamp(end),
            "granularity": Granularity(granularity).value,
            "fields": field,
        }

    async def get_conversation_analytics(
        self,
        start: int | datetime,
        end: int | datetime,
        granularity: Granularity = Granularity.DAILY,
    ) -> ConversationAnalyticsResponse:
        return await self.client.get(
            self.waba_id,
            params=self._params("conversation_analytics", start, end, granularity),
            response_model=ConversationAnalyticsResponse,
        )

    async def get_template_analytics(
        self,
        start: int | datetime,
        end: int | datetime,
        granularity: Granularity = Granularity.DAILY,
        template_ids: list[str] | None = None,
    ) -> TemplateAnalyticsResponse:
        params = self._params("template_analytics", start, end, granularity)
        if template_ids:
            params["template_ids"] = ",".join(template_ids)
        return await self.client.get(
            self.waba_id, params=params, response_model=TemplateAnalyticsResponse
        )

    async def get_phone_number_analytics(
        self,
        start: int | datetime,
        end: int | datetime,
        granularity: Granularity = Granularity.DAILY,
        phone_numbers: list[str] | None = None,
    ) -> PhoneNumberAnalyticsResponse:
        params = self._params("analytics", start, end, granularity)
        if phone_numbers:
            params["phone_numbers"] = ",".join(phone_numbers)
        return await self.client.get(
            self.waba_id, params=params, response_model=PhoneNumberAnalyticsResponse
        )
