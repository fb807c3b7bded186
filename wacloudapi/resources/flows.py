"""
WhatsApp Flows: sending flow messages and managing flow definitions.
"""

import json
from enum import Enum
from typing import Any

from pydantic import Field

from wacloudapi.models import GraphModel, MessageResponse, Paging, SuccessResponse

from .base import ResourceApi

FLOW_MESSAGE_VERSION = "3"


class FlowAction(str, Enum):
    NAVIGATE = "navigate"
    DATA_EXCHANGE = "data_exchange"


class FlowCategory(str, Enum):
    SIGN_UP = "SIGN_UP"
    SIGN_IN = "SIGN_IN"
    APPOINTMENT_BOOKING = "APPOINTMENT_BOOKING"
    LEAD_GENERATION = "LEAD_GENERATION"
    CONTACT_US = "CONTACT_US"
    CUSTOMER_SUPPORT = "CUSTOMER_SUPPORT"
    SURVEY = "SURVEY"
    OTHER = "OTHER"


class FlowValidationError(GraphModel):
    error: str | None = None
    error_type: str | None = None
    message: str | None = None
    line_start: int | None = None
    line_end: int | None = None


class Flow(GraphModel):
    id: str
    name: str | None = None
    status: str | None = None
    categories: list[str] = Field(default_factory=list)
    validation_errors: list[FlowValidationError] = Field(default_factory=list)


class FlowsListResponse(GraphModel):
    data: list[Flow] = Field(default_factory=list)
    paging: Paging | None = None


class CreateFlowResponse(GraphModel):
    id: str


class UpdateFlowResponse(GraphModel):
    success: bool
    validation_errors: list[FlowValidationError] = Field(default_factory=list)


class FlowPreview(GraphModel):
    preview_url: str
    expires_at: str | None = None


class FlowPreviewResponse(GraphModel):
    id: str | None = None
    preview: FlowPreview


class FlowsApi(ResourceApi):
    async def send_flow(
        self,
        to: str,
        flow_id: str,
        flow_token: str,
        flow_cta: str,
        body_text: str,
        screen: str | None = None,
        data: dict[str, Any] | None = None,
        flow_action: FlowAction = FlowAction.NAVIGATE,
        header: str | None = None,
        footer: str | None = None,
    ) -> MessageResponse:
        """Send an interactive message that opens a flow."""
        parameters: dict[str, Any] = {
            "flow_message_version": FLOW_MESSAGE_VERSION,
            "flow_token": flow_token,
            "flow_id": flow_id,
            "flow_cta": flow_cta,
            "flow_action": FlowAction(flow_action).value,
        }
        if screen:
            action_payload: dict[str, Any] = {"screen": screen}
            if data:
                action_payload["data"] = data
            parameters["flow_action_payload"] = action_payload

        interactive: dict[str, Any] = {
            "type": "flow",
            "body": {"text": body_text},
            "action": {"name": "flow", "parameters": parameters},
        }
        if header:
            interactive["header"] = {"type": "text", "text": header}
        if footer:
            interactive["footer"] = {"text": footer}
        return await self._send_message(to, "interactive", interactive)

    async def list_flows(self, waba_id: str) -> FlowsListResponse:
        return await self.client.get(f"{waba_id}/flows", response_model=FlowsListResponse)

    async def get_flow(self, flow_id: str) -> Flow:
        return await self.client.get(
            flow_id,
            params={"fields": "id,name,status,categories,validation_errors"},
            response_model=Flow,
        )

    async def create_flow(
        self, waba_id: str, name: str, categories: list[FlowCategory]
    ) -> CreateFlowResponse:
        response = await self.client.post(
            f"{waba_id}/flows",
            {"name": name, "categories": [FlowCategory(c).value for c in categories]},
            response_model=CreateFlowResponse,
        )
        self.logger.info(f"Flow {name} created, id: {response.id}")
        return response

    async def update_flow_json(
        self, flow_id: str, flow_json: str | dict[str, Any]
    ) -> UpdateFlowResponse:
        """Upload the flow.json asset of a draft flow."""
        if not isinstance(flow_json, str):
            flow_json = json.dumps(flow_json)
        response = await self.client.post_form(
            f"{flow_id}/assets",
            {"name": "flow.json", "asset_type": "FLOW_JSON"},
            {"file": ("flow.json", flow_json.encode("utf-8"), "application/json")},
            response_model=UpdateFlowResponse,
        )
        if response.validation_errors:
            self.logger.warning(
                f"Flow {flow_id} has {len(response.validation_errors)} validation errors"
            )
        return response

    async def publish_flow(self, flow_id: str) -> SuccessResponse:
        return await self.client.post(
            f"{flow_id}/publish", response_model=SuccessResponse
        )

    async def deprecate_flow(self, flow_id: str) -> SuccessResponse:
        return await self.client.post(
            f"{flow_id}/deprecate", response_model=SuccessResponse
        )

    async def delete_flow(self, flow_id: str) -> SuccessResponse:
        """Only draft flows can be deleted."""
        return await self.client.delete(flow_id, response_model=SuccessResponse)

    async def get_preview(self, flow_id: str) -> FlowPreviewResponse:
        return await self.client.get(
            flow_id,
            params={"fields": "preview.invalidate(false)"},
            response_model=FlowPreviewResponse,
        )
