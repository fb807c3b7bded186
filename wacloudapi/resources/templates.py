"""
Message template management: /{waba-id}/message_templates.
"""

from enum import Enum

from pydantic import Field

from wacloudapi.models import GraphModel, Paging, SuccessResponse

from .base import RequestModel, ResourceApi


class TemplateStatus(str, Enum):
    APPROVED = "APPROVED"
    PENDING = "PENDING"
    REJECTED = "REJECTED"
    PAUSED = "PAUSED"
    DISABLED = "DISABLED"


class TemplateCategory(str, Enum):
    MARKETING = "MARKETING"
    UTILITY = "UTILITY"
    AUTHENTICATION = "AUTHENTICATION"


class HeaderFormat(str, Enum):
    TEXT = "TEXT"
    IMAGE = "IMAGE"
    VIDEO = "VIDEO"
    DOCUMENT = "DOCUMENT"
    LOCATION = "LOCATION"


class TemplateButton(RequestModel):
    button_type: str = Field(..., alias="type", description="QUICK_REPLY, URL, PHONE_NUMBER")
    text: str
    url: str | None = None
    phone_number: str | None = None

    @classmethod
    def quick_reply(cls, text: str) -> "TemplateButton":
        return cls(button_type="QUICK_REPLY", text=text)

    @classmethod
    def link(cls, text: str, url: str) -> "TemplateButton":
        return cls(button_type="URL", text=text, url=url)

    @classmethod
    def phone(cls, text: str, phone_number: str) -> "TemplateButton":
        return cls(button_type="PHONE_NUMBER", text=text, phone_number=phone_number)


class TemplateExample(RequestModel):
    header_handle: list[str] | None = None
    header_text: list[str] | None = None
    body_text: list[list[str]] | None = None


class TemplateComponentDef(RequestModel):
    """One component of a template definition (HEADER, BODY, FOOTER, BUTTONS)."""

    component_type: str = Field(..., alias="type")
    format: str | None = None
    text: str | None = None
    buttons: list[TemplateButton] | None = None
    example: TemplateExample | None = None


class CreateTemplate(RequestModel):
    """
    Template definition submitted for review.

    Example:
        template = (
            CreateTemplate(name="order_update", category=TemplateCategory.UTILITY, language="en_US")
            .with_body("Your order {{1}} has shipped")
            .with_footer("Reply STOP to opt out")
        )
    """

    name: str
    category: TemplateCategory
    language: str
    components: list[TemplateComponentDef] = Field(default_factory=list)
    allow_category_change: bool | None = None

    def _with(self, component: TemplateComponentDef) -> "CreateTemplate":
        return self.model_copy(update={"components": [*self.components, component]})

    def with_header(
        self, header_format: HeaderFormat, text: str | None = None
    ) -> "CreateTemplate":
        return self._with(
            TemplateComponentDef(
                component_type="HEADER", format=header_format.value, text=text
            )
        )

    def with_body(
        self, text: str, examples: list[str] | None = None
    ) -> "CreateTemplate":
        example = TemplateExample(body_text=[examples]) if examples else None
        return self._with(
            TemplateComponentDef(component_type="BODY", text=text, example=example)
        )

    def with_footer(self, text: str) -> "CreateTemplate":
        return self._with(TemplateComponentDef(component_type="FOOTER", text=text))

    def with_buttons(self, buttons: list[TemplateButton]) -> "CreateTemplate":
        return self._with(TemplateComponentDef(component_type="BUTTONS", buttons=buttons))


class MessageTemplate(GraphModel):
    name: str
    language: str
    status: str
    category: str
    id: str | None = None
    components: list[dict] = Field(default_factory=list)


class TemplatesResponse(GraphModel):
    data: list[MessageTemplate] = Field(default_factory=list)
    paging: Paging | None = None


class CreateTemplateResponse(GraphModel):
    id: str
    status: str
    category: str


class TemplatesApi(ResourceApi):
    @staticmethod
    def _path(waba_id: str) -> str:
        return f"{waba_id}/message_templates"

    async def list(
        self,
        waba_id: str,
        status: TemplateStatus | None = None,
        name: str | None = None,
        limit: int | None = None,
    ) -> TemplatesResponse:
        params = {}
        if status is not None:
            params["status"] = TemplateStatus(status).value
        if name:
            params["name"] = name
        if limit is not None:
            params["limit"] = str(limit)
        return await self.client.get(
            self._path(waba_id), params=params or None, response_model=TemplatesResponse
        )

    async def list_by_status(
        self, waba_id: str, status: TemplateStatus
    ) -> TemplatesResponse:
        return await self.list(waba_id, status=status)

    async def get_by_name(self, waba_id: str, name: str) -> TemplatesResponse:
        return await self.list(waba_id, name=name)

    async def create(
        self, waba_id: str, template: CreateTemplate
    ) -> CreateTemplateResponse:
        response = await self.client.post(
            self._path(waba_id),
            template.to_payload(),
            response_model=CreateTemplateResponse,
        )
        self.logger.info(
            f"Template {template.name} submitted, id: {response.id} status: {response.status}"
        )
        return response

    async def delete(self, waba_id: str, name: str) -> SuccessResponse:
        """Delete every language version of the template ``name``."""
        return await self.client.delete(
            self._path(waba_id), params={"name": name}, response_model=SuccessResponse
        )
