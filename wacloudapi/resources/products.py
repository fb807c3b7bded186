"""
Commerce: single/multi product messages, catalog messages and commerce
settings of the phone number.
"""

from pydantic import Field

from wacloudapi.models import GraphModel, MessageResponse, SuccessResponse

from .base import RequestModel, ResourceApi


class ProductItem(RequestModel):
    product_retailer_id: str


class ProductSection(RequestModel):
    title: str = Field(..., max_length=24)
    product_items: list[ProductItem]

    @classmethod
    def of(cls, title: str, retailer_ids: list[str]) -> "ProductSection":
        return cls(
            title=title,
            product_items=[ProductItem(product_retailer_id=rid) for rid in retailer_ids],
        )


class CommerceSettings(GraphModel):
    is_catalog_visible: bool = False
    is_cart_enabled: bool = False
    id: str | None = None


class CommerceSettingsResponse(GraphModel):
    data: list[CommerceSettings] = Field(default_factory=list)


def _with_footer(interactive: dict, footer: str | None) -> dict:
    if footer:
        interactive["footer"] = {"text": footer}
    return interactive


class ProductsApi(ResourceApi):
    async def send_product(
        self,
        to: str,
        catalog_id: str,
        product_retailer_id: str,
        body_text: str | None = None,
        footer: str | None = None,
    ) -> MessageResponse:
        interactive: dict = {
            "type": "product",
            "action": {
                "catalog_id": catalog_id,
                "product_retailer_id": product_retailer_id,
            },
        }
        if body_text:
            interactive["body"] = {"text": body_text}
        return await self._send_message(
            to, "interactive", _with_footer(interactive, footer)
        )

    async def send_product_list(
        self,
        to: str,
        catalog_id: str,
        header_text: str,
        body_text: str,
        sections: list[ProductSection],
        footer: str | None = None,
    ) -> MessageResponse:
        """Send up to 30 products grouped in up to 10 sections."""
        if not 1 <= len(sections) <= 10:
            raise ValueError("product lists take 1 to 10 sections")
        if sum(len(s.product_items) for s in sections) > 30:
            raise ValueError("product lists take at most 30 products")
        interactive = {
            "type": "product_list",
            "header": {"type": "text", "text": header_text},
            "body": {"text": body_text},
            "action": {
                "catalog_id": catalog_id,
                "sections": [s.to_payload() for s in sections],
            },
        }
        return await self._send_message(
            to, "interactive", _with_footer(interactive, footer)
        )

    async def send_catalog(
        self,
        to: str,
        body_text: str,
        footer: str | None = None,
        thumbnail_product_retailer_id: str | None = None,
    ) -> MessageResponse:
        action: dict = {"name": "catalog_message"}
        if thumbnail_product_retailer_id:
            action["parameters"] = {
                "thumbnail_product_retailer_id": thumbnail_product_retailer_id
            }
        interactive = {
            "type": "catalog_message",
            "body": {"text": body_text},
            "action": action,
        }
        return await self._send_message(
            to, "interactive", _with_footer(interactive, footer)
        )

    async def get_commerce_settings(self) -> CommerceSettingsResponse:
        return await self.client.get(
            self.client.phone_path("whatsapp_commerce_settings"),
            response_model=CommerceSettingsResponse,
        )

    async def update_commerce_settings(
        self, is_catalog_visible: bool, is_cart_enabled: bool
    ) -> SuccessResponse:
        # Graph API takes these as query parameters, not a JSON body
        return await self.client.post(
            self.client.phone_path("whatsapp_commerce_settings"),
            params={
                "is_catalog_visible": str(is_catalog_visible).lower(),
                "is_cart_enabled": str(is_cart_enabled).lower(),
            },
            response_model=SuccessResponse,
        )
