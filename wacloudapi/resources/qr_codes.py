"""QR codes with a prefilled message: /{phone-number-id}/message_qrdls."""

from enum import Enum

from pydantic import Field

from wacloudapi.models import GraphModel, SuccessResponse

from .base import ResourceApi


class QrImageFormat(str, Enum):
    PNG = "PNG"
    SVG = "SVG"


class QrCode(GraphModel):
    code: str
    prefilled_message: str
    deep_link_url: str
    qr_image_url: str | None = None


class QrCodesListResponse(GraphModel):
    data: list[QrCode] = Field(default_factory=list)


class QrCodesApi(ResourceApi):
    def _path(self, code: str | None = None) -> str:
        edge = f"message_qrdls/{code}" if code else "message_qrdls"
        return self.client.phone_path(edge)

    async def create(
        self,
        prefilled_message: str,
        image_format: QrImageFormat = QrImageFormat.PNG,
    ) -> QrCode:
        response = await self.client.post(
            self._path(),
            {
                "prefilled_message": prefilled_message,
                "generate_qr_image": QrImageFormat(image_format).value,
            },
            response_model=QrCode,
        )
        self.logger.info(f"QR code {response.code} created")
        return response

    async def list(self) -> QrCodesListResponse:
        return await self.client.get(self._path(), response_model=QrCodesListResponse)

    async def get(self, code: str) -> QrCodesListResponse:
        """The Graph API wraps a single code in a ``data`` list."""
        return await self.client.get(self._path(code), response_model=QrCodesListResponse)

    async def update(self, code: str, prefilled_message: str) -> QrCode:
        return await self.client.post(
            self._path(),
            {"code": code, "prefilled_message": prefilled_message},
            response_model=QrCode,
        )

    async def delete(self, code: str) -> SuccessResponse:
        return await self.client.delete(self._path(code), response_model=SuccessResponse)
