"""
Media API: upload, look up, download and delete media.
"""

import base64
import binascii
import mimetypes
from enum import Enum
from pathlib import Path

from pydantic import Field

from wacloudapi.core.errors import MediaError
from wacloudapi.models import GraphModel, SuccessResponse

from .base import MESSAGING_PRODUCT, ResourceApi


class MediaType(Enum):
    """Media categories accepted by WhatsApp, with their limits."""

    AUDIO = "audio"
    DOCUMENT = "document"
    IMAGE = "image"
    STICKER = "sticker"
    VIDEO = "video"

    @classmethod
    def get_supported_mime_types(cls, media_type: "MediaType") -> frozenset[str]:
        return _SUPPORTED_MIME_TYPES[media_type]

    @classmethod
    def get_max_file_size(cls, media_type: "MediaType") -> int:
        return _MAX_FILE_SIZES[media_type]

    @classmethod
    def from_mime_type(cls, mime_type: str) -> "MediaType":
        """Pick the media category for a MIME type.

        ``image/webp`` is reported as STICKER.
        """
        for media_type in (cls.STICKER, cls.IMAGE, cls.AUDIO, cls.VIDEO, cls.DOCUMENT):
            if mime_type in _SUPPORTED_MIME_TYPES[media_type]:
                return media_type
        raise MediaError(f"Unsupported MIME type: {mime_type}")


_SUPPORTED_MIME_TYPES: dict[MediaType, frozenset[str]] = {
    MediaType.AUDIO: frozenset(
        {"audio/aac", "audio/amr", "audio/mpeg", "audio/mp4", "audio/ogg"}
    ),
    MediaType.DOCUMENT: frozenset(
        {
            "text/plain",
            "application/pdf",
            "application/vnd.ms-powerpoint",
            "application/msword",
            "application/vnd.ms-excel",
            "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
            "application/vnd.openxmlformats-officedocument.presentationml.presentation",
            "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        }
    ),
    MediaType.IMAGE: frozenset({"image/jpeg", "image/png"}),
    MediaType.STICKER: frozenset({"image/webp"}),
    MediaType.VIDEO: frozenset({"video/3gpp", "video/mp4"}),
}

_MAX_FILE_SIZES: dict[MediaType, int] = {
    MediaType.AUDIO: 16 * 1024 * 1024,
    MediaType.DOCUMENT: 100 * 1024 * 1024,
    MediaType.IMAGE: 5 * 1024 * 1024,
    MediaType.STICKER: 500 * 1024,  # animated; static stickers are 100KB
    MediaType.VIDEO: 16 * 1024 * 1024,
}


def validate_media(media_type: MediaType, mime_type: str, size: int) -> None:
    """Raise MediaError if the MIME type or size is not accepted for ``media_type``."""
    if mime_type not in MediaType.get_supported_mime_types(media_type):
        raise MediaError(
            f"MIME type {mime_type} is not supported for {media_type.value}"
        )
    max_size = MediaType.get_max_file_size(media_type)
    if size > max_size:
        raise MediaError(
            f"{media_type.value} is {size} bytes, limit is {max_size} bytes"
        )


class MediaUploadResponse(GraphModel):
    id: str


class MediaUrlResponse(GraphModel):
    """Short-lived download URL and metadata of an uploaded media object."""

    id: str
    url: str
    mime_type: str | None = None
    sha256: str | None = None
    file_size: int | None = Field(None, description="Size in bytes")
    messaging_product: str | None = None


class MediaApi(ResourceApi):
    """Upload and manage media for the configured phone number."""

    async def upload_bytes(
        self, data: bytes, filename: str, mime_type: str
    ) -> MediaUploadResponse:
        media_type = MediaType.from_mime_type(mime_type)
        validate_media(media_type, mime_type, len(data))

        response = await self.client.post_form(
            self.client.phone_path("media"),
            {"messaging_product": MESSAGING_PRODUCT, "type": mime_type},
            {"file": (filename, data, mime_type)},
            response_model=MediaUploadResponse,
        )
        self.logger.info(
            f"Uploaded {media_type.value} {filename} ({len(data)} bytes), id: {response.id}"
        )
        return response

    async def upload_file(
        self, file_path: str | Path, mime_type: str | None = None
    ) -> MediaUploadResponse:
        """Upload a local file; the MIME type is guessed from its name if omitted."""
        path = Path(file_path)
        if not path.is_file():
            raise MediaError(f"File not found: {path}")

        mime_type = mime_type or mimetypes.guess_type(path.name)[0]
        if mime_type is None:
            raise MediaError(f"Cannot determine MIME type of {path.name}")

        return await self.upload_bytes(path.read_bytes(), path.name, mime_type)

    async def upload_base64(
        self, data: str, filename: str, mime_type: str
    ) -> MediaUploadResponse:
        try:
            raw = base64.b64decode(data, validate=True)
        except (binascii.Error, ValueError) as e:
            raise MediaError(f"Invalid base64: {e}") from e
        return await self.upload_bytes(raw, filename, mime_type)

    async def get_url(self, media_id: str) -> MediaUrlResponse:
        return await self.client.get(media_id, response_model=MediaUrlResponse)

    async def download(self, media_id: str) -> bytes:
        """Resolve the media URL, then fetch the bytes with the bearer token."""
        info = await self.get_url(media_id)
        data = await self.client.download(info.url)
        self.logger.debug(f"Downloaded media {media_id} ({len(data)} bytes)")
        return data

    async def delete(self, media_id: str) -> SuccessResponse:
        return await self.client.delete(media_id, response_model=SuccessResponse)
