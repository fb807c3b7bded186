"""
Async HTTP client for the WhatsApp Cloud API (Graph API).

Every call goes through ``_handle_response``: 2xx bodies are decoded (and
optionally validated into a pydantic model), anything else is classified
by ``classify_error`` and raised as a ``WhatsAppApiError`` subclass.
Transport errors from aiohttp propagate unchanged.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, TypeVar

import aiohttp
from pydantic import BaseModel, ValidationError

from wacloudapi.core.config.settings import DEFAULT_API_VERSION, GRAPH_API_URL
from wacloudapi.core.errors import (
    InvalidToken,
    ResponseParseError,
    classify_error,
    raise_for_classification,
)
from wacloudapi.core.logging import get_logger, mask_token

if TYPE_CHECKING:
    from wacloudapi.core.config.settings import Settings
    from wacloudapi.resources import (
        AnalyticsApi,
        BlockApi,
        FlowsApi,
        MediaApi,
        MessagesApi,
        PhoneNumbersApi,
        ProductsApi,
        QrCodesApi,
        TemplatesApi,
        TypingApi,
        WabaApi,
        WebhookSubscriptionsApi,
    )

ModelT = TypeVar("ModelT", bound=BaseModel)

DEFAULT_TIMEOUT = 30.0


class WhatsAppUrlBuilder:
    """Builds URLs for Graph API endpoints."""

    def __init__(self, base_url: str, api_version: str, phone_number_id: str):
        self.base_url = base_url.rstrip("/")
        self.api_version = api_version
        self.phone_number_id = phone_number_id

    def get_base_url(self) -> str:
        """URL of the configured phone number node."""
        return f"{self.base_url}/{self.api_version}/{self.phone_number_id}"

    def get_messages_url(self) -> str:
        return f"{self.get_base_url()}/messages"

    def get_media_url(self, media_id: str | None = None) -> str:
        """Media node URL, or the upload endpoint when no id is given."""
        if media_id:
            return self.get_endpoint_url(media_id)
        return f"{self.get_base_url()}/media"

    def get_endpoint_url(self, endpoint: str) -> str:
        """URL of any Graph API node or edge, e.g. ``{waba_id}/message_templates``."""
        return f"{self.base_url}/{self.api_version}/{endpoint.lstrip('/')}"

    def resolve(self, path_or_url: str) -> str:
        if path_or_url.startswith(("http://", "https://")):
            return path_or_url
        return self.get_endpoint_url(path_or_url)


class WhatsAppFormDataBuilder:
    """Builds form data for multipart requests (media upload, flow assets)."""

    @staticmethod
    def build_form_data(
        payload: dict[str, Any], files: dict[str, Any]
    ) -> aiohttp.FormData:
        """Build FormData for a multipart/form-data request.

        Args:
            payload: Plain fields, added before the files
            files: ``{field_name: (filename, bytes_or_file, content_type)}``

        Raises:
            ValueError: If a file entry is not a 3-tuple
        """
        form = aiohttp.FormData()

        for key, value in (payload or {}).items():
            form.add_field(key, str(value))

        for field_name, file_info in files.items():
            if not (isinstance(file_info, tuple) and len(file_info) == 3):
                raise ValueError(
                    f"Invalid file format for field '{field_name}'. "
                    f"Expected tuple (filename, content, content_type)"
                )
            filename, content, content_type = file_info
            if hasattr(content, "read"):
                content = content.read()
            form.add_field(
                field_name, content, filename=filename, content_type=content_type
            )

        return form


class WhatsAppClient:
    """
    Client for one business phone number.

    Configuration is read-only after construction, so one instance can be
    shared by concurrent tasks. When no session is injected the client owns
    one, created lazily and released by ``close()`` or ``async with``.
    """

    def __init__(
        self,
        access_token: str,
        phone_number_id: str,
        *,
        api_version: str = DEFAULT_API_VERSION,
        base_url: str = GRAPH_API_URL,
        session: aiohttp.ClientSession | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        logger: Any | None = None,
    ):
        if not access_token:
            raise ValueError("access_token is required")
        if not phone_number_id:
            raise ValueError("phone_number_id is required")

        self._access_token = access_token
        self._phone_number_id = phone_number_id
        self._api_version = api_version
        self._session = session
        self._owns_session = session is None
        self._timeout = timeout
        self.logger = logger or get_logger(__name__)

        self.url_builder = WhatsAppUrlBuilder(base_url, api_version, phone_number_id)
        self.form_builder = WhatsAppFormDataBuilder()

    @classmethod
    def from_settings(
        cls, settings: Settings, session: aiohttp.ClientSession | None = None
    ) -> WhatsAppClient:
        """Build a client from environment settings."""
        settings.validate_client_credentials()
        return cls(
            settings.access_token,
            settings.phone_number_id,
            api_version=settings.api_version,
            base_url=settings.base_url,
            session=session,
            timeout=settings.request_timeout,
        )

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def phone_number_id(self) -> str:
        return self._phone_number_id

    @property
    def api_version(self) -> str:
        return self._api_version

    def base_url(self) -> str:
        """``{base}/{version}/{phone_number_id}``."""
        return self.url_builder.get_base_url()

    def endpoint_url(self, endpoint: str) -> str:
        """``{base}/{version}/{endpoint}``."""
        return self.url_builder.get_endpoint_url(endpoint)

    def phone_path(self, edge: str = "") -> str:
        """Relative path of an edge on the configured phone number."""
        return f"{self._phone_number_id}/{edge}" if edge else self._phone_number_id

    def __repr__(self) -> str:
        return (
            f"WhatsAppClient(phone_number_id={self._phone_number_id!r}, "
            f"api_version={self._api_version!r}, "
            f"base_url={self.url_builder.base_url!r}, "
            f"access_token={mask_token(self._access_token)!r})"
        )

    # ------------------------------------------------------------------
    # Session lifecycle
    # ------------------------------------------------------------------

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self._timeout)
            )
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        """Close the session if this client created it."""
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> WhatsAppClient:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    # ------------------------------------------------------------------
    # HTTP verbs
    # ------------------------------------------------------------------

    def _get_headers(self, include_content_type: bool = True) -> dict[str, str]:
        headers = {"Authorization": f"Bearer {self._access_token}"}
        if include_content_type:
            headers["Content-Type"] = "application/json"
        return headers

    async def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        response_model: type[ModelT] | None = None,
    ) -> Any:
        """GET a Graph API node or edge."""
        return await self._request(
            "GET", path, params=params, response_model=response_model
        )

    async def post(
        self,
        path: str,
        payload: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
        response_model: type[ModelT] | None = None,
    ) -> Any:
        """POST a JSON payload."""
        return await self._request(
            "POST",
            path,
            json_body=payload if payload is not None else {},
            params=params,
            response_model=response_model,
        )

    async def post_form(
        self,
        path: str,
        payload: dict[str, Any],
        files: dict[str, Any],
        response_model: type[ModelT] | None = None,
    ) -> Any:
        """POST a multipart/form-data body."""
        form = self.form_builder.build_form_data(payload, files)
        self.logger.debug(f"Multipart fields: {list(payload)} files: {list(files)}")
        return await self._request(
            "POST", path, form=form, response_model=response_model
        )

    async def delete(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        response_model: type[ModelT] | None = None,
        payload: dict[str, Any] | None = None,
    ) -> Any:
        """DELETE a Graph API node or edge, optionally with a JSON body."""
        return await self._request(
            "DELETE",
            path,
            json_body=payload,
            params=params,
            response_model=response_model,
        )

    async def download(self, url: str) -> bytes:
        """Fetch raw bytes (e.g. a media URL) with the bearer token."""
        session = self._get_session()
        self.logger.debug(f"Downloading {url}")
        async with session.get(
            url, headers=self._get_headers(include_content_type=False)
        ) as response:
            body = await response.read()
            if response.status >= 300:
                self._raise_api_error(url, response.status, body)
            return body

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json_body: dict[str, Any] | None = None,
        form: aiohttp.FormData | None = None,
        params: dict[str, Any] | None = None,
        response_model: type[ModelT] | None = None,
    ) -> Any:
        url = self.url_builder.resolve(path)
        session = self._get_session()
        # aiohttp sets the multipart Content-Type with its boundary
        headers = self._get_headers(include_content_type=form is None)

        self.logger.debug(f"{method} {url} params={params}")
        if json_body:
            self.logger.debug(f"Payload: {json_body}")

        async with session.request(
            method,
            url,
            headers=headers,
            params=params,
            json=json_body if form is None else None,
            data=form,
        ) as response:
            body = await response.read()
            return self._handle_response(url, response.status, body, response_model)

    def _handle_response(
        self,
        url: str,
        status: int,
        body: bytes,
        response_model: type[ModelT] | None,
    ) -> Any:
        if not 200 <= status < 300:
            self._raise_api_error(url, status, body)

        try:
            data = json.loads(body) if body else {}
        except ValueError as e:
            raise ResponseParseError(
                f"Expected JSON from {url}, got {body[:200]!r}"
            ) from e

        self.logger.debug(f"Response: {data}")
        if response_model is None:
            return data
        try:
            return response_model.model_validate(data)
        except ValidationError as e:
            raise ResponseParseError(
                f"Unexpected response shape for {response_model.__name__}: {e}"
            ) from e

    def _raise_api_error(self, url: str, status: int, body: bytes) -> None:
        classification = classify_error(status, body)
        if isinstance(classification, InvalidToken):
            self.logger.error(
                f"Access token rejected for phone_id {self._phone_number_id} "
                f"(token {mask_token(self._access_token)}); update WP_ACCESS_TOKEN"
            )
        else:
            self.logger.error(f"HTTP {status} from {url}: {classification!r}")
        raise_for_classification(classification, status)

    # ------------------------------------------------------------------
    # Resource accessors
    # ------------------------------------------------------------------

    @property
    def messages(self) -> MessagesApi:
        from wacloudapi.resources import MessagesApi

        return MessagesApi(self)

    @property
    def media(self) -> MediaApi:
        from wacloudapi.resources import MediaApi

        return MediaApi(self)

    @property
    def templates(self) -> TemplatesApi:
        from wacloudapi.resources import TemplatesApi

        return TemplatesApi(self)

    @property
    def phone_numbers(self) -> PhoneNumbersApi:
        from wacloudapi.resources import PhoneNumbersApi

        return PhoneNumbersApi(self)

    @property
    def products(self) -> ProductsApi:
        from wacloudapi.resources import ProductsApi

        return ProductsApi(self)

    @property
    def flows(self) -> FlowsApi:
        from wacloudapi.resources import FlowsApi

        return FlowsApi(self)

    @property
    def typing(self) -> TypingApi:
        from wacloudapi.resources import TypingApi

        return TypingApi(self)

    @property
    def qr_codes(self) -> QrCodesApi:
        from wacloudapi.resources import QrCodesApi

        return QrCodesApi(self)

    @property
    def block(self) -> BlockApi:
        from wacloudapi.resources import BlockApi

        return BlockApi(self)

    def analytics(self, waba_id: str) -> AnalyticsApi:
        from wacloudapi.resources import AnalyticsApi

        return AnalyticsApi(self, waba_id)

    def waba(self, waba_id: str) -> WabaApi:
        from wacloudapi.resources import WabaApi

        return WabaApi(self, waba_id)

    def webhook_subscriptions(self, app_id: str) -> WebhookSubscriptionsApi:
        from wacloudapi.resources import WebhookSubscriptionsApi

        return WebhookSubscriptionsApi(self, app_id)
