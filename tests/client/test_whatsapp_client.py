"""
Tests for WhatsAppClient.

URL building and configuration are tested directly; HTTP behavior runs
against the in-process Graph API stub from conftest.
"""

import aiohttp
import pytest

from tests.helpers import (
    MESSAGE_RESPONSE,
    TEST_PHONE_ID,
    TEST_TOKEN,
    api_path,
)
from wacloudapi.client import (
    WhatsAppClient,
    WhatsAppFormDataBuilder,
    WhatsAppUrlBuilder,
)
from wacloudapi.core.config import Settings
from wacloudapi.core.errors import (
    ApiError,
    InvalidTokenError,
    RateLimitedError,
    ResponseParseError,
)
from wacloudapi.models import MessageResponse


class TestUrlBuilder:
    def test_default_base_url(self):
        client = WhatsAppClient(TEST_TOKEN, "phone_123")

        assert client.base_url() == "https://graph.facebook.com/v21.0/phone_123"

    def test_custom_base_url_and_version(self):
        client = WhatsAppClient(
            TEST_TOKEN,
            "phone_123",
            api_version="v21.0",
            base_url="https://custom.api.com/",
        )

        assert client.base_url() == "https://custom.api.com/v21.0/phone_123"
        assert client.endpoint_url("/WABA_1/message_templates") == (
            "https://custom.api.com/v21.0/WABA_1/message_templates"
        )

    def test_media_urls(self):
        builder = WhatsAppUrlBuilder("https://graph.facebook.com", "v21.0", "PHONE")

        assert builder.get_messages_url() == "https://graph.facebook.com/v21.0/PHONE/messages"
        assert builder.get_media_url() == "https://graph.facebook.com/v21.0/PHONE/media"
        assert builder.get_media_url("MEDIA1") == "https://graph.facebook.com/v21.0/MEDIA1"

    def test_absolute_urls_pass_through(self):
        builder = WhatsAppUrlBuilder("https://graph.facebook.com", "v21.0", "PHONE")
        url = "https://lookaside.fbsbx.com/whatsapp_business/attachments/?mid=1"

        assert builder.resolve(url) == url

    def test_phone_path(self):
        client = WhatsAppClient(TEST_TOKEN, "PHONE")

        assert client.phone_path() == "PHONE"
        assert client.phone_path("messages") == "PHONE/messages"


class TestConfiguration:
    @pytest.mark.parametrize("token,phone_id", [("", "PHONE"), (TEST_TOKEN, "")])
    def test_requires_credentials(self, token, phone_id):
        with pytest.raises(ValueError):
            WhatsAppClient(token, phone_id)

    def test_repr_hides_token(self):
        client = WhatsAppClient("EAABsecretsecretTOKEN", "PHONE")

        text = repr(client)

        assert "EAABsecretsecretTOKEN" not in text
        assert "EAAB...OKEN" in text
        assert "PHONE" in text

    def test_from_settings(self, monkeypatch):
        monkeypatch.setenv("WP_ACCESS_TOKEN", TEST_TOKEN)
        monkeypatch.setenv("WP_PHONE_ID", "PHONE")
        monkeypatch.setenv("API_VERSION", "v20.0")
        monkeypatch.setenv("BASE_URL", "https://custom.api.com")

        client = WhatsAppClient.from_settings(Settings())

        assert client.api_version == "v20.0"
        assert client.phone_number_id == "PHONE"
        assert client.base_url() == "https://custom.api.com/v20.0/PHONE"

    def test_from_settings_requires_token(self, monkeypatch):
        monkeypatch.delenv("WP_ACCESS_TOKEN", raising=False)
        monkeypatch.setenv("WP_PHONE_ID", "PHONE")

        with pytest.raises(ValueError, match="WP_ACCESS_TOKEN"):
            WhatsAppClient.from_settings(Settings())

    def test_headers(self):
        client = WhatsAppClient(TEST_TOKEN, "PHONE")

        assert client._get_headers() == {
            "Authorization": f"Bearer {TEST_TOKEN}",
            "Content-Type": "application/json",
        }
        assert client._get_headers(include_content_type=False) == {
            "Authorization": f"Bearer {TEST_TOKEN}"
        }


class TestFormDataBuilder:
    def test_builds_form(self):
        form = WhatsAppFormDataBuilder.build_form_data(
            {"messaging_product": "whatsapp", "type": "image/png"},
            {"file": ("photo.png", b"\x89PNG", "image/png")},
        )

        assert isinstance(form, aiohttp.FormData)

    def test_rejects_bad_file_entry(self):
        with pytest.raises(ValueError, match="file"):
            WhatsAppFormDataBuilder.build_form_data({}, {"file": b"raw"})


class TestRequests:
    @pytest.mark.asyncio
    async def test_post_sends_bearer_and_json(self, client, graph_api):
        graph_api.add("POST", api_path(f"{TEST_PHONE_ID}/messages"), 200, MESSAGE_RESPONSE)

        response = await client.post(
            client.phone_path("messages"), {"to": "1555"}, response_model=MessageResponse
        )

        assert response.message_id == "wamid.HBgLMTU1NTEyMzQ1NjcVAgARGBI="
        assert graph_api.last["headers"]["Authorization"] == f"Bearer {TEST_TOKEN}"
        assert graph_api.last["json"] == {"to": "1555"}

    @pytest.mark.asyncio
    async def test_get_with_params_returns_dict(self, client, graph_api):
        graph_api.add("GET", api_path("WABA_1"), 200, {"id": "WABA_1", "name": "Shop"})

        data = await client.get("WABA_1", params={"fields": "id,name"})

        assert data == {"id": "WABA_1", "name": "Shop"}
        assert graph_api.last["query"] == {"fields": "id,name"}

    @pytest.mark.asyncio
    async def test_delete_with_params(self, client, graph_api):
        graph_api.add("DELETE", api_path("MEDIA1"), 200, {"success": True})

        data = await client.delete("MEDIA1", params={"phone_number_id": TEST_PHONE_ID})

        assert data == {"success": True}
        assert graph_api.last["method"] == "DELETE"
        assert graph_api.last["query"] == {"phone_number_id": TEST_PHONE_ID}

    @pytest.mark.asyncio
    async def test_empty_success_body(self, client, graph_api):
        graph_api.add("POST", api_path("NODE"), 200, b"")

        assert await client.post("NODE") == {}

    @pytest.mark.asyncio
    async def test_invalid_token_raises(self, client, graph_api):
        graph_api.add(
            "POST",
            api_path(f"{TEST_PHONE_ID}/messages"),
            401,
            {"error": {"message": "Session has expired", "type": "OAuthException", "code": 190}},
        )

        with pytest.raises(InvalidTokenError) as exc_info:
            await client.post(client.phone_path("messages"), {"to": "1555"})

        assert exc_info.value.status == 401

    @pytest.mark.asyncio
    async def test_rate_limit_raises(self, client, graph_api):
        graph_api.add(
            "GET",
            api_path("NODE"),
            429,
            {"error": {"message": "Too many calls", "type": "OAuthException", "code": 4}},
        )

        with pytest.raises(RateLimitedError) as exc_info:
            await client.get("NODE")

        assert exc_info.value.retry_after is None

    @pytest.mark.asyncio
    async def test_generic_api_error(self, client, graph_api):
        graph_api.add(
            "POST",
            api_path(f"{TEST_PHONE_ID}/messages"),
            400,
            {
                "error": {
                    "message": "Invalid parameter",
                    "type": "OAuthException",
                    "code": 100,
                    "error_subcode": 2494010,
                }
            },
        )

        with pytest.raises(ApiError) as exc_info:
            await client.post(client.phone_path("messages"), {})

        assert exc_info.value.code == 100
        assert exc_info.value.subcode == 2494010

    @pytest.mark.asyncio
    async def test_gateway_error_page(self, client, graph_api):
        graph_api.add("GET", api_path("NODE"), 502, b"<html>Bad Gateway</html>")

        with pytest.raises(ApiError) as exc_info:
            await client.get("NODE")

        assert exc_info.value.code == 502
        assert "Bad Gateway" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_non_json_success_body(self, client, graph_api):
        graph_api.add("GET", api_path("NODE"), 200, b"<html>ok</html>")

        with pytest.raises(ResponseParseError):
            await client.get("NODE")

    @pytest.mark.asyncio
    async def test_unexpected_response_shape(self, client, graph_api):
        graph_api.add("GET", api_path("NODE"), 200, {"messages": "not a list"})

        with pytest.raises(ResponseParseError, match="MessageResponse"):
            await client.get("NODE", response_model=MessageResponse)

    @pytest.mark.asyncio
    async def test_download_absolute_url(self, client, graph_api, graph_server):
        graph_api.add("GET", "/media/file.jpg", 200, b"\xff\xd8\xff")

        data = await client.download(str(graph_server.make_url("/media/file.jpg")))

        assert data == b"\xff\xd8\xff"
        assert graph_api.last["headers"]["Authorization"] == f"Bearer {TEST_TOKEN}"


class TestSessionLifecycle:
    @pytest.mark.asyncio
    async def test_injected_session_is_not_closed(self):
        async with aiohttp.ClientSession() as session:
            async with WhatsAppClient(TEST_TOKEN, "PHONE", session=session):
                pass

            assert not session.closed

    @pytest.mark.asyncio
    async def test_owned_session_is_closed(self):
        client = WhatsAppClient(TEST_TOKEN, "PHONE")
        session = client._get_session()

        await client.close()

        assert session.closed

    @pytest.mark.asyncio
    async def test_resource_accessors(self):
        async with WhatsAppClient(TEST_TOKEN, "PHONE") as client:
            assert client.messages.client is client
            assert client.media.client is client
            assert client.templates.client is client
            assert client.phone_numbers.client is client
            assert client.products.client is client
            assert client.flows.client is client
            assert client.typing.client is client
            assert client.qr_codes.client is client
            assert client.block.client is client
            assert client.analytics("WABA").waba_id == "WABA"
            assert client.waba("WABA").waba_id == "WABA"
            assert client.webhook_subscriptions("APP").app_id == "APP"
