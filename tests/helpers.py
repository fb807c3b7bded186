"""Webhook payload builders and Graph API constants shared by the tests."""

import json
from typing import Any

TEST_PHONE_ID = "123456789"
TEST_TOKEN = "test_access_token"
TEST_WABA_ID = "987654321"
TEST_APP_ID = "app_123456"
TEST_APP_SECRET = "test_app_secret"
TEST_API_VERSION = "v21.0"

MESSAGE_RESPONSE = {
    "messaging_product": "whatsapp",
    "contacts": [{"input": "15551234567", "wa_id": "15551234567"}],
    "messages": [{"id": "wamid.HBgLMTU1NTEyMzQ1NjcVAgARGBI="}],
}

SUCCESS_RESPONSE = {"success": True}


def api_path(path: str) -> str:
    return f"/{TEST_API_VERSION}/{path}"


def make_message(
    msg_type: str,
    content: Any = None,
    *,
    sender: str = "15551234567",
    message_id: str = "wamid.IN1",
) -> dict[str, Any]:
    message: dict[str, Any] = {
        "from": sender,
        "id": message_id,
        "timestamp": "1700000000",
        "type": msg_type,
    }
    if content is not None:
        message[msg_type] = content
    return message


def make_status(
    status: str,
    *,
    message_id: str = "wamid.OUT1",
    recipient: str = "15557654321",
    errors: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    item: dict[str, Any] = {
        "id": message_id,
        "recipient_id": recipient,
        "status": status,
        "timestamp": "1700000001",
    }
    if errors is not None:
        item["errors"] = errors
    return item


def make_value(
    messages: list[Any] | None = None,
    statuses: list[Any] | None = None,
    phone_number_id: str = TEST_PHONE_ID,
) -> dict[str, Any]:
    value: dict[str, Any] = {
        "messaging_product": "whatsapp",
        "metadata": {
            "display_phone_number": "15550001111",
            "phone_number_id": phone_number_id,
        },
    }
    if messages is not None:
        value["contacts"] = [
            {"profile": {"name": "Test User"}, "wa_id": m.get("from", "")}
            for m in messages
            if isinstance(m, dict)
        ]
        value["messages"] = messages
    if statuses is not None:
        value["statuses"] = statuses
    return value


def make_envelope(*values: dict[str, Any], field: str = "messages") -> dict[str, Any]:
    """One entry with one change per value."""
    return {
        "object": "whatsapp_business_account",
        "entry": [
            {
                "id": TEST_WABA_ID,
                "changes": [{"field": field, "value": value} for value in values],
            }
        ],
    }


def to_body(payload: dict[str, Any]) -> bytes:
    return json.dumps(payload).encode("utf-8")
