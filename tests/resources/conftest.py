"""Fixtures for resource API tests."""

from unittest.mock import AsyncMock

import pytest

from tests.helpers import TEST_PHONE_ID, TEST_TOKEN
from wacloudapi.client import WhatsAppClient
from wacloudapi.models import MessageResponse, SuccessResponse


@pytest.fixture
def mock_client():
    """A real client whose HTTP verbs are AsyncMocks."""
    client = WhatsAppClient(TEST_TOKEN, TEST_PHONE_ID)
    client.get = AsyncMock()
    client.post = AsyncMock(return_value=SuccessResponse(success=True))
    client.post_form = AsyncMock()
    client.delete = AsyncMock(return_value=SuccessResponse(success=True))
    return client


@pytest.fixture
def sent_message():
    return MessageResponse.model_validate(
        {
            "messaging_product": "whatsapp",
            "contacts": [{"input": "15551234567", "wa_id": "15551234567"}],
            "messages": [{"id": "wamid.SENT"}],
        }
    )
