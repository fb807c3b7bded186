"""Tests for phone number management."""

import pytest

from tests.helpers import TEST_PHONE_ID, TEST_WABA_ID
from wacloudapi.models import PhoneNumber, PhoneNumbersResponse
from wacloudapi.resources import BusinessProfileUpdate, CodeMethod, PhoneNumbersApi
from wacloudapi.resources.phone_numbers import BUSINESS_PROFILE_FIELDS


@pytest.mark.asyncio
async def test_list(mock_client):
    mock_client.get.return_value = PhoneNumbersResponse(data=[])

    await PhoneNumbersApi(mock_client).list(TEST_WABA_ID)

    assert mock_client.get.await_args.args == (f"{TEST_WABA_ID}/phone_numbers",)


@pytest.mark.asyncio
async def test_get_defaults_to_configured_number(mock_client):
    mock_client.get.return_value = PhoneNumber(id=TEST_PHONE_ID)

    await PhoneNumbersApi(mock_client).get()

    assert mock_client.get.await_args.args == (TEST_PHONE_ID,)


@pytest.mark.asyncio
async def test_register(mock_client):
    await PhoneNumbersApi(mock_client).register("123456")

    mock_client.post.assert_awaited_once()
    path, payload = mock_client.post.await_args.args
    assert path == f"{TEST_PHONE_ID}/register"
    assert payload == {"messaging_product": "whatsapp", "pin": "123456"}


@pytest.mark.asyncio
@pytest.mark.parametrize("pin", ["12345", "1234567", "12345a", ""])
async def test_invalid_pin(mock_client, pin):
    api = PhoneNumbersApi(mock_client)

    with pytest.raises(ValueError, match="6 digits"):
        await api.register(pin)
    with pytest.raises(ValueError, match="6 digits"):
        await api.set_two_step_verification(pin)

    mock_client.post.assert_not_awaited()


@pytest.mark.asyncio
async def test_deregister(mock_client):
    await PhoneNumbersApi(mock_client).deregister()

    assert mock_client.post.await_args.args[0] == f"{TEST_PHONE_ID}/deregister"


@pytest.mark.asyncio
async def test_verification_code_flow(mock_client):
    api = PhoneNumbersApi(mock_client)

    await api.request_verification_code(CodeMethod.VOICE, language="es_ES")
    assert mock_client.post.await_args.args == (
        f"{TEST_PHONE_ID}/request_code",
        {"code_method": "VOICE", "language": "es_ES"},
    )

    await api.verify_code("654321")
    assert mock_client.post.await_args.args == (
        f"{TEST_PHONE_ID}/verify_code",
        {"code": "654321"},
    )


@pytest.mark.asyncio
async def test_two_step_verification(mock_client):
    await PhoneNumbersApi(mock_client).set_two_step_verification("000111")

    assert mock_client.post.await_args.args == (TEST_PHONE_ID, {"pin": "000111"})


@pytest.mark.asyncio
async def test_business_profile(mock_client):
    api = PhoneNumbersApi(mock_client)

    await api.get_business_profile()
    assert mock_client.get.await_args.kwargs["params"] == {"fields": BUSINESS_PROFILE_FIELDS}

    await api.update_business_profile(
        BusinessProfileUpdate(about="Open 9-5", websites=["https://example.com"])
    )
    assert mock_client.post.await_args.args == (
        f"{TEST_PHONE_ID}/whatsapp_business_profile",
        {"messaging_product": "whatsapp", "about": "Open 9-5", "websites": ["https://example.com"]},
    )
