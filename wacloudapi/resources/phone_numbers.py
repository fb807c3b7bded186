"""
Phone number management: registration, verification, two-step PIN and
the WhatsApp Business profile.
"""

from enum import Enum

from pydantic import Field

from wacloudapi.models import (
    GraphModel,
    PhoneNumber,
    PhoneNumbersResponse,
    SuccessResponse,
)

from .base import MESSAGING_PRODUCT, RequestModel, ResourceApi

BUSINESS_PROFILE_FIELDS = (
    "about,address,description,email,profile_picture_url,websites,vertical"
)


class CodeMethod(str, Enum):
    SMS = "SMS"
    VOICE = "VOICE"


class BusinessProfile(GraphModel):
    messaging_product: str | None = None
    about: str | None = None
    address: str | None = None
    description: str | None = None
    email: str | None = None
    profile_picture_url: str | None = None
    websites: list[str] | None = None
    vertical: str | None = None


class BusinessProfileResponse(GraphModel):
    data: list[BusinessProfile] = Field(default_factory=list)


class BusinessProfileUpdate(RequestModel):
    """Fields to change on the business profile; omitted fields are untouched."""

    messaging_product: str = MESSAGING_PRODUCT
    about: str | None = Field(None, max_length=139)
    address: str | None = Field(None, max_length=256)
    description: str | None = Field(None, max_length=512)
    email: str | None = None
    profile_picture_handle: str | None = None
    websites: list[str] | None = Field(None, max_length=2)
    vertical: str | None = None


def _check_pin(pin: str) -> str:
    if len(pin) != 6 or not pin.isdigit():
        raise ValueError("PIN must be exactly 6 digits")
    return pin


class PhoneNumbersApi(ResourceApi):
    async def list(self, waba_id: str) -> PhoneNumbersResponse:
        return await self.client.get(
            f"{waba_id}/phone_numbers", response_model=PhoneNumbersResponse
        )

    async def get(self, phone_number_id: str | None = None) -> PhoneNumber:
        """Details of a phone number (the configured one by default)."""
        return await self.client.get(
            phone_number_id or self.client.phone_number_id, response_model=PhoneNumber
        )

    async def register(self, pin: str) -> SuccessResponse:
        response = await self.client.post(
            self.client.phone_path("register"),
            {"messaging_product": MESSAGING_PRODUCT, "pin": _check_pin(pin)},
            response_model=SuccessResponse,
        )
        self.logger.info(f"Phone number {self.client.phone_number_id} registered")
        return response

    async def deregister(self) -> SuccessResponse:
        response = await self.client.post(
            self.client.phone_path("deregister"), {}, response_model=SuccessResponse
        )
        self.logger.warning(f"Phone number {self.client.phone_number_id} deregistered")
        return response

    async def request_verification_code(
        self, code_method: CodeMethod = CodeMethod.SMS, language: str = "en_US"
    ) -> SuccessResponse:
        return await self.client.post(
            self.client.phone_path("request_code"),
            {"code_method": CodeMethod(code_method).value, "language": language},
            response_model=SuccessResponse,
        )

    async def verify_code(self, code: str) -> SuccessResponse:
        return await self.client.post(
            self.client.phone_path("verify_code"),
            {"code": code},
            response_model=SuccessResponse,
        )

    async def set_two_step_verification(self, pin: str) -> SuccessResponse:
        return await self.client.post(
            self.client.phone_path(),
            {"pin": _check_pin(pin)},
            response_model=SuccessResponse,
        )

    async def get_business_profile(self) -> BusinessProfileResponse:
        return await self.client.get(
            self.client.phone_path("whatsapp_business_profile"),
            params={"fields": BUSINESS_PROFILE_FIELDS},
            response_model=BusinessProfileResponse,
        )

    async def update_business_profile(
        self, update: BusinessProfileUpdate
    ) -> SuccessResponse:
        return await self.client.post(
            self.client.phone_path("whatsapp_business_profile"),
            update.to_payload(),
            response_model=SuccessResponse,
        )
