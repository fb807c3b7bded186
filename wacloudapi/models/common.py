"""
Response models shared by several Graph API resources.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class GraphModel(BaseModel):
    """Base for Graph API responses; unknown fields are kept."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class ContactInfo(GraphModel):
    input: str = Field(..., description="Phone number as sent by the caller")
    wa_id: str = Field(..., description="WhatsApp id of the recipient")


class MessageInfo(GraphModel):
    id: str = Field(..., description="wamid of the accepted message")
    message_status: str | None = Field(
        None, description="'accepted', 'held_for_quality_assessment', ..."
    )


class MessageResponse(GraphModel):
    """Response of every POST /{phone-number-id}/messages call."""

    messaging_product: str = "whatsapp"
    contacts: list[ContactInfo] = Field(default_factory=list)
    messages: list[MessageInfo] = Field(default_factory=list)

    @property
    def message_id(self) -> str | None:
        return self.messages[0].id if self.messages else None


class SuccessResponse(GraphModel):
    success: bool


class Cursors(GraphModel):
    before: str | None = None
    after: str | None = None


class Paging(GraphModel):
    cursors: Cursors | None = None
    next: str | None = None
    previous: str | None = None


class QualityRating(str, Enum):
    GREEN = "GREEN"
    YELLOW = "YELLOW"
    RED = "RED"
    NA = "NA"
    UNKNOWN = "UNKNOWN"


class Throughput(GraphModel):
    level: str


class PhoneNumber(GraphModel):
    """A business phone number registered on a WABA."""

    id: str
    verified_name: str | None = None
    display_phone_number: str | None = None
    quality_rating: str | None = None
    code_verification_status: str | None = None
    platform_type: str | None = None
    throughput: Throughput | None = None
    name_status: str | None = None


class PhoneNumbersResponse(GraphModel):
    data: list[PhoneNumber] = Field(default_factory=list)
    paging: Paging | None = None
