"""
Graph API error wire models and the closed error classification.

The wire models mirror the ``{"error": {...}}`` body returned by the Graph
API on failure. The classification models are the only thing callers
branch on; they are frozen and discriminated by ``kind``.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class ApiErrorData(BaseModel):
    """Extra error data attached by WhatsApp to some errors."""

    model_config = ConfigDict(extra="allow")

    messaging_product: str | None = None
    details: str | None = None


class ApiErrorDetail(BaseModel):
    """The inner ``error`` object of a Graph API failure response."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    message: str = Field(..., description="Human readable error message")
    error_type: str | None = Field(None, alias="type", description="e.g. OAuthException")
    code: int = Field(..., description="Graph API error code")
    error_subcode: int | None = Field(None, description="Optional sub-code")
    error_user_title: str | None = None
    error_user_msg: str | None = None
    fbtrace_id: str | None = Field(None, description="Trace id for Meta support")
    error_data: ApiErrorData | None = None


class ApiErrorResponse(BaseModel):
    """Top-level Graph API failure body."""

    model_config = ConfigDict(extra="allow")

    error: ApiErrorDetail


class InvalidToken(BaseModel):
    """Access token expired, revoked or malformed."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["invalid_token"] = "invalid_token"


class RateLimited(BaseModel):
    """Application, account or pair rate limit hit."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["rate_limited"] = "rate_limited"
    retry_after: int | None = Field(
        None, description="Seconds to wait, when the vendor supplies it"
    )


class GenericError(BaseModel):
    """Any other failure, carrying the vendor message and data verbatim."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["generic"] = "generic"
    code: int
    message: str
    subcode: int | None = None
    detail: dict[str, Any] | None = None


ErrorClassification = Annotated[
    InvalidToken | RateLimited | GenericError, Field(discriminator="kind")
]
