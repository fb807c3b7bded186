"""Shared Graph API response models."""

from .common import (
    ContactInfo,
    Cursors,
    GraphModel,
    MessageInfo,
    MessageResponse,
    Paging,
    PhoneNumber,
    PhoneNumbersResponse,
    QualityRating,
    SuccessResponse,
    Throughput,
)

__all__ = [
    "ContactInfo",
    "Cursors",
    "GraphModel",
    "MessageInfo",
    "MessageResponse",
    "Paging",
    "PhoneNumber",
    "PhoneNumbersResponse",
    "QualityRating",
    "SuccessResponse",
    "Throughput",
]
