"""Context-aware logging built on rich."""

from .context import (
    clear_request_context,
    get_context_info,
    get_current_tenant_context,
    get_current_user_context,
    set_request_context,
)
from .logger import (
    CompactFormatter,
    ContextLogger,
    get_logger,
    mask_token,
    setup_logging,
    setup_sdk_logging,
)

__all__ = [
    "CompactFormatter",
    "ContextLogger",
    "clear_request_context",
    "get_context_info",
    "get_current_tenant_context",
    "get_current_user_context",
    "get_logger",
    "mask_token",
    "set_request_context",
    "setup_logging",
    "setup_sdk_logging",
]
