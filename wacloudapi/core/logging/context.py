"""
Request context management using contextvars for automatic propagation.

The webhook receiver sets the tenant (business phone number id) and the user
(sender wa_id) once per delivery; every logger obtained through
``get_logger`` picks them up without parameter passing.
"""

from contextvars import ContextVar

_tenant_context: ContextVar[str | None] = ContextVar(
    "tenant_id", default=None
)  # phone_number_id from webhook metadata or client config
_user_context: ContextVar[str | None] = ContextVar(
    "user_id", default=None
)  # wa_id of the end user


def set_request_context(
    tenant_id: str | None = None,
    user_id: str | None = None,
) -> None:
    """
    Set the request context for the current async context.

    Args:
        tenant_id: Business phone number id handling the request
        user_id: WhatsApp id of the end user
    """
    if tenant_id is not None:
        _tenant_context.set(tenant_id)
    if user_id is not None:
        _user_context.set(user_id)


def get_current_tenant_context() -> str | None:
    """Get the current tenant id, or None if not set."""
    return _tenant_context.get()


def get_current_user_context() -> str | None:
    """Get the current user id, or None if not set."""
    return _user_context.get()


def clear_request_context() -> None:
    """Clear the request context. Mostly useful in tests."""
    _tenant_context.set(None)
    _user_context.set(None)


def get_context_info() -> dict[str, str | None]:
    """Get current context information for debugging."""
    return {
        "tenant_id": get_current_tenant_context(),
        "user_id": get_current_user_context(),
    }
