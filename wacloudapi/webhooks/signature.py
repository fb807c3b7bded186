"""
Webhook payload authentication.

Meta signs every webhook POST with HMAC-SHA256 over the raw request body,
keyed with the app secret, and sends ``sha256=<hex digest>`` in the
``X-Hub-Signature-256`` header.
"""

import hashlib
import hmac

SIGNATURE_HEADER = "X-Hub-Signature-256"
SIGNATURE_PREFIX = "sha256="
_DIGEST_HEX_LENGTH = hashlib.sha256().digest_size * 2


def compute_signature(raw_body: bytes, app_secret: bytes | str) -> str:
    """Return the lowercase hex HMAC-SHA256 of ``raw_body``."""
    key = app_secret.encode("utf-8") if isinstance(app_secret, str) else app_secret
    return hmac.new(key, raw_body, hashlib.sha256).hexdigest()


def verify_signature(
    raw_body: bytes,
    signature_header: str | None,
    app_secret: bytes | str,
) -> bool:
    """
    Check that a webhook body was signed with ``app_secret``.

    Args:
        raw_body: Request body bytes exactly as received
        signature_header: Value of X-Hub-Signature-256, with or without the
            ``sha256=`` prefix
        app_secret: The Meta app secret

    Returns:
        True only when the header carries the expected digest. Missing,
        malformed or wrong-length headers return False; this never raises.
    """
    if not signature_header or not app_secret:
        return False

    provided = signature_header.strip()
    if provided.startswith(SIGNATURE_PREFIX):
        provided = provided[len(SIGNATURE_PREFIX) :]

    if len(provided) != _DIGEST_HEX_LENGTH:
        return False

    expected = compute_signature(raw_body, app_secret)

    # Bytes on both sides so non-ASCII header content compares instead of raising
    return hmac.compare_digest(
        expected.encode("ascii"), provided.encode("utf-8", errors="replace")
    )
