"""Subscription verification handshake (the GET side of a webhook endpoint)."""

import hmac

from wacloudapi.core.errors import WebhookChallengeError

SUBSCRIBE_MODE = "subscribe"


def verify_webhook_challenge(
    hub_mode: str | None,
    hub_verify_token: str | None,
    hub_challenge: str | None,
    expected_token: str,
) -> str:
    """
    Answer Meta's ``hub.*`` verification request.

    Args:
        hub_mode: ``hub.mode`` query parameter
        hub_verify_token: ``hub.verify_token`` query parameter
        hub_challenge: ``hub.challenge`` query parameter
        expected_token: Verify token configured in the Meta app dashboard

    Returns:
        The challenge string, to be echoed back as the response body

    Raises:
        WebhookChallengeError: mode is not ``subscribe``, the token does
            not match, or the challenge is missing
    """
    if hub_mode != SUBSCRIBE_MODE:
        raise WebhookChallengeError(f"Unexpected hub.mode: {hub_mode!r}")
    if not expected_token or not hub_verify_token:
        raise WebhookChallengeError("Verify token missing")
    if not hmac.compare_digest(
        hub_verify_token.encode("utf-8"), expected_token.encode("utf-8")
    ):
        raise WebhookChallengeError("Verify token mismatch")
    if not hub_challenge:
        raise WebhookChallengeError("hub.challenge missing")
    return hub_challenge
