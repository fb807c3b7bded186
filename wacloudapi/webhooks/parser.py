"""Parse raw webhook bodies into envelopes."""

import json
from typing import Any

from pydantic import ValidationError

from wacloudapi.core.errors import WebhookParseError

from .models import WebhookEnvelope


def parse_webhook(raw_body: bytes | str | dict[str, Any]) -> WebhookEnvelope:
    """
    Parse a webhook delivery.

    Args:
        raw_body: Request body as received, or an already decoded JSON object

    Returns:
        The parsed envelope

    Raises:
        WebhookParseError: body is not JSON, or its top level is not
            ``{"object": str, "entry": [{"id", "changes": [...]}]}``
    """
    if isinstance(raw_body, dict):
        data = raw_body
    else:
        try:
            data = json.loads(raw_body)
        except (ValueError, TypeError) as e:
            raise WebhookParseError(f"Webhook body is not valid JSON: {e}") from e

    try:
        return WebhookEnvelope.model_validate(data)
    except ValidationError as e:
        raise WebhookParseError(
            f"Webhook body is not a webhook envelope ({e.error_count()} errors)"
        ) from e
