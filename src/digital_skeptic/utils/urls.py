"""URL validation for inbound analysis requests."""

from __future__ import annotations

from typing import Any

import httpx

from digital_skeptic.errors import ValidationError


def require_article_url(value: Any) -> str:
    """Return ``value`` as a trimmed absolute http(s) URL.

    Raises:
        ValidationError: If the value is missing, not a string or not an absolute
            http(s) URL.
    """

    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError("URL is required")
    if not isinstance(value, str):
        raise ValidationError("URL must be a string")

    url = value.strip()
    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, ValueError) as e:
        raise ValidationError(f"Invalid URL: {e}") from e

    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise ValidationError("URL must be an absolute http(s) URL")
    return url
