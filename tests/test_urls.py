"""Tests for inbound URL validation."""

from __future__ import annotations

import pytest

from digital_skeptic.errors import ValidationError
from digital_skeptic.utils.urls import require_article_url


def test_accepts_and_trims_http_urls() -> None:
    """It should return trimmed absolute http(s) URLs."""

    assert require_article_url("  https://example.com/story?id=1 ") == "https://example.com/story?id=1"
    assert require_article_url("http://example.com") == "http://example.com"


@pytest.mark.parametrize("value", [None, "", "  ", 123, "example.com/story", "mailto:a@b.c", "file:///etc/passwd"])
def test_rejects_missing_or_malformed(value: object) -> None:
    """It should raise ValidationError for anything but an absolute http(s) URL."""

    with pytest.raises(ValidationError):
        require_article_url(value)
