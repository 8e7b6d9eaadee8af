"""Masking helpers for credentials that end up in logs and error messages."""

from __future__ import annotations

import re

_SECRET_QUERY_PARAMS = re.compile(r"(?<=[?&])(?P<key>access_token|key|sign)=(?P<value>[^&]*)")


def mask_secret(value: str | None) -> str:
    """Return a masked credential for logging (e.g. abcd...wxyz)."""
    if not value or len(value) < 10:
        return "***"
    return f"{value[:4]}...{value[-4:]}"


def mask_url(url: str | None) -> str:
    """Mask credential query parameters (access_token, key, sign) in a webhook URL."""
    if not url:
        return ""
    return _SECRET_QUERY_PARAMS.sub(
        lambda m: f"{m.group('key')}={mask_secret(m.group('value'))}",
        url,
    )
