# -*- coding: utf-8 -*-
"""Webhook URL assembly and HMAC-SHA256 request signing.

Signed URLs carry the epoch-millisecond timestamp and
sign = urlencode(base64(HMAC-SHA256(secret, f"{timestamp}\\n{secret}"))).
The provider only accepts a signature for a short window after its
timestamp, so a URL must be generated per send.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import time
from typing import Optional
from urllib.parse import quote

from dingtalk_robot.exceptions import SigningError
from dingtalk_robot.models.robot_config import RobotConfig


def url_encode(value: str) -> str:
    """Percent-encode everything except unreserved characters (A-Z a-z 0-9 - _ . ~)."""
    return quote(value, safe="")


def current_timestamp_ms() -> int:
    return int(time.time() * 1000)


def compute_signature(secret: str, timestamp: str) -> str:
    """Return the base64 HMAC-SHA256 signature of timestamp + "\\n" + secret.

    Raises:
        SigningError: If the secret cannot be used as an HMAC key.
    """
    try:
        key = secret.encode("utf-8")
        string_to_sign = f"{timestamp}\n{secret}".encode("utf-8")
        digest = hmac.new(key, string_to_sign, digestmod=hashlib.sha256).digest()
    except (UnicodeEncodeError, TypeError, ValueError) as e:
        raise SigningError(f"HMAC error: {e}", cause=e) from e
    return base64.b64encode(digest).decode("ascii")


def _join_query(base_url: str) -> str:
    """Return base_url ready for one more query parameter."""
    if base_url.endswith("?"):
        return base_url
    if "?" in base_url:
        return base_url if base_url.endswith("&") else base_url + "&"
    return base_url + "?"


def generate_signed_url(config: RobotConfig, *, now_ms: Optional[int] = None) -> str:
    """Return the destination URL for one send.

    Args:
        config: Robot endpoint configuration.
        now_ms: Timestamp to sign with (epoch milliseconds). Defaults to the
            current time; only used when config has a secret.

    Raises:
        SigningError: If the signature cannot be computed.
    """
    if config.direct_url:
        return config.direct_url

    signed_url = (
        _join_query(config.default_webhook_url)
        + f"{config.provider.token_param}={url_encode(config.access_token)}"
    )

    if config.sec_token:
        timestamp = str(now_ms if now_ms is not None else current_timestamp_ms())
        sign = compute_signature(config.sec_token, timestamp)
        signed_url += f"&timestamp={timestamp}&sign={url_encode(sign)}"

    return signed_url
