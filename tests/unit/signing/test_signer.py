# -*- coding: utf-8 -*-
"""Unit tests for webhook URL assembly and HMAC signing."""

from __future__ import annotations

import base64
import hashlib
import hmac
from urllib.parse import parse_qs, unquote, urlsplit

import pytest

from dingtalk_robot.exceptions import SigningError
from dingtalk_robot.models.robot_config import ProviderKind, RobotConfig
from dingtalk_robot.signing import signer
from dingtalk_robot.signing.signer import compute_signature, generate_signed_url, url_encode


def test_unsigned_dingtalk_url_is_exact() -> None:
    config = RobotConfig.dingtalk("abc")

    assert generate_signed_url(config) == "https://oapi.dingtalk.com/robot/send?access_token=abc"


def test_wechat_work_uses_key_parameter() -> None:
    config = RobotConfig.wechat_work("key1")

    assert (
        generate_signed_url(config)
        == "https://qyapi.weixin.qq.com/cgi-bin/webhook/send?key=key1"
    )


def test_access_token_is_url_encoded() -> None:
    config = RobotConfig.dingtalk("a b+c/d=")

    assert generate_signed_url(config).endswith("?access_token=a%20b%2Bc%2Fd%3D")


@pytest.mark.parametrize(
    ("base_url", "expected"),
    [
        ("https://h/send?", "https://h/send?access_token=abc"),
        ("https://h/send?param=x", "https://h/send?param=x&access_token=abc"),
        ("https://h/send?param=x&", "https://h/send?param=x&access_token=abc"),
        ("https://h/send", "https://h/send?access_token=abc"),
    ],
)
def test_query_joiner(base_url: str, expected: str) -> None:
    config = RobotConfig.dingtalk("abc").with_default_webhook_url(base_url)

    assert generate_signed_url(config) == expected


def test_signed_url_matches_reference_hmac(now_ms: int) -> None:
    config = RobotConfig.dingtalk("abc", "secret")
    timestamp = str(now_ms)
    digest = hmac.new(b"secret", f"{timestamp}\nsecret".encode(), hashlib.sha256).digest()
    expected_sign = url_encode(base64.b64encode(digest).decode())

    url = generate_signed_url(config, now_ms=now_ms)

    assert url == (
        "https://oapi.dingtalk.com/robot/send?access_token=abc"
        f"&timestamp={timestamp}&sign={expected_sign}"
    )


def test_signature_decodes_to_256_bit_digest(signed_dingtalk_config: RobotConfig, now_ms: int) -> None:
    url = generate_signed_url(signed_dingtalk_config, now_ms=now_ms)

    query = parse_qs(urlsplit(url).query)
    assert query["timestamp"] == [str(now_ms)]
    # parse_qs already url-decodes the value.
    assert len(base64.b64decode(query["sign"][0], validate=True)) == 32


def test_sign_parameter_has_no_raw_base64_specials(signed_dingtalk_config: RobotConfig) -> None:
    for ts in range(1_700_000_000_000, 1_700_000_000_020):
        sign = generate_signed_url(signed_dingtalk_config, now_ms=ts).rsplit("&sign=", 1)[1]
        assert not set(sign) & {"+", "/", "="}
        assert len(base64.b64decode(unquote(sign))) == 32


def test_signature_changes_with_timestamp(signed_dingtalk_config: RobotConfig, now_ms: int) -> None:
    first = generate_signed_url(signed_dingtalk_config, now_ms=now_ms)
    second = generate_signed_url(signed_dingtalk_config, now_ms=now_ms + 1)

    assert first.rsplit("&sign=", 1)[1] != second.rsplit("&sign=", 1)[1]


def test_signed_url_uses_clock_when_no_timestamp_given(
    signed_dingtalk_config: RobotConfig,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(signer, "current_timestamp_ms", lambda: 1234567890123)

    url = generate_signed_url(signed_dingtalk_config)

    assert "&timestamp=1234567890123&sign=" in url


@pytest.mark.parametrize(
    "config",
    [
        RobotConfig(direct_url="https://example.com/hook"),
        RobotConfig(direct_url="https://example.com/hook", access_token="tok", sec_token="sec"),
        RobotConfig(
            provider=ProviderKind.WECHAT_WORK,
            direct_url="https://example.com/hook",
            access_token="key1",
        ),
    ],
)
def test_direct_url_short_circuits_signing(config: RobotConfig) -> None:
    assert generate_signed_url(config, now_ms=1) == "https://example.com/hook"


def test_compute_signature_is_standard_base64() -> None:
    signature = compute_signature("secret", "1700000000000")

    assert len(base64.b64decode(signature, validate=True)) == 32


def test_compute_signature_with_unencodable_secret_raises_signing_error() -> None:
    with pytest.raises(SigningError) as exc_info:
        compute_signature("\ud800", "1700000000000")

    assert isinstance(exc_info.value.cause, UnicodeEncodeError)
