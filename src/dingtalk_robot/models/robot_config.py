# -*- coding: utf-8 -*-
"""Robot endpoint configuration and its factories.

A RobotConfig is either token based (default_webhook_url + access_token,
optionally signed with sec_token) or direct (direct_url, used verbatim).
direct_url wins whenever it is non-empty.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dingtalk_robot.exceptions import (
    ConfigFormatError,
    MissingRequiredConfigError,
    TokenFormatError,
)
from dingtalk_robot.utils.validation import mask_secret

if TYPE_CHECKING:  # pragma: no cover
    from dingtalk_robot.config.config import RobotSettings

DEFAULT_DINGTALK_ROBOT_URL = "https://oapi.dingtalk.com/robot/send"
DEFAULT_WECHAT_WORK_ROBOT_URL = "https://qyapi.weixin.qq.com/cgi-bin/webhook/send"

_DINGTALK_PREFIX = "dingtalk:"
_WECHAT_WORK_PREFIXES = ("wechatwork:", "wecom:")
_WECHAT_WORK_TYPES = frozenset({"wechat", "wechatwork", "wecom"})


class ProviderKind(str, Enum):
    """Webhook provider."""

    DINGTALK = "dingtalk"
    WECHAT_WORK = "wechatwork"

    @property
    def default_webhook_url(self) -> str:
        if self is ProviderKind.WECHAT_WORK:
            return DEFAULT_WECHAT_WORK_ROBOT_URL
        return DEFAULT_DINGTALK_ROBOT_URL

    @property
    def token_param(self) -> str:
        """Query parameter carrying the access credential."""
        if self is ProviderKind.WECHAT_WORK:
            return "key"
        return "access_token"

    @classmethod
    def parse(cls, value: str | None) -> ProviderKind:
        """Map a configuration type string to a provider (unknown values mean DingTalk)."""
        if value and value.strip().lower() in _WECHAT_WORK_TYPES:
            return cls.WECHAT_WORK
        return cls.DINGTALK


@dataclass(frozen=True, slots=True)
class RobotConfig:
    """Immutable webhook endpoint configuration."""

    provider: ProviderKind = ProviderKind.DINGTALK
    default_webhook_url: str = DEFAULT_DINGTALK_ROBOT_URL
    access_token: str = ""
    sec_token: str = ""
    """Signing secret. Empty means requests are not signed."""
    direct_url: str = ""
    """Pre-authorized URL (outgoing robots). Bypasses token and signature."""

    @property
    def is_direct(self) -> bool:
        return bool(self.direct_url)

    @property
    def is_signed(self) -> bool:
        return not self.is_direct and bool(self.sec_token)

    def with_default_webhook_url(self, default_webhook_url: str) -> RobotConfig:
        """Return a copy pointing at another base webhook URL."""
        return replace(self, default_webhook_url=default_webhook_url)

    @classmethod
    def dingtalk(cls, access_token: str, sec_token: str = "") -> RobotConfig:
        """DingTalk robot; sec_token may be empty for unsigned robots."""
        return cls(
            provider=ProviderKind.DINGTALK,
            default_webhook_url=DEFAULT_DINGTALK_ROBOT_URL,
            access_token=access_token,
            sec_token=sec_token,
        )

    @classmethod
    def wechat_work(cls, key: str) -> RobotConfig:
        """WeChat Work (WeCom) group robot identified by its webhook key."""
        return cls(
            provider=ProviderKind.WECHAT_WORK,
            default_webhook_url=DEFAULT_WECHAT_WORK_ROBOT_URL,
            access_token=key,
        )

    @classmethod
    def from_url(cls, direct_url: str) -> RobotConfig:
        """Outgoing robot: the URL is already authorized and is used as is."""
        return cls(direct_url=direct_url)

    @classmethod
    def from_token(cls, token: str) -> RobotConfig:
        """Parse a provider-prefixed token.

        Accepted forms:
            dingtalk:<access_token>[?<sec_token>]
            wechatwork:<key>
            wecom:<key>

        Raises:
            TokenFormatError: If the prefix is not recognized.
        """
        if token.startswith(_DINGTALK_PREFIX):
            access_token, _, sec_token = token[len(_DINGTALK_PREFIX):].partition("?")
            return cls.dingtalk(access_token, sec_token)
        for prefix in _WECHAT_WORK_PREFIXES:
            if token.startswith(prefix):
                return cls.wechat_work(token[len(prefix):])
        raise TokenFormatError(
            f"Token format error: {mask_secret(token)}",
            token=token,
        )

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> RobotConfig:
        """Build from a decoded configuration object; non-string values count as absent."""

        def _str(key: str) -> str | None:
            value = data.get(key)
            return value if isinstance(value, str) else None

        provider = ProviderKind.parse(_str("type"))
        return cls(
            provider=provider,
            default_webhook_url=_str("default_webhook_url") or provider.default_webhook_url,
            access_token=_str("access_token") or "",
            sec_token=_str("sec_token") or "",
            direct_url=_str("direct_url") or "",
        )

    @classmethod
    def from_json(cls, text: str) -> RobotConfig:
        """Parse a JSON configuration document.

        Format::

            {
                "type": "dingtalk",            // optional: dingtalk | wechat | wechatwork | wecom
                "default_webhook_url": "",     // optional
                "access_token": "<access token>",
                "sec_token": "<sec token>",    // optional
                "direct_url": ""               // optional
            }

        Raises:
            ConfigFormatError: If the text is not valid JSON or not a JSON object.
        """
        try:
            data = json.loads(text)
        except ValueError as e:
            raise ConfigFormatError(f"JSON format error: {e}", cause=e) from e
        if not isinstance(data, dict):
            raise ConfigFormatError(
                f"JSON format error: expected an object, got {type(data).__name__}"
            )
        return cls.from_mapping(data)

    @classmethod
    def from_file(cls, path: str | Path) -> RobotConfig:
        """Read a JSON configuration file; a leading ~/ is expanded to the home directory.

        Raises:
            ConfigFormatError: If the file cannot be read or is malformed.
        """
        file_path = Path(path).expanduser()
        try:
            text = file_path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigFormatError(
                f"Cannot read robot config file: {file_path}",
                source=str(file_path),
                cause=e,
            ) from e
        try:
            return cls.from_json(text)
        except ConfigFormatError as e:
            raise ConfigFormatError(str(e), source=str(file_path), cause=e.cause) from e

    @classmethod
    def from_settings(cls, settings: "RobotSettings") -> RobotConfig:
        """Build from ROBOT__* settings.

        Precedence: direct_url, token, config_file, then type/access_token/sec_token.

        Raises:
            MissingRequiredConfigError: If no credential source is configured.
        """
        if settings.direct_url:
            config = cls.from_url(settings.direct_url)
        elif settings.token:
            config = cls.from_token(settings.token)
        elif settings.config_file:
            config = cls.from_file(settings.config_file)
        elif settings.access_token:
            config = cls.from_mapping(
                {
                    "type": settings.type,
                    "access_token": settings.access_token,
                    "sec_token": settings.sec_token,
                }
            )
        else:
            raise MissingRequiredConfigError(
                "ROBOT__DIRECT_URL, ROBOT__TOKEN, ROBOT__CONFIG_FILE or ROBOT__ACCESS_TOKEN"
            )
        if settings.default_webhook_url:
            config = config.with_default_webhook_url(settings.default_webhook_url)
        return config
