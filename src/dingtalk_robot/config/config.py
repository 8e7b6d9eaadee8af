# -*- coding: utf-8 -*-
"""Configuration loaded from environment via Pydantic Settings.

Nested env vars use <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, ROBOT__ACCESS_TOKEN.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """General application configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    app_name: str = "dingtalk-robot"
    service_name: Optional[str] = None
    service_version: Optional[str] = None
    environment: Literal["development", "test", "production"] = "development"


class LoggingSettings(BaseSettings):
    """Structured logging configuration for structlog/stdlib/Logfire."""

    model_config = SettingsConfigDict(extra="ignore")

    # Per-target levels (only the 5 standard levels)
    console_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    file_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    logfire_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    log_to_console: bool = True
    log_to_file: bool = False
    log_file_path: str = "logs/dingtalk_robot.log"
    # TimedRotatingFileHandler: when to rotate (S/M/H/D/W0–W6/midnight), interval, backups to keep
    log_file_when: Literal[
        "S", "M", "H", "D", "W0", "W1", "W2", "W3", "W4", "W5", "W6", "midnight"
    ] = "midnight"
    log_file_interval: int = 1
    log_file_backup_count: int = 30
    log_file_utc: bool = True

    # Main output format: JSONRenderer if True, ConsoleRenderer if False
    json_format: bool = False

    logfire_enabled: bool = False
    logfire_token: Optional[str] = None


class HttpSettings(BaseSettings):
    """HTTP transport configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    timeout_seconds: float = Field(
        default=10.0,
        ge=1.0,
        le=120.0,
        description="Total timeout in seconds for one webhook POST.",
    )


class RobotSettings(BaseSettings):
    """Webhook robot credentials (from env ROBOT__*).

    Sources are checked in this order: direct_url, token, config_file,
    then the explicit type/access_token/sec_token fields.
    """

    model_config = SettingsConfigDict(extra="ignore")

    type: str = Field(
        default="dingtalk",
        description="Provider: dingtalk, wechat, wechatwork or wecom (case-insensitive).",
    )
    default_webhook_url: Optional[str] = Field(
        default=None,
        description="Base webhook URL. Defaults to the provider's public endpoint.",
    )
    access_token: Optional[str] = Field(default=None, description="Robot access token (DingTalk) or key (WeCom).")
    sec_token: Optional[str] = Field(default=None, description="Signing secret; empty means unsigned.")
    direct_url: Optional[str] = Field(
        default=None,
        description="Pre-authorized URL; bypasses token and signature assembly.",
    )
    token: Optional[str] = Field(
        default=None,
        description="Provider-prefixed token, e.g. dingtalk:<token>?<secret> or wecom:<key>.",
    )
    config_file: Optional[str] = Field(
        default=None,
        description="Path to a JSON robot configuration file (~/ is expanded).",
    )


class Settings(BaseSettings):
    """Root application configuration.

    Groups all sub-configurations so the rest of the code does not
    read environment variables directly. Nested overrides use
    <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, ROBOT__SEC_TOKEN.
    """

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    app: AppSettings = Field(default_factory=AppSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    http: HttpSettings = Field(default_factory=HttpSettings)
    robot: RobotSettings = Field(default_factory=RobotSettings)

    @classmethod
    def from_env(cls, **overrides: Any) -> Settings:
        """Build settings from environment (and .env), with optional overrides.

        Nested overrides can be passed as nested dicts, e.g.:
        - from_env(robot={"access_token": "abc"})
        - from_env(http={"timeout_seconds": 30})

        Returns:
            A new Settings instance.
        """
        return cls(**overrides)


@lru_cache
def get_settings() -> Settings:
    """Return a single cached instance of Settings.

    Typical usage:

        from dingtalk_robot.config import get_settings

        settings = get_settings()
        timeout = settings.http.timeout_seconds
        token = settings.robot.access_token
    """
    return Settings()
