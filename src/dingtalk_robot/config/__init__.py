"""Configuration subpackage."""

from dingtalk_robot.config.config import (
    AppSettings,
    HttpSettings,
    LoggingSettings,
    RobotSettings,
    Settings,
    get_settings,
)

__all__ = [
    "AppSettings",
    "HttpSettings",
    "LoggingSettings",
    "RobotSettings",
    "Settings",
    "get_settings",
]
