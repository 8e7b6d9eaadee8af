"""Logging subpackage."""

from dingtalk_robot.logging.config import configure_logging

__all__ = ["configure_logging"]
