"""Dependency injection."""

from dingtalk_robot.DI.container import Container

__all__ = ["Container"]
