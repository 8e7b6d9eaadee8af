# -*- coding: utf-8 -*-
"""Dependency injection container (dependency-injector)."""

from __future__ import annotations

from dependency_injector import containers, providers

from dingtalk_robot.clients.http import AsyncHttpClient
from dingtalk_robot.clients.robot_client import RobotClient
from dingtalk_robot.config import Settings, get_settings
from dingtalk_robot.models.robot_config import RobotConfig


def _build_robot_config(settings: Settings) -> RobotConfig:
    """Resolve the robot endpoint from ROBOT__* settings."""
    return RobotConfig.from_settings(settings.robot)


class Container(containers.DeclarativeContainer):
    """Application container. Wires settings, HTTP client, robot config and robot client."""

    config = providers.Callable(get_settings)

    http_client = providers.Singleton(
        AsyncHttpClient,
        settings=config,
    )

    robot_config = providers.Singleton(_build_robot_config, config)

    robot_client = providers.Singleton(
        RobotClient,
        config=robot_config,
        http_client=http_client,
    )
