# -*- coding: utf-8 -*-
"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from collections.abc import Callable
from types import SimpleNamespace
from typing import Any
from unittest.mock import AsyncMock, Mock

import pytest

from dingtalk_robot.config import Settings
from dingtalk_robot.models.robot_config import RobotConfig


@pytest.fixture
def access_token() -> str:
    """Default DingTalk access token used by tests."""
    return "0c41cc100f36dd995684453debf4e8690f34efa457692da609a4d663c866d67d"


@pytest.fixture
def sec_token() -> str:
    """Default signing secret used by tests."""
    return "SECae54fda1927685938b81cd56c6949e3fa02b1180e4cfabc99827c79c106d6485"


@pytest.fixture
def now_ms() -> int:
    """Stable epoch-millisecond timestamp for deterministic signatures."""
    return 1_771_000_000_000


@pytest.fixture
def dingtalk_config(access_token: str) -> RobotConfig:
    """Unsigned DingTalk robot."""
    return RobotConfig.dingtalk(access_token)


@pytest.fixture
def signed_dingtalk_config(access_token: str, sec_token: str) -> RobotConfig:
    """DingTalk robot with a signing secret."""
    return RobotConfig.dingtalk(access_token, sec_token)


@pytest.fixture
def settings_factory() -> Callable[..., Settings]:
    """Build Settings with explicit robot/http sections, ignoring .env files."""

    def _build(**robot: Any) -> Settings:
        return Settings(
            _env_file=None,  # type: ignore[call-arg]
            robot=robot,
            http={"timeout_seconds": 5.0},
        )

    return _build


@pytest.fixture
def transport_factory() -> Callable[..., Any]:
    """Fake HttpTransport whose post() returns the given status or raises side_effect."""

    def _build(status: int = 200, side_effect: BaseException | None = None) -> Any:
        post = AsyncMock(return_value=status, side_effect=side_effect)
        return SimpleNamespace(post=post, aclose=AsyncMock())

    return _build


@pytest.fixture
def logger() -> Mock:
    """Mock structlog logger; inject with get_logger=lambda _: logger."""
    return Mock()
