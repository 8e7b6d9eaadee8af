# -*- coding: utf-8 -*-
"""Domain models."""

from dingtalk_robot.models.message import (
    ActionCardButton,
    ActionCardMessage,
    BtnOrientation,
    FeedCardLink,
    FeedCardMessage,
    HideAvatar,
    LinkMessage,
    MarkdownMessage,
    Message,
    MessageType,
    RobotMessage,
    TextMessage,
)
from dingtalk_robot.models.robot_config import (
    DEFAULT_DINGTALK_ROBOT_URL,
    DEFAULT_WECHAT_WORK_ROBOT_URL,
    ProviderKind,
    RobotConfig,
)

__all__ = [
    "ActionCardButton",
    "ActionCardMessage",
    "BtnOrientation",
    "DEFAULT_DINGTALK_ROBOT_URL",
    "DEFAULT_WECHAT_WORK_ROBOT_URL",
    "FeedCardLink",
    "FeedCardMessage",
    "HideAvatar",
    "LinkMessage",
    "MarkdownMessage",
    "Message",
    "MessageType",
    "ProviderKind",
    "RobotConfig",
    "RobotMessage",
    "TextMessage",
]
