"""DingTalk / WeChat Work webhook robot client: messages, signing and async delivery."""

from dingtalk_robot.clients import AsyncHttpClient, RobotClient
from dingtalk_robot.config import get_settings
from dingtalk_robot.DI import Container
from dingtalk_robot.models import (
    ActionCardButton,
    FeedCardLink,
    Message,
    MessageType,
    ProviderKind,
    RobotConfig,
)
from dingtalk_robot.signing import generate_signed_url
from dingtalk_robot.wire import to_json, to_payload

__version__ = "0.1.0"
__all__ = [
    "ActionCardButton",
    "AsyncHttpClient",
    "Container",
    "FeedCardLink",
    "Message",
    "MessageType",
    "ProviderKind",
    "RobotClient",
    "RobotConfig",
    "generate_signed_url",
    "get_settings",
    "to_json",
    "to_payload",
]
