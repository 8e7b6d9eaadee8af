# -*- coding: utf-8 -*-
"""Map robot messages to the provider JSON payload."""

from __future__ import annotations

import json
from typing import Any, Callable

from dingtalk_robot.exceptions import SerializationError
from dingtalk_robot.models.message import (
    ActionCardMessage,
    FeedCardMessage,
    LinkMessage,
    MarkdownMessage,
    RobotMessage,
    TextMessage,
)
from dingtalk_robot.wire.schema import (
    ActionCardBody,
    ActionCardPayload,
    FeedCardPayload,
    LinkPayload,
    MarkdownPayload,
    MentionField,
    RobotPayload,
    TextPayload,
)


def _mentions(message: RobotMessage) -> MentionField:
    if not message.has_mentions:
        return {}
    return {"at": {"atMobiles": list(message.at_mobiles), "isAtAll": message.at_all}}


def _text(message: TextMessage) -> TextPayload:
    return {"msgtype": "text", "text": {"content": message.content}, **_mentions(message)}


def _markdown(message: MarkdownMessage) -> MarkdownPayload:
    return {
        "msgtype": "markdown",
        "markdown": {"title": message.title, "text": message.text},
        **_mentions(message),
    }


def _link(message: LinkMessage) -> LinkPayload:
    return {
        "msgtype": "link",
        "link": {
            "title": message.title,
            "text": message.text,
            "picUrl": message.pic_url,
            "messageUrl": message.message_url,
        },
        **_mentions(message),
    }


def _action_card(message: ActionCardMessage) -> ActionCardPayload:
    body: ActionCardBody = {
        "title": message.title,
        "text": message.text,
        "hideAvatar": message.avatar.value,  # type: ignore[typeddict-item]
        "btnOrientation": message.btn_orientation.value,  # type: ignore[typeddict-item]
    }
    # Single button wins over the list.
    if message.single_button is not None:
        body["singleTitle"] = message.single_button.title
        body["singleURL"] = message.single_button.action_url
    elif message.buttons:
        body["btns"] = [
            {"title": btn.title, "actionURL": btn.action_url} for btn in message.buttons
        ]
    return {"msgtype": "actionCard", "actionCard": body, **_mentions(message)}


def _feed_card(message: FeedCardMessage) -> FeedCardPayload:
    return {
        "msgtype": "feedCard",
        "feedCard": {
            "links": [
                {"title": link.title, "messageURL": link.message_url, "picURL": link.pic_url}
                for link in message.links
            ]
        },
        **_mentions(message),
    }


_BUILDERS: dict[type, Callable[[Any], RobotPayload]] = {
    TextMessage: _text,
    MarkdownMessage: _markdown,
    LinkMessage: _link,
    ActionCardMessage: _action_card,
    FeedCardMessage: _feed_card,
}


def to_payload(message: RobotMessage) -> RobotPayload:
    """Return the wire payload for message.

    The at block is added only when the message mentions everyone or at
    least one mobile number.

    Raises:
        SerializationError: If message is not a known message kind.
    """
    builder = _BUILDERS.get(type(message))
    if builder is None:
        raise SerializationError(f"Unsupported message type: {type(message).__name__}")
    return builder(message)


def to_json(message: RobotMessage) -> str:
    """Serialize message to the compact JSON body POSTed to the webhook.

    Raises:
        SerializationError: If the message cannot be mapped or encoded.
    """
    payload = to_payload(message)
    try:
        return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Cannot encode {payload['msgtype']} message: {e}", cause=e) from e
