"""Webhook payload types. Keys match the provider wire format exactly."""

from __future__ import annotations

from typing import List, Literal, NotRequired, TypedDict, Union


class AtSchema(TypedDict):
    """Top-level mention block."""

    atMobiles: List[str]
    isAtAll: bool


class MentionField(TypedDict, total=False):
    """Optional top-level at entry shared by every payload."""

    at: AtSchema


class TextBody(TypedDict):
    content: str


class TextPayload(TypedDict):
    msgtype: Literal["text"]
    text: TextBody
    at: NotRequired[AtSchema]


class MarkdownBody(TypedDict):
    title: str
    text: str


class MarkdownPayload(TypedDict):
    msgtype: Literal["markdown"]
    markdown: MarkdownBody
    at: NotRequired[AtSchema]


class LinkBody(TypedDict):
    """Link body. URL keys are camelCase here (picUrl, messageUrl)."""

    title: str
    text: str
    picUrl: str
    messageUrl: str


class LinkPayload(TypedDict):
    msgtype: Literal["link"]
    link: LinkBody
    at: NotRequired[AtSchema]


class ActionCardBtnSchema(TypedDict):
    title: str
    actionURL: str


class ActionCardBody(TypedDict):
    """Action card body. Carries either singleTitle/singleURL or btns, never both."""

    title: str
    text: str
    hideAvatar: Literal["0", "1"]
    btnOrientation: Literal["0", "1"]
    singleTitle: NotRequired[str]
    singleURL: NotRequired[str]
    btns: NotRequired[List[ActionCardBtnSchema]]


class ActionCardPayload(TypedDict):
    msgtype: Literal["actionCard"]
    actionCard: ActionCardBody
    at: NotRequired[AtSchema]


class FeedCardLinkSchema(TypedDict):
    """Feed card entry. URL keys are uppercase here (messageURL, picURL)."""

    title: str
    messageURL: str
    picURL: str


class FeedCardBody(TypedDict):
    links: List[FeedCardLinkSchema]


class FeedCardPayload(TypedDict):
    msgtype: Literal["feedCard"]
    feedCard: FeedCardBody
    at: NotRequired[AtSchema]


RobotPayload = Union[TextPayload, MarkdownPayload, LinkPayload, ActionCardPayload, FeedCardPayload]
