# -*- coding: utf-8 -*-
"""Robot message model: one frozen dataclass per message kind.

Every setter returns a new instance, so messages can be composed fluently:

    msg = (
        Message.action_card("Release", "v1.2 is out")
        .hide_avatar()
        .add_button(ActionCardButton("Notes", "https://example.com/notes"))
        .with_at_all()
    )

Fields that do not belong to a kind do not exist on its class. The mention
block (at_all, at_mobiles) is shared by every kind.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Optional, TypeVar, Union


class MessageType(str, Enum):
    """Wire discriminator (msgtype) for each message kind."""

    TEXT = "text"
    MARKDOWN = "markdown"
    LINK = "link"
    ACTION_CARD = "actionCard"
    FEED_CARD = "feedCard"


class HideAvatar(str, Enum):
    """Action card sender avatar visibility."""

    SHOW = "0"
    HIDE = "1"


class BtnOrientation(str, Enum):
    """Action card button layout."""

    VERTICAL = "0"
    LANDSCAPE = "1"


@dataclass(frozen=True, slots=True)
class ActionCardButton:
    """One action card button."""

    title: str
    action_url: str


@dataclass(frozen=True, slots=True)
class FeedCardLink:
    """One feed card entry."""

    title: str
    message_url: str
    pic_url: str


_M = TypeVar("_M", bound="_MentionMixin")


class _MentionMixin:
    """Setters for the mention block shared by all message kinds."""

    __slots__ = ()

    at_all: bool
    at_mobiles: tuple[str, ...]

    def with_at_all(self: _M, at_all: bool = True) -> _M:
        """Return a copy that mentions everyone in the chat."""
        return replace(self, at_all=at_all)  # type: ignore[type-var]

    def with_at_mobiles(self: _M, mobiles: Iterable[str]) -> _M:
        """Return a copy with mobiles appended to the mentioned numbers (order kept)."""
        if isinstance(mobiles, str):
            raise TypeError("mobiles must be an iterable of phone numbers, not a single str")
        return replace(self, at_mobiles=self.at_mobiles + tuple(mobiles))  # type: ignore[type-var]

    @property
    def has_mentions(self) -> bool:
        return self.at_all or bool(self.at_mobiles)


@dataclass(frozen=True, slots=True)
class TextMessage(_MentionMixin):
    content: str = ""
    at_all: bool = False
    at_mobiles: tuple[str, ...] = ()

    @property
    def message_type(self) -> MessageType:
        return MessageType.TEXT

    def with_text(self, content: str) -> TextMessage:
        return replace(self, content=content)


@dataclass(frozen=True, slots=True)
class MarkdownMessage(_MentionMixin):
    title: str = ""
    text: str = ""
    at_all: bool = False
    at_mobiles: tuple[str, ...] = ()

    @property
    def message_type(self) -> MessageType:
        return MessageType.MARKDOWN

    def with_markdown(self, title: str, text: str) -> MarkdownMessage:
        return replace(self, title=title, text=text)


@dataclass(frozen=True, slots=True)
class LinkMessage(_MentionMixin):
    title: str = ""
    text: str = ""
    pic_url: str = ""
    message_url: str = ""
    at_all: bool = False
    at_mobiles: tuple[str, ...] = ()

    @property
    def message_type(self) -> MessageType:
        return MessageType.LINK

    def with_link(self, title: str, text: str, pic_url: str, message_url: str) -> LinkMessage:
        return replace(self, title=title, text=text, pic_url=pic_url, message_url=message_url)


@dataclass(frozen=True, slots=True)
class ActionCardMessage(_MentionMixin):
    """Action card with either one whole-card button or a list of buttons.

    single_button and buttons are set independently; when single_button is
    present the list is ignored on the wire.
    """

    title: str = ""
    text: str = ""
    avatar: HideAvatar = HideAvatar.SHOW
    btn_orientation: BtnOrientation = BtnOrientation.VERTICAL
    single_button: Optional[ActionCardButton] = None
    buttons: tuple[ActionCardButton, ...] = ()
    at_all: bool = False
    at_mobiles: tuple[str, ...] = ()

    @property
    def message_type(self) -> MessageType:
        return MessageType.ACTION_CARD

    def show_avatar(self) -> ActionCardMessage:
        return replace(self, avatar=HideAvatar.SHOW)

    def hide_avatar(self) -> ActionCardMessage:
        return replace(self, avatar=HideAvatar.HIDE)

    def btn_vertical(self) -> ActionCardMessage:
        return replace(self, btn_orientation=BtnOrientation.VERTICAL)

    def btn_landscape(self) -> ActionCardMessage:
        return replace(self, btn_orientation=BtnOrientation.LANDSCAPE)

    def with_single_button(self, button: ActionCardButton) -> ActionCardMessage:
        return replace(self, single_button=button)

    def add_button(self, button: ActionCardButton) -> ActionCardMessage:
        return replace(self, buttons=self.buttons + (button,))


@dataclass(frozen=True, slots=True)
class FeedCardMessage(_MentionMixin):
    links: tuple[FeedCardLink, ...] = ()
    at_all: bool = False
    at_mobiles: tuple[str, ...] = ()

    @property
    def message_type(self) -> MessageType:
        return MessageType.FEED_CARD

    def add_feed_link(self, link: FeedCardLink) -> FeedCardMessage:
        return replace(self, links=self.links + (link,))

    def add_feed_link_detail(self, title: str, message_url: str, pic_url: str) -> FeedCardMessage:
        return self.add_feed_link(FeedCardLink(title=title, message_url=message_url, pic_url=pic_url))


RobotMessage = Union[TextMessage, MarkdownMessage, LinkMessage, ActionCardMessage, FeedCardMessage]

_DEFAULTS: dict[MessageType, type] = {
    MessageType.TEXT: TextMessage,
    MessageType.MARKDOWN: MarkdownMessage,
    MessageType.LINK: LinkMessage,
    MessageType.ACTION_CARD: ActionCardMessage,
    MessageType.FEED_CARD: FeedCardMessage,
}


class Message:
    """Factories for every message kind."""

    @staticmethod
    def new(message_type: MessageType | str) -> RobotMessage:
        """Return an empty message of the given kind (accepts the wire tag as well)."""
        return _DEFAULTS[MessageType(message_type)]()

    @staticmethod
    def text(content: str) -> TextMessage:
        return TextMessage(content=content)

    @staticmethod
    def markdown(title: str, text: str) -> MarkdownMessage:
        return MarkdownMessage(title=title, text=text)

    @staticmethod
    def link(title: str, text: str, pic_url: str, message_url: str) -> LinkMessage:
        return LinkMessage(title=title, text=text, pic_url=pic_url, message_url=message_url)

    @staticmethod
    def action_card(title: str, text: str) -> ActionCardMessage:
        return ActionCardMessage(title=title, text=text)

    @staticmethod
    def feed_card() -> FeedCardMessage:
        return FeedCardMessage()
