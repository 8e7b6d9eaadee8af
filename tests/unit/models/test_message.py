# -*- coding: utf-8 -*-
"""Unit tests for the message model and its immutable setters."""

from __future__ import annotations

import dataclasses

import pytest

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
    TextMessage,
)


def test_factories_return_variant_with_expected_message_type() -> None:
    assert Message.text("hi").message_type == MessageType.TEXT
    assert Message.markdown("t", "b").message_type == MessageType.MARKDOWN
    assert Message.link("t", "x", "p", "m").message_type == MessageType.LINK
    assert Message.action_card("t", "x").message_type == MessageType.ACTION_CARD
    assert Message.feed_card().message_type == MessageType.FEED_CARD


@pytest.mark.parametrize(
    ("tag", "cls"),
    [
        ("text", TextMessage),
        ("markdown", MarkdownMessage),
        ("link", LinkMessage),
        ("actionCard", ActionCardMessage),
        ("feedCard", FeedCardMessage),
    ],
)
def test_new_accepts_wire_tag_and_returns_empty_variant(tag: str, cls: type) -> None:
    message = Message.new(tag)

    assert isinstance(message, cls)
    assert message.at_all is False
    assert message.at_mobiles == ()


def test_new_rejects_unknown_tag() -> None:
    with pytest.raises(ValueError):
        Message.new("image")


def test_action_card_defaults_show_avatar_and_vertical_buttons() -> None:
    card = Message.action_card("title", "text")

    assert card.avatar == HideAvatar.SHOW
    assert card.btn_orientation == BtnOrientation.VERTICAL
    assert card.single_button is None
    assert card.buttons == ()


def test_setters_return_new_instance_and_leave_original_untouched() -> None:
    original = Message.text("first")

    updated = original.with_text("second").with_at_all()

    assert original.content == "first"
    assert original.at_all is False
    assert updated.content == "second"
    assert updated.at_all is True


def test_messages_are_frozen() -> None:
    message = Message.markdown("title", "body")

    with pytest.raises(dataclasses.FrozenInstanceError):
        message.title = "other"  # type: ignore[misc]


def test_with_at_mobiles_appends_in_order_and_keeps_duplicates() -> None:
    message = (
        Message.text("hi")
        .with_at_mobiles(["13800000001", "13800000002"])
        .with_at_mobiles(["13800000001"])
    )

    assert message.at_mobiles == ("13800000001", "13800000002", "13800000001")
    assert message.has_mentions is True


def test_has_mentions_is_false_by_default() -> None:
    assert Message.feed_card().has_mentions is False


def test_with_at_mobiles_rejects_single_string() -> None:
    with pytest.raises(TypeError):
        Message.text("hi").with_at_mobiles("13800000001")  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "message",
    [
        Message.text("x"),
        Message.markdown("t", "x"),
        Message.link("t", "x", "p", "m"),
        Message.action_card("t", "x"),
        Message.feed_card(),
    ],
)
def test_messages_have_no_instance_dict(message: object) -> None:
    assert not hasattr(message, "__dict__")


def test_action_card_avatar_and_orientation_toggles() -> None:
    card = Message.action_card("t", "x").hide_avatar().btn_landscape()

    assert card.avatar == HideAvatar.HIDE
    assert card.btn_orientation == BtnOrientation.LANDSCAPE

    card = card.show_avatar().btn_vertical()

    assert card.avatar == HideAvatar.SHOW
    assert card.btn_orientation == BtnOrientation.VERTICAL


def test_action_card_single_button_and_list_are_independent() -> None:
    first = ActionCardButton(title="A", action_url="https://a.example")
    second = ActionCardButton(title="B", action_url="https://b.example")

    card = (
        Message.action_card("t", "x")
        .add_button(first)
        .with_single_button(second)
        .add_button(second)
    )

    assert card.single_button == second
    assert card.buttons == (first, second)


def test_feed_card_links_keep_insertion_order() -> None:
    card = (
        Message.feed_card()
        .add_feed_link(FeedCardLink(title="one", message_url="https://1", pic_url="https://1.png"))
        .add_feed_link_detail("two", "https://2", "https://2.png")
    )

    assert [link.title for link in card.links] == ["one", "two"]
    assert card.links[1] == FeedCardLink(title="two", message_url="https://2", pic_url="https://2.png")


def test_link_and_markdown_setters_replace_all_fields() -> None:
    link = Message.new(MessageType.LINK)
    assert isinstance(link, LinkMessage)
    link = link.with_link("title", "text", "https://pic", "https://msg")

    assert (link.title, link.text, link.pic_url, link.message_url) == (
        "title",
        "text",
        "https://pic",
        "https://msg",
    )

    markdown = MarkdownMessage().with_markdown("t", "# body")
    assert (markdown.title, markdown.text) == ("t", "# body")
