# -*- coding: utf-8 -*-
"""Unit tests for the command-line entry point."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import pytest
from dependency_injector import providers

from dingtalk_robot import main as main_module
from dingtalk_robot.config import Settings
from dingtalk_robot.DI import Container
from dingtalk_robot.exceptions import DeliveryError


def _container(settings: Settings, transport: Any) -> Container:
    container = Container()
    container.config.override(providers.Object(settings))
    container.http_client.override(providers.Object(transport))
    return container


async def test_run_sends_text_and_closes_transport(
    settings_factory: Callable[..., Settings],
    transport_factory: Callable[..., Any],
) -> None:
    transport = transport_factory(200)
    container = _container(settings_factory(token="wecom:key1"), transport)

    await main_module.run("deploy finished", container=container)

    call = transport.post.await_args
    assert call.args[0] == "https://qyapi.weixin.qq.com/cgi-bin/webhook/send?key=key1"
    assert json.loads(call.kwargs["data"]) == {
        "msgtype": "text",
        "text": {"content": "deploy finished"},
    }
    transport.aclose.assert_awaited_once()


async def test_run_sends_markdown_when_title_given(
    settings_factory: Callable[..., Settings],
    transport_factory: Callable[..., Any],
) -> None:
    transport = transport_factory(200)
    container = _container(settings_factory(token="dingtalk:tok"), transport)

    await main_module.run("# done", markdown_title="Deploy", container=container)

    body = json.loads(transport.post.await_args.kwargs["data"])
    assert body == {"msgtype": "markdown", "markdown": {"title": "Deploy", "text": "# done"}}


async def test_run_closes_transport_on_delivery_error(
    settings_factory: Callable[..., Settings],
    transport_factory: Callable[..., Any],
) -> None:
    transport = transport_factory(500)
    container = _container(settings_factory(token="dingtalk:tok"), transport)

    with pytest.raises(DeliveryError):
        await main_module.run("hello", container=container)

    transport.aclose.assert_awaited_once()


def test_main_returns_exit_code_one_on_robot_error(monkeypatch: pytest.MonkeyPatch) -> None:
    async def _failing_run(text: str, *, markdown_title: str | None = None) -> None:
        raise DeliveryError("Unknown status: 500", status_code=500)

    monkeypatch.setattr(main_module, "run", _failing_run)
    monkeypatch.setattr(main_module, "configure_logging", lambda: None)

    assert main_module.main(["hello"]) == 1


def test_main_returns_zero_on_success(monkeypatch: pytest.MonkeyPatch) -> None:
    sent: list[tuple[str, str | None]] = []

    async def _run(text: str, *, markdown_title: str | None = None) -> None:
        sent.append((text, markdown_title))

    monkeypatch.setattr(main_module, "run", _run)
    monkeypatch.setattr(main_module, "configure_logging", lambda: None)

    assert main_module.main(["--markdown", "Deploy", "# done"]) == 0
    assert sent == [("# done", "Deploy")]
