# -*- coding: utf-8 -*-
"""
Entry point: send one message to the configured webhook robot.

Orchestrates: logging, settings, container, send, shutdown of the HTTP session.
The robot is resolved from ROBOT__* settings (direct URL, token, config file or
explicit credentials).

Run with:
    python -m dingtalk_robot.main "Deploy finished"
    python -m dingtalk_robot.main --markdown "Deploy" "# Deploy finished"

Notebook usage:
    from dingtalk_robot.main import run
    await run("Hello world!")
"""
from __future__ import annotations

import argparse
import asyncio
import sys
import structlog
from typing import Optional, Sequence

from dingtalk_robot.DI import Container
from dingtalk_robot.exceptions import RobotError
from dingtalk_robot.logging.config import configure_logging
from dingtalk_robot.models.message import Message, RobotMessage


def _build_message(text: str, markdown_title: Optional[str] = None) -> RobotMessage:
    if markdown_title is not None:
        return Message.markdown(markdown_title, text)
    return Message.text(text)


async def run(
    text: str,
    *,
    markdown_title: Optional[str] = None,
    container: Optional[Container] = None,
) -> None:
    """Send text (or a markdown message titled markdown_title) and close the HTTP session."""
    container = container or Container()
    logger = structlog.get_logger("main")
    http_client = container.http_client()
    try:
        robot = container.robot_client()
        await robot.send_message(_build_message(text, markdown_title))
        logger.info("main_message_sent", robot_provider=robot.config.provider.value)
    finally:
        await http_client.aclose()


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="dingtalk-robot",
        description="Send a message to a DingTalk or WeChat Work webhook robot.",
    )
    parser.add_argument("text", help="Message content (markdown body with --markdown).")
    parser.add_argument(
        "--markdown",
        metavar="TITLE",
        default=None,
        help="Send a markdown message with this title.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    configure_logging()
    logger = structlog.get_logger("main")
    try:
        asyncio.run(run(args.text, markdown_title=args.markdown))
    except RobotError as e:
        logger.error(
            "main_send_failed",
            error_type=type(e).__name__,
            error_message=str(e),
            http_status_code=getattr(e, "status_code", None),
        )
        return 1
    return 0


__all__ = ["run", "main"]

if __name__ == "__main__":
    sys.exit(main())
