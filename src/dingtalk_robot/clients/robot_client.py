# -*- coding: utf-8 -*-
"""Webhook robot client: map, sign and POST one message per call."""

from __future__ import annotations

import structlog
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Optional
from structlog.contextvars import bound_contextvars

from dingtalk_robot.exceptions import DeliveryError, RobotError, SerializationError, TransportError
from dingtalk_robot.models.message import Message, RobotMessage
from dingtalk_robot.models.robot_config import RobotConfig
from dingtalk_robot.signing import generate_signed_url
from dingtalk_robot.utils.validation import mask_url
from dingtalk_robot.wire import to_json

if TYPE_CHECKING:
    from dingtalk_robot.clients.http import HttpTransport

CONTENT_TYPE = "Content-Type"
APPLICATION_JSON_UTF8 = "application/json; charset=utf-8"


class RobotClient:
    """Send messages to a DingTalk or WeChat Work webhook robot.

    The client holds no mutable state after construction and can be shared
    between concurrent tasks. Nothing is retried: every failure surfaces to
    the caller as a RobotError subclass.

    Sample usage:

        async with AsyncHttpClient(get_settings()) as http:
            robot = RobotClient.from_token("dingtalk:<token>?<secret>", http)
            await robot.send_text("Hello world!")
            await robot.send_message(Message.text("Hello everyone").with_at_all())
    """

    def __init__(
        self,
        config: RobotConfig,
        http_client: "HttpTransport",
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Robot endpoint configuration.
            http_client: Transport used for the POST (e.g. AsyncHttpClient).
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._config = config
        self._http = http_client
        self._logger = get_logger(logger_name or self.__class__.__name__)

    @property
    def config(self) -> RobotConfig:
        return self._config

    @classmethod
    def from_token(cls, token: str, http_client: "HttpTransport", **kwargs: Any) -> RobotClient:
        return cls(RobotConfig.from_token(token), http_client, **kwargs)

    @classmethod
    def from_url(cls, direct_url: str, http_client: "HttpTransport", **kwargs: Any) -> RobotClient:
        return cls(RobotConfig.from_url(direct_url), http_client, **kwargs)

    @classmethod
    def from_json(cls, text: str, http_client: "HttpTransport", **kwargs: Any) -> RobotClient:
        return cls(RobotConfig.from_json(text), http_client, **kwargs)

    @classmethod
    def from_file(cls, path: str | Path, http_client: "HttpTransport", **kwargs: Any) -> RobotClient:
        return cls(RobotConfig.from_file(path), http_client, **kwargs)

    def signed_url(self) -> str:
        """Return a freshly signed destination URL."""
        return generate_signed_url(self._config)

    async def send_message(self, message: RobotMessage) -> None:
        """Map message to JSON and POST it to the robot.

        Raises:
            SerializationError: If the message cannot be encoded.
            SigningError: If the URL cannot be signed.
            TransportError: If the request fails.
            DeliveryError: If the robot answers with a status other than 200.
        """
        json_message = to_json(message)
        with bound_contextvars(robot_msgtype=message.message_type.value):
            await self.send(json_message)

    async def send_text(self, content: str) -> None:
        await self.send_message(Message.text(content))

    async def send_markdown(self, title: str, text: str) -> None:
        await self.send_message(Message.markdown(title, text))

    async def send_link(self, title: str, text: str, pic_url: str, message_url: str) -> None:
        await self.send_message(Message.link(title, text, pic_url, message_url))

    async def send(self, json_message: str) -> None:
        """POST an already serialized JSON body to the robot."""
        try:
            body = json_message.encode("utf-8")
        except UnicodeEncodeError as e:
            raise SerializationError(f"Cannot encode message body: {e}", cause=e) from e

        url = generate_signed_url(self._config)
        masked_url = mask_url(url)

        with bound_contextvars(
            robot_provider=self._config.provider.value,
            robot_direct=self._config.is_direct,
            robot_signed=self._config.is_signed,
        ):
            self._logger.debug("robot_send_started", robot_body_bytes=len(body))
            try:
                status = await self._http.post(
                    url,
                    data=body,
                    headers={CONTENT_TYPE: APPLICATION_JSON_UTF8},
                )
            except RobotError as e:
                self._logger.warning(
                    "robot_send_failed",
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise
            except Exception as e:
                self._logger.warning(
                    "robot_send_failed",
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise TransportError(f"POST failed: {masked_url}", url=masked_url, cause=e) from e

            if status != 200:
                self._logger.warning("robot_send_failed", http_status_code=status)
                raise DeliveryError(
                    f"Unknown status: {status}",
                    status_code=status,
                    url=masked_url,
                )

            self._logger.info("robot_send_succeeded")
