# -*- coding: utf-8 -*-
"""Async HTTP transport for webhook POSTs (single attempt, no retries)."""

from __future__ import annotations

import asyncio
import uuid
import aiohttp
import structlog
from typing import Any, Callable, Mapping, Optional, Protocol
from structlog.contextvars import bound_contextvars

from dingtalk_robot.config import Settings
from dingtalk_robot.exceptions import TransportError
from dingtalk_robot.utils.validation import mask_url


class HttpTransport(Protocol):
    """POST a body and return the HTTP status code."""

    async def post(
        self,
        url: str,
        *,
        data: bytes,
        headers: Optional[Mapping[str, str]] = None,
    ) -> int:
        ...


class AsyncHttpClient:
    """aiohttp-based transport for webhook requests.

    Injects Settings and optionally an aiohttp.ClientSession. If no session
    is provided, one is created and must be closed via aclose() or used
    as an async context manager.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        session: Optional[aiohttp.ClientSession] = None,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the client.

        Args:
            settings: Configuration (uses settings.http.timeout_seconds).
            session: Optional shared aiohttp session. If None, the client
                creates and owns a session (call aclose() when done).
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._settings = settings
        self._session = session
        self._owns_session = session is None
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self._settings.http.timeout_seconds)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    async def aclose(self) -> None:
        """Close the session if this client owns it."""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> AsyncHttpClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def post(
        self,
        url: str,
        *,
        data: bytes,
        headers: Optional[Mapping[str, str]] = None,
    ) -> int:
        """Perform one POST request and return the response status code.

        Args:
            url: Full URL to request.
            data: Raw request body.
            headers: Optional request headers.

        Returns:
            HTTP status code of the response.

        Raises:
            TransportError: If the request fails before a response arrives.
        """
        request_id = uuid.uuid4().hex[:12]
        masked_url = mask_url(url)

        with bound_contextvars(http_url=masked_url, http_request_id=request_id):
            try:
                session = await self._get_session()
                async with session.post(url, data=data, headers=dict(headers or {})) as response:
                    # Drain the body so the connection can be reused.
                    await response.read()
                    self._logger.debug(
                        "http_post_response",
                        http_status_code=response.status,
                    )
                    return response.status
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                self._logger.warning(
                    "http_post_failed",
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise TransportError(
                    f"POST failed: {masked_url}",
                    url=masked_url,
                    cause=e,
                ) from e
