"""Custom exceptions for robot configuration, signing and delivery."""

from __future__ import annotations


class RobotError(Exception):
    """Base exception for webhook robot errors."""

    pass


class MissingRequiredConfigError(RobotError):
    """Raised when no usable credential source is configured."""

    pass


class TokenFormatError(RobotError):
    """Raised when a provider-prefixed token string has an unknown prefix."""

    def __init__(self, message: str, *, token: str | None = None) -> None:
        super().__init__(message)
        self.token = token


class ConfigFormatError(RobotError):
    """Raised when a configuration document is not a JSON object or cannot be read."""

    def __init__(
        self,
        message: str,
        *,
        source: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.source = source
        self.cause = cause


class SigningError(RobotError):
    """Raised when the HMAC signature cannot be computed."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class SerializationError(RobotError):
    """Raised when a message cannot be mapped or encoded to JSON."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class RobotAPIError(RobotError):
    """Raised when a webhook request does not complete successfully."""

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.cause = cause


class TransportError(RobotAPIError):
    """Raised when the HTTP request fails before a response is received."""

    pass


class DeliveryError(RobotAPIError):
    """Raised when the webhook answers with a status other than 200."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        url: str | None = None,
    ) -> None:
        super().__init__(message, url=url, status_code=status_code)
