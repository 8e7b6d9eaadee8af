"""Exceptions subpackage."""

from dingtalk_robot.exceptions.exceptions import (
    ConfigFormatError,
    DeliveryError,
    MissingRequiredConfigError,
    RobotAPIError,
    RobotError,
    SerializationError,
    SigningError,
    TokenFormatError,
    TransportError,
)

__all__ = [
    "ConfigFormatError",
    "DeliveryError",
    "MissingRequiredConfigError",
    "RobotAPIError",
    "RobotError",
    "SerializationError",
    "SigningError",
    "TokenFormatError",
    "TransportError",
]
