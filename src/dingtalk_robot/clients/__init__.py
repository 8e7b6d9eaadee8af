"""HTTP transport and robot client."""

from dingtalk_robot.clients.http import AsyncHttpClient, HttpTransport
from dingtalk_robot.clients.robot_client import RobotClient

__all__ = [
    "AsyncHttpClient",
    "HttpTransport",
    "RobotClient",
]
