"""Wire payload mapping."""

from dingtalk_robot.wire.mapper import to_json, to_payload
from dingtalk_robot.wire.schema import RobotPayload

__all__ = ["RobotPayload", "to_json", "to_payload"]
