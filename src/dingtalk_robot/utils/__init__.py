# -*- coding: utf-8 -*-
"""Utility modules."""

from dingtalk_robot.utils.validation import mask_secret, mask_url

__all__ = ["mask_secret", "mask_url"]
