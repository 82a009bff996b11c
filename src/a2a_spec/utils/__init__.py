"""Utility functions for the A2A parameter records."""

from a2a_spec.utils.builder import TaskPushNotificationConfigParamsBuilder
from a2a_spec.utils.errors import InvalidArgumentError
from a2a_spec.utils.helpers import check_not_none_param


__all__ = [
    'InvalidArgumentError',
    'TaskPushNotificationConfigParamsBuilder',
    'check_not_none_param',
]
