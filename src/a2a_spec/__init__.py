"""Parameter records for the A2A push notification configuration methods."""

from a2a_spec.types import (
    DeleteTaskPushNotificationConfigParams,
    DeleteTaskPushNotificationConfigRequest,
    GetTaskPushNotificationConfigParams,
    GetTaskPushNotificationConfigRequest,
    InvalidParamsError,
)
from a2a_spec.utils.errors import InvalidArgumentError


__all__ = [
    'DeleteTaskPushNotificationConfigParams',
    'DeleteTaskPushNotificationConfigRequest',
    'GetTaskPushNotificationConfigParams',
    'GetTaskPushNotificationConfigRequest',
    'InvalidArgumentError',
    'InvalidParamsError',
]
