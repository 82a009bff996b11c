"""Constants for well-known method names and route parameters."""

GET_TASK_PUSH_NOTIFICATION_CONFIG_METHOD = 'tasks/pushNotificationConfig/get'
DELETE_TASK_PUSH_NOTIFICATION_CONFIG_METHOD = (
    'tasks/pushNotificationConfig/delete'
)

TASK_ID_PATH_PARAM = 'id'
PUSH_ID_PATH_PARAM = 'push_id'
TENANT_PATH_PARAM = 'tenant'

DEFAULT_TENANT = ''
