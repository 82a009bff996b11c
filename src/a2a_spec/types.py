from collections.abc import Mapping
from typing import Any, Literal

from pydantic import ConfigDict
from typing_extensions import Self

from a2a_spec._base import A2ABaseModel
from a2a_spec.utils.builder import TaskPushNotificationConfigParamsBuilder
from a2a_spec.utils.constants import (
    DEFAULT_TENANT,
    DELETE_TASK_PUSH_NOTIFICATION_CONFIG_METHOD,
    GET_TASK_PUSH_NOTIFICATION_CONFIG_METHOD,
    PUSH_ID_PATH_PARAM,
    TASK_ID_PATH_PARAM,
    TENANT_PATH_PARAM,
)
from a2a_spec.utils.errors import InvalidArgumentError
from a2a_spec.utils.helpers import check_not_none_param


class InvalidParamsError(A2ABaseModel):
    """
    An error indicating that the method parameters are invalid.
    """

    code: Literal[-32602] = -32602
    """
    The error code for an invalid parameters error.
    """
    data: Any | None = None
    """
    A primitive or structured value containing additional information about the error.
    This may be omitted.
    """
    message: str | None = 'Invalid parameters'
    """
    The error message.
    """

    @classmethod
    def from_invalid_argument(cls, error: InvalidArgumentError) -> Self:
        """Maps a local validation failure onto the JSON-RPC error model."""
        return cls(message=error.message, data={'param': error.param_name})


class TaskPushNotificationConfigParams(A2ABaseModel):
    """
    Common parameters addressing one push notification configuration of a task.
    """

    model_config = ConfigDict(frozen=True)

    task_id: str
    """
    The unique identifier of the task.
    """
    id: str
    """
    The unique identifier of the push notification configuration.
    """
    tenant: str = DEFAULT_TENANT
    """
    The tenant, provided as a path parameter. Defaults to an empty string.
    """

    def __init__(self, /, **data: Any) -> None:
        """Validates that no field is missing or `None` before construction.

        Fields may be given by name or by their camelCase alias. Omitting
        `tenant` is allowed; passing `tenant=None` is not.

        Raises:
            InvalidArgumentError: If a field is `None`, or if `task_id` or
                `id` is missing.
        """
        for field_name, field in type(self).model_fields.items():
            alias = field.alias or field_name
            if field_name in data:
                value = data[field_name]
            elif alias in data:
                value = data[alias]
            elif field.is_required():
                value = None
            else:
                continue
            check_not_none_param(alias, value)
        super().__init__(**data)

    @classmethod
    def builder(cls) -> 'TaskPushNotificationConfigParamsBuilder[Self]':
        """Creates a new builder with all fields unset."""
        return TaskPushNotificationConfigParamsBuilder(cls)

    @classmethod
    def from_path_params(cls, path_params: Mapping[str, Any]) -> Self:
        """Creates parameters from the path parameters of a REST route.

        Args:
            path_params: The matched route parameters, e.g. Starlette's
                `request.path_params`. `id` holds the task id and `push_id`
                the configuration id; `tenant` is optional.

        Raises:
            InvalidArgumentError: If `id` or `push_id` is missing.
        """
        return cls(
            task_id=check_not_none_param(
                TASK_ID_PATH_PARAM, path_params.get(TASK_ID_PATH_PARAM)
            ),
            id=check_not_none_param(
                PUSH_ID_PATH_PARAM, path_params.get(PUSH_ID_PATH_PARAM)
            ),
            tenant=path_params.get(TENANT_PATH_PARAM) or DEFAULT_TENANT,
        )


class DeleteTaskPushNotificationConfigParams(TaskPushNotificationConfigParams):
    """
    Defines parameters for deleting a specific push notification configuration for a task.
    """


class GetTaskPushNotificationConfigParams(TaskPushNotificationConfigParams):
    """
    Defines parameters for fetching a specific push notification configuration for a task.
    """


class DeleteTaskPushNotificationConfigRequest(A2ABaseModel):
    """
    Represents a JSON-RPC request for the `tasks/pushNotificationConfig/delete` method.
    """

    id: str | int
    """
    The identifier for this request.
    """
    jsonrpc: Literal['2.0'] = '2.0'
    """
    The version of the JSON-RPC protocol. MUST be exactly "2.0".
    """
    method: Literal['tasks/pushNotificationConfig/delete'] = (
        DELETE_TASK_PUSH_NOTIFICATION_CONFIG_METHOD
    )
    """
    The method name. Must be 'tasks/pushNotificationConfig/delete'.
    """
    params: DeleteTaskPushNotificationConfigParams
    """
    The parameters identifying the push notification configuration to delete.
    """


class GetTaskPushNotificationConfigRequest(A2ABaseModel):
    """
    Represents a JSON-RPC request for the `tasks/pushNotificationConfig/get` method.
    """

    id: str | int
    """
    The identifier for this request.
    """
    jsonrpc: Literal['2.0'] = '2.0'
    """
    The version of the JSON-RPC protocol. MUST be exactly "2.0".
    """
    method: Literal['tasks/pushNotificationConfig/get'] = (
        GET_TASK_PUSH_NOTIFICATION_CONFIG_METHOD
    )
    """
    The method name. Must be 'tasks/pushNotificationConfig/get'.
    """
    params: GetTaskPushNotificationConfigParams
    """
    The parameters identifying the push notification configuration to retrieve.
    """
