"""Fluent builder shared by the push notification config parameter records."""

import logging

from typing import TYPE_CHECKING, Generic, TypeVar

from a2a_spec.utils.errors import InvalidArgumentError
from a2a_spec.utils.helpers import check_not_none_param


if TYPE_CHECKING:
    from typing_extensions import Self

    from a2a_spec.types import TaskPushNotificationConfigParams


logger = logging.getLogger(__name__)

ParamsT = TypeVar('ParamsT', bound='TaskPushNotificationConfigParams')


class TaskPushNotificationConfigParamsBuilder(Generic[ParamsT]):
    """Stages the fields of a parameter record until `build` is called.

    All fields start unset. Unlike constructing the record directly, the
    builder does not default `tenant`; it must be set explicitly.
    """

    def __init__(self, params_cls: type[ParamsT]) -> None:
        """Initializes the builder.

        Args:
            params_cls: The parameter record class that `build` instantiates.
        """
        self._params_cls = params_cls
        self._task_id: str | None = None
        self._id: str | None = None
        self._tenant: str | None = None

    def task_id(self, task_id: str) -> 'Self':
        """Sets the task identifier."""
        self._task_id = task_id
        return self

    def id(self, id: str) -> 'Self':  # noqa: A002
        """Sets the push notification configuration identifier."""
        self._id = id
        return self

    def tenant(self, tenant: str) -> 'Self':
        """Sets the tenant."""
        self._tenant = tenant
        return self

    def build(self) -> ParamsT:
        """Builds a new parameter record from the staged values.

        Returns:
            A new, immutable instance of the configured record class.

        Raises:
            InvalidArgumentError: If `taskId`, `id` or `tenant` was never set.
        """
        try:
            return self._params_cls(
                task_id=check_not_none_param('taskId', self._task_id),
                id=check_not_none_param('id', self._id),
                tenant=check_not_none_param('tenant', self._tenant),
            )
        except InvalidArgumentError as e:
            logger.debug(
                'Cannot build %s: %s', self._params_cls.__name__, e.message
            )
            raise
