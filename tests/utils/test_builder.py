import logging

import pytest

from a2a_spec.types import GetTaskPushNotificationConfigParams
from a2a_spec.utils.builder import TaskPushNotificationConfigParamsBuilder
from a2a_spec.utils.errors import InvalidArgumentError


def test_builder_builds_configured_class():
    builder = TaskPushNotificationConfigParamsBuilder(
        GetTaskPushNotificationConfigParams
    )
    params = builder.task_id('task-1').id('cfg-9').tenant('acme').build()
    assert type(params) is GetTaskPushNotificationConfigParams


def test_builder_can_build_repeatedly():
    builder = GetTaskPushNotificationConfigParams.builder()
    builder.task_id('task-1').id('cfg-9').tenant('')
    assert builder.build() == builder.build()
    assert builder.build() is not builder.build()


def test_builder_logs_missing_field(caplog):
    builder = GetTaskPushNotificationConfigParams.builder().task_id('task-1')
    with caplog.at_level(logging.DEBUG, logger='a2a_spec.utils.builder'):
        with pytest.raises(InvalidArgumentError):
            builder.build()
    assert 'Cannot build GetTaskPushNotificationConfigParams' in caplog.text
    assert 'id must not be None' in caplog.text
