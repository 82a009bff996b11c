import pytest

from a2a_spec.utils.errors import InvalidArgumentError
from a2a_spec.utils.helpers import check_not_none_param


@pytest.mark.parametrize('value', ['task-1', '', 0, False, []])
def test_check_not_none_param_returns_value(value):
    assert check_not_none_param('taskId', value) is value


def test_check_not_none_param_raises_on_none():
    with pytest.raises(InvalidArgumentError, match='tenant must not be None'):
        check_not_none_param('tenant', None)


def test_invalid_argument_error_custom_message():
    err = InvalidArgumentError('id', 'id is required')
    assert err.param_name == 'id'
    assert err.message == 'id is required'
    assert str(err) == 'id is required'
