import pytest

from a2a_spec._base import A2ABaseModel, to_camel_custom


class _Sample(A2ABaseModel):
    context_id: str
    history_length: int | None = None


class _Child(_Sample):
    extra_field: str = ''


@pytest.mark.parametrize(
    ('snake', 'camel'),
    [
        ('task_id', 'taskId'),
        ('id', 'id'),
        ('in_', 'in'),
        ('history_length', 'historyLength'),
    ],
)
def test_to_camel_custom(snake, camel):
    assert to_camel_custom(snake) == camel


def test_populate_by_name_and_alias():
    assert _Sample(context_id='c1') == _Sample(contextId='c1')


def test_serialize_by_alias():
    assert _Sample(context_id='c1', history_length=2).model_dump() == {
        'contextId': 'c1',
        'historyLength': 2,
    }


def test_get_and_set_by_alias():
    sample = _Sample(context_id='c1')
    assert sample.contextId == 'c1'
    sample.historyLength = 5
    assert sample.history_length == 5


def test_unknown_attribute_raises():
    sample = _Sample(context_id='c1')
    with pytest.raises(AttributeError, match='notAField'):
        _ = sample.notAField
    assert not hasattr(sample, 'notAField')


def test_subclass_alias_map_is_not_shared_with_parent():
    _Sample(context_id='c1').historyLength = 1
    child = _Child(context_id='c1')
    child.extraField = 'x'
    assert child.extra_field == 'x'
    assert child.extraField == 'x'
