"""General utility functions for validating A2A parameters."""

from typing import TypeVar

from a2a_spec.utils.errors import InvalidArgumentError


T = TypeVar('T')


def check_not_none_param(name: str, value: T | None) -> T:
    """Returns `value` unchanged, or raises if it is `None`.

    Args:
        name: The wire name of the parameter, used in the error message.
        value: The value to check.

    Returns:
        The value, narrowed to a non-optional type.

    Raises:
        InvalidArgumentError: If `value` is `None`.
    """
    if value is None:
        raise InvalidArgumentError(name)
    return value
