from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def to_camel_custom(snake: str) -> str:
    """Convert a snake_case string to camelCase.

    Args:
        snake: The string to convert.

    Returns:
        The converted camelCase string.
    """
    # Trailing underscores mark names that shadow builtins, like 'id_'.
    if snake.endswith('_'):
        snake = snake.rstrip('_')
    return to_camel(snake)


class A2ABaseModel(BaseModel):
    """Base class for shared behavior across A2A data models.

    Fields are populated by either their snake_case name or their camelCase
    wire alias, and always serialized by alias.

    Attributes can also be read and assigned through their camelCase alias.
    Frozen subclasses still reject assignment through either name.
    """

    model_config = ConfigDict(
        # SEE: https://docs.pydantic.dev/latest/api/config/#pydantic.config.ConfigDict.validate_by_name
        validate_by_name=True,
        validate_by_alias=True,
        serialize_by_alias=True,
        alias_generator=to_camel_custom,
    )

    # Alias -> field_name, built lazily once per class.
    _alias_to_field_name_map: ClassVar[dict[str, str] | None] = None

    @classmethod
    def _initialize_alias_map(cls) -> None:
        """Build and cache the alias-to-field-name mapping for this class."""
        # Look in the class's own namespace so subclasses never reuse a
        # mapping cached on a parent with different fields.
        if cls.__dict__.get('_alias_to_field_name_map') is None:
            cls._alias_to_field_name_map = {
                field.alias: field_name
                for field_name, field in cls.model_fields.items()
                if field.alias is not None
            }

    def __setattr__(self, name: str, value: Any) -> None:
        """Allow setting attributes via their camelCase alias."""
        self.__class__._initialize_alias_map()  # noqa: SLF001
        assert self.__class__._alias_to_field_name_map is not None  # noqa: SLF001

        field_name = self.__class__._alias_to_field_name_map.get(name)  # noqa: SLF001
        super().__setattr__(field_name or name, value)

    def __getattr__(self, name: str) -> Any:
        """Allow getting attributes via their camelCase alias.

        Only called as a fallback when `name` is not found through the normal
        attribute lookup.
        """
        self.__class__._initialize_alias_map()  # noqa: SLF001
        assert self.__class__._alias_to_field_name_map is not None  # noqa: SLF001

        field_name = self.__class__._alias_to_field_name_map.get(name)  # noqa: SLF001
        if field_name and field_name != name:
            return getattr(self, field_name)

        # Unknown names must keep raising AttributeError so hasattr() and
        # getattr() defaults behave normally.
        raise AttributeError(
            f"'{self.__class__.__name__}' object has no attribute '{name}'"
        )
