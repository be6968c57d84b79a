"""Validation of raw values against the domain enumerations."""

from enum import Enum
from typing import Any, TypeVar

from task_manager.models.enums import ENUM_REGISTRY
from task_manager.utils.logging import get_logger

logger = get_logger(__name__)

E = TypeVar("E", bound=Enum)


class InvalidEnumValueError(ValueError):
    """Raised when a value is not a member of an enumeration."""

    def __init__(self, enum_name: str, value: Any, allowed: list[str]) -> None:
        self.enum_name = enum_name
        self.value = value
        self.allowed = allowed
        super().__init__(
            f"Invalid {enum_name} value {value!r}; expected one of: {', '.join(allowed)}"
        )


class UnknownEnumError(KeyError):
    """Raised when an enumeration name is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown enumeration '{self.name}'; expected one of: {', '.join(ENUM_REGISTRY)}"


def enum_values(enum_cls: type[Enum]) -> list[str]:
    """Return the allowed values of an enumeration in definition order."""
    return [member.value for member in enum_cls]


def is_valid(enum_cls: type[Enum], value: Any) -> bool:
    """
    Check whether a value belongs to an enumeration.

    Matching is exact: case and surrounding whitespace are significant.

    Examples:
        >>> from task_manager.models import TaskStatus
        >>> is_valid(TaskStatus, "in-progress")
        True
        >>> is_valid(TaskStatus, "IN_PROGRESS")
        False
    """
    if isinstance(value, enum_cls):
        return True
    if not isinstance(value, str):
        return False
    return value in enum_values(enum_cls)


def parse_enum(enum_cls: type[E], value: Any) -> E:
    """Convert a raw value to an enumeration member.

    Args:
        enum_cls: Target enumeration
        value: Member or member value

    Returns:
        The matching member

    Raises:
        InvalidEnumValueError: If value is not a member of enum_cls
    """
    if not is_valid(enum_cls, value):
        logger.warning("enum_value_rejected", enum=enum_cls.__name__, value=repr(value))
        raise InvalidEnumValueError(enum_cls.__name__, value, enum_values(enum_cls))
    return enum_cls(value)


def resolve_enum(name: str) -> type[Enum]:
    """Look up a registered enumeration by its kebab-case name.

    Raises:
        UnknownEnumError: If name is not registered
    """
    try:
        return ENUM_REGISTRY[name]
    except KeyError:
        logger.warning("unknown_enum_requested", name=name)
        raise UnknownEnumError(name) from None
