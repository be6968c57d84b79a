"""Shared utilities."""

from task_manager.utils.logging import get_logger, setup_logging
from task_manager.utils.validators import (
    InvalidEnumValueError,
    UnknownEnumError,
    enum_values,
    is_valid,
    parse_enum,
    resolve_enum,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "InvalidEnumValueError",
    "UnknownEnumError",
    "enum_values",
    "is_valid",
    "parse_enum",
    "resolve_enum",
]
