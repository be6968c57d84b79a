"""Domain models for the task management system."""

from task_manager.models.enums import (
    ENUM_REGISTRY,
    ProjectStatus,
    TaskPriority,
    TaskStatus,
    UserRole,
)

__all__ = [
    "ENUM_REGISTRY",
    "ProjectStatus",
    "TaskPriority",
    "TaskStatus",
    "UserRole",
]
