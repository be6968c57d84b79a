"""Domain vocabulary for the task management system."""

from enum import Enum


class _ValueEnum(str, Enum):
    """String enum whose str() is the member value."""

    def __str__(self) -> str:
        return self.value


class TaskStatus(_ValueEnum):
    """Lifecycle state of a task."""

    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class TaskPriority(_ValueEnum):
    """Priority level of a task."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class UserRole(_ValueEnum):
    """Access level of a user."""

    ADMIN = "admin"
    MANAGER = "manager"
    USER = "user"


class ProjectStatus(_ValueEnum):
    """Lifecycle state of a project."""

    ACTIVE = "active"
    ON_HOLD = "on-hold"
    COMPLETED = "completed"
    ARCHIVED = "archived"


# Lookup by CLI-facing name
ENUM_REGISTRY: dict[str, type[_ValueEnum]] = {
    "task-status": TaskStatus,
    "task-priority": TaskPriority,
    "user-role": UserRole,
    "project-status": ProjectStatus,
}
