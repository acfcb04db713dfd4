"""
Loading task descriptors from a JSON tasks file.

Example tasks.json:
    [
      {"name": "backend-api", "prompt": "Create POST /api/auth/login endpoint"},
      {"name": "frontend-ui", "prompt": "Build login form component", "baseBranch": "develop"}
    ]
"""

from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from .manager import WorktreeError
from .models import TaskDescriptor

_TASK_LIST = TypeAdapter(list[TaskDescriptor])


class TaskFileError(WorktreeError):
    """Raised when a tasks file cannot be read or parsed."""

    pass


def parse_tasks(content: str | bytes) -> list[TaskDescriptor]:
    """
    Parse a JSON array of task descriptors.

    Raises:
        TaskFileError: If the content is not a JSON array of tasks with names
    """
    try:
        return _TASK_LIST.validate_json(content)
    except ValidationError as e:
        raise TaskFileError(f"Invalid tasks file: {e}") from e


def load_tasks(path: Path) -> list[TaskDescriptor]:
    """
    Read task descriptors from `path`, preserving file order.

    Raises:
        TaskFileError: If the file cannot be read or parsed
    """
    try:
        content = path.read_bytes()
    except OSError as e:
        raise TaskFileError(f"Cannot read tasks file {path}: {e}") from e
    return parse_tasks(content)
