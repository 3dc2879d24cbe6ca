"""Structural checks for task payloads.

Kept apart from the table and schema definitions so create and update run
exactly the same rules before touching the database.
"""
from typing import List, Optional

from .config import MAX_ID, MAX_TITLE_LENGTH
from .exceptions import InvalidTaskIdError
from .schemas.task import TaskPayload


def title_length(title: str) -> int:
    """Length in UTF-16 code units, so an emoji counts as two."""
    return len(title.encode("utf-16-le")) // 2


def validate_task(payload: TaskPayload) -> List[str]:
    """Return every field-level violation in ``payload`` (empty when valid)."""
    errors = []

    if is_blank(payload.title):
        errors.append("Title is required")
    elif title_length(payload.title) > MAX_TITLE_LENGTH:
        errors.append(f"Title must be between 1 and {MAX_TITLE_LENGTH} characters")

    if not 1 <= payload.user_id <= MAX_ID:
        errors.append("UserId must be a positive number")

    return errors


def is_blank(title: Optional[str]) -> bool:
    return title is None or not title.strip()


def require_positive_id(task_id: int) -> None:
    if task_id <= 0:
        raise InvalidTaskIdError()
