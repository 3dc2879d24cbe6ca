"""Immutable view-state snapshots for the task list.

Each user action produces a new ``ViewState``; nothing is edited in place.
"""
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Tuple

LOADING = "loading"
ERROR = "error"
EMPTY = "empty"
POPULATED = "populated"


@dataclass(frozen=True)
class TaskItem:
    id: int
    title: str
    is_done: bool
    user_id: int

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "TaskItem":
        return cls(
            id=int(data["id"]),
            title=data.get("title") or "",
            is_done=bool(data.get("isDone", False)),
            user_id=int(data.get("userId", 0)),
        )


@dataclass(frozen=True)
class ViewState:
    tasks: Tuple[TaskItem, ...] = ()
    loading: bool = True
    error: Optional[str] = None
    success_message: Optional[str] = None

    # Create form
    new_title: str = ""
    creating: bool = False

    # Per-row controls
    editing_id: Optional[int] = None
    editing_title: str = ""
    deleting_id: Optional[int] = None
    toggling_id: Optional[int] = None

    @property
    def status(self) -> str:
        """Which screen to show: loading, error, empty or populated.

        An error only takes over the whole view when there is no list to
        show; otherwise it is a banner above the list.
        """
        if self.loading:
            return LOADING
        if self.error and not self.tasks:
            return ERROR
        if not self.tasks:
            return EMPTY
        return POPULATED

    def find(self, task_id: int) -> Optional[TaskItem]:
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None


def with_task_appended(state: ViewState, task: TaskItem) -> ViewState:
    return replace(state, tasks=state.tasks + (task,))


def with_task_replaced(state: ViewState, task: TaskItem) -> ViewState:
    return replace(state, tasks=tuple(task if t.id == task.id else t for t in state.tasks))


def with_task_removed(state: ViewState, task_id: int) -> ViewState:
    return replace(state, tasks=tuple(t for t in state.tasks if t.id != task_id))
