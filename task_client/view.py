import logging
from dataclasses import replace
from typing import Callable, List, Optional

import httpx

from .api import TaskApi
from .config import DEFAULT_USER_ID, MAX_TITLE_LENGTH
from .errors import describe_action_error, describe_load_error
from .state import ViewState, with_task_appended, with_task_removed, with_task_replaced

logger = logging.getLogger(__name__)

Listener = Callable[[ViewState], None]


def check_title(title: str) -> Optional[str]:
    """Client-side title check, run on the trimmed title before sending."""
    if not title:
        return "Task title cannot be empty"
    # Counted in UTF-16 code units, as the server does.
    if len(title.encode("utf-16-le")) // 2 > MAX_TITLE_LENGTH:
        return f"Task title must be {MAX_TITLE_LENGTH} characters or less"
    return None


class TaskListView:
    """
    Drives the task list through a one-way update cycle.

    Every action reads the current snapshot, talks to the API at most once and
    publishes a new snapshot to subscribers. Successful mutations patch the
    local list from the server response without re-fetching, so the list can
    drift from the server if someone else edits the same tasks.
    """

    def __init__(self, api: TaskApi, user_id: int = DEFAULT_USER_ID):
        self.api = api
        self.user_id = user_id
        self.state = ViewState()
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def _commit(self, state: ViewState) -> ViewState:
        self.state = state
        for listener in list(self._listeners):
            listener(state)
        return state

    def _fail(self, message: str, **changes) -> ViewState:
        logger.warning(message)
        return self._commit(replace(self.state, error=message, **changes))

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    def load(self) -> ViewState:
        self._commit(replace(self.state, loading=True, error=None))
        try:
            tasks = self.api.list_tasks()
        except Exception as e:
            return self._fail(describe_load_error(e), loading=False, tasks=())
        logger.info(f"Loaded {len(tasks)} tasks")
        return self._commit(replace(self.state, loading=False, tasks=tuple(tasks)))

    retry = load

    # -------------------------------------------------------------------------
    # Create
    # -------------------------------------------------------------------------

    def set_new_title(self, title: str) -> ViewState:
        return self._commit(replace(self.state, new_title=title))

    def create(self) -> ViewState:
        title = self.state.new_title.strip()
        problem = check_title(title)
        if problem:
            return self._fail(problem)

        self._commit(replace(self.state, creating=True, error=None))
        try:
            task = self.api.create_task(title, False, self.user_id)
        except httpx.HTTPError as e:
            return self._fail(
                describe_action_error(e, "Failed to create task", with_details=True),
                creating=False,
            )

        state = with_task_appended(self.state, task)
        return self._commit(replace(
            state,
            creating=False,
            new_title="",
            success_message="Task created successfully!",
        ))

    # -------------------------------------------------------------------------
    # Toggle
    # -------------------------------------------------------------------------

    def toggle(self, task_id: int) -> ViewState:
        task = self.state.find(task_id)
        if task is None:
            return self.state

        self._commit(replace(self.state, toggling_id=task_id, error=None))
        try:
            updated = self.api.update_task(task.id, task.title, not task.is_done, task.user_id)
        except httpx.HTTPError as e:
            return self._fail(describe_action_error(e, "Failed to update task"), toggling_id=None)

        state = with_task_replaced(self.state, updated)
        label = "completed" if updated.is_done else "pending"
        return self._commit(replace(
            state,
            toggling_id=None,
            success_message=f"Task marked as {label}!",
        ))

    # -------------------------------------------------------------------------
    # Inline edit
    # -------------------------------------------------------------------------

    def start_editing(self, task_id: int) -> ViewState:
        task = self.state.find(task_id)
        if task is None:
            return self.state
        return self._commit(replace(self.state, editing_id=task.id, editing_title=task.title))

    def set_editing_title(self, title: str) -> ViewState:
        return self._commit(replace(self.state, editing_title=title))

    def cancel_editing(self) -> ViewState:
        return self._commit(replace(self.state, editing_id=None, editing_title=""))

    def save_edit(self) -> ViewState:
        title = self.state.editing_title.strip()
        problem = check_title(title)
        if problem:
            return self._fail(problem)

        task = self.state.find(self.state.editing_id) if self.state.editing_id is not None else None
        if task is None:
            return self.state

        self._commit(replace(self.state, error=None))
        try:
            updated = self.api.update_task(task.id, title, task.is_done, task.user_id)
        except httpx.HTTPError as e:
            return self._fail(describe_action_error(e, "Failed to update task", with_details=True))

        state = with_task_replaced(self.state, updated)
        return self._commit(replace(
            state,
            editing_id=None,
            editing_title="",
            success_message="Task updated successfully!",
        ))

    # -------------------------------------------------------------------------
    # Delete (with confirmation)
    # -------------------------------------------------------------------------

    def request_delete(self, task_id: int) -> ViewState:
        return self._commit(replace(self.state, deleting_id=task_id))

    def cancel_delete(self) -> ViewState:
        return self._commit(replace(self.state, deleting_id=None))

    def confirm_delete(self) -> ViewState:
        task_id = self.state.deleting_id
        if task_id is None:
            return self.state

        self._commit(replace(self.state, error=None))
        try:
            self.api.delete_task(task_id)
        except httpx.HTTPError as e:
            return self._fail(describe_action_error(e, "Failed to delete task"), deleting_id=None)

        state = with_task_removed(self.state, task_id)
        return self._commit(replace(
            state,
            deleting_id=None,
            success_message="Task deleted successfully!",
        ))

    # -------------------------------------------------------------------------
    # Banners
    # -------------------------------------------------------------------------

    def dismiss_error(self) -> ViewState:
        return self._commit(replace(self.state, error=None))

    def dismiss_success(self) -> ViewState:
        return self._commit(replace(self.state, success_message=None))
