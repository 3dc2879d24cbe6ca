"""Plain-text rendering of a ``ViewState`` snapshot."""
from typing import List

from .config import MAX_TITLE_LENGTH
from .state import EMPTY, ERROR, LOADING, TaskItem, ViewState

EMPTY_MESSAGE = "No tasks found. Create your first task to get started!"


def _render_task(state: ViewState, task: TaskItem) -> List[str]:
    if state.editing_id == task.id:
        lines = [f"  [{task.id}] > {state.editing_title}  (Enter to save, Esc to cancel)"]
    else:
        mark = "✅" if task.is_done else "❌"
        busy = " ..." if state.toggling_id == task.id else ""
        lines = [f"  [{task.id}] {task.title} {mark}{busy}"]

    if state.deleting_id == task.id:
        lines.append(f'      Are you sure you want to delete "{task.title}"?')
        lines.append("      This action cannot be undone. [Delete] [Cancel]")
    return lines


def render(state: ViewState) -> str:
    lines = ["Tasks", ""]

    if state.status == LOADING:
        lines.append("Loading tasks...")
        return "\n".join(lines)

    if state.status == ERROR:
        lines.append(f"⚠️  {state.error}")
        lines.append("[Retry]")
        return "\n".join(lines)

    if state.success_message:
        lines.append(f"✓ {state.success_message}")
    if state.error:
        lines.append(f"⚠️  {state.error}")

    if state.creating:
        lines.append("Creating...")
    elif state.new_title:
        lines.append(f"New task: {state.new_title}")
        lines.append(f"{len(state.new_title)}/{MAX_TITLE_LENGTH} characters")

    if state.status == EMPTY:
        lines.append(EMPTY_MESSAGE)
    else:
        for task in state.tasks:
            lines.extend(_render_task(state, task))

    return "\n".join(lines)
