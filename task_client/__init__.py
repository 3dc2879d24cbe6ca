from .api import TaskApi
from .state import TaskItem, ViewState
from .view import TaskListView

__all__ = ["TaskApi", "TaskItem", "ViewState", "TaskListView"]
