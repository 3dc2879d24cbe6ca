"""Print the task list from the configured API: ``python -m task_client``."""
import logging
import sys

from .api import TaskApi
from .config import TASKS_API_URL
from .render import render
from .state import ERROR
from .view import TaskListView


def main() -> int:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s - %(message)s")
    api = TaskApi(base_url=TASKS_API_URL)
    try:
        view = TaskListView(api)
        state = view.load()
        print(render(state))
    finally:
        api.close()
    return 1 if state.status == ERROR else 0


if __name__ == "__main__":
    sys.exit(main())
