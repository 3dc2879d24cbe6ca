import logging
from typing import List, Optional

import httpx

from .config import TASKS_API_URL
from .state import TaskItem

logger = logging.getLogger(__name__)


class TaskApi:
    """
    Thin wrapper over the /tasks resource.

    Every call raises ``httpx.HTTPStatusError`` for a non-2xx response and
    ``httpx.RequestError`` when no response arrived or a returned task cannot
    be decoded (``httpx.DecodingError``). Nothing is retried.
    """

    def __init__(self, client: Optional[httpx.Client] = None, base_url: str = TASKS_API_URL):
        self._client = client or httpx.Client(base_url=base_url)

    def close(self) -> None:
        self._client.close()

    def _send(self, method: str, path: str, **kwargs) -> httpx.Response:
        logger.debug("%s %s", method, path)
        response = self._client.request(method, path, **kwargs)
        response.raise_for_status()
        return response

    def _task(self, response: httpx.Response) -> TaskItem:
        try:
            return TaskItem.from_json(response.json())
        except (ValueError, KeyError, TypeError) as e:
            raise httpx.DecodingError(f"Malformed task in response: {e!r}", request=response.request) from e

    def list_tasks(self) -> List[TaskItem]:
        data = self._send("GET", "/tasks").json()
        # A null or non-list body is treated as no tasks.
        if not isinstance(data, list):
            return []
        return [TaskItem.from_json(item) for item in data]

    def get_task(self, task_id: int) -> TaskItem:
        return self._task(self._send("GET", f"/tasks/{task_id}"))

    def create_task(self, title: str, is_done: bool, user_id: int) -> TaskItem:
        body = {"title": title, "isDone": is_done, "userId": user_id}
        return self._task(self._send("POST", "/tasks", json=body))

    def update_task(self, task_id: int, title: str, is_done: bool, user_id: int) -> TaskItem:
        body = {"title": title, "isDone": is_done, "userId": user_id}
        return self._task(self._send("PUT", f"/tasks/{task_id}", json=body))

    def delete_task(self, task_id: int) -> None:
        self._send("DELETE", f"/tasks/{task_id}")
