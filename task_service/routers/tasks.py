import logging
from typing import List

from fastapi import APIRouter, Depends, Path, Request, Response, status
from sqlalchemy.orm import Session

from ..config import MAX_ID
from ..database import get_db
from ..exceptions import (
    BlankTitleError,
    TaskNotFoundError,
    UserNotFoundError,
    ValidationFailedError,
    translate_persistence_errors,
)
from ..models import Task as TaskModel, User
from ..schemas.task import ErrorResponse, TaskPayload, TaskRead
from ..validation import is_blank, require_positive_id, validate_task

logger = logging.getLogger(__name__)

router = APIRouter()

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def _check_payload(payload: TaskPayload, operation: str) -> None:
    errors = validate_task(payload)
    if errors:
        logger.warning(f"Validation failed for task {operation}: {', '.join(errors)}")
        raise ValidationFailedError(errors)
    if is_blank(payload.title):
        raise BlankTitleError()


def _user_exists(db: Session, user_id: int) -> bool:
    return db.query(User.id).filter(User.id == user_id).first() is not None


def _find_task(db: Session, task_id: int) -> TaskModel:
    task = db.query(TaskModel).filter(TaskModel.id == task_id).first()
    if not task:
        logger.warning(f"Task with ID {task_id} not found")
        raise TaskNotFoundError(task_id)
    return task


@router.get("", response_model=List[TaskRead], responses={500: {"model": ErrorResponse}})
def get_tasks(db: Session = Depends(get_db)):
    """Get every task, in the database's default order."""
    with translate_persistence_errors(db, "retrieving tasks"):
        logger.info("Fetching all tasks")
        tasks = db.query(TaskModel).all()
        logger.info(f"Successfully retrieved {len(tasks)} tasks")
        return tasks


@router.get("/{task_id}", response_model=TaskRead, responses=_ERROR_RESPONSES)
def get_task(task_id: int = Path(le=MAX_ID), db: Session = Depends(get_db)):
    """Get a specific task by ID."""
    require_positive_id(task_id)

    with translate_persistence_errors(db, "retrieving the task"):
        logger.info(f"Fetching task with ID {task_id}")
        task = _find_task(db, task_id)
        return task


@router.post(
    "",
    response_model=TaskRead,
    status_code=status.HTTP_201_CREATED,
    responses=_ERROR_RESPONSES,
)
def create_task(
    request: Request,
    response: Response,
    payload: TaskPayload,
    db: Session = Depends(get_db),
):
    """Create a new task for an existing user.

    Responds with the stored task and a Location header for it.
    """
    _check_payload(payload, "creation")

    with translate_persistence_errors(db, "creating the task", foreign_key_means_bad_owner=True):
        if not _user_exists(db, payload.user_id):
            logger.warning(f"Attempted to create task with non-existent UserId {payload.user_id}")
            raise UserNotFoundError(payload.user_id)

        logger.info(f"Creating new task: {payload.title} for UserId {payload.user_id}")
        task = TaskModel(
            title=payload.title,
            is_done=payload.is_done,
            user_id=payload.user_id,
        )
        db.add(task)
        db.commit()
        db.refresh(task)

    logger.info(f"Successfully created task with ID {task.id}")
    response.headers["Location"] = str(request.url_for("get_task", task_id=task.id))
    return task


@router.put("/{task_id}", response_model=TaskRead, responses=_ERROR_RESPONSES)
def update_task(
    *,
    task_id: int = Path(le=MAX_ID),
    payload: TaskPayload,
    db: Session = Depends(get_db),
):
    """Replace a task's title, completion flag and owner.

    All three fields are overwritten from the body, sent or not.
    """
    require_positive_id(task_id)
    _check_payload(payload, "update")

    with translate_persistence_errors(db, "updating the task", foreign_key_means_bad_owner=True):
        logger.info(f"Updating task with ID {task_id}")
        task = _find_task(db, task_id)

        if task.user_id != payload.user_id and not _user_exists(db, payload.user_id):
            logger.warning(f"Attempted to update task with non-existent UserId {payload.user_id}")
            raise UserNotFoundError(payload.user_id)

        task.title = payload.title
        task.is_done = payload.is_done
        task.user_id = payload.user_id

        db.commit()
        db.refresh(task)

    logger.info(f"Successfully updated task with ID {task_id}")
    return task


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT, responses=_ERROR_RESPONSES)
def delete_task(task_id: int = Path(le=MAX_ID), db: Session = Depends(get_db)):
    """Delete a specific task."""
    require_positive_id(task_id)

    with translate_persistence_errors(db, "deleting the task"):
        logger.info(f"Deleting task with ID {task_id}")
        task = _find_task(db, task_id)
        db.delete(task)
        db.commit()

    logger.info(f"Successfully deleted task with ID {task_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
