# =============================================================================
# task_service/exceptions.py - Error taxonomy and handlers
# =============================================================================
# Every handled failure leaves the API as {"message", "errors"?, "error"?}.
# Persistence errors are translated at the session boundary by
# translate_persistence_errors() so routers only deal with these classes.
# =============================================================================

import logging
from contextlib import contextmanager
from typing import Any, List, Optional

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


class TaskServiceError(Exception):
    """
    Base exception for the task service.

    Carries the HTTP status code and the pieces of the error body.
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        errors: Optional[List[str]] = None,
        error: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.errors = errors
        self.error = error

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result: dict[str, Any] = {"message": self.message}
        if self.errors:
            result["errors"] = self.errors
        if self.error:
            result["error"] = self.error
        return result


# =============================================================================
# Client input
# =============================================================================

class ValidationFailedError(TaskServiceError):
    """Raised with every structural violation found in a request."""

    def __init__(self, errors: List[str]):
        super().__init__(
            message="Validation failed",
            status_code=status.HTTP_400_BAD_REQUEST,
            errors=errors,
        )


class BlankTitleError(TaskServiceError):
    """Raised when a title is only whitespace."""

    def __init__(self):
        super().__init__(
            message="Title cannot be empty or whitespace",
            status_code=status.HTTP_400_BAD_REQUEST,
        )


class InvalidTaskIdError(TaskServiceError):
    """Raised for a non-positive task id, before any query runs."""

    def __init__(self):
        super().__init__(
            message="Invalid task ID. ID must be a positive number.",
            status_code=status.HTTP_400_BAD_REQUEST,
        )


# =============================================================================
# Referential integrity
# =============================================================================

class UserNotFoundError(TaskServiceError):
    """Raised when the owning user of a task does not exist."""

    def __init__(self, user_id: int):
        super().__init__(
            message=f"User with ID {user_id} does not exist",
            status_code=status.HTTP_400_BAD_REQUEST,
        )
        self.user_id = user_id


class InvalidOwnerReferenceError(TaskServiceError):
    """Raised when the database rejects the owning user foreign key."""

    def __init__(self):
        super().__init__(
            message="Invalid UserId. The specified user does not exist.",
            status_code=status.HTTP_400_BAD_REQUEST,
        )


# =============================================================================
# Lookup and persistence
# =============================================================================

class TaskNotFoundError(TaskServiceError):
    """Raised when a task id has no matching row."""

    def __init__(self, task_id: int):
        super().__init__(
            message=f"Task with ID {task_id} not found",
            status_code=status.HTTP_404_NOT_FOUND,
        )
        self.task_id = task_id


class PersistenceError(TaskServiceError):
    """Raised for database faults; ``error`` carries the detail."""

    def __init__(self, action: str, error: str):
        super().__init__(
            message=f"An error occurred while {action}",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            error=error,
        )


def _is_foreign_key_violation(exc: IntegrityError) -> bool:
    # SQLite: "FOREIGN KEY constraint failed"
    # Postgres: "violates foreign key constraint"
    return "foreign key" in str(exc.orig).lower()


@contextmanager
def translate_persistence_errors(
    db: Session,
    action: str,
    foreign_key_means_bad_owner: bool = False,
):
    """
    Map anything the persistence layer raises onto TaskServiceError.

    Args:
        db: The request's session, rolled back on database errors
        action: Completes "An error occurred while ..." in the response
        foreign_key_means_bad_owner: Report foreign key violations as an
            invalid owning user (400) instead of a server error
    """
    try:
        yield
    except TaskServiceError:
        raise
    except IntegrityError as e:
        db.rollback()
        logger.error(f"Database error occurred while {action}: {e.orig}")
        if foreign_key_means_bad_owner and _is_foreign_key_violation(e):
            raise InvalidOwnerReferenceError() from e
        raise PersistenceError(action, "Database constraint violation") from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception(f"Database error occurred while {action}")
        raise PersistenceError(action, str(e)) from e
    except Exception as e:
        logger.exception(f"Unexpected error occurred while {action}")
        raise PersistenceError(action, str(e)) from e


# =============================================================================
# Exception Handlers
# =============================================================================

async def task_service_exception_handler(
    request: Request,
    exc: TaskServiceError
) -> JSONResponse:
    """Convert TaskServiceError to JSON response."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


def _describe_request_error(error: dict) -> str:
    loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "path", "query")]
    if not loc:
        if error.get("type") == "missing":
            return "Task data is required"
        return error.get("msg", "Invalid request body")
    return f"{loc[-1]}: {error.get('msg', 'invalid value')}"


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request parsing errors (bad JSON, wrong types, bad path ids).

    Rendered as 400 with the same shape as structural validation failures.
    """
    errors = [_describe_request_error(error) for error in exc.errors()]
    logger.warning(f"Request validation failed for {request.method} {request.url.path}: {errors}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Validation failed", "errors": errors},
    )
