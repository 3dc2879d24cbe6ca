"""Turn request failures into the messages the list view shows."""
import logging

import httpx

logger = logging.getLogger(__name__)

ENDPOINT_NOT_FOUND = "Tasks endpoint not found. Please check if the API is running."
SERVER_ERROR = "Server error occurred. Please try again later."
INVALID_REQUEST = "Invalid request. Please check your connection settings."
CONNECTION_FAILED = (
    "Unable to connect to the server. "
    "Please check if the backend is running and your connection."
)
UNEXPECTED = "An unexpected error occurred. Please try again."


def describe_load_error(exc: Exception) -> str:
    """Classify a failure of the initial list request."""
    if isinstance(exc, httpx.HTTPStatusError):
        code = exc.response.status_code
        if code == 404:
            return ENDPOINT_NOT_FOUND
        if code == 500:
            return SERVER_ERROR
        if 400 <= code < 500:
            return INVALID_REQUEST
        return f"An error occurred ({code}). Please try again."
    if isinstance(exc, httpx.RequestError):
        return CONNECTION_FAILED
    logger.error(f"Unexpected error while loading tasks: {exc!r}")
    return UNEXPECTED


def _error_body(exc: Exception) -> dict:
    if not isinstance(exc, httpx.HTTPStatusError):
        return {}
    try:
        body = exc.response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def describe_action_error(exc: Exception, fallback: str, with_details: bool = False) -> str:
    """
    Message for a failed create, update, toggle or delete.

    Uses the server's ``message`` when there is one. With ``with_details``
    the enumerated validation ``errors`` are appended.
    """
    body = _error_body(exc)
    message = body.get("message")
    errors = body.get("errors") or []

    if message:
        if with_details and errors:
            return f"{message}: {', '.join(errors)}"
        return message
    if with_details and errors:
        return f"Validation failed: {', '.join(errors)}"
    return fallback
