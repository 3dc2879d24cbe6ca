import pytest

from task_service.exceptions import InvalidTaskIdError
from task_service.schemas.task import TaskPayload
from task_service.validation import is_blank, require_positive_id, title_length, validate_task


class TestValidateTask:
    """Structural validation shared by create and update."""

    def test_valid_payload_has_no_errors(self):
        payload = TaskPayload(title="Buy milk", is_done=False, user_id=1)
        assert validate_task(payload) == []

    @pytest.mark.parametrize("title", ["", None])
    def test_missing_title_is_required(self, title):
        payload = TaskPayload(title=title, user_id=1)
        assert validate_task(payload) == ["Title is required"]

    def test_title_over_limit(self):
        payload = TaskPayload(title="x" * 201, user_id=1)
        assert validate_task(payload) == ["Title must be between 1 and 200 characters"]

    def test_title_at_limit_is_accepted(self):
        payload = TaskPayload(title="x" * 200, user_id=1)
        assert validate_task(payload) == []

    @pytest.mark.parametrize("user_id", [0, -5])
    def test_non_positive_user_id(self, user_id):
        payload = TaskPayload(title="Buy milk", user_id=user_id)
        assert validate_task(payload) == ["UserId must be a positive number"]

    def test_every_violation_is_reported(self):
        """All failing fields are listed, not just the first."""
        errors = validate_task(TaskPayload())
        assert errors == ["Title is required", "UserId must be a positive number"]

    def test_whitespace_title_is_required(self):
        payload = TaskPayload(title=" \t ", user_id=1)
        assert validate_task(payload) == ["Title is required"]

    def test_user_id_above_integer_range(self):
        payload = TaskPayload(title="Buy milk", user_id=2**31)
        assert validate_task(payload) == ["UserId must be a positive number"]

    def test_largest_user_id_is_accepted(self):
        payload = TaskPayload(title="Buy milk", user_id=2**31 - 1)
        assert validate_task(payload) == []

    def test_title_length_counts_utf16_units(self):
        """Characters outside the BMP count twice, so 101 emoji exceed 200."""
        assert title_length("\U0001F600") == 2
        assert validate_task(TaskPayload(title="\U0001F600" * 100, user_id=1)) == []
        assert validate_task(TaskPayload(title="\U0001F600" * 101, user_id=1)) == [
            "Title must be between 1 and 200 characters"
        ]


class TestTaskPayload:

    def test_defaults_when_fields_are_omitted(self):
        payload = TaskPayload.model_validate({})
        assert payload.title == ""
        assert payload.is_done is False
        assert payload.user_id == 0

    @pytest.mark.parametrize("body", [
        {"title": "a", "isDone": True, "userId": 3},
        {"Title": "a", "IsDone": True, "UserId": 3},
        {"title": "a", "is_done": True, "user_id": 3},
        {"TITLE": "a", "ISDONE": True, "USERID": 3},
    ])
    def test_property_names_are_case_insensitive(self, body):
        payload = TaskPayload.model_validate(body)
        assert (payload.title, payload.is_done, payload.user_id) == ("a", True, 3)


def test_is_blank():
    assert is_blank(None)
    assert is_blank("")
    assert is_blank(" \t\n")
    assert not is_blank(" a ")


def test_require_positive_id():
    require_positive_id(1)
    with pytest.raises(InvalidTaskIdError):
        require_positive_id(0)
    with pytest.raises(InvalidTaskIdError):
        require_positive_id(-1)
