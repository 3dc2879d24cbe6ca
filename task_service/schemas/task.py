from typing import Any, List, Optional

from pydantic import BaseModel, model_validator
from pydantic.alias_generators import to_camel


class TaskBase(BaseModel):
    """Base task schema with the mutable fields.

    Fields are exposed in camelCase (``isDone``, ``userId``) and may also be
    populated by their Python names.
    """
    title: Optional[str] = ""
    is_done: bool = False
    user_id: int = 0

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class TaskPayload(TaskBase):
    """Request body for create and update.

    Update is a full replace, so any field left out of the body falls back to
    the defaults above rather than keeping the stored value.
    """

    @model_validator(mode="before")
    @classmethod
    def match_keys_case_insensitively(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        aliases = {}
        for name, field in cls.model_fields.items():
            alias = field.alias or name
            aliases[alias.lower()] = alias
            aliases[name.lower()] = alias
        return {aliases.get(str(key).lower(), key): value for key, value in data.items()}


class TaskRead(TaskBase):
    """Complete task schema as returned by the API."""
    id: int
    title: str

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class ErrorResponse(BaseModel):
    """Body returned for every handled failure."""
    message: str
    errors: Optional[List[str]] = None
    error: Optional[str] = None
