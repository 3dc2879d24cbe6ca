from sqlmodel import SQLModel, Field, Relationship
from typing import Optional


class Task(SQLModel, table=True):
    """Task model for tracked work items.

    The owning user is enforced by a foreign key on ``user_id``.
    """
    __tablename__ = "tasks"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=200)
    is_done: bool = Field(default=False)
    user_id: int = Field(foreign_key="users.id", index=True)

    # Relationship back to user
    user: Optional["User"] = Relationship(back_populates="tasks")
