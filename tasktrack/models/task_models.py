"""
Pydantic models for tasks.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Task(BaseModel):
    """A stored task.

    ``id`` and ``created_at`` are assigned by the store on creation and are
    never changed afterwards.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = ""
    title: str
    description: str = ""
    status: str = ""
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")


class TaskPayload(BaseModel):
    """Request body for creating or updating a task.

    Unknown keys (including ``id`` and ``createdAt``) are ignored.
    """

    title: str = Field(..., min_length=1, description="Task title")
    description: str = Field("", description="Task description")
    status: str = Field("pending", description="Free-form status tag")

    def to_task(self, task_id: str = "") -> Task:
        return Task(
            id=task_id,
            title=self.title,
            description=self.description,
            status=self.status,
        )
