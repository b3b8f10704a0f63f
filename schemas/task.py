from typing import Literal, Optional, Union

from pydantic import BaseModel, StrictBool, field_validator

from domain.entities import TIMESTAMP_FORMAT, Task


class TaskCreate(BaseModel):
    # Left optional so a missing field reaches the use case and gets the same
    # error payload as blank text.
    text: Optional[str] = None


class TaskUpdate(BaseModel):
    text: Optional[str] = None
    completed: Optional[Union[StrictBool, Literal[0, 1]]] = None

    @field_validator("completed", mode="before")
    @classmethod
    def completed_is_flag(cls, value):
        # Only JSON booleans and the integers 0 and 1; no "yes", "1" or 1.0.
        if value is None or isinstance(value, bool) or (type(value) is int and value in (0, 1)):
            return value
        raise ValueError("completed must be 0, 1, true or false")

    def changes(self) -> dict:
        """Fields present in the request body. An explicit null counts as absent."""
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
            if getattr(self, name) is not None
        }


class TaskResponse(BaseModel):
    id: int
    text: str
    completed: int
    created_at: str

    @classmethod
    def from_entity(cls, task: Task) -> "TaskResponse":
        return cls(
            id=task.id,
            text=task.text,
            completed=1 if task.completed else 0,
            created_at=task.created_at.strftime(TIMESTAMP_FORMAT)
        )
