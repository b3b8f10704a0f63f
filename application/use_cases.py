import logging
from typing import List

from domain.entities import Task, UNSET
from domain.errors import NotFoundError, ValidationError
from infrastructure.database import Database

logger = logging.getLogger(__name__)


def _clean_text(text, message: str) -> str:
    if not isinstance(text, str) or not text.strip():
        raise ValidationError(message)
    return text.strip()


class TaskUseCases:
    def __init__(self, db: Database):
        self.db = db

    def create_task(self, text) -> Task:
        text = _clean_text(text, "Todo text is required")
        task_id = self.db.create_task(text)
        logger.info(f"Created todo {task_id}")
        return self.db.get_task_by_id(task_id)

    def get_task(self, task_id: int) -> Task:
        task = self.db.get_task_by_id(task_id)
        if task is None:
            raise NotFoundError()
        return task

    def get_all_tasks(self) -> List[Task]:
        return self.db.list_tasks()

    def update_task(self, task_id: int, text=UNSET, completed=UNSET) -> Task:
        """Partial update; the id must exist and supplied text must not be blank."""
        self.get_task(task_id)
        if text is not UNSET:
            text = _clean_text(text, "Todo text cannot be empty")
        if completed is not UNSET:
            completed = bool(completed)
        self.db.update_task(task_id, text=text, completed=completed)
        logger.info(f"Updated todo {task_id}")
        return self.get_task(task_id)

    def delete_task(self, task_id: int) -> None:
        self.get_task(task_id)
        self.db.delete_task(task_id)
        logger.info(f"Deleted todo {task_id}")
