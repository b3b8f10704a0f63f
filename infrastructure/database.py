import logging
import sqlite3
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Callable, List, Optional

from domain.entities import TIMESTAMP_FORMAT, Task, UNSET
from domain.errors import StorageError

logger = logging.getLogger(__name__)

# SQLite INTEGER is a signed 64-bit value.
MIN_ROW_ID = -2 ** 63
MAX_ROW_ID = 2 ** 63 - 1


def _storable_id(task_id: int) -> bool:
    return MIN_ROW_ID <= task_id <= MAX_ROW_ID


def utc_now() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Database:
    def __init__(self, db_name: str = "todos.db", clock: Callable[[], datetime] = utc_now):
        self.db_name = db_name
        self.clock = clock
        self._init_db()

    @contextmanager
    def _connect(self):
        """Open a connection for one statement, commit on success, always close."""
        try:
            conn = sqlite3.connect(self.db_name)
        except sqlite3.Error as e:
            logger.error(f"Could not open database {self.db_name}: {e}")
            raise StorageError() from e
        try:
            yield conn.cursor()
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            logger.error(f"Database error on {self.db_name}: {e}", exc_info=True)
            raise StorageError() from e
        finally:
            conn.close()

    def _init_db(self):
        with self._connect() as cursor:
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS todos (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    text TEXT NOT NULL,
                    completed INTEGER NOT NULL DEFAULT 0,
                    created_at TEXT NOT NULL
                )
            """)

    @staticmethod
    def _row_to_task(row) -> Task:
        return Task(
            id=row[0],
            text=row[1],
            completed=bool(row[2]),
            created_at=datetime.strptime(row[3], TIMESTAMP_FORMAT),
        )

    def create_task(self, text: str) -> int:
        created_at = self.clock().strftime(TIMESTAMP_FORMAT)
        with self._connect() as cursor:
            cursor.execute(
                "INSERT INTO todos (text, completed, created_at) VALUES (?, 0, ?)",
                (text, created_at)
            )
            return cursor.lastrowid

    def get_task_by_id(self, task_id: int) -> Optional[Task]:
        if not _storable_id(task_id):
            return None
        with self._connect() as cursor:
            cursor.execute(
                "SELECT id, text, completed, created_at FROM todos WHERE id = ?",
                (task_id,)
            )
            row = cursor.fetchone()
        if row:
            return self._row_to_task(row)
        return None

    def list_tasks(self) -> List[Task]:
        with self._connect() as cursor:
            cursor.execute(
                "SELECT id, text, completed, created_at FROM todos ORDER BY created_at DESC, id DESC"
            )
            rows = cursor.fetchall()
        return [self._row_to_task(row) for row in rows]

    def update_task(self, task_id: int, text=UNSET, completed=UNSET) -> None:
        """Apply only the supplied fields. Unknown ids and empty updates are no-ops."""
        assignments = []
        params = []
        if text is not UNSET:
            assignments.append("text = ?")
            params.append(text)
        if completed is not UNSET:
            assignments.append("completed = ?")
            params.append(1 if completed else 0)
        if not assignments or not _storable_id(task_id):
            return
        params.append(task_id)
        with self._connect() as cursor:
            cursor.execute(
                f"UPDATE todos SET {', '.join(assignments)} WHERE id = ?",
                params
            )

    def delete_task(self, task_id: int) -> None:
        if not _storable_id(task_id):
            return
        with self._connect() as cursor:
            cursor.execute("DELETE FROM todos WHERE id = ?", (task_id,))
