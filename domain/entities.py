from dataclasses import dataclass
from datetime import datetime
from typing import Optional

# SQLite CURRENT_TIMESTAMP layout, always UTC.
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class _Unset:
    """Marker for a field that was not supplied in a partial update."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "UNSET"

    def __bool__(self):
        return False


UNSET = _Unset()


@dataclass
class Task:
    text: str
    completed: bool = False
    id: Optional[int] = None
    created_at: Optional[datetime] = None
