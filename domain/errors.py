"""Error taxonomy for the task list.

Each error carries the HTTP status it maps to and a message that is safe to
show to the caller.
"""


class TodoError(Exception):
    http_status = 500
    default_message = "An unexpected error occurred"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_response(self) -> dict:
        return {"error": self.message}


class ValidationError(TodoError):
    http_status = 400
    default_message = "Invalid request data"


class NotFoundError(TodoError):
    http_status = 404
    default_message = "Todo not found"


class StorageError(TodoError):
    """Unexpected persistence failure. The message never includes driver details."""

    http_status = 500
    default_message = "A database error occurred"
