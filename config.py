import os

TODO_DB_PATH = os.getenv("TODO_DB_PATH", "todos.db")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
