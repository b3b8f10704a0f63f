"""Shared fixtures: a throwaway SQLite file per test and an app wired to it."""

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from application.use_cases import TaskUseCases
from infrastructure.database import Database
from main import create_app


class TickingClock:
    """Returns a strictly later second on every call."""

    def __init__(self, start=datetime(2024, 1, 1, 12, 0, 0)):
        self.now = start

    def __call__(self):
        self.now += timedelta(seconds=1)
        return self.now


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "todos.db")


@pytest.fixture
def database(db_path):
    return Database(db_path, clock=TickingClock())


@pytest.fixture
def use_cases(database):
    return TaskUseCases(database)


@pytest.fixture
def app(database):
    return create_app(database=database)


@pytest.fixture
def client(app):
    return TestClient(app)
