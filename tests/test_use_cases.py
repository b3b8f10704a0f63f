"""Tests for validation and existence checks in TaskUseCases."""

import pytest

from domain.errors import NotFoundError, ValidationError


class TestCreate:
    def test_trims_text(self, use_cases):
        task = use_cases.create_task("  Spaced todo  ")
        assert task.text == "Spaced todo"
        assert task.completed is False

    @pytest.mark.parametrize("text", [None, "", "   ", "\t\n", 5])
    def test_rejects_missing_or_blank(self, use_cases, database, text):
        with pytest.raises(ValidationError):
            use_cases.create_task(text)
        assert database.list_tasks() == []


class TestUpdate:
    def test_unknown_id(self, use_cases):
        with pytest.raises(NotFoundError):
            use_cases.update_task(99999, completed=True)

    def test_existence_checked_before_text(self, use_cases):
        with pytest.raises(NotFoundError):
            use_cases.update_task(99999, text="   ")

    def test_blank_text_rejected(self, use_cases):
        task = use_cases.create_task("Keep")
        with pytest.raises(ValidationError):
            use_cases.update_task(task.id, text="   ", completed=True)
        unchanged = use_cases.get_task(task.id)
        assert (unchanged.text, unchanged.completed) == ("Keep", False)

    def test_text_is_trimmed(self, use_cases):
        task = use_cases.create_task("Old")
        assert use_cases.update_task(task.id, text="  New  ").text == "New"

    def test_completed_coerced(self, use_cases):
        task = use_cases.create_task("Todo")
        assert use_cases.update_task(task.id, completed=1).completed is True
        assert use_cases.update_task(task.id, completed=0).completed is False

    def test_no_fields(self, use_cases):
        task = use_cases.create_task("Todo")
        assert use_cases.update_task(task.id) == task


class TestDelete:
    def test_unknown_id(self, use_cases):
        with pytest.raises(NotFoundError):
            use_cases.delete_task(99999)

    def test_delete(self, use_cases):
        task = use_cases.create_task("Todo")
        use_cases.delete_task(task.id)
        with pytest.raises(NotFoundError):
            use_cases.get_task(task.id)
