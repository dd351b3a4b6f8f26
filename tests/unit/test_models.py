"""
Unit tests for request and record models.

Tests cover:
- Length limits on creation fields
- Alphanumeric-only creation fields
- Required fields
- Task status values and defaults
- Conversion of creation requests to stored records
"""

import pytest
from pydantic import ValidationError

from api.src.models.task import Task, TaskCreate, TaskStatus
from api.src.models.user import User, UserCreate


class TestUserCreate:
    """Tests for the UserCreate schema."""

    def test_valid_request(self):
        """Test a valid request is accepted unchanged."""
        request = UserCreate(username="bob42", full_name="BobBuilder")

        assert request.username == "bob42"
        assert request.full_name == "BobBuilder"

    @pytest.mark.parametrize("username", ["ab", "a" * 16, ""])
    def test_rejects_username_length(self, username: str):
        """Test usernames outside 3-15 characters are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            UserCreate(username=username, full_name="BobBuilder")

        assert any(e["loc"] == ("username",) for e in exc_info.value.errors())

    def test_length_boundaries_accepted(self):
        """Test the limits themselves are allowed."""
        UserCreate(username="abc", full_name="x" * 30)
        UserCreate(username="a" * 15, full_name="xyz")

    @pytest.mark.parametrize("full_name", ["Bob Builder", "bob_builder", "Zoë", "bob-1", "bob\n"])
    def test_rejects_non_alphanumeric_full_name(self, full_name: str):
        """Test spaces, punctuation and non-ASCII letters are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            UserCreate(username="bob42", full_name=full_name)

        assert any(e["loc"] == ("full_name",) for e in exc_info.value.errors())

    def test_rejects_missing_fields(self):
        """Test both fields are required."""
        with pytest.raises(ValidationError) as exc_info:
            UserCreate(username="bob42")

        assert any(e["loc"] == ("full_name",) for e in exc_info.value.errors())

    def test_rejects_non_string(self):
        """Test numbers are not coerced to strings."""
        with pytest.raises(ValidationError):
            UserCreate(username=12345, full_name="BobBuilder")

    def test_to_user(self):
        """Test conversion to a stored record."""
        user = UserCreate(username="bob42", full_name="BobBuilder").to_user(7)

        assert user == User(id=7, username="bob42", full_name="BobBuilder")


class TestTaskCreate:
    """Tests for the TaskCreate schema."""

    def test_defaults(self):
        """Test status and assignee default to ToDo and 0."""
        request = TaskCreate(title="Deploy", description="ShipIt")

        assert request.status == TaskStatus.TODO
        assert request.assignee_id == 0

    def test_status_from_integer(self):
        """Test status is accepted as its integer value."""
        request = TaskCreate(title="Deploy", description="ShipIt", status=2)

        assert request.status == TaskStatus.DONE

    @pytest.mark.parametrize("value", [3, 7, -1, 1000])
    def test_accepts_any_integer_status(self, value: int):
        """Test status is not limited to the named values."""
        request = TaskCreate(title="Deploy", description="ShipIt", status=value)

        assert request.status == value
        assert request.to_task(1).status == value

    @pytest.mark.parametrize("field, value", [
        ("status", "1"),
        ("status", 1.0),
        ("status", True),
        ("assignee_id", "5"),
        ("assignee_id", 2.0),
    ])
    def test_rejects_non_integer_numbers(self, field: str, value):
        """Test integer fields are not coerced from strings, floats or booleans."""
        with pytest.raises(ValidationError) as exc_info:
            TaskCreate(title="Deploy", description="ShipIt", **{field: value})

        assert any(e["loc"] == (field,) for e in exc_info.value.errors())

    @pytest.mark.parametrize("title", ["ab", "t" * 31, "Deploy now"])
    def test_rejects_invalid_title(self, title: str):
        """Test title length and character constraints."""
        with pytest.raises(ValidationError) as exc_info:
            TaskCreate(title=title, description="ShipIt")

        assert any(e["loc"] == ("title",) for e in exc_info.value.errors())

    def test_description_limits(self):
        """Test description accepts up to 255 characters and no more."""
        TaskCreate(title="Deploy", description="d" * 255)

        with pytest.raises(ValidationError):
            TaskCreate(title="Deploy", description="d" * 256)

    def test_ignores_client_id(self):
        """Test an id in the payload is dropped."""
        request = TaskCreate.model_validate(
            {"id": 99, "title": "Deploy", "description": "ShipIt"}
        )

        assert "id" not in request.model_dump()

    def test_to_task(self):
        """Test conversion to a stored record."""
        task = TaskCreate(
            title="Deploy", description="ShipIt", status=1, assignee_id=4
        ).to_task(6)

        assert task == Task(
            id=6,
            title="Deploy",
            description="ShipIt",
            status=TaskStatus.IN_PROGRESS,
            assignee_id=4,
        )


class TestTaskSerialization:
    """Tests for task JSON output."""

    def test_status_serialized_as_integer(self):
        """Test status is written as its integer value."""
        task = Task(id=1, title="Setup CI/CD Pipeline", description="Seed", status=TaskStatus.IN_PROGRESS)

        assert task.model_dump(mode="json")["status"] == 1
