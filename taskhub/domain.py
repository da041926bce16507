"""Domain entities: users and the tasks they own."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Task:
    """A unit of work owned by a user."""

    id: str
    name: str
    description: str
    user_id: str
    done: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return the task in its wire representation."""
        return {
            "Id": self.id,
            "Name": self.name,
            "Description": self.description,
            "Done": self.done,
            "UserId": self.user_id,
        }


@dataclass
class User:
    """A registered user."""

    id: str
    name: str
    email: str
    tasks: list[Task] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the user in its wire representation."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "tasks": [task.to_dict() for task in self.tasks],
        }