"""In-memory repositories for users and tasks."""

from __future__ import annotations

import threading
import uuid
from collections.abc import Iterable
from dataclasses import replace

from .domain import Task, User
from .errors import AppError, ErrorStatus


def _new_id() -> str:
    return str(uuid.uuid4())


class UserRepository:
    """Stores users in memory, keyed by id, in insertion order."""

    def __init__(self, users: Iterable[User] | None = None) -> None:
        self._lock = threading.Lock()
        self._users: dict[str, User] = {}
        for user in users or ():
            self._users[user.id] = replace(user, tasks=list(user.tasks))

    @staticmethod
    def _copy(user: User) -> User:
        return replace(user, tasks=list(user.tasks))

    def create(self, name: str, email: str) -> User:
        """Store a new user under a fresh id and return it."""
        user = User(id=_new_id(), name=name, email=email)
        with self._lock:
            self._users[user.id] = user
            return self._copy(user)

    def get_one_by_id(self, user_id: str) -> User:
        """Return the user with ``user_id``; raise NOT_FOUND if absent."""
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                raise AppError("user not found", ErrorStatus.NOT_FOUND)
            return self._copy(user)

    def get_one_by_email(self, email: str) -> User:
        """Return the user with ``email``; raise NOT_FOUND if absent."""
        with self._lock:
            for user in self._users.values():
                if user.email == email:
                    return self._copy(user)
        raise AppError("user not found", ErrorStatus.NOT_FOUND)

    def get_all(self) -> list[User]:
        """Return every stored user."""
        with self._lock:
            return [self._copy(user) for user in self._users.values()]

    def update(self, user_id: str, name: str | None = None, email: str | None = None) -> None:
        """Change the given fields of a user; ``None`` leaves a field as is."""
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                raise AppError("user not found", ErrorStatus.NOT_FOUND)
            if name is not None:
                user.name = name
            if email is not None:
                user.email = email

    def delete(self, user_id: str) -> None:
        """Remove a user; raise NOT_FOUND if absent."""
        with self._lock:
            if self._users.pop(user_id, None) is None:
                raise AppError("user not found", ErrorStatus.NOT_FOUND)


class TaskRepository:
    """Stores tasks in memory, keyed by id, in insertion order."""

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._lock = threading.Lock()
        self._tasks: dict[str, Task] = {task.id: replace(task) for task in tasks or ()}

    def create(self, name: str, description: str, user_id: str) -> Task:
        """Store a new, unfinished task under a fresh id and return it."""
        task = Task(id=_new_id(), name=name, description=description, user_id=user_id)
        with self._lock:
            self._tasks[task.id] = task
            return replace(task)

    def get_one_by_id(self, task_id: str) -> Task:
        """Return the task with ``task_id``; raise NOT_FOUND if absent."""
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                raise AppError("task not found", ErrorStatus.NOT_FOUND)
            return replace(task)

    def get_all(self) -> list[Task]:
        """Return every stored task."""
        with self._lock:
            return [replace(task) for task in self._tasks.values()]

    def get_by_user(self, user_id: str) -> list[Task]:
        """Return the tasks owned by ``user_id``."""
        with self._lock:
            return [replace(task) for task in self._tasks.values() if task.user_id == user_id]

    def update(
        self,
        task_id: str,
        name: str | None = None,
        description: str | None = None,
        user_id: str | None = None,
        done: bool | None = None,
    ) -> None:
        """Change the given fields of a task; ``None`` leaves a field as is."""
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                raise AppError("task not found", ErrorStatus.NOT_FOUND)
            if name is not None:
                task.name = name
            if description is not None:
                task.description = description
            if user_id is not None:
                task.user_id = user_id
            if done is not None:
                task.done = done

    def delete(self, task_id: str) -> None:
        """Remove a task; raise NOT_FOUND if absent."""
        with self._lock:
            if self._tasks.pop(task_id, None) is None:
                raise AppError("task not found", ErrorStatus.NOT_FOUND)