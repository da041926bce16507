"""Use cases that manage tasks."""

from __future__ import annotations

from .domain import Task
from .errors import AppError, ErrorStatus, internal_error
from .repositories import TaskRepository, UserRepository


def _find_task(tasks: TaskRepository, task_id: str, context: str) -> Task:
    try:
        return tasks.get_one_by_id(task_id)
    except AppError as err:
        if err.code == ErrorStatus.NOT_FOUND:
            raise AppError("task not found", ErrorStatus.NOT_FOUND).with_context(context) from err
        raise internal_error().with_context(context) from err


def _ensure_user(users: UserRepository, user_id: str, context: str) -> None:
    try:
        users.get_one_by_id(user_id)
    except AppError as err:
        if err.code == ErrorStatus.NOT_FOUND:
            raise AppError("user not found", ErrorStatus.NOT_FOUND).with_context(context) from err
        raise internal_error().with_context(context) from err


class ChangeOwnerUseCase:
    """Hand a task over to another existing user."""

    def __init__(self, user_repository: UserRepository, task_repository: TaskRepository) -> None:
        self._users = user_repository
        self._tasks = task_repository

    def execute(self, task_id: str, user_id: str) -> None:
        context = "error changing the task owner"
        _find_task(self._tasks, task_id, context)
        _ensure_user(self._users, user_id, context)
        try:
            self._tasks.update(task_id, user_id=user_id)
        except AppError as err:
            raise internal_error().with_context(context) from err


class CreateTaskUseCase:
    """Create a task for an existing user."""

    def __init__(self, user_repository: UserRepository, task_repository: TaskRepository) -> None:
        self._users = user_repository
        self._tasks = task_repository

    def execute(self, user_id: str, name: str, description: str) -> Task:
        context = "error creating the task"
        _ensure_user(self._users, user_id, context)
        try:
            return self._tasks.create(name, description, user_id)
        except AppError as err:
            raise internal_error().with_context(context) from err


class DeleteTaskUseCase:
    """Remove an existing task."""

    def __init__(self, task_repository: TaskRepository) -> None:
        self._tasks = task_repository

    def execute(self, task_id: str) -> None:
        context = "error removing the task"
        _find_task(self._tasks, task_id, context)
        try:
            self._tasks.delete(task_id)
        except AppError as err:
            raise internal_error().with_context(context) from err


class FinishTaskUseCase:
    """Mark an unfinished task as done."""

    def __init__(self, task_repository: TaskRepository) -> None:
        self._tasks = task_repository

    def execute(self, task_id: str) -> None:
        context = "error finishing the task owner"
        task = _find_task(self._tasks, task_id, context)
        if task.done:
            raise AppError("task already finished", ErrorStatus.FAILED_PRECONDITION).with_context(context)
        try:
            self._tasks.update(task_id, done=True)
        except AppError as err:
            raise internal_error().with_context(context) from err


class GetTaskUseCase:
    """Look up a task by id."""

    def __init__(self, task_repository: TaskRepository) -> None:
        self._tasks = task_repository

    def execute(self, task_id: str) -> Task:
        return _find_task(self._tasks, task_id, "error finding the task")


class GetUserTasksUseCase:
    """List the tasks owned by an existing user."""

    def __init__(self, user_repository: UserRepository, task_repository: TaskRepository) -> None:
        self._users = user_repository
        self._tasks = task_repository

    def execute(self, user_id: str) -> list[Task]:
        context = "error getting user's tasks"
        _ensure_user(self._users, user_id, context)
        try:
            return self._tasks.get_by_user(user_id)
        except AppError as err:
            raise internal_error().with_context(context) from err


class UnfinishTaskUseCase:
    """Mark a finished task as not done."""

    def __init__(self, task_repository: TaskRepository) -> None:
        self._tasks = task_repository

    def execute(self, task_id: str) -> None:
        context = "error unfinishing the task owner"
        task = _find_task(self._tasks, task_id, context)
        if not task.done:
            raise AppError("task is not finished", ErrorStatus.FAILED_PRECONDITION).with_context(context)
        try:
            self._tasks.update(task_id, done=False)
        except AppError as err:
            raise internal_error().with_context(context) from err


class UpdateTaskUseCase:
    """Change a task's name and/or description."""

    def __init__(self, task_repository: TaskRepository) -> None:
        self._tasks = task_repository

    def execute(self, task_id: str, name: str | None = None, description: str | None = None) -> None:
        context = "error updating the task"
        _find_task(self._tasks, task_id, context)
        if name is None and description is None:
            raise AppError("no changes required", ErrorStatus.FAILED_PRECONDITION)
        try:
            self._tasks.update(task_id, name=name, description=description)
        except AppError as err:
            raise internal_error().with_context(context) from err