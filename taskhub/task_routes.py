"""HTTP routes for tasks."""

from __future__ import annotations

from typing import Any

from flask import Flask, jsonify, request

from .api_errors import invalid_request_body, use_case_error, validation_error
from .dto import (
    ChangeOwnerDTO,
    CreateTaskDTO,
    DeleteTaskDTO,
    GetTaskDTO,
    GetUserTasksDTO,
    UpdateTaskDTO,
    ValidationError,
)
from .errors import AppError
from .tasks import (
    ChangeOwnerUseCase,
    CreateTaskUseCase,
    DeleteTaskUseCase,
    FinishTaskUseCase,
    GetTaskUseCase,
    GetUserTasksUseCase,
    UnfinishTaskUseCase,
    UpdateTaskUseCase,
)

_FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")
_OK = ("OK", 200)


class _InvalidBody(Exception):
    pass


def _read_body() -> dict[str, Any]:
    if request.is_json:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise _InvalidBody
        return data
    if request.mimetype in _FORM_TYPES:
        return request.form.to_dict()
    raise _InvalidBody


def _value(body: dict[str, Any], name: str, *, nullable: bool = False) -> str | None:
    key = name if name in body else next((k for k in body if k.lower() == name.lower()), None)
    value = body.get(key) if key is not None else None
    if value is None:
        return None if nullable else ""
    if not isinstance(value, str):
        raise _InvalidBody
    return value


class TaskHandler:
    """Serves the /task endpoints."""

    def __init__(
        self,
        create_task_use_case: CreateTaskUseCase,
        get_task_use_case: GetTaskUseCase,
        update_task_use_case: UpdateTaskUseCase,
        delete_task_use_case: DeleteTaskUseCase,
        get_user_tasks_use_case: GetUserTasksUseCase,
        finish_task_use_case: FinishTaskUseCase,
        unfinish_task_use_case: UnfinishTaskUseCase,
        change_owner_use_case: ChangeOwnerUseCase,
    ) -> None:
        self._create = create_task_use_case
        self._get = get_task_use_case
        self._update = update_task_use_case
        self._delete = delete_task_use_case
        self._user_tasks = get_user_tasks_use_case
        self._finish = finish_task_use_case
        self._unfinish = unfinish_task_use_case
        self._change_owner = change_owner_use_case

    def register_routes(self, app: Flask) -> None:
        """Attach the task endpoints to ``app``."""
        routes = [
            ("/task/", "get_task", self.get_task, "GET"),
            ("/task/", "create_task", self.create_task, "POST"),
            ("/task/<task_id>", "update_task", self.update_task, "PUT"),
            ("/task/<task_id>", "delete_task", self.delete_task, "DELETE"),
            ("/task/user/<user_id>", "get_user_tasks", self.get_user_tasks, "GET"),
            ("/task/<task_id>/finish", "finish_task", self.finish_task, "POST"),
            ("/task/<task_id>/unfinish", "unfinish_task", self.unfinish_task, "POST"),
            ("/task/<task_id>/change-owner", "change_owner", self.change_owner, "POST"),
        ]
        for rule, endpoint, view, method in routes:
            app.add_url_rule(
                rule,
                endpoint=f"task_{endpoint}",
                view_func=view,
                methods=[method],
                strict_slashes=False,
            )

    def get_task(self) -> Any:
        """GET /task/?id=<id>"""
        params = GetTaskDTO(id=request.args.get("id", ""))
        try:
            params.validate()
        except ValidationError as err:
            return validation_error(err)
        try:
            task = self._get.execute(params.id)
        except AppError as err:
            return use_case_error(err)
        return task.to_dict(), 200

    def create_task(self) -> Any:
        """POST /task/"""
        try:
            body = _read_body()
            dto = CreateTaskDTO(
                user_id=_value(body, "UserId") or "",
                name=_value(body, "Name") or "",
                description=_value(body, "Description") or "",
            )
        except _InvalidBody:
            return invalid_request_body()
        try:
            dto.validate()
        except ValidationError as err:
            return validation_error(err)
        try:
            task = self._create.execute(dto.user_id, dto.name, dto.description)
        except AppError as err:
            return use_case_error(err)
        return task.to_dict(), 201

    def update_task(self, task_id: str) -> Any:
        """PUT /task/<task_id>"""
        try:
            body = _read_body()
            dto = UpdateTaskDTO(
                id=task_id,
                name=_value(body, "Name", nullable=True),
                description=_value(body, "Description", nullable=True),
            )
        except _InvalidBody:
            return invalid_request_body()
        try:
            dto.validate()
        except ValidationError as err:
            return validation_error(err)
        try:
            self._update.execute(dto.id, dto.name, dto.description)
        except AppError as err:
            return use_case_error(err)
        return _OK

    def delete_task(self, task_id: str) -> Any:
        """DELETE /task/<task_id>"""
        params = DeleteTaskDTO(id=task_id)
        try:
            params.validate()
        except ValidationError as err:
            return validation_error(err)
        try:
            self._delete.execute(params.id)
        except AppError as err:
            return use_case_error(err)
        return _OK

    def get_user_tasks(self, user_id: str) -> Any:
        """GET /task/user/<user_id>"""
        params = GetUserTasksDTO(user_id=user_id)
        try:
            params.validate()
        except ValidationError as err:
            return validation_error(err)
        try:
            tasks = self._user_tasks.execute(params.user_id)
        except AppError as err:
            return use_case_error(err)
        return jsonify([task.to_dict() for task in tasks]), 200

    def finish_task(self, task_id: str) -> Any:
        """POST /task/<task_id>/finish"""
        try:
            self._finish.execute(task_id)
        except AppError as err:
            return use_case_error(err)
        return _OK

    def unfinish_task(self, task_id: str) -> Any:
        """POST /task/<task_id>/unfinish"""
        try:
            self._unfinish.execute(task_id)
        except AppError as err:
            return use_case_error(err)
        return _OK

    def change_owner(self, task_id: str) -> Any:
        """POST /task/<task_id>/change-owner"""
        try:
            dto = ChangeOwnerDTO(user_id=_value(_read_body(), "UserId") or "")
        except _InvalidBody:
            return invalid_request_body()
        try:
            dto.validate()
        except ValidationError as err:
            return validation_error(err)
        try:
            self._change_owner.execute(task_id, dto.user_id)
        except AppError as err:
            return use_case_error(err)
        return _OK