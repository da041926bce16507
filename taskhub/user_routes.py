"""HTTP routes for users."""

from __future__ import annotations

from typing import Any

from flask import Flask, request

from .api_errors import invalid_request_body, use_case_error, validation_error
from .dto import CreateUserDTO, DeleteUserDTO, GetUserDTO, UpdateUserDTO, ValidationError
from .errors import AppError
from .users import CreateUserUseCase, DeleteUserUseCase, GetUserUseCase, UpdateUserUseCase

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


class UserHandler:
    """Serves the /user endpoints."""

    def __init__(
        self,
        create_user_use_case: CreateUserUseCase,
        get_user_use_case: GetUserUseCase,
        update_user_use_case: UpdateUserUseCase,
        delete_user_use_case: DeleteUserUseCase,
    ) -> None:
        self._create = create_user_use_case
        self._get = get_user_use_case
        self._update = update_user_use_case
        self._delete = delete_user_use_case

    def register_routes(self, app: Flask) -> None:
        """Attach the user endpoints to ``app``."""
        routes = [
            ("/user/", "get_user", self.get_user, "GET"),
            ("/user/", "create_user", self.create_user, "POST"),
            ("/user/<user_id>", "update_user", self.update_user, "PUT"),
            ("/user/<user_id>", "delete_user", self.delete_user, "DELETE"),
        ]
        for rule, endpoint, view, method in routes:
            app.add_url_rule(
                rule,
                endpoint=f"user_{endpoint}",
                view_func=view,
                methods=[method],
                strict_slashes=False,
            )

    def get_user(self) -> Any:
        """GET /user/?id=<id>"""
        params = GetUserDTO(id=request.args.get("id", ""))
        try:
            params.validate()
        except ValidationError as err:
            return validation_error(err)
        try:
            user = self._get.execute(params.id)
        except AppError as err:
            return use_case_error(err)
        return user.to_dict(), 200

    def create_user(self) -> Any:
        """POST /user/"""
        try:
            body = _read_body()
            dto = CreateUserDTO(name=_value(body, "Name") or "", email=_value(body, "Email") or "")
        except _InvalidBody:
            return invalid_request_body()
        try:
            dto.validate()
        except ValidationError as err:
            return validation_error(err)
        try:
            user = self._create.execute(dto.name, dto.email)
        except AppError as err:
            return use_case_error(err)
        return user.to_dict(), 201

    def update_user(self, user_id: str) -> Any:
        """PUT /user/<user_id>"""
        try:
            body = _read_body()
            dto = UpdateUserDTO(
                id=user_id,
                name=_value(body, "Name", nullable=True),
                email=_value(body, "Email", nullable=True),
            )
        except _InvalidBody:
            return invalid_request_body()
        try:
            dto.validate()
        except ValidationError as err:
            return validation_error(err)
        try:
            self._update.execute(dto.id, dto.name, dto.email)
        except AppError as err:
            return use_case_error(err)
        return _OK

    def delete_user(self, user_id: str) -> Any:
        """DELETE /user/<user_id>"""
        params = DeleteUserDTO(id=user_id)
        try:
            params.validate()
        except ValidationError as err:
            return validation_error(err)
        try:
            self._delete.execute(params.id)
        except AppError as err:
            return use_case_error(err)
        return _OK