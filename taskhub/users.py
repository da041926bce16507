"""Use cases that manage users."""

from __future__ import annotations

from .domain import User
from .errors import AppError, ErrorStatus, internal_error
from .repositories import UserRepository


def _find_user(users: UserRepository, user_id: str, context: str) -> User:
    try:
        return users.get_one_by_id(user_id)
    except AppError as err:
        if err.code == ErrorStatus.NOT_FOUND:
            raise AppError("user not found", ErrorStatus.NOT_FOUND).with_context(context) from err
        raise internal_error().with_context(context) from err


def _find_by_email(users: UserRepository, email: str, context: str) -> User | None:
    try:
        return users.get_one_by_email(email)
    except AppError as err:
        if err.code != ErrorStatus.NOT_FOUND:
            raise internal_error().with_context(context) from err
        return None


class CreateUserUseCase:
    """Register a user whose e-mail address is not yet taken."""

    def __init__(self, user_repository: UserRepository) -> None:
        self._users = user_repository

    def execute(self, name: str, email: str) -> User:
        context = "error creating the user"
        if _find_by_email(self._users, email, context) is not None:
            raise AppError("email is already in use", ErrorStatus.CONFLICT).with_context(context)
        try:
            return self._users.create(name, email)
        except AppError as err:
            raise internal_error().with_context(context) from err


class DeleteUserUseCase:
    """Remove an existing user."""

    def __init__(self, user_repository: UserRepository) -> None:
        self._users = user_repository

    def execute(self, user_id: str) -> None:
        context = "erro removing the user"
        _find_user(self._users, user_id, context)
        try:
            self._users.delete(user_id)
        except AppError as err:
            raise internal_error().with_context(context) from err


class GetUserUseCase:
    """Look up a user by id."""

    def __init__(self, user_repository: UserRepository) -> None:
        self._users = user_repository

    def execute(self, user_id: str) -> User:
        return _find_user(self._users, user_id, "error getting the user")


class UpdateUserUseCase:
    """Change a user's name and/or e-mail address."""

    def __init__(self, user_repository: UserRepository) -> None:
        self._users = user_repository

    def execute(self, user_id: str, name: str | None = None, email: str | None = None) -> None:
        context = "erros updating the user"
        _find_user(self._users, user_id, context)

        if name is None and email is None:
            raise AppError("no changes requested", ErrorStatus.FAILED_PRECONDITION).with_context(context)

        if email is not None and _find_by_email(self._users, email, context) is not None:
            raise AppError("email already in use", ErrorStatus.CONFLICT).with_context(context)

        try:
            self._users.update(user_id, name, email)
        except AppError as err:
            raise internal_error().with_context(context) from err