"""Request payloads accepted by the HTTP API, with their validation rules."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, fields
from typing import Any, Callable, Optional

_UUID_PATTERN = re.compile(r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}")
_EMAIL_PATTERN = re.compile(
    r"[A-Za-z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?"
    r"(?:\.[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?)*"
)


def is_uuid(value: Any) -> bool:
    """Return whether ``value`` is a lower-case hyphenated UUID string."""
    return isinstance(value, str) and _UUID_PATTERN.fullmatch(value) is not None


def is_email(value: Any) -> bool:
    """Return whether ``value`` looks like an e-mail address."""
    return isinstance(value, str) and _EMAIL_PATTERN.fullmatch(value) is not None


def _is_present(value: Any) -> bool:
    return value not in (None, "")


_CHECKS: dict[str, Callable[[Any], bool]] = {
    "required": _is_present,
    "uuid": is_uuid,
    "email": is_email,
}


class ValidationError(ValueError):
    """Raised when a payload breaks its rules; maps field names to failed rules."""

    def __init__(self, failures: dict[str, str]) -> None:
        self.failures = dict(failures)
        super().__init__(
            "; ".join(f"field {name} validation failed: {rule}" for name, rule in self.failures.items())
        )


def _spec(wire_name: str, rules: str = "", default: Any = "") -> Any:
    return field(
        default=default,
        metadata={"wire": wire_name, "rules": tuple(rule for rule in rules.split(",") if rule)},
    )


def _first_failure(value: Any, rules: tuple[str, ...]) -> str | None:
    for rule in rules:
        if rule == "omitempty":
            if not _is_present(value):
                return None
            continue
        if not _CHECKS[rule](value):
            return rule
    return None


def _check_fields(payload: Any) -> None:
    failures: dict[str, str] = {}
    for spec in fields(payload):
        failed = _first_failure(getattr(payload, spec.name), spec.metadata.get("rules", ()))
        if failed is not None:
            failures[spec.metadata["wire"]] = failed
    if failures:
        raise ValidationError(failures)


@dataclass
class CreateTaskDTO:
    """Payload for creating a task."""

    user_id: str = _spec("UserId", "required,uuid")
    name: str = _spec("Name", "required")
    description: str = _spec("Description", "required")

    def validate(self) -> None:
        """Raise :class:`ValidationError` if any field breaks its rules."""
        _check_fields(self)


@dataclass
class GetTaskDTO:
    """Parameters for fetching a task."""

    id: str = _spec("Id", "required,uuid")

    def validate(self) -> None:
        """Raise :class:`ValidationError` if any field breaks its rules."""
        _check_fields(self)


@dataclass
class UpdateTaskDTO:
    """Payload for changing a task's name and/or description."""

    id: str = _spec("Id", "required,uuid")
    name: Optional[str] = _spec("Name", default=None)
    description: Optional[str] = _spec("Description", default=None)

    def validate(self) -> None:
        """Raise :class:`ValidationError` if any field breaks its rules."""
        _check_fields(self)


@dataclass
class DeleteTaskDTO:
    """Parameters for removing a task."""

    id: str = _spec("Id", "required,uuid")

    def validate(self) -> None:
        """Raise :class:`ValidationError` if any field breaks its rules."""
        _check_fields(self)


@dataclass
class GetUserTasksDTO:
    """Parameters for listing a user's tasks."""

    user_id: str = _spec("UserId", "required,uuid")

    def validate(self) -> None:
        """Raise :class:`ValidationError` if any field breaks its rules."""
        _check_fields(self)


@dataclass
class ChangeOwnerDTO:
    """Payload naming the new owner of a task."""

    user_id: str = _spec("UserId", "required,uuid")

    def validate(self) -> None:
        """Raise :class:`ValidationError` if any field breaks its rules."""
        _check_fields(self)


@dataclass
class CreateUserDTO:
    """Payload for registering a user."""

    name: str = _spec("Name", "required")
    email: str = _spec("Email", "required,email")

    def validate(self) -> None:
        """Raise :class:`ValidationError` if any field breaks its rules."""
        _check_fields(self)


@dataclass
class GetUserDTO:
    """Parameters for fetching a user."""

    id: str = _spec("Id", "required,uuid")

    def validate(self) -> None:
        """Raise :class:`ValidationError` if any field breaks its rules."""
        _check_fields(self)


@dataclass
class UpdateUserDTO:
    """Payload for changing a user's name and/or e-mail address."""

    id: str = _spec("Id", "required,uuid")
    name: Optional[str] = _spec("Name", default=None)
    email: Optional[str] = _spec("Email", "omitempty,email", default=None)

    def validate(self) -> None:
        """Raise :class:`ValidationError` if any field breaks its rules."""
        _check_fields(self)


@dataclass
class DeleteUserDTO:
    """Parameters for removing a user."""

    id: str = _spec("Id", "required,uuid")

    def validate(self) -> None:
        """Raise :class:`ValidationError` if any field breaks its rules."""
        _check_fields(self)