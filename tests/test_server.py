from unittest.mock import patch

import pytest
from flask import Flask

from taskhub.repositories import TaskRepository, UserRepository
from taskhub.server import HttpServer
from taskhub.tasks import (
    ChangeOwnerUseCase,
    CreateTaskUseCase,
    DeleteTaskUseCase,
    FinishTaskUseCase,
    GetTaskUseCase,
    GetUserTasksUseCase,
    UnfinishTaskUseCase,
    UpdateTaskUseCase,
)
from taskhub.users import CreateUserUseCase, DeleteUserUseCase, GetUserUseCase, UpdateUserUseCase


class _Launched(Exception):
    def __init__(self, kwargs):
        super().__init__("launched")
        self.kwargs = kwargs


def _fake_run(*args, **kwargs):
    raise _Launched(kwargs)


@pytest.fixture
def server():
    users = UserRepository()
    tasks = TaskRepository()
    return HttpServer(
        CreateUserUseCase(users),
        GetUserUseCase(users),
        UpdateUserUseCase(users),
        DeleteUserUseCase(users),
        CreateTaskUseCase(users, tasks),
        GetTaskUseCase(tasks),
        UpdateTaskUseCase(tasks),
        DeleteTaskUseCase(tasks),
        GetUserTasksUseCase(users, tasks),
        FinishTaskUseCase(tasks),
        UnfinishTaskUseCase(tasks),
        ChangeOwnerUseCase(users, tasks),
    )


def test_app_registers_every_route(server):
    rules = {rule.rule for rule in server.create_app().url_map.iter_rules()}
    assert {
        "/user/",
        "/user/<user_id>",
        "/task/",
        "/task/<task_id>",
        "/task/user/<user_id>",
        "/task/<task_id>/finish",
        "/task/<task_id>/unfinish",
        "/task/<task_id>/change-owner",
    } <= rules


def test_full_flow(server):
    client = server.create_app().test_client()
    created = client.post("/user/", json={"Name": "Ana", "Email": "ana@example.com"})
    assert created.status_code == 201
    user_id = created.get_json()["id"]

    task = client.post("/task/", json={"UserId": user_id, "Name": "Nova Task", "Description": "Desc"})
    assert task.status_code == 201
    task_id = task.get_json()["Id"]

    assert client.post(f"/task/{task_id}/finish").status_code == 200
    listed = client.get(f"/task/user/{user_id}").get_json()
    assert [(item["Id"], item["Done"]) for item in listed] == [(task_id, True)]

    assert client.delete(f"/task/{task_id}").status_code == 200
    assert client.get("/task/", query_string={"id": task_id}).status_code == 404


def test_start_uses_http_port(server, monkeypatch):
    monkeypatch.setenv("HTTP_PORT", "8123")
    with patch.object(Flask, "run", side_effect=_fake_run):
        with pytest.raises(_Launched) as info:
            server.start()
    assert info.value.kwargs == {"host": "0.0.0.0", "port": 8123}


def test_start_without_port_picks_any(server, monkeypatch):
    monkeypatch.delenv("HTTP_PORT", raising=False)
    with patch.object(Flask, "run", side_effect=_fake_run):
        with pytest.raises(_Launched) as info:
            server.start()
    assert info.value.kwargs["port"] == 0


def test_start_rejects_non_numeric_port(server, monkeypatch):
    monkeypatch.setenv("HTTP_PORT", "abc")
    with patch.object(Flask, "run"):
        with pytest.raises(ValueError):
            server.start()