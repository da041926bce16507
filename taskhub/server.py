"""The HTTP server that exposes the user and task endpoints."""

from __future__ import annotations

import os

from flask import Flask

from .task_routes import TaskHandler
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
from .user_routes import UserHandler
from .users import CreateUserUseCase, DeleteUserUseCase, GetUserUseCase, UpdateUserUseCase


class HttpServer:
    """Wires the use cases to HTTP routes and serves them."""

    def __init__(
        self,
        create_user: CreateUserUseCase,
        get_user: GetUserUseCase,
        update_user: UpdateUserUseCase,
        delete_user: DeleteUserUseCase,
        create_task: CreateTaskUseCase,
        get_task: GetTaskUseCase,
        update_task: UpdateTaskUseCase,
        delete_task: DeleteTaskUseCase,
        get_user_tasks: GetUserTasksUseCase,
        finish_task: FinishTaskUseCase,
        unfinish_task: UnfinishTaskUseCase,
        change_owner: ChangeOwnerUseCase,
    ) -> None:
        self._user_handler = UserHandler(create_user, get_user, update_user, delete_user)
        self._task_handler = TaskHandler(
            create_task,
            get_task,
            update_task,
            delete_task,
            get_user_tasks,
            finish_task,
            unfinish_task,
            change_owner,
        )

    def create_app(self) -> Flask:
        """Return a Flask application with every route registered."""
        app = Flask(__name__)
        self._user_handler.register_routes(app)
        self._task_handler.register_routes(app)
        return app

    def start(self) -> None:
        """Serve on all interfaces at the port named by ``HTTP_PORT``."""
        port = os.environ.get("HTTP_PORT", "")
        self.create_app().run(host="0.0.0.0", port=int(port) if port else 0)