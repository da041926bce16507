# taskhub

A small service for users and their tasks. The business rules live in
plain Python use cases, data is kept by in-memory repositories, and a
Flask application exposes everything as a JSON API.

## Modules

- `taskhub.domain`: the `Task` and `User` dataclasses. Each has
  `to_dict()` for JSON output. A task is written with the keys `Id`,
  `Name`, `Description`, `Done` and `UserId`. A user is written with
  `id`, `name`, `email` and `tasks`. The `tasks` list holds what is on the
  `User` record. The repositories and use cases never fill it in.
- `taskhub.errors`: `AppError` is the exception that repositories and use
  cases raise. It carries a `message` and an `ErrorStatus` `code`
  (`NOT_FOUND`, `BAD_REQUEST`, `CONFLICT`, `FAILED_PRECONDITION`,
  `INTERNAL`). `with_context(context)` returns a new error whose message
  is prefixed with `"<context>: "`. `from_exception(err, code)` wraps any
  exception's message. `internal_error()` returns the generic
  "an internal error has occurred" error.
- `taskhub.repositories`: `UserRepository` and `TaskRepository` keep
  their records in memory. They are guarded by a lock and return copies.
  - Each constructor can take an iterable of records to start with.
  - `create` assigns a fresh UUID4 id. New tasks start unfinished.
  - `get_one_by_id` and `get_one_by_email` raise `NOT_FOUND` for a
    missing record, and so do `update` and `delete`.
  - `get_all` and `TaskRepository.get_by_user` list records in insertion
    order.
  - In `update`, an argument left as `None` keeps that field unchanged.
- `taskhub.users` and `taskhub.tasks`: the use cases. There is one class
  per operation, and each has an `execute(...)` method:
  - users: `CreateUserUseCase`, `GetUserUseCase`, `UpdateUserUseCase`,
    `DeleteUserUseCase`
  - tasks: `CreateTaskUseCase`, `GetTaskUseCase`, `UpdateTaskUseCase`,
    `DeleteTaskUseCase`, `GetUserTasksUseCase`, `FinishTaskUseCase`,
    `UnfinishTaskUseCase`, `ChangeOwnerUseCase`
- `taskhub.dto`: request dataclasses with `validate()`, which raises
  `ValidationError` (a `ValueError`). Its `failures` attribute maps each
  failing field name (`Id`, `UserId`, `Name`, `Email`, `Description`) to
  the first rule it broke: `required`, `uuid` or `email`. The helpers
  `is_uuid(value)` and `is_email(value)` are exposed. A UUID must be
  lower-case and hyphenated.
- `taskhub.api_errors`: `http_status(code)`, `invalid_request_body()`,
  `validation_error(err)` and `use_case_error(err)`. Each response helper
  returns a `(body, status)` pair.
- `taskhub.user_routes`, `taskhub.task_routes` and `taskhub.server`: the
  HTTP layer (`UserHandler`, `TaskHandler`, `HttpServer`).

## Use cases and errors

Use cases return their result or raise `AppError`:

```python
from taskhub.errors import AppError, ErrorStatus
from taskhub.repositories import UserRepository
from taskhub.users import CreateUserUseCase, GetUserUseCase

users = UserRepository()
user = CreateUserUseCase(users).execute("Ana", "ana@example.com")

try:
    GetUserUseCase(users).execute("00000000-0000-0000-0000-000000000000")
except AppError as err:
    assert err.code is ErrorStatus.NOT_FOUND
    print(err.message)  # "error getting the user: user not found"
```

The use cases enforce these rules:

- An e-mail address may belong to one user only. Creating or updating a
  user with an address already in use gives `CONFLICT`.
- A task or user that does not exist gives `NOT_FOUND`. This includes
  the owner named when creating a task, listing tasks or changing a
  task's owner.
- The following give `FAILED_PRECONDITION`:
  - finishing a finished task;
  - unfinishing an open task;
  - updating a user with neither a name nor an e-mail;
  - updating a task with neither a name nor a description. This error's
    message is plain "no changes required", without a prefix.
- Any other repository failure is reported as `INTERNAL`, and its details
  are hidden.

## HTTP API

`HttpServer` is built from the twelve use cases. `create_app()` returns a
Flask application with all routes registered, which suits tests and any
WSGI server. `start()` runs Flask's built-in server on `0.0.0.0`, at the
port named by the `HTTP_PORT` environment variable. If the variable is
unset, the port is 0 and the operating system picks one.

```python
from taskhub.repositories import TaskRepository, UserRepository
from taskhub.server import HttpServer
from taskhub.tasks import (
    ChangeOwnerUseCase, CreateTaskUseCase, DeleteTaskUseCase, FinishTaskUseCase,
    GetTaskUseCase, GetUserTasksUseCase, UnfinishTaskUseCase, UpdateTaskUseCase,
)
from taskhub.users import (
    CreateUserUseCase, DeleteUserUseCase, GetUserUseCase, UpdateUserUseCase,
)

users, tasks = UserRepository(), TaskRepository()
server = HttpServer(
    CreateUserUseCase(users), GetUserUseCase(users),
    UpdateUserUseCase(users), DeleteUserUseCase(users),
    CreateTaskUseCase(users, tasks), GetTaskUseCase(tasks),
    UpdateTaskUseCase(tasks), DeleteTaskUseCase(tasks),
    GetUserTasksUseCase(users, tasks), FinishTaskUseCase(tasks),
    UnfinishTaskUseCase(tasks), ChangeOwnerUseCase(users, tasks),
)
app = server.create_app()
```

| Method | Path                          | Body / query                      | Success                |
|--------|-------------------------------|-----------------------------------|------------------------|
| GET    | `/user/?id=<uuid>`            |                                   | 200, the user          |
| POST   | `/user/`                      | `Name`, `Email`                   | 201, the user          |
| PUT    | `/user/<id>`                  | `Name` and/or `Email`             | 200, `OK`              |
| DELETE | `/user/<id>`                  |                                   | 200, `OK`              |
| GET    | `/task/?id=<uuid>`            |                                   | 200, the task          |
| POST   | `/task/`                      | `UserId`, `Name`, `Description`   | 201, the task          |
| PUT    | `/task/<id>`                  | `Name` and/or `Description`       | 200, `OK`              |
| DELETE | `/task/<id>`                  |                                   | 200, `OK`              |
| GET    | `/task/user/<userId>`         |                                   | 200, list of tasks     |
| POST   | `/task/<id>/finish`           |                                   | 200, `OK`              |
| POST   | `/task/<id>/unfinish`         |                                   | 200, `OK`              |
| POST   | `/task/<id>/change-owner`     | `UserId`                          | 200, `OK`              |

Request bodies may be a JSON object, a URL-encoded form or a multipart
form. Field names are matched case-insensitively, so `userId`, `UserId`
and `userid` are all accepted. The finish and unfinish routes do not check
the form of the id. An unknown id simply gives `404`.

Failures come back as JSON:

- A body that is not a JSON object or form, or a field that is not a
  string, gives `400` with `{"error": "invalid request body"}`.
- A failed validation gives `400` with
  `{"errors": {"<Field>": "field <Field> validation failed: <rule>"}}`.
- A use case error gives `{"error": "<message>"}` with the status for its
  code:

  | Code                  | Status |
  |-----------------------|--------|
  | `NOT_FOUND`           | 404    |
  | `BAD_REQUEST`         | 400    |
  | `CONFLICT`            | 409    |
  | `FAILED_PRECONDITION` | 412    |
  | `INTERNAL`            | 500    |

Sample payload for creating a user:

```json
{"name": "Ana", "email": "ana@example.com"}
```

## What it does not do

- Data lives only in the memory of the running process and is lost when
  it stops. There is no database or file storage.
- Deleting a user leaves that user's tasks in place.
- There is no command-line program. To serve the API, build an
  `HttpServer` in code as shown above and call `start()`, or hand the
  result of `create_app()` to a WSGI server.
- There is no authentication or authorisation.