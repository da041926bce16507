import uuid

import pytest

from taskhub.domain import Task, User
from taskhub.errors import AppError, ErrorStatus
from taskhub.repositories import TaskRepository, UserRepository


def test_user_create_assigns_uuid_and_round_trips():
    repo = UserRepository()
    user = repo.create("Ana", "ana@example.com")
    assert str(uuid.UUID(user.id)) == user.id
    fetched = repo.get_one_by_id(user.id)
    assert fetched == user


def test_user_ids_are_unique():
    repo = UserRepository()
    ids = {repo.create("A", f"a{i}@example.com").id for i in range(5)}
    assert len(ids) == 5


def test_user_lookup_by_email():
    repo = UserRepository()
    user = repo.create("Ana", "ana@example.com")
    assert repo.get_one_by_email("ana@example.com").id == user.id
    with pytest.raises(AppError) as info:
        repo.get_one_by_email("nobody@example.com")
    assert info.value.code is ErrorStatus.NOT_FOUND


def test_user_missing_id_raises_not_found():
    repo = UserRepository()
    with pytest.raises(AppError) as info:
        repo.get_one_by_id("missing")
    assert info.value.code is ErrorStatus.NOT_FOUND


def test_user_get_all_keeps_order_and_seed():
    seed = User(id="seed", name="Seed", email="seed@example.com")
    repo = UserRepository([seed])
    created = repo.create("Ana", "ana@example.com")
    assert [u.id for u in repo.get_all()] == ["seed", created.id]


def test_user_update_changes_only_given_fields():
    repo = UserRepository()
    user = repo.create("Ana", "ana@example.com")
    repo.update(user.id, name="Bia")
    fetched = repo.get_one_by_id(user.id)
    assert fetched.name == "Bia"
    assert fetched.email == "ana@example.com"
    repo.update(user.id, email="bia@example.com")
    assert repo.get_one_by_id(user.id).email == "bia@example.com"


def test_user_update_and_delete_missing_raise():
    repo = UserRepository()
    for call in (lambda: repo.update("missing", name="x"), lambda: repo.delete("missing")):
        with pytest.raises(AppError) as info:
            call()
        assert info.value.code is ErrorStatus.NOT_FOUND


def test_user_delete_removes():
    repo = UserRepository()
    user = repo.create("Ana", "ana@example.com")
    repo.delete(user.id)
    assert repo.get_all() == []


def test_returned_user_is_a_copy():
    repo = UserRepository()
    user = repo.create("Ana", "ana@example.com")
    user.name = "Changed"
    assert repo.get_one_by_id(user.id).name == "Ana"


def test_task_create_round_trip():
    repo = TaskRepository()
    task = repo.create("Write", "Write docs", "u1")
    assert task.done is False
    assert repo.get_one_by_id(task.id) == task


def test_task_get_by_user_filters():
    repo = TaskRepository()
    first = repo.create("A", "a", "u1")
    repo.create("B", "b", "u2")
    third = repo.create("C", "c", "u1")
    assert [t.id for t in repo.get_by_user("u1")] == [first.id, third.id]
    assert repo.get_by_user("nobody") == []
    assert len(repo.get_all()) == 3


def test_task_update_fields():
    repo = TaskRepository([Task(id="t1", name="A", description="a", user_id="u1")])
    repo.update("t1", done=True)
    repo.update("t1", user_id="u2")
    task = repo.get_one_by_id("t1")
    assert task.done is True
    assert task.user_id == "u2"
    assert task.name == "A"
    repo.update("t1", name="B", description="b", done=False)
    task = repo.get_one_by_id("t1")
    assert (task.name, task.description, task.done) == ("B", "b", False)


def test_task_delete_and_missing():
    repo = TaskRepository()
    task = repo.create("A", "a", "u1")
    repo.delete(task.id)
    with pytest.raises(AppError) as info:
        repo.get_one_by_id(task.id)
    assert info.value.code is ErrorStatus.NOT_FOUND
    with pytest.raises(AppError):
        repo.delete(task.id)