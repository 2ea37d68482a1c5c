from pathlib import Path
from threading import Thread

import pytest

from api_scaffold.infra.db.database import Database
from api_scaffold.infra.repositories.sql_user_repository import SqlUserRepository
from api_scaffold.infra.repositories.user_repository import InMemoryUserRepository
from api_scaffold.services.errors import ConflictError, NotFoundError, UnauthorizedError
from api_scaffold.services.user_service import UserService


def test_user_service_crud_flow() -> None:
    service = UserService(repository=InMemoryUserRepository())

    created = service.create_user(email=" Ada@Example.com ", name=" Ada ", password="correct-horse")
    assert created.email == "ada@example.com"
    assert created.name == "Ada"
    assert created.password_hash != "correct-horse"

    assert [user.id for user in service.list_users()] == [created.id]
    assert service.get_user(created.id).id == created.id

    service.delete_user(created.id)
    assert service.list_users() == []


def test_authenticate_checks_the_password() -> None:
    service = UserService(repository=InMemoryUserRepository())
    created = service.create_user(email="ada@example.com", name="Ada", password="correct-horse")

    assert service.authenticate("ADA@example.com", "correct-horse").id == created.id

    with pytest.raises(UnauthorizedError) as wrong_password:
        service.authenticate("ada@example.com", "wrong-horse")
    with pytest.raises(UnauthorizedError) as unknown_email:
        service.authenticate("nobody@example.com", "correct-horse")

    assert wrong_password.value.message == "Invalid credentials"
    assert unknown_email.value.message == "Invalid credentials"


def test_missing_user_raises_not_found() -> None:
    service = UserService(repository=InMemoryUserRepository())

    with pytest.raises(NotFoundError) as excinfo:
        service.get_user("missing")

    assert excinfo.value.message == "User not found"
    with pytest.raises(NotFoundError):
        service.delete_user("missing")


def test_duplicate_email_is_a_conflict() -> None:
    service = UserService(repository=InMemoryUserRepository())
    service.create_user(email="ada@example.com", name="Ada", password="correct-horse")

    with pytest.raises(ConflictError):
        service.create_user(email="ADA@example.com", name="Other Ada", password="correct-horse")


def test_memory_reads_are_safe_while_users_are_created() -> None:
    repository = InMemoryUserRepository()
    for index in range(2000):
        repository.create(email=f"seed{index}@example.com", name="Seed", password_hash="x")

    errors: list[BaseException] = []
    done = False

    def writer() -> None:
        index = 0
        while not done:
            repository.create(email=f"new{index}@example.com", name="New", password_hash="x")
            index += 1

    def reader() -> None:
        try:
            for _ in range(200):
                with pytest.raises(NotFoundError):
                    repository.get_by_email("absent@example.com")
                repository.list()
        except BaseException as exc:  # collected and asserted on below
            errors.append(exc)

    writer_thread = Thread(target=writer)
    readers = [Thread(target=reader) for _ in range(4)]
    writer_thread.start()
    for thread in readers:
        thread.start()
    for thread in readers:
        thread.join()
    done = True
    writer_thread.join()

    assert errors == []


def test_sql_repository_flow(tmp_path: Path) -> None:
    database = Database.connect(f"sqlite:///{tmp_path / 'users.db'}")
    try:
        with database.session() as db:
            service = UserService(repository=SqlUserRepository(db))

            created = service.create_user(email="grace@example.com", name="Grace", password="cobol-1959")
            assert service.get_user(created.id).email == "grace@example.com"
            assert service.authenticate("Grace@Example.com", "cobol-1959").id == created.id
            assert created.created_at.tzinfo is not None

            with pytest.raises(UnauthorizedError):
                service.authenticate("grace@example.com", "fortran")

            with pytest.raises(ConflictError):
                service.create_user(email="grace@example.com", name="Again", password="cobol-1959")

            assert len(service.list_users()) == 1
            service.delete_user(created.id)

            with pytest.raises(NotFoundError):
                service.get_user(created.id)
    finally:
        database.dispose()
