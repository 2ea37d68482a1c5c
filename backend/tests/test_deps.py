from pathlib import Path

from api_scaffold.api.deps import build_user_service_provider
from api_scaffold.infra.db.database import Database
from api_scaffold.infra.repositories.sql_user_repository import SqlUserRepository
from api_scaffold.services.user_service import UserService


def test_user_service_defaults_to_memory() -> None:
    provide = build_user_service_provider(None)

    first = provide()
    first.create_user(email="ada@example.com", name="Ada", password="correct-horse")

    assert isinstance(first, UserService)
    assert len(provide().list_users()) == 1


def test_user_service_uses_sql_when_database_given(tmp_path: Path) -> None:
    database = Database.connect(f"sqlite:///{tmp_path / 'deps.db'}")
    try:
        provide = build_user_service_provider(database)
        services = provide()
        service = next(services)

        assert isinstance(service._repository, SqlUserRepository)
        services.close()
    finally:
        database.dispose()
