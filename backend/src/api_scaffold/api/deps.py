from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Union

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from api_scaffold.infra.db.database import Database
from api_scaffold.infra.repositories.sql_user_repository import SqlUserRepository
from api_scaffold.infra.repositories.user_repository import InMemoryUserRepository, UserRecord
from api_scaffold.services.auth import TokenService
from api_scaffold.services.errors import NotFoundError, UnauthorizedError
from api_scaffold.services.user_service import UserService

UserServiceProvider = Union[Callable[[], UserService], Callable[[], Iterator[UserService]]]

_bearer = HTTPBearer(auto_error=False)


def build_user_service_provider(database: Database | None) -> UserServiceProvider:
    """Return the FastAPI dependency that hands a UserService to each request.

    Without a database every request shares one in-memory repository; with one,
    each request gets its own session, closed when the response is done.
    """
    if database is None:
        repository = InMemoryUserRepository()

        def _memory_user_service() -> UserService:
            return UserService(repository=repository)

        return _memory_user_service

    def _sql_user_service() -> Iterator[UserService]:
        with database.session() as db:
            yield UserService(repository=SqlUserRepository(db))

    return _sql_user_service


def build_current_user_dependency(
    tokens: TokenService,
    get_user_service: UserServiceProvider,
) -> Callable[..., UserRecord]:
    def _current_user(
        credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
        service: UserService = Depends(get_user_service),
    ) -> UserRecord:
        if credentials is None:
            raise UnauthorizedError("Missing bearer token")
        user_id = tokens.verify(credentials.credentials)
        try:
            return service.get_user(user_id)
        except NotFoundError as exc:
            raise UnauthorizedError("Invalid token") from exc

    return _current_user
