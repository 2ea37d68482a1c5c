from api_scaffold.infra.repositories.user_repository import (
    InMemoryUserRepository,
    UserRecord,
    UserRepository,
)

__all__ = [
    "InMemoryUserRepository",
    "UserRecord",
    "UserRepository",
]
