from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from threading import Lock
from typing import Protocol
from uuid import uuid4

from api_scaffold.services.errors import ConflictError, NotFoundError


@dataclass
class UserRecord:
    id: str
    email: str
    name: str
    password_hash: str = field(default="", repr=False)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class UserRepository(Protocol):
    def list(self) -> list[UserRecord]: ...

    def get(self, user_id: str) -> UserRecord: ...

    def get_by_email(self, email: str) -> UserRecord: ...

    def create(self, email: str, name: str, password_hash: str) -> UserRecord: ...

    def delete(self, user_id: str) -> None: ...


def normalize_email(email: str) -> str:
    return email.strip().lower()


class InMemoryUserRepository:
    def __init__(self) -> None:
        self._lock = Lock()
        self._users: dict[str, UserRecord] = {}

    def list(self) -> list[UserRecord]:
        with self._lock:
            users = list(self._users.values())
        return sorted(users, key=lambda user: user.created_at)

    def get(self, user_id: str) -> UserRecord:
        with self._lock:
            user = self._users.get(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    def get_by_email(self, email: str) -> UserRecord:
        wanted = normalize_email(email)
        with self._lock:
            user = next((user for user in self._users.values() if user.email == wanted), None)
        if user is not None:
            return user
        raise NotFoundError("User", wanted)

    def create(self, email: str, name: str, password_hash: str) -> UserRecord:
        user = UserRecord(
            id=str(uuid4()),
            email=normalize_email(email),
            name=name.strip(),
            password_hash=password_hash,
        )
        with self._lock:
            if any(existing.email == user.email for existing in self._users.values()):
                raise ConflictError(f"User with email {user.email} already exists")
            self._users[user.id] = user
        return user

    def delete(self, user_id: str) -> None:
        with self._lock:
            if user_id not in self._users:
                raise NotFoundError("User", user_id)
            del self._users[user_id]
