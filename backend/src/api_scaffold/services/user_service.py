from __future__ import annotations

from api_scaffold.infra.repositories.user_repository import UserRecord, UserRepository
from api_scaffold.services.errors import NotFoundError, UnauthorizedError
from api_scaffold.services.passwords import PasswordHasher

_default_hasher = PasswordHasher()


class UserService:
    def __init__(self, repository: UserRepository, hasher: PasswordHasher = _default_hasher) -> None:
        self._repository = repository
        self._hasher = hasher

    def list_users(self) -> list[UserRecord]:
        return self._repository.list()

    def get_user(self, user_id: str) -> UserRecord:
        return self._repository.get(user_id)

    def create_user(self, email: str, name: str, password: str) -> UserRecord:
        return self._repository.create(email=email, name=name, password_hash=self._hasher.hash(password))

    def authenticate(self, email: str, password: str) -> UserRecord:
        """Return the user owning these credentials.

        Unknown emails and wrong passwords fail the same way, so callers cannot
        tell which emails are registered.
        """
        try:
            user = self._repository.get_by_email(email)
        except NotFoundError as exc:
            self._hasher.verify_against_dummy(password)
            raise UnauthorizedError("Invalid credentials") from exc

        if not self._hasher.verify(password, user.password_hash):
            raise UnauthorizedError("Invalid credentials")
        return user

    def delete_user(self, user_id: str) -> None:
        self._repository.delete(user_id)
