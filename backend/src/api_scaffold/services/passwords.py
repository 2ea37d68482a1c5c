from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash


class PasswordHasher:
    def __init__(self) -> None:
        self._dummy_hash: str | None = None

    def hash(self, password: str) -> str:
        return str(generate_password_hash(password))

    def verify(self, password: str, hashed: str) -> bool:
        return bool(check_password_hash(hashed, password))

    def verify_against_dummy(self, password: str) -> None:
        """Spend one verification's worth of work when there is no user to check."""
        if self._dummy_hash is None:
            self._dummy_hash = self.hash("not-a-password")
        self.verify(password, self._dummy_hash)
