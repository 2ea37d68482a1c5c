from __future__ import annotations

from datetime import datetime, timedelta, timezone
import logging

from jose import JWTError, jwt

from api_scaffold.services.errors import ServiceUnavailableError, UnauthorizedError
from api_scaffold.settings import Settings

logger = logging.getLogger(__name__)


class TokenService:
    """Issues and verifies HMAC-signed bearer tokens for user ids."""

    def __init__(self, secret: str, *, algorithm: str = "HS256", expires_minutes: int = 60) -> None:
        self._secret = secret
        self._algorithm = algorithm
        self._expires = timedelta(minutes=expires_minutes)

    @classmethod
    def from_settings(cls, settings: Settings) -> TokenService:
        return cls(
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            expires_minutes=settings.jwt_expires_minutes,
        )

    def _require_secret(self) -> str:
        if not self._secret:
            raise ServiceUnavailableError("Authentication is not configured")
        return self._secret

    def issue(self, subject: str, *, now: datetime | None = None) -> str:
        secret = self._require_secret()
        issued_at = now or datetime.now(timezone.utc)
        claims = {
            "sub": subject,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self._expires).timestamp()),
        }
        return jwt.encode(claims, secret, algorithm=self._algorithm)

    def verify(self, token: str) -> str:
        secret = self._require_secret()
        try:
            claims = jwt.decode(token, secret, algorithms=[self._algorithm])
        except JWTError as exc:
            logger.debug("Rejected bearer token: %s", exc)
            raise UnauthorizedError("Invalid token") from exc

        subject = claims.get("sub")
        if not isinstance(subject, str) or not subject:
            raise UnauthorizedError("Invalid token")
        return subject
