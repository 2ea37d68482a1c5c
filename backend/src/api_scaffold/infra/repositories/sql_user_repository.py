from __future__ import annotations

from datetime import timezone
from uuid import uuid4

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from api_scaffold.infra.db.models import UserModel
from api_scaffold.infra.repositories.user_repository import UserRecord, UserRepository, normalize_email
from api_scaffold.services.errors import ConflictError, NotFoundError


class SqlUserRepository(UserRepository):
    def __init__(self, db: Session) -> None:
        self._db = db

    def _to_record(self, model: UserModel) -> UserRecord:
        created_at = model.created_at
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return UserRecord(
            id=model.id,
            email=model.email,
            name=model.name,
            password_hash=model.password_hash,
            created_at=created_at.astimezone(timezone.utc),
        )

    def list(self) -> list[UserRecord]:
        rows = self._db.scalars(select(UserModel).order_by(UserModel.created_at.asc())).all()
        return [self._to_record(row) for row in rows]

    def get(self, user_id: str) -> UserRecord:
        row = self._db.get(UserModel, user_id)
        if row is None:
            raise NotFoundError("User", user_id)
        return self._to_record(row)

    def get_by_email(self, email: str) -> UserRecord:
        wanted = normalize_email(email)
        row = self._db.scalars(select(UserModel).where(UserModel.email == wanted)).first()
        if row is None:
            raise NotFoundError("User", wanted)
        return self._to_record(row)

    def create(self, email: str, name: str, password_hash: str) -> UserRecord:
        model = UserModel(
            id=str(uuid4()),
            email=normalize_email(email),
            name=name.strip(),
            password_hash=password_hash,
        )
        self._db.add(model)
        try:
            self._db.commit()
        except IntegrityError as exc:
            self._db.rollback()
            raise ConflictError(f"User with email {model.email} already exists") from exc
        self._db.refresh(model)
        return self._to_record(model)

    def delete(self, user_id: str) -> None:
        model = self._db.get(UserModel, user_id)
        if model is None:
            raise NotFoundError("User", user_id)
        self._db.delete(model)
        self._db.commit()
