from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import ArgumentError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from api_scaffold.infra.db.models import Base

logger = logging.getLogger(__name__)


class DatabaseConnectionError(RuntimeError):
    """The database could not be reached at startup."""


class Database:
    """Owns the engine and session factory for one process.

    Built once at startup with :meth:`connect` and handed to whatever needs
    sessions.
    """

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self._sessions = sessionmaker(bind=engine, autoflush=False, autocommit=False, class_=Session)

    @classmethod
    def connect(cls, url: str) -> Database:
        if not url:
            raise DatabaseConnectionError("DB_URL is required to connect to a database")

        connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
        try:
            engine = create_engine(url, pool_pre_ping=True, connect_args=connect_args)
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            Base.metadata.create_all(engine)
        except SQLAlchemyError as exc:
            raise DatabaseConnectionError(f"Could not connect to {_safe_url(url)}") from exc

        logger.info("Database connected: %s", _safe_url(url))
        return cls(engine)

    @contextmanager
    def session(self) -> Iterator[Session]:
        db = self._sessions()
        try:
            yield db
        finally:
            db.close()

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info("Database connection pool disposed")


def _safe_url(url: str) -> str:
    try:
        return make_url(url).render_as_string(hide_password=True)
    except ArgumentError:
        return "<unparseable url>"
