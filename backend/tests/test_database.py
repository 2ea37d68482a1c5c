import logging
from pathlib import Path

import pytest
from sqlalchemy import inspect

from api_scaffold.infra.db.database import Database, DatabaseConnectionError


def test_connect_creates_tables_and_logs(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="api_scaffold.infra.db.database"):
        database = Database.connect(f"sqlite:///{tmp_path / 'app.db'}")

    try:
        assert "users" in inspect(database.engine).get_table_names()
        assert any("Database connected" in record.getMessage() for record in caplog.records)
    finally:
        database.dispose()


def test_session_is_closed_after_use(tmp_path: Path) -> None:
    database = Database.connect(f"sqlite:///{tmp_path / 'app.db'}")
    try:
        with database.session() as db:
            assert db.is_active
    finally:
        database.dispose()


def test_empty_url_is_rejected() -> None:
    with pytest.raises(DatabaseConnectionError):
        Database.connect("")


def test_unparseable_url_is_rejected() -> None:
    with pytest.raises(DatabaseConnectionError):
        Database.connect("not a database url")
