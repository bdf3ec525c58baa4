import os
import tempfile
from contextlib import contextmanager

import pytest

# Keep log files and the default SQLite file out of the working tree
_workdir = tempfile.mkdtemp(prefix="localized-settings-tests-")
os.environ.setdefault("LOG__DIR", os.path.join(_workdir, "logs"))
os.environ.setdefault("DATABASE__URL", f"sqlite:///{_workdir}/settings.db")

from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from localized_settings.models import Base  # noqa: E402
from localized_settings.stores import settings_store  # noqa: E402


@pytest.fixture
def sqlite_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def settings_db(monkeypatch: pytest.MonkeyPatch, sqlite_engine):
    """Route SettingsStore through a fresh in-memory database."""
    session_factory = sessionmaker(
        bind=sqlite_engine, autoflush=False, expire_on_commit=True
    )

    @contextmanager
    def fake_database_session():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    monkeypatch.setattr(settings_store, "database_session", fake_database_session)
    return sqlite_engine
