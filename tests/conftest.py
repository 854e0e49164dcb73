from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the skistation package importable when running from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from skistation.core import config as core_config  # noqa: E402
from skistation.db import models  # noqa: E402
from skistation.db import session as db_session  # noqa: E402


@pytest.fixture()
def db_env(tmp_path, monkeypatch):
    """Point DATABASE_URL at a temporary SQLite file and reset settings/engine caches."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]

    engine = db_session.get_engine()
    models.Base.metadata.drop_all(bind=engine)
    models.Base.metadata.create_all(bind=engine)

    yield db_file

    try:
        models.Base.metadata.drop_all(bind=engine)
    finally:
        engine.dispose()
        core_config.get_settings.cache_clear()
        db_session.get_engine.cache_clear()
        db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture()
def session(db_env):
    with db_session.get_session() as s:
        yield s


@pytest.fixture()
def client(db_env):
    from fastapi.testclient import TestClient

    from skistation.app import app

    return TestClient(app)
