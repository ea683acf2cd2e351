import os

os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from tuzla_guide_api.app.core import store as store_module
from tuzla_guide_api.app.core.config import settings
from tuzla_guide_api.app.core.db import init_db
from tuzla_guide_api.app.core.seed import seed_catalog
from tuzla_guide_api.app.core.store import GuideStore


@pytest.fixture
def db_path(tmp_path, monkeypatch) -> str:
    path = str(tmp_path / "guide.db")
    monkeypatch.setattr(settings, "database_url", path)
    init_db()
    return path


@pytest.fixture
def store(db_path) -> GuideStore:
    fresh = store_module.reset_store()
    yield fresh
    store_module.reset_store()


@pytest.fixture
def seeded_store(store: GuideStore) -> GuideStore:
    seed_catalog(store)
    return store


@pytest.fixture
def client(store: GuideStore):
    # Entering the context runs the startup event, which seeds the
    # empty database; leaving it runs the shutdown snapshot.
    from tuzla_guide_api.app.main import app

    with TestClient(app) as test_client:
        yield test_client
