"""Fixtures compartidas: almacenes sembrados con datos conocidos y cliente HTTP."""
import asyncio
import os
from datetime import datetime, timezone

# Antes de importar la app: sin siembra automática ni archivo por defecto
os.environ.setdefault("STORE_BACKEND", "memory")
os.environ.setdefault("SEED_ON_STARTUP", "false")

import pytest
from fastapi.testclient import TestClient

from rimworld_guides.core.config import get_settings
from rimworld_guides.db.database import Database, MemoryDatabase, get_db
from rimworld_guides.main import app
from rimworld_guides.models.guide import GuideCreate, TipCreate


def _guide(slug, day, category="Basics", difficulty="Beginner", tags=None, **kw):
    return GuideCreate(
        slug=slug,
        title=kw.pop("title", slug.replace("-", " ").title()),
        description=kw.pop("description", f"About {slug}"),
        content=kw.pop("content", f"# {slug}"),
        category=category,
        difficulty=difficulty,
        tags=tags if tags is not None else [],
        created_at=datetime(2024, 3, day, 9, 30, tzinfo=timezone.utc),
    )


SCENARIO_GUIDES = [
    _guide("getting-started", 1, tags=["a", "b", "c"], title="Getting Started"),
    _guide("base-defense", 2, category="Combat", difficulty="Advanced",
           tags=["defense", "raids"], content="Build a Killbox with 100% coverage"),
    _guide("food-production", 3, category="Farming", tags=["food"],
           description="Rice, corn and the freezer"),
]

SCENARIO_TIPS = [
    TipCreate(title="Clean kitchen", content="Tile floors.", category="Basics", difficulty="Beginner"),
]


def run(coro):
    return asyncio.run(coro)


@pytest.fixture
def sqlite_db(tmp_path):
    db = Database(tmp_path / "nested" / "rimworld.db", seed_guides=SCENARIO_GUIDES, seed_tips=SCENARIO_TIPS)
    run(db.initialize())
    return db


@pytest.fixture
def memory_db():
    db = MemoryDatabase(seed_guides=SCENARIO_GUIDES, seed_tips=SCENARIO_TIPS)
    run(db.initialize())
    return db


@pytest.fixture(params=["sqlite", "memory"])
def store(request, tmp_path):
    """Ambos almacenes deben comportarse igual ante la misma consulta."""
    if request.param == "sqlite":
        db = Database(tmp_path / "rimworld.db", seed_guides=SCENARIO_GUIDES, seed_tips=SCENARIO_TIPS)
    else:
        db = MemoryDatabase(seed_guides=SCENARIO_GUIDES, seed_tips=SCENARIO_TIPS)
    run(db.initialize())
    return db


@pytest.fixture
def client(store):
    app.dependency_overrides[get_db] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def settings_env(monkeypatch):
    """Permite cambiar variables de entorno y reconstruir Settings."""
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
