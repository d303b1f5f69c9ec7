"""
Fixtures partagées.

- Base SQLite (aiosqlite) dans un dossier temporaire, schéma recréé pour chaque test.
- Modèle écrit dans tmp_path : chaque test part d’un réseau vierge.
- Les variables d’environnement sont posées avant tout import de player_ai (settings lus à l’import).
"""

import os
import tempfile
from pathlib import Path

_TMP = Path(tempfile.mkdtemp(prefix="player_ai_tests_"))

os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TMP / 'test.db'}"
os.environ["MODEL_PATH"] = str(_TMP / "boot_model.joblib")
os.environ["API_KEY"] = ""
os.environ["ENV"] = "test"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient

from player_ai.core.rate_limit import rate_limiter
from player_ai.db.base import Base
from player_ai.db.session import AsyncSessionLocal, engine
from player_ai.main import app
from player_ai.models.player_performance import PlayerPerformance  # noqa: F401  (metadata)
from player_ai.schemas.performances import PerformanceIn
from player_ai.services.performance_service import PerformanceService
from player_ai.services.training_service import TrainingService

SAMPLE = {
    "average": 45.2,
    "strikeRate": 88.0,
    "bowlingAverage": 25.0,
    "economyRate": 4.5,
    "fieldingStats": 3.0,
    "label": 1.0,
}


async def reset_schema() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


def performance(**overrides) -> PerformanceIn:
    data = {**SAMPLE, **overrides}
    return PerformanceIn.model_validate(data)


@pytest.fixture
def model_path(tmp_path):
    return tmp_path / "models" / "player_model.joblib"


@pytest.fixture
def trainer(model_path):
    return TrainingService(model_path, epochs=50)


@pytest.fixture
async def db():
    await reset_schema()
    async with AsyncSessionLocal() as session:
        yield session


@pytest.fixture
def service(db, trainer):
    return PerformanceService(db, trainer)


@pytest.fixture
def client(trainer):
    rate_limiter.reset()
    with TestClient(app) as c:
        c.portal.call(reset_schema)
        app.state.trainer = trainer
        yield c
