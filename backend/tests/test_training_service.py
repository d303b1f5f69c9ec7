import logging

from conftest import performance
from player_ai.ml.model_registry import load_model
from player_ai.ml.suitability_model import SuitabilityModel
from player_ai.services.performance_service import PerformanceService
from player_ai.services.training_service import ModelSyncStatus, TrainingService


async def test_empty_table_still_writes_artifact(db, trainer, model_path):
    sync = await trainer.retrain(db)

    assert sync.status is ModelSyncStatus.SYNCED
    assert sync.trained_on == 0
    assert model_path.exists()
    assert not trainer.model.is_trained


async def test_retrain_loads_existing_artifact_on_startup(db, trainer, model_path):
    await PerformanceService(db, trainer).add(performance())

    restarted = TrainingService(model_path)

    assert restarted.model.is_trained
    assert restarted.model.meta["samples"] == 1


async def test_save_failure_keeps_record_and_reports_not_persisted(db, tmp_path, caplog):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    trainer = TrainingService(blocker / "player_model.joblib")
    service = PerformanceService(db, trainer)

    with caplog.at_level(logging.ERROR, logger="player_ai.training"):
        res = await service.add(performance())

    assert res.sync.status is ModelSyncStatus.NOT_PERSISTED
    assert not res.sync.ok
    assert res.sync.error
    assert len(await service.get_all()) == 1
    # le fit a eu lieu : le modèle en mémoire est utilisable
    assert trainer.model.is_trained
    assert any("Failed to save the model" in r.getMessage() for r in caplog.records)


async def test_training_failure_keeps_previous_model(db, trainer, model_path, monkeypatch):
    service = PerformanceService(db, trainer)
    await service.add(performance())
    previous = trainer.model

    def boom(self, X, y, epochs):
        raise ValueError("diverged")

    monkeypatch.setattr(SuitabilityModel, "fit", boom)
    res = await service.add(performance(average=3.0, label=0.0))

    assert res.sync.status is ModelSyncStatus.TRAINING_FAILED
    assert res.sync.error == "diverged"
    assert trainer.model is previous
    assert len(await service.get_all()) == 2
    assert load_model(model_path).meta["samples"] == 1


async def test_retrain_swaps_in_a_new_model_instance(db, trainer):
    service = PerformanceService(db, trainer)
    before = trainer.model

    await service.add(performance())

    assert trainer.model is not before
    assert not before.is_trained
