import asyncio
import os

import pytest

from conftest import performance
from player_ai.core.errors import ModelNotTrainedError
from player_ai.db.session import AsyncSessionLocal
from player_ai.services.performance_service import PerformanceService
from player_ai.services.training_service import ModelSyncStatus


async def test_add_then_get_all_returns_submitted_fields(service):
    res = await service.add(performance())

    rows = await service.get_all()
    assert len(rows) == 1
    row = rows[0]
    assert row.id is not None
    assert row.id == res.record.id
    assert (row.average, row.strike_rate, row.bowling_average, row.economy_rate, row.fielding_stats, row.label) == (
        45.2,
        88.0,
        25.0,
        4.5,
        3.0,
        1.0,
    )


async def test_add_assigns_fresh_unique_ids(service):
    first = await service.add(performance())
    second = await service.add(performance(average=12.0, label=0.0))

    assert first.record.id != second.record.id


async def test_add_retrains_and_writes_model(service, trainer, model_path):
    res = await service.add(performance())

    assert res.sync.status is ModelSyncStatus.SYNCED
    assert res.sync.ok
    assert res.sync.trained_on == 1
    assert res.sync.epochs == 50
    assert model_path.exists()
    assert trainer.model.is_trained


async def test_update_overwrites_every_field_and_retrains(service, model_path):
    created = await service.add(performance())
    os.utime(model_path, (0, 0))

    res = await service.update(
        created.record.id,
        performance(average=10.0, strikeRate=50.0, bowlingAverage=60.0, economyRate=9.0, fieldingStats=0.0, label=0.0),
    )

    assert res is not None
    assert res.record.id == created.record.id
    assert res.record.average == 10.0
    assert res.record.label == 0.0
    assert res.sync.ok
    assert model_path.stat().st_mtime > 0

    rows = await service.get_all()
    assert [r.strike_rate for r in rows] == [50.0]


async def test_update_unknown_id_changes_nothing(service, trainer, model_path):
    await service.add(performance())
    os.utime(model_path, (0, 0))
    before = await service.get_all()

    res = await service.update(9999, performance(average=1.0))

    assert res is None
    assert await service.get_all() == before
    assert model_path.stat().st_mtime == 0


async def test_delete_removes_and_retrains(service, model_path):
    created = await service.add(performance())
    os.utime(model_path, (0, 0))

    res = await service.delete(created.record.id)

    assert res
    assert res.deleted is True
    assert res.sync.trained_on == 0
    assert model_path.stat().st_mtime > 0
    assert await service.get_all() == []


async def test_delete_unknown_id_returns_false(service, model_path):
    await service.add(performance())
    os.utime(model_path, (0, 0))

    res = await service.delete(9999)

    assert not res
    assert res.sync is None
    assert len(await service.get_all()) == 1
    assert model_path.stat().st_mtime == 0


async def test_out_of_range_id_is_not_found(service):
    await service.add(performance())

    assert await service.update(2**63, performance()) is None
    assert not await service.delete(2**63)
    assert not await service.delete(-1)
    assert len(await service.get_all()) == 1


async def test_add_then_delete_scenario(service):
    res = await service.add(performance())
    rows = await service.get_all()
    assert len(rows) == 1 and rows[0].id is not None

    await service.delete(res.record.id)
    assert await service.get_all() == []


async def test_predict_is_stable_across_reads(service):
    await service.add(performance())
    await service.add(performance(average=8.0, strikeRate=50.0, bowlingAverage=55.0, label=0.0))
    vector = [45.2, 88.0, 25.0, 4.5, 3.0]

    before = service.predict_suitability(vector)
    await service.get_all()
    after = service.predict_suitability(vector)

    assert isinstance(before, bool)
    assert before == after


async def test_predict_before_any_training(service):
    with pytest.raises(ModelNotTrainedError):
        service.predict_suitability([45.2, 88.0, 25.0, 4.5, 3.0])


async def test_concurrent_writes_end_with_model_trained_on_full_table(db, trainer):
    async def add_one(avg):
        async with AsyncSessionLocal() as session:
            return await PerformanceService(session, trainer).add(performance(average=avg))

    results = await asyncio.gather(*(add_one(avg) for avg in (10.0, 20.0, 30.0)))

    assert all(r.sync.ok for r in results)
    assert sorted(r.sync.trained_on for r in results)[-1] == 3
    assert trainer.model.meta["samples"] == 3
    assert trainer.last_sync.trained_on == 3
