import numpy as np
import pytest

from player_ai.core.errors import ModelNotTrainedError
from player_ai.ml.model_registry import load_model, save_model
from player_ai.ml.suitability_model import SuitabilityModel


def _dataset():
    X = np.array(
        [
            [45.2, 88.0, 25.0, 4.5, 3.0],
            [50.1, 92.0, 40.0, 6.0, 4.0],
            [12.0, 60.0, 45.0, 7.5, 0.5],
            [8.5, 55.0, 50.0, 8.0, 1.0],
        ]
    )
    y = np.array([1, 1, 0, 0])
    return X, y


def test_untrained_model_refuses_to_predict():
    model = SuitabilityModel.create()

    assert not model.is_trained
    with pytest.raises(ModelNotTrainedError):
        model.predict([45.2, 88.0, 25.0, 4.5, 3.0])


def test_fit_then_predict_returns_bool():
    X, y = _dataset()
    model = SuitabilityModel.create()

    model.fit(X, y, epochs=50)

    assert model.is_trained
    assert isinstance(model.predict([45.2, 88.0, 25.0, 4.5, 3.0]), bool)
    assert model.meta["samples"] == 4
    assert model.meta["epochs"] == 50


def test_fit_accepts_a_single_class():
    X, y = _dataset()
    model = SuitabilityModel.create()

    model.fit(X[:2], y[:2], epochs=5)

    assert list(model.network.classes_) == [0, 1]


def test_fit_on_empty_batch_is_noop():
    model = SuitabilityModel.create()
    model.fit(np.empty((0, 5)), np.empty((0,), dtype=int), epochs=50)

    assert not model.is_trained


def test_wrong_vector_length_propagates():
    X, y = _dataset()
    model = SuitabilityModel.create()
    model.fit(X, y, epochs=5)

    with pytest.raises(ValueError):
        model.predict([1.0, 2.0])


def test_clone_is_independent():
    X, y = _dataset()
    model = SuitabilityModel.create()

    clone = model.clone()
    clone.fit(X, y, epochs=5)

    assert clone.is_trained
    assert not model.is_trained


def test_load_missing_artifact_gives_fresh_model(tmp_path):
    model = load_model(tmp_path / "absent.joblib")
    assert not model.is_trained


def test_save_and_reload_keeps_weights(tmp_path):
    X, y = _dataset()
    model = SuitabilityModel.create()
    model.fit(X, y, epochs=20)
    path = tmp_path / "nested" / "player_model.joblib"

    save_model(model, path)
    reloaded = load_model(path)

    assert reloaded.is_trained
    assert reloaded.meta["samples"] == 4
    for row in X:
        assert reloaded.predict(row) == model.predict(row)
    # pas de fichier temporaire résiduel
    assert [p.name for p in path.parent.iterdir()] == ["player_model.joblib"]


def test_save_into_unwritable_location_raises_oserror(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")

    with pytest.raises(OSError):
        save_model(SuitabilityModel.create(), blocker / "player_model.joblib")
