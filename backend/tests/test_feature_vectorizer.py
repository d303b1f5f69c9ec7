from types import SimpleNamespace

import numpy as np

from player_ai.ml.feature_vectorizer import (
    FEATURE_ORDER,
    as_input,
    build_training_set,
    encode_label,
    vectorize,
)


def _record(**kw):
    base = dict(
        average=45.2,
        strike_rate=88.0,
        bowling_average=25.0,
        economy_rate=4.5,
        fielding_stats=3.0,
        label=1.0,
    )
    base.update(kw)
    return SimpleNamespace(**base)


def test_vectorize_follows_feature_order():
    assert vectorize(_record()) == [45.2, 88.0, 25.0, 4.5, 3.0]
    assert len(FEATURE_ORDER) == 5


def test_label_threshold():
    assert encode_label(1.0) == 1
    assert encode_label(0.5) == 1
    assert encode_label(0.49) == 0
    assert encode_label(0.0) == 0


def test_build_training_set_one_row_per_record():
    X, y = build_training_set([_record(), _record(average=12.0, label=0.0)])

    assert X.shape == (2, 5)
    assert X[1][0] == 12.0
    assert y.tolist() == [1, 0]


def test_build_training_set_empty_table():
    X, y = build_training_set([])

    assert X.shape == (0, 5)
    assert y.shape == (0,)


def test_as_input_is_single_row():
    x = as_input([1, 2, 3, 4, 5])
    assert x.shape == (1, 5)
    assert x.dtype == np.float64
