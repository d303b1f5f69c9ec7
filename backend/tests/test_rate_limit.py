import pytest
from starlette.requests import Request

from player_ai.core.errors import AppHTTPException
from player_ai.core.rate_limit import WINDOW_SECONDS, WriteRateLimiter
from player_ai.core.settings import settings


def make_request(method="POST", path="/performances", ip="10.0.0.1"):
    return Request({
        "type": "http",
        "method": method,
        "path": path,
        "query_string": b"",
        "headers": [],
        "client": (ip, 50000),
    })


@pytest.fixture
def limiter(monkeypatch):
    monkeypatch.setattr(settings, "RATE_LIMIT_ENABLED", True)
    monkeypatch.setattr(settings, "RATE_LIMIT_RPM", 2)
    return WriteRateLimiter()


def test_writes_over_limit_are_rejected(limiter):
    limiter.check(make_request(), now=0.0)
    limiter.check(make_request(method="PUT"), now=1.0)

    with pytest.raises(AppHTTPException) as exc:
        limiter.check(make_request(method="DELETE"), now=2.0)

    assert exc.value.status_code == 429
    # une autre IP garde son propre budget
    limiter.check(make_request(ip="10.0.0.2"), now=2.0)


def test_reads_and_predictions_are_free(limiter):
    for i in range(10):
        limiter.check(make_request(method="GET"), now=float(i))
        limiter.check(make_request(path="/performances/predict"), now=float(i))

    assert len(limiter) == 0


def test_window_slides(limiter):
    limiter.check(make_request(), now=0.0)
    limiter.check(make_request(), now=1.0)

    limiter.check(make_request(), now=WINDOW_SECONDS + 0.5)


def test_idle_clients_are_dropped(limiter):
    for i in range(50):
        limiter.check(make_request(ip=f"10.1.0.{i}"), now=1.0)
    assert len(limiter) == 50

    limiter.check(make_request(ip="10.9.9.9"), now=2 * WINDOW_SECONDS + 1.0)

    assert len(limiter) == 1
