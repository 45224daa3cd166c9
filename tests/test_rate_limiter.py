"""Tests for the sliding-window webhook rate limiter."""

from server.core.RateLimiter import RateLimiter


class _Clock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def test_defaults(helper_config) -> None:
    limiter = RateLimiter(helper_config)

    assert limiter.limit == 30
    assert limiter.retry_after() == 60


def test_window_is_sliding(helper_config) -> None:
    clock = _Clock()
    limiter = RateLimiter(helper_config, limit=3, window=60, clock=clock)

    assert [limiter.hit() for _ in range(3)] == [True, True, True]
    assert limiter.hit() is False

    clock.now = 30
    assert limiter.hit() is False

    clock.now = 60.5
    assert limiter.hit() is True
    assert limiter.hit() is True
    assert limiter.hit() is True
    assert limiter.hit() is False


def test_limit_from_environment(monkeypatch, helper_config) -> None:
    monkeypatch.setenv("WEBHOOK_RATE_LIMIT", "5")

    assert RateLimiter(helper_config).limit == 5
