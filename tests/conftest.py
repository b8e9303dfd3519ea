"""Shared fixtures for tagsearch tests."""

import json

import httpx
import pytest

from tagsearch.config import Settings
from tagsearch.pipeline.rate_limiter import RateLimiter


class FakeClock:
    """Manual clock whose sleep advances time instantly."""

    def __init__(self):
        self.now = 0.0
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class ScriptedApi:
    """Serves a fixed sequence of JSON bodies and records each request."""

    def __init__(self, bodies):
        self.bodies = list(bodies)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        body = self.bodies.pop(0)
        return httpx.Response(200, content=json.dumps(body).encode())

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


def make_items(*ids: str) -> list[dict]:
    return [
        {
            "id": item_id,
            "created_at": "2023-01-15T12:00:00.000Z",
            "text": f"tweet {item_id}",
            "edit_history_tweet_ids": [item_id],
        }
        for item_id in ids
    ]


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        bearer_token="test-token",
        output_dir=tmp_path,
        page_delay_seconds=0.0,
    )


@pytest.fixture
def rate_limiter(clock):
    return RateLimiter(capacity=300, refill=300, interval=900, clock=clock, sleep=clock.sleep)
