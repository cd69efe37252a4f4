import asyncio

import httpx
import pytest

from gcloud_ops.config import AppConfig, EndpointsConfig, PollingConfig
from gcloud_ops.domain import AuthKind, Credential


class RecordingTransport:
    """Answers requests from a queue of responses and records every request."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._responses: list = []

    def queue(self, *responses) -> "RecordingTransport":
        self._responses.extend(responses)
        return self

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            raise AssertionError(f"Unexpected request: {request.method} {request.url}")
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


class FakeClock:
    def __init__(self):
        self.now = 0.0
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


def run(coro):
    return asyncio.run(coro)


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def config():
    return AppConfig(
        endpoints=EndpointsConfig(
            storage_root="https://storage.test/storage/v1",
            storage_upload_root="https://storage.test/upload/storage/v1",
            speech_root="https://speech.test/v1",
        ),
        polling=PollingConfig(max_wait_minutes=1, interval_seconds=0),
    )


@pytest.fixture
def api_key():
    return Credential(kind=AuthKind.API_KEY, secret="test-key")


@pytest.fixture
def oauth_token():
    return Credential(
        kind=AuthKind.OAUTH_TOKEN, secret="ya29.token", quota_project="billing-proj"
    )


@pytest.fixture
def empty_credential():
    return Credential(kind=AuthKind.API_KEY, secret="")
