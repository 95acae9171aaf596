from __future__ import annotations

import json
from collections.abc import Callable, Iterator, Mapping
from pathlib import Path

import httpx
import pytest

from lastfmpy.adapters.http_resilience import ResilientClient
from lastfmpy.adapters.lastfm import AlbumMethodsClient, LastFmAPIClient
from lastfmpy.config import LastFmConfig, RateLimit, ResilienceConfig, RetryPolicy

FIXTURES = Path(__file__).resolve().parent / "data" / "lastfm"

LastFmPayload = dict[str, object]
Handler = Callable[[httpx.Request], httpx.Response]


class RecordingTransport:
    """Returns a canned reply and remembers every parameter mapping it was given."""

    def __init__(self, response: Mapping[str, object] | None = None) -> None:
        self.response: Mapping[str, object] = response if response is not None else {}
        self.calls: list[dict[str, object]] = []

    def call(self, parameters: Mapping[str, object]) -> Mapping[str, object]:
        self.calls.append(dict(parameters))
        return self.response

    @property
    def last_call(self) -> dict[str, object]:
        assert self.calls, "transport was never called"
        return self.calls[-1]


def _load_payload(name: str) -> LastFmPayload:
    with (FIXTURES / f"{name}.json").open(encoding="utf-8") as handle:
        return json.load(handle)


@pytest.fixture
def load_payload() -> Callable[[str], LastFmPayload]:
    return _load_payload


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def album_client(transport: RecordingTransport) -> AlbumMethodsClient:
    return AlbumMethodsClient(transport)


@pytest.fixture
def resilience() -> ResilienceConfig:
    return ResilienceConfig(
        name="lastfm-test",
        base_url="https://ws.audioscrobbler.test/2.0/",
        timeout_seconds=1.0,
        retry=RetryPolicy(total=2, backoff_factor=0.0, backoff_jitter=0.0),
        ratelimit=RateLimit(max_calls=100, per_seconds=1.0),
    )


@pytest.fixture
def lastfm_config(resilience: ResilienceConfig) -> LastFmConfig:
    return LastFmConfig(api_key="demo-key", resilience=resilience)


@pytest.fixture
def make_api_client(
    lastfm_config: LastFmConfig,
) -> Iterator[Callable[[Handler], LastFmAPIClient]]:
    created: list[LastFmAPIClient] = []

    def factory(handler: Handler) -> LastFmAPIClient:
        def client_factory(config: ResilienceConfig) -> ResilientClient:
            return ResilientClient(config, transport=httpx.MockTransport(handler))

        client = LastFmAPIClient(config=lastfm_config, client_factory=client_factory)
        created.append(client)
        return client

    try:
        yield factory
    finally:
        for client in created:
            client.close()
