"""HTTP transport behaviour against a mocked Last.fm endpoint."""

from __future__ import annotations

import time
import warnings
from typing import TYPE_CHECKING

import httpx
import pytest

from lastfmpy.adapters.lastfm import AlbumMethodsClient, LastFmAPIError, encode_parameters
from lastfmpy.adapters.lastfm.client import LastFmAPIClient
from lastfmpy.config import LastFmConfig, MissingConfigurationError, RateLimit, ResilienceConfig

if TYPE_CHECKING:
    from collections.abc import Callable

    Handler = Callable[[httpx.Request], httpx.Response]


def test_encode_parameters_drops_none_and_encodes_bools() -> None:
    encoded = encode_parameters(
        {"method": "album.search", "album": "believe", "limit": 5, "page": None, "autocorrect": True}
    )

    assert encoded == {"method": "album.search", "album": "believe", "limit": "5", "autocorrect": "1"}
    assert encode_parameters({"autocorrect": False}) == {"autocorrect": "0"}


def test_call_sends_query_and_returns_payload(
    make_api_client: Callable[[Handler], LastFmAPIClient],
) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"toptags": {"tag": []}})

    client = make_api_client(handler)
    payload = client.call(
        {"method": "album.getTopTags", "artist": "Cher", "album": "Believe", "mbid": None}
    )

    assert payload == {"toptags": {"tag": []}}
    assert len(seen) == 1
    params = seen[0].url.params
    assert seen[0].method == "GET"
    assert seen[0].url.host == "ws.audioscrobbler.test"
    assert params["method"] == "album.getTopTags"
    assert params["artist"] == "Cher"
    assert params["api_key"] == "demo-key"
    assert params["format"] == "json"
    assert "mbid" not in params


def test_call_requires_method(make_api_client: Callable[[Handler], LastFmAPIClient]) -> None:
    client = make_api_client(lambda request: httpx.Response(200, json={}))

    with pytest.raises(ValueError, match="method"):
        client.call({"artist": "Cher"})


def test_service_error_raises_api_error(
    make_api_client: Callable[[Handler], LastFmAPIClient],
) -> None:
    client = make_api_client(
        lambda request: httpx.Response(
            400, json={"error": 6, "message": "Album not found", "links": []}
        )
    )

    with pytest.raises(LastFmAPIError, match="Album not found") as exc:
        client.call({"method": "album.getInfo", "artist": "Cher", "album": "Nope"})

    assert exc.value.code == 6


def test_error_in_successful_response_raises(
    make_api_client: Callable[[Handler], LastFmAPIClient],
) -> None:
    client = make_api_client(
        lambda request: httpx.Response(200, json={"error": 10, "message": "Invalid API key"})
    )

    with pytest.raises(LastFmAPIError) as exc:
        client.call({"method": "album.getInfo"})

    assert exc.value.code == 10


def test_non_object_payload_raises(make_api_client: Callable[[Handler], LastFmAPIClient]) -> None:
    client = make_api_client(lambda request: httpx.Response(200, json=["unexpected"]))

    with pytest.raises(LastFmAPIError, match="Unexpected"):
        client.call({"method": "album.search", "album": "believe"})


def test_non_json_error_page_raises_http_error(
    make_api_client: Callable[[Handler], LastFmAPIClient],
) -> None:
    client = make_api_client(lambda request: httpx.Response(404, text="<html>gone</html>"))

    with pytest.raises(httpx.HTTPStatusError):
        client.call({"method": "album.search", "album": "believe"})


def test_transient_failure_is_retried(
    make_api_client: Callable[[Handler], LastFmAPIClient],
) -> None:
    attempts: list[int] = []

    def handler(request: httpx.Request) -> httpx.Response:
        attempts.append(1)
        if len(attempts) == 1:
            return httpx.Response(503, text="busy")
        return httpx.Response(200, json={"shouts": {"shout": []}})

    client = make_api_client(handler)

    assert client.call({"method": "album.getShouts"}) == {"shouts": {"shout": []}}
    assert len(attempts) == 2


def test_album_methods_over_http(make_api_client: Callable[[Handler], LastFmAPIClient]) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.params["autocorrect"] == "1"
        assert "page" not in request.url.params
        return httpx.Response(
            200,
            json={
                "shouts": {
                    "shout": [
                        {"body": "one", "author": "a"},
                        {"body": "two", "author": "b"},
                    ]
                }
            },
        )

    albums = AlbumMethodsClient(make_api_client(handler))

    shouts = albums.get_shouts("Cher", "Believe", limit=2)

    assert [shout.body for shout in shouts] == ["one", "two"]


def test_missing_api_key_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LASTFM_API_KEY", raising=False)

    with pytest.raises(MissingConfigurationError):
        LastFmAPIClient()


def test_one_transport_serves_sequential_calls_under_rate_limit() -> None:
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.params["method"])
        return httpx.Response(200, json={"toptags": {"tag": []}})

    config = LastFmConfig(
        api_key="demo-key",
        resilience=ResilienceConfig(
            name="lastfm-test",
            base_url="https://ws.audioscrobbler.test/2.0/",
            retry=None,
            ratelimit=RateLimit(max_calls=1, per_seconds=0.3),
        ),
    )

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        with LastFmAPIClient(config=config, transport=httpx.MockTransport(handler)) as client:
            started = time.monotonic()
            for _ in range(3):
                assert client.call({"method": "album.getTopTags"}) == {"toptags": {"tag": []}}
            elapsed = time.monotonic() - started

    assert seen == ["album.getTopTags"] * 3
    # One call per 0.3s: the second and third requests each wait for the bucket to drain.
    assert elapsed >= 0.4


def test_closed_transport_refuses_calls() -> None:
    config = LastFmConfig(api_key="demo-key", resilience=ResilienceConfig(name="lastfm-test"))
    client = LastFmAPIClient(
        config=config,
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json={})),
    )

    client.close()

    with pytest.raises(RuntimeError, match="closed"):
        client.call({"method": "album.search", "album": "believe"})
