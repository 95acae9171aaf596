"""Last.fm configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import require_env_vars
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy

LASTFM_BASE_URL = "https://ws.audioscrobbler.com/2.0/"
LASTFM_TIMEOUT_SECONDS = 10.0
LASTFM_USER_AGENT = "lastfmpy"


@dataclass(frozen=True, slots=True)
class LastFmConfig:
    """Holds Last.fm API configuration values."""

    api_key: str
    resilience: ResilienceConfig


def default_lastfm_resilience() -> ResilienceConfig:
    # Last.fm asks clients to stay below five requests per second.
    return ResilienceConfig(
        name="lastfm",
        base_url=LASTFM_BASE_URL,
        timeout_seconds=LASTFM_TIMEOUT_SECONDS,
        retry=RetryPolicy(total=4),
        ratelimit=RateLimit(max_calls=4, per_seconds=1.0),
        default_headers={"User-Agent": LASTFM_USER_AGENT},
    )


def get_lastfm_config(*, resilience: ResilienceConfig | None = None) -> LastFmConfig:
    values = require_env_vars(("LASTFM_API_KEY",))
    return LastFmConfig(
        api_key=values["LASTFM_API_KEY"],
        resilience=resilience or default_lastfm_resilience(),
    )
