"""Wiring entry points for applications using the library."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from lastfmpy.adapters.lastfm import AlbumMethodsClient, LastFmAPIClient
from lastfmpy.config import get_lastfm_config, load_env_file

if TYPE_CHECKING:
    from pathlib import Path

    from lastfmpy.config import ResilienceConfig
    from lastfmpy.domain.ports import LastFmTransport


log = getLogger(__name__)


def build_lastfm_transport(
    *,
    env_file: str | Path | None = None,
    resilience: ResilienceConfig | None = None,
) -> LastFmAPIClient:
    """Create the HTTP transport from the environment, reading ``env_file`` first.

    Variables already present in the environment win over the file.
    """

    if load_env_file(env_file):
        log.debug("Loaded environment from %s", env_file or ".env")
    config = get_lastfm_config(resilience=resilience)
    return LastFmAPIClient(config=config)


def build_album_methods_client(
    *,
    transport: LastFmTransport | None = None,
    env_file: str | Path | None = None,
) -> AlbumMethodsClient:
    """Return an :class:`AlbumMethodsClient`, building the default transport if needed."""

    return AlbumMethodsClient(transport or build_lastfm_transport(env_file=env_file))
