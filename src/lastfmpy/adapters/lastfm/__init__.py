"""Public interface for the Last.fm adapter."""

from __future__ import annotations

from .album import AlbumMethodsClient
from .client import LastFmAPIClient, LastFmAPIError, encode_parameters
from .collect import collect_grouped, collect_keyed, collect_ordered
from .translator import parse_affiliation, parse_album, parse_shout, parse_tag

__all__ = [
    "AlbumMethodsClient",
    "LastFmAPIClient",
    "LastFmAPIError",
    "collect_grouped",
    "collect_keyed",
    "collect_ordered",
    "encode_parameters",
    "parse_affiliation",
    "parse_album",
    "parse_shout",
    "parse_tag",
]
