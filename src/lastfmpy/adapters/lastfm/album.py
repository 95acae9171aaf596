"""Client for the ``album.*`` Last.fm methods."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from lastfmpy.domain.model import AffiliationBucket

from .collect import collect_grouped, collect_keyed, collect_ordered
from .schema import (
    AlbumBuylinksResponse,
    AlbumInfoResponse,
    AlbumSearchResponse,
    AlbumShoutsResponse,
    AlbumTagsResponse,
    AlbumTopTagsResponse,
)
from .translator import parse_affiliation, parse_album, parse_shout, parse_tag

if TYPE_CHECKING:
    from collections.abc import Mapping

    from lastfmpy.domain.model import Affiliation, Album, Shout, Tag
    from lastfmpy.domain.ports import LastFmTransport

    from .schema import AffiliationList, AffiliationPayload

log = getLogger(__name__)


def _tag_key(tag: Tag) -> str:
    return tag.name


def _album_key(album: Album) -> str:
    # Current search results no longer carry a numeric id; fall back to stable identifiers.
    return album.id or album.mbid or album.url or album.name


class AlbumMethodsClient:
    """One method per ``album.*`` remote operation.

    Every request names all parameters the operation accepts. Unset optional ones are
    passed as ``None`` and dropped by the transport; ``autocorrect`` is always sent.
    Missing or empty response sections yield empty results. Transport errors propagate.
    """

    def __init__(self, transport: LastFmTransport) -> None:
        self._transport = transport

    def get_info(
        self,
        artist: str | None,
        album: str | None,
        mbid: str | None = None,
        autocorrect: bool = True,
        username: str | None = None,
        lang: str | None = None,
    ) -> Album | None:
        """Get the metadata and tracklist for an album by name or MusicBrainz id.

        ``username`` adds that user's playcount context; ``lang`` is the ISO 639
        alpha-2 code for the wiki text.
        """

        response = self._call(
            {
                "method": "album.getInfo",
                "artist": artist,
                "album": album,
                "mbid": mbid,
                "autocorrect": autocorrect,
                "username": username,
                "lang": lang,
            },
        )
        info = AlbumInfoResponse.model_validate(response)
        if info.album is None:
            return None
        return parse_album(info.album)

    def get_tags(
        self,
        artist: str | None,
        album: str | None,
        user: str,
        mbid: str | None = None,
        autocorrect: bool = True,
    ) -> dict[str, Tag]:
        """Get the tags ``user`` applied to an album, keyed by tag name."""

        response = self._call(
            {
                "method": "album.getTags",
                "artist": artist,
                "album": album,
                "mbid": mbid,
                "autocorrect": autocorrect,
                "user": user,
            },
        )
        tags = AlbumTagsResponse.model_validate(response).tags
        if tags is None:
            return {}
        return collect_keyed(tags.tag, parse_tag, _tag_key)

    def get_top_tags(
        self,
        artist: str | None,
        album: str | None,
        mbid: str | None = None,
        autocorrect: bool = True,
    ) -> dict[str, Tag]:
        """Get the top tags for an album, ordered by popularity and keyed by name."""

        response = self._call(
            {
                "method": "album.getTopTags",
                "artist": artist,
                "album": album,
                "mbid": mbid,
                "autocorrect": autocorrect,
            },
        )
        toptags = AlbumTopTagsResponse.model_validate(response).toptags
        if toptags is None:
            return {}
        return collect_keyed(toptags.tag, parse_tag, _tag_key)

    def search(
        self,
        album: str,
        limit: int | None = None,
        page: int | None = None,
    ) -> dict[str, Album]:
        """Search for an album by name; matches come back sorted by relevance."""

        response = self._call(
            {
                "method": "album.search",
                "album": album,
                "limit": limit,
                "page": page,
            },
        )
        results = AlbumSearchResponse.model_validate(response).results
        if results is None or results.albummatches is None:
            return {}
        return collect_keyed(results.albummatches.album, parse_album, _album_key)

    def get_shouts(
        self,
        artist: str | None,
        album: str | None,
        limit: int | None = None,
        page: int | None = None,
        mbid: str | None = None,
        autocorrect: bool = True,
    ) -> list[Shout]:
        response = self._call(
            {
                "method": "album.getShouts",
                "artist": artist,
                "album": album,
                "mbid": mbid,
                "limit": limit,
                "page": page,
                "autocorrect": autocorrect,
            },
        )
        shouts = AlbumShoutsResponse.model_validate(response).shouts
        if shouts is None:
            return []
        return collect_ordered(shouts.shout, parse_shout)

    def get_buylinks(
        self,
        artist: str | None,
        album: str | None,
        mbid: str | None = None,
        autocorrect: bool = True,
        country: str | None = None,
    ) -> dict[str, list[Affiliation]]:
        """Get buy links grouped into ``"physicals"`` and ``"downloads"``.

        Either ``artist`` and ``album`` or ``mbid`` must identify the album. ``country``
        is an ISO 3166-1 country name. A bucket appears only when it has entries.
        """

        response = self._call(
            {
                "method": "album.getBuylinks",
                "artist": artist,
                "album": album,
                "autocorrect": autocorrect,
                "mbid": mbid,
                "country": country,
            },
        )
        affiliations = AlbumBuylinksResponse.model_validate(response).affiliations
        if affiliations is None:
            return {}
        buckets: dict[str, list[AffiliationPayload]] = {
            AffiliationBucket.PHYSICALS.value: _entries(affiliations.physicals),
            AffiliationBucket.DOWNLOADS.value: _entries(affiliations.downloads),
        }
        return collect_grouped(buckets, parse_affiliation)

    def _call(self, parameters: Mapping[str, object]) -> Mapping[str, object]:
        log.debug("Requesting %s", parameters["method"])
        return self._transport.call(parameters)


def _entries(section: AffiliationList | None) -> list[AffiliationPayload]:
    if section is None:
        return []
    return section.affiliation
