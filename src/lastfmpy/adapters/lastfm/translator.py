"""Translate validated Last.fm payloads into domain value objects."""

from __future__ import annotations

from typing import TYPE_CHECKING

from lastfmpy.domain.model import (
    Affiliation,
    Album,
    AlbumTrack,
    Image,
    Price,
    Shout,
    Tag,
    Wiki,
)

if TYPE_CHECKING:
    from .schema import (
        AffiliationPayload,
        AlbumPayload,
        AlbumTrackPayload,
        ImagePayload,
        PricePayload,
        ShoutPayload,
        TagList,
        TagPayload,
        WikiPayload,
    )


def parse_tag(payload: TagPayload) -> Tag:
    return Tag(name=payload.name, url=payload.url, count=payload.count)


def parse_shout(payload: ShoutPayload) -> Shout:
    return Shout(author=payload.author, body=payload.body, date=payload.date)


def parse_affiliation(payload: AffiliationPayload) -> Affiliation:
    return Affiliation(
        supplier_name=payload.supplier_name,
        buy_link=payload.buy_link,
        supplier_icon=payload.supplier_icon,
        is_search=payload.is_search,
        price=_parse_price(payload.price),
    )


def parse_album(payload: AlbumPayload) -> Album:
    """Build an :class:`Album` from either an ``album.getInfo`` or a search match node.

    Info responses carry top tags under ``tags`` while some older payloads use
    ``toptags``; whichever is present is used.
    """

    tag_list = payload.tags if payload.tags is not None else payload.toptags
    return Album(
        name=payload.name,
        artist=payload.artist,
        id=payload.id,
        mbid=payload.mbid,
        url=payload.url,
        release_date=payload.release_date,
        images=_parse_images(payload.image),
        listeners=payload.listeners,
        playcount=payload.playcount,
        tags=_parse_tags(tag_list),
        tracks=tuple(_parse_track(track) for track in payload.tracks.track)
        if payload.tracks is not None
        else (),
        wiki=_parse_wiki(payload.wiki),
    )


def _parse_tags(tag_list: TagList | None) -> tuple[Tag, ...]:
    if tag_list is None:
        return ()
    return tuple(parse_tag(tag) for tag in tag_list.tag)


def _parse_images(images: list[ImagePayload]) -> tuple[Image, ...]:
    # Last.fm lists every size even when it has no artwork; those entries have no URL.
    return tuple(Image(size=image.size, url=image.url) for image in images if image.url)


def _parse_track(payload: AlbumTrackPayload) -> AlbumTrack:
    return AlbumTrack(
        name=payload.name,
        rank=payload.attr.rank if payload.attr is not None else None,
        duration=payload.duration,
        url=payload.url,
        artist=payload.artist,
    )


def _parse_wiki(payload: WikiPayload | None) -> Wiki | None:
    if payload is None:
        return None
    if payload.published is None and payload.summary is None and payload.content is None:
        return None
    return Wiki(published=payload.published, summary=payload.summary, content=payload.content)


def _parse_price(payload: PricePayload | None) -> Price | None:
    if payload is None:
        return None
    if payload.currency is None and payload.amount is None and payload.formatted is None:
        return None
    return Price(currency=payload.currency, amount=payload.amount, formatted=payload.formatted)
