"""Pydantic models describing the Last.fm album method payloads.

Last.fm's JSON rendering has a few quirks the models absorb:

* a list holding a single item is rendered as that bare object,
* an empty section is rendered as a whitespace text node (``"\\n"``) or as an
  object carrying only ``#text`` and ``@attr`` keys,
* numbers and booleans arrive as strings, blank strings mean "absent".
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, cast

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator, model_validator


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


def _ensure_list(value: object) -> object:
    if value is None or isinstance(value, str):
        return []
    if isinstance(value, Mapping):
        return [value]
    return value


def _name_of(value: object) -> object:
    # Artists are a bare string in album payloads and an object elsewhere.
    if isinstance(value, Mapping):
        mapping_value = cast(Mapping[str, object], value)
        return mapping_value.get("name") or mapping_value.get("#text")
    return value


OptionalText = Annotated[str | None, BeforeValidator(_blank_to_none)]
OptionalInt = Annotated[int | None, BeforeValidator(_blank_to_none)]


class LastFmBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class LastFmSection(LastFmBaseModel):
    """A response node whose children may be missing altogether."""

    @model_validator(mode="before")
    @classmethod
    def _text_node_is_empty(cls, value: object) -> object:
        if value is None or isinstance(value, str):
            return {}
        return value


class ImagePayload(LastFmBaseModel):
    size: str = ""
    url: OptionalText = Field(default=None, alias="#text")


class TagPayload(LastFmBaseModel):
    name: str
    url: OptionalText = None
    count: OptionalInt = None


class WikiPayload(LastFmSection):
    published: OptionalText = None
    summary: OptionalText = None
    content: OptionalText = None


class TrackAttr(LastFmBaseModel):
    rank: OptionalInt = None


class AlbumTrackPayload(LastFmBaseModel):
    name: str
    url: OptionalText = None
    duration: OptionalInt = None
    artist: Annotated[str | None, BeforeValidator(_name_of)] = None
    attr: TrackAttr | None = Field(default=None, alias="@attr")


class TrackList(LastFmSection):
    track: Annotated[list[AlbumTrackPayload], BeforeValidator(_ensure_list)] = Field(
        default_factory=list["AlbumTrackPayload"]
    )


class TagList(LastFmSection):
    tag: Annotated[list[TagPayload], BeforeValidator(_ensure_list)] = Field(
        default_factory=list["TagPayload"]
    )


class AlbumPayload(LastFmBaseModel):
    name: str
    artist: Annotated[str, BeforeValidator(_name_of)]
    id: OptionalText = None
    mbid: OptionalText = None
    url: OptionalText = None
    release_date: OptionalText = Field(default=None, alias="releasedate")
    image: Annotated[list[ImagePayload], BeforeValidator(_ensure_list)] = Field(
        default_factory=list["ImagePayload"]
    )
    listeners: OptionalInt = None
    playcount: OptionalInt = None
    tags: TagList | None = None
    toptags: TagList | None = None
    tracks: TrackList | None = None
    wiki: WikiPayload | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value: object) -> object:
        if isinstance(value, int):
            return str(value)
        return value


class ShoutPayload(LastFmBaseModel):
    author: str
    body: str
    date: OptionalText = None


class ShoutList(LastFmSection):
    shout: Annotated[list[ShoutPayload], BeforeValidator(_ensure_list)] = Field(
        default_factory=list["ShoutPayload"]
    )


class PricePayload(LastFmSection):
    currency: OptionalText = None
    amount: OptionalText = None
    formatted: OptionalText = None


class AffiliationPayload(LastFmBaseModel):
    supplier_name: str = Field(alias="supplierName")
    buy_link: str = Field(alias="buyLink")
    supplier_icon: OptionalText = Field(default=None, alias="supplierIcon")
    is_search: bool = Field(default=False, alias="isSearch")
    price: PricePayload | None = None

    @field_validator("is_search", mode="before")
    @classmethod
    def _parse_flag(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip() == "1"
        return value


class AffiliationList(LastFmSection):
    affiliation: Annotated[list[AffiliationPayload], BeforeValidator(_ensure_list)] = Field(
        default_factory=list["AffiliationPayload"]
    )


class Affiliations(LastFmSection):
    physicals: AffiliationList | None = None
    downloads: AffiliationList | None = None


class AlbumMatches(LastFmSection):
    album: Annotated[list[AlbumPayload], BeforeValidator(_ensure_list)] = Field(
        default_factory=list["AlbumPayload"]
    )


class SearchResults(LastFmSection):
    albummatches: AlbumMatches | None = None


### response envelopes, one per remote operation ###


class AlbumInfoResponse(LastFmBaseModel):
    album: AlbumPayload | None = None

    @field_validator("album", mode="before")
    @classmethod
    def _empty_album(cls, value: object) -> object:
        if isinstance(value, str) or (isinstance(value, Mapping) and not value):
            return None
        return value


class AlbumTagsResponse(LastFmBaseModel):
    tags: TagList | None = None


class AlbumTopTagsResponse(LastFmBaseModel):
    toptags: TagList | None = None


class AlbumSearchResponse(LastFmBaseModel):
    results: SearchResults | None = None


class AlbumShoutsResponse(LastFmBaseModel):
    shouts: ShoutList | None = None


class AlbumBuylinksResponse(LastFmBaseModel):
    affiliations: Affiliations | None = None


class ErrorResponse(LastFmBaseModel):
    error: int
    message: str = "Last.fm API error"
