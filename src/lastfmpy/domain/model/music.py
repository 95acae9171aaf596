"""Immutable value objects for Last.fm music data.

Every object is built once from a single response fragment and never mutated.
Nested collections are tuples so instances stay hashable and compare by value.
"""

from __future__ import annotations

from dataclasses import dataclass

from .enums import ImageSize  # noqa: TC001

type Mbid = str


@dataclass(frozen=True, slots=True)
class Image:
    size: ImageSize | str
    url: str


@dataclass(frozen=True, slots=True)
class Tag:
    """A folksonomy tag; ``count`` is the usage weight when Last.fm reports one."""

    name: str
    url: str | None = None
    count: int | None = None


@dataclass(frozen=True, slots=True)
class Wiki:
    published: str | None = None
    summary: str | None = None
    content: str | None = None


@dataclass(frozen=True, slots=True)
class AlbumTrack:
    name: str
    rank: int | None = None
    duration: int | None = None  # seconds
    url: str | None = None
    artist: str | None = None


@dataclass(frozen=True, slots=True)
class Album:
    name: str
    artist: str
    id: str | None = None
    mbid: Mbid | None = None
    url: str | None = None
    release_date: str | None = None
    images: tuple[Image, ...] = ()
    listeners: int | None = None
    playcount: int | None = None
    tags: tuple[Tag, ...] = ()
    tracks: tuple[AlbumTrack, ...] = ()
    wiki: Wiki | None = None

    def image(self, size: ImageSize | str) -> str | None:
        """Return the URL of the image with the given size, if present."""
        for image in self.images:
            if image.size == size:
                return image.url
        return None


@dataclass(frozen=True, slots=True)
class Shout:
    """A user comment posted on a Last.fm page."""

    author: str
    body: str
    date: str | None = None


@dataclass(frozen=True, slots=True)
class Price:
    currency: str | None = None
    amount: str | None = None
    formatted: str | None = None


@dataclass(frozen=True, slots=True)
class Affiliation:
    """A purchase or download offer for an album."""

    supplier_name: str
    buy_link: str
    supplier_icon: str | None = None
    is_search: bool = False
    price: Price | None = None
