"""Public domain model surface."""

from __future__ import annotations

from lastfmpy.domain.model.enums import AffiliationBucket, ImageSize
from lastfmpy.domain.model.music import (
    Affiliation,
    Album,
    AlbumTrack,
    Image,
    Mbid,
    Price,
    Shout,
    Tag,
    Wiki,
)

__all__ = [
    "Affiliation",
    "AffiliationBucket",
    "Album",
    "AlbumTrack",
    "Image",
    "ImageSize",
    "Mbid",
    "Price",
    "Shout",
    "Tag",
    "Wiki",
]
