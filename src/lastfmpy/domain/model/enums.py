"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class AffiliationBucket(StrEnum):
    """Categories Last.fm groups album buy links into."""

    PHYSICALS = "physicals"
    DOWNLOADS = "downloads"


class ImageSize(StrEnum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    EXTRALARGE = "extralarge"
    MEGA = "mega"
