"""Ports implemented by adapters."""

from __future__ import annotations

from .transport import LastFmTransport

__all__ = ["LastFmTransport"]
