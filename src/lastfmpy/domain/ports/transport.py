"""Port for sending a single Last.fm API request."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping


@runtime_checkable
class LastFmTransport(Protocol):
    """Sends ``{"method": ..., **params}`` to Last.fm and returns the decoded reply.

    ``None`` values mark parameters the caller did not supply; implementations must
    leave them out of the outgoing request. Errors are raised, never returned.
    """

    def call(self, parameters: Mapping[str, object]) -> Mapping[str, object]: ...


__all__ = ["LastFmTransport"]
