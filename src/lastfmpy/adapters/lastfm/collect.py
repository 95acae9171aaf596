"""Container builders shared by the method clients.

Each remote method locates its result nodes, then hands them to one of these to get
a keyed mapping, an ordered list or named buckets of domain objects.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping


def collect_keyed[N, T](
    nodes: Iterable[N],
    translate: Callable[[N], T],
    key: Callable[[T], str],
) -> dict[str, T]:
    """Map translated nodes by ``key``; a later node replaces an earlier one with the same key."""

    collected: dict[str, T] = {}
    for node in nodes:
        item = translate(node)
        collected[key(item)] = item
    return collected


def collect_ordered[N, T](nodes: Iterable[N], translate: Callable[[N], T]) -> list[T]:
    return [translate(node) for node in nodes]


def collect_grouped[N, T](
    buckets: Mapping[str, Iterable[N]],
    translate: Callable[[N], T],
) -> dict[str, list[T]]:
    """Translate each bucket, dropping buckets that end up empty."""

    grouped: dict[str, list[T]] = {}
    for name, nodes in buckets.items():
        items = collect_ordered(nodes, translate)
        if items:
            grouped[name] = items
    return grouped
