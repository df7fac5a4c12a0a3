"""
Case-insensitive matching helpers shared by the strategies.
"""
from typing import Callable, List, Optional, Sequence, TypeVar

from ..models import Room, Service, Snapshot
from .resolve_result import ResolveResult

T = TypeVar("T")


def fold(text: str) -> str:
    """Simple case folding used for every comparison."""
    return text.lower()


def strip_prefix(query: str, prefix: str) -> Optional[str]:
    """
    Strip a case-insensitive prefix.

    :return: Remainder with the caller's casing, or None if absent
    """
    if fold(query).startswith(prefix):
        return query[len(prefix):]
    return None


def find_exact_or_unique(
    items: Sequence[T],
    name: str,
    name_of: Callable[[T], str],
) -> Optional[T]:
    """
    Exact name match first, else the only item whose name contains `name`.

    :param items: Items to search, in iteration order
    :param name: Name to look for (any casing)
    :param name_of: Accessor for an item's display name
    :return: The winning item, or None when absent or not unique
    """
    folded = fold(name)

    for item in items:
        if fold(name_of(item)) == folded:
            return item

    partial = [item for item in items if folded in fold(name_of(item))]
    if len(partial) == 1:
        return partial[0]

    return None


def single_or_ambiguous(
    candidates: List[Service],
    prefer: Callable[[Service], bool],
) -> ResolveResult:
    """
    Turn a non-empty candidate list into a verdict.

    One candidate wins outright. Several candidates are narrowed with
    `prefer`; a narrowed subset of exactly one wins, otherwise every
    candidate is reported as ambiguous.
    """
    if len(candidates) == 1:
        return ResolveResult.of_services(candidates)

    preferred = [c for c in candidates if prefer(c)]
    if len(preferred) == 1:
        return ResolveResult.of_services(preferred)

    return ResolveResult.ambiguous(candidates)


def rooms_matching(snapshot: Snapshot, part: str) -> List[Room]:
    """Rooms whose name equals or contains `part` (case-insensitive)."""
    folded = fold(part)
    return [room for room in snapshot.rooms if folded in fold(room.name)]
