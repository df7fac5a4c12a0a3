"""
Name matching strategies for services.

Exact name, room plus device name, and free-text substring matching,
tried in that order from most to least specific.
"""
from typing import Optional

from .resolve_result import ResolveResult
from .strategy import ResolutionContext, ResolutionStrategy
from .text_matching import fold, rooms_matching, single_or_ambiguous

ROOM_SEPARATORS = ("/", " ")


class ExactNameMatcher(ResolutionStrategy):
    """
    Case-insensitive exact match on the whole service name.

    Several services with the same exact name are still a tie.
    """

    name = "exact_name"

    def resolve(self, context: ResolutionContext) -> Optional[ResolveResult]:
        matches = [s for s in context.snapshot.services if fold(s.name) == context.folded]

        if not matches:
            return None
        if len(matches) == 1:
            return ResolveResult.of_services(matches)
        return ResolveResult.ambiguous(matches)


class RoomDeviceMatcher(ResolutionStrategy):
    """
    Resolve "<room>/<device>" and "<room> <device>".

    Splits on "/" first, then on the first space. Room and device both
    match by exact-or-substring name. Among several candidates an exact
    device-name match is preferred.
    """

    name = "room_device"

    def resolve(self, context: ResolutionContext) -> Optional[ResolveResult]:
        snapshot = context.snapshot

        for separator in ROOM_SEPARATORS:
            if separator not in context.folded:
                continue

            room_part, device_part = context.folded.split(separator, 1)
            if not room_part or not device_part:
                continue

            rooms = rooms_matching(snapshot, room_part)
            if not rooms:
                continue

            candidates = [
                s for s in snapshot.services_in_rooms(room.id for room in rooms)
                if device_part in fold(s.name)
            ]
            if not candidates:
                continue

            return single_or_ambiguous(candidates, lambda s: fold(s.name) == device_part)

        return None


class FreeTextMatcher(ResolutionStrategy):
    """
    Substring match against every service name, room-agnostic.

    Last strategy in the chain, so no match is a conclusive not-found.
    Several matches are narrowed to names starting with the query.
    """

    name = "free_text"

    def resolve(self, context: ResolutionContext) -> Optional[ResolveResult]:
        folded = context.folded
        candidates = [s for s in context.snapshot.services if folded in fold(s.name)]

        if not candidates:
            return ResolveResult.not_found(context.original_query)

        return single_or_ambiguous(candidates, lambda s: fold(s.name).startswith(folded))
