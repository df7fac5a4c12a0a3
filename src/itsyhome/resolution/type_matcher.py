"""
Type and wildcard matching strategies.

Handles "<type>.<room>", "all <type>", "<room>.*", "<room>.all",
"*.<type>", "all.<type>" and "*.<room>".
"""
from typing import List, Optional

from ..models import Service, ServiceType, Snapshot
from .resolve_result import ResolveResult
from .strategy import ResolutionContext, ResolutionStrategy
from .text_matching import rooms_matching
from .type_aliases import lookup_type

WILDCARDS = ("*", "all")


def services_of_type(snapshot: Snapshot, service_type: ServiceType) -> List[Service]:
    return [s for s in snapshot.services if s.type is service_type]


class TypeRoomMatcher(ResolutionStrategy):
    """
    Resolve "<type>.<room>" such as "light.bedroom" or "blinds.office".

    Only applies when the left side is a known type alias. Once it
    applies the verdict is conclusive: an unknown room or a room without
    services of that type is not-found.
    """

    name = "type_room"

    def resolve(self, context: ResolutionContext) -> Optional[ResolveResult]:
        if "." not in context.query:
            return None

        type_part, room_part = (part.strip() for part in context.query.split(".", 1))
        service_type = lookup_type(type_part)
        if service_type is None or not room_part:
            return None

        snapshot = context.snapshot

        # "light.*" is a type wildcard; an empty match has no opinion
        if room_part.lower() in WILDCARDS:
            services = services_of_type(snapshot, service_type)
            return ResolveResult.of_services(services) if services else None

        rooms = rooms_matching(snapshot, room_part)
        if not rooms:
            return ResolveResult.not_found(context.original_query)

        room_ids = {room.id for room in rooms}
        services = [s for s in services_of_type(snapshot, service_type) if s.room_id in room_ids]
        if not services:
            return ResolveResult.not_found(context.original_query)

        return ResolveResult.of_services(services)


class WildcardMatcher(ResolutionStrategy):
    """
    Resolve whole-type and whole-room wildcards.

    A wildcard that matches nothing has no opinion, so free text that
    happens to contain "all" still reaches the name strategies.
    """

    name = "wildcard"

    def resolve(self, context: ResolutionContext) -> Optional[ResolveResult]:
        folded = context.folded

        if folded.startswith("all "):
            return self._by_type(context.snapshot, folded[len("all "):])

        if "." in folded:
            left, right = (part.strip() for part in folded.split(".", 1))
            if left in WILDCARDS:
                # "*.light" is a type wildcard, "*.bedroom" a room wildcard
                result = self._by_type(context.snapshot, right)
                if result is None:
                    result = self._by_room(context.snapshot, right)
                return result
            if right in WILDCARDS:
                return self._by_room(context.snapshot, left)

        return None

    def _by_type(self, snapshot: Snapshot, word: str) -> Optional[ResolveResult]:
        service_type = lookup_type(word)
        if service_type is None:
            return None

        services = services_of_type(snapshot, service_type)
        return ResolveResult.of_services(services) if services else None

    def _by_room(self, snapshot: Snapshot, room_part: str) -> Optional[ResolveResult]:
        if not room_part:
            return None

        rooms = rooms_matching(snapshot, room_part)
        if not rooms:
            return None

        services = snapshot.services_in_rooms(room.id for room in rooms)
        return ResolveResult.of_services(services) if services else None
