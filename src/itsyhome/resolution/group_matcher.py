"""
Group matching strategies.

Groups resolve to their live services; a group whose every device is
gone is reported as not-found rather than as an empty success.
"""
from typing import Optional, Sequence

from ..models import Group, Snapshot
from .resolve_result import ResolveResult
from .strategy import ResolutionContext, ResolutionStrategy
from .text_matching import find_exact_or_unique, fold, strip_prefix

GROUP_PREFIX = "group."


def project_group(group: Group, snapshot: Snapshot, not_found_query: str) -> ResolveResult:
    """Project a group onto live services, or not-found when none remain."""
    services = group.resolve_services(snapshot)
    if not services:
        return ResolveResult.not_found(not_found_query)
    return ResolveResult.of_services(services)


def _find_room_scoped(groups: Sequence[Group], name: str, allow_partial: bool) -> Optional[Group]:
    """
    Fallback lookup among room-scoped groups.

    Same-named groups in several rooms cannot be told apart without a
    room, so they count as unavailable.
    """
    folded = fold(name)
    scoped = [g for g in groups if g.is_room_scoped]

    exact = [g for g in scoped if fold(g.name) == folded]
    if exact:
        return exact[0] if len(exact) == 1 else None

    if allow_partial:
        partial = [g for g in scoped if folded in fold(g.name)]
        if len(partial) == 1:
            return partial[0]

    return None


class RoomScopedGroupMatcher(ResolutionStrategy):
    """
    Resolve "<Room>/group.<Name>".

    The room must exist (exact name); an unknown room is a conclusive
    not-found. A group scoped to that room wins over a same-named global
    group, which is the fallback.
    """

    name = "room_group"

    def resolve(self, context: ResolutionContext) -> Optional[ResolveResult]:
        if "/" not in context.query:
            return None

        room_part, target_part = context.query.split("/", 1)
        group_name = strip_prefix(target_part, GROUP_PREFIX)
        if group_name is None:
            return None

        folded_room = fold(room_part)
        room = next(
            (r for r in context.snapshot.rooms if fold(r.name) == folded_room),
            None,
        )
        if room is None:
            return ResolveResult.not_found(context.original_query)

        folded_name = fold(group_name)
        group = next(
            (g for g in context.groups if fold(g.name) == folded_name and g.room_id == room.id),
            None,
        )
        if group is None:
            group = next(
                (g for g in context.groups if fold(g.name) == folded_name and g.room_id is None),
                None,
            )
        if group is None:
            return ResolveResult.not_found(context.original_query)

        return project_group(group, context.snapshot, context.original_query)


class GroupMatcher(ResolutionStrategy):
    """
    Resolve "group.<Name>" and bare group names.

    Exact names win first: a global group, else a room-scoped group
    whose name is unique across rooms. The prefixed form is conclusive
    and then accepts a unique substring match, among global groups when
    any of them contains the name, else among room-scoped groups. A bare
    query must equal a group name exactly so a group cannot shadow a
    similarly named device.
    """

    name = "group"

    def resolve(self, context: ResolutionContext) -> Optional[ResolveResult]:
        global_groups = [g for g in context.groups if not g.is_room_scoped]

        group_name = strip_prefix(context.query, GROUP_PREFIX)
        if group_name is not None:
            not_found_query = f"{GROUP_PREFIX}{group_name}"
            group = self._find_exact(context, global_groups, group_name)
            if group is None:
                folded_name = fold(group_name)
                if any(folded_name in fold(g.name) for g in global_groups):
                    group = find_exact_or_unique(global_groups, group_name, lambda g: g.name)
                else:
                    group = _find_room_scoped(context.groups, group_name, allow_partial=True)
            if group is None:
                return ResolveResult.not_found(not_found_query)
            return project_group(group, context.snapshot, not_found_query)

        group = self._find_exact(context, global_groups, context.query)
        if group is None:
            return None

        return project_group(group, context.snapshot, context.original_query)

    @staticmethod
    def _find_exact(
        context: ResolutionContext,
        global_groups: Sequence[Group],
        name: str,
    ) -> Optional[Group]:
        folded = fold(name)
        group = next((g for g in global_groups if fold(g.name) == folded), None)
        if group is None:
            group = _find_room_scoped(context.groups, name, allow_partial=False)
        return group
