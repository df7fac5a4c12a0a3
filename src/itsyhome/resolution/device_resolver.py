"""
Concrete resolver for home targets.

Combines the matching strategies and the precedence policy into the
public resolve() entry point.
"""
from typing import Iterable, List, Optional

from ..models import Group, Snapshot
from .group_matcher import GroupMatcher, RoomScopedGroupMatcher
from .identifier_matcher import IdentifierMatcher
from .name_matcher import ExactNameMatcher, FreeTextMatcher, RoomDeviceMatcher
from .resolution_policy import ResolutionPolicy
from .resolve_result import ResolveResult
from .scene_matcher import SceneMatcher
from .strategy import ResolutionContext, ResolutionStrategy
from .type_matcher import TypeRoomMatcher, WildcardMatcher


def default_strategies() -> List[ResolutionStrategy]:
    """Strategies in precedence order."""
    return [
        IdentifierMatcher(),
        SceneMatcher(),
        RoomScopedGroupMatcher(),
        GroupMatcher(),
        TypeRoomMatcher(),
        WildcardMatcher(),
        ExactNameMatcher(),
        RoomDeviceMatcher(),
        FreeTextMatcher(),
    ]


class DeviceResolver:
    """
    Turns free-form target strings into services, a scene, or a verdict.

    Stateless: safe to share between threads as long as the snapshot and
    groups passed in are not mutated during a call.

    Usage:
        resolver = DeviceResolver()
        result = resolver.resolve("Office/Spotlights", snapshot, groups)
        if result.is_found:
            services = result.services
    """

    def __init__(self, strategies: Optional[List[ResolutionStrategy]] = None):
        """
        :param strategies: Custom chain; defaults to the standard precedence
        """
        self._policy = ResolutionPolicy(strategies or default_strategies())

    def resolve(
        self,
        query: str,
        snapshot: Snapshot,
        groups: Iterable[Group] = (),
    ) -> ResolveResult:
        """
        Resolve a target string.

        :param query: Free-form target ("light.bedroom", "scene.Goodnight", an id, ...)
        :param snapshot: Snapshot to resolve against
        :param groups: User-defined groups
        :return: ResolveResult verdict (never raises for bad input)
        """
        context = ResolutionContext.build(query, snapshot, groups)
        return self._policy.resolve(context)


_DEFAULT_RESOLVER = DeviceResolver()


def resolve(query: str, snapshot: Snapshot, groups: Iterable[Group] = ()) -> ResolveResult:
    """Resolve a target string with the standard strategy chain."""
    return _DEFAULT_RESOLVER.resolve(query, snapshot, groups)
