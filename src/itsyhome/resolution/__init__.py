"""
Target resolution layer.

Turns free-form text ("Office/Spotlights", "light.bedroom", "group.All
Lights", an id, "scene.Goodnight", "all lights") into the services or
scene it refers to, or an explicit ambiguous / not-found verdict.

Key components:
- ResolveResult: Immutable verdict tagged by ResolveKind
- ResolutionStrategy: Base class for one matching rule
- Matchers: identifier, scene, group, type, wildcard and name strategies
- ResolutionPolicy: Fixed precedence over the strategies
- resolve / DeviceResolver: Public entry points
"""
from .resolve_result import ResolveKind, ResolveResult
from .strategy import ResolutionContext, ResolutionStrategy
from .identifier_matcher import IdentifierMatcher
from .scene_matcher import SceneMatcher
from .group_matcher import GroupMatcher, RoomScopedGroupMatcher
from .type_matcher import TypeRoomMatcher, WildcardMatcher
from .name_matcher import ExactNameMatcher, FreeTextMatcher, RoomDeviceMatcher
from .resolution_policy import ResolutionPolicy
from .device_resolver import DeviceResolver, default_strategies, resolve
from .type_aliases import TYPE_ALIASES, lookup_type
from .suggestions import suggest_targets

__all__ = [
    "ResolveKind",
    "ResolveResult",
    "ResolutionContext",
    "ResolutionStrategy",
    "IdentifierMatcher",
    "SceneMatcher",
    "GroupMatcher",
    "RoomScopedGroupMatcher",
    "TypeRoomMatcher",
    "WildcardMatcher",
    "ExactNameMatcher",
    "FreeTextMatcher",
    "RoomDeviceMatcher",
    "ResolutionPolicy",
    "DeviceResolver",
    "default_strategies",
    "resolve",
    "TYPE_ALIASES",
    "lookup_type",
    "suggest_targets",
]
