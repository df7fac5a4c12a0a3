"""
Result type for target resolution.

Every outcome of resolving a target string is a ResolveResult value;
the resolver never raises for malformed input.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional, Tuple

from ..models import Scene, Service


class ResolveKind(Enum):
    """Tag of a ResolveResult."""
    SERVICES = "services"
    SCENE = "scene"
    AMBIGUOUS = "ambiguous"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class ResolveResult:
    """
    Immutable verdict of the resolver.

    Attributes:
        kind: Which variant this result is
        services: Matched services (SERVICES) or tied candidates (AMBIGUOUS)
        scene: The matched scene (SCENE)
        query: The query echoed back for error messages (NOT_FOUND)
        strategy_used: Name of the strategy that produced the verdict
    """
    kind: ResolveKind
    services: Tuple[Service, ...] = ()
    scene: Optional[Scene] = None
    query: Optional[str] = None
    strategy_used: Optional[str] = field(default=None, compare=False)

    def __post_init__(self):
        """Validate variant invariants."""
        object.__setattr__(self, "services", tuple(self.services))

        if self.kind is ResolveKind.SERVICES and not self.services:
            raise ValueError("SERVICES result requires at least one service")
        if self.kind is ResolveKind.AMBIGUOUS and len(self.services) < 2:
            raise ValueError(
                f"AMBIGUOUS result requires at least two candidates, got {len(self.services)}"
            )
        if self.kind is ResolveKind.SCENE and self.scene is None:
            raise ValueError("SCENE result requires a scene")
        if self.kind is ResolveKind.NOT_FOUND and self.query is None:
            raise ValueError("NOT_FOUND result requires the query")

    @classmethod
    def of_services(cls, services: Iterable[Service]) -> "ResolveResult":
        return cls(kind=ResolveKind.SERVICES, services=tuple(services))

    @classmethod
    def of_scene(cls, scene: Scene) -> "ResolveResult":
        return cls(kind=ResolveKind.SCENE, scene=scene)

    @classmethod
    def ambiguous(cls, candidates: Iterable[Service]) -> "ResolveResult":
        return cls(kind=ResolveKind.AMBIGUOUS, services=tuple(candidates))

    @classmethod
    def not_found(cls, query: str) -> "ResolveResult":
        return cls(kind=ResolveKind.NOT_FOUND, query=query)

    @property
    def is_found(self) -> bool:
        """True for SERVICES and SCENE verdicts."""
        return self.kind in (ResolveKind.SERVICES, ResolveKind.SCENE)

    @property
    def is_ambiguous(self) -> bool:
        return self.kind is ResolveKind.AMBIGUOUS

    @property
    def is_not_found(self) -> bool:
        return self.kind is ResolveKind.NOT_FOUND

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        result = {"kind": self.kind.value}

        if self.services:
            result["services"] = [
                {"id": s.id, "name": s.name, "type": s.type.value, "room_id": s.room_id}
                for s in self.services
            ]

        if self.scene is not None:
            result["scene"] = {"id": self.scene.id, "name": self.scene.name}

        if self.query is not None:
            result["query"] = self.query

        if self.strategy_used:
            result["strategy_used"] = self.strategy_used

        return result
