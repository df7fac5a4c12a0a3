"""
Core abstractions for target resolution strategies.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Tuple

from ..models import Group, Snapshot
from .resolve_result import ResolveResult


@dataclass(frozen=True)
class ResolutionContext:
    """
    Inputs of one resolve call, shared by every strategy.

    Attributes:
        original_query: The query exactly as the caller passed it
        query: The query trimmed of surrounding whitespace
        folded: Lower-cased form of query used for comparisons
        snapshot: Snapshot to resolve against
        groups: User-defined groups
    """
    original_query: str
    query: str
    folded: str
    snapshot: Snapshot
    groups: Tuple[Group, ...] = ()

    @classmethod
    def build(cls, query: str, snapshot: Snapshot, groups=()) -> "ResolutionContext":
        trimmed = query.strip()
        return cls(
            original_query=query,
            query=trimmed,
            folded=trimmed.lower(),
            snapshot=snapshot,
            groups=tuple(groups),
        )


class ResolutionStrategy(ABC):
    """
    One matching rule in the resolver's precedence chain.

    A strategy returns a ResolveResult when it has an opinion (a match,
    an ambiguity, or a conclusive not-found) and None to let later
    strategies try.
    """

    name: str = "strategy"

    @abstractmethod
    def resolve(self, context: ResolutionContext) -> Optional[ResolveResult]:
        """
        Try to resolve the query.

        :param context: Resolution inputs
        :return: ResolveResult verdict, or None for no opinion
        """
        pass
