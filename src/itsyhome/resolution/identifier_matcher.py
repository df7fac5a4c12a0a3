"""
Identifier matching strategy.

Fast, deterministic lookup of services and scenes by their stable id.
"""
import re
from typing import Optional

from .resolve_result import ResolveResult
from .strategy import ResolutionContext, ResolutionStrategy

IDENTIFIER_PATTERN = re.compile(r"^[A-Fa-f0-9-]+$")


def looks_like_identifier(query: str) -> bool:
    """True if query has the lexical shape of a UUID-style id."""
    return "-" in query and IDENTIFIER_PATTERN.match(query) is not None


class IdentifierMatcher(ResolutionStrategy):
    """
    Match the query against service ids, then scene ids (case-insensitive).

    An identifier-shaped query that matches nothing has no opinion, so
    later strategies still get a chance.
    """

    name = "identifier"

    def resolve(self, context: ResolutionContext) -> Optional[ResolveResult]:
        if not looks_like_identifier(context.query):
            return None

        wanted = context.folded

        for service in context.snapshot.services:
            if service.id.lower() == wanted:
                return ResolveResult.of_services([service])

        for scene in context.snapshot.scenes:
            if scene.id.lower() == wanted:
                return ResolveResult.of_scene(scene)

        return None
