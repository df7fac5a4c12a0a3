"""
Resolution policy for strategy precedence.

Implements the fixed chain: identifier → scene → room group → group →
type/room → wildcard → exact name → room/device → free text.
"""
import dataclasses
import logging
from typing import List

from .resolve_result import ResolveResult
from .strategy import ResolutionContext, ResolutionStrategy

logger = logging.getLogger(__name__)


class ResolutionPolicy:
    """
    Policy for walking an ordered list of strategies.

    Returns the verdict of the first strategy with an opinion. This keeps
    precedence explicit, deterministic and testable.
    """

    def __init__(self, strategies: List[ResolutionStrategy]):
        """
        Initialize resolution policy.

        :param strategies: Strategies to try, highest precedence first
        """
        if not strategies:
            raise ValueError("At least one strategy must be provided")

        self._strategies = list(strategies)

    @property
    def strategies(self) -> List[ResolutionStrategy]:
        return list(self._strategies)

    def resolve(self, context: ResolutionContext) -> ResolveResult:
        """
        Resolve by trying strategies in order.

        :param context: Resolution inputs
        :return: First verdict, or NOT_FOUND carrying the original query
        """
        if not context.query:
            return ResolveResult.not_found(context.original_query)

        for strategy in self._strategies:
            result = strategy.resolve(context)
            if result is None:
                continue

            logger.debug(
                f"Resolved {context.query!r} via {strategy.name}: {result.kind.value}"
            )
            return dataclasses.replace(result, strategy_used=strategy.name)

        logger.debug(f"No strategy had an opinion on {context.query!r}")
        return ResolveResult.not_found(context.original_query)
