"""
Action engine: resolve a target, then fan an action out to it.
"""
import logging
from typing import List, Optional

from ..exceptions import (
    AmbiguousTargetError,
    ExecutionFailedError,
    TargetNotFoundError,
    UnsupportedActionError,
)
from ..models import Service
from ..resolution import DeviceResolver, ResolveKind, suggest_targets
from ..snapshot_store import SnapshotStore
from .action_types import SCENE_ACTIONS, ActionOutcome, ParsedCommand, supports
from .executor import ActionExecutor

logger = logging.getLogger(__name__)


class ActionEngine:
    """
    Executes parsed commands against the current snapshot.

    Errors surface as ActionError subclasses; each carries the HTTP
    status the webhook answers with.
    """

    def __init__(
        self,
        store: SnapshotStore,
        executor: ActionExecutor,
        resolver: Optional[DeviceResolver] = None,
        enable_suggestions: bool = True,
        suggestion_limit: int = 3,
        suggestion_threshold: float = 0.6,
    ):
        """
        :param store: Source of the current snapshot and groups
        :param executor: Platform collaborator that applies actions
        :param resolver: Target resolver (standard chain if None)
        :param enable_suggestions: Add "did you mean" hints to not-found errors
        :param suggestion_limit: Maximum number of hints
        :param suggestion_threshold: Minimum similarity for a hint (0.0-1.0)
        """
        self._store = store
        self._executor = executor
        self._resolver = resolver or DeviceResolver()
        self.enable_suggestions = enable_suggestions
        self.suggestion_limit = suggestion_limit
        self.suggestion_threshold = suggestion_threshold

    def execute(self, command: ParsedCommand) -> ActionOutcome:
        """
        Resolve command.target and apply command.action to it.

        :param command: Parsed command
        :return: ActionOutcome with success/failure counts
        :raises: TargetNotFoundError, AmbiguousTargetError,
                 UnsupportedActionError, ExecutionFailedError,
                 BridgeUnavailableError
        """
        snapshot, groups = self._store.current()
        result = self._resolver.resolve(command.target, snapshot, groups)

        if result.kind is ResolveKind.NOT_FOUND:
            suggestions: List[str] = []
            if self.enable_suggestions:
                suggestions = suggest_targets(
                    command.target,
                    snapshot,
                    groups,
                    limit=self.suggestion_limit,
                    threshold=self.suggestion_threshold,
                )
            raise TargetNotFoundError(command.target, suggestions)

        if result.kind is ResolveKind.AMBIGUOUS:
            raise AmbiguousTargetError([snapshot.display_name(s) for s in result.services])

        if result.kind is ResolveKind.SCENE:
            if command.action not in SCENE_ACTIONS:
                raise UnsupportedActionError(command.action.value)
            logger.info(f"Executing scene {result.scene.name} for target {command.target!r}")
            self._executor.execute_scene(result.scene)
            return ActionOutcome(succeeded=1)

        return self._fan_out(list(result.services), command)

    def _fan_out(self, services: List[Service], command: ParsedCommand) -> ActionOutcome:
        supported = [s for s in services if supports(s.type, command.action)]
        if not supported:
            raise UnsupportedActionError(command.action.value)

        logger.info(
            f"Executing {command.action.value} on {len(supported)} of {len(services)} "
            f"services for target {command.target!r}"
        )

        succeeded = 0
        failed = 0
        for service in supported:
            try:
                self._executor.execute_service(service, command)
            except ExecutionFailedError as e:
                failed += 1
                logger.warning(f"{command.action.value} failed on {service.name} ({service.id}): {e}")
            else:
                succeeded += 1

        if succeeded == 0:
            raise ExecutionFailedError(
                f"{command.action.value} failed on all {failed} services"
            )

        return ActionOutcome(succeeded=succeeded, failed=failed)
