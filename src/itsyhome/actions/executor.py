"""
Execution collaborators.

The platform integration implements ActionExecutor to write
characteristics and trigger scenes; the resolver and engine never talk
to the platform directly.
"""
import logging
from abc import ABC, abstractmethod
from typing import List, Tuple

from ..models import Scene, Service
from .action_types import ParsedCommand

logger = logging.getLogger(__name__)


class ActionExecutor(ABC):
    """Applies a parsed command to the home platform."""

    @abstractmethod
    def execute_service(self, service: Service, command: ParsedCommand) -> None:
        """
        Apply a command to one service.

        :raises: ExecutionFailedError if the platform rejects the write
        :raises: BridgeUnavailableError if the platform cannot be reached
        """
        pass

    @abstractmethod
    def execute_scene(self, scene: Scene) -> None:
        """
        Trigger a scene.

        :raises: ExecutionFailedError / BridgeUnavailableError as above
        """
        pass


class DryRunExecutor(ActionExecutor):
    """Logs and records every call instead of touching real devices."""

    def __init__(self):
        self.calls: List[Tuple[str, str, str]] = []

    def execute_service(self, service: Service, command: ParsedCommand) -> None:
        value = "" if command.value is None else f" {command.value}"
        logger.info(f"[dry-run] {command.action.value}{value} -> {service.name} ({service.id})")
        self.calls.append(("service", service.id, command.action.value))

    def execute_scene(self, scene: Scene) -> None:
        logger.info(f"[dry-run] execute scene -> {scene.name} ({scene.id})")
        self.calls.append(("scene", scene.id, "execute"))
