"""
Action layer: command parsing, capabilities and execution.

Sits between the front ends (URL scheme, webhook, CLI) and the
platform executor, using the resolver to find what a command targets.
"""
from .action_types import (
    SCENE_ACTIONS,
    SERVICE_CAPABILITIES,
    ActionOutcome,
    ActionType,
    ParsedCommand,
    supports,
)
from .action_parser import ActionParser
from .executor import ActionExecutor, DryRunExecutor
from .action_engine import ActionEngine
from .url_scheme import command_from_url

__all__ = [
    "SCENE_ACTIONS",
    "SERVICE_CAPABILITIES",
    "ActionOutcome",
    "ActionType",
    "ParsedCommand",
    "supports",
    "ActionParser",
    "ActionExecutor",
    "DryRunExecutor",
    "ActionEngine",
    "command_from_url",
]
