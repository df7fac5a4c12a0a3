"""
Action types and per-service-type capabilities.
"""
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import FrozenSet, Mapping, Optional, Union

from ..models import ServiceType


class ActionType(Enum):
    """Actions a command can ask for."""
    TOGGLE = "toggle"
    ON = "on"
    OFF = "off"
    BRIGHTNESS = "brightness"
    POSITION = "position"
    TEMPERATURE = "temp"
    COLOR = "color"
    LOCK = "lock"
    UNLOCK = "unlock"
    OPEN = "open"
    CLOSE = "close"
    EXECUTE = "execute"


VALUE_ACTIONS = frozenset({
    ActionType.BRIGHTNESS,
    ActionType.POSITION,
    ActionType.TEMPERATURE,
    ActionType.COLOR,
})

_POWER = frozenset({ActionType.TOGGLE, ActionType.ON, ActionType.OFF})

SERVICE_CAPABILITIES: Mapping[ServiceType, FrozenSet[ActionType]] = MappingProxyType({
    ServiceType.LIGHTBULB: _POWER | {ActionType.BRIGHTNESS, ActionType.COLOR},
    ServiceType.SWITCH: _POWER,
    ServiceType.OUTLET: _POWER,
    ServiceType.THERMOSTAT: frozenset({ActionType.ON, ActionType.OFF, ActionType.TEMPERATURE}),
    ServiceType.HEATER_COOLER: _POWER | {ActionType.TEMPERATURE},
    ServiceType.LOCK: frozenset({ActionType.LOCK, ActionType.UNLOCK, ActionType.TOGGLE}),
    ServiceType.WINDOW_COVERING: frozenset({
        ActionType.OPEN, ActionType.CLOSE, ActionType.POSITION, ActionType.TOGGLE,
    }),
    ServiceType.FAN: _POWER,
    ServiceType.GARAGE_DOOR_OPENER: frozenset({ActionType.OPEN, ActionType.CLOSE, ActionType.TOGGLE}),
    ServiceType.HUMIDIFIER_DEHUMIDIFIER: _POWER,
    ServiceType.AIR_PURIFIER: _POWER,
    ServiceType.VALVE: _POWER | {ActionType.OPEN, ActionType.CLOSE},
    ServiceType.SECURITY_SYSTEM: frozenset({ActionType.ON, ActionType.OFF}),
    ServiceType.CONTACT_SENSOR: frozenset(),
    ServiceType.TEMPERATURE_SENSOR: frozenset(),
    ServiceType.HUMIDITY_SENSOR: frozenset(),
    ServiceType.MOTION_SENSOR: frozenset(),
})

SCENE_ACTIONS = frozenset({ActionType.EXECUTE, ActionType.ON, ActionType.TOGGLE})


def supports(service_type: ServiceType, action: ActionType) -> bool:
    return action in SERVICE_CAPABILITIES[service_type]


@dataclass(frozen=True)
class ParsedCommand:
    """A command split into action, optional value and target string."""
    action: ActionType
    target: str
    value: Optional[Union[int, float, str]] = None


@dataclass(frozen=True)
class ActionOutcome:
    """Fan-out result of executing one command."""
    succeeded: int
    failed: int = 0

    @property
    def is_partial(self) -> bool:
        return self.succeeded > 0 and self.failed > 0
