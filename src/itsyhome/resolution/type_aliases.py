"""
Vocabulary of service-type aliases used by "<type>.<room>" and wildcard queries.
"""
from types import MappingProxyType
from typing import Mapping, Optional

from ..models import ServiceType

_ALIASES = {
    "light": ServiceType.LIGHTBULB,
    "lightbulb": ServiceType.LIGHTBULB,
    "bulb": ServiceType.LIGHTBULB,
    "lamp": ServiceType.LIGHTBULB,
    "switch": ServiceType.SWITCH,
    "outlet": ServiceType.OUTLET,
    "plug": ServiceType.OUTLET,
    "socket": ServiceType.OUTLET,
    "thermostat": ServiceType.THERMOSTAT,
    "ac": ServiceType.HEATER_COOLER,
    "aircon": ServiceType.HEATER_COOLER,
    "heater": ServiceType.HEATER_COOLER,
    "cooler": ServiceType.HEATER_COOLER,
    "heatercooler": ServiceType.HEATER_COOLER,
    "lock": ServiceType.LOCK,
    "blind": ServiceType.WINDOW_COVERING,
    "shade": ServiceType.WINDOW_COVERING,
    "window": ServiceType.WINDOW_COVERING,
    "curtain": ServiceType.WINDOW_COVERING,
    "covering": ServiceType.WINDOW_COVERING,
    "fan": ServiceType.FAN,
    "garage": ServiceType.GARAGE_DOOR_OPENER,
    "humidifier": ServiceType.HUMIDIFIER_DEHUMIDIFIER,
    "dehumidifier": ServiceType.HUMIDIFIER_DEHUMIDIFIER,
    "purifier": ServiceType.AIR_PURIFIER,
    "valve": ServiceType.VALVE,
    "sprinkler": ServiceType.VALVE,
    "faucet": ServiceType.VALVE,
    "security": ServiceType.SECURITY_SYSTEM,
    "alarm": ServiceType.SECURITY_SYSTEM,
    "contact": ServiceType.CONTACT_SENSOR,
    "temperature": ServiceType.TEMPERATURE_SENSOR,
    "humidity": ServiceType.HUMIDITY_SENSOR,
    "motion": ServiceType.MOTION_SENSOR,
}

# Canonical names in both snake_case and kebab-case ("heater_cooler", "heater-cooler")
for _service_type in ServiceType:
    _ALIASES.setdefault(_service_type.value, _service_type)
    _ALIASES.setdefault(_service_type.value.replace("_", "-"), _service_type)

TYPE_ALIASES: Mapping[str, ServiceType] = MappingProxyType(_ALIASES)

PLURAL_SUFFIXES = ("es", "s")


def lookup_type(word: str) -> Optional[ServiceType]:
    """
    Map a type word to a ServiceType.

    Tries the word as-is, then with a trailing "es" or "s" removed, so
    "switches" and "lights" resolve while "glass" does not become "glas".

    :param word: Type word in any casing
    :return: Matching ServiceType or None
    """
    key = word.strip().lower()
    if not key:
        return None

    if key in TYPE_ALIASES:
        return TYPE_ALIASES[key]

    for suffix in PLURAL_SUFFIXES:
        if key.endswith(suffix):
            stripped = key[: -len(suffix)]
            if stripped in TYPE_ALIASES:
                return TYPE_ALIASES[stripped]

    return None
