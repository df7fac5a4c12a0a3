"""
Domain models for the home snapshot.

These are immutable values: the snapshot collaborator builds a new
Snapshot on every platform sync instead of mutating one in place.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple


class ServiceType(Enum):
    """Closed set of accessory service categories."""
    LIGHTBULB = "lightbulb"
    SWITCH = "switch"
    OUTLET = "outlet"
    THERMOSTAT = "thermostat"
    HEATER_COOLER = "heater_cooler"
    LOCK = "lock"
    WINDOW_COVERING = "window_covering"
    FAN = "fan"
    GARAGE_DOOR_OPENER = "garage_door_opener"
    HUMIDIFIER_DEHUMIDIFIER = "humidifier_dehumidifier"
    AIR_PURIFIER = "air_purifier"
    VALVE = "valve"
    SECURITY_SYSTEM = "security_system"
    CONTACT_SENSOR = "contact_sensor"
    TEMPERATURE_SENSOR = "temperature_sensor"
    HUMIDITY_SENSOR = "humidity_sensor"
    MOTION_SENSOR = "motion_sensor"


@dataclass(frozen=True)
class Room:
    id: str
    name: str


@dataclass(frozen=True)
class Service:
    """One controllable endpoint of a physical accessory."""
    id: str
    name: str
    type: ServiceType
    room_id: Optional[str] = None
    accessory_name: Optional[str] = None


@dataclass(frozen=True)
class Scene:
    id: str
    name: str


@dataclass(frozen=True)
class Group:
    """
    User-defined alias over a fixed list of service ids.

    A group with a room_id is room-scoped and is addressed as
    "<Room>/group.<Name>".
    """
    id: str
    name: str
    device_ids: Tuple[str, ...] = ()
    room_id: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "device_ids", tuple(self.device_ids))

    @property
    def is_room_scoped(self) -> bool:
        return self.room_id is not None

    def resolve_services(self, snapshot: "Snapshot") -> List[Service]:
        """
        Project device ids onto live services.

        Ids with no matching service are dropped; order follows device_ids.

        :param snapshot: Snapshot to project against
        :return: Live services of this group (possibly empty)
        """
        services: List[Service] = []
        seen = set()
        for device_id in self.device_ids:
            if device_id in seen:
                continue
            seen.add(device_id)
            service = snapshot.service_by_id(device_id)
            if service is not None:
                services.append(service)
        return services


@dataclass(frozen=True)
class Snapshot:
    """
    Immutable copy of rooms, services and scenes at a point in time.

    Service ids are unique across the snapshot; names are not.
    """
    rooms: Tuple[Room, ...] = ()
    services: Tuple[Service, ...] = ()
    scenes: Tuple[Scene, ...] = ()
    _services_by_id: Dict[str, Service] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )
    _rooms_by_id: Dict[str, Room] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self):
        object.__setattr__(self, "rooms", tuple(self.rooms))
        object.__setattr__(self, "services", tuple(self.services))
        object.__setattr__(self, "scenes", tuple(self.scenes))

        for service in self.services:
            if service.id in self._services_by_id:
                raise ValueError(f"Duplicate service id in snapshot: {service.id}")
            self._services_by_id[service.id] = service

        for room in self.rooms:
            self._rooms_by_id.setdefault(room.id, room)

    @classmethod
    def empty(cls) -> "Snapshot":
        return cls()

    def service_by_id(self, service_id: str) -> Optional[Service]:
        return self._services_by_id.get(service_id)

    def room_by_id(self, room_id: Optional[str]) -> Optional[Room]:
        if room_id is None:
            return None
        return self._rooms_by_id.get(room_id)

    def services_in_rooms(self, room_ids: Iterable[str]) -> List[Service]:
        """Services whose room is one of room_ids, in snapshot order."""
        wanted = set(room_ids)
        return [s for s in self.services if s.room_id is not None and s.room_id in wanted]

    def display_name(self, service: Service) -> str:
        """Human-readable "Room/Name" label used in ambiguity messages."""
        room = self.room_by_id(service.room_id)
        if room is None:
            return service.name
        return f"{room.name}/{service.name}"
