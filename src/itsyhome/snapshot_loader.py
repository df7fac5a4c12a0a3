"""
Loads a home snapshot and its groups from a JSON export.

The file mirrors what the platform integration hands over on each sync:
rooms, accessories with their services, scenes, and user-defined groups.
"""
import json
import logging
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import SnapshotLoadError
from .models import Group, Room, Scene, Service, ServiceType, Snapshot

logger = logging.getLogger(__name__)


class _Document(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class RoomDocument(_Document):
    id: str
    name: str


class ServiceDocument(_Document):
    id: str
    name: str
    type: ServiceType
    room_id: Optional[str] = Field(default=None, alias="roomId")


class AccessoryDocument(_Document):
    id: str
    name: str
    room_id: Optional[str] = Field(default=None, alias="roomId")
    services: List[ServiceDocument] = Field(default_factory=list)


class SceneDocument(_Document):
    id: str
    name: str


class GroupDocument(_Document):
    id: str
    name: str
    device_ids: List[str] = Field(default_factory=list, alias="deviceIds")
    room_id: Optional[str] = Field(default=None, alias="roomId")


class HomeDocument(_Document):
    rooms: List[RoomDocument] = Field(default_factory=list)
    accessories: List[AccessoryDocument] = Field(default_factory=list)
    scenes: List[SceneDocument] = Field(default_factory=list)
    groups: List[GroupDocument] = Field(default_factory=list)


def build_snapshot(data: Dict[str, Any]) -> Tuple[Snapshot, Tuple[Group, ...]]:
    """
    Build a Snapshot and groups from decoded JSON.

    Services are flattened out of their accessories; a service without
    its own room inherits the accessory's room.

    :param data: Decoded home document
    :return: (snapshot, groups)
    :raises: SnapshotLoadError if the document is invalid
    """
    try:
        document = HomeDocument.model_validate(data)
    except ValidationError as e:
        raise SnapshotLoadError(f"Invalid home snapshot: {e}") from e

    services: List[Service] = []
    for accessory in document.accessories:
        for service in accessory.services:
            services.append(
                Service(
                    id=service.id,
                    name=service.name,
                    type=service.type,
                    room_id=service.room_id or accessory.room_id,
                    accessory_name=accessory.name,
                )
            )

    try:
        snapshot = Snapshot(
            rooms=tuple(Room(id=r.id, name=r.name) for r in document.rooms),
            services=tuple(services),
            scenes=tuple(Scene(id=s.id, name=s.name) for s in document.scenes),
        )
    except ValueError as e:
        raise SnapshotLoadError(str(e)) from e

    groups = tuple(
        Group(id=g.id, name=g.name, device_ids=tuple(g.device_ids), room_id=g.room_id)
        for g in document.groups
    )

    return snapshot, groups


class SnapshotLoader:
    """
    Loads and validates a home snapshot from a JSON file.
    """

    def __init__(self, path: str):
        self.path = path

    def load(self) -> Tuple[Snapshot, Tuple[Group, ...]]:
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise SnapshotLoadError(f"Cannot read snapshot file {self.path}: {e}") from e
        except json.JSONDecodeError as e:
            raise SnapshotLoadError(f"Snapshot file {self.path} is not valid JSON: {e}") from e
        except UnicodeDecodeError as e:
            raise SnapshotLoadError(f"Snapshot file {self.path} is not valid UTF-8: {e}") from e

        if not isinstance(data, dict):
            raise SnapshotLoadError(f"Snapshot file {self.path} must contain a JSON object")

        snapshot, groups = build_snapshot(data)
        logger.info(
            f"Loaded snapshot from {self.path}: {len(snapshot.rooms)} rooms, "
            f"{len(snapshot.services)} services, {len(snapshot.scenes)} scenes, "
            f"{len(groups)} groups"
        )
        return snapshot, groups
