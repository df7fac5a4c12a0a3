"""
Shared fixtures: a small home with rooms, lights, a switch and scenes.
"""
import pytest

from itsyhome.models import Group, Room, Scene, Service, ServiceType, Snapshot

BEDROOM = Room(id="room-bedroom", name="Bedroom")
KITCHEN = Room(id="room-kitchen", name="Kitchen")
OFFICE = Room(id="room-office", name="Office")

BEDROOM_LIGHT = Service(
    id="A1B2C3D4-0000-4000-8000-000000000001",
    name="Bedroom Light",
    type=ServiceType.LIGHTBULB,
    room_id=BEDROOM.id,
)
KITCHEN_LIGHT = Service(
    id="A1B2C3D4-0000-4000-8000-000000000002",
    name="Kitchen Light",
    type=ServiceType.LIGHTBULB,
    room_id=KITCHEN.id,
)
BEDROOM_SWITCH = Service(
    id="A1B2C3D4-0000-4000-8000-000000000003",
    name="Bedroom Switch",
    type=ServiceType.SWITCH,
    room_id=BEDROOM.id,
)
BEDROOM_SPOTLIGHTS = Service(
    id="A1B2C3D4-0000-4000-8000-000000000004",
    name="Bedroom Spotlights",
    type=ServiceType.LIGHTBULB,
    room_id=BEDROOM.id,
)
OFFICE_SPOTLIGHTS = Service(
    id="A1B2C3D4-0000-4000-8000-000000000005",
    name="Office Spotlights",
    type=ServiceType.LIGHTBULB,
    room_id=OFFICE.id,
)

GOODNIGHT = Scene(id="5CE0E000-0000-4000-8000-000000000001", name="Goodnight")
GOOD_MORNING = Scene(id="5CE0E000-0000-4000-8000-000000000002", name="Good Morning")


@pytest.fixture
def snapshot():
    """Bedroom, Kitchen and Office with four lights, one switch and two scenes."""
    return Snapshot(
        rooms=(BEDROOM, KITCHEN, OFFICE),
        services=(
            BEDROOM_LIGHT,
            KITCHEN_LIGHT,
            BEDROOM_SWITCH,
            BEDROOM_SPOTLIGHTS,
            OFFICE_SPOTLIGHTS,
        ),
        scenes=(GOODNIGHT, GOOD_MORNING),
    )


@pytest.fixture
def groups():
    """Global and room-scoped groups, including one whose devices are all gone."""
    return (
        Group(
            id="group-all-lights",
            name="All Lights",
            device_ids=(BEDROOM_LIGHT.id, OFFICE_SPOTLIGHTS.id),
        ),
        Group(
            id="group-office-lights",
            name="Lights",
            device_ids=(OFFICE_SPOTLIGHTS.id, "missing-device"),
            room_id=OFFICE.id,
        ),
        Group(
            id="group-lights",
            name="Lights",
            device_ids=(BEDROOM_LIGHT.id, KITCHEN_LIGHT.id),
        ),
        Group(
            id="group-ghost",
            name="Ghost",
            device_ids=("gone-1", "gone-2"),
        ),
    )
