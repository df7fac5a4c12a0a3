"""
Tests for ActionEngine: resolution errors, capability filtering and fan-out.
"""
import pytest

from itsyhome.actions import ActionEngine, ActionExecutor, ActionParser, DryRunExecutor
from itsyhome.exceptions import (
    AmbiguousTargetError,
    BridgeUnavailableError,
    ExecutionFailedError,
    TargetNotFoundError,
    UnsupportedActionError,
)
from itsyhome.models import Group
from itsyhome.snapshot_store import SnapshotStore

from conftest import (
    BEDROOM_LIGHT,
    BEDROOM_SWITCH,
    GOODNIGHT,
    KITCHEN_LIGHT,
    OFFICE_SPOTLIGHTS,
)


class FailingExecutor(ActionExecutor):
    """Executor that rejects writes to chosen service ids."""

    def __init__(self, failing_ids=(), error=None):
        self.failing_ids = set(failing_ids)
        self.error = error
        self.executed = []

    def execute_service(self, service, command):
        if self.error is not None:
            raise self.error
        if service.id in self.failing_ids:
            raise ExecutionFailedError(f"write rejected by {service.name}")
        self.executed.append(service.id)

    def execute_scene(self, scene):
        self.executed.append(scene.id)


@pytest.fixture
def store(snapshot, groups):
    mixed = Group(
        id="group-bedroom-power",
        name="Bedroom Power",
        device_ids=(BEDROOM_LIGHT.id, BEDROOM_SWITCH.id),
    )
    return SnapshotStore(snapshot, groups + (mixed,))


@pytest.fixture
def executor():
    return DryRunExecutor()


@pytest.fixture
def engine(store, executor):
    return ActionEngine(store, executor)


def run(engine, command):
    return engine.execute(ActionParser.parse(command))


class TestServiceActions:
    """Tests for actions on resolved services."""

    def test_single_service(self, engine, executor):
        """Test a named service receives the action."""
        outcome = run(engine, "on/Kitchen Light")

        assert outcome.succeeded == 1
        assert outcome.failed == 0
        assert executor.calls == [("service", KITCHEN_LIGHT.id, "on")]

    def test_group_fan_out(self, engine, executor):
        """Test every service in a group receives the action in order."""
        outcome = run(engine, "brightness/50/group.All Lights")

        assert outcome.succeeded == 2
        assert executor.calls == [
            ("service", BEDROOM_LIGHT.id, "brightness"),
            ("service", OFFICE_SPOTLIGHTS.id, "brightness"),
        ]

    def test_unsupported_services_skipped(self, engine, executor):
        """Test services without the capability are left out of the fan-out."""
        outcome = run(engine, "brightness/30/group.Bedroom Power")

        assert outcome.succeeded == 1
        assert outcome.failed == 0
        assert executor.calls == [("service", BEDROOM_LIGHT.id, "brightness")]

    def test_no_service_supports_action(self, engine, executor):
        """Test an action nothing supports is rejected before execution."""
        with pytest.raises(UnsupportedActionError, match="Unsupported action: brightness"):
            run(engine, "brightness/30/Bedroom Switch")

        assert executor.calls == []


class TestSceneActions:
    """Tests for scene targets."""

    def test_execute_scene(self, engine, executor):
        """Test a scene is triggered once."""
        outcome = run(engine, "execute/scene.Goodnight")

        assert outcome.succeeded == 1
        assert executor.calls == [("scene", GOODNIGHT.id, "execute")]

    def test_toggle_triggers_scene(self, engine, executor):
        """Test toggle is accepted for scenes."""
        run(engine, "toggle/Goodnight")

        assert executor.calls == [("scene", GOODNIGHT.id, "execute")]

    def test_unsupported_scene_action(self, engine, executor):
        """Test scenes reject actions other than execute, on and toggle."""
        with pytest.raises(UnsupportedActionError):
            run(engine, "off/scene.Goodnight")

        assert executor.calls == []


class TestResolutionErrors:
    """Tests for not-found and ambiguous targets."""

    def test_not_found_with_suggestions(self, engine):
        """Test a typo raises with close suggestions."""
        with pytest.raises(TargetNotFoundError) as excinfo:
            run(engine, "toggle/Kitchen Ligth")

        error = excinfo.value
        assert error.http_status == 404
        assert error.target == "Kitchen Ligth"
        assert "Kitchen/Kitchen Light" in error.suggestions
        assert "did you mean" in error.message

    def test_not_found_without_suggestions(self, store, executor):
        """Test suggestions can be switched off."""
        engine = ActionEngine(store, executor, enable_suggestions=False)

        with pytest.raises(TargetNotFoundError) as excinfo:
            run(engine, "toggle/Kitchen Ligth")

        assert excinfo.value.suggestions == []
        assert excinfo.value.message == "Target not found: Kitchen Ligth"

    def test_ambiguous_lists_display_names(self, engine, executor):
        """Test ambiguous targets report room-qualified options."""
        with pytest.raises(AmbiguousTargetError) as excinfo:
            run(engine, "toggle/Spotlights")

        assert excinfo.value.options == [
            "Bedroom/Bedroom Spotlights",
            "Office/Office Spotlights",
        ]
        assert excinfo.value.http_status == 400
        assert executor.calls == []

    def test_uses_latest_published_snapshot(self, store, engine, snapshot):
        """Test the engine reads the store on every command."""
        store.publish(snapshot, ())

        with pytest.raises(TargetNotFoundError):
            run(engine, "toggle/group.Bedroom Power")


class TestExecutionFailures:
    """Tests for executor failures during fan-out."""

    def test_partial_failure(self, store):
        """Test one failing service yields a partial outcome."""
        executor = FailingExecutor(failing_ids={BEDROOM_LIGHT.id})
        engine = ActionEngine(store, executor)

        outcome = run(engine, "off/group.All Lights")

        assert outcome.succeeded == 1
        assert outcome.failed == 1
        assert outcome.is_partial
        assert executor.executed == [OFFICE_SPOTLIGHTS.id]

    def test_all_failed(self, store):
        """Test failure on every service raises ExecutionFailedError."""
        executor = FailingExecutor(failing_ids={BEDROOM_LIGHT.id, OFFICE_SPOTLIGHTS.id})
        engine = ActionEngine(store, executor)

        with pytest.raises(ExecutionFailedError, match="failed on all 2 services"):
            run(engine, "off/group.All Lights")

    def test_bridge_unavailable_propagates(self, store):
        """Test an unreachable platform aborts the whole command."""
        engine = ActionEngine(store, FailingExecutor(error=BridgeUnavailableError()))

        with pytest.raises(BridgeUnavailableError):
            run(engine, "off/group.All Lights")
