"""
Tests for command parsing, capabilities and the URL scheme.
"""
import pytest

from itsyhome.actions import (
    SERVICE_CAPABILITIES,
    ActionParser,
    ActionType,
    ParsedCommand,
    command_from_url,
    supports,
)
from itsyhome.exceptions import CommandParseError
from itsyhome.models import ServiceType


class TestActionParser:
    """Tests for ActionParser."""

    def test_simple_action(self):
        """Test action and target split on the first slash."""
        assert ActionParser.parse("toggle/Office/Spotlights") == ParsedCommand(
            action=ActionType.TOGGLE, target="Office/Spotlights"
        )

    def test_action_case_insensitive(self):
        """Test the action word ignores case."""
        assert ActionParser.parse("ON/light.bedroom").action is ActionType.ON

    def test_leading_and_trailing_slashes(self):
        """Test webhook-style paths are accepted."""
        assert ActionParser.parse("/off/Kitchen Light/").target == "Kitchen Light"

    def test_brightness_value(self):
        """Test numeric value actions."""
        parsed = ActionParser.parse("brightness/40/light.bedroom")

        assert parsed.action is ActionType.BRIGHTNESS
        assert parsed.value == 40
        assert parsed.target == "light.bedroom"

    def test_temperature_allows_fraction(self):
        """Test temperatures keep decimals."""
        assert ActionParser.parse("temp/21.5/Living Room/AC").value == 21.5

    def test_color_value(self):
        """Test hex colours are normalised."""
        assert ActionParser.parse("color/#ff8800/Desk Lamp").value == "FF8800"

    @pytest.mark.parametrize("command", [
        "",
        "   ",
        "explode/Kitchen",
        "toggle",
        "toggle/",
        "brightness/Kitchen Light",
        "brightness/101/Kitchen Light",
        "brightness/12.5/Kitchen Light",
        "position/-1/Blinds",
        "temp/50/Thermostat",
        "color/red/Lamp",
        "brightness/50",
    ])
    def test_invalid_commands(self, command):
        """Test malformed commands raise CommandParseError."""
        with pytest.raises(CommandParseError):
            ActionParser.parse(command)

    def test_unknown_action_message(self):
        """Test the error echoes the whole command."""
        with pytest.raises(CommandParseError, match="^Unknown action: explode/Kitchen$"):
            ActionParser.parse("explode/Kitchen")


class TestCapabilities:
    """Tests for the service capability table."""

    def test_every_service_type_covered(self):
        """Test each ServiceType has an entry."""
        assert set(SERVICE_CAPABILITIES) == set(ServiceType)

    def test_sensors_are_read_only(self):
        """Test sensors support no actions."""
        for service_type in (
            ServiceType.CONTACT_SENSOR,
            ServiceType.TEMPERATURE_SENSOR,
            ServiceType.HUMIDITY_SENSOR,
            ServiceType.MOTION_SENSOR,
        ):
            assert SERVICE_CAPABILITIES[service_type] == frozenset()

    def test_supports(self):
        """Test a few representative capabilities."""
        assert supports(ServiceType.LIGHTBULB, ActionType.BRIGHTNESS)
        assert supports(ServiceType.LOCK, ActionType.UNLOCK)
        assert not supports(ServiceType.SWITCH, ActionType.BRIGHTNESS)
        assert not supports(ServiceType.LIGHTBULB, ActionType.LOCK)


class TestUrlScheme:
    """Tests for itsyhome:// URLs."""

    def test_command_from_url(self):
        """Test the action and percent-decoded target are joined."""
        assert command_from_url("itsyhome://toggle/Living%20Room/Lamp") == "toggle/Living Room/Lamp"

    def test_scheme_case_insensitive(self):
        """Test the scheme ignores case."""
        assert command_from_url("ITSYHOME://on/group.All%20Lights") == "on/group.All Lights"

    def test_wrong_scheme(self):
        """Test other schemes are rejected."""
        with pytest.raises(CommandParseError):
            command_from_url("https://toggle/Lamp")

    def test_empty_command(self):
        """Test an empty URL body is rejected."""
        with pytest.raises(CommandParseError):
            command_from_url("itsyhome://")
