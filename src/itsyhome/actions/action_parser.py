"""
Deterministic parser for command strings.

Turns "<action>/<target...>" and "<action>/<value>/<target...>" into a
ParsedCommand. The target part is left untouched for the resolver.
"""
import re
from typing import Optional, Union

from ..exceptions import CommandParseError
from .action_types import VALUE_ACTIONS, ActionType, ParsedCommand

HEX_COLOR = re.compile(r"^#?[0-9A-Fa-f]{6}$")

# Inclusive numeric ranges for value actions
VALUE_RANGES = {
    ActionType.BRIGHTNESS: (0, 100),
    ActionType.POSITION: (0, 100),
    ActionType.TEMPERATURE: (10, 38),
}


class ActionParser:
    """
    Parses command strings such as "toggle/Office/Spotlights" or
    "brightness/50/light.bedroom".
    """

    @classmethod
    def parse(cls, command: str) -> ParsedCommand:
        """
        Parse a command string.

        :param command: Decoded command, without scheme or leading slash
        :return: ParsedCommand
        :raises: CommandParseError if the action, value or target is invalid
        """
        text = command.strip().strip("/")
        if not text:
            raise CommandParseError("Empty command")

        action_word, _, rest = text.partition("/")
        action = cls._parse_action(action_word, text)

        value: Optional[Union[int, float, str]] = None
        if action in VALUE_ACTIONS:
            value_word, _, rest = rest.partition("/")
            value = cls._parse_value(action, value_word.strip())

        target = rest.strip()
        if not target:
            raise CommandParseError(f"Missing target for action: {action.value}")

        return ParsedCommand(action=action, target=target, value=value)

    @staticmethod
    def _parse_action(word: str, command: str) -> ActionType:
        try:
            return ActionType(word.strip().lower())
        except ValueError:
            raise CommandParseError(f"Unknown action: {command}") from None

    @staticmethod
    def _parse_value(action: ActionType, word: str) -> Union[int, float, str]:
        if not word:
            raise CommandParseError(f"Missing value for action: {action.value}")

        if action is ActionType.COLOR:
            if not HEX_COLOR.match(word):
                raise CommandParseError(f"Invalid color (expected RRGGBB hex): {word}")
            return word.lstrip("#").upper()

        try:
            number = float(word)
        except ValueError:
            raise CommandParseError(f"Invalid value for {action.value}: {word}") from None

        low, high = VALUE_RANGES[action]
        if not low <= number <= high:
            raise CommandParseError(
                f"Value for {action.value} must be between {low} and {high}, got {word}"
            )

        if action is ActionType.TEMPERATURE:
            return number
        if not number.is_integer():
            raise CommandParseError(f"Value for {action.value} must be a whole number, got {word}")
        return int(number)

