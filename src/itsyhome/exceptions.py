from typing import List, Optional


class ItsyhomeError(Exception):
    """Base exception for the itsyhome bridge."""


class ConfigurationError(ItsyhomeError):
    """Raised when configuration is missing or invalid."""


class SnapshotLoadError(ItsyhomeError):
    """Raised when a home snapshot file cannot be read or validated."""


class CommandParseError(ItsyhomeError):
    """Raised when a command string cannot be parsed into an action."""

    http_status = 400


class ActionError(ItsyhomeError):
    """
    Base class for failures while executing an action against a target.

    Subclasses carry the HTTP status the webhook answers with.
    """

    http_status = 400

    @property
    def message(self) -> str:
        return str(self)


class TargetNotFoundError(ActionError):
    """Raised when a target string resolves to nothing."""

    http_status = 404

    def __init__(self, target: str, suggestions: Optional[List[str]] = None):
        self.target = target
        self.suggestions = list(suggestions or [])
        text = f"Target not found: {target}"
        if self.suggestions:
            text += f" (did you mean: {', '.join(self.suggestions)}?)"
        super().__init__(text)


class AmbiguousTargetError(ActionError):
    """Raised when a target string matches several services equally well."""

    def __init__(self, options: List[str]):
        self.options = list(options)
        super().__init__(f"Ambiguous target, options: {', '.join(self.options)}")


class UnsupportedActionError(ActionError):
    """Raised when no resolved entity supports the requested action."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Unsupported action: {action}")


class BridgeUnavailableError(ActionError):
    """Raised when the home platform cannot be reached."""

    def __init__(self, reason: str = "Bridge unavailable"):
        super().__init__(reason)


class ExecutionFailedError(ActionError):
    """Raised when the platform rejects an action."""
