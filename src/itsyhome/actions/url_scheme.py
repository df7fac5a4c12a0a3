"""
URL scheme front end: itsyhome://<action>/<target...>
"""
from urllib.parse import unquote, urlsplit

from ..exceptions import CommandParseError

URL_SCHEME = "itsyhome"


def command_from_url(url: str) -> str:
    """
    Extract the percent-decoded command string from an itsyhome:// URL.

    "itsyhome://toggle/Living%20Room/Lamp" -> "toggle/Living Room/Lamp"

    :raises: CommandParseError for another scheme or an empty command
    """
    parts = urlsplit(url.strip())
    if parts.scheme.lower() != URL_SCHEME:
        raise CommandParseError(f"Unsupported URL scheme: {parts.scheme or url}")

    # The action sits in the netloc slot ("toggle"), the target in the path
    raw = parts.netloc + parts.path
    command = unquote(raw).strip("/")
    if not command:
        raise CommandParseError("Empty command")

    return command
