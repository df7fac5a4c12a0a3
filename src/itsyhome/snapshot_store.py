"""
Holder for the current snapshot and groups.

Each platform sync publishes a brand new (snapshot, groups) pair; readers
grab the current pair by reference and never see a half-updated one.
"""
import logging
import threading
from typing import Iterable, Optional, Tuple

from .models import Group, Snapshot

logger = logging.getLogger(__name__)


class SnapshotStore:
    """Publishes immutable (Snapshot, groups) pairs."""

    def __init__(self, snapshot: Optional[Snapshot] = None, groups: Iterable[Group] = ()):
        self._lock = threading.Lock()
        self._state: Tuple[Snapshot, Tuple[Group, ...]] = (
            snapshot if snapshot is not None else Snapshot.empty(),
            tuple(groups),
        )
        self._version = 0

    def publish(self, snapshot: Snapshot, groups: Iterable[Group] = ()) -> int:
        """
        Swap in a new snapshot and group list.

        :return: Version number of the published state
        """
        state = (snapshot, tuple(groups))
        with self._lock:
            self._state = state
            self._version += 1
            version = self._version

        logger.info(
            f"Published snapshot v{version}: {len(snapshot.services)} services, "
            f"{len(state[1])} groups"
        )
        return version

    def current(self) -> Tuple[Snapshot, Tuple[Group, ...]]:
        return self._state

    @property
    def version(self) -> int:
        return self._version
