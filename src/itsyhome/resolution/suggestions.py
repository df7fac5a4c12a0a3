"""
Typo suggestions for targets that resolved to nothing, using rapidfuzz.

Only used to enrich "target not found" messages; resolution itself never
ranks by similarity.
"""
from typing import Iterable, List

from rapidfuzz import fuzz, process

from ..models import Group, Snapshot
from .group_matcher import GROUP_PREFIX
from .scene_matcher import SCENE_PREFIX


def _candidate_names(snapshot: Snapshot, groups: Iterable[Group]) -> List[str]:
    names: List[str] = []
    for service in snapshot.services:
        names.append(snapshot.display_name(service))
    for scene in snapshot.scenes:
        names.append(f"{SCENE_PREFIX}{scene.name}")
    for group in groups:
        room = snapshot.room_by_id(group.room_id)
        if room is not None:
            names.append(f"{room.name}/{GROUP_PREFIX}{group.name}")
        else:
            names.append(f"{GROUP_PREFIX}{group.name}")

    # Keep first occurrence so suggestions stay deterministic
    return list(dict.fromkeys(names))


def suggest_targets(
    query: str,
    snapshot: Snapshot,
    groups: Iterable[Group] = (),
    limit: int = 3,
    threshold: float = 0.6,
) -> List[str]:
    """
    Suggest addressable targets that look like `query`.

    :param query: Target that failed to resolve
    :param snapshot: Snapshot to draw candidate names from
    :param groups: User-defined groups
    :param limit: Maximum number of suggestions
    :param threshold: Minimum similarity (0.0-1.0)
    :return: Candidate target strings, best first
    """
    if not 0.0 <= threshold <= 1.0:
        raise ValueError(f"Threshold must be between 0.0 and 1.0, got {threshold}")

    query = query.strip()
    if not query or limit <= 0:
        return []

    candidates = _candidate_names(snapshot, groups)
    if not candidates:
        return []

    matches = process.extract(
        query,
        candidates,
        scorer=fuzz.WRatio,
        processor=str.lower,
        limit=limit,
        score_cutoff=threshold * 100,
    )
    return [name for name, _score, _index in matches]
