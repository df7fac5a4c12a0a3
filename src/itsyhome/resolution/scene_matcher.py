"""
Scene matching strategy.

Handles "scene.<name>" references and bare scene names.
"""
from typing import Optional

from .resolve_result import ResolveResult
from .strategy import ResolutionContext, ResolutionStrategy
from .text_matching import find_exact_or_unique, fold, strip_prefix

SCENE_PREFIX = "scene."


class SceneMatcher(ResolutionStrategy):
    """
    Resolve scenes by name.

    With the "scene." prefix the verdict is conclusive: exact name, else
    the unique scene containing the name, else not-found. Without the
    prefix only an exact name match counts.
    """

    name = "scene"

    def resolve(self, context: ResolutionContext) -> Optional[ResolveResult]:
        scenes = context.snapshot.scenes

        scene_name = strip_prefix(context.query, SCENE_PREFIX)
        if scene_name is not None:
            scene = find_exact_or_unique(scenes, scene_name, lambda s: s.name)
            if scene is None:
                return ResolveResult.not_found(f"{SCENE_PREFIX}{scene_name}")
            return ResolveResult.of_scene(scene)

        for scene in scenes:
            if fold(scene.name) == context.folded:
                return ResolveResult.of_scene(scene)

        return None
