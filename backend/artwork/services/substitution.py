"""Actor artwork substitution — the pre-create hook."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from artwork.services.token_paths import TokenPaths, derive_token_paths
from artwork.utils.properties import get_property, set_property

if TYPE_CHECKING:
    from artwork.services import ArtworkContext

logger = logging.getLogger(__name__)

SUPPORTED_SYSTEM = "dnd5e"
SUPPORTED_ACTOR_TYPE = "npc"
CR_PROPERTY = "system.details.cr"
IMAGE_FIELDS = ("img", "prototypeToken.texture.src")


@dataclass
class SubstitutionResult:
    actor: dict[str, Any]
    replaced: bool = False
    token_src: str | None = None


class ArtworkSubstitution:
    """Rewrites NPC portrait and token images when a matching token exists."""

    def __init__(self, context: ArtworkContext):
        self._ctx = context

    def token_paths_for(self, actor: dict[str, Any], system_id: str | None = None) -> TokenPaths | None:
        """Derive token paths, or None if the actor is not eligible."""
        if not self._ctx.replace_artwork:
            return None
        if (system_id or self._ctx.system_id) != SUPPORTED_SYSTEM:
            return None
        if not isinstance(actor, dict) or actor.get("type") != SUPPORTED_ACTOR_TYPE:
            return None

        cr = get_property(actor, CR_PROPERTY)
        name = actor.get("name")
        if cr is None or not isinstance(name, str):
            return None

        return derive_token_paths(name, cr, self._ctx.token_path_location)

    async def apply(self, actor: dict[str, Any], system_id: str | None = None) -> SubstitutionResult:
        paths = self.token_paths_for(actor, system_id)
        if paths is None:
            return SubstitutionResult(actor=actor)

        # Mutation is decided only after the existence check has settled;
        # a cancelled check propagates and leaves the actor untouched.
        if not await self._ctx.resolver.exists(paths.local, paths.remote):
            return SubstitutionResult(actor=actor)

        updated = copy.deepcopy(actor)
        for field in IMAGE_FIELDS:
            set_property(updated, field, paths.source)
        logger.info("Replaced artwork for %s -> %s", actor.get("name"), paths.source)
        return SubstitutionResult(actor=updated, replaced=True, token_src=paths.source)

    async def on_entity_create(self, actor: dict[str, Any], system_id: str | None = None) -> dict[str, Any]:
        """Return the actor unchanged, or a copy with both image fields rewritten."""
        result = await self.apply(actor, system_id)
        return result.actor
