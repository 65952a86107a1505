"""Module settings — read and change at runtime (the host's onChange)."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from artwork.api.deps import get_context
from artwork.schemas.settings import (
    ModuleSettings,
    ModuleSettingsUpdate,
    ModuleSettingsUpdateResponse,
    SettingDefinition,
)
from artwork.schemas.tokens import RepopulateSummary
from artwork.services import ArtworkContext

logger = logging.getLogger(__name__)
router = APIRouter()

SETTING_DEFINITIONS = [
    SettingDefinition(
        key="replaceArtwork",
        name="Auto-Replace Actor Artwork",
        hint=(
            "Automatically replace the portrait and token artwork for a NPC Actor "
            "when that actor is imported into the game world."
        ),
        type="Boolean",
        default=False,
    ),
    SettingDefinition(
        key="tokenPathLocation",
        name="Location of the module",
        hint=(
            "If you store the module in a location other than User Data (for example "
            "in a Forge Assets Library), you need to specify that location here. "
            "Example: https://assets.forge-vtt.com/1234567890abcdefghijklmn/"
        ),
        type="String",
        default="",
    ),
]


def _current(ctx: ArtworkContext) -> dict:
    return {
        "replace_artwork": ctx.replace_artwork,
        "token_path_location": ctx.token_path_location,
        "mode": ctx.mode.value,
        "definitions": SETTING_DEFINITIONS,
    }


@router.get("", response_model=ModuleSettings)
async def get_module_settings(ctx: ArtworkContext = Depends(get_context)):
    return ModuleSettings(**_current(ctx))


@router.put("", response_model=ModuleSettingsUpdateResponse)
async def update_module_settings(
    body: ModuleSettingsUpdate,
    ctx: ArtworkContext = Depends(get_context),
):
    """Apply changed settings; clearing the location re-lists local tokens."""
    if body.replace_artwork is not None:
        ctx.set_replace_artwork(body.replace_artwork)

    repopulated = None
    if body.token_path_location is not None:
        result = await ctx.set_token_path_location(body.token_path_location)
        if result is not None:
            repopulated = RepopulateSummary.model_validate(result)

    return ModuleSettingsUpdateResponse(**_current(ctx), repopulated=repopulated)
