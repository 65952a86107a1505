"""Module settings schemas."""

from typing import Any

from pydantic import BaseModel

from artwork.schemas.tokens import RepopulateSummary


class SettingDefinition(BaseModel):
    """A host-registered module setting, as shown in the host's config UI."""
    key: str
    name: str
    hint: str
    scope: str = "world"
    type: str
    default: Any


class ModuleSettings(BaseModel):
    replace_artwork: bool
    token_path_location: str
    mode: str
    definitions: list[SettingDefinition] = []


class ModuleSettingsUpdate(BaseModel):
    """Partial update — omitted fields keep their current value."""
    replace_artwork: bool | None = None
    token_path_location: str | None = None


class ModuleSettingsUpdateResponse(ModuleSettings):
    repopulated: RepopulateSummary | None = None
