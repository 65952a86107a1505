"""Token path derivation — pure helpers, no I/O."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Base token path, relative to the host data root or the remote location
TOKEN_PATH = "modules/caeora-maps-tokens-assets/assets/tokens/"
SHADOW_DIR = "with-shadows"


@dataclass(frozen=True)
class TokenPaths:
    relative: str  # cr<cr>/with-shadows/<name>.png
    local: str  # Key into the local asset set
    remote: str | None  # Full URL, only in remote mode

    @property
    def source(self) -> str:
        """Path the actor's image fields should point at."""
        return self.remote or self.local


def sanitize_name(name: str) -> str:
    return name.replace(" ", "")


def sanitize_category(category: Any) -> str:
    """Render a CR the way the host stringifies it, first "." becomes "-"."""
    if isinstance(category, float) and category.is_integer():
        text = str(int(category))
    else:
        text = str(category)
    return text.replace(".", "-", 1)


def relative_token_path(name: str, category: Any) -> str:
    return f"cr{sanitize_category(category)}/{SHADOW_DIR}/{sanitize_name(name)}.png"


def token_root(location: str = "") -> str:
    """Root under which tokens live; a remote location gets exactly one "/"."""
    if not location:
        return TOKEN_PATH
    return f"{location.rstrip('/')}/{TOKEN_PATH}"


def derive_token_paths(name: str, category: Any, location: str = "") -> TokenPaths:
    relative = relative_token_path(name, category)
    return TokenPaths(
        relative=relative,
        local=f"{TOKEN_PATH}{relative}",
        remote=f"{token_root(location)}{relative}" if location else None,
    )
