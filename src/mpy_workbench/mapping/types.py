"""Path mapping domain types."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class PathMapping(BaseModel):
    """One prefix-rewrite rule between the workspace and the device filesystem."""

    model_config = ConfigDict(frozen=True)

    local: str  # Prefix relative to the workspace root, e.g. "src/"
    device: str  # Prefix on the device, e.g. "/" or "/lib/"
