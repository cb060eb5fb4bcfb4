"""Workspace configuration types."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from mpy_workbench.mapping.types import PathMapping


class WorkspaceConfig(BaseModel):
    """Contents of the workspace config file.

    Keys other than the ones declared here belong to other features and are
    written back untouched.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    auto_sync_on_save: bool | None = Field(default=None, alias="autoSyncOnSave")
    path_mappings: list[PathMapping] | None = Field(default=None, alias="pathMappings")


class WriteResult(BaseModel):
    success: bool
    path: str | None = None
    error: str | None = None
