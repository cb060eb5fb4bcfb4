"""Barrel re-export of all domain types."""

from mpy_workbench.mapping.types import PathMapping
from mpy_workbench.sync.types import FileTransfer, SyncPlan
from mpy_workbench.workspace.types import WorkspaceConfig, WriteResult

__all__ = [
    "FileTransfer",
    "PathMapping",
    "SyncPlan",
    "WorkspaceConfig",
    "WriteResult",
]
