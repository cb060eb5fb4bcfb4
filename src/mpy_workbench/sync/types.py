"""Sync planning types."""

from __future__ import annotations

from pydantic import BaseModel


class FileTransfer(BaseModel):
    local: str  # Normalized workspace-relative path
    device: str  # Absolute device path


class SyncPlan(BaseModel):
    directories: list[str]  # Shallowest first
    transfers: list[FileTransfer]

    def device_paths(self) -> list[str]:
        return [t.device for t in self.transfers]
