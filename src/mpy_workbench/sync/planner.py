"""Build the list of device operations needed to deploy workspace files."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mpy_workbench.mapping.mapper import apply_path_mappings, get_all_mapped_directories, normalize_path

from .types import FileTransfer, SyncPlan

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from mpy_workbench.mapping.types import PathMapping


def build_sync_plan(
    local_files: Iterable[str],
    root_path: str,
    mappings: Sequence[PathMapping] | None,
) -> SyncPlan:
    """Pair each local file with its device path and list the directories to create.

    Directories come first in the plan so that uploading the transfers in order
    never targets a missing directory. Files repeated in ``local_files`` are
    transferred once.
    """
    seen: set[str] = set()
    unique_files: list[str] = []
    for local_rel in local_files:
        normalized = normalize_path(local_rel)
        if normalized in seen:
            continue
        seen.add(normalized)
        unique_files.append(normalized)

    return SyncPlan(
        directories=get_all_mapped_directories(unique_files, root_path, mappings),
        transfers=[
            FileTransfer(local=local_rel, device=apply_path_mappings(local_rel, root_path, mappings))
            for local_rel in unique_files
        ],
    )
