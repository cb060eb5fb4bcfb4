"""Translate workspace-relative paths to device paths and back.

Rules are applied in declared order and the first matching rule wins. For example,
with the rules ``src/ -> /`` and ``lib/ -> /lib/`` under the device root ``/``:

- ``src/main.py`` is placed at ``/main.py``
- ``lib/utils.py`` is placed at ``/lib/utils.py``
- ``README.md`` matches no rule and is placed at ``/README.md``
"""

from __future__ import annotations

import posixpath
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from .types import PathMapping

_SLASH_RUN = re.compile(r"/+")


def normalize_path(path: str) -> str:
    """Use forward slashes, collapse repeated slashes and drop a trailing slash."""
    path = _SLASH_RUN.sub("/", path.replace("\\", "/"))
    return path[:-1] if path.endswith("/") else path


def _effective_root(root_path: str) -> str:
    # "/" means files sit directly at the device root
    return "" if root_path == "/" else normalize_path(root_path)


def _absolute(path: str) -> str:
    return path if path.startswith("/") else "/" + path


def _join_under_root(root: str, rel_path: str) -> str:
    if root == "":
        return "/" + rel_path
    return _absolute(root + "/" + rel_path)


def apply_path_mappings(local_rel: str, root_path: str, mappings: Sequence[PathMapping] | None) -> str:
    """Map a workspace-relative path to an absolute device path.

    A rule's device prefix is taken relative to ``root_path`` unless it already
    starts with the root. Paths that match no rule are placed under the root as-is.
    """
    local = normalize_path(local_rel)
    root = _effective_root(root_path)

    if not mappings:
        return _join_under_root(root, local)

    for mapping in mappings:
        local_prefix = normalize_path(mapping.local)
        device_prefix = normalize_path(mapping.device)

        if local == local_prefix:
            # The path is the mapped directory itself
            return _absolute(device_prefix)

        if local.startswith(local_prefix + "/"):
            relative_part = local[len(local_prefix) + 1 :]
            device_path = device_prefix + "/" + relative_part

            if root and not device_prefix.startswith(root):
                device_path = root + "/" + device_path

            return _absolute(_SLASH_RUN.sub("/", device_path))

    return _join_under_root(root, local)


def reverse_path_mappings(device_path: str, root_path: str, mappings: Sequence[PathMapping] | None) -> str:
    """Map a device path back to a workspace-relative path.

    Note: a rule whose device prefix is the device root claims every path it is
    asked about, even one that another, later rule produced. Rule order therefore
    matters here just as in :func:`apply_path_mappings`, and the two functions are
    only inverses of each other when the root rule comes last.
    """
    device = normalize_path(device_path)
    root = _effective_root(root_path)

    relative = device
    if root and device.startswith(root + "/"):
        relative = device[len(root) + 1 :]
    elif device.startswith("/"):
        relative = device[1:]

    if not mappings:
        return relative

    for mapping in mappings:
        local_prefix = normalize_path(mapping.local)
        device_prefix = normalize_path(mapping.device)
        if device_prefix.startswith("/"):
            device_prefix = device_prefix[1:]

        if device_prefix == "":
            return local_prefix + "/" + relative

        if relative == device_prefix:
            return local_prefix

        if relative.startswith(device_prefix + "/"):
            return local_prefix + "/" + relative[len(device_prefix) + 1 :]

    return relative


def _parent_dir(path: str) -> str:
    """POSIX dirname ignoring trailing slashes; "." when there is no parent."""
    trimmed = path.rstrip("/")
    if not trimmed:
        return "/" if path else "."
    head = _SLASH_RUN.sub("/", posixpath.dirname(trimmed))
    if not head:
        return "."
    return head.rstrip("/") or "/"


def _depth(directory: str) -> int:
    return len([part for part in directory.split("/") if part])


def get_mapped_device_directory(local_rel: str, root_path: str, mappings: Sequence[PathMapping] | None) -> str:
    """Return the device directory that will hold ``local_rel`` once mapped."""
    parent = _parent_dir(apply_path_mappings(local_rel, root_path, mappings))
    return "/" if parent == "." else parent


def get_all_mapped_directories(
    local_files: Iterable[str],
    root_path: str,
    mappings: Sequence[PathMapping] | None,
) -> list[str]:
    """Return every device directory needed for ``local_files``, shallowest first.

    Creating the directories in the returned order never creates a child before
    its parent. The device root itself is not included.
    """
    directories: dict[str, None] = {}

    for local_rel in local_files:
        current = _parent_dir(apply_path_mappings(local_rel, root_path, mappings))
        while current not in ("/", "."):
            directories[current] = None
            current = _parent_dir(current)

    return sorted(directories, key=_depth)
