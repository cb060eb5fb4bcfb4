"""Shared fixtures for workspace and mapping tests."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import pytest

from mpy_workbench.mapping.types import PathMapping
from mpy_workbench.workspace.store import JsonConfigStore

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


@pytest.fixture()
def workspace_tmp(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a temp workspace directory and chdir into it."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture()
def store(workspace_tmp: Path) -> JsonConfigStore:
    return JsonConfigStore(workspace_tmp)


@pytest.fixture()
def esp32_mappings() -> list[PathMapping]:
    """The usual layout: sources flattened onto the device root, libraries under /lib."""
    return [
        PathMapping(local="src/", device="/"),
        PathMapping(local="lib/", device="/lib/"),
    ]


@pytest.fixture()
def write_raw_config(store: JsonConfigStore) -> Callable[[Any], None]:
    """Return a writer that puts arbitrary JSON in the store's config file."""

    def _write(data: Any) -> None:
        store.config_path.parent.mkdir(parents=True, exist_ok=True)
        store.config_path.write_text(json.dumps(data), encoding="utf-8")

    return _write
