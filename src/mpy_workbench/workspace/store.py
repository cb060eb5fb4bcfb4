"""Workspace config persistence in <workspace>/.mpy-workbench/config.json."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from pydantic import ValidationError

from mpy_workbench.infrastructure.config import CONFIG_FILE, WORKBENCH_DIR
from mpy_workbench.infrastructure.logger import logger as base_logger

from .types import WorkspaceConfig, WriteResult

if TYPE_CHECKING:
    from mpy_workbench.mapping.types import PathMapping

logger = base_logger.bind(component="workspace.store")


class ConfigStore(Protocol):
    def read(self) -> WorkspaceConfig: ...

    def write(self, config: WorkspaceConfig) -> WriteResult: ...


class JsonConfigStore:
    """Reads and writes the workspace config as JSON.

    Failures never propagate: a missing or corrupt file reads as an empty config
    and a failed write is reported through the returned WriteResult. After a read,
    ``read_error`` says why an existing file could not be used, so callers can
    avoid overwriting it with the empty fallback.
    """

    def __init__(self, workspace: Path | str, workbench_dir: str = WORKBENCH_DIR, config_file: str = CONFIG_FILE) -> None:
        self.workspace = Path(workspace)
        self.config_dir = self.workspace / workbench_dir
        self.config_path = self.config_dir / config_file
        self.read_error: str | None = None

    def read(self) -> WorkspaceConfig:
        self.read_error = None
        try:
            content = self.config_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("No workspace config", path=str(self.config_path))
            return WorkspaceConfig()
        except OSError as err:
            logger.warning("Failed to read workspace config", path=str(self.config_path), error=str(err))
            self.read_error = str(err)
            return WorkspaceConfig()

        try:
            raw = json.loads(content)
            if not isinstance(raw, dict):
                raise ValueError(f"expected a JSON object, got {type(raw).__name__}")
            return WorkspaceConfig.model_validate(raw)
        except (ValueError, ValidationError) as err:
            # json.JSONDecodeError is a ValueError
            logger.warning("Ignoring invalid workspace config", path=str(self.config_path), error=str(err))
            self.read_error = str(err)
            return WorkspaceConfig()

    def write(self, config: WorkspaceConfig) -> WriteResult:
        content = json.dumps(config.model_dump(mode="json", by_alias=True, exclude_unset=True), indent=2)

        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            # Write to temp file then atomic rename to prevent corruption on crash
            tmp_path = self.config_path.with_suffix(self.config_path.suffix + ".tmp")
            tmp_path.write_text(content, encoding="utf-8")
            tmp_path.replace(self.config_path)
        except OSError as err:
            logger.error("Failed to write workspace config", path=str(self.config_path), error=str(err))
            return WriteResult(success=False, path=str(self.config_path), error=str(err))

        logger.debug("Wrote workspace config", path=str(self.config_path))
        return WriteResult(success=True, path=str(self.config_path))


def load_path_mappings(store: ConfigStore) -> list[PathMapping]:
    """Return the configured mapping rules, or an empty list."""
    return list(store.read().path_mappings or [])


def read_workspace_config(ws_path: Path | str) -> WorkspaceConfig:
    """Read the config of the workspace at ``ws_path``."""
    return JsonConfigStore(ws_path).read()


def write_workspace_config(ws_path: Path | str, config: WorkspaceConfig) -> WriteResult:
    """Write the config of the workspace at ``ws_path``."""
    return JsonConfigStore(ws_path).write(config)
