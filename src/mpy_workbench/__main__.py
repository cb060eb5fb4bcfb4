"""Entry point: python -m mpy_workbench"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from mpy_workbench.infrastructure.config import DEFAULT_DEVICE_ROOT
from mpy_workbench.infrastructure.logger import install_exception_hooks
from mpy_workbench.infrastructure.logger import logger as base_logger
from mpy_workbench.mapping.mapper import (
    apply_path_mappings,
    get_all_mapped_directories,
    normalize_path,
    reverse_path_mappings,
)
from mpy_workbench.mapping.types import PathMapping
from mpy_workbench.sync.planner import build_sync_plan
from mpy_workbench.workspace.store import JsonConfigStore, load_path_mappings

logger = base_logger.bind(component="cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mpy-workbench", description="Map workspace paths to device paths")
    parser.add_argument("--workspace", type=Path, default=Path.cwd(), help="Workspace root (default: current directory)")
    parser.add_argument("--root", default=DEFAULT_DEVICE_ROOT, help="Device root path (default: %(default)s)")

    sub = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("map", "Map workspace-relative paths to device paths"),
        ("reverse", "Map device paths back to workspace-relative paths"),
        ("dirs", "List the device directories needed for the given files"),
        ("plan", "Show the directories and transfers needed to deploy the given files"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("paths", nargs="+")

    sub.add_parser("mappings", help="Show the configured path mappings")

    add = sub.add_parser("add-mapping", help="Append a path mapping rule")
    add.add_argument("local", help="Local prefix, relative to the workspace root")
    add.add_argument("device", help="Device prefix")

    remove = sub.add_parser("remove-mapping", help="Remove path mapping rules for a local prefix")
    remove.add_argument("local")

    return parser


def _emit(data: Any) -> None:
    print(json.dumps(data, indent=2))


def _update_mappings(store: JsonConfigStore, mappings: list[PathMapping]) -> int:
    config = store.read()
    if store.read_error is not None:
        print(f"Refusing to overwrite unreadable {store.config_path}: {store.read_error}", file=sys.stderr)
        return 1
    result = store.write(config.model_copy(update={"path_mappings": mappings}))
    if not result.success:
        print(f"Failed to write {result.path}: {result.error}", file=sys.stderr)
        return 1
    _emit([m.model_dump() for m in mappings])
    return 0


def run(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    store = JsonConfigStore(args.workspace)
    mappings = load_path_mappings(store)
    logger.debug("Loaded path mappings", count=len(mappings), workspace=str(args.workspace))

    if args.command == "map":
        _emit({p: apply_path_mappings(p, args.root, mappings) for p in args.paths})
    elif args.command == "reverse":
        _emit({p: reverse_path_mappings(p, args.root, mappings) for p in args.paths})
    elif args.command == "dirs":
        _emit(get_all_mapped_directories(args.paths, args.root, mappings))
    elif args.command == "plan":
        _emit(build_sync_plan(args.paths, args.root, mappings).model_dump())
    elif args.command == "mappings":
        _emit([m.model_dump() for m in mappings])
    elif args.command == "add-mapping":
        return _update_mappings(store, [*mappings, PathMapping(local=args.local, device=args.device)])
    elif args.command == "remove-mapping":
        target = normalize_path(args.local)
        remaining = [m for m in mappings if normalize_path(m.local) != target]
        if len(remaining) == len(mappings):
            logger.warning("No path mapping for local prefix", local=args.local)
        return _update_mappings(store, remaining)

    return 0


def main() -> None:
    install_exception_hooks()
    sys.exit(run())


if __name__ == "__main__":
    main()
