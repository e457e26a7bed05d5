"""Settings management for gopath-vendor.

Scope-aware YAML settings plus the usual Go environment variables. The
result is an immutable ``Context`` used for the duration of one command.

Workspace precedence (first set wins):
1. Explicit values (CLI options)
2. GOPATH / GOROOT environment variables
3. Project settings (.gopath-vendor/settings.yaml)
4. Global settings (~/.gopath-vendor/settings.yaml)
5. Defaults (~/go; GOROOT from the go binary on PATH, else /usr/local/go)
"""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .context import Context

logger = logging.getLogger(__name__)

DEFAULT_GOROOT = Path("/usr/local/go")


@dataclass
class SettingsPaths:
    """Standard paths for settings files."""

    global_settings: Path
    project_settings: Path

    @classmethod
    def default(cls) -> SettingsPaths:
        return cls(
            global_settings=Path.home() / ".gopath-vendor" / "settings.yaml",
            project_settings=Path.cwd() / ".gopath-vendor" / "settings.yaml",
        )


class AppSettings:
    """Merged view of global and project settings (project wins)."""

    def __init__(self, paths: SettingsPaths | None = None) -> None:
        self.paths = paths or SettingsPaths.default()
        self._merged: dict[str, Any] | None = None

    def get_merged_settings(self) -> dict[str, Any]:
        """Load and merge settings from all scopes, once per instance."""
        if self._merged is None:
            self._merged = self._load_merged()
        return self._merged

    def _load_merged(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for path in [self.paths.global_settings, self.paths.project_settings]:
            if not path.exists():
                continue
            try:
                with open(path) as f:
                    content = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                logger.warning(f"Skipping unreadable settings file {path}: {e}")
                continue
            if not isinstance(content, dict):
                logger.warning(f"Skipping settings file {path}: top level is not a mapping")
                continue
            result = _deep_merge(result, content)
        return result

    def get_gopath(self) -> list[str]:
        value = (self.get_merged_settings().get("workspace") or {}).get("gopath") or []
        if isinstance(value, str):
            return split_path_list(value)
        return [str(v) for v in value]

    def get_goroot(self) -> str | None:
        return (self.get_merged_settings().get("workspace") or {}).get("goroot")

    def get_logging(self) -> dict[str, Any]:
        return self.get_merged_settings().get("logging") or {}


def _deep_merge(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dicts, overlay wins."""
    result = base.copy()
    for key, value in overlay.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def split_path_list(value: str) -> list[str]:
    """Split a GOPATH-style list, dropping empty entries."""
    return [entry for entry in value.split(os.pathsep) if entry]


def detect_goroot() -> Path:
    """Locate GOROOT from the go binary on PATH."""
    go = shutil.which("go")
    if go:
        # <goroot>/bin/go
        return Path(go).resolve().parent.parent
    return DEFAULT_GOROOT


def load_context(
    gopath: Sequence[str] | None = None,
    goroot: str | None = None,
    settings: AppSettings | None = None,
) -> Context:
    """Build the workspace ``Context`` for one command.

    Each GOPATH entry contributes ``<entry>/src`` as a workspace root;
    GOROOT contributes ``<goroot>/src`` as the built-in root.
    """
    settings = settings or AppSettings()

    entries = list(gopath or [])
    if not entries and (env_gopath := os.environ.get("GOPATH")):
        entries = split_path_list(env_gopath)
    if not entries:
        entries = settings.get_gopath()
    if not entries:
        entries = [str(Path.home() / "go")]

    root = goroot or os.environ.get("GOROOT") or settings.get_goroot()
    goroot_path = Path(root).expanduser() if root else detect_goroot()

    gopath_list = tuple(Path(entry).expanduser().absolute() / "src" for entry in entries)
    context = Context(gopath_list=gopath_list, goroot=goroot_path.absolute() / "src")
    logger.debug(f"[settings] workspace roots: {[str(p) for p in context.gopath_list]}, goroot: {context.goroot}")
    return context
