"""Scaffolding configuration.

Fixed, process-wide settings for a run:
- Defaults ship with the package as ``defaults.yml`` and are loaded through
  ``importlib.resources``.
- If the bundled file cannot be read (e.g. a stripped install), the dataclass
  defaults are used as-is.
- The result is memoized so callers can treat it like a constant, and is
  passed explicitly into the template lister and fetcher.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from functools import lru_cache
from importlib.resources import files
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml


@dataclass(frozen=True)
class ScaffoldConfig:
    """Where templates come from and which tools finish the project."""

    owner: str = "Qortal"
    repo: str = "qapp-templates"
    ref: Optional[str] = None  # None -> repository default branch
    api_base: str = "https://api.github.com"
    manifest: str = "package.json"
    install_command: List[str] = field(default_factory=lambda: ["npm", "install"])
    run_command: str = "npm run dev"
    editor: str = "code"
    editor_name: str = "VS Code"
    http_timeout: Optional[float] = None

    @property
    def repo_slug(self) -> str:
        return f"{self.owner}/{self.repo}"


def _parse_config_dict(data: Dict[str, object]) -> ScaffoldConfig:
    known = {f.name for f in fields(ScaffoldConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown configuration keys: {', '.join(unknown)}")

    values: Dict[str, Any] = {}
    for key in ("owner", "repo", "api_base", "manifest", "run_command", "editor", "editor_name"):
        if key in data:
            value = data[key]
            if not isinstance(value, str) or not value:
                raise ValueError(f"'{key}' must be a non-empty string")
            values[key] = value
    if "ref" in data:
        ref = data["ref"]
        if ref is not None and not isinstance(ref, str):
            raise ValueError("'ref' must be a string or null")
        values["ref"] = ref or None
    if "install_command" in data:
        command = data["install_command"]
        if (
            not isinstance(command, list)
            or not command
            or not all(isinstance(part, str) for part in command)
        ):
            raise ValueError("'install_command' must be a non-empty list of strings")
        values["install_command"] = list(command)
    if "http_timeout" in data:
        timeout = data["http_timeout"]
        if timeout is not None and (
            isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0
        ):
            raise ValueError("'http_timeout' must be a positive number or null")
        values["http_timeout"] = float(timeout) if timeout is not None else None
    values["api_base"] = values.get("api_base", ScaffoldConfig.api_base).rstrip("/")
    return ScaffoldConfig(**values)


def load_config(path: Path) -> ScaffoldConfig:
    """Load a scaffold configuration from a YAML file path."""
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping")
    return _parse_config_dict(data)


def load_bundled_config() -> ScaffoldConfig:
    """Load the bundled defaults from the package resources."""
    try:
        content = files("create_qapp.config").joinpath("defaults.yml").read_text(encoding="utf-8")
    except (FileNotFoundError, ModuleNotFoundError):
        return ScaffoldConfig()
    data = yaml.safe_load(content) or {}
    assert isinstance(data, dict)
    return _parse_config_dict(data)


@lru_cache(maxsize=1)
def get_config() -> ScaffoldConfig:
    """Return the bundled configuration (memoized)."""
    return load_bundled_config()
