"""Rewrite the project name inside the cloned manifest."""

from __future__ import annotations

import json
from pathlib import Path

from ..errors import ManifestError


def update_manifest_name(project_dir: Path, name: str, manifest: str = "package.json") -> bool:
    """Set ``name`` in ``<project_dir>/<manifest>``.

    Returns False without touching anything when the template ships no
    manifest. Every other field is written back unchanged, in its original
    order, with 2-space indentation.
    """
    manifest_path = project_dir / manifest
    if not manifest_path.exists():
        return False

    try:
        with open(manifest_path, "r", encoding="utf-8") as f:
            package_data = json.load(f)
    except ValueError as e:
        raise ManifestError(f"{manifest} is not valid JSON: {e}") from e
    except OSError as e:
        raise ManifestError(f"Failed to read {manifest}: {e}") from e

    if not isinstance(package_data, dict):
        raise ManifestError(f"{manifest} must contain a JSON object")

    package_data["name"] = name
    with open(manifest_path, "w", encoding="utf-8") as f:
        json.dump(package_data, f, indent=2, ensure_ascii=False)
    return True
