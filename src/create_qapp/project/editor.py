"""Best-effort editor launch."""

from __future__ import annotations

import subprocess
from pathlib import Path

from ..errors import EditorWarning
from ..utils import probe, run_inherited


def editor_available(editor: str) -> bool:
    """Return True when ``<editor> --version`` runs successfully."""
    return probe([editor, "--version"])


def launch_editor(editor: str, project_dir: Path) -> None:
    """Open ``project_dir`` in ``editor`` with the terminal's streams.

    The editor may vanish between :func:`editor_available` and this call, so
    failures here are reported as :class:`EditorWarning` as well.
    """
    try:
        run_inherited([editor, str(project_dir)])
    except (OSError, subprocess.CalledProcessError) as e:
        raise EditorWarning(f"Failed to launch '{editor}': {e}") from e
