"""Install the new project's dependencies."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import List

from ..errors import InstallError
from ..utils import run_inherited


def install_dependencies(project_dir: Path, command: List[str]) -> None:
    """Run the package manager's install command inside ``project_dir``.

    Output streams straight to the terminal; the call blocks until the
    package manager exits.
    """
    try:
        run_inherited(command, cwd=project_dir)
    except subprocess.CalledProcessError as e:
        raise InstallError(f"'{' '.join(command)}' failed with exit code {e.returncode}") from e
    except OSError as e:
        raise InstallError(f"Could not run '{' '.join(command)}': {e}") from e
