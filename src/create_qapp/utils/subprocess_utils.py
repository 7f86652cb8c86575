"""Subprocess utilities for running external tools."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import List, Optional


def resolve_executable(command: List[str]) -> List[str]:
    """Resolve the program in ``command`` through PATH.

    ``shutil.which`` also finds ``.cmd`` shims on Windows (``npm.cmd``,
    ``code.cmd``) that ``subprocess`` would not find on its own. Unresolved
    programs are returned untouched so the caller sees the usual
    ``FileNotFoundError``.
    """
    if not command:
        raise ValueError("command must not be empty")
    program = shutil.which(command[0])
    return [program or command[0], *command[1:]]


def run_inherited(command: List[str], cwd: Optional[Path] = None) -> None:
    """Run a command to completion with the parent's stdin/stdout/stderr.

    Raises ``subprocess.CalledProcessError`` on a non-zero exit.
    """
    subprocess.run(
        resolve_executable(command),
        cwd=str(cwd) if cwd else None,
        check=True,
    )


def probe(command: List[str]) -> bool:
    """Return True when ``command`` starts and exits zero. Output is discarded."""
    try:
        subprocess.run(
            resolve_executable(command),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError):
        return False
    return True
