"""Utility modules for create-qapp."""

from .console import console, err_console
from .subprocess_utils import probe, resolve_executable, run_inherited

__all__ = ["console", "err_console", "probe", "resolve_executable", "run_inherited"]
