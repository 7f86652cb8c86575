"""Local project customisation steps."""

from .editor import editor_available, launch_editor
from .install import install_dependencies
from .manifest import update_manifest_name
from .naming import sanitize_package_name

__all__ = [
    "editor_available",
    "install_dependencies",
    "launch_editor",
    "sanitize_package_name",
    "update_manifest_name",
]
