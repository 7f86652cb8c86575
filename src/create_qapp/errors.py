"""Errors raised while scaffolding a project.

Everything deriving from :class:`CreateQappError` is fatal and is reported
once by the CLI before exiting with status 1. :class:`EditorWarning` is the
exception: it never leaves the editor launcher.
"""


class CreateQappError(Exception):
    """Base class for fatal scaffolding errors."""


class InputError(CreateQappError):
    """Raise when the project name is empty once sanitized"""


class DiscoveryError(CreateQappError):
    """Raise when no templates could be listed"""


class ConflictError(CreateQappError):
    """Raise when the target project directory already exists"""


class FetchError(CreateQappError):
    """Raise when downloading or unpacking a template fails"""


class ManifestError(CreateQappError):
    """Raise when an existing manifest cannot be read or parsed"""


class InstallError(CreateQappError):
    """Raise when the package manager fails"""


class EditorWarning(Exception):
    """Raise when the editor is missing or could not be launched"""
