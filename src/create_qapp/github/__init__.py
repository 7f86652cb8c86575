"""GitHub access for create-qapp."""

from .archive import clone_template, extract_template, tarball_url
from .listing import fetch_templates

__all__ = [
    "clone_template",
    "extract_template",
    "fetch_templates",
    "tarball_url",
]
