"""Project name normalisation."""

from __future__ import annotations

import re

_WHITESPACE = re.compile(r"\s+")
_INVALID = re.compile(r"[^a-z0-9-]")
_EDGE_DASHES = re.compile(r"^-+|-+$")


def sanitize_package_name(name: str) -> str:
    """Turn free-form text into an npm-compatible package name.

    Lowercases, replaces whitespace runs with a dash, drops anything outside
    ``[a-z0-9-]`` and trims dashes from both ends. The result may be empty.

    >>> sanitize_package_name("My Cool App!")
    'my-cool-app'
    """
    name = name.lower()
    name = _WHITESPACE.sub("-", name)
    name = _INVALID.sub("", name)
    return _EDGE_DASHES.sub("", name)
