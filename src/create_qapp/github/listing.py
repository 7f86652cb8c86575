"""Discover the templates available in the remote repository."""

from __future__ import annotations

import logging
from typing import List

import requests

from ..config import ScaffoldConfig
from .api import gh_get, repo_url

logger = logging.getLogger(__name__)


def fetch_templates(config: ScaffoldConfig) -> List[str]:
    """Return the names of the top-level directories of the template repository.

    Order follows the listing returned by GitHub. Any failure (network error,
    invalid JSON, or a payload that is not a list, such as GitHub's
    ``{"message": "Not Found"}``) is logged and yields an empty list.
    """
    url = repo_url(config, "/contents")
    try:
        response = gh_get(url, config)
        contents = response.json()
    except (requests.RequestException, ValueError) as e:
        logger.warning(f"Error fetching templates from {config.repo_slug}: {e}")
        return []

    if not isinstance(contents, list):
        logger.warning(
            f"Error fetching templates from {config.repo_slug}: "
            f"unexpected response format from GitHub (HTTP {response.status_code})"
        )
        return []

    return [
        item["name"]
        for item in contents
        if isinstance(item, dict) and item.get("type") == "dir" and isinstance(item.get("name"), str)
    ]
