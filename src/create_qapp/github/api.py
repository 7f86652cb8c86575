"""Thin GitHub REST helpers."""

from __future__ import annotations

from typing import Any, Dict, Optional

import requests

from ..config import ScaffoldConfig


def _headers() -> Dict[str, str]:
    return {
        "Accept": "application/vnd.github+json",
        "User-Agent": "create-qapp",
        "X-GitHub-Api-Version": "2022-11-28",
    }


def repo_url(config: ScaffoldConfig, path: str = "") -> str:
    """Build an API URL below ``/repos/<owner>/<repo>``."""
    return f"{config.api_base}/repos/{config.owner}/{config.repo}{path}"


def gh_get(
    url: str, config: ScaffoldConfig, *, stream: bool = False, params: Optional[Dict[str, Any]] = None
) -> requests.Response:
    return requests.get(
        url,
        headers=_headers(),
        params=params,
        stream=stream,
        timeout=config.http_timeout,
    )
