"""Download a single template directory from the repository tarball.

Only ``<template>/`` is unpacked; the rest of the archive is read and
discarded. Nothing is cached between runs.
"""

from __future__ import annotations

import logging
import os
import shutil
import tarfile
import tempfile
from pathlib import Path, PurePosixPath
from typing import IO, Tuple

import requests

from ..config import ScaffoldConfig
from ..errors import FetchError
from .api import gh_get, repo_url

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


def tarball_url(config: ScaffoldConfig) -> str:
    """Return the API URL of the repository tarball for the configured ref."""
    return repo_url(config, f"/tarball/{config.ref}" if config.ref else "/tarball")


def _template_parts(template_name: str) -> Tuple[str, ...]:
    parts = PurePosixPath(template_name.strip("/")).parts
    if not parts or any(part in ("..", ".") for part in parts):
        raise FetchError(f"Invalid template name: {template_name!r}")
    return parts


def extract_template(archive: tarfile.TarFile, template_name: str, destination: Path) -> int:
    """Unpack ``<root>/<template_name>/`` from ``archive`` into ``destination``.

    GitHub tarballs wrap the tree in a single ``<owner>-<repo>-<sha>/``
    directory, which is dropped. Returns the number of files written; zero
    means the template directory was not in the archive.
    """
    prefix = _template_parts(template_name)
    depth = 1 + len(prefix)
    written = 0

    for member in archive:
        parts = PurePosixPath(member.name).parts
        if len(parts) < depth or parts[1:depth] != prefix:
            continue
        relative = parts[depth:]
        if not relative:
            destination.mkdir(parents=True, exist_ok=True)
            continue
        if member.name.startswith("/") or ".." in relative:
            logger.debug(f"Skipping unsafe archive entry {member.name}")
            continue

        target = destination.joinpath(*relative)
        if member.isdir():
            target.mkdir(parents=True, exist_ok=True)
        elif member.isfile():
            source = archive.extractfile(member)
            if source is None:
                continue
            target.parent.mkdir(parents=True, exist_ok=True)
            with source, open(target, "wb") as f:
                shutil.copyfileobj(source, f, CHUNK_SIZE)
            if member.mode & 0o111:
                os.chmod(target, target.stat().st_mode | (member.mode & 0o111))
            written += 1
        else:
            logger.debug(f"Skipping non-regular archive entry {member.name}")

    return written


def _download(config: ScaffoldConfig, buffer: IO[bytes]) -> None:
    with gh_get(tarball_url(config), config, stream=True) as response:
        response.raise_for_status()
        for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
            if chunk:
                buffer.write(chunk)
    buffer.seek(0)


def clone_template(template_name: str, destination: Path, config: ScaffoldConfig) -> Path:
    """Populate ``destination`` with the files of ``template_name``.

    ``destination`` is expected not to exist. On failure a partially written
    directory may be left behind; it is not cleaned up.
    """
    try:
        with tempfile.TemporaryFile() as buffer:
            _download(config, buffer)
            with tarfile.open(fileobj=buffer, mode="r:*") as archive:
                written = extract_template(archive, template_name, destination)
    except (requests.RequestException, tarfile.TarError, OSError) as e:
        raise FetchError(str(e)) from e

    if not written:
        raise FetchError(f"could not find directory '{template_name}' in {config.repo_slug}")
    return destination
