from __future__ import annotations

import io
import os
import tarfile
from pathlib import Path
from typing import Any, Dict, Iterator, List

import pytest
import requests

import create_qapp.github.api as api_mod
from create_qapp.config import ScaffoldConfig
from create_qapp.errors import FetchError
from create_qapp.github import clone_template, extract_template, tarball_url

ROOT = "Qortal-qapp-templates-0123abc"


def make_tarball(files: Dict[str, bytes], modes: Dict[str, int] | None = None) -> bytes:
    modes = modes or {}
    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w:gz") as tar:
        dirs = {ROOT}
        for path in files:
            parts = path.split("/")[:-1]
            for i in range(1, len(parts) + 1):
                dirs.add(f"{ROOT}/{'/'.join(parts[:i])}")
        for name in sorted(dirs):
            info = tarfile.TarInfo(name)
            info.type = tarfile.DIRTYPE
            info.mode = 0o755
            tar.addfile(info)
        for path, data in files.items():
            info = tarfile.TarInfo(f"{ROOT}/{path}")
            info.size = len(data)
            info.mode = modes.get(path, 0o644)
            tar.addfile(info, io.BytesIO(data))
    return buffer.getvalue()


class FakeStreamResponse:
    def __init__(self, content: bytes, status_code: int = 200) -> None:
        self.content = content
        self.status_code = status_code

    def __enter__(self) -> "FakeStreamResponse":
        return self

    def __exit__(self, *exc: Any) -> None:
        return None

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error: Not Found")

    def iter_content(self, chunk_size: int = 1) -> Iterator[bytes]:
        for start in range(0, len(self.content), chunk_size):
            yield self.content[start : start + chunk_size]


class Recorder:
    def __init__(self, response: Any) -> None:
        self.response = response
        self.urls: List[str] = []

    def get(self, url: str, **kwargs: Any) -> Any:
        self.urls.append(url)
        assert kwargs.get("stream") is True
        if isinstance(self.response, Exception):
            raise self.response
        return self.response


def serve(monkeypatch: pytest.MonkeyPatch, response: Any) -> Recorder:
    rec = Recorder(response)
    monkeypatch.setattr(api_mod.requests, "get", rec.get)
    return rec


TEMPLATES = {
    "README.md": b"# templates\n",
    "react/package.json": b'{"name": "template"}',
    "react/src/index.tsx": b"console.log('hi')\n",
    "vanilla/index.html": b"<html></html>\n",
}


def test_tarball_url() -> None:
    assert tarball_url(ScaffoldConfig()) == "https://api.github.com/repos/Qortal/qapp-templates/tarball"
    assert tarball_url(ScaffoldConfig(ref="main")).endswith("/tarball/main")


def test_clone_extracts_only_selected_template(monkeypatch, tmp_path: Path) -> None:
    rec = serve(monkeypatch, FakeStreamResponse(make_tarball(TEMPLATES)))
    destination = tmp_path / "my-app"

    result = clone_template("react", destination, ScaffoldConfig())

    assert result == destination
    assert rec.urls == ["https://api.github.com/repos/Qortal/qapp-templates/tarball"]
    files = sorted(p.relative_to(destination).as_posix() for p in destination.rglob("*") if p.is_file())
    assert files == ["package.json", "src/index.tsx"]
    assert (destination / "src" / "index.tsx").read_text() == "console.log('hi')\n"


def test_clone_missing_template(monkeypatch, tmp_path: Path) -> None:
    serve(monkeypatch, FakeStreamResponse(make_tarball(TEMPLATES)))
    with pytest.raises(FetchError, match="could not find directory 'svelte'"):
        clone_template("svelte", tmp_path / "my-app", ScaffoldConfig())
    assert not (tmp_path / "my-app").exists()


def test_clone_http_error(monkeypatch, tmp_path: Path) -> None:
    serve(monkeypatch, FakeStreamResponse(b"", status_code=404))
    with pytest.raises(FetchError, match="404"):
        clone_template("react", tmp_path / "my-app", ScaffoldConfig())


def test_clone_network_error_message_is_verbatim(monkeypatch, tmp_path: Path) -> None:
    serve(monkeypatch, requests.ConnectionError("Name or service not known"))
    with pytest.raises(FetchError) as excinfo:
        clone_template("react", tmp_path / "my-app", ScaffoldConfig())
    assert str(excinfo.value) == "Name or service not known"


def test_clone_corrupt_archive(monkeypatch, tmp_path: Path) -> None:
    serve(monkeypatch, FakeStreamResponse(b"this is not a tarball"))
    with pytest.raises(FetchError):
        clone_template("react", tmp_path / "my-app", ScaffoldConfig())


def test_extract_skips_escaping_and_link_entries(tmp_path: Path) -> None:
    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w") as tar:
        good = tarfile.TarInfo(f"{ROOT}/react/ok.txt")
        good.size = 2
        tar.addfile(good, io.BytesIO(b"ok"))
        evil = tarfile.TarInfo(f"{ROOT}/react/../../evil.txt")
        evil.size = 4
        tar.addfile(evil, io.BytesIO(b"evil"))
        link = tarfile.TarInfo(f"{ROOT}/react/passwd")
        link.type = tarfile.SYMTYPE
        link.linkname = "/etc/passwd"
        tar.addfile(link)
    buffer.seek(0)

    destination = tmp_path / "out" / "my-app"
    with tarfile.open(fileobj=buffer, mode="r") as archive:
        written = extract_template(archive, "react", destination)

    assert written == 1
    assert (destination / "ok.txt").read_text() == "ok"
    assert not (destination / "passwd").exists()
    assert not (tmp_path / "evil.txt").exists()
    assert not (tmp_path / "out" / "evil.txt").exists()


@pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
def test_extract_keeps_executable_bit(tmp_path: Path) -> None:
    data = make_tarball({"react/run.sh": b"#!/bin/sh\n"}, modes={"react/run.sh": 0o755})
    destination = tmp_path / "my-app"
    with tarfile.open(fileobj=io.BytesIO(data), mode="r:gz") as archive:
        extract_template(archive, "react", destination)
    assert os.access(destination / "run.sh", os.X_OK)


def test_extract_rejects_parent_template_name(tmp_path: Path) -> None:
    data = make_tarball(TEMPLATES)
    with tarfile.open(fileobj=io.BytesIO(data), mode="r:gz") as archive:
        with pytest.raises(FetchError, match="Invalid template name"):
            extract_template(archive, "..", tmp_path / "my-app")
