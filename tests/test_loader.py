from __future__ import annotations

from pathlib import Path

import pytest
import requests

from workloadctl import loader
from workloadctl.errors import ResourceUnreachable


class _FakeGetResponse:
    def __init__(self, status_code: int, content: bytes) -> None:
        self.status_code = status_code
        self.content = content

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


def test_reads_local_file(tmp_path: Path) -> None:
    manifest = tmp_path / "deploy.yaml"
    manifest.write_bytes(b"kind: Deployment\n")
    assert loader.load_resource(str(manifest)) == b"kind: Deployment\n"


def test_missing_local_file_names_location(tmp_path: Path) -> None:
    location = str(tmp_path / "missing.yaml")
    with pytest.raises(ResourceUnreachable) as exc_info:
        loader.load_resource(location)
    assert exc_info.value.location == location
    assert location in str(exc_info.value)


def test_fetches_http_location(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: dict[str, object] = {}

    def fake_get(url, timeout=None):
        seen["url"] = url
        seen["timeout"] = timeout
        return _FakeGetResponse(200, b"kind: StatefulSet\n")

    monkeypatch.setattr(loader.requests, "get", fake_get)
    data = loader.load_resource("https://example.com/app.yaml", timeout=(1.0, 2.0))
    assert data == b"kind: StatefulSet\n"
    assert seen == {"url": "https://example.com/app.yaml", "timeout": (1.0, 2.0)}


def test_network_failure_falls_back_to_local_path(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_get(url, timeout=None):
        raise requests.ConnectionError("refused")

    monkeypatch.setattr(loader.requests, "get", fake_get)
    with pytest.raises(ResourceUnreachable):
        loader.load_resource("http://unreachable.invalid/app.yaml")


def test_http_error_status_falls_back_to_local_path(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(loader.requests, "get", lambda url, timeout=None: _FakeGetResponse(404, b""))
    with pytest.raises(ResourceUnreachable):
        loader.load_resource("http://example.com/missing.yaml")


def test_non_http_scheme_is_treated_as_path(monkeypatch: pytest.MonkeyPatch) -> None:
    def fail_get(url, timeout=None):
        raise AssertionError("no network call expected")

    monkeypatch.setattr(loader.requests, "get", fail_get)
    with pytest.raises(ResourceUnreachable):
        loader.load_resource("ftp://example.com/app.yaml")
