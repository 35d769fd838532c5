from __future__ import annotations

import pytest

from workloadctl.models import Settings

CONFIG_KEYS = (
    "K8S_API", "NAMESPACE", "MODE", "BEARER_TOKEN", "RESOURCE_NAME", "RESOURCE_URI",
    "SCALE_COUNT", "CONFIG_JSON", "INSECURE_SKIP_TLS_VERIFY", "CA_CERT",
    "CONNECT_TIMEOUT", "READ_TIMEOUT", "DRY_RUN", "PUSHGATEWAY_URL",
)

DEPLOYMENT_YAML = """\
apiVersion: apps/v1
kind: Deployment
metadata:
  name: web
  annotations:
    deployed-at: 2024-05-01T10:00:00Z
spec:
  replicas: 2
  selector:
    matchLabels: {app: web}
  template:
    metadata:
      labels: {app: web}
    spec:
      containers:
        - name: web
          image: nginx:1.25
"""


class FakeResponse:
    def __init__(self, status_code: int, text: str = "") -> None:
        self.status_code = status_code
        self.text = text


class FakeSession:
    """Stands in for requests.Session; replays canned responses in order."""

    def __init__(self, *responses: FakeResponse | Exception) -> None:
        self.responses = list(responses)
        self.calls: list[dict] = []
        self.closed = False

    def request(self, method, url, data=None, headers=None, params=None, timeout=None):
        self.calls.append(
            {"method": method, "url": url, "data": data, "headers": headers or {},
             "params": params, "timeout": timeout}
        )
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def close(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:  # pyright: ignore[reportUnusedFunction]
    for key in CONFIG_KEYS:
        monkeypatch.delenv(key, raising=False)
    # keep any developer .env out of the way
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings() -> Settings:
    return Settings(api="https://k8s.example:6443", namespace="apps", token="s3cret")


@pytest.fixture
def base_env() -> dict[str, str]:
    return {
        "K8S_API": "https://k8s.example:6443",
        "NAMESPACE": "apps",
        "BEARER_TOKEN": "s3cret",
    }
